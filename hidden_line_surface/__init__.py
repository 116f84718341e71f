#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import sinc, sinc_field
from .config import RenderConfig
from .color import COL_BLACK, COL_WHITE, parse_hex_color
from .canvas import Canvas
from .camera import IsometricProjector
from .rasterizer import rasterize_surface
from .encoders import encode_tga, encode_bmp, save_tga, save_bmp
from .renderer import SurfaceRenderer
