#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import time

from .config import RenderConfig
from .canvas import Canvas
from .camera import IsometricProjector
from .math_utils import sinc_field
from .rasterizer import rasterize_surface
from .encoders import save_tga, save_bmp

logger = logging.getLogger(__name__)


class SurfaceRenderer:
    """
    Drives one hidden-line plot of the sinc surface.

    render() builds a fresh canvas from the config, runs both sweeps and
    returns the canvas. save() writes it to TGA and BMP.

    Pipeline:
      1. Canvas filled with the background tone
      2. x = const curves, in their own occlusion pass
      3. y = const curves, in a second, fresh occlusion pass
      4. Encoders serialize the shared pixel buffer
    """

    def __init__(self, config: RenderConfig = None):
        self.config = config if config is not None else RenderConfig()
        self.projector = IsometricProjector(self.config)

    def render(self) -> Canvas:
        config = self.config
        canv = Canvas(config.width, config.height, config.background)

        start = time.perf_counter()
        samples = rasterize_surface(canv, self.projector, sinc_field, config,
                                    config.foreground)
        elapsed = time.perf_counter() - start

        logger.info(
            f"Rendered {config.width}x{config.height} surface: {samples} samples, "
            f"{canv.count_foreground(config.background)} lit pixels, "
            f"{elapsed:.1f}s")
        return canv

    def save(self, canvas: Canvas, tga_path="output.tga", bmp_path="output.bmp"):
        """Write both image files; OSError propagates to the caller."""
        return save_tga(canvas, tga_path), save_bmp(canvas, bmp_path)
