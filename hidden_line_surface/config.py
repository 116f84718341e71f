#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass, replace

from .color import COL_BLACK, COL_WHITE


@dataclass(frozen=True)
class RenderConfig:
    """Immutable constants for one surface plot."""
    width: int = 1920
    height: int = 1080
    x_scale: float = 20.0
    y_scale: float = 20.0
    z_scale: float = 350.0
    x_min: float = -15.0
    x_max: float = 15.0
    y_min: float = -15.0
    y_max: float = 15.0
    small_step: float = 0.001   # spacing of samples along one curve
    big_step: float = 0.25      # spacing between neighbouring curves
    angle: float = math.pi / 6.0
    background: int = COL_BLACK
    foreground: int = COL_WHITE

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.small_step <= 0 or self.big_step <= 0:
            raise ValueError(
                f"Sweep steps must be positive, got small={self.small_step} "
                f"big={self.big_step}")
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError(
                f"Empty domain: x [{self.x_min}, {self.x_max}], "
                f"y [{self.y_min}, {self.y_max}]")

    def with_colors(self, foreground=None, background=None) -> 'RenderConfig':
        """Return a copy with the two tones overridden (None keeps current)."""
        return replace(
            self,
            foreground=self.foreground if foreground is None else foreground,
            background=self.background if background is None else background,
        )
