#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .config import RenderConfig


class IsometricProjector:
    """
    Fixed isometric camera for the surface plot.

    Maps a surface point (x, y, z) to integer pixel coordinates. The x and
    y axes are rotated by `angle` around the vertical, z is pushed straight
    up the screen by `z_scale`, and the result is centred on the canvas.

    Coordinates are truncated toward zero, not rounded, and the terms are
    summed left to right so results are bit-identical to the reference
    renders. Points may land outside the canvas; Canvas.draw clips them.
    """
    __slots__ = ('half_w', 'half_h', 'x_scale', 'y_scale', 'z_scale',
                 'cos_a', 'sin_a')

    def __init__(self, config: RenderConfig):
        self.half_w = config.width // 2
        self.half_h = config.height // 2
        self.x_scale = config.x_scale
        self.y_scale = config.y_scale
        self.z_scale = config.z_scale
        self.cos_a = math.cos(config.angle)
        self.sin_a = math.sin(config.angle)

    def project(self, x: float, y: float, z: float):
        """Return (px, py) for the surface point (x, y, z)."""
        px = int(self.half_w -
                 self.x_scale * x * self.cos_a +
                 self.y_scale * y * self.cos_a)
        py = int(self.half_h +
                 self.x_scale * x * self.sin_a +
                 self.y_scale * y * self.sin_a -
                 self.z_scale * z)
        return px, py

    def project_point(self, point):
        """Project an (x, y, z) sequence."""
        x, y, z = point
        return self.project(x, y, z)
