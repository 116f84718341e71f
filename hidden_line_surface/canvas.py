#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from contextlib import contextmanager


class Canvas:
    """
    ARGB pixel buffer plus a per-column horizon for hidden-line removal.

    `pixels` is a flat row-major list of 32-bit ARGB words. `horizon[x]`
    holds the smallest screen row accepted so far in column x during the
    current occlusion pass; anything at or below it is hidden. A value of
    `h` means nothing has been drawn in that column yet.
    """
    __slots__ = ['w', 'h', 'pixels', 'horizon']

    def __init__(self, w, h, background):
        if w <= 0 or h <= 0:
            raise ValueError(f"Canvas size must be positive, got {w}x{h}")
        self.w, self.h = w, h
        self.pixels = [background] * (w * h)
        self.horizon = [h] * w

    @property
    def width(self):
        return self.w

    @property
    def height(self):
        return self.h

    def reset_horizon(self):
        """Forget all occlusion state: every column becomes fully open."""
        self.horizon[:] = [self.h] * self.w

    @contextmanager
    def occlusion_pass(self):
        """Scope one independent occlusion pass, starting from a fresh horizon."""
        self.reset_horizon()
        yield self

    def draw(self, x, y, color):
        if x < 0 or x >= self.w: return
        if y >= self.horizon[x]: return

        # Recorded even when y is above the canvas, so the column stays
        # closed to everything behind this point.
        self.horizon[x] = y
        if y < 0 or y >= self.h: return
        self.pixels[y * self.w + x] = color

    def get_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            raise IndexError(f"Pixel ({x}, {y}) outside {self.w}x{self.h} canvas")
        return self.pixels[y * self.w + x]

    def count_pixels(self, color) -> int:
        """Number of pixels exactly equal to `color`."""
        return self.pixels.count(color)

    def count_foreground(self, background) -> int:
        """Number of pixels that differ from `background`."""
        return len(self.pixels) - self.pixels.count(background)
