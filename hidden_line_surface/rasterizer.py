#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .canvas import Canvas
from .camera import IsometricProjector
from .config import RenderConfig
from .math_utils import descending_samples

logger = logging.getLogger(__name__)


def sweep_constant_x(canvas: Canvas, projector: IsometricProjector,
                     field, config: RenderConfig, color) -> int:
    """
    Trace the family of curves x = const, from x_max down to x_min.

    Each curve is sampled from y_max down to y_min. The descending order on
    both loops is what makes screen row a valid depth proxy for the horizon
    test; reversing it turns the picture inside out.
    Returns the number of samples submitted.
    """
    project = projector.project
    draw = canvas.draw
    y_max, y_min, step = config.y_max, config.y_min, config.small_step
    samples = 0

    for x in descending_samples(config.x_max, config.x_min, config.big_step):
        for y in descending_samples(y_max, y_min, step):
            px, py = project(x, y, field(x, y))
            draw(px, py, color)
            samples += 1
    return samples


def sweep_constant_y(canvas: Canvas, projector: IsometricProjector,
                     field, config: RenderConfig, color) -> int:
    """Trace the family of curves y = const; mirror of sweep_constant_x."""
    project = projector.project
    draw = canvas.draw
    x_max, x_min, step = config.x_max, config.x_min, config.small_step
    samples = 0

    for y in descending_samples(config.y_max, config.y_min, config.big_step):
        for x in descending_samples(x_max, x_min, step):
            px, py = project(x, y, field(x, y))
            draw(px, py, color)
            samples += 1
    return samples


def rasterize_surface(canvas: Canvas, projector: IsometricProjector,
                      field, config: RenderConfig, color=None) -> int:
    """
    Draw both curve families into `canvas` as a hidden-line mesh.

    Each family runs in its own occlusion pass; the pixel buffer is shared
    and never cleared, so the result is the union of both.
    """
    if color is None:
        color = config.foreground

    with canvas.occlusion_pass():
        n_x = sweep_constant_x(canvas, projector, field, config, color)
    logger.debug(f"x = const sweep: {n_x} samples")

    with canvas.occlusion_pass():
        n_y = sweep_constant_y(canvas, projector, field, config, color)
    logger.debug(f"y = const sweep: {n_y} samples")

    return n_x + n_y
