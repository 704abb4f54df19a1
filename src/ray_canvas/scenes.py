"""Demo scenes painted pixel by pixel onto a canvas."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .canvas import Canvas
from .color import Color
from .tuples import RayTuple

logger = logging.getLogger(__name__)

PROJECTILE_COLOR = Color(1.0, 0.8, 0.6)
GRAVITY = RayTuple.vector(0.0, -0.1, 0.0)
WIND = RayTuple.vector(-0.01, 0.0, 0.0)


@dataclass(slots=True)
class SceneResult:
    """Rendered canvas plus bookkeeping about what was drawn."""

    canvas: Canvas
    plotted: int = 0
    skipped: int = 0


def color_map(width: int, height: int) -> SceneResult:
    """Red rises left to right, green top to bottom, blue follows ``x ^ y``."""

    canvas = Canvas(width, height)
    x_span = max(width - 1, 1)
    y_span = max(height - 1, 1)
    for y in range(height):
        for x in range(width):
            canvas.write_pixel(x, y, Color(x / x_span, y / y_span, ((x ^ y) % width) / x_span))

    logger.info("scene.rendered", extra={"scene": "colormap", "plotted": width * height})
    return SceneResult(canvas=canvas, plotted=width * height)


def projectile(
    width: int,
    height: int,
    velocity_scale: float = 11.25,
    color: Color = PROJECTILE_COLOR,
) -> SceneResult:
    """Plot a projectile launched from (0, 1) under gravity and a head wind.

    World y grows upwards, so rows are flipped. Positions that land outside
    the canvas are counted as skipped rather than written.
    """

    if velocity_scale <= 0:
        raise ValueError("Velocity scale must be positive")

    result = SceneResult(canvas=Canvas(width, height))
    position = RayTuple.point(0.0, 1.0, 0.0)
    velocity = RayTuple.vector(1.0, 1.8, 0.0).normalize() * velocity_scale

    while position.y > 0:
        x = int(round(position.x))
        y = height - int(round(position.y))
        if 0 <= x < width and 0 <= y < height:
            result.canvas.write_pixel(x, y, color)
            result.plotted += 1
        else:
            result.skipped += 1
        position = position + velocity
        velocity = velocity + GRAVITY + WIND

    logger.info(
        "scene.rendered",
        extra={"scene": "projectile", "plotted": result.plotted, "skipped": result.skipped},
    )
    return result
