"""Pixel canvas and plain-text PPM export."""

__all__ = [
    "BLACK",
    "Canvas",
    "CanvasDimensionError",
    "InvalidPixelError",
    "Color",
    "PixelOutOfBoundsError",
    "RayCanvasError",
    "RayTuple",
    "WHITE",
    "canvas_to_ppm",
    "write_ppm",
]

from .canvas import Canvas
from .color import BLACK, WHITE, Color
from .errors import CanvasDimensionError, InvalidPixelError, PixelOutOfBoundsError, RayCanvasError
from .ppm import canvas_to_ppm, write_ppm
from .tuples import RayTuple
