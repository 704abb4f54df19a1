"""Exceptions raised by the canvas core."""

from __future__ import annotations


class RayCanvasError(Exception):
    """Base class for ray_canvas precondition failures."""


class CanvasDimensionError(RayCanvasError, ValueError):
    """Raised when a canvas is created with a non-positive size."""


class PixelOutOfBoundsError(RayCanvasError, IndexError):
    """Raised when a pixel coordinate falls outside the canvas."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) is outside a {width}x{height} canvas")
        self.x = x
        self.y = y


class InvalidPixelError(RayCanvasError, TypeError):
    """Raised for non-integer coordinates or a value that is not a Color."""
