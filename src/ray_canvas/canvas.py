"""Fixed-size pixel buffer."""

from __future__ import annotations

from typing import Iterator, Optional

from .color import BLACK, Color
from .errors import CanvasDimensionError, InvalidPixelError, PixelOutOfBoundsError
from .ppm import canvas_to_ppm


class Canvas:
    """Row-major grid of :class:`Color` values, initialised to black.

    The grid size is fixed at construction. Cells are only changed through
    :meth:`write_pixel` (or :meth:`fill`); coordinates outside the grid raise
    :class:`PixelOutOfBoundsError` instead of wrapping or clamping.
    """

    def __init__(self, width: int, height: int) -> None:
        for name, value in (("width", width), ("height", height)):
            if not _is_int(value) or value <= 0:
                raise CanvasDimensionError(f"Canvas {name} must be a positive integer, got {value!r}")
        self._width = width
        self._height = height
        self._pixels: list[Color] = [BLACK] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def write_pixel(self, x: int, y: int, color: Color) -> Color:
        """Store ``color`` at column ``x``, row ``y`` and return the replaced color."""

        index = self._index(x, y)
        _require_color(color)
        previous = self._pixels[index]
        self._pixels[index] = color
        return previous

    def pixel_at(self, x: int, y: int) -> Color:
        return self._pixels[self._index(x, y)]

    def fill(self, color: Color) -> None:
        _require_color(color)
        self._pixels = [color] * (self._width * self._height)

    def rows(self) -> Iterator[tuple[Color, ...]]:
        """Yield each row top to bottom."""

        for y in range(self._height):
            row_offset = y * self._width
            yield tuple(self._pixels[row_offset : row_offset + self._width])

    def to_text(self, line_width: Optional[int] = None) -> str:
        """Serialize to plain PPM (``P3``) text."""

        return canvas_to_ppm(self, line_width=line_width)

    def _index(self, x: int, y: int) -> int:
        if not (_is_int(x) and _is_int(y)):
            raise InvalidPixelError(f"Pixel coordinates must be integers, got ({x!r}, {y!r})")
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise PixelOutOfBoundsError(x, y, self._width, self._height)
        return y * self._width + x

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_color(color: object) -> None:
    if not isinstance(color, Color):
        raise InvalidPixelError(f"Canvas cells hold Color values, got {type(color).__name__}")
