"""RGB color values used by the canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

EPSILON = 1e-5
MAX_COLOR_VALUE = 255


def _channel_to_byte(value: float) -> int:
    scaled = max(0.0, min(value * MAX_COLOR_VALUE, float(MAX_COLOR_VALUE)))
    # round half away from zero; scaled is never negative here
    return int(math.floor(scaled + 0.5))


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    """Three floating-point channels with no range restriction.

    Values outside ``[0, 1]`` are valid intermediate results and are only
    clamped by :meth:`to_byte_triplet`. Equality tolerates differences below
    ``EPSILON`` on every channel, so colors are not hashable.
    """

    red: float
    green: float
    blue: float

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> "Color":
        red, green, blue = values
        return cls(float(red), float(green), float(blue))

    def add(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def sub(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def scale(self, factor: float) -> "Color":
        return Color(self.red * factor, self.green * factor, self.blue * factor)

    def multiply(self, other: "Color") -> "Color":
        """Hadamard product, used to filter one color through another."""

        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def equals(self, other: "Color") -> bool:
        return (
            abs(self.red - other.red) < EPSILON
            and abs(self.green - other.green) < EPSILON
            and abs(self.blue - other.blue) < EPSILON
        )

    def to_byte_triplet(self) -> tuple[int, int, int]:
        """Scale each channel to ``0..255`` for export."""

        return (
            _channel_to_byte(self.red),
            _channel_to_byte(self.green),
            _channel_to_byte(self.blue),
        )

    def to_ppm(self) -> str:
        return " ".join(str(value) for value in self.to_byte_triplet())

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: "Color | float") -> "Color":
        if isinstance(other, Color):
            return self.multiply(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
