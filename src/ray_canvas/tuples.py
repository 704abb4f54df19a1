"""Homogeneous 4-component points and vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .color import EPSILON

POINT_W = 1.0
VECTOR_W = 0.0


@dataclass(frozen=True, slots=True, eq=False)
class RayTuple:
    """A point (``w == 1``) or vector (``w == 0``) in 3D space."""

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def point(cls, x: float, y: float, z: float) -> "RayTuple":
        return cls(x, y, z, POINT_W)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> "RayTuple":
        return cls(x, y, z, VECTOR_W)

    @classmethod
    def zero_vector(cls) -> "RayTuple":
        return cls.vector(0.0, 0.0, 0.0)

    def is_point(self) -> bool:
        return self.w == POINT_W

    def is_vector(self) -> bool:
        return self.w == VECTOR_W

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> "RayTuple":
        mag = self.magnitude()
        if mag == 0:
            raise ZeroDivisionError("Cannot normalize a zero-length tuple")
        return self / mag

    def dot(self, other: "RayTuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "RayTuple") -> "RayTuple":
        """Cross product; only meaningful for vectors."""

        return RayTuple.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def hadamard(self, other: "RayTuple") -> "RayTuple":
        """Component-wise product of x, y and z; the result is a vector."""

        return RayTuple.vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def __add__(self, other: "RayTuple") -> "RayTuple":
        if not isinstance(other, RayTuple):
            return NotImplemented
        return RayTuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "RayTuple") -> "RayTuple":
        if not isinstance(other, RayTuple):
            return NotImplemented
        return RayTuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "RayTuple":
        return RayTuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other: "RayTuple | float") -> "RayTuple":
        if isinstance(other, RayTuple):
            return self.hadamard(other)
        if not isinstance(other, (int, float)):
            return NotImplemented
        return RayTuple(self.x * other, self.y * other, self.z * other, self.w * other)

    def __rmul__(self, factor: float) -> "RayTuple":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self * factor

    def __truediv__(self, divisor: float) -> "RayTuple":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return RayTuple(self.x / divisor, self.y / divisor, self.z / divisor, self.w / divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RayTuple):
            return NotImplemented
        return (
            abs(self.x - other.x) < EPSILON
            and abs(self.y - other.y) < EPSILON
            and abs(self.z - other.z) < EPSILON
            and abs(self.w - other.w) < EPSILON
        )

    __hash__ = None  # type: ignore[assignment]
