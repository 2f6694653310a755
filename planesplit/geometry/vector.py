# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
3D vector math for the plane splitter.

A single immutable type serves as both point and direction. Keeping them
the same type means a point minus a point is a vector and a point plus a
vector is a point without any conversion noise in the geometry code.

All comparisons go through `approx_eq` with an absolute epsilon, because
every interesting configuration (touching edges, coplanar quads, cuts
through a vertex) lands exactly on a boundary where exact float equality
is meaningless.
"""

import math
from dataclasses import dataclass
from typing import Iterable

APPROX_EPSILON: float = 1e-6


def approx_eq(a: float, b: float, eps: float = APPROX_EPSILON) -> bool:
    """Absolute-tolerance float comparison."""
    return abs(a - b) < eps


def is_zero(value: float) -> bool:
    """
    Wide zero check used when deciding whether two planes coincide.

    Squaring the value widens the tolerance to sqrt(epsilon), so surfaces that
    should be on the same plane but drifted apart through repeated splitting
    are still treated as siblings instead of getting an arbitrary order.
    """
    return approx_eq(value * value, 0.0)


@dataclass(frozen=True)
class Vector3:
    """A point or direction in 3D space."""

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        """
        Build a vector from any iterable of exactly three numbers.

        Raises:
            ValueError: If the iterable doesn't hold exactly three values.
        """
        items = [float(v) for v in values]
        if len(items) != 3:
            raise ValueError(f"A 3D vector needs exactly 3 components, got {len(items)}")
        return cls(items[0], items[1], items[2])

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> "Vector3":
        return Vector3(self.x / factor, self.y / factor, self.z / factor)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def square_length(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.square_length())

    def is_negligible(self) -> bool:
        """Too short to serve as a direction (a view vector or a normal)."""
        return self.square_length() < APPROX_EPSILON

    def normalize(self) -> "Vector3":
        """
        Return the unit vector pointing the same way.

        Raises:
            ValueError: If this is the zero vector.
        """
        length = self.length()
        if length < APPROX_EPSILON:
            raise ValueError("Cannot normalize a zero-length vector")
        return self / length

    def approx_eq(self, other: "Vector3", eps: float = APPROX_EPSILON) -> bool:
        return (
            approx_eq(self.x, other.x, eps)
            and approx_eq(self.y, other.y, eps)
            and approx_eq(self.z, other.z, eps)
        )

    def to_list(self) -> list[float]:
        return [self.x, self.y, self.z]
