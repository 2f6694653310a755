# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Infinite planes in 3D.

A plane is the set of points v where dot(v, normal) + offset = 0, with a
unit normal. The sign of `signed_distance_to` tells which side of the plane
a point is on: positive is "front" (the side the normal points to).
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from planesplit.geometry.line import Line
from planesplit.geometry.vector import APPROX_EPSILON, Vector3, approx_eq

if TYPE_CHECKING:
    from planesplit.geometry.polygon import Polygon


@dataclass(frozen=True)
class Plane:
    """A plane with a unit normal and a constant offset from the origin."""

    normal: Vector3
    offset: float

    @classmethod
    def from_unnormalized(cls, normal: Vector3, offset: float) -> Optional["Plane"]:
        """
        Build a plane from a normal of any length, scaling the offset to match.

        Returns None if the normal is too short to define a direction.
        """
        square_length = normal.square_length()
        if square_length < APPROX_EPSILON:
            return None
        length = square_length ** 0.5
        return cls(normal=normal / length, offset=offset / length)

    def signed_distance_to(self, point: Vector3) -> float:
        """Negative when the point is behind the plane, relative to the normal."""
        return point.dot(self.normal) + self.offset

    def signed_distance_sum_to(self, polygon: "Polygon") -> float:
        """Sum of signed distances of all polygon points. Its sign picks the side."""
        return sum(self.signed_distance_to(p) for p in polygon.points)

    def are_outside(self, points: Sequence[Vector3]) -> bool:
        """
        Check if a convex shape given by its points is entirely on one side.

        Merely touching the plane is not considered a crossing, but a point
        lying exactly on the plane means the shape isn't strictly outside either.
        """
        d0 = self.signed_distance_to(points[0])
        return all(self.signed_distance_to(p) * d0 > 0.0 for p in points[1:])

    def contains(self, other: "Plane") -> bool:
        """Check if both planes describe the same set of points with the same facing."""
        return self.normal.approx_eq(other.normal) and approx_eq(self.offset, other.offset)

    def intersect(self, other: "Plane") -> Optional[Line]:
        """
        Compute the line shared by two planes.

        Returns None for parallel (or anti-parallel) planes. The origin is the
        point on the line closest to the world origin: any point satisfying both
        plane equations can be written as a*n1 + b*n2, and solving
            a + b*w = -d1
            a*w + b = -d2        with w = dot(n1, n2)
        gives the coefficients below.
        """
        w = self.normal.dot(other.normal)
        divisor = 1.0 - w * w
        if divisor < APPROX_EPSILON:
            return None
        origin = (
            self.normal * ((other.offset * w - self.offset) / divisor)
            - other.normal * ((other.offset - self.offset * w) / divisor)
        )
        direction = self.normal.cross(other.normal).normalize()
        return Line(origin=origin, dir=direction)
