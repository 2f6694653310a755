# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Lines in 3D and scalar projections of polygons onto a direction."""

from dataclasses import dataclass

from planesplit.geometry.vector import APPROX_EPSILON, Vector3, approx_eq


@dataclass(frozen=True)
class Line:
    """
    An infinite line: every point `origin + k * dir` for real k.

    `dir` is expected to be unit length. Line/edge intersection in
    Polygon.split relies on it.
    """

    origin: Vector3
    dir: Vector3

    def is_valid(self) -> bool:
        """Check that the direction is normalized."""
        return approx_eq(self.dir.dot(self.dir), 1.0)

    def matches(self, other: "Line") -> bool:
        """Check if two lines describe the same set of points."""
        diff = self.origin - other.origin
        zero = Vector3.origin()
        return self.dir.cross(other.dir).approx_eq(zero) and self.dir.cross(diff).approx_eq(zero)


@dataclass(frozen=True)
class LineProjection:
    """The projected value of each polygon point on some vector."""

    markers: tuple[float, float, float, float]

    def get_bounds(self) -> tuple[float, float]:
        return min(self.markers), max(self.markers)

    def intersect(self, other: "LineProjection") -> bool:
        """
        Check whether two projected spans overlap.

        They overlap if the combined footprint is strictly smaller than the
        sum of the two span lengths, by more than the float tolerance. Spans
        that merely touch at an end point don't count.
        """
        left, right = self.get_bounds()
        other_left, other_right = other.get_bounds()
        footprint = max(right, other_right) - min(left, other_left)
        return footprint < (right - left) + (other_right - other_left) - APPROX_EPSILON
