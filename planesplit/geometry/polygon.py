# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Flat convex polygons and the operations the splitters are built from.

Every polygon has exactly four points. A triangle repeats its last vertex,
and that is also what `split` produces when it cuts a corner off a quad.
Splitting never changes the plane or the anchor, so every piece can be
traced back to the input polygon it came from.

Two ways of testing polygons against each other live here:
  - `intersect` is polygon vs polygon (both bounded), used by the naive splitter
  - `cut` is plane vs polygon (the plane is unbounded), used by the BSP tree
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Union

from planesplit.geometry.line import Line, LineProjection
from planesplit.geometry.plane import Plane
from planesplit.geometry.vector import APPROX_EPSILON, Vector3, approx_eq, is_zero

logger = logging.getLogger(__name__)

Quad = tuple[Vector3, Vector3, Vector3, Vector3]


@dataclass(frozen=True)
class Polygon:
    """
    A convex flat polygon with 4 points lying on `plane`.

    `anchor` is an arbitrary caller-chosen tag (usually the input index).
    It is copied to every piece the polygon gets split into.
    """

    points: Quad
    plane: Plane
    anchor: int = 0

    @classmethod
    def from_points(cls, points: Sequence[Vector3], anchor: int = 0) -> Optional["Polygon"]:
        """
        Build a polygon from 3 or 4 points, deriving the plane from them.

        The normal comes from whichever of the two candidate cross products is
        longer, because one of them collapses to zero when the polygon has a
        repeated vertex.

        Returns None if the points are degenerate (a collapsed diagonal, or all
        points on one line).

        Raises:
            ValueError: If given anything other than 3 or 4 points.
        """
        if len(points) == 3:
            points = (points[0], points[1], points[2], points[2])
        if len(points) != 4:
            raise ValueError(f"A polygon needs 3 or 4 points, got {len(points)}")

        p0, p1, p2, p3 = points
        edge1 = p1 - p0
        edge2 = p2 - p0
        edge3 = p3 - p0
        edge4 = p3 - p1
        if edge2.square_length() < APPROX_EPSILON or edge4.square_length() < APPROX_EPSILON:
            return None

        normal_rough1 = edge1.cross(edge2)
        normal_rough2 = edge2.cross(edge3)
        if normal_rough1.square_length() > normal_rough2.square_length():
            rough = normal_rough1
        else:
            rough = normal_rough2
        if rough.square_length() < APPROX_EPSILON * APPROX_EPSILON:
            return None

        normal = rough.normalize()
        plane = Plane(normal=normal, offset=-p0.dot(normal))
        return cls(points=(p0, p1, p2, p3), plane=plane, anchor=anchor)

    def is_valid(self) -> bool:
        """Check that all points are on the plane and the winding order is consistent."""
        is_planar = all(approx_eq(self.plane.signed_distance_to(p), 0.0) for p in self.points)
        p = self.points
        edges = [p[1] - p[0], p[2] - p[1], p[3] - p[2], p[0] - p[3]]
        anchor = edges[3].cross(edges[0])
        is_winding = all(a.cross(b).dot(anchor) >= 0.0 for a, b in zip(edges, edges[1:]))
        return is_planar and is_winding

    def is_empty(self) -> bool:
        """A polygon with a collapsed diagonal covers no area."""
        p = self.points
        return (
            (p[0] - p[2]).square_length() < APPROX_EPSILON
            or (p[1] - p[3]).square_length() < APPROX_EPSILON
        )

    def is_aligned(self, other: "Polygon") -> bool:
        """Check whether both normals point into the same hemisphere."""
        return self.plane.normal.dot(other.plane.normal) > 0.0

    def contains(self, other: "Polygon") -> bool:
        # TODO: check the outlines as well, this only compares the planes
        return self.plane.contains(other.plane)

    def project_on(self, vector: Vector3) -> LineProjection:
        """Project the polygon onto a ray from the origin along `vector`."""
        p = self.points
        return LineProjection(
            markers=(vector.dot(p[0]), vector.dot(p[1]), vector.dot(p[2]), vector.dot(p[3]))
        )

    def intersect(self, other: "Polygon") -> Optional[Line]:
        """
        Find the line along which two polygons cross, if they do.

        Returns None if one polygon is entirely on one side of the other's
        plane, if the planes are parallel, or if the two shapes don't overlap
        along the shared line.
        """
        if self.plane.are_outside(other.points) or other.plane.are_outside(self.points):
            return None

        cross_dir = self.plane.normal.cross(other.plane.normal)
        if cross_dir.square_length() < APPROX_EPSILON:
            return None

        if not self.project_on(cross_dir).intersect(other.project_on(cross_dir)):
            return None

        return self.plane.intersect(other.plane)

    def _edge_cuts(self, line: Line) -> list[Optional[Vector3]]:
        """
        Intersect every edge [a, b] with `line`, keeping only hits strictly inside the edge.

        Hits within float tolerance of a vertex are dropped, otherwise a line
        running along an edge would shave off zero-area slivers.

        Solving a + t*(b-a) = r + k*d for t after removing the components
        along d from both sides:
            t * ((b-a) - (b-a, d)*d) = (r-a) - (r-a, d)*d
        """
        cuts: list[Optional[Vector3]] = []
        for i in range(4):
            a = self.points[i]
            b = self.points[(i + 1) % 4]
            pr = line.origin - a - line.dir * line.dir.dot(line.origin - a)
            pb = b - a - line.dir * line.dir.dot(b - a)
            denom = pb.dot(pb)
            cut = None
            if not approx_eq(denom, 0.0):
                t = pr.dot(pb) / denom
                if APPROX_EPSILON < t < 1.0 - APPROX_EPSILON:
                    cut = a + (b - a) * t
            cuts.append(cut)
        return cuts

    def split(self, line: Line) -> list["Polygon"]:
        """
        Cut the polygon by a line lying in its plane.

        Returns `[self]` when the line is not in the plane or doesn't cross two
        edges. Otherwise the first returned piece replaces this polygon and the
        rest are new:
          - cut through opposite edges: two quads
          - cut through adjacent edges: the corner triangle, then the remaining
            pentagon as a quad plus a triangle
        """
        if not approx_eq(self.plane.normal.dot(line.dir), 0.0) or not approx_eq(
            self.plane.signed_distance_to(line.origin), 0.0
        ):
            return [self]

        hits = [(i, cut) for i, cut in enumerate(self._edge_cuts(line)) if cut is not None]
        if len(hits) < 2:
            return [self]

        (first, a), (second, b) = hits[0], hits[1]
        p = self.points

        if second - first == 2:
            kept = list(p)
            kept[first + 1] = a
            kept[first + 2] = b
            other = list(p)
            other[first] = a
            other[(first + 3) % 4] = b
            return [self._with_points(kept), self._with_points(other)]

        if second - first == 3:
            return [
                self._with_points([p[first], a, b, b]),
                self._with_points([p[first + 1], p[first + 2], p[first + 3], b]),
                self._with_points([a, p[first + 1], b, b]),
            ]

        return [
            self._with_points([a, p[first + 1], b, b]),
            self._with_points([b, p[(first + 2) % 4], p[(first + 3) % 4], p[first]]),
            self._with_points([p[first], a, b, b]),
        ]

    def _with_points(self, points: Sequence[Vector3]) -> "Polygon":
        return replace(self, points=(points[0], points[1], points[2], points[3]))

    def cut(self, other: "Polygon") -> Union["Sibling", "Cut"]:
        """
        Classify `other` against the plane of this polygon.

        Coplanar polygons become siblings. Everything else ends up in front of
        or behind the plane, split into pieces first if the plane crosses it.
        """
        line = self.plane.intersect(other.plane)
        if line is None:
            ndot = self.plane.normal.dot(other.plane.normal)
            dist = self.plane.offset - ndot * other.plane.offset
            if is_zero(dist):
                logger.debug("Coplanar sibling", extra={"anchor": other.anchor, "dist": dist})
                return Sibling(other)
            logger.debug("Parallel plane", extra={"anchor": other.anchor, "dist": dist})
            return Cut.single(other, dist)

        if self.plane.are_outside(other.points):
            dist = self.plane.signed_distance_sum_to(other)
            logger.debug("Outside plane", extra={"anchor": other.anchor, "dist": dist})
            return Cut.single(other, dist)

        front: list[Polygon] = []
        back: list[Polygon] = []
        for piece in other.split(line):
            if piece.is_empty():
                continue
            if self.plane.signed_distance_sum_to(piece) > 0.0:
                front.append(piece)
            else:
                back.append(piece)
        logger.debug(
            "Cut across plane",
            extra={"anchor": other.anchor, "front": len(front), "back": len(back)},
        )
        return Cut(front=front, back=back)


@dataclass(frozen=True)
class Sibling:
    """The polygon lies on the cutting plane itself."""

    polygon: Polygon


@dataclass(frozen=True)
class Cut:
    """Pieces of a polygon on either side of the cutting plane."""

    front: list[Polygon] = field(default_factory=list)
    back: list[Polygon] = field(default_factory=list)

    @classmethod
    def single(cls, polygon: Polygon, dist: float) -> "Cut":
        if dist > 0.0:
            return cls(front=[polygon], back=[])
        return cls(front=[], back=[polygon])


PlaneCut = Union[Sibling, Cut]
