# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Geometry primitives for plane splitting.

Subsystems:
  - vector: points, directions and float tolerance helpers
  - line: lines and 1D projections
  - plane: infinite planes, distances, plane/plane intersection
  - polygon: flat convex quads, splitting and plane classification
  - grid: the synthetic test and benchmark scene
"""

from planesplit.geometry.grid import make_grid
from planesplit.geometry.line import Line, LineProjection
from planesplit.geometry.plane import Plane
from planesplit.geometry.polygon import Cut, PlaneCut, Polygon, Sibling
from planesplit.geometry.vector import APPROX_EPSILON, Vector3, approx_eq, is_zero

__all__ = [
    "APPROX_EPSILON",
    "Cut",
    "Line",
    "LineProjection",
    "Plane",
    "PlaneCut",
    "Polygon",
    "Sibling",
    "Vector3",
    "approx_eq",
    "is_zero",
    "make_grid",
]
