# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Binary Space Partitioning splitter.

Every node holds a set of coplanar polygons. The first one defines the
node's plane; anything inserted below it is classified by that plane and
pushed into the front or back subtree, getting split on the way when the
plane crosses it. Walking the tree with a view direction then yields a
strict back-to-front order with no further comparisons.
"""

import logging
from typing import Optional

from planesplit.geometry.plane import Plane
from planesplit.geometry.polygon import Cut, Polygon
from planesplit.geometry.vector import Vector3
from planesplit.splitter.base import Splitter

logger = logging.getLogger(__name__)


class BspNode:
    """A node in the BSP tree, which is a tree itself."""

    def __init__(self) -> None:
        self.values: list[Polygon] = []
        self.front: Optional[BspNode] = None
        self.back: Optional[BspNode] = None

    def insert(self, value: Polygon) -> None:
        """
        Insert a polygon into the sub-tree starting at this node.

        This may spawn additional branches of the tree.
        """
        if not self.values:
            self.values.append(value)
            return

        result = self.values[0].cut(value)
        if isinstance(result, Cut):
            self.front = _add_side(self.front, result.front)
            self.back = _add_side(self.back, result.back)
        else:
            self.values.append(result.polygon)

    def order(self, base: Polygon, out: list[Polygon]) -> None:
        """
        Append this sub-tree's polygons to `out` in drawing order.

        The planes come out sorted back to front with respect to the front
        direction of the `base` polygon.
        """
        if not self.values:
            return

        if base.is_aligned(self.values[0]):
            former, latter = self.front, self.back
        else:
            former, latter = self.back, self.front

        if former is not None:
            former.order(base, out)
        out.extend(self.values)
        if latter is not None:
            latter.order(base, out)

    def depth(self) -> int:
        """Number of levels in this sub-tree, counting this node."""
        children = [node.depth() for node in (self.front, self.back) if node is not None]
        return 1 + max(children, default=0)


def _add_side(side: Optional[BspNode], polygons: list[Polygon]) -> Optional[BspNode]:
    """Insert polygons into a front/back branch, creating it on first use."""
    if not polygons:
        return side
    if side is None:
        side = BspNode()
    for polygon in polygons:
        side.insert(polygon)
    return side


class BspSplitter(Splitter):
    """Splitter that keeps its pieces in a BSP tree."""

    def __init__(self) -> None:
        self.tree = BspNode()

    def reset(self) -> None:
        self.tree = BspNode()

    def add(self, polygon: Polygon) -> None:
        self.tree.insert(polygon)

    def sort(self, view: Vector3) -> list[Polygon]:
        # order() walks back to front relative to the base normal, so face it
        # against the view to get ascending distance along the view.
        origin = Vector3.origin()
        base = Polygon(
            points=(origin, origin, origin, origin),
            plane=Plane(normal=-view, offset=0.0),
        )
        result: list[Polygon] = []
        self.tree.order(base, result)
        logger.debug("Sorted BSP tree", extra={"pieces": len(result), "depth": self.tree.depth()})
        return result
