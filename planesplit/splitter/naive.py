# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Naive splitter: test every new polygon against every stored piece.

Each incoming polygon is cut by every stored piece it actually crosses.
Stored pieces are never touched again, since a piece already lies wholly
on one side of everything added before it. The pieces of the newcomer
only need to be sorted against each other's planes, which the newcomer's
splits take care of.

This is O(n^2) in the number of pieces and the sort is an approximation
(mean depth of each piece), so it serves as the reference baseline for
tests and benchmarks rather than as the production choice.
"""

import logging

from planesplit.geometry.polygon import Polygon
from planesplit.geometry.vector import Vector3
from planesplit.splitter.base import Splitter

logger = logging.getLogger(__name__)


def _mean_depth(polygon: Polygon, view: Vector3) -> float:
    return sum(view.dot(p) for p in polygon.points) / 4.0


class NaiveSplitter(Splitter):
    """Brute-force splitter backed by a flat list."""

    def __init__(self) -> None:
        self.result: list[Polygon] = []

    def reset(self) -> None:
        self.result = []

    def add(self, polygon: Polygon) -> None:
        current = [polygon]
        for existing in self.result:
            pieces: list[Polygon] = []
            for candidate in current:
                line = candidate.intersect(existing)
                if line is None:
                    pieces.append(candidate)
                else:
                    pieces.extend(candidate.split(line))
            current = pieces

        logger.debug(
            "Added polygon",
            extra={"anchor": polygon.anchor, "pieces": len(current), "total": len(self.result) + len(current)},
        )
        self.result.extend(current)

    def sort(self, view: Vector3) -> list[Polygon]:
        # stable, so pieces at equal depth keep insertion order
        return sorted(self.result, key=lambda poly: _mean_depth(poly, view))
