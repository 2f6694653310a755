# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Abstract base class for plane splitters.

A splitter takes a set of possibly intersecting polygons and produces a set
of non-intersecting pieces in drawing order. Implementations are swappable
as long as they obey this contract:

- add() may split the incoming polygon but never loses area
- sort() returns every piece added since the last reset()
- sort() orders pieces by ascending distance along the view vector
- the same input always yields the same output

All splitter implementations MUST subclass Splitter so the registry and
the debug layer can wrap any of them without special cases.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from planesplit.geometry.polygon import Polygon
from planesplit.geometry.vector import Vector3


class Splitter(ABC):
    """
    Base class for all splitters.

    Contract:
        solve(polygons, view) -> pieces sorted along view
    """

    @abstractmethod
    def reset(self) -> None:
        """Drop every polygon added so far."""
        ...

    @abstractmethod
    def add(self, polygon: Polygon) -> None:
        """
        Add a polygon, splitting it against what's already there.

        Args:
            polygon: The polygon to insert.
        """
        ...

    @abstractmethod
    def sort(self, view: Vector3) -> list[Polygon]:
        """
        Order the current pieces by ascending distance along `view`.

        Args:
            view: The view direction. Does not need to be normalized.

        Returns:
            A new list with every piece, in drawing order.
        """
        ...

    def solve(self, polygons: Iterable[Polygon], view: Vector3) -> list[Polygon]:
        """Process a whole set of polygons at once: reset, add all, sort."""
        self.reset()
        for polygon in polygons:
            self.add(polygon)
        return self.sort(view)
