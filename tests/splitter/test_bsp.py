# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for the BSP tree itself."""

from planesplit.geometry.polygon import Polygon
from planesplit.geometry.vector import Vector3
from planesplit.splitter.bsp import BspNode, BspSplitter


class TestBspNode:
    def test_first_insert_fills_the_node(self, floor_square: Polygon) -> None:
        node = BspNode()
        node.insert(floor_square)
        assert node.values == [floor_square]
        assert node.front is None and node.back is None
        assert node.depth() == 1

    def test_coplanar_polygons_share_a_node(self, square, floor_square: Polygon) -> None:  # type: ignore[no-untyped-def]
        node = BspNode()
        node.insert(floor_square)
        other = square((4.0, 4.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), anchor=1)
        node.insert(other)
        assert node.values == [floor_square, other]
        assert node.depth() == 1

    def test_crossing_polygon_goes_both_ways(self, square, floor_square: Polygon) -> None:  # type: ignore[no-untyped-def]
        node = BspNode()
        node.insert(floor_square)
        node.insert(square((1.0, 0.0, -1.0), (0.0, 2.0, 0.0), (0.0, 0.0, 2.0), anchor=1))
        assert node.front is not None and node.back is not None
        assert len(node.front.values) == 1
        assert len(node.back.values) == 1
        assert node.depth() == 2

    def test_empty_node_orders_nothing(self, floor_square: Polygon) -> None:
        out: list[Polygon] = []
        BspNode().order(floor_square, out)
        assert out == []

    def test_stacked_planes_deepen_the_tree(self, square) -> None:  # type: ignore[no-untyped-def]
        node = BspNode()
        for i in range(4):
            node.insert(square((0.0, 0.0, float(i)), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), anchor=i))
        assert node.depth() == 4


class TestBspSplitter:
    def test_reset_drops_the_tree(self, floor_square: Polygon) -> None:
        splitter = BspSplitter()
        splitter.add(floor_square)
        splitter.reset()
        assert splitter.tree.values == []
        assert splitter.sort(Vector3(0.0, 0.0, 1.0)) == []

    def test_sideways_view_keeps_coplanar_order(self, square) -> None:  # type: ignore[no-untyped-def]
        a = square((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), anchor=0)
        b = square((3.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), anchor=1)
        result = BspSplitter().solve([a, b], Vector3(1.0, 0.0, 0.0))
        assert [p.anchor for p in result] == [0, 1]
