# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Synthetic grid scene used by tests and the benchmark.

Three families of `count` axis-aligned squares each, one family per axis,
at unit spacing. Each square spans [0, count] on the other two axes, so the
families cut through each other like the walls of a box of cubes.

Inserted in the order y, x, z, the first family is never split, each square
of the second is split once per interior y plane, and each square of the
third by every interior x and y plane. That gives a known total of
count + count^2 + count^3 pieces.
"""

from planesplit.geometry.plane import Plane
from planesplit.geometry.polygon import Polygon
from planesplit.geometry.vector import Vector3


def make_grid(count: int) -> list[Polygon]:
    """
    Build the grid scene.

    Args:
        count: Number of squares per axis family. Must be >= 1.

    Raises:
        ValueError: If count is below 1.
    """
    if count < 1:
        raise ValueError(f"Grid count must be >= 1, got {count}")

    size = float(count)
    polys: list[Polygon] = []

    for i in range(count):
        pos = float(i)
        polys.append(
            Polygon(
                points=(
                    Vector3(0.0, pos, 0.0),
                    Vector3(size, pos, 0.0),
                    Vector3(size, pos, size),
                    Vector3(0.0, pos, size),
                ),
                plane=Plane(normal=Vector3(0.0, 1.0, 0.0), offset=-pos),
                anchor=len(polys),
            )
        )
    for i in range(count):
        pos = float(i)
        polys.append(
            Polygon(
                points=(
                    Vector3(pos, 0.0, 0.0),
                    Vector3(pos, size, 0.0),
                    Vector3(pos, size, size),
                    Vector3(pos, 0.0, size),
                ),
                plane=Plane(normal=Vector3(1.0, 0.0, 0.0), offset=-pos),
                anchor=len(polys),
            )
        )
    for i in range(count):
        pos = float(i)
        polys.append(
            Polygon(
                points=(
                    Vector3(0.0, 0.0, pos),
                    Vector3(size, 0.0, pos),
                    Vector3(size, size, pos),
                    Vector3(0.0, size, pos),
                ),
                plane=Plane(normal=Vector3(0.0, 0.0, 1.0), offset=-pos),
                anchor=len(polys),
            )
        )
    return polys
