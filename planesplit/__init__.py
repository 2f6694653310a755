# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
planesplit: split intersecting 3D polygons into a drawable back-to-front order.

Subsystems:
  - geometry: vectors, lines, planes, polygons
  - splitter: naive and BSP splitters, debug layer, registry
  - scene: reading and writing polygon sets
  - bench: timing splitters on the grid scene
  - config, logging, runtime, cli: the command line tool around it
"""

__version__ = "0.1.0"
