# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Plane splitters.

Subsystems:
  - base: the Splitter contract
  - naive: brute-force reference implementation
  - bsp: BSP tree implementation
  - debug: recording wrapper for any splitter
  - registry: name -> class lookup used by config and CLI
"""

from planesplit.splitter.base import Splitter
from planesplit.splitter.bsp import BspNode, BspSplitter
from planesplit.splitter.debug import DebugLayer, Dump
from planesplit.splitter.naive import NaiveSplitter
from planesplit.splitter.registry import (
    create_splitter,
    get_splitter,
    list_splitter_types,
    register_splitter,
    unregister_splitter,
)

__all__ = [
    "BspNode",
    "BspSplitter",
    "DebugLayer",
    "Dump",
    "NaiveSplitter",
    "Splitter",
    "create_splitter",
    "get_splitter",
    "list_splitter_types",
    "register_splitter",
    "unregister_splitter",
]
