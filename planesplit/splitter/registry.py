# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Splitter type registry.

The splitter is selected by config string alone ("naive", "bsp"). This
registry maps that string to the concrete class. It is populated once at
import time via `_register_builtins()` and stays the same afterwards
unless a caller registers an extra implementation on purpose.
"""

import logging

from planesplit.splitter.base import Splitter
from planesplit.splitter.bsp import BspSplitter
from planesplit.splitter.debug import DebugLayer
from planesplit.splitter.naive import NaiveSplitter

logger = logging.getLogger(__name__)

_SPLITTER_REGISTRY: dict[str, type[Splitter]] = {}


def register_splitter(name: str, cls: type[Splitter]) -> None:
    """
    Register a splitter class under a unique name.

    Args:
        name: Config-level identifier (e.g. ``"bsp"``).
        cls: The ``Splitter`` subclass to register.

    Raises:
        ValueError: If ``name`` is already registered.
    """
    if name in _SPLITTER_REGISTRY:
        raise ValueError(
            f"Splitter type '{name}' is already registered to {_SPLITTER_REGISTRY[name].__name__}"
        )
    _SPLITTER_REGISTRY[name] = cls
    logger.debug("Registered splitter", extra={"splitter": name, "cls": cls.__name__})


def unregister_splitter(name: str) -> None:
    """Remove a registered name. Unknown names are ignored."""
    _SPLITTER_REGISTRY.pop(name, None)


def get_splitter(name: str) -> type[Splitter]:
    """
    Retrieve a registered splitter class by name.

    Raises:
        KeyError: If ``name`` is not registered.
    """
    if name not in _SPLITTER_REGISTRY:
        available = sorted(_SPLITTER_REGISTRY.keys())
        raise KeyError(f"Unknown splitter type '{name}'. Available: {available}")
    return _SPLITTER_REGISTRY[name]


def list_splitter_types() -> list[str]:
    """Return sorted list of all registered splitter names."""
    return sorted(_SPLITTER_REGISTRY.keys())


def create_splitter(name: str, debug: bool = False) -> Splitter:
    """
    Instantiate a registered splitter, optionally wrapped in a DebugLayer.

    Raises:
        KeyError: If ``name`` is not registered.
    """
    splitter = get_splitter(name)()
    if debug:
        return DebugLayer(splitter)
    return splitter


def _register_builtins() -> None:
    register_splitter("naive", NaiveSplitter)
    register_splitter("bsp", BspSplitter)


_register_builtins()
