# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Debug layer that records everything passing through a splitter.

Wrap any splitter in DebugLayer and it behaves exactly the same, but keeps a
Dump of the inputs, the view and the sorted output. The dump serializes to
the scene file format, so a misbehaving case can be saved with
`planesplit split --dump` and replayed later as a regular scene.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from planesplit.geometry.polygon import Polygon
from planesplit.geometry.vector import Vector3
from planesplit.scene.loader import polygon_to_dict
from planesplit.splitter.base import Splitter
from planesplit.utils.paths import ensure_directory


@dataclass
class Dump:
    """Serialized work of a plane splitter."""

    input: list[Polygon] = field(default_factory=list)
    view: Vector3 = field(default_factory=Vector3.origin)
    output: list[Polygon] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "input": [polygon_to_dict(p) for p in self.input],
            "view": self.view.to_list(),
            "output": [polygon_to_dict(p) for p in self.output],
        }

    def write(self, path: Path) -> Path:
        ensure_directory(path.parent)
        path.write_text(json.dumps(self.to_dict(), indent=2) + "\n", encoding="utf-8")
        return path


class DebugLayer(Splitter):
    """A splitter that forwards to `inner` and records the traffic."""

    def __init__(self, inner: Splitter) -> None:
        self.inner = inner
        self._dump = Dump()

    def dump(self) -> Dump:
        """Get the current work dump."""
        return self._dump

    def reset(self) -> None:
        self._dump.input.clear()
        self.inner.reset()

    def add(self, polygon: Polygon) -> None:
        self._dump.input.append(polygon)
        self.inner.add(polygon)

    def sort(self, view: Vector3) -> list[Polygon]:
        self._dump.view = view
        result = self.inner.sort(view)
        self._dump.output = list(result)
        return result
