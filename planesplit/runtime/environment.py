# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The interpreter planesplit runs on.

Two consumers: the bootstrap refuses to start on an interpreter older than
`MINIMUM_PYTHON`, and benchmark reports (plus `planesplit info`) record
which interpreter produced their numbers, since timings from CPython 3.11
and 3.13 are not comparable.
"""

import platform
import sys
from dataclasses import asdict, dataclass
from typing import Optional

MINIMUM_PYTHON: tuple[int, int] = (3, 11)


@dataclass(frozen=True)
class Interpreter:
    python_version: str
    implementation: str
    platform: str
    machine: str

    @classmethod
    def current(cls) -> "Interpreter":
        return cls(
            python_version=platform.python_version(),
            implementation=platform.python_implementation(),
            platform=platform.system(),
            machine=platform.machine(),
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def require_python(version: Optional[tuple[int, ...]] = None) -> None:
    """
    Fail early on an interpreter older than MINIMUM_PYTHON.

    Args:
        version: Version to check; the running interpreter when omitted.

    Raises:
        RuntimeError: If the version is too old.
    """
    major, minor = (version or sys.version_info)[:2]
    if (major, minor) < MINIMUM_PYTHON:
        raise RuntimeError(
            f"planesplit requires Python >= {MINIMUM_PYTHON[0]}.{MINIMUM_PYTHON[1]}, found {major}.{minor}"
        )
