# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for planesplit.

Every config section gets its own frozen pydantic model. Frozen means once
you create it, you cannot mutate it; CLI overrides produce new values
instead of patching the config.

The models use pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked

Checks that need the rest of the system (is this splitter name registered,
is the view vector non-zero) happen in the loader.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GlobalConfig(BaseModel):
    """
    Cross-cutting settings: project identity and observability.
    This is the only required section.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    project_name: str = Field(
        default="planesplit", description="Human-readable project identifier"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )


class SplitterConfig(BaseModel):
    """Which splitter to run and how to sort its output."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    kind: str = Field(
        default="bsp",
        description="Registered splitter name: 'bsp' or 'naive'",
    )
    view: tuple[float, float, float] = Field(
        default=(0.0, 0.0, 1.0),
        description="View direction used when the scene doesn't carry one",
    )
    debug: bool = Field(
        default=False,
        description="Wrap the splitter in a DebugLayer so its work can be dumped",
    )


class BenchConfig(BaseModel):
    """Parameters for timing splitters on the grid scene."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    grid_size: int = Field(
        default=5,
        ge=1,
        le=64,
        description="Squares per axis family; the grid has 3 * grid_size input polygons",
    )
    iterations: int = Field(
        default=10,
        ge=1,
        description="How many times each splitter solves the grid",
    )
    splitters: list[str] = Field(
        default_factory=lambda: ["naive", "bsp"],
        min_length=1,
        description="Registered splitter names to benchmark, in order",
    )


class PlaneSplitConfig(BaseModel):
    """
    Top-level config container.

    A config file needs only `global:`. Missing sections get their defaults,
    so commands never have to check for None.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    splitter: SplitterConfig = Field(default_factory=SplitterConfig)
    bench: BenchConfig = Field(default_factory=BenchConfig)
