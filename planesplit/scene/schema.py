# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Schema for scene files.

A scene file is YAML (or JSON, which YAML reads just as well):

    view: [0.0, 0.0, 1.0]
    polygons:
      - points: [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]]
        anchor: 7
      - points: [[0, 0, 1], [1, 0, 1], [0, 1, 1]]
        normal: [0, 0, 1]
        offset: -1

These models only check structure. Geometry checks (degenerate points, a
normal without an offset) happen in the loader, where the polygons are built.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

Triple = tuple[float, float, float]


class PolygonSpec(BaseModel):
    """One polygon as written in a scene file."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    points: list[Triple] = Field(
        min_length=3,
        max_length=4,
        description="Corner points in winding order; a triangle has 3",
    )
    anchor: Optional[int] = Field(
        default=None,
        description="Tag copied to every piece; defaults to the polygon's index in the file",
    )
    normal: Optional[Triple] = Field(
        default=None,
        description="Explicit plane normal; derived from the points when omitted",
    )
    offset: Optional[float] = Field(
        default=None,
        description="Explicit plane offset; required together with normal",
    )


class SceneSpec(BaseModel):
    """Top-level scene container."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    polygons: list[PolygonSpec] = Field(default_factory=list)
    view: Optional[Triple] = Field(
        default=None,
        description="View direction to sort along; the CLI or config supplies one when omitted",
    )
