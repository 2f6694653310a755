# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Custom exceptions for scene files.

Kept apart from the loader so the CLI can catch scene failures without
pulling in pydantic or YAML.
"""


class SceneError(Exception):
    """Base for all scene errors."""


class SceneLoadError(SceneError):
    """Raised when a scene file cannot be read from disk or parsed."""


class SceneValidationError(SceneError):
    """
    Raised when a scene parses fine but isn't usable: schema violations,
    degenerate polygons, or a zero view vector.
    """
