# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Scene files: polygon sets on disk."""

from planesplit.scene.exceptions import SceneError, SceneLoadError, SceneValidationError
from planesplit.scene.loader import (
    Scene,
    load_scene,
    parse_scene,
    polygon_to_dict,
    save_polygons,
    scene_to_dict,
)

__all__ = [
    "Scene",
    "SceneError",
    "SceneLoadError",
    "SceneValidationError",
    "load_scene",
    "parse_scene",
    "polygon_to_dict",
    "save_polygons",
    "scene_to_dict",
]
