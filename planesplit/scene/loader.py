# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Scene loader: reads polygons from YAML/JSON and writes results back as JSON.

The loading pipeline mirrors the config loader:
  1. Read the text from disk
  2. Parse it as YAML into plain Python data
  3. Validate the structure with pydantic
  4. Build Polygon objects, rejecting degenerate geometry

Any failure stops immediately with a SceneError subclass. Output is always
written in the same shape the loader accepts, so a split result can be fed
back in as a new scene.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from pydantic import ValidationError

from planesplit.geometry.plane import Plane
from planesplit.geometry.polygon import Polygon
from planesplit.geometry.vector import Vector3
from planesplit.scene.exceptions import SceneLoadError, SceneValidationError
from planesplit.scene.schema import PolygonSpec, SceneSpec
from planesplit.utils.paths import ensure_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scene:
    """A validated set of input polygons and an optional view direction."""

    polygons: list[Polygon]
    view: Optional[Vector3] = None


def _read_scene_file(scene_path: Path) -> Any:
    if not scene_path.exists():
        raise SceneLoadError(f"Scene file not found: {scene_path}")

    if not scene_path.is_file():
        raise SceneLoadError(f"Scene path is not a file: {scene_path}")

    try:
        raw_text = scene_path.read_text(encoding="utf-8")
    except OSError as err:
        raise SceneLoadError(f"Cannot read scene file {scene_path}: {err}") from err

    try:
        return yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise SceneLoadError(f"Invalid YAML/JSON in {scene_path}: {err}") from err


def _build_polygon(spec: PolygonSpec, index: int) -> Polygon:
    """Turn one validated polygon spec into a Polygon, or explain why not."""
    anchor = spec.anchor if spec.anchor is not None else index
    points = [Vector3.from_iterable(p) for p in spec.points]

    if spec.normal is not None and spec.offset is not None:
        plane = Plane.from_unnormalized(Vector3.from_iterable(spec.normal), spec.offset)
        if plane is None:
            raise SceneValidationError(f"Polygon {index}: normal has zero length")
        if len(points) == 3:
            points.append(points[2])
        polygon = Polygon(points=(points[0], points[1], points[2], points[3]), plane=plane, anchor=anchor)
        if not polygon.is_valid():
            raise SceneValidationError(f"Polygon {index}: points do not lie on the given plane")
        return polygon

    if spec.normal is not None or spec.offset is not None:
        raise SceneValidationError(
            f"Polygon {index}: 'normal' and 'offset' must be given together"
        )

    derived = Polygon.from_points(points, anchor=anchor)
    if derived is None:
        raise SceneValidationError(f"Polygon {index}: points are degenerate")
    if not derived.is_valid():
        raise SceneValidationError(f"Polygon {index}: points are not flat and convex")
    return derived


def parse_scene(raw_data: Any, source: str = "<memory>") -> Scene:
    """
    Validate already-parsed scene data and build the polygons.

    Besides the regular `{"polygons": [...], "view": [...]}` mapping, two
    shorthands are accepted:
      - a bare list, read as `{"polygons": [...]}`
      - a splitter debug dump (`input`, `view`, `output`), whose recorded
        input and view are replayed; the recorded output is ignored

    Raises:
        SceneValidationError: Schema violations or unusable geometry.
    """
    if isinstance(raw_data, list):
        raw_data = {"polygons": raw_data}
    if not isinstance(raw_data, dict):
        raise SceneValidationError(
            f"Scene {source} must be a mapping or a list, got {type(raw_data).__name__}"
        )
    if "input" in raw_data:
        logger.debug("Reading debug dump as a scene", extra={"source": source})
        raw_data = {"polygons": raw_data["input"], "view": raw_data.get("view")}

    try:
        spec = SceneSpec.model_validate(raw_data)
    except ValidationError as err:
        raise SceneValidationError(f"Scene validation failed for {source}:\n{err}") from err

    polygons = [_build_polygon(p, i) for i, p in enumerate(spec.polygons)]

    view = None
    if spec.view is not None:
        view = Vector3.from_iterable(spec.view)
        if view.is_negligible():
            raise SceneValidationError(f"Scene {source}: view vector has zero length")

    return Scene(polygons=polygons, view=view)


def load_scene(scene_path: Path) -> Scene:
    """
    Load and validate a scene file.

    Raises:
        SceneLoadError: File I/O or parse failures.
        SceneValidationError: Schema violations or unusable geometry.
    """
    raw_data = _read_scene_file(scene_path)
    scene = parse_scene(raw_data, source=str(scene_path))
    logger.debug("Loaded scene", extra={"path": str(scene_path), "polygons": len(scene.polygons)})
    return scene


def polygon_to_dict(polygon: Polygon) -> dict[str, Any]:
    """Serialize a polygon in the same shape the loader reads."""
    return {
        "points": [p.to_list() for p in polygon.points],
        "normal": polygon.plane.normal.to_list(),
        "offset": polygon.plane.offset,
        "anchor": polygon.anchor,
    }


def scene_to_dict(polygons: Iterable[Polygon], view: Optional[Vector3] = None) -> dict[str, Any]:
    data: dict[str, Any] = {"polygons": [polygon_to_dict(p) for p in polygons]}
    if view is not None:
        data["view"] = view.to_list()
    return data


def save_polygons(
    output_path: Path,
    polygons: Iterable[Polygon],
    view: Optional[Vector3] = None,
) -> Path:
    """
    Write polygons as a JSON scene file.

    Returns:
        The path written to.
    """
    ensure_directory(output_path.parent)
    data = scene_to_dict(polygons, view)
    output_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    logger.debug("Saved scene", extra={"path": str(output_path), "polygons": len(data["polygons"])})
    return output_path
