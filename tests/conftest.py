# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for planesplit tests.

Fixtures here are available to every test file automatically.
We keep them minimal: config files and small scenes that several test
modules need.
"""

import logging
import textwrap
from pathlib import Path

import pytest

from planesplit.geometry.polygon import Polygon
from planesplit.geometry.vector import Vector3
from planesplit.logging.logger import PACKAGE_LOGGER_NAME, json_handlers


def make_square(
    corner: tuple[float, float, float],
    u: tuple[float, float, float],
    v: tuple[float, float, float],
    anchor: int = 0,
) -> Polygon:
    """Build the parallelogram corner, corner+u, corner+u+v, corner+v."""
    c = Vector3(*corner)
    du = Vector3(*u)
    dv = Vector3(*v)
    polygon = Polygon.from_points([c, c + du, c + du + dv, c + dv], anchor=anchor)
    assert polygon is not None
    return polygon


def area(polygon: Polygon) -> float:
    """Area of a convex quad (or padded triangle) via its diagonals."""
    p = polygon.points
    return 0.5 * (p[2] - p[0]).cross(p[3] - p[1]).length()


def _reset_package_loggers() -> None:
    for name in [PACKAGE_LOGGER_NAME, *logging.Logger.manager.loggerDict]:
        if not name.startswith(PACKAGE_LOGGER_NAME):
            continue
        logger = logging.getLogger(name)
        for handler in json_handlers(logger):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture(autouse=True)
def _isolated_logging() -> None:
    """
    Drop every JSON handler on planesplit loggers around each test.

    Handlers bind sys.stdout when they are created, and capsys swaps it per
    test, so a handler left over from an earlier test writes to a stale stream.
    """
    _reset_package_loggers()
    yield  # type: ignore[misc]
    _reset_package_loggers()


@pytest.fixture()
def square():  # type: ignore[no-untyped-def]
    """Factory fixture for make_square."""
    return make_square


@pytest.fixture()
def polygon_area():  # type: ignore[no-untyped-def]
    """Factory fixture for area."""
    return area


@pytest.fixture()
def floor_square() -> Polygon:
    """The square [0, 2] x [0, 2] in the z=0 plane, normal +z."""
    return make_square((0.0, 0.0, 0.0), (2.0, 0.0, 0.0), (0.0, 2.0, 0.0))


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """
    Create a minimal valid config YAML file in a temp directory.

    This is the smallest config that passes schema validation.
    Tests that need specific config values should write their own files.
    """
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          project_name: "planesplit-test"
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """A config file that's valid YAML but fails schema validation (missing required field)."""
    config_content = textwrap.dedent("""\
        global:
          project_name: "planesplit-test"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file


@pytest.fixture()
def crossing_scene_file(tmp_path: Path) -> Path:
    """Two squares crossing each other at a right angle."""
    content = textwrap.dedent("""\
        view: [0.0, 0.0, 1.0]
        polygons:
          - points: [[0, 0, 0], [2, 0, 0], [2, 2, 0], [0, 2, 0]]
          - points: [[1, 0, -1], [1, 2, -1], [1, 2, 1], [1, 0, 1]]
    """)
    scene_file = tmp_path / "crossing.yaml"
    scene_file.write_text(content, encoding="utf-8")
    return scene_file
