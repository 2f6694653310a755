# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the planesplit CLI.

Each function here corresponds to one CLI subcommand and returns an exit
code from exit_codes. Failures are logged with context and mapped to a
code; nothing is printed directly.

Value precedence for every setting is: command line flag, then the scene
file (for the view), then the config file, then the built-in default.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from planesplit.cli.exit_codes import (
    CONFIG_ERROR,
    RUNTIME_ERROR,
    SUCCESS,
    USER_ERROR,
    VALIDATION_ERROR,
)
from planesplit.config.exceptions import ConfigError
from planesplit.config.loader import default_config, load_config
from planesplit.config.schema import PlaneSplitConfig
from planesplit.geometry.vector import Vector3
from planesplit.logging.logger import configure_package_logging
from planesplit.runtime.bootstrap import bootstrap
from planesplit.scene.exceptions import SceneLoadError, SceneValidationError


def _load_and_bootstrap(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[Optional[PlaneSplitConfig], logging.Logger]:
    """
    The shared setup that every command needs: load config, run bootstrap.

    Logging goes to stdout at the CLI level until the config is known, so
    a broken config file is still reported. Bootstrap then applies the
    configured level and log file to the whole package.

    Returns a tuple of (config, logger). The config is None when it could
    not be loaded; the caller should return CONFIG_ERROR.
    """
    configure_package_logging(log_level=args.log_level or "INFO")
    logger = logging.getLogger(f"planesplit.cli.{command_name}")

    if args.config is None:
        config = default_config()
        logger.debug("No config provided, running with defaults", extra={"command": command_name})
    else:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "error": str(err)},
            )
            return None, logger

    bootstrap(config.global_config, log_level=args.log_level)
    return config, logger


def _resolve_view(
    cli_view: Optional[list[float]],
    scene_view: Optional[Vector3],
    config: PlaneSplitConfig,
) -> Vector3:
    if cli_view is not None:
        return Vector3.from_iterable(cli_view)
    if scene_view is not None:
        return scene_view
    return Vector3.from_iterable(config.splitter.view)


def handle_split(args: argparse.Namespace) -> int:
    """Split a scene file and write the sorted pieces."""
    config, logger = _load_and_bootstrap(args, "split")
    if config is None:
        return CONFIG_ERROR

    from planesplit.scene.loader import load_scene, save_polygons
    from planesplit.splitter.debug import DebugLayer
    from planesplit.splitter.registry import create_splitter

    try:
        scene = load_scene(Path(args.scene))
    except SceneLoadError as err:
        logger.error("Cannot load scene", extra={"scene": args.scene, "error": str(err)})
        return USER_ERROR
    except SceneValidationError as err:
        logger.error("Invalid scene", extra={"scene": args.scene, "error": str(err)})
        return VALIDATION_ERROR

    view = _resolve_view(args.view, scene.view, config)
    if view.is_negligible():
        logger.error("View vector must not be zero", extra={"view": view.to_list()})
        return USER_ERROR

    splitter_name = args.splitter or config.splitter.kind

    if args.dry_run:
        logger.info(
            "Dry run, scene is valid",
            extra={"polygons": len(scene.polygons), "splitter": splitter_name, "view": view.to_list()},
        )
        return SUCCESS

    try:
        debug = args.dump is not None or config.splitter.debug
        splitter = create_splitter(splitter_name, debug=debug)
        result = splitter.solve(scene.polygons, view)

        logger.info(
            "Split finished",
            extra={
                "splitter": splitter_name,
                "input_polygons": len(scene.polygons),
                "output_polygons": len(result),
            },
        )

        if args.output is not None:
            save_polygons(Path(args.output), result, view)
            logger.info("Wrote sorted pieces", extra={"output": args.output})

        if isinstance(splitter, DebugLayer):
            dump = splitter.dump()
            if args.dump is not None:
                dump.write(Path(args.dump))
                logger.info("Wrote debug dump", extra={"dump": args.dump})
            else:
                logger.debug("Debug dump", extra=dump.to_dict())

        return SUCCESS

    except Exception as err:
        logger.error("Split failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_grid(args: argparse.Namespace) -> int:
    """Write the synthetic grid scene to a file."""
    config, logger = _load_and_bootstrap(args, "grid")
    if config is None:
        return CONFIG_ERROR

    from planesplit.geometry.grid import make_grid
    from planesplit.scene.loader import save_polygons

    count = args.count if args.count is not None else config.bench.grid_size
    if count < 1:
        logger.error("Grid count must be >= 1", extra={"count": count})
        return USER_ERROR

    if args.dry_run:
        logger.info("Dry run, would write grid", extra={"count": count, "polygons": 3 * count})
        return SUCCESS

    try:
        polys = make_grid(count)
        save_polygons(Path(args.output), polys)
        logger.info("Wrote grid scene", extra={"count": count, "polygons": len(polys), "output": args.output})
        return SUCCESS
    except Exception as err:
        logger.error("Grid failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_bench(args: argparse.Namespace) -> int:
    """Time the configured splitters on the grid scene."""
    config, logger = _load_and_bootstrap(args, "bench")
    if config is None:
        return CONFIG_ERROR

    from planesplit.bench.runner import run_benchmarks, write_results

    grid_size = args.count if args.count is not None else config.bench.grid_size
    iterations = args.iterations if args.iterations is not None else config.bench.iterations
    splitters = args.splitter or list(config.bench.splitters)

    if grid_size < 1 or iterations < 1:
        logger.error(
            "Grid size and iterations must be >= 1",
            extra={"grid_size": grid_size, "iterations": iterations},
        )
        return USER_ERROR

    if args.dry_run:
        logger.info(
            "Dry run, would benchmark",
            extra={"splitters": splitters, "grid_size": grid_size, "iterations": iterations},
        )
        return SUCCESS

    try:
        results = run_benchmarks(splitters, grid_size, iterations)
        expected = grid_size + grid_size**2 + grid_size**3
        mismatched = [r.splitter for r in results if r.output_polygons != expected]
        if mismatched:
            logger.error(
                "Unexpected piece count on grid",
                extra={"splitters": mismatched, "expected": expected},
            )
            return VALIDATION_ERROR

        if args.output is not None:
            write_results(results, Path(args.output))
        return SUCCESS

    except Exception as err:
        logger.error("Benchmark failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_info(args: argparse.Namespace) -> int:
    """Display version, environment and available splitters."""
    configure_package_logging(log_level=args.log_level or "INFO")
    logger = logging.getLogger("planesplit.cli.info")

    from planesplit import __version__
    from planesplit.runtime.environment import Interpreter
    from planesplit.splitter.registry import list_splitter_types

    logger.info(
        "System information",
        extra={
            "planesplit_version": __version__,
            **Interpreter.current().to_dict(),
            "splitters": list_splitter_types(),
            "config": args.config,
        },
    )
    return SUCCESS
