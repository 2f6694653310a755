# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for planesplit.

This is the single root command; every operation is a subcommand of
`planesplit`. No separate executables, no interactive prompts.

The global options (--config, --log-level, --dry-run) are inherited by
every subcommand through argparse's parent parser mechanism.

Usage:
    planesplit <subcommand> [options]
    planesplit split --scene scene.yaml --output sorted.json
    planesplit grid --count 3 --output grid.json
    planesplit bench --splitter bsp --count 5 --iterations 20
    planesplit info
"""

import argparse
import sys

from planesplit.cli.commands import handle_bench, handle_grid, handle_info, handle_split
from planesplit.cli.exit_codes import USER_ERROR
from planesplit.splitter.registry import list_splitter_types


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    These options get inherited by every subcommand. We use a separate parent
    parser (with add_help=False) so that help text doesn't collide between the
    parent and the subcommand parsers.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (overrides the config file).",
    )
    parent.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        dest="dry_run",
        help="Validate inputs and report what would happen without doing it.",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    """
    Register all subcommands with their handler functions.

    Each subcommand gets the global options from the parent parser and sets
    its handler function via set_defaults(func=...).
    """
    splitter_names = list_splitter_types()

    split_parser = subparsers.add_parser(
        "split", parents=[parent], help="Split a scene and write the pieces in drawing order."
    )
    split_parser.add_argument("--scene", type=str, required=True, help="Scene file (YAML or JSON).")
    split_parser.add_argument("--output", type=str, default=None, help="Where to write the sorted pieces.")
    split_parser.add_argument(
        "--splitter",
        type=str,
        default=None,
        choices=splitter_names,
        help="Splitter implementation (overrides the config file).",
    )
    split_parser.add_argument(
        "--view",
        type=float,
        nargs=3,
        default=None,
        metavar=("X", "Y", "Z"),
        help="View direction (overrides the scene and the config file).",
    )
    split_parser.add_argument(
        "--dump",
        type=str,
        default=None,
        help="Write a debug dump of input, view and output to this file.",
    )
    split_parser.set_defaults(func=handle_split)

    grid_parser = subparsers.add_parser(
        "grid", parents=[parent], help="Write the synthetic grid scene."
    )
    grid_parser.add_argument("--count", type=int, default=None, help="Squares per axis family.")
    grid_parser.add_argument("--output", type=str, required=True, help="Where to write the scene.")
    grid_parser.set_defaults(func=handle_grid)

    bench_parser = subparsers.add_parser(
        "bench", parents=[parent], help="Time splitters on the grid scene."
    )
    bench_parser.add_argument("--count", type=int, default=None, help="Grid size.")
    bench_parser.add_argument("--iterations", type=int, default=None, help="Solves per splitter.")
    bench_parser.add_argument(
        "--splitter",
        type=str,
        nargs="+",
        default=None,
        choices=splitter_names,
        help="Splitters to time (overrides the config file).",
    )
    bench_parser.add_argument("--output", type=str, default=None, help="Where to write the JSON report.")
    bench_parser.set_defaults(func=handle_bench)

    info_parser = subparsers.add_parser(
        "info", parents=[parent], help="Display version, environment and splitters."
    )
    info_parser.set_defaults(func=handle_info)


def main() -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

    If no subcommand is given, we show help and exit with USER_ERROR.
    """
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="planesplit",
        description="planesplit: split intersecting 3D polygons into drawing order.",
        parents=[parent],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)

    args = root_parser.parse_args()

    if not hasattr(args, "func") or args.func is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
