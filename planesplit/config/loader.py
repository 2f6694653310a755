# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader: reads YAML from disk and produces a validated, frozen PlaneSplitConfig.

The loading pipeline is linear:
  1. Read raw text from the file
  2. Parse as YAML into a plain dict
  3. Hand the dict to pydantic for schema validation
  4. Check the values that depend on the rest of the system
  5. Return the frozen, immutable config object

If anything goes wrong at any step, we fail immediately with a clear error.
There is no fallback to defaults for a broken file; defaults only apply when
no config file is given at all.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from planesplit.config.exceptions import ConfigLoadError, ConfigValidationError
from planesplit.config.schema import GlobalConfig, PlaneSplitConfig
from planesplit.geometry.vector import Vector3
from planesplit.logging.logger import resolve_log_level
from planesplit.splitter.registry import list_splitter_types

DEFAULT_CONFIG_VERSION = "1.0.0"


def _read_yaml_file(config_path: Path) -> dict[str, Any]:
    """
    Read a YAML file and return the parsed dict.

    Raises:
        ConfigLoadError: If the file doesn't exist, isn't readable, or isn't a YAML mapping.
    """
    if not config_path.exists():
        raise ConfigLoadError(f"Config file not found: {config_path}")

    if not config_path.is_file():
        raise ConfigLoadError(f"Config path is not a file: {config_path}")

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}") from err

    try:
        parsed = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}") from err

    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping (dict), got {type(parsed).__name__}"
        )

    return parsed


def _check_semantics(config: PlaneSplitConfig, source: str) -> None:
    """Reject values that pass the schema but can't work at runtime."""
    known = set(list_splitter_types())

    if config.splitter.kind not in known:
        raise ConfigValidationError(
            f"Config {source}: unknown splitter '{config.splitter.kind}'. Available: {sorted(known)}"
        )

    unknown_bench = [name for name in config.bench.splitters if name not in known]
    if unknown_bench:
        raise ConfigValidationError(
            f"Config {source}: unknown bench splitters {unknown_bench}. Available: {sorted(known)}"
        )

    if Vector3.from_iterable(config.splitter.view).is_negligible():
        raise ConfigValidationError(
            f"Config {source}: splitter.view {list(config.splitter.view)} is too short to be a view direction"
        )

    try:
        resolve_log_level(config.global_config.log_level)
    except ValueError as err:
        raise ConfigValidationError(f"Config {source}: {err}") from err


def load_config(config_path: Path) -> PlaneSplitConfig:
    """
    Load, validate, and freeze a config file into a PlaneSplitConfig object.

    Raises:
        ConfigLoadError: File I/O or YAML parse failures.
        ConfigValidationError: Schema violations or values unusable at runtime.
    """
    raw_data = _read_yaml_file(config_path)

    try:
        config = PlaneSplitConfig.model_validate(raw_data)
    except ValidationError as err:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}:\n{err}"
        ) from err

    _check_semantics(config, str(config_path))
    return config


def default_config() -> PlaneSplitConfig:
    """The config used when no file is given: every section at its defaults."""
    return PlaneSplitConfig.model_validate(
        {"global": GlobalConfig(config_version=DEFAULT_CONFIG_VERSION).model_dump()}
    )
