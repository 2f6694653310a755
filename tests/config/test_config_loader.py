# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the config loader, the entry point for all config loading in planesplit.

We test:
  1. Valid YAML loads into a frozen, correct config object
  2. Missing required fields raise ConfigValidationError
  3. Unknown fields raise ConfigValidationError (extra="forbid")
  4. Values the rest of the system can't use raise ConfigValidationError
  5. Broken YAML raises ConfigLoadError
  6. Loaded config is truly immutable
"""

import textwrap
from pathlib import Path

import pytest

from planesplit.config.exceptions import ConfigError, ConfigLoadError, ConfigValidationError
from planesplit.config.loader import DEFAULT_CONFIG_VERSION, default_config, load_config


def _write(tmp_path: Path, name: str, content: str) -> Path:
    config_file = tmp_path / name
    config_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_file


class TestLoadValidConfig:
    def test_loads_minimal_valid_config(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        assert config.global_config.project_name == "planesplit-test"
        assert config.global_config.config_version == "1.0.0"
        assert config.global_config.log_level == "DEBUG"

    def test_missing_sections_get_defaults(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        assert config.splitter.kind == "bsp"
        assert config.splitter.view == (0.0, 0.0, 1.0)
        assert config.splitter.debug is False
        assert config.bench.grid_size == 5
        assert config.bench.iterations == 10
        assert config.bench.splitters == ["naive", "bsp"]

    def test_loads_full_config_with_all_sections(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path,
            "full.yaml",
            """\
            global:
              config_version: "1.0.0"
              project_name: "full-test"
              log_level: "warning"
            splitter:
              kind: naive
              view: [1, 0, 0]
              debug: true
            bench:
              grid_size: 3
              iterations: 2
              splitters: [bsp]
            """,
        )
        config = load_config(config_file)
        assert config.splitter.kind == "naive"
        assert config.splitter.view == (1.0, 0.0, 0.0)
        assert config.splitter.debug is True
        assert config.bench.grid_size == 3
        assert config.bench.splitters == ["bsp"]

    def test_shipped_example_config_loads(self) -> None:
        example = Path(__file__).parents[2] / "configs" / "planesplit.yaml"
        config = load_config(example)
        assert config.splitter.kind in ("bsp", "naive")

    def test_default_config(self) -> None:
        config = default_config()
        assert config.global_config.config_version == DEFAULT_CONFIG_VERSION
        assert config.global_config.project_name == "planesplit"
        assert config.splitter.kind == "bsp"


class TestLoadInvalidConfig:
    def test_missing_required_field_raises_validation_error(self, invalid_config_file: Path) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(invalid_config_file)

    def test_unknown_field_raises_validation_error(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path,
            "unknown_field.yaml",
            """\
            global:
              config_version: "1.0.0"
              some_nonsense_field: true
            """,
        )
        with pytest.raises(ConfigValidationError):
            load_config(config_file)

    def test_wrong_type_raises_validation_error(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path,
            "wrong_type.yaml",
            """\
            global:
              config_version: "1.0.0"
            bench:
              grid_size: "lots"
            """,
        )
        with pytest.raises(ConfigValidationError):
            load_config(config_file)

    def test_unknown_splitter_raises_validation_error(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path,
            "unknown_splitter.yaml",
            """\
            global:
              config_version: "1.0.0"
            splitter:
              kind: octree
            """,
        )
        with pytest.raises(ConfigValidationError, match="unknown splitter 'octree'"):
            load_config(config_file)

    def test_unknown_bench_splitter_raises_validation_error(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path,
            "unknown_bench.yaml",
            """\
            global:
              config_version: "1.0.0"
            bench:
              splitters: [bsp, octree]
            """,
        )
        with pytest.raises(ConfigValidationError, match="octree"):
            load_config(config_file)

    def test_zero_view_raises_validation_error(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path,
            "zero_view.yaml",
            """\
            global:
              config_version: "1.0.0"
            splitter:
              view: [0, 0, 0]
            """,
        )
        with pytest.raises(ConfigValidationError, match="too short"):
            load_config(config_file)

    def test_near_zero_view_raises_validation_error(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path,
            "tiny_view.yaml",
            """\
            global:
              config_version: "1.0.0"
            splitter:
              view: [0.0001, 0, 0]
            """,
        )
        with pytest.raises(ConfigValidationError, match="too short"):
            load_config(config_file)

    def test_bad_log_level_raises_validation_error(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path,
            "bad_level.yaml",
            """\
            global:
              config_version: "1.0.0"
              log_level: "LOUD"
            """,
        )
        with pytest.raises(ConfigValidationError, match="Invalid log level"):
            load_config(config_file)

    def test_list_document_raises_load_error(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path, "list.yaml", "- a\n- b\n")
        with pytest.raises(ConfigLoadError, match="mapping"):
            load_config(config_file)

    def test_broken_yaml_raises_load_error(self, broken_yaml_file: Path) -> None:
        with pytest.raises(ConfigLoadError):
            load_config(broken_yaml_file)

    def test_nonexistent_file_raises_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            load_config(tmp_path / "does_not_exist.yaml")

    def test_directory_path_raises_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            load_config(tmp_path)

    def test_errors_share_a_base(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)
        assert issubclass(ConfigValidationError, ConfigError)


class TestConfigImmutability:
    def test_cannot_mutate_frozen_config(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        with pytest.raises(Exception):
            config.global_config.log_level = "ERROR"  # type: ignore[misc]

    def test_cannot_mutate_nested_section(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        with pytest.raises(Exception):
            config.splitter.kind = "naive"  # type: ignore[misc]
