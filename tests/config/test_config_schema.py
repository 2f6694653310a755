# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Schema-level validation tests.

These focus on the pydantic models themselves: boundary values, constraint
enforcement, and structural correctness.
"""

import pytest
from pydantic import ValidationError

from planesplit.config.schema import BenchConfig, GlobalConfig, PlaneSplitConfig, SplitterConfig


class TestGlobalConfigSchema:
    def test_default_log_level_is_info(self) -> None:
        assert GlobalConfig(config_version="1.0.0").log_level == "INFO"

    def test_default_project_name(self) -> None:
        assert GlobalConfig(config_version="1.0.0").project_name == "planesplit"

    def test_log_file_defaults_to_none(self) -> None:
        assert GlobalConfig(config_version="1.0.0").log_file is None

    def test_config_version_is_required(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig()  # type: ignore[call-arg]


class TestSplitterConfigSchema:
    def test_defaults(self) -> None:
        config = SplitterConfig()
        assert config.kind == "bsp"
        assert config.view == (0.0, 0.0, 1.0)
        assert config.debug is False

    def test_view_needs_three_components(self) -> None:
        with pytest.raises(ValidationError):
            SplitterConfig(view=(1.0, 0.0))  # type: ignore[arg-type]


class TestBenchConfigSchema:
    @pytest.mark.parametrize("grid_size", [1, 64])
    def test_grid_size_bounds_are_inclusive(self, grid_size: int) -> None:
        assert BenchConfig(grid_size=grid_size).grid_size == grid_size

    @pytest.mark.parametrize("grid_size", [0, 65])
    def test_grid_size_out_of_range(self, grid_size: int) -> None:
        with pytest.raises(ValidationError):
            BenchConfig(grid_size=grid_size)

    def test_iterations_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            BenchConfig(iterations=0)

    def test_splitters_must_not_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            BenchConfig(splitters=[])


class TestPlaneSplitConfigSchema:
    def test_global_alias(self) -> None:
        config = PlaneSplitConfig.model_validate({"global": {"config_version": "1.0.0"}})
        assert config.global_config.config_version == "1.0.0"

    def test_global_is_required(self) -> None:
        with pytest.raises(ValidationError):
            PlaneSplitConfig.model_validate({})

    def test_unknown_section_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PlaneSplitConfig.model_validate({"global": {"config_version": "1.0.0"}, "render": {}})
