# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for the interpreter check and the bootstrap sequence."""

import json
import logging
import sys
from pathlib import Path

import pytest

from planesplit.config.schema import GlobalConfig
from planesplit.logging.logger import PACKAGE_LOGGER_NAME
from planesplit.runtime import environment
from planesplit.runtime.bootstrap import bootstrap
from planesplit.runtime.environment import Interpreter, require_python


class TestRequirePython:
    def test_running_interpreter_passes(self) -> None:
        require_python()

    @pytest.mark.parametrize("version", [(3, 10, 12), (2, 7, 18)])
    def test_old_python_is_rejected(self, version: tuple[int, int, int]) -> None:
        with pytest.raises(RuntimeError, match="requires Python >= 3.11, found"):
            require_python(version)

    @pytest.mark.parametrize("version", [(3, 11, 0), (3, 13, 1), (4, 0, 0)])
    def test_new_enough_python_passes(self, version: tuple[int, int, int]) -> None:
        require_python(version)


class TestInterpreter:
    def test_current_matches_sys(self) -> None:
        current = Interpreter.current()
        assert current.python_version.startswith(f"{sys.version_info[0]}.{sys.version_info[1]}.")
        assert current.implementation

    def test_to_dict_is_json_ready(self) -> None:
        data = Interpreter.current().to_dict()
        assert set(data) == {"python_version", "implementation", "platform", "machine"}
        assert json.loads(json.dumps(data)) == data


class TestBootstrap:
    def test_bootstrap_sets_package_level(self) -> None:
        bootstrap(GlobalConfig(config_version="1.0.0", log_level="ERROR"))
        assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.ERROR

    def test_cli_level_overrides_config(self) -> None:
        bootstrap(GlobalConfig(config_version="1.0.0", log_level="ERROR"), log_level="DEBUG")
        assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.DEBUG

    def test_bootstrap_writes_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "run.log"
        bootstrap(GlobalConfig(config_version="1.0.0", log_level="DEBUG", log_file=str(log_file)))
        assert "bootstrap complete" in log_file.read_text(encoding="utf-8")

    def test_repeated_bootstrap_still_writes_log_file(self, tmp_path: Path) -> None:
        bootstrap(GlobalConfig(config_version="1.0.0", log_level="DEBUG"))
        log_file = tmp_path / "second.log"
        bootstrap(GlobalConfig(config_version="1.0.0", log_level="DEBUG", log_file=str(log_file)))
        logging.getLogger("planesplit.scene.loader").debug("after bootstrap")

        content = log_file.read_text(encoding="utf-8")
        assert "bootstrap complete" in content
        assert "after bootstrap" in content

    def test_bootstrap_rejects_old_python(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(environment, "MINIMUM_PYTHON", (99, 0))
        with pytest.raises(RuntimeError, match="requires Python >= 99.0"):
            bootstrap(GlobalConfig(config_version="1.0.0"))
