# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for planesplit.

The one-time setup every CLI command goes through before doing real work:
  1. Validate the interpreter
  2. Wire package logging to the configured level and file
  3. Log a startup record
"""

import logging
from pathlib import Path

from planesplit import __version__
from planesplit.config.schema import GlobalConfig
from planesplit.logging.logger import configure_package_logging
from planesplit.runtime.environment import Interpreter, require_python

logger = logging.getLogger(__name__)


def bootstrap(config: GlobalConfig, log_level: str | None = None) -> None:
    """
    Run the bootstrap sequence.

    Args:
        config: The validated global configuration.
        log_level: CLI override for the configured log level.
    """
    require_python()

    level = log_level or config.log_level
    log_file = Path(config.log_file) if config.log_file is not None else None
    configure_package_logging(log_level=level, log_file=log_file)

    logger.debug(
        "planesplit bootstrap complete",
        extra={
            "version": __version__,
            "project_name": config.project_name,
            **Interpreter.current().to_dict(),
        },
    )
