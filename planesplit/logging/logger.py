# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for planesplit.

Every log entry is a single JSON line with a timestamp, level, source module
and message, plus whatever structured context the caller attached through
`extra` (polygon counts, anchors, timings).

Every module logs through plain `logging.getLogger(__name__)` and never
configures output itself. Records propagate up to the `planesplit` package
logger, which `configure_package_logging` (called from the runtime bootstrap)
wires to stdout and the optional log file. Without that call the package
stays silent, as a library should.

The JSON structure looks like:
  {"ts": "2026-...", "level": "DEBUG", "module": "planesplit.splitter.bsp", "msg": "Sorted BSP tree", "pieces": 14}
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER_NAME = "planesplit"

# Attributes every LogRecord has. Anything else on the record came from `extra`.
_STANDARD_ATTRS: frozenset[str] = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "relativeCreated",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "pathname",
        "filename",
        "module",
        "levelno",
        "levelname",
        "processName",
        "process",
        "threadName",
        "thread",
        "message",
        "msecs",
        "taskName",
    }
)

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class JsonFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Mandatory fields:
      ts    : ISO 8601 UTC timestamp
      level : log level name
      module: the logger name
      msg   : the formatted message string

    Extra fields are merged in as-is; values JSON can't handle (vectors,
    paths) are stringified.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value

        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def resolve_log_level(level_name: str) -> int:
    """
    Turn a level name string into the corresponding logging constant.

    Names are case-insensitive.

    Raises:
        ValueError: If the name isn't one of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    """
    upper = level_name.upper()
    if upper not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}"
        )
    return getattr(logging, upper)


def json_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """The handlers get_logger attached to `logger`, recognized by their formatter."""
    return [h for h in logger.handlers if isinstance(h.formatter, JsonFormatter)]


def _has_stdout_handler(handlers: list[logging.Handler]) -> bool:
    return any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in handlers
    )


def _has_file_handler(handlers: list[logging.Handler], log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(isinstance(h, logging.FileHandler) and h.baseFilename == target for h in handlers)


def get_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Create or update a structured JSON application logger.

    Args:
        name: Logger name, typically __name__ of the calling module.
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        log_file: Optional path to a log file. If provided, logs go to both
                  stdout and the file.

    Returns:
        A configured logging.Logger that outputs structured JSON.

    Raises:
        ValueError: If log_level isn't a known level name.

    Calling it again for the same name sets the new level on every JSON
    handler and adds a file handler for a log file it doesn't write yet.
    Handlers someone else attached (pytest's capture handlers, for one) are
    left alone and don't count as ours.
    """
    logger = logging.getLogger(name)
    level = resolve_log_level(log_level)
    logger.setLevel(level)
    logger.propagate = False

    formatter = JsonFormatter()
    existing = json_handlers(logger)

    if not _has_stdout_handler(existing):
        stdout_handler = logging.StreamHandler(stream=sys.stdout)
        stdout_handler.setFormatter(formatter)
        logger.addHandler(stdout_handler)

    if log_file is not None and not _has_file_handler(existing, log_file):
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for handler in json_handlers(logger):
        handler.setLevel(level)
    return logger


def configure_package_logging(log_level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Route every planesplit log record to JSON output.

    Library modules (geometry, splitters) and application modules (CLI,
    scene I/O, bench) all log through plain `logging.getLogger(__name__)`.
    Their records propagate to the `planesplit` package logger configured
    here, so the level and log file given at bootstrap apply everywhere.
    Until this is called the package stays silent, as a library should.
    """
    return get_logger(PACKAGE_LOGGER_NAME, log_level=log_level, log_file=log_file)
