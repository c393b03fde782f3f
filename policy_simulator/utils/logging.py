"""
Logging setup for the policy simulator.

The CLI calls ``configure_logging(config)`` once per command. Library modules
only ever use ``logging.getLogger(__name__)``.

Console logs go to **stderr**. Stdout carries command results only, so
``policy-sim evaluate --json`` stays parseable at any log level and the sweep
summary is never interleaved with log lines.

Line formats
------------
Plain (default)::

    2026-02-24T15:00:00Z [INFO] policy_simulator.engine.sweep: Sweep evaluated 1859 points

JSON (``json_format = true`` under ``[logging]``), one object per line::

    {"ts": "2026-02-24T15:00:00Z", "level": "INFO", "logger": "...", "msg": "..."}

Fields passed through ``extra=`` are copied into the JSON object.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from policy_simulator.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Third-party loggers held at WARNING regardless of the configured level.
QUIET_LOGGERS = ("pyarrow",)

# Attributes present on every LogRecord; anything else came from ``extra=``.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        payload.update(
            (key, val)
            for key, val in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )
        return json.dumps(payload, default=str)


def build_formatter(config: "LoggingConfig") -> logging.Formatter:
    """Plain or JSON formatter, as selected by ``config.json_format``."""
    if config.json_format:
        return _JsonFormatter()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    formatter.converter = time.gmtime
    return formatter


def configure_logging(
    config: "LoggingConfig",
    stream: Optional[TextIO] = None,
) -> None:
    """Install console (and optional file) handlers on the root logger.

    Args:
        config: Level, log file and format settings.
        stream: Console destination. Defaults to ``sys.stderr`` as it is at
            call time, so test runners that swap the stream capture the logs.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = build_formatter(config)

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handlers: list[logging.Handler] = [console]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
