"""Tests for policy_simulator.utils.logging."""

from __future__ import annotations

import io
import json
import logging
import sys
from pathlib import Path

import pytest

from policy_simulator.config import LoggingConfig
from policy_simulator.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_plain_lines_go_to_given_stream():
    stream = io.StringIO()
    configure_logging(LoggingConfig(level="DEBUG"), stream=stream)
    logging.getLogger("policy_simulator.test").debug("hello %s", "world")
    line = stream.getvalue().strip()
    assert line.endswith("[DEBUG] policy_simulator.test: hello world")
    assert line[19] == "Z"


def test_level_filters_console():
    stream = io.StringIO()
    configure_logging(LoggingConfig(level="WARNING"), stream=stream)
    logging.getLogger("policy_simulator.test").info("quiet")
    assert stream.getvalue() == ""


def test_default_stream_is_stderr(monkeypatch):
    fake_stderr = io.StringIO()
    fake_stdout = io.StringIO()
    monkeypatch.setattr(sys, "stderr", fake_stderr)
    monkeypatch.setattr(sys, "stdout", fake_stdout)
    configure_logging(LoggingConfig(level="INFO"))
    logging.getLogger("policy_simulator.test").info("to stderr")
    assert "to stderr" in fake_stderr.getvalue()
    assert fake_stdout.getvalue() == ""


def test_json_lines_carry_extra_fields():
    stream = io.StringIO()
    configure_logging(LoggingConfig(level="INFO", json_format=True), stream=stream)
    logging.getLogger("policy_simulator.test").info("swept", extra={"points": 143})
    payload = json.loads(stream.getvalue())
    assert payload["level"] == "INFO"
    assert payload["logger"] == "policy_simulator.test"
    assert payload["msg"] == "swept"
    assert payload["points"] == 143


def test_log_file_is_written(tmp_path: Path):
    log_file = tmp_path / "logs" / "sim.log"
    configure_logging(LoggingConfig(level="INFO", log_file=str(log_file)), stream=io.StringIO())
    logging.getLogger("policy_simulator.test").info("persisted")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "persisted" in log_file.read_text(encoding="utf-8")


def test_pyarrow_logger_held_at_warning():
    configure_logging(LoggingConfig(level="DEBUG"), stream=io.StringIO())
    assert logging.getLogger("pyarrow").level == logging.WARNING
