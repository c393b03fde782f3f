"""Tests for policy_simulator.config."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from policy_simulator.config import AppConfig, LoggingConfig, SweepConfig, load_config


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for key in ("POLICY_SIM_LOG_LEVEL", "POLICY_SIM_OUTPUT_DIR", "POLICY_SIM_DEBUG"):
        monkeypatch.delenv(key, raising=False)


def test_committed_default_config_loads():
    config = load_config()
    assert config.defaults.fiscal_stimulus == 3.0
    assert config.defaults.interest_rate_cut == 0.2
    assert config.sweep.interest_rate_cut.step == 0.1
    assert config.logging.level == "INFO"


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_local_toml_is_merged(tmp_path: Path):
    cfg = _write(tmp_path / "config" / "default.toml", "[defaults]\nfiscal_stimulus = 2.0\n")
    _write(tmp_path / "config" / "local.toml", "[defaults]\nconsumption_subsidy = 0.5\n")
    config = load_config(cfg)
    assert config.defaults.fiscal_stimulus == 2.0
    assert config.defaults.consumption_subsidy == 0.5
    assert config.defaults.interest_rate_cut == 0.2


def test_env_overrides(tmp_path: Path, monkeypatch):
    cfg = _write(tmp_path / "default.toml", "[logging]\nlevel = 'INFO'\n")
    monkeypatch.setenv("POLICY_SIM_LOG_LEVEL", "debug")
    monkeypatch.setenv("POLICY_SIM_OUTPUT_DIR", "/tmp/out")
    monkeypatch.setenv("POLICY_SIM_DEBUG", "yes")
    config = load_config(cfg)
    assert config.logging.level == "DEBUG"
    assert config.output.output_dir == "/tmp/out"
    assert config.debug is True


def test_project_debug_flag(tmp_path: Path):
    cfg = _write(tmp_path / "default.toml", "[project]\ndebug = true\n")
    assert load_config(cfg).debug is True


def test_invalid_log_level():
    with pytest.raises(ValidationError, match="Log level"):
        LoggingConfig(level="LOUD")


def test_invalid_sweep_grid(tmp_path: Path):
    cfg = _write(
        tmp_path / "default.toml",
        "[sweep.fiscal_stimulus]\nstart = 2.0\nstop = 1.0\nstep = 0.5\n",
    )
    with pytest.raises(ValidationError, match="stop"):
        load_config(cfg)


@pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
def test_non_finite_sweep_grid(tmp_path: Path, value: str):
    cfg = _write(
        tmp_path / "default.toml",
        f"[sweep.interest_rate_cut]\nstart = 0.0\nstop = {value}\nstep = 0.1\n",
    )
    with pytest.raises(ValidationError, match="finite"):
        load_config(cfg)


def test_max_points_must_be_positive():
    with pytest.raises(ValidationError, match="max_points"):
        SweepConfig(max_points=0)


def test_app_config_is_frozen():
    config = AppConfig()
    with pytest.raises(ValidationError):
        config.debug = True
