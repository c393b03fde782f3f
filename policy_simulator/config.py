"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      - committed static defaults
  2. ``config/local.toml``        - optional local overrides (gitignored)
  3. ``.env``                     - local env overrides (gitignored)
  4. Environment variables        - ``POLICY_SIM_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

Configuration only shapes the host (CLI defaults, sweep grids, output paths,
logging). Model coefficients are fixed in ``engine/constants.py`` and are not
configurable.
"""

from __future__ import annotations

import math
import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LeverDefaultsConfig(BaseModel):
    """Starting lever positions used when the CLI is given no values."""

    model_config = ConfigDict(frozen=True)

    fiscal_stimulus: float = 3.0
    interest_rate_cut: float = 0.2
    consumption_subsidy: float = 1.0


class LeverRangeConfig(BaseModel):
    """Inclusive sweep grid for one lever."""

    model_config = ConfigDict(frozen=True)

    start: float
    stop: float
    step: float

    @model_validator(mode="after")
    def validate_grid(self) -> "LeverRangeConfig":
        for name in ("start", "stop", "step"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number, got {getattr(self, name)}.")
        if self.step <= 0:
            raise ValueError(f"step must be > 0, got {self.step}.")
        if self.stop < self.start:
            raise ValueError(f"stop ({self.stop}) must be >= start ({self.start}).")
        return self


class SweepConfig(BaseModel):
    """Default grids and the safety cap for ``policy-sim sweep``."""

    model_config = ConfigDict(frozen=True)

    max_points: int = 10_000
    fiscal_stimulus: LeverRangeConfig = LeverRangeConfig(start=0.0, stop=6.0, step=0.5)
    interest_rate_cut: LeverRangeConfig = LeverRangeConfig(start=0.0, stop=1.0, step=0.1)
    consumption_subsidy: LeverRangeConfig = LeverRangeConfig(start=0.0, stop=3.0, step=0.25)

    @field_validator("max_points")
    @classmethod
    def validate_max_points(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_points must be >= 1, got {v}.")
        return v


class OutputConfig(BaseModel):
    """Filesystem paths for exported reports."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    defaults: LeverDefaultsConfig = LeverDefaultsConfig()
    sweep: SweepConfig = SweepConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply POLICY_SIM_* env vars to the raw config dict.

    Supported overrides:
      POLICY_SIM_LOG_LEVEL   -> raw["logging"]["level"]
      POLICY_SIM_OUTPUT_DIR  -> raw["output"]["output_dir"]
      POLICY_SIM_DEBUG       -> raw["debug"]
    """
    if log_level := os.environ.get("POLICY_SIM_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if output_dir := os.environ.get("POLICY_SIM_OUTPUT_DIR"):
        raw.setdefault("output", {})["output_dir"] = output_dir

    if debug := os.environ.get("POLICY_SIM_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        defaults=LeverDefaultsConfig(**raw.get("defaults", {})),
        sweep=SweepConfig(**raw.get("sweep", {})),
        output=OutputConfig(**raw.get("output", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
