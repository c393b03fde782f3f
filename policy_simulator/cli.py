"""
Policy Simulator: CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Evaluate (single scenario or sweep).
  5. Report result to stdout, optionally exporting to disk. Logs go to stderr.

Install and run::

    pip install -e .
    policy-sim --help
    policy-sim evaluate --fiscal 3 --rate-cut 0.2 --subsidy 1
    policy-sim evaluate --json
    policy-sim history
    policy-sim assumptions
    policy-sim sweep --rate-cut-range 0.2 --format parquet
    policy-sim validate-config
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="policy-sim",
    help="Macroeconomic Policy Simulator: deterministic scenario calculator.",
    add_completion=False,
)

_EXPORT_FORMATS = ("csv", "json", "parquet")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from policy_simulator.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config. Logs go to stderr; stdout is for results."""
    from policy_simulator.utils.logging import configure_logging
    configure_logging(config.logging, stream=sys.stderr)


def _timestamp() -> str:
    return datetime.now(tz=timezone.utc).strftime("%Y%m%dT%H%M%SZ")


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("evaluate")
def evaluate_cmd(
    fiscal: Optional[float] = typer.Option(
        None,
        "--fiscal",
        help="Fiscal stimulus in trillions [0, 6]. Defaults to config.",
    ),
    rate_cut: Optional[float] = typer.Option(
        None,
        "--rate-cut",
        help="Interest-rate cut in rate points [0, 1.0] (0.2 = 20bp). Defaults to config.",
    ),
    subsidy: Optional[float] = typer.Option(
        None,
        "--subsidy",
        help="Consumption subsidy in trillions [0, 3]. Defaults to config.",
    ),
    allow_out_of_range: bool = typer.Option(
        False,
        "--allow-out-of-range",
        help="Evaluate levers outside the documented slider ranges.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the full report as JSON instead of tables.",
    ),
    export_path: Optional[str] = typer.Option(
        None,
        "--export",
        help="Also write the JSON report to this path.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Evaluate one policy mix: indicators, risk tier, trajectory, breakdown."""
    from pydantic import ValidationError

    from policy_simulator.engine.assessment import evaluate
    from policy_simulator.exceptions import OutOfDomainError
    from policy_simulator.models.scenario import PolicyInputs
    from policy_simulator.reporting.export import export_to_json, report_to_dict
    from policy_simulator.reporting.formatters import format_scenario_report

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    levers = (
        fiscal if fiscal is not None else config.defaults.fiscal_stimulus,
        rate_cut if rate_cut is not None else config.defaults.interest_rate_cut,
        subsidy if subsidy is not None else config.defaults.consumption_subsidy,
    )

    if allow_out_of_range:
        inputs = PolicyInputs.unchecked(*levers)
    else:
        try:
            inputs = PolicyInputs(
                fiscal_stimulus=levers[0],
                interest_rate_cut=levers[1],
                consumption_subsidy=levers[2],
            )
        except ValidationError as exc:
            typer.echo(f"[ERROR] Invalid policy levers:\n{exc}", err=True)
            typer.echo("  Pass --allow-out-of-range to evaluate anyway.", err=True)
            raise typer.Exit(code=1)

    try:
        report = evaluate(inputs)
    except OutOfDomainError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    data = report_to_dict(report)
    if as_json:
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(format_scenario_report(report))
        if not inputs.is_on_slider_grid():
            typer.echo("")
            typer.echo("  [NOTE] One or more levers are off the slider step grid.")

    if export_path:
        written = export_to_json(data, Path(export_path))
        typer.echo(f"[OK] Report written to {written}", err=as_json)


@app.command("history")
def history_cmd() -> None:
    """Print the fixed 2021-2024 reference trajectory."""
    from policy_simulator.engine.trajectory import HISTORICAL_ROWS
    from policy_simulator.reporting.formatters import format_trajectory_table

    typer.echo(format_trajectory_table(HISTORICAL_ROWS))


@app.command("assumptions")
def assumptions_cmd() -> None:
    """Print model coefficients and the ordered risk rules."""
    from policy_simulator.engine.assessment import MODEL_ASSUMPTIONS
    from policy_simulator.reporting.formatters import format_assumptions

    typer.echo(format_assumptions(MODEL_ASSUMPTIONS))


@app.command("sweep")
def sweep_cmd(
    fiscal_range: Optional[str] = typer.Option(
        None,
        "--fiscal-range",
        help="Fiscal grid 'start:stop:step' or a single value. Defaults to config.",
    ),
    rate_cut_range: Optional[str] = typer.Option(
        None,
        "--rate-cut-range",
        help="Rate-cut grid 'start:stop:step' or a single value. Defaults to config.",
    ),
    subsidy_range: Optional[str] = typer.Option(
        None,
        "--subsidy-range",
        help="Subsidy grid 'start:stop:step' or a single value. Defaults to config.",
    ),
    fmt: str = typer.Option(
        "csv",
        "--format",
        help="Export format: csv, json or parquet.",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Export path. Defaults to <output_dir>/sweeps/sweep_<timestamp>.<format>.",
    ),
    no_export: bool = typer.Option(
        False,
        "--no-export",
        help="Print the summary only.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Evaluate every combination of three lever grids and export the results."""
    from policy_simulator.engine.sweep import (
        LeverRange,
        summarize_sweep,
        sweep,
        sweep_to_records,
    )
    from policy_simulator.exceptions import PolicySimulatorError
    from policy_simulator.reporting.export import (
        SWEEP_COLUMNS,
        export_to_csv,
        export_to_json,
        export_to_parquet,
    )
    from policy_simulator.reporting.formatters import format_sweep_summary

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    fmt = fmt.lower()
    if fmt not in _EXPORT_FORMATS:
        typer.echo(
            f"[ERROR] Unsupported format '{fmt}'. Use one of {', '.join(_EXPORT_FORMATS)}.",
            err=True,
        )
        raise typer.Exit(code=1)

    def _range(text: Optional[str], default) -> LeverRange:
        if text:
            return LeverRange.parse(text)
        return LeverRange(start=default.start, stop=default.stop, step=default.step)

    try:
        results = sweep(
            _range(fiscal_range, config.sweep.fiscal_stimulus),
            _range(rate_cut_range, config.sweep.interest_rate_cut),
            _range(subsidy_range, config.sweep.consumption_subsidy),
            max_points=config.sweep.max_points,
        )
    except PolicySimulatorError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(format_sweep_summary(summarize_sweep(results)))

    if no_export:
        return

    out_path = (
        Path(output)
        if output
        else Path(config.output.output_dir) / "sweeps" / f"sweep_{_timestamp()}.{fmt}"
    )
    records = sweep_to_records(results)
    if fmt == "csv":
        export_to_csv(records, out_path, fieldnames=SWEEP_COLUMNS)
    elif fmt == "json":
        export_to_json(records, out_path)
    else:
        export_to_parquet(records, out_path)

    typer.echo("")
    typer.echo(f"[OK] {len(records)} rows written to {out_path}")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    d = config.defaults

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(
        f"  Default levers:   fiscal={d.fiscal_stimulus:g} "
        f"rate_cut={d.interest_rate_cut:g} subsidy={d.consumption_subsidy:g}"
    )
    typer.echo(f"  Sweep max points: {config.sweep.max_points}")
    typer.echo(f"  Output dir:       {config.output.output_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
