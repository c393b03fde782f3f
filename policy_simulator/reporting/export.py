"""
Export helpers for evaluations and sweeps.

All writers create parent directories and return the written ``Path``.
They accept generic ``list[dict]`` data to stay decoupled from specific
report shapes.

CSV exports are flat (no nested dicts) so they load directly in a
spreadsheet or dataframe without any pre-processing step. Parquet exports
use a fixed PyArrow schema so column types are stable across runs.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from policy_simulator.models.report import ScenarioReport

log = logging.getLogger(__name__)

SWEEP_PA_SCHEMA = pa.schema(
    [
        pa.field("fiscal_stimulus",     pa.float64()),
        pa.field("interest_rate_cut",   pa.float64()),
        pa.field("consumption_subsidy", pa.float64()),
        pa.field("gdp_level",           pa.float64()),
        pa.field("gdp_growth_pct",      pa.float64()),
        pa.field("unemployment_pct",    pa.float64()),
        pa.field("inflation_pct",       pa.float64()),
        pa.field("debt_to_gdp_pct",     pa.float64()),
        pa.field("confidence_index",    pa.float64()),
        pa.field("output_gap_pct",      pa.float64()),
        pa.field("fiscal_impact",       pa.float64()),
        pa.field("monetary_impact",     pa.float64()),
        pa.field("consumption_impact",  pa.float64()),
        pa.field("risk_tier",           pa.string()),
        pa.field("risk_message",        pa.string()),
        pa.field("meets_objectives",    pa.bool_()),
    ]
)

SWEEP_COLUMNS: list[str] = SWEEP_PA_SCHEMA.names


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def export_to_parquet(
    records: list[dict[str, Any]],
    path: Path,
    schema: pa.Schema = SWEEP_PA_SCHEMA,
) -> Path:
    """Write ``records`` to a snappy-compressed Parquet file.

    Args:
        records: Row dicts; each must contain every field of ``schema``.
        path:    Destination file path (parent dirs created if missing).
        schema:  PyArrow schema; defaults to the sweep schema.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    arrays = {
        field.name: pa.array([r[field.name] for r in records], type=field.type)
        for field in schema
    }
    table = pa.table(arrays, schema=schema)
    pq.write_table(table, str(path), compression="snappy")
    log.info("Parquet written: %s (%d rows)", path.name, len(records))
    return path


def report_to_dict(report: ScenarioReport) -> dict[str, Any]:
    """JSON-ready dict of one evaluation.

    Enum values are emitted as their string values; the derived
    ``total_gdp_increase`` and ``confidence_boost`` are added to ``outcome``.
    """
    data = report.model_dump(mode="json")
    data["outcome"]["total_gdp_increase"] = report.outcome.total_gdp_increase
    data["outcome"]["confidence_boost"] = report.outcome.confidence_boost
    return data
