"""Tests for policy_simulator.reporting.export."""

from __future__ import annotations

import csv
import json
from pathlib import Path

import pyarrow.parquet as pq

from policy_simulator.engine.assessment import evaluate
from policy_simulator.engine.sweep import LeverRange, sweep, sweep_to_records
from policy_simulator.reporting.export import (
    SWEEP_COLUMNS,
    export_to_csv,
    export_to_json,
    export_to_parquet,
    report_to_dict,
)


def _records() -> list[dict]:
    return sweep_to_records(
        sweep(LeverRange(0.0, 6.0, 3.0), LeverRange.single(0.2), LeverRange.single(1.0))
    )


def test_export_to_csv_basic(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "sweep.csv"
    result = export_to_csv(_records(), out, fieldnames=SWEEP_COLUMNS)

    assert result == out
    with out.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert list(rows[0].keys()) == SWEEP_COLUMNS
    assert rows[1]["risk_tier"] == "LOW"


def test_export_to_csv_empty_writes_empty_file(tmp_path: Path) -> None:
    out = tmp_path / "empty.csv"
    export_to_csv([], out)
    assert out.read_text(encoding="utf-8") == ""


def test_export_to_json_roundtrips(tmp_path: Path) -> None:
    out = tmp_path / "sweep.json"
    export_to_json(_records(), out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data) == 3
    assert data[0]["fiscal_stimulus"] == 0.0


def test_export_to_parquet_schema(tmp_path: Path) -> None:
    out = tmp_path / "sweep.parquet"
    export_to_parquet(_records(), out)
    table = pq.read_table(str(out))
    assert table.num_rows == 3
    assert table.column_names == SWEEP_COLUMNS
    assert table.column("risk_tier").to_pylist()[2] == "LOW"
    assert table.column("gdp_level").to_pylist()[2] == 128.0


def test_export_to_parquet_empty(tmp_path: Path) -> None:
    out = tmp_path / "empty.parquet"
    export_to_parquet([], out)
    assert pq.read_table(str(out)).num_rows == 0


def test_report_to_dict(default_inputs) -> None:
    data = report_to_dict(evaluate(default_inputs))
    assert data["risk"] == {"tier": "LOW", "message": "Balanced policy mix"}
    assert data["inputs"]["fiscal_stimulus"] == 3.0
    assert data["outcome"]["total_gdp_increase"] == data["outcome"]["fiscal_impact"] + data[
        "outcome"
    ]["monetary_impact"] + data["outcome"]["consumption_impact"]
    assert [row["year"] for row in data["trajectory"]] == [2021, 2022, 2023, 2024, 2025]
    assert data["grades"][0]["status"] == "on_target"
    json.dumps(data)
