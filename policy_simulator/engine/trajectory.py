"""
Trajectory and contribution assembly.

``HISTORICAL_ROWS`` is the fixed 2021-2024 reference table; it is an immutable
tuple defined once at import time and anchors the projected 2025 row.
"""

from __future__ import annotations

from policy_simulator.models.report import PolicyContribution, TrajectoryRow
from policy_simulator.models.scenario import Outcome

PROJECTION_YEAR = 2025

HISTORICAL_ROWS: tuple[TrajectoryRow, ...] = (
    TrajectoryRow(year=2021, gdp=8.4, unemployment=5.1, inflation=0.9, debt=68.0),
    TrajectoryRow(year=2022, gdp=3.0, unemployment=5.5, inflation=2.0, debt=77.0),
    TrajectoryRow(year=2023, gdp=5.2, unemployment=5.2, inflation=0.2, debt=83.0),
    TrajectoryRow(year=2024, gdp=4.8, unemployment=5.8, inflation=0.5, debt=91.0),
)

# Display order of the contribution chart.
CONTRIBUTION_LABELS: tuple[str, str, str] = (
    "Fiscal Stimulus",
    "Monetary Policy",
    "Consumption Subsidy",
)


def build_projected_row(outcome: Outcome) -> TrajectoryRow:
    return TrajectoryRow(
        year=PROJECTION_YEAR,
        gdp=outcome.gdp_growth_pct,
        unemployment=outcome.unemployment_pct,
        inflation=outcome.inflation_pct,
        debt=outcome.debt_to_gdp_pct,
        is_projection=True,
    )


def build_trajectory(outcome: Outcome) -> tuple[TrajectoryRow, ...]:
    """Four historical rows followed by the projection for ``outcome``."""
    return HISTORICAL_ROWS + (build_projected_row(outcome),)


def build_policy_breakdown(outcome: Outcome) -> tuple[PolicyContribution, ...]:
    """Per-lever GDP contributions in fixed display order."""
    values = (outcome.fiscal_impact, outcome.monetary_impact, outcome.consumption_impact)
    return tuple(
        PolicyContribution(name=name, value=value)
        for name, value in zip(CONTRIBUTION_LABELS, values)
    )
