"""
ASCII terminal formatters for CLI commands.

All formatters accept engine records and return plain multi-line strings
suitable for ``typer.echo()``. No third-party dependencies (no ``rich``,
no ``colorama``).

Status tags
-----------
Indicator rows carry a bracketed tag instead of a colour::

  [OK]    on target
  [WATCH] inside the tolerance band
  [OFF]   outside the tolerance band
"""

from __future__ import annotations

from policy_simulator.engine.risk import DEFAULT_MESSAGE, RISK_RULES
from policy_simulator.engine.sweep import SweepSummary
from policy_simulator.models.report import (
    IndicatorGrade,
    PolicyContribution,
    PolicyRecommendation,
    ScenarioReport,
    TrajectoryRow,
)
from policy_simulator.models.scenario import Outcome, PolicyInputs, RiskAssessment
from policy_simulator.taxonomy.risk_taxonomy import IndicatorStatus, RiskTier

_STATUS_TAGS: dict[IndicatorStatus, str] = {
    IndicatorStatus.ON_TARGET:  "[OK]",
    IndicatorStatus.WATCH:      "[WATCH]",
    IndicatorStatus.OFF_TARGET: "[OFF]",
}

_BAR_WIDTH = 40


# ── Inputs ────────────────────────────────────────────────────────────────────


def format_inputs(inputs: PolicyInputs) -> str:
    return "\n".join(
        [
            "",
            "=== Policy Levers ===",
            f"  Fiscal stimulus:     {inputs.fiscal_stimulus:g}T",
            f"  Interest rate cut:   {inputs.interest_rate_cut * 100:.0f}bp",
            f"  Consumption subsidy: {inputs.consumption_subsidy:g}T",
        ]
    )


# ── Indicators ────────────────────────────────────────────────────────────────


def format_indicator_table(grades: tuple[IndicatorGrade, ...] | list[IndicatorGrade]) -> str:
    """Format graded headline indicators as an ASCII table::

        Indicator          Value  Status   Target
        -------------------------------------------------
        GDP Growth         5.79%  [OK]     Target: 5.5%
    """
    lines: list[str] = ["", "=== Headline Indicators ==="]
    header = f"  {'Indicator':<16}  {'Value':>8}  {'Status':<7}  Target"
    lines.append(header)
    lines.append("  " + "-" * (len(header) + 12))
    for g in grades:
        lines.append(
            f"  {g.name:<16}  {g.value:>7.2f}%  {_STATUS_TAGS[g.status]:<7}  {g.target_label}"
        )
    return "\n".join(lines)


def format_outcome_details(outcome: Outcome) -> str:
    """Secondary indicators not shown in the headline table."""
    return "\n".join(
        [
            "",
            "=== Model Detail ===",
            f"  GDP level:           {outcome.gdp_level:.2f}T",
            f"  Output gap:          {outcome.output_gap_pct:+.2f}%",
            f"  Confidence index:    {outcome.confidence_index:.1f}",
            f"  Total GDP impact:    {outcome.total_gdp_increase:.1f}T",
        ]
    )


# ── Risk ──────────────────────────────────────────────────────────────────────


def format_risk_banner(risk: RiskAssessment, outcome: Outcome) -> str:
    """One-line risk banner followed by the total stimulus impact."""
    return "\n".join(
        [
            "",
            f"  RISK LEVEL: {risk.tier.value} -- {risk.message}",
            f"  Total Stimulus Impact: {outcome.total_gdp_increase:.1f} Trillion",
        ]
    )


def format_recommendation(recommendation: PolicyRecommendation) -> str:
    tag = "[OK]" if recommendation.meets_objectives else "[ADJUST]"
    return "\n".join(
        [
            "",
            "=== Optimal Policy Recommendation ===",
            f"  {tag} {recommendation.summary}",
        ]
    )


# ── Trajectory & breakdown ────────────────────────────────────────────────────


def format_trajectory_table(rows: tuple[TrajectoryRow, ...] | list[TrajectoryRow]) -> str:
    """Format the historical + projected trajectory.

    The projected row is marked with ``*``.
    """
    lines: list[str] = ["", "=== Economic Trajectory ==="]
    header = (
        f"  {'Year':>6}  {'GDP %':>7}  {'Unemp %':>8}  {'Infl %':>7}  {'Debt %':>7}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for r in rows:
        year = f"{r.year}*" if r.is_projection else str(r.year)
        lines.append(
            f"  {year:>6}  {r.gdp:>7.2f}  {r.unemployment:>8.2f}  "
            f"{r.inflation:>7.2f}  {r.debt:>7.2f}"
        )
    if any(r.is_projection for r in rows):
        lines.append("  * projected from current levers")
    return "\n".join(lines)


def format_breakdown(contributions: tuple[PolicyContribution, ...] | list[PolicyContribution]) -> str:
    """Horizontal ASCII bars scaled to the largest contribution."""
    lines: list[str] = ["", "=== Policy Impact Breakdown (GDP, trillion) ==="]
    peak = max((c.value for c in contributions), default=0.0)
    for c in contributions:
        width = int(round(c.value / peak * _BAR_WIDTH)) if peak > 0 else 0
        width = max(width, 0)
        lines.append(f"  {c.name:<20}  {c.value:>6.2f}  {'#' * width}")
    return "\n".join(lines)


# ── Full report ───────────────────────────────────────────────────────────────


def format_scenario_report(report: ScenarioReport) -> str:
    """All sections of one evaluation, in display order."""
    return "\n".join(
        [
            format_inputs(report.inputs),
            format_indicator_table(report.grades),
            format_risk_banner(report.risk, report.outcome),
            format_outcome_details(report.outcome),
            format_recommendation(report.recommendation),
            format_trajectory_table(report.trajectory),
            format_breakdown(report.breakdown),
        ]
    )


# ── Reference material ────────────────────────────────────────────────────────


def format_assumptions(assumptions: tuple[tuple[str, str], ...]) -> str:
    lines: list[str] = ["", "=== Model Specifications & Assumptions ==="]
    for label, value in assumptions:
        lines.append(f"  {label + ':':<26} {value}")
    lines.append("")
    lines.append("=== Risk Rules (first match wins) ===")
    for i, rule in enumerate(RISK_RULES, start=1):
        lines.append(f"  {i}. {rule.description:<22} -> {rule.tier.value:<6} {rule.message}")
    lines.append(f"  {len(RISK_RULES) + 1}. {'otherwise':<22} -> {RiskTier.LOW.value:<6} {DEFAULT_MESSAGE}")
    return "\n".join(lines)


def format_sweep_summary(summary: SweepSummary) -> str:
    lines: list[str] = [
        "",
        "=== Sweep Summary ===",
        f"  Points evaluated:     {summary.total_points}",
    ]
    for tier in RiskTier:
        count = summary.tier_counts.get(tier, 0)
        pct = count / summary.total_points * 100 if summary.total_points else 0.0
        lines.append(f"  {tier.value + ':':<21} {count:>6}  ({pct:5.1f}%)")
    lines.append(f"  Meeting objectives:   {summary.meeting_objectives}")
    return "\n".join(lines)
