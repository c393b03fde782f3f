"""
Tests for policy_simulator/engine/assessment.py.

What we test
------------
grade_indicators():
  - Band edges for growth, unemployment, inflation, debt.
  - Inflation is never graded off target.
meets_policy_objectives() / build_recommendation():
  - Growth >= 5.5 and debt <= 100 both required.
  - Summary sentence formatting for the slider defaults.
evaluate():
  - Bundles outcome, risk, grades, recommendation, trajectory, breakdown.
"""

from __future__ import annotations

import pytest

from policy_simulator.engine.assessment import (
    ADJUST_NOTE,
    MEETS_OBJECTIVES_NOTE,
    MODEL_ASSUMPTIONS,
    build_recommendation,
    evaluate,
    grade_indicators,
    meets_policy_objectives,
)
from policy_simulator.engine.calculator import compute_from_inputs
from policy_simulator.exceptions import OutOfDomainError
from policy_simulator.models.scenario import PolicyInputs
from policy_simulator.taxonomy.risk_taxonomy import IndicatorStatus, RiskTier


def _statuses(outcome) -> list[IndicatorStatus]:
    return [g.status for g in grade_indicators(outcome)]


class TestGrading:
    def test_order_and_names(self, make_outcome):
        assert [g.name for g in grade_indicators(make_outcome())] == [
            "GDP Growth",
            "Unemployment",
            "Inflation (CPI)",
            "Govt Debt/GDP",
        ]

    @pytest.mark.parametrize(
        "growth, expected",
        [
            (5.5, IndicatorStatus.ON_TARGET),
            (5.49, IndicatorStatus.WATCH),
            (4.5, IndicatorStatus.WATCH),
            (4.49, IndicatorStatus.OFF_TARGET),
        ],
    )
    def test_growth_bands(self, make_outcome, growth, expected):
        assert _statuses(make_outcome(gdp_growth_pct=growth))[0] == expected

    @pytest.mark.parametrize(
        "unemployment, expected",
        [
            (5.0, IndicatorStatus.ON_TARGET),
            (5.01, IndicatorStatus.WATCH),
            (5.5, IndicatorStatus.WATCH),
            (5.51, IndicatorStatus.OFF_TARGET),
        ],
    )
    def test_unemployment_bands(self, make_outcome, unemployment, expected):
        assert _statuses(make_outcome(unemployment_pct=unemployment))[1] == expected

    @pytest.mark.parametrize(
        "inflation, expected",
        [
            (1.0, IndicatorStatus.ON_TARGET),
            (3.0, IndicatorStatus.ON_TARGET),
            (0.99, IndicatorStatus.WATCH),
            (-0.5, IndicatorStatus.WATCH),
            (8.0, IndicatorStatus.WATCH),
        ],
    )
    def test_inflation_band(self, make_outcome, inflation, expected):
        assert _statuses(make_outcome(inflation_pct=inflation))[2] == expected

    @pytest.mark.parametrize(
        "debt, expected",
        [
            (100.0, IndicatorStatus.ON_TARGET),
            (100.1, IndicatorStatus.WATCH),
            (110.0, IndicatorStatus.WATCH),
            (110.1, IndicatorStatus.OFF_TARGET),
        ],
    )
    def test_debt_bands(self, make_outcome, debt, expected):
        assert _statuses(make_outcome(debt_to_gdp_pct=debt))[3] == expected

    def test_default_scenario_grades(self, default_inputs):
        assert _statuses(compute_from_inputs(default_inputs)) == [
            IndicatorStatus.ON_TARGET,
            IndicatorStatus.ON_TARGET,
            IndicatorStatus.WATCH,
            IndicatorStatus.ON_TARGET,
        ]


class TestObjectives:
    def test_both_required(self, make_outcome):
        assert meets_policy_objectives(make_outcome(gdp_growth_pct=5.5, debt_to_gdp_pct=100.0))
        assert not meets_policy_objectives(make_outcome(gdp_growth_pct=5.4))
        assert not meets_policy_objectives(make_outcome(debt_to_gdp_pct=100.1))

    def test_default_summary(self, default_inputs):
        rec = build_recommendation(default_inputs, compute_from_inputs(default_inputs))
        assert rec.meets_objectives
        assert rec.summary == (
            "Fiscal Stimulus = 3T, Rate Cut = 20bp, Consumption Subsidy = 1T "
            "generates 5.8% GDP growth with 4.2% unemployment and 94% "
            "debt-to-GDP ratio. " + MEETS_OBJECTIVES_NOTE
        )

    def test_zero_levers_ask_for_adjustment(self, zero_inputs):
        rec = build_recommendation(zero_inputs, compute_from_inputs(zero_inputs))
        assert not rec.meets_objectives
        assert rec.summary.endswith(ADJUST_NOTE)
        assert "Rate Cut = 0bp" in rec.summary


class TestEvaluate:
    def test_bundle(self, default_inputs):
        report = evaluate(default_inputs)
        assert report.inputs == default_inputs
        assert report.outcome == compute_from_inputs(default_inputs)
        assert report.risk.tier == RiskTier.LOW
        assert len(report.grades) == 4
        assert len(report.trajectory) == 5
        assert len(report.breakdown) == 3
        assert report.recommendation.meets_objectives

    def test_zero_scenario_is_medium(self, zero_inputs):
        report = evaluate(zero_inputs)
        assert report.risk.tier == RiskTier.MEDIUM
        assert report.risk.message == "Insufficient stimulus"

    def test_unchecked_inputs_evaluate(self):
        report = evaluate(PolicyInputs.unchecked(20.0, 0.0, 5.0))
        assert report.risk.message == "Debt sustainability concerns"

    def test_degenerate_inputs_propagate(self):
        with pytest.raises(OutOfDomainError):
            evaluate(PolicyInputs.unchecked(-60.0, 0.0, 0.0))


def test_model_assumptions_listed():
    labels = [label for label, _ in MODEL_ASSUMPTIONS]
    assert "Okun's Law Coefficient" in labels
    assert dict(MODEL_ASSUMPTIONS)["Okun's Law Coefficient"] == "-0.5"
    assert dict(MODEL_ASSUMPTIONS)["Phillips Curve Slope"] == "0.3"
    assert dict(MODEL_ASSUMPTIONS)["Monetary Multiplier"] == "8 GDP units per rate point"
