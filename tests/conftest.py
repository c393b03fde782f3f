"""
Shared pytest fixtures for the policy simulator test suite.

Provides:
  - Lever fixtures for the three reference scenarios (all zero, slider
    defaults, all maximal).
  - ``make_outcome``: factory for hand-built ``Outcome`` records so risk and
    grading rules can be exercised at exact thresholds.
"""

from __future__ import annotations

from typing import Callable

import pytest

from policy_simulator.models.scenario import Outcome, PolicyInputs


@pytest.fixture
def zero_inputs() -> PolicyInputs:
    """Scenario A: every lever at zero."""
    return PolicyInputs(fiscal_stimulus=0.0, interest_rate_cut=0.0, consumption_subsidy=0.0)


@pytest.fixture
def default_inputs() -> PolicyInputs:
    """Scenario B: original slider defaults (3.0, 0.2, 1.0)."""
    return PolicyInputs()


@pytest.fixture
def max_inputs() -> PolicyInputs:
    """Scenario C: every lever at its slider maximum."""
    return PolicyInputs(fiscal_stimulus=6.0, interest_rate_cut=1.0, consumption_subsidy=3.0)


@pytest.fixture
def make_outcome() -> Callable[..., Outcome]:
    """Return a factory building an ``Outcome`` with benign defaults.

    Defaults describe a LOW-risk mix that meets the policy objectives;
    override only the fields under test.
    """

    def _make(**overrides: float) -> Outcome:
        fields = {
            "gdp_level":          128.0,
            "gdp_growth_pct":     6.0,
            "unemployment_pct":   4.5,
            "inflation_pct":      2.0,
            "debt_to_gdp_pct":    95.0,
            "confidence_index":   110.0,
            "output_gap_pct":     1.5,
            "fiscal_impact":      7.5,
            "monetary_impact":    1.6,
            "consumption_impact": 3.0,
        }
        fields.update(overrides)
        return Outcome(**fields)

    return _make
