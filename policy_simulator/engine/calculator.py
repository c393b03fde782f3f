"""
Outcome calculator: converts three policy levers into derived indicators.

Transmission chain (applied in order)
-------------------------------------
    fiscal_impact      = fiscal_stimulus     * 2.5
    monetary_impact    = interest_rate_cut   * 10 * 0.8
    consumption_impact = consumption_subsidy * 3.0

    gdp_level        = min(121 + sum(impacts), 126 + 2)     # capacity ceiling
    gdp_growth_pct   = (gdp_level - 121) / 121 * 100
    unemployment_pct = max(5.8 - growth * 0.5, 4.2)        # Okun, structural floor
    output_gap_pct   = (gdp_level - 126) / 126 * 100
    inflation_pct    = max(0.5 + gap * 0.3, -0.5)           # Phillips, deflation floor
    debt_to_gdp_pct  = 91 + (fiscal + subsidy) / gdp_level * 100
    confidence_index = min(87 + min(weighted impacts, 40), 140)

The rate cut carries no direct fiscal cost, so it never enters the debt
driver.

Domain
------
Any finite lever values are accepted and run through the same formulas.
Non-finite levers and combinations that push ``gdp_level`` to zero or below
raise ``OutOfDomainError``; results are never clamped beyond the published
floors and ceilings.
"""

from __future__ import annotations

import logging
import math

from policy_simulator.engine.constants import (
    BASE_CONFIDENCE,
    BASE_DEBT,
    BASE_GDP,
    BASE_INFLATION,
    BASE_UNEMPLOYMENT,
    CONFIDENCE_BOOST_CAP,
    CONFIDENCE_INDEX_CAP,
    CONSUMPTION_CONFIDENCE_WEIGHT,
    CONSUMPTION_MULTIPLIER,
    DEFLATION_FLOOR,
    FISCAL_CONFIDENCE_WEIGHT,
    FISCAL_MULTIPLIER,
    GDP_CEILING,
    MONETARY_CONFIDENCE_WEIGHT,
    MONETARY_EFFECTIVENESS,
    OKUN_COEFFICIENT,
    PHILLIPS_SLOPE,
    POTENTIAL_GDP,
    RATE_CUT_SCALE,
    STRUCTURAL_UNEMPLOYMENT_FLOOR,
)
from policy_simulator.exceptions import OutOfDomainError
from policy_simulator.models.scenario import Outcome, PolicyInputs

logger = logging.getLogger(__name__)


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise OutOfDomainError(name, value, "lever must be a finite number")


def lever_impacts(
    fiscal_stimulus: float,
    interest_rate_cut: float,
    consumption_subsidy: float,
) -> tuple[float, float, float]:
    """Return ``(fiscal, monetary, consumption)`` GDP contributions."""
    fiscal_impact = fiscal_stimulus * FISCAL_MULTIPLIER
    monetary_impact = interest_rate_cut * RATE_CUT_SCALE * MONETARY_EFFECTIVENESS
    consumption_impact = consumption_subsidy * CONSUMPTION_MULTIPLIER
    return fiscal_impact, monetary_impact, consumption_impact


def confidence_boost(
    fiscal_impact: float,
    monetary_impact: float,
    consumption_impact: float,
) -> float:
    """Weighted confidence gain from the lever impacts, capped at 40."""
    return min(
        fiscal_impact * FISCAL_CONFIDENCE_WEIGHT
        + monetary_impact * MONETARY_CONFIDENCE_WEIGHT
        + consumption_impact * CONSUMPTION_CONFIDENCE_WEIGHT,
        CONFIDENCE_BOOST_CAP,
    )


def compute(
    fiscal_stimulus: float,
    interest_rate_cut: float,
    consumption_subsidy: float,
) -> Outcome:
    """Compute every derived indicator for one policy mix.

    Args:
        fiscal_stimulus:     Fiscal stimulus, trillion currency.
        interest_rate_cut:   Rate cut, fractional rate points (0.2 = 20bp).
        consumption_subsidy: Consumption subsidy, trillion currency.

    Returns:
        A fresh frozen ``Outcome``.

    Raises:
        OutOfDomainError: A lever is NaN/infinite, or the levers drive
            ``gdp_level`` to zero or below.
    """
    _require_finite("fiscal_stimulus", fiscal_stimulus)
    _require_finite("interest_rate_cut", interest_rate_cut)
    _require_finite("consumption_subsidy", consumption_subsidy)

    fiscal_impact, monetary_impact, consumption_impact = lever_impacts(
        fiscal_stimulus, interest_rate_cut, consumption_subsidy
    )

    total_gdp_increase = fiscal_impact + monetary_impact + consumption_impact
    gdp_level = min(BASE_GDP + total_gdp_increase, GDP_CEILING)
    if gdp_level <= 0:
        raise OutOfDomainError(
            "gdp_level", gdp_level, "GDP must stay positive; levers are outside the model domain"
        )

    gdp_growth_pct = (gdp_level - BASE_GDP) / BASE_GDP * 100
    unemployment_pct = max(
        BASE_UNEMPLOYMENT - gdp_growth_pct * OKUN_COEFFICIENT,
        STRUCTURAL_UNEMPLOYMENT_FLOOR,
    )

    output_gap_pct = (gdp_level - POTENTIAL_GDP) / POTENTIAL_GDP * 100
    inflation_pct = max(BASE_INFLATION + output_gap_pct * PHILLIPS_SLOPE, DEFLATION_FLOOR)

    debt_to_gdp_pct = BASE_DEBT + (fiscal_stimulus + consumption_subsidy) / gdp_level * 100

    boost = confidence_boost(fiscal_impact, monetary_impact, consumption_impact)
    confidence_index = min(BASE_CONFIDENCE + boost, CONFIDENCE_INDEX_CAP)

    logger.debug(
        "compute(%s, %s, %s) -> gdp=%.3f growth=%.3f debt=%.3f",
        fiscal_stimulus, interest_rate_cut, consumption_subsidy,
        gdp_level, gdp_growth_pct, debt_to_gdp_pct,
    )

    return Outcome(
        gdp_level=gdp_level,
        gdp_growth_pct=gdp_growth_pct,
        unemployment_pct=unemployment_pct,
        inflation_pct=inflation_pct,
        debt_to_gdp_pct=debt_to_gdp_pct,
        confidence_index=confidence_index,
        output_gap_pct=output_gap_pct,
        fiscal_impact=fiscal_impact,
        monetary_impact=monetary_impact,
        consumption_impact=consumption_impact,
    )


def compute_from_inputs(inputs: PolicyInputs) -> Outcome:
    """``compute()`` for a validated ``PolicyInputs`` record."""
    return compute(
        inputs.fiscal_stimulus,
        inputs.interest_rate_cut,
        inputs.consumption_subsidy,
    )
