"""
Scenario input and output models.

``PolicyInputs`` is the validated lever record a host builds from user input.
It enforces the documented slider ranges; the engine functions themselves
accept any finite real number.

``Outcome`` is the full set of derived indicators for one evaluation and
``RiskAssessment`` the qualitative tier attached to it.

All models are frozen: an evaluation produces fresh records every call and
nothing downstream may mutate them.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from policy_simulator.engine.constants import BASE_CONFIDENCE, LEVER_BOUNDS
from policy_simulator.taxonomy.risk_taxonomy import RiskTier

_GRID_TOLERANCE = 1e-9


class PolicyInputs(BaseModel):
    """The three policy levers for one evaluation.

    Attributes:
        fiscal_stimulus:     Fiscal stimulus, trillion currency, [0, 6].
        interest_rate_cut:   Rate cut in fractional rate points, [0, 1.0].
        consumption_subsidy: Consumption subsidy, trillion currency, [0, 3].
    """

    model_config = ConfigDict(frozen=True)

    fiscal_stimulus: float = 3.0
    interest_rate_cut: float = 0.2
    consumption_subsidy: float = 1.0

    @field_validator("fiscal_stimulus", "interest_rate_cut", "consumption_subsidy")
    @classmethod
    def validate_lever_range(cls, v: float, info: ValidationInfo) -> float:
        if not math.isfinite(v):
            raise ValueError(f"{info.field_name} must be a finite number, got {v}.")
        low, high, _ = LEVER_BOUNDS[info.field_name]
        if not low <= v <= high:
            raise ValueError(
                f"{info.field_name} must be in [{low}, {high}], got {v}."
            )
        return v

    def is_on_slider_grid(self) -> bool:
        """True when every lever sits exactly on its slider step."""
        for name, (low, _, step) in LEVER_BOUNDS.items():
            steps = (getattr(self, name) - low) / step
            if abs(steps - round(steps)) > _GRID_TOLERANCE:
                return False
        return True

    @classmethod
    def unchecked(
        cls,
        fiscal_stimulus: float,
        interest_rate_cut: float,
        consumption_subsidy: float,
    ) -> "PolicyInputs":
        """Build an instance without range validation.

        For hosts that deliberately evaluate levers outside the slider ranges;
        the engine applies the same formulas there.
        """
        return cls.model_construct(
            fiscal_stimulus=fiscal_stimulus,
            interest_rate_cut=interest_rate_cut,
            consumption_subsidy=consumption_subsidy,
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.fiscal_stimulus, self.interest_rate_cut, self.consumption_subsidy)


class Outcome(BaseModel):
    """Derived macroeconomic indicators for one policy mix.

    Attributes:
        gdp_level:          Output level after the capacity ceiling (trillion).
        gdp_growth_pct:     Growth over the 2024 baseline, percent.
        unemployment_pct:   Unemployment rate after Okun's law, percent.
        inflation_pct:      CPI inflation after the Phillips curve, percent.
        debt_to_gdp_pct:    Government debt ratio, percent of GDP.
        confidence_index:   Consumer confidence index.
        output_gap_pct:     Deviation of output from potential, percent.
        fiscal_impact:      GDP contribution of the fiscal lever.
        monetary_impact:    GDP contribution of the rate cut.
        consumption_impact: GDP contribution of the consumption subsidy.
    """

    model_config = ConfigDict(frozen=True)

    gdp_level: float
    gdp_growth_pct: float
    unemployment_pct: float
    inflation_pct: float
    debt_to_gdp_pct: float
    confidence_index: float
    output_gap_pct: float
    fiscal_impact: float
    monetary_impact: float
    consumption_impact: float

    @property
    def total_gdp_increase(self) -> float:
        """Sum of the three lever impacts, before the capacity ceiling."""
        return self.fiscal_impact + self.monetary_impact + self.consumption_impact

    @property
    def confidence_boost(self) -> float:
        """Confidence gained over the baseline index."""
        return self.confidence_index - BASE_CONFIDENCE


class RiskAssessment(BaseModel):
    """Risk tier plus a one-line explanation."""

    model_config = ConfigDict(frozen=True)

    tier: RiskTier
    message: str

    @field_validator("message")
    @classmethod
    def validate_message_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("message must not be empty.")
        return v.strip()
