"""
Presentation-adjacent records assembled around an ``Outcome``.

``TrajectoryRow``     : one year of the five-point GDP/unemployment/inflation/debt
                         series (four historical constants + one projection).
``PolicyContribution``: one bar of the per-lever GDP contribution chart.
``IndicatorGrade``    : one headline indicator graded against its target.
``PolicyRecommendation``: the objectives check with its summary sentence.
``ScenarioReport``    : everything a host renders for one evaluation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from policy_simulator.models.scenario import Outcome, PolicyInputs, RiskAssessment
from policy_simulator.taxonomy.risk_taxonomy import IndicatorStatus


class TrajectoryRow(BaseModel):
    """One annual point of the headline-indicator trajectory.

    Attributes:
        year:          Calendar year.
        gdp:           Real GDP growth, percent.
        unemployment:  Unemployment rate, percent.
        inflation:     CPI inflation, percent.
        debt:          Debt-to-GDP, percent.
        is_projection: ``True`` only for the row derived from the current Outcome.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    gdp: float
    unemployment: float
    inflation: float
    debt: float
    is_projection: bool = False


class PolicyContribution(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: float


class IndicatorGrade(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    status: IndicatorStatus
    target_label: str


class PolicyRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    meets_objectives: bool
    summary: str


class ScenarioReport(BaseModel):
    """Full evaluation bundle for one set of levers."""

    model_config = ConfigDict(frozen=True)

    inputs: PolicyInputs
    outcome: Outcome
    risk: RiskAssessment
    grades: tuple[IndicatorGrade, ...]
    recommendation: PolicyRecommendation
    trajectory: tuple[TrajectoryRow, ...]
    breakdown: tuple[PolicyContribution, ...]
