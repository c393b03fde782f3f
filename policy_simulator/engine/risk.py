"""
Risk classifier: maps an ``Outcome`` to a LOW / MEDIUM / HIGH tier.

Rules are an ordered decision list: the first matching rule wins; there is
no scoring or weighting.

    1. HIGH   : debt_to_gdp_pct > 110   "Debt sustainability concerns"
    2. HIGH   : inflation_pct   > 3     "Overheating risk"
    3. MEDIUM : debt_to_gdp_pct > 100   "Moderate fiscal risk"
    4. MEDIUM : gdp_growth_pct  < 4     "Insufficient stimulus"
    5. LOW    : otherwise               "Balanced policy mix"

Debt and inflation breaches are checked before the growth shortfall, so a
high-debt low-growth mix is always reported as a debt risk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from policy_simulator.models.scenario import Outcome, RiskAssessment
from policy_simulator.taxonomy.risk_taxonomy import RiskTier

DEBT_HIGH_THRESHOLD = 110.0
INFLATION_HIGH_THRESHOLD = 3.0
DEBT_MEDIUM_THRESHOLD = 100.0
GROWTH_MEDIUM_THRESHOLD = 4.0

DEFAULT_MESSAGE = "Balanced policy mix"


@dataclass(frozen=True)
class RiskRule:
    """One entry of the ordered decision list.

    Attributes:
        description: Human-readable condition, e.g. ``"debt_to_gdp_pct > 110"``.
        tier:        Tier assigned when the rule matches.
        message:     Message assigned when the rule matches.
        predicate:   Callable applied to the ``Outcome``.
    """

    description: str
    tier: RiskTier
    message: str
    predicate: Callable[[Outcome], bool]

    def matches(self, outcome: Outcome) -> bool:
        return self.predicate(outcome)


RISK_RULES: tuple[RiskRule, ...] = (
    RiskRule(
        description=f"debt_to_gdp_pct > {DEBT_HIGH_THRESHOLD:g}",
        tier=RiskTier.HIGH,
        message="Debt sustainability concerns",
        predicate=lambda o: o.debt_to_gdp_pct > DEBT_HIGH_THRESHOLD,
    ),
    RiskRule(
        description=f"inflation_pct > {INFLATION_HIGH_THRESHOLD:g}",
        tier=RiskTier.HIGH,
        message="Overheating risk",
        predicate=lambda o: o.inflation_pct > INFLATION_HIGH_THRESHOLD,
    ),
    RiskRule(
        description=f"debt_to_gdp_pct > {DEBT_MEDIUM_THRESHOLD:g}",
        tier=RiskTier.MEDIUM,
        message="Moderate fiscal risk",
        predicate=lambda o: o.debt_to_gdp_pct > DEBT_MEDIUM_THRESHOLD,
    ),
    RiskRule(
        description=f"gdp_growth_pct < {GROWTH_MEDIUM_THRESHOLD:g}",
        tier=RiskTier.MEDIUM,
        message="Insufficient stimulus",
        predicate=lambda o: o.gdp_growth_pct < GROWTH_MEDIUM_THRESHOLD,
    ),
)


def classify(outcome: Outcome) -> RiskAssessment:
    """Return the assessment of the first matching rule, else LOW."""
    for rule in RISK_RULES:
        if rule.matches(outcome):
            return RiskAssessment(tier=rule.tier, message=rule.message)
    return RiskAssessment(tier=RiskTier.LOW, message=DEFAULT_MESSAGE)
