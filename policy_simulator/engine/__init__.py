"""
Scenario engine: pure functions from policy levers to indicators and risk.

Modules
-------
constants  : Fixed model coefficients and the documented lever domain.
calculator : compute(): levers -> Outcome.
risk       : classify(): Outcome -> RiskAssessment (ordered rule list).
trajectory : HISTORICAL_ROWS + build_trajectory() + build_policy_breakdown().
assessment : Indicator grading, policy recommendation, evaluate().
sweep      : Cartesian lever grids evaluated in batch.

No module in this package performs I/O or holds state.
"""
