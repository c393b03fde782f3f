"""
Fixed model coefficients.

These are NOT fitted parameters: they are the published constants of the
model and must be reproduced exactly for output parity. Nothing in the
configuration layer can override them.
"""

from __future__ import annotations

# ── Baseline economy (2024) ───────────────────────────────────────────────────

BASE_GDP: float = 121.0             # trillion currency
POTENTIAL_GDP: float = 126.0        # trillion currency, capacity output
BASE_UNEMPLOYMENT: float = 5.8      # percent
BASE_INFLATION: float = 0.5         # percent
BASE_DEBT: float = 91.0             # percent of GDP
BASE_CONFIDENCE: float = 87.0       # index points

# ── Multipliers ───────────────────────────────────────────────────────────────

FISCAL_MULTIPLIER: float = 2.5              # infrastructure-weighted
RATE_CUT_SCALE: float = 10.0                # rate points -> GDP units
MONETARY_EFFECTIVENESS: float = 0.8         # liquidity-trap adjustment
MONETARY_MULTIPLIER: float = RATE_CUT_SCALE * MONETARY_EFFECTIVENESS
CONSUMPTION_MULTIPLIER: float = 3.0         # MPC 0.75, low-income households

# ── Transmission ──────────────────────────────────────────────────────────────

OKUN_COEFFICIENT: float = 0.5       # unemployment pts per growth pt
PHILLIPS_SLOPE: float = 0.3         # inflation pts per output-gap pt

# ── Bounds ────────────────────────────────────────────────────────────────────

GDP_CAPACITY_HEADROOM: float = 2.0
GDP_CEILING: float = POTENTIAL_GDP + GDP_CAPACITY_HEADROOM
STRUCTURAL_UNEMPLOYMENT_FLOOR: float = 4.2
DEFLATION_FLOOR: float = -0.5
CONFIDENCE_BOOST_CAP: float = 40.0
CONFIDENCE_INDEX_CAP: float = 140.0

# Confidence weights per unit of GDP impact.
FISCAL_CONFIDENCE_WEIGHT: float = 2.0
MONETARY_CONFIDENCE_WEIGHT: float = 1.5
CONSUMPTION_CONFIDENCE_WEIGHT: float = 3.0

# ── Documented lever domain (slider ranges) ───────────────────────────────────
# (min, max, step). The engine does not enforce these; PolicyInputs does.

LEVER_BOUNDS: dict[str, tuple[float, float, float]] = {
    "fiscal_stimulus":     (0.0, 6.0, 0.5),
    "interest_rate_cut":   (0.0, 1.0, 0.1),
    "consumption_subsidy": (0.0, 3.0, 0.25),
}
