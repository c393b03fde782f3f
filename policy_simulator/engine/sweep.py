"""
Lever sweeps: evaluate the cartesian product of three lever grids.

Grid structure
--------------
Each lever is described by an inclusive ``LeverRange(start, stop, step)``:

    count  = floor((stop - start) / step + 1e-9) + 1
    values = [round(start + i * step, 10) for i in range(count)]

Rounding to 10 decimals keeps slider values exact (``0.1 * 3`` is
``0.30000000000000004``; the slider value is ``0.3``). Steps finer than
``1e-10`` would collapse to duplicate points after rounding and are
rejected, as are NaN and infinite bounds.

The point count is known before any value is built, so ``sweep()`` enforces
``max_points`` up front.

Points are generated in lever order (fiscal outermost, subsidy innermost)
so row order in exports is stable across runs.

Each point is an independent ``compute()`` + ``classify()`` call; nothing is
shared between points.
"""

from __future__ import annotations

import itertools
import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import Any

from policy_simulator.engine.assessment import meets_policy_objectives
from policy_simulator.engine.calculator import compute
from policy_simulator.engine.constants import LEVER_BOUNDS
from policy_simulator.engine.risk import classify
from policy_simulator.exceptions import SweepConfigError
from policy_simulator.models.scenario import Outcome, PolicyInputs, RiskAssessment
from policy_simulator.taxonomy.risk_taxonomy import RiskTier

logger = logging.getLogger(__name__)

_ROUND_DIGITS = 10
_MIN_STEP = 1e-10
_STOP_TOLERANCE = 1e-9
DEFAULT_MAX_POINTS = 10_000


@dataclass(frozen=True)
class LeverRange:
    """Inclusive grid for one lever.

    Attributes:
        start: First value.
        stop:  Last value (included when it lies on the grid).
        step:  Grid spacing (>= 1e-10).
    """

    start: float
    stop: float
    step: float

    def __post_init__(self) -> None:
        for name in ("start", "stop", "step"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise SweepConfigError(f"{name} must be a finite number, got {value}")
        if self.step <= 0:
            raise SweepConfigError(f"step must be > 0, got {self.step}")
        if self.step < _MIN_STEP:
            raise SweepConfigError(
                f"step must be >= {_MIN_STEP:g}, got {self.step}"
            )
        if self.stop < self.start:
            raise SweepConfigError(
                f"stop ({self.stop}) must be >= start ({self.start})"
            )
        if not math.isfinite((self.stop - self.start) / self.step):
            raise SweepConfigError(
                f"Range {self.start}:{self.stop}:{self.step} is too wide to grid."
            )

    @classmethod
    def single(cls, value: float) -> "LeverRange":
        """A one-point grid holding ``value``."""
        return cls(start=value, stop=value, step=1.0)

    @classmethod
    def slider(cls, lever: str) -> "LeverRange":
        """The full documented slider range for ``lever``."""
        try:
            low, high, step = LEVER_BOUNDS[lever]
        except KeyError:
            raise SweepConfigError(
                f"Unknown lever '{lever}'. Must be one of {sorted(LEVER_BOUNDS)}."
            ) from None
        return cls(start=low, stop=high, step=step)

    @classmethod
    def parse(cls, text: str) -> "LeverRange":
        """Parse ``"start:stop:step"`` or a single value ``"x"``."""
        parts = [p.strip() for p in text.split(":")]
        try:
            numbers = [float(p) for p in parts]
        except ValueError:
            raise SweepConfigError(f"Invalid lever range '{text}'.") from None
        if len(numbers) == 1:
            return cls.single(numbers[0])
        if len(numbers) != 3:
            raise SweepConfigError(
                f"Invalid lever range '{text}'. Expected 'start:stop:step'."
            )
        return cls(start=numbers[0], stop=numbers[1], step=numbers[2])

    def point_count(self) -> int:
        """Number of grid values, computed without building them."""
        return math.floor((self.stop - self.start) / self.step + _STOP_TOLERANCE) + 1

    def __len__(self) -> int:
        return self.point_count()


def lever_values(lever_range: LeverRange) -> list[float]:
    """Expand a ``LeverRange`` into its inclusive list of values."""
    return [
        round(lever_range.start + i * lever_range.step, _ROUND_DIGITS)
        for i in range(lever_range.point_count())
    ]


@dataclass(frozen=True)
class SweepResult:
    """One evaluated grid point."""

    inputs: PolicyInputs
    outcome: Outcome
    risk: RiskAssessment

    @property
    def meets_objectives(self) -> bool:
        return meets_policy_objectives(self.outcome)


@dataclass(frozen=True)
class SweepSummary:
    """Aggregate counts over a sweep.

    Attributes:
        total_points:       Number of evaluated points.
        tier_counts:        Points per risk tier (every tier present, possibly 0).
        meeting_objectives: Points meeting the growth + debt objectives.
    """

    total_points: int
    tier_counts: dict[RiskTier, int]
    meeting_objectives: int


def sweep(
    fiscal_stimulus: LeverRange,
    interest_rate_cut: LeverRange,
    consumption_subsidy: LeverRange,
    max_points: int = DEFAULT_MAX_POINTS,
) -> list[SweepResult]:
    """Evaluate every combination of the three lever grids.

    Args:
        fiscal_stimulus:     Grid for the fiscal lever.
        interest_rate_cut:   Grid for the rate-cut lever.
        consumption_subsidy: Grid for the subsidy lever.
        max_points:          Refuse grids larger than this.

    Returns:
        One ``SweepResult`` per point, fiscal-major order.

    Raises:
        SweepConfigError: If the grid exceeds ``max_points``.
        OutOfDomainError: If any point drives GDP non-positive.
    """
    ranges = (fiscal_stimulus, interest_rate_cut, consumption_subsidy)
    total = math.prod(r.point_count() for r in ranges)
    if total > max_points:
        raise SweepConfigError(
            f"Sweep has {total} points, exceeding max_points={max_points}."
        )

    grids = [lever_values(r) for r in ranges]

    results: list[SweepResult] = []
    for fiscal, rate_cut, subsidy in itertools.product(*grids):
        outcome = compute(fiscal, rate_cut, subsidy)
        results.append(
            SweepResult(
                inputs=PolicyInputs.unchecked(fiscal, rate_cut, subsidy),
                outcome=outcome,
                risk=classify(outcome),
            )
        )

    logger.info("Sweep evaluated %d points", len(results))
    return results


def summarize_sweep(results: list[SweepResult]) -> SweepSummary:
    counts = Counter(r.risk.tier for r in results)
    return SweepSummary(
        total_points=len(results),
        tier_counts={tier: counts.get(tier, 0) for tier in RiskTier},
        meeting_objectives=sum(1 for r in results if r.meets_objectives),
    )


def sweep_to_records(results: list[SweepResult]) -> list[dict[str, Any]]:
    """Flatten sweep results into export rows (one dict per point)."""
    rows: list[dict[str, Any]] = []
    for r in results:
        rows.append(
            {
                **r.inputs.model_dump(),
                **r.outcome.model_dump(),
                "risk_tier":        r.risk.tier.value,
                "risk_message":     r.risk.message,
                "meets_objectives": r.meets_objectives,
            }
        )
    return rows
