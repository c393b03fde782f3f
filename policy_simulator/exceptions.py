"""
Exception hierarchy for the policy simulator.

The calculation engine is total over finite inputs that keep GDP positive;
everything else is signalled explicitly rather than clamped, since clamping
would change the published formulas.
"""

from __future__ import annotations


class PolicySimulatorError(Exception):
    """Base class for all simulator errors."""


class OutOfDomainError(PolicySimulatorError, ValueError):
    """Raised when an input drives the model outside its defined domain.

    Attributes:
        field: Name of the offending input or derived quantity.
        value: The value that triggered the error.
    """

    def __init__(self, field: str, value: float, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r}: {reason}")


class SweepConfigError(PolicySimulatorError, ValueError):
    """Raised when a lever sweep grid is malformed or too large."""
