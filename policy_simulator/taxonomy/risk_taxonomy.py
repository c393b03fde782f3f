"""
Qualitative labels attached to a computed policy scenario.

Two orthogonal dimensions:
  - ``RiskTier``       : overall scenario risk, produced by the risk classifier.
  - ``IndicatorStatus``: per-indicator grading against the policy targets.

Usage example::

    from policy_simulator.taxonomy.risk_taxonomy import RiskTier

    tier = RiskTier.HIGH

This module has NO imports from any other ``policy_simulator`` package.
"""

from enum import StrEnum


class RiskTier(StrEnum):
    """Overall risk of a policy mix."""

    LOW = "LOW"
    """No debt, inflation, or growth rule tripped."""

    MEDIUM = "MEDIUM"
    """Moderate fiscal risk or a growth shortfall."""

    HIGH = "HIGH"
    """Debt sustainability or overheating breach."""


class IndicatorStatus(StrEnum):
    """How a single headline indicator sits relative to its policy target."""

    ON_TARGET = "on_target"
    """Inside the target band."""

    WATCH = "watch"
    """Outside the target band but within the tolerance band."""

    OFF_TARGET = "off_target"
    """Outside the tolerance band."""
