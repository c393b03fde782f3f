"""Policy Simulator: deterministic macroeconomic scenario calculator."""

__version__ = "0.1.0"
