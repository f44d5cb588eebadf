"""Ports (interfaces) for body metrics domain."""

from .calculators import IBMRCalculator, ITDEECalculator

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
]
