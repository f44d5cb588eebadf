"""Orchestrators for the full body metrics calculation."""

from .metrics_orchestrator import (
    MetricsOrchestrator,
    calculate_all_results,
    recalculate_with_target_weight,
)

__all__ = [
    "MetricsOrchestrator",
    "calculate_all_results",
    "recalculate_with_target_weight",
]
