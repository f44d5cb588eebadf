"""CQRS Queries for body metrics."""

from fitcalc.application.body_metrics.queries.assess_profile import (
    AssessProfileQuery,
    AssessProfileQueryHandler,
    Assessment,
)

__all__ = [
    "AssessProfileQuery",
    "AssessProfileQueryHandler",
    "Assessment",
]
