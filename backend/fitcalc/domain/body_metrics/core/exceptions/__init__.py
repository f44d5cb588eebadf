"""Domain exceptions for body metrics."""

from .domain_errors import (
    BodyMetricsDomainError,
    DegenerateMeasurementError,
    IncompleteProfileError,
)

__all__ = [
    "BodyMetricsDomainError",
    "DegenerateMeasurementError",
    "IncompleteProfileError",
]
