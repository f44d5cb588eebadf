"""Domain exceptions for body metrics."""

from typing import Optional

from ....shared.errors import DomainError


class BodyMetricsDomainError(DomainError):
    """Base exception for body metrics domain errors."""

    pass


class DegenerateMeasurementError(BodyMetricsDomainError):
    """Raised when a measurement leaves a calculation undefined.

    Zero divisors, or non-finite values where whole grams are required.
    """

    def __init__(self, field: str, value: float, message: Optional[str] = None):
        super().__init__(message or f"Cannot divide by {field}={value}")
        self.field = field
        self.value = value


class IncompleteProfileError(BodyMetricsDomainError):
    """Raised when a draft lacks the fields needed for any computation."""

    def __init__(self, missing: list[str]):
        super().__init__(f"Profile is missing required fields: {', '.join(missing)}")
        self.missing = missing
