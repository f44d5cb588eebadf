"""fitcalc - body metrics and calorie guidance engine.

Example:
    >>> from fitcalc import ActivityLevel, Sex, UserProfile, calculate_all_results
    >>> profile = UserProfile(
    ...     sex=Sex.MALE,
    ...     age=30,
    ...     height_cm=180.0,
    ...     weight_kg=80.0,
    ...     activity_level=ActivityLevel.MODERATE,
    ... )
    >>> calculate_all_results(profile).bmi.category
    'Normal weight'
"""

from fitcalc.application.body_metrics.orchestrators import (
    MetricsOrchestrator,
    calculate_all_results,
    recalculate_with_target_weight,
)
from fitcalc.application.body_metrics.queries import (
    AssessProfileQuery,
    AssessProfileQueryHandler,
    Assessment,
)
from fitcalc.domain.body_metrics.core.exceptions import (
    BodyMetricsDomainError,
    DegenerateMeasurementError,
    IncompleteProfileError,
)
from fitcalc.domain.body_metrics.core.value_objects import (
    ActivityLevel,
    CalculationResult,
    Goal,
    GoalPlan,
    Measurements,
    ProfileDraft,
    Sex,
    UnitSystem,
    UserProfile,
    ValidationResult,
)
from fitcalc.domain.body_metrics.validation import validate_user_data
from fitcalc.domain.shared.errors import ConfigurationError, DomainError, InvalidSettingError

__version__ = "0.1.0"

__all__ = [
    "calculate_all_results",
    "recalculate_with_target_weight",
    "validate_user_data",
    "MetricsOrchestrator",
    "AssessProfileQuery",
    "AssessProfileQueryHandler",
    "Assessment",
    "ActivityLevel",
    "CalculationResult",
    "Goal",
    "GoalPlan",
    "Measurements",
    "ProfileDraft",
    "Sex",
    "UnitSystem",
    "UserProfile",
    "ValidationResult",
    "DomainError",
    "ConfigurationError",
    "InvalidSettingError",
    "BodyMetricsDomainError",
    "DegenerateMeasurementError",
    "IncompleteProfileError",
]
