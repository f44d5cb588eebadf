"""Factory for settings-aware profile assessment."""

from typing import Optional

from fitcalc.application.body_metrics.queries.assess_profile import AssessProfileQuery
from fitcalc.domain.body_metrics.core.value_objects.goal import Goal
from fitcalc.domain.body_metrics.core.value_objects.user_profile import ProfileDraft
from fitcalc.infrastructure.config import CalculatorSettings, load_settings

# Singleton instance
_settings: Optional[CalculatorSettings] = None


def get_settings() -> CalculatorSettings:
    """
    Get singleton calculator settings.

    Lazy initialization on first call from the FITCALC_* environment.

    Returns:
        CalculatorSettings singleton
    """
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _settings
    _settings = None


def create_assess_profile_query(
    draft: ProfileDraft,
    goal: Goal = Goal.MAINTAIN,
    target_weight: Optional[float] = None,
    settings: Optional[CalculatorSettings] = None,
) -> AssessProfileQuery:
    """
    Build an AssessProfileQuery with protein and validation defaults from settings.

    Args:
        draft: Form state
        goal: Selected goal
        target_weight: Target weight in display units
        settings: Explicit settings; the environment singleton when omitted

    Returns:
        AssessProfileQuery
    """
    settings = settings or get_settings()
    return AssessProfileQuery(
        draft=draft,
        goal=goal,
        target_weight=target_weight,
        protein_per_kg=settings.protein_per_kg,
        protein_per_pound=settings.protein_per_pound,
        measurements_optional=settings.measurements_optional,
    )
