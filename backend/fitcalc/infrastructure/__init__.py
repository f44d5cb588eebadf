"""Infrastructure layer: environment configuration and logging."""

from .assessment_factory import (
    create_assess_profile_query,
    get_settings,
    reset_settings,
)
from .config import CalculatorSettings, load_settings
from .logging_config import configure_logging

__all__ = [
    "CalculatorSettings",
    "load_settings",
    "configure_logging",
    "get_settings",
    "reset_settings",
    "create_assess_profile_query",
]
