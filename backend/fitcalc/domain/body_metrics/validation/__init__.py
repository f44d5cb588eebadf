"""Advisory validation for body metrics input."""

from .profile_validator import FIELD_RANGES, FieldRange, ProfileValidator, validate_user_data

__all__ = [
    "FIELD_RANGES",
    "FieldRange",
    "ProfileValidator",
    "validate_user_data",
]
