"""ProfileValidator - advisory range checks for user input.

Validation never raises and never blocks computation; callers decide
whether to act on the report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.value_objects.user_profile import ProfileDraft, UserProfile
from ..core.value_objects.validation_result import ValidationResult


@dataclass(frozen=True)
class FieldRange:
    """Inclusive valid range for one input field."""

    minimum: float
    maximum: float
    message: str
    circumference: bool = False

    def accepts(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


FIELD_RANGES = {
    "age": FieldRange(10, 120, "Age must be between 10 and 120 years"),
    "weight_kg": FieldRange(10, 227, "Weight must be between 10 and 227 kg (500 lbs)"),
    "height_cm": FieldRange(50, 250, "Height must be between 50 and 250 cm"),
    "body_fat_percent": FieldRange(5, 45, "Body fat percentage must be between 5% and 45%"),
    "waist_cm": FieldRange(
        30, 200, "Waist circumference must be between 30 and 200 cm", circumference=True
    ),
    "hips_cm": FieldRange(
        40, 220, "Hips circumference must be between 40 and 220 cm", circumference=True
    ),
    "neck_cm": FieldRange(
        20, 60, "Neck circumference must be between 20 and 60 cm", circumference=True
    ),
    "shoulder_cm": FieldRange(
        30, 130, "Shoulder circumference must be between 30 and 130 cm", circumference=True
    ),
}


class ProfileValidator:
    """Check every present field against its range.

    Missing fields are skipped. Circumference errors always appear in
    field_errors, but only count against validity when
    measurements_optional is set (the user opted into measurements).
    """

    def validate(
        self,
        profile: Union[UserProfile, ProfileDraft],
        measurements_optional: bool = True,
    ) -> ValidationResult:
        """Validate a complete or partial profile.

        Args:
            profile: Profile or draft to check
            measurements_optional: Whether circumference errors count

        Returns:
            ValidationResult: Advisory report

        Example:
            >>> draft = ProfileDraft(age=5)
            >>> ProfileValidator().validate(draft).field_errors["age"]
            'Age must be between 10 and 120 years'
        """
        errors: list[str] = []
        field_errors: dict[str, str] = {}

        for field, value in self._field_values(profile).items():
            if value is None:
                continue
            field_range = FIELD_RANGES[field]
            if field_range.accepts(value):
                continue

            field_errors[field] = field_range.message
            if not field_range.circumference or measurements_optional:
                errors.append(field_range.message)

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            field_errors=field_errors,
        )

    @staticmethod
    def _field_values(profile: Union[UserProfile, ProfileDraft]) -> dict[str, Optional[float]]:
        measurements = profile.measurements
        return {
            "age": profile.age,
            "weight_kg": profile.weight_kg,
            "height_cm": profile.height_cm,
            "body_fat_percent": profile.body_fat_percent,
            "waist_cm": measurements.waist_cm,
            "hips_cm": measurements.hips_cm,
            "neck_cm": measurements.neck_cm,
            "shoulder_cm": measurements.shoulder_cm,
        }


def validate_user_data(
    profile: Union[UserProfile, ProfileDraft], measurements_optional: bool = True
) -> ValidationResult:
    """Validate a profile with the default validator."""
    return ProfileValidator().validate(profile, measurements_optional)
