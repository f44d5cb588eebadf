"""
User profile value objects.

Anthropometric input for the calculation engine. All values are
metric (kg, cm); unit conversion happens at the presentation boundary.

Ranges are deliberately NOT enforced here: the engine computes a
best-effort result for out-of-range data, and range checks live in
the advisory ProfileValidator.
"""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions.domain_errors import IncompleteProfileError
from .activity_level import ActivityLevel
from .sex import Sex
from .unit_system import UnitSystem


class Measurements(BaseModel):
    """
    Optional body circumferences in centimeters.

    Each measurement is independently optional.

    Example:
        >>> m = Measurements(waist_cm=80.0, hips_cm=95.0)
        >>> m.has_waist_and_hips()
        True
    """

    model_config = ConfigDict(frozen=True)

    waist_cm: Optional[float] = Field(None, description="Waist circumference in cm")
    hips_cm: Optional[float] = Field(None, description="Hip circumference in cm")
    neck_cm: Optional[float] = Field(None, description="Neck circumference in cm")
    shoulder_cm: Optional[float] = Field(None, description="Shoulder circumference in cm")

    def has_waist_and_hips(self) -> bool:
        """True when both waist and hips are present and non-zero."""
        return bool(self.waist_cm) and bool(self.hips_cm)


class UserProfile(BaseModel):
    """
    Complete input record for one computation.

    Attributes:
        sex: Biological sex (selects formula branches)
        unit_system: Display unit system (never changes stored values)
        age: Age in years
        height_cm: Height in centimeters
        weight_kg: Body weight in kilograms
        activity_level: Physical activity level
        body_fat_percent: Optional body fat estimate (switches BMR formula)
        measurements: Optional circumferences

    Example:
        >>> profile = UserProfile(
        ...     sex=Sex.MALE,
        ...     age=30,
        ...     height_cm=180.0,
        ...     weight_kg=80.0,
        ...     activity_level=ActivityLevel.MODERATE,
        ... )
        >>> profile.with_weight(65.0).weight_kg
        65.0
    """

    model_config = ConfigDict(frozen=True)

    sex: Sex
    unit_system: UnitSystem = UnitSystem.METRIC
    age: int
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel
    body_fat_percent: Optional[float] = None
    measurements: Measurements = Field(default_factory=Measurements)

    def with_weight(self, weight_kg: float) -> UserProfile:
        """Return a copy with only the weight replaced."""
        return self.model_copy(update={"weight_kg": weight_kg})


class ProfileDraft(BaseModel):
    """
    Partially filled profile as held by a form.

    Every anthropometric field may be missing. Used for validation and
    to decide whether the engine can run at all.
    """

    model_config = ConfigDict(frozen=True)

    sex: Sex = Sex.FEMALE
    unit_system: UnitSystem = UnitSystem.IMPERIAL
    age: Optional[int] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    body_fat_percent: Optional[float] = None
    measurements: Measurements = Field(default_factory=Measurements)

    def missing_required(self) -> list[str]:
        """Names of required fields that are absent, zero or not finite."""
        missing = []
        for name in ("age", "height_cm", "weight_kg"):
            value = getattr(self, name)
            if not value or not math.isfinite(value):
                missing.append(name)
        return missing

    def is_computable(self) -> bool:
        """True when age, height and weight are all present, non-zero and finite."""
        return not self.missing_required()

    def to_profile(self) -> UserProfile:
        """
        Build a UserProfile from this draft.

        Raises:
            IncompleteProfileError: If age, height or weight is missing
        """
        missing = self.missing_required()
        if missing:
            raise IncompleteProfileError(missing)

        return UserProfile(**self.model_dump())
