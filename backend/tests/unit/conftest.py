"""Unit test configuration.

Shared profiles for body metrics tests. Unit tests use pure domain
objects only; no .env file or logging setup is loaded here.
"""

import pytest

from fitcalc.domain.body_metrics.core.value_objects import (
    ActivityLevel,
    Measurements,
    Sex,
    UserProfile,
)


@pytest.fixture
def male_profile() -> UserProfile:
    """30 y, 180 cm, 80 kg, moderate activity, no optional data."""
    return UserProfile(
        sex=Sex.MALE,
        age=30,
        height_cm=180.0,
        weight_kg=80.0,
        activity_level=ActivityLevel.MODERATE,
    )


@pytest.fixture
def female_profile() -> UserProfile:
    """45 y, 160 cm, 90 kg, 35% body fat, sedentary, with waist/hips."""
    return UserProfile(
        sex=Sex.FEMALE,
        age=45,
        height_cm=160.0,
        weight_kg=90.0,
        activity_level=ActivityLevel.SEDENTARY,
        body_fat_percent=35.0,
        measurements=Measurements(waist_cm=92.0, hips_cm=110.0),
    )
