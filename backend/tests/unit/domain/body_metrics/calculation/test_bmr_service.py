"""Unit tests for BMRService."""

import pytest

from fitcalc.domain.body_metrics.calculation.bmr_service import BMRService
from fitcalc.domain.body_metrics.core.value_objects import (
    ActivityLevel,
    Sex,
    UserProfile,
)


class TestBMRService:
    """Test BMR calculation with Katch-McArdle and Mifflin-St Jeor."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMRService()

    def test_calculate_bmr_male(self, male_profile):
        """Test BMR for male without body fat."""
        bmr = self.service.calculate(male_profile)

        # 88.362 + 13.397*80 + 4.799*180 - 5.677*30
        assert bmr == pytest.approx(1853.632)

    def test_calculate_bmr_female_without_body_fat(self):
        """Test BMR for female without body fat."""
        profile = UserProfile(
            sex=Sex.FEMALE,
            age=25,
            height_cm=165.0,
            weight_kg=60.0,
            activity_level=ActivityLevel.LIGHT,
        )

        bmr = self.service.calculate(profile)

        # 447.593 + 9.247*60 + 3.098*165 - 4.33*25
        assert bmr == pytest.approx(1405.333)

    def test_body_fat_selects_katch_mcardle(self, female_profile):
        """Test that known body fat switches to lean-mass formula."""
        bmr = self.service.calculate(female_profile)

        # 370 + 21.6 * 90 * 0.65
        assert bmr == pytest.approx(1633.6)

    def test_katch_mcardle_ignores_sex_height_and_age(self):
        """Test that lean-mass formula depends on weight and body fat only."""
        male = self.service.calculate_from(Sex.MALE, 80.0, 190.0, 20, body_fat_percent=20.0)
        female = self.service.calculate_from(Sex.FEMALE, 80.0, 150.0, 70, body_fat_percent=20.0)

        assert male == female == pytest.approx(370 + 21.6 * 64.0)

    def test_zero_body_fat_counts_as_unknown(self, male_profile):
        """Test that body fat of 0 falls back to Mifflin-St Jeor."""
        profile = male_profile.model_copy(update={"body_fat_percent": 0.0})

        assert self.service.calculate(profile) == pytest.approx(1853.632)

    def test_older_age_lowers_bmr(self):
        """Test that age lowers BMR by the sex-specific coefficient."""
        young = self.service.mifflin_st_jeor(Sex.MALE, 70.0, 170.0, 25)
        old = self.service.mifflin_st_jeor(Sex.MALE, 70.0, 170.0, 50)

        assert young - old == pytest.approx(25 * 5.677)

    @pytest.mark.parametrize(
        "body_fat,expected",
        [(None, False), (0.0, False), (-5.0, False), (0.1, True), (30.0, True)],
    )
    def test_uses_lean_mass(self, body_fat, expected):
        """Test formula selection threshold."""
        assert self.service.uses_lean_mass(body_fat) is expected

    def test_calculate_is_deterministic(self, male_profile):
        """Test that repeated calls give identical results."""
        assert self.service.calculate(male_profile) == self.service.calculate(male_profile)
