"""Unit tests for SafetyPolicy."""

import pytest

from fitcalc.domain.body_metrics.calculation.safety_policy import SafetyPolicy
from fitcalc.domain.body_metrics.core.value_objects import Sex


class TestSafeMinimumCalories:
    """Test size- and sex-aware calorie minimum."""

    def setup_method(self):
        self.policy = SafetyPolicy()

    def test_reference_weight(self):
        assert self.policy.safe_minimum_calories(Sex.MALE, 70.0) == 1500.0
        assert self.policy.safe_minimum_calories(Sex.FEMALE, 70.0) == 1200.0

    def test_adds_five_kcal_per_kg_above_70(self):
        assert self.policy.safe_minimum_calories(Sex.MALE, 90.0) == 1600.0
        assert self.policy.safe_minimum_calories(Sex.FEMALE, 100.0) == 1350.0

    def test_light_bodies_get_no_reduction(self):
        """Test weights below 70 kg keep the base minimum."""
        assert self.policy.safe_minimum_calories(Sex.MALE, 50.0) == 1500.0
        assert self.policy.safe_minimum_calories(Sex.FEMALE, 45.0) == 1200.0


class TestSafeDeficit:
    """Test BMI-banded deficit clamped to [500, 1000]."""

    def setup_method(self):
        self.policy = SafetyPolicy()

    @pytest.mark.parametrize(
        "bmi,expected",
        [
            (17.0, 0.05),
            (18.5, 0.15),
            (24.9, 0.15),
            (25.0, 0.20),
            (30.0, 0.25),
            (34.9, 0.25),
            (35.0, 0.30),
            (50.0, 0.30),
        ],
    )
    def test_deficit_percentage_bands(self, bmi, expected):
        assert self.policy.deficit_percentage(bmi) == expected

    def test_deficit_floor(self):
        """Test 15% of 2873 is raised to the 500 kcal floor."""
        assert self.policy.safe_deficit(24.69, 2873.1296) == 500

    def test_deficit_ceiling(self):
        """Test 30% of 4000 is capped at 1000 kcal."""
        assert self.policy.safe_deficit(38.0, 4000.0) == 1000

    def test_deficit_in_range_is_rounded_half_up(self):
        """Test an in-range percentage deficit is rounded to whole kcal."""
        # 0.20 * 3502.5 = 700.5
        assert self.policy.safe_deficit(27.0, 3502.5) == 701

    @pytest.mark.parametrize("tdee", [0.0, 1200.0, 2500.0, 3600.0, 9000.0])
    @pytest.mark.parametrize("bmi", [15.0, 22.0, 27.0, 32.0, 45.0])
    def test_deficit_always_within_bounds(self, bmi, tdee):
        assert 500 <= self.policy.safe_deficit(bmi, tdee) <= 1000

    def test_sustainable_deficit(self):
        """Test 80% of the safe deficit, capped at 400."""
        assert self.policy.sustainable_deficit(500) == 400.0
        assert self.policy.sustainable_deficit(1000) == 400.0
        assert self.policy.sustainable_deficit(450) == pytest.approx(360.0)


class TestGuardedCalories:
    """Test minimum and BMR floor ordering."""

    def setup_method(self):
        self.policy = SafetyPolicy()

    def test_plain_deficit(self):
        calories = self.policy.guarded_calories(2873.1296, 500, Sex.MALE, 80.0, 1853.632)

        assert calories == pytest.approx(2373.1296)

    def test_safe_minimum_applies(self):
        """Test calories are lifted to the size/sex minimum."""
        calories = self.policy.guarded_calories(1800.0, 700, Sex.FEMALE, 60.0, 1200.0)

        assert calories == 1200.0

    def test_bmr_floor_applies_last(self):
        """Test 90% of BMR wins over the size/sex minimum."""
        calories = self.policy.guarded_calories(2000.0, 1000, Sex.MALE, 70.0, 2000.0)

        assert calories == pytest.approx(1800.0)

    def test_ensure_above_bmr(self):
        assert self.policy.ensure_above_bmr(1000.0, 2000.0) == pytest.approx(1800.0)
        assert self.policy.ensure_above_bmr(2500.0, 2000.0) == 2500.0
