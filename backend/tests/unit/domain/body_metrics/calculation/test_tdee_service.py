"""Unit tests for TDEEService."""

import pytest

from fitcalc.domain.body_metrics.calculation.tdee_service import TDEEService
from fitcalc.domain.body_metrics.core.value_objects import ActivityLevel


class TestTDEEService:
    """Test TDEE calculation with PAL multipliers."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()

    @pytest.mark.parametrize(
        "activity_level,expected",
        [
            (ActivityLevel.SEDENTARY, 2400.0),
            (ActivityLevel.LIGHT, 2750.0),
            (ActivityLevel.MODERATE, 3100.0),
            (ActivityLevel.HIGH, 3450.0),
            (ActivityLevel.VERY_HIGH, 3800.0),
        ],
    )
    def test_calculate_tdee_per_activity_level(self, activity_level, expected):
        """Test TDEE = BMR × PAL for every level."""
        assert self.service.calculate(2000.0, activity_level) == pytest.approx(expected)

    def test_tdee_for_reference_male(self):
        """Test TDEE for the 30 y / 180 cm / 80 kg male."""
        tdee = self.service.calculate(1853.632, ActivityLevel.MODERATE)

        assert tdee == pytest.approx(2873.1296)

    def test_tdee_never_below_bmr(self):
        """Test that every multiplier is at least 1."""
        for level in ActivityLevel:
            assert self.service.calculate(1500.0, level) >= 1500.0

    def test_activity_levels_are_monotonic(self):
        """Test that higher activity gives higher TDEE."""
        values = [self.service.calculate(1800.0, level) for level in ActivityLevel]

        assert values == sorted(values)
