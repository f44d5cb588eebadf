"""Unit tests for BMIService and WHRService."""

import pytest

from fitcalc.domain.body_metrics.calculation.bmi_service import BMIService
from fitcalc.domain.body_metrics.calculation.whr_service import WHRService
from fitcalc.domain.body_metrics.core.exceptions import DegenerateMeasurementError
from fitcalc.domain.body_metrics.core.value_objects import (
    BMICategory,
    Measurements,
    Sex,
    WHRCategory,
)


class TestBMIService:
    """Test BMI calculation and WHO categories."""

    def setup_method(self):
        self.service = BMIService()

    def test_calculate_bmi(self):
        """Test BMI = kg / m²."""
        assert self.service.calculate(80.0, 180.0) == pytest.approx(24.691358, rel=1e-6)

    def test_assess_returns_category_and_index(self):
        """Test assessed BMI carries label and band index."""
        result = self.service.assess(80.0, 180.0)

        assert result.category == "Normal weight"
        assert result.category_index == 1

    @pytest.mark.parametrize(
        "bmi,expected",
        [
            (0.0, BMICategory.UNDERWEIGHT),
            (18.49, BMICategory.UNDERWEIGHT),
            (18.5, BMICategory.NORMAL),
            (24.99, BMICategory.NORMAL),
            (25.0, BMICategory.OVERWEIGHT),
            (30.0, BMICategory.OBESE_I),
            (35.0, BMICategory.OBESE_II),
            (40.0, BMICategory.OBESE_III),
            (99.9, BMICategory.OBESE_III),
        ],
    )
    def test_band_boundaries_are_half_open(self, bmi, expected):
        """Test that each band includes its lower bound only."""
        assert self.service.categorize(bmi) == expected

    @pytest.mark.parametrize("bmi", [100.0, 250.0, -1.0])
    def test_out_of_table_falls_back_to_obese_iii(self, bmi):
        """Test fallback for values outside every band."""
        assert self.service.categorize(bmi) == BMICategory.OBESE_III

    def test_category_positions_match_table_order(self):
        """Test category_index for every category."""
        assert [c.position for c in BMICategory] == [0, 1, 2, 3, 4, 5]

    def test_zero_height_raises(self):
        """Test division by zero height is reported as a domain error."""
        with pytest.raises(DegenerateMeasurementError, match="height_cm"):
            self.service.calculate(80.0, 0.0)

    def test_negative_weight_flows_through(self):
        """Test that out-of-range input is not clamped."""
        assert self.service.calculate(-80.0, 200.0) == pytest.approx(-20.0)


class TestWHRService:
    """Test waist-to-hip ratio and fat-distribution type."""

    def setup_method(self):
        self.service = WHRService()

    @pytest.mark.parametrize(
        "whr,expected",
        [
            (0.80, WHRCategory.PERIPHERAL),
            (0.85, WHRCategory.PERIPHERAL),
            (0.86, WHRCategory.BALANCED),
            (0.90, WHRCategory.BALANCED),
            (0.94, WHRCategory.CENTRAL),
            (0.95, WHRCategory.RISKY),
            (1.20, WHRCategory.RISKY),
        ],
    )
    def test_thresholds_are_inclusive_upper_bounds(self, whr, expected):
        """Test WHR band boundaries."""
        assert self.service.categorize(whr, Sex.MALE) == expected

    def test_thresholds_do_not_depend_on_sex(self):
        """Test that both sexes share the same bands."""
        for whr in (0.7, 0.88, 0.92, 1.0):
            assert self.service.categorize(whr, Sex.MALE) == self.service.categorize(
                whr, Sex.FEMALE
            )

    def test_assess_with_waist_and_hips(self):
        """Test WHR result carries description and image index."""
        result = self.service.assess(Measurements(waist_cm=92.0, hips_cm=110.0), Sex.FEMALE)

        assert result is not None
        assert result.value == pytest.approx(0.836364, rel=1e-5)
        assert result.category == "Peripheral Body Type"
        assert result.image_index == 0
        assert result.description.startswith("Fat accumulates in your body")

    @pytest.mark.parametrize(
        "measurements",
        [
            Measurements(),
            Measurements(waist_cm=80.0),
            Measurements(hips_cm=100.0),
            Measurements(waist_cm=0.0, hips_cm=100.0),
            Measurements(waist_cm=80.0, hips_cm=0.0),
        ],
    )
    def test_assess_absent_without_both_measurements(self, measurements):
        """Test WHR is None unless waist and hips are both known."""
        assert self.service.assess(measurements, Sex.MALE) is None

    def test_zero_hips_raises(self):
        """Test direct division by zero hips."""
        with pytest.raises(DegenerateMeasurementError, match="hips_cm"):
            self.service.calculate(80.0, 0.0)
