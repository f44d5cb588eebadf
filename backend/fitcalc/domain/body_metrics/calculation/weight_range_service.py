"""WeightRangeService - healthy, athletic and body-composition weight ranges."""

from typing import Optional

from ..core.exceptions.domain_errors import DegenerateMeasurementError
from ..core.value_objects.sex import Sex
from ..core.value_objects.weight_range import WeightRange

# BMI bounds as (lower, target, upper)
IDEAL_BMI_BOUNDS = (20.0, 22.0, 24.0)
ADONIS_BMI_BOUNDS = {
    Sex.MALE: (21.0, 23.0, 25.0),
    Sex.FEMALE: (20.0, 22.0, 24.0),
}

BODY_COMP_BASE_BMI = {Sex.MALE: 22.5, Sex.FEMALE: 21.5}
OPTIMAL_BODY_FAT = {Sex.MALE: 15.0, Sex.FEMALE: 23.0}  # ACSM
BMI_PER_BODY_FAT_POINT = 0.1  # Gallagher et al. 2000
AVERAGE_SHOULDER_TO_HEIGHT = 0.26
FRAME_BMI_FACTOR = 10.0
BODY_COMP_BMI_MIN = 18.5
BODY_COMP_BMI_MAX = 28.0
BODY_COMP_BMI_SPREAD = 1.5

WAIST_TO_HEIGHT_RATIO = 0.5  # Ashwell & Hsieh 2005


class WeightRangeService:
    """Derive target weight ranges from height, sex and body composition.

    Every range is a BMI interval scaled by height(m)^2.
    """

    def ideal_weight_range(self, height_cm: float) -> WeightRange:
        """WHO-based range at BMI 20/22/24, independent of sex."""
        lower, target, upper = IDEAL_BMI_BOUNDS
        return WeightRange.from_bmi_bounds(height_cm / 100, lower, target, upper)

    def adonis_weight_range(self, height_cm: float, sex: Sex = Sex.MALE) -> WeightRange:
        """Athletic-build range: BMI 21/23/25 for men, 20/22/24 for women."""
        lower, target, upper = ADONIS_BMI_BOUNDS[sex]
        return WeightRange.from_bmi_bounds(height_cm / 100, lower, target, upper)

    def body_comp_adjusted_weight(
        self,
        height_cm: float,
        sex: Sex = Sex.MALE,
        body_fat_percent: Optional[float] = None,
        shoulder_cm: Optional[float] = None,
    ) -> WeightRange:
        """Range around a BMI adjusted for body fat and frame size.

        The base BMI (22.5 men, 21.5 women) moves by -0.1 per body fat
        point above the ACSM optimum (15% men, 23% women). For men a
        shoulder measurement adds (shoulder/height - 0.26) × 10. The
        result is clamped to [18.5, 28] and the range spans ±1.5 BMI
        points around it.

        Raises:
            DegenerateMeasurementError: If a shoulder measurement is given
                for a man and height is zero
        """
        base_bmi = BODY_COMP_BASE_BMI[sex]

        if body_fat_percent is not None:
            body_fat_diff = body_fat_percent - OPTIMAL_BODY_FAT[sex]
            base_bmi += -body_fat_diff * BMI_PER_BODY_FAT_POINT

        if shoulder_cm is not None and sex == Sex.MALE:
            if height_cm == 0:
                raise DegenerateMeasurementError("height_cm", height_cm)
            ratio = shoulder_cm / height_cm
            base_bmi += (ratio - AVERAGE_SHOULDER_TO_HEIGHT) * FRAME_BMI_FACTOR

        base_bmi = max(BODY_COMP_BMI_MIN, min(BODY_COMP_BMI_MAX, base_bmi))

        return WeightRange.from_bmi_bounds(
            height_cm / 100,
            base_bmi - BODY_COMP_BMI_SPREAD,
            base_bmi,
            base_bmi + BODY_COMP_BMI_SPREAD,
        )

    def ideal_waist_size(self, height_cm: float, sex: Sex = Sex.MALE) -> float:
        """Waist in cm at a 0.5 waist-to-height ratio.

        The ratio is a universal standard; sex does not change it.
        """
        return height_cm * WAIST_TO_HEIGHT_RATIO

    @staticmethod
    def best_target_weight(
        ideal_weight_range: WeightRange,
        body_comp_adjusted_weight: Optional[WeightRange] = None,
    ) -> float:
        """Body-composition target when available, else the ideal target."""
        if body_comp_adjusted_weight is not None:
            return body_comp_adjusted_weight.target
        return ideal_weight_range.target
