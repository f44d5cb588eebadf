"""SafetyPolicy - guards that keep calorie recommendations safe.

Guard order for every loss recommendation:
    1. deficit clamped to [500, 1000] kcal (NIH guideline)
    2. calories floored at the size/sex minimum
    3. calories floored at 90% of BMR (always last)
"""

from ..core.value_objects.sex import Sex
from .rounding import round_half_up

BASE_MINIMUM_CALORIES = {Sex.MALE: 1500.0, Sex.FEMALE: 1200.0}
ABSOLUTE_MINIMUM_CALORIES = {Sex.MALE: 1400.0, Sex.FEMALE: 1100.0}
REFERENCE_WEIGHT_KG = 70.0
CALORIES_PER_KG_ABOVE_REFERENCE = 5.0

# (exclusive BMI upper bound, fraction of TDEE); BMI >= 35 falls through
DEFICIT_BANDS = (
    (18.5, 0.05),  # underweight, medical supervision recommended
    (25.0, 0.15),
    (30.0, 0.20),
    (35.0, 0.25),
)
SEVERE_OBESITY_DEFICIT = 0.30
MIN_DEFICIT = 500
MAX_DEFICIT = 1000

SUSTAINABLE_DEFICIT_CAP = 400.0
SUSTAINABLE_DEFICIT_SHARE = 0.8

BMR_FLOOR_SHARE = 0.9


class SafetyPolicy:
    """Safe minimum calories, safe deficit and BMR floor."""

    def safe_minimum_calories(self, sex: Sex, weight_kg: float = REFERENCE_WEIGHT_KG) -> float:
        """Lowest daily calories recommended for this body size.

        Base 1500 (men) / 1200 (women), plus 5 kcal per kg above 70 kg,
        never below 1400 (men) / 1100 (women).

        Example:
            >>> SafetyPolicy().safe_minimum_calories(Sex.MALE, 90.0)
            1600.0
        """
        size_adjustment = max(
            0.0, (weight_kg - REFERENCE_WEIGHT_KG) * CALORIES_PER_KG_ABOVE_REFERENCE
        )
        return max(BASE_MINIMUM_CALORIES[sex] + size_adjustment, ABSOLUTE_MINIMUM_CALORIES[sex])

    def deficit_percentage(self, bmi: float) -> float:
        """Fraction of TDEE to cut for a BMI band."""
        for upper_bound, percentage in DEFICIT_BANDS:
            if bmi < upper_bound:
                return percentage
        return SEVERE_OBESITY_DEFICIT

    def safe_deficit(self, bmi: float, tdee: float) -> int:
        """Daily deficit in kcal, always within [500, 1000].

        Example:
            >>> SafetyPolicy().safe_deficit(24.69, 2873.1)
            500
        """
        percentage_deficit = round_half_up(tdee * self.deficit_percentage(bmi))
        return max(MIN_DEFICIT, min(MAX_DEFICIT, percentage_deficit))

    def sustainable_deficit(self, safe_deficit: float) -> float:
        """80% of the safe deficit, capped at 400 kcal."""
        return min(SUSTAINABLE_DEFICIT_CAP, safe_deficit * SUSTAINABLE_DEFICIT_SHARE)

    def ensure_above_bmr(self, calories: float, bmr: float) -> float:
        """Never return less than 90% of BMR."""
        return max(calories, bmr * BMR_FLOOR_SHARE)

    def guarded_calories(
        self, tdee: float, deficit: float, sex: Sex, weight_kg: float, bmr: float
    ) -> float:
        """Apply a deficit, then the size/sex minimum, then the BMR floor."""
        calories = max(self.safe_minimum_calories(sex, weight_kg), tdee - deficit)
        return self.ensure_above_bmr(calories, bmr)
