"""CalorieTargetService - calorie targets, fat-loss projections, water weight."""

from ..core.value_objects.calorie_targets import CalorieTargets, WeeklyFatLoss
from ..core.value_objects.sex import Sex
from .safety_policy import SafetyPolicy

# Two fat-energy constants coexist on purpose: weekly_fat_loss is reported
# in pounds, goal recommendations in kilograms.
KCAL_PER_LB_FAT = 3500.0
KCAL_PER_KG_FAT = 7700.0
DAYS_PER_WEEK = 7

MUSCLE_GAIN_SURPLUS = 300.0
RAPID_REFERENCE_DEFICIT = 700.0
SLOW_REFERENCE_DEFICIT = 400.0
WATER_FLUCTUATION_SHARE = 0.015


class CalorieTargetService:
    """Combine TDEE with the safety policy into daily calorie targets.

    Rapid loss:   TDEE - safe deficit
    Slow loss:    TDEE - min(400, 0.8 × safe deficit)
    Both pass the size/sex minimum first and the BMR floor last.
    Muscle gain:  TDEE + 300
    """

    def __init__(self, safety_policy: SafetyPolicy | None = None) -> None:
        self._safety = safety_policy or SafetyPolicy()

    def calorie_targets(
        self, tdee: float, sex: Sex, weight_kg: float, bmi: float, bmr: float
    ) -> CalorieTargets:
        """Calculate maintenance, loss and gain targets in kcal/day."""
        return CalorieTargets(
            maintenance=tdee,
            rapid_loss=self.rapid_weight_loss_calories(tdee, sex, weight_kg, bmi, bmr),
            slow_loss=self.sustainable_weight_loss_calories(tdee, sex, weight_kg, bmi, bmr),
            muscle_gain=tdee + MUSCLE_GAIN_SURPLUS,
        )

    def rapid_weight_loss_calories(
        self, tdee: float, sex: Sex, weight_kg: float, bmi: float, bmr: float
    ) -> float:
        deficit = self._safety.safe_deficit(bmi, tdee)
        return self._safety.guarded_calories(tdee, deficit, sex, weight_kg, bmr)

    def sustainable_weight_loss_calories(
        self, tdee: float, sex: Sex, weight_kg: float, bmi: float, bmr: float
    ) -> float:
        deficit = self._safety.sustainable_deficit(self._safety.safe_deficit(bmi, tdee))
        return self._safety.guarded_calories(tdee, deficit, sex, weight_kg, bmr)

    @staticmethod
    def weekly_fat_loss_lbs(daily_deficit: float) -> float:
        """Pounds of fat lost per week at a daily deficit (3500 kcal/lb)."""
        return daily_deficit * DAYS_PER_WEEK / KCAL_PER_LB_FAT

    @staticmethod
    def weekly_fat_loss_kg(daily_deficit: float) -> float:
        """Kilograms of fat lost per week at a daily deficit (7700 kcal/kg)."""
        return daily_deficit * DAYS_PER_WEEK / KCAL_PER_KG_FAT

    def reference_weekly_fat_loss(self) -> WeeklyFatLoss:
        """Weekly fat loss in lb at the 700/400 kcal reference deficits."""
        return WeeklyFatLoss(
            rapid=self.weekly_fat_loss_lbs(RAPID_REFERENCE_DEFICIT),
            slow=self.weekly_fat_loss_lbs(SLOW_REFERENCE_DEFICIT),
        )

    @staticmethod
    def water_weight_fluctuation(weight_kg: float) -> float:
        """Typical daily water-weight swing, 1.5% of body weight."""
        return weight_kg * WATER_FLUCTUATION_SHARE
