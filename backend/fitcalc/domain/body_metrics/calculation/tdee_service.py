"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by Physical Activity Level (PAL) multiplier.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2 (little/no exercise)
        - Light: 1.375 (light exercise 1-3 days/week)
        - Moderate: 1.55 (moderate exercise 3-5 days/week)
        - High: 1.725 (heavy exercise 6-7 days/week)
        - Very High: 1.9 (very heavy exercise + physical job)
    """

    def calculate(self, bmr: float, activity_level: ActivityLevel) -> float:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate in kcal/day
            activity_level: Physical activity level

        Returns:
            float: Total daily energy expenditure in kcal/day

        Example:
            >>> service = TDEEService()
            >>> service.calculate(2000.0, ActivityLevel.MODERATE)
            3100.0
        """
        return bmr * activity_level.pal_multiplier()
