"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Represents user's typical activity level to multiply BMR:
    - SEDENTARY: Little or no exercise
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week (WHO/FAO standard)
    - HIGH: Heavy exercise 6-7 days/week
    - VERY_HIGH: Very heavy exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return PAL_MULTIPLIERS[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        return _DESCRIPTIONS[self]


# Harris-Benedict (1919), Mifflin-St Jeor (1990), WHO/FAO (2001)
PAL_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.HIGH: 1.725,
    ActivityLevel.VERY_HIGH: 1.9,
}

_DESCRIPTIONS = {
    ActivityLevel.SEDENTARY: "Little or no exercise",
    ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
    ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
    ActivityLevel.HIGH: "Heavy exercise 6-7 days/week",
    ActivityLevel.VERY_HIGH: "Very heavy exercise + physical job",
}
