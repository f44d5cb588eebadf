"""Calculator ports - interfaces for BMR/TDEE calculations."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.user_profile import UserProfile


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate from the user profile.
    """

    @abstractmethod
    def calculate(self, profile: UserProfile) -> float:
        """Calculate BMR from a user profile.

        Args:
            profile: User anthropometric data

        Returns:
            float: Basal metabolic rate in kcal/day
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: float, activity_level: ActivityLevel) -> float:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate in kcal/day
            activity_level: Physical activity level

        Returns:
            float: Total daily energy expenditure in kcal/day
        """
        pass
