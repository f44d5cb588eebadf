"""BMRService - Basal Metabolic Rate calculation."""

from typing import Optional

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.sex import Sex
from ..core.value_objects.user_profile import UserProfile


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate.

    Exactly one of two formulas fires per profile:

    Katch-McArdle (body fat known, > 0):
        LBM = weight(kg) × (1 - body_fat / 100)
        BMR = 370 + 21.6 × LBM

    Mifflin-St Jeor (otherwise), sex-specific coefficients:
        Men:   BMR = 88.362 + 13.397 × weight + 4.799 × height - 5.677 × age
        Women: BMR = 447.593 + 9.247 × weight + 3.098 × height - 4.33 × age

    The sex-specific coefficients are those of the revised Harris-Benedict
    equation (Roza & Shizgal 1984). No clamping happens here.
    """

    def calculate(self, profile: UserProfile) -> float:
        """Calculate BMR from a user profile.

        Args:
            profile: User anthropometric data

        Returns:
            float: Basal metabolic rate in kcal/day

        Example:
            >>> service = BMRService()
            >>> profile = UserProfile(
            ...     sex=Sex.MALE, age=30, height_cm=180.0, weight_kg=80.0,
            ...     activity_level=ActivityLevel.MODERATE,
            ... )
            >>> round(service.calculate(profile), 1)
            1853.6
        """
        return self.calculate_from(
            sex=profile.sex,
            weight_kg=profile.weight_kg,
            height_cm=profile.height_cm,
            age=profile.age,
            body_fat_percent=profile.body_fat_percent,
        )

    def calculate_from(
        self,
        sex: Sex,
        weight_kg: float,
        height_cm: float,
        age: float,
        body_fat_percent: Optional[float] = None,
    ) -> float:
        """Calculate BMR from raw measurements."""
        if self.uses_lean_mass(body_fat_percent):
            return self.katch_mcardle(weight_kg, body_fat_percent)
        return self.mifflin_st_jeor(sex, weight_kg, height_cm, age)

    @staticmethod
    def uses_lean_mass(body_fat_percent: Optional[float]) -> bool:
        """Body fat of 0 counts as unknown."""
        return body_fat_percent is not None and body_fat_percent > 0

    @staticmethod
    def katch_mcardle(weight_kg: float, body_fat_percent: float) -> float:
        lean_body_mass = weight_kg * (1 - body_fat_percent / 100)
        return 370 + 21.6 * lean_body_mass

    @staticmethod
    def mifflin_st_jeor(sex: Sex, weight_kg: float, height_cm: float, age: float) -> float:
        if sex == Sex.MALE:
            return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
        return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.33 * age
