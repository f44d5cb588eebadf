"""GoalRecommendationService - goal display bundle."""

from typing import Optional

from ..core.value_objects.goal_recommendations import GoalRecommendations
from ..core.value_objects.user_profile import UserProfile
from ..core.value_objects.weight_range import WeightRange
from .calorie_service import CalorieTargetService
from .protein_service import ProteinService
from .safety_policy import SafetyPolicy
from .weight_range_service import WeightRangeService


class GoalRecommendationService:
    """Build GoalRecommendations from already computed primary metrics.

    Loss calories go through the same safety chain as the calorie
    targets. Weekly fat loss here is in kg (7700 kcal/kg), measured at
    the safe deficit and at the sustainable deficit.
    """

    def __init__(
        self,
        safety_policy: Optional[SafetyPolicy] = None,
        calorie_service: Optional[CalorieTargetService] = None,
        weight_range_service: Optional[WeightRangeService] = None,
        protein_service: Optional[ProteinService] = None,
    ) -> None:
        self._safety = safety_policy or SafetyPolicy()
        self._calories = calorie_service or CalorieTargetService(self._safety)
        self._ranges = weight_range_service or WeightRangeService()
        self._protein = protein_service or ProteinService()

    def recommend(
        self,
        profile: UserProfile,
        *,
        bmr: float,
        tdee: float,
        bmi: float,
        ideal_weight_range: WeightRange,
        body_comp_adjusted_weight: Optional[WeightRange],
        protein_setting: float,
        protein_per_pound: bool = True,
    ) -> GoalRecommendations:
        """Assemble the goal recommendations for a profile.

        Args:
            profile: User profile the metrics were computed from
            bmr: Basal metabolic rate in kcal/day
            tdee: Total daily energy expenditure in kcal/day
            bmi: Body mass index
            ideal_weight_range: WHO-based weight range
            body_comp_adjusted_weight: Body-composition range, if computed
            protein_setting: Grams of protein per kg (or per lb)
            protein_per_pound: Read protein_setting as grams per pound

        Returns:
            GoalRecommendations: Goal display bundle
        """
        sex, weight_kg = profile.sex, profile.weight_kg

        best_target_weight = self._ranges.best_target_weight(
            ideal_weight_range, body_comp_adjusted_weight
        )
        safe_deficit = self._safety.safe_deficit(bmi, tdee)
        sustainable_deficit = self._safety.sustainable_deficit(safe_deficit)

        return GoalRecommendations(
            ideal_waist_size=self._ranges.ideal_waist_size(profile.height_cm, sex),
            best_target_weight=best_target_weight,
            rapid_weight_loss_calories=self._calories.rapid_weight_loss_calories(
                tdee, sex, weight_kg, bmi, bmr
            ),
            sustainable_weight_loss_calories=self._calories.sustainable_weight_loss_calories(
                tdee, sex, weight_kg, bmi, bmr
            ),
            max_weekly_fat_loss=self._calories.weekly_fat_loss_kg(safe_deficit),
            sustainable_weekly_fat_loss=self._calories.weekly_fat_loss_kg(sustainable_deficit),
            protein_intake_for_target=self._protein.intake_for_target(
                best_target_weight, protein_setting, protein_per_pound
            ),
        )
