"""MetricsOrchestrator - coordinates body metrics calculation services."""

from typing import Optional

import structlog

from fitcalc.domain.body_metrics.calculation.bmi_service import BMIService
from fitcalc.domain.body_metrics.calculation.bmr_service import BMRService
from fitcalc.domain.body_metrics.calculation.calorie_service import (
    CalorieTargetService,
)
from fitcalc.domain.body_metrics.calculation.goal_recommendation_service import (
    GoalRecommendationService,
)
from fitcalc.domain.body_metrics.calculation.protein_service import (
    DEFAULT_GRAMS_PER_KG,
    ProteinService,
)
from fitcalc.domain.body_metrics.calculation.safety_policy import SafetyPolicy
from fitcalc.domain.body_metrics.calculation.tdee_service import TDEEService
from fitcalc.domain.body_metrics.calculation.weight_range_service import (
    WeightRangeService,
)
from fitcalc.domain.body_metrics.calculation.whr_service import WHRService
from fitcalc.domain.body_metrics.core.ports.calculators import (
    IBMRCalculator,
    ITDEECalculator,
)
from fitcalc.domain.body_metrics.core.value_objects.calculation_result import (
    CalculationResult,
)
from fitcalc.domain.body_metrics.core.value_objects.user_profile import UserProfile

logger = structlog.get_logger(__name__)


class MetricsOrchestrator:
    """
    Orchestrates calculation services into one CalculationResult.

    Flow:
    1. BMR from the profile (Katch-McArdle or Mifflin-St Jeor)
    2. BMI and its category
    3. TDEE from BMR and activity level
    4. Ideal, athletic and body-composition weight ranges
    5. Guarded calorie targets
    6. WHR (only with waist and hips)
    7. Goal recommendations

    Holds no state between calls; every call builds a fresh result.
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        bmi_service: Optional[BMIService] = None,
        whr_service: Optional[WHRService] = None,
        weight_range_service: Optional[WeightRangeService] = None,
        safety_policy: Optional[SafetyPolicy] = None,
        calorie_service: Optional[CalorieTargetService] = None,
        protein_service: Optional[ProteinService] = None,
        goal_service: Optional[GoalRecommendationService] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._bmi_service = bmi_service or BMIService()
        self._whr_service = whr_service or WHRService()
        self._weight_range_service = weight_range_service or WeightRangeService()
        safety_policy = safety_policy or SafetyPolicy()
        self._calorie_service = calorie_service or CalorieTargetService(safety_policy)
        self._protein_service = protein_service or ProteinService()
        self._goal_service = goal_service or GoalRecommendationService(
            safety_policy=safety_policy,
            calorie_service=self._calorie_service,
            weight_range_service=self._weight_range_service,
            protein_service=self._protein_service,
        )

    def calculate_all_results(
        self,
        profile: UserProfile,
        protein_per_kg: float = DEFAULT_GRAMS_PER_KG,
        *,
        protein_per_pound: bool = True,
    ) -> CalculationResult:
        """
        Calculate every derived metric for a profile.

        Optional body fat and measurements only switch formula branches
        or omit WHR. Age, height and weight must be present; callers gate
        on that (see ProfileDraft.is_computable).

        Args:
            profile: User profile in metric units
            protein_per_kg: Protein setting in grams per kg (or per lb)
            protein_per_pound: Read the setting as grams per pound for
                the goal protein target

        Returns:
            CalculationResult with all computed metrics

        Raises:
            DegenerateMeasurementError: If height is zero
        """
        # Step 1: BMR (basal metabolic rate)
        bmr = self._bmr_service.calculate(profile)

        # Step 2: BMI
        bmi = self._bmi_service.assess(profile.weight_kg, profile.height_cm)

        # Step 3: TDEE (total daily energy expenditure)
        tdee = self._tdee_service.calculate(bmr, profile.activity_level)

        # Step 4: Weight ranges
        ideal_weight_range = self._weight_range_service.ideal_weight_range(profile.height_cm)
        adonis_weight_range = self._weight_range_service.adonis_weight_range(
            profile.height_cm, profile.sex
        )
        body_comp_adjusted_weight = self._weight_range_service.body_comp_adjusted_weight(
            profile.height_cm,
            profile.sex,
            profile.body_fat_percent,
            profile.measurements.shoulder_cm,
        )

        # Step 5: Calorie targets
        calorie_targets = self._calorie_service.calorie_targets(
            tdee, profile.sex, profile.weight_kg, bmi.value, bmr
        )

        # Step 6: WHR (independent branch)
        whr = self._whr_service.assess(profile.measurements, profile.sex)

        # Step 7: Goal recommendations
        goal_recommendations = self._goal_service.recommend(
            profile,
            bmr=bmr,
            tdee=tdee,
            bmi=bmi.value,
            ideal_weight_range=ideal_weight_range,
            body_comp_adjusted_weight=body_comp_adjusted_weight,
            protein_setting=protein_per_kg,
            protein_per_pound=protein_per_pound,
        )

        logger.debug(
            "Calculated body metrics",
            bmr=round(bmr, 1),
            tdee=round(tdee, 1),
            bmi=round(bmi.value, 2),
            bmi_category=bmi.category,
            has_whr=whr is not None,
        )

        return CalculationResult(
            bmr=bmr,
            tdee=tdee,
            bmi=bmi,
            whr=whr,
            ideal_weight_range=ideal_weight_range,
            adonis_weight_range=adonis_weight_range,
            body_comp_adjusted_weight=body_comp_adjusted_weight,
            calorie_targets=calorie_targets,
            weekly_fat_loss=self._calorie_service.reference_weekly_fat_loss(),
            water_weight_fluctuation=self._calorie_service.water_weight_fluctuation(
                profile.weight_kg
            ),
            protein_intake=self._protein_service.legacy_intake(
                ideal_weight_range.target, protein_per_kg
            ),
            goal_recommendations=goal_recommendations,
        )

    def recalculate_with_target_weight(
        self,
        profile: UserProfile,
        target_weight_kg: float,
        protein_per_kg: float = DEFAULT_GRAMS_PER_KG,
        *,
        protein_per_pound: bool = True,
    ) -> CalculationResult:
        """
        Re-run the full calculation with the weight replaced.

        No partial recomputation: the result is identical to
        calculate_all_results on a profile carrying the target weight.
        """
        logger.debug(
            "Recalculating for target weight",
            current_weight_kg=profile.weight_kg,
            target_weight_kg=target_weight_kg,
        )
        return self.calculate_all_results(
            profile.with_weight(target_weight_kg),
            protein_per_kg,
            protein_per_pound=protein_per_pound,
        )


_default_orchestrator = MetricsOrchestrator()


def calculate_all_results(
    profile: UserProfile,
    protein_per_kg: float = DEFAULT_GRAMS_PER_KG,
    *,
    protein_per_pound: bool = True,
) -> CalculationResult:
    """Calculate every derived metric with the default services."""
    return _default_orchestrator.calculate_all_results(
        profile, protein_per_kg, protein_per_pound=protein_per_pound
    )


def recalculate_with_target_weight(
    profile: UserProfile,
    target_weight_kg: float,
    protein_per_kg: float = DEFAULT_GRAMS_PER_KG,
    *,
    protein_per_pound: bool = True,
) -> CalculationResult:
    """Recalculate every metric for a target weight with the default services."""
    return _default_orchestrator.recalculate_with_target_weight(
        profile, target_weight_kg, protein_per_kg, protein_per_pound=protein_per_pound
    )
