"""AssessProfileQuery - validate a profile form and compute its metrics."""

import math
from dataclasses import dataclass
from typing import Optional

import structlog

from fitcalc.application.body_metrics.orchestrators.metrics_orchestrator import (
    MetricsOrchestrator,
)
from fitcalc.domain.body_metrics.calculation.goal_plan_service import GoalPlanService
from fitcalc.domain.body_metrics.calculation.protein_service import DEFAULT_GRAMS_PER_KG
from fitcalc.domain.body_metrics.calculation.units import convert_target_weight_to_kg
from fitcalc.domain.body_metrics.core.value_objects.calculation_result import (
    CalculationResult,
)
from fitcalc.domain.body_metrics.core.value_objects.goal import Goal
from fitcalc.domain.body_metrics.core.value_objects.goal_plan import (
    GoalPlan,
    TargetWeightBounds,
)
from fitcalc.domain.body_metrics.core.value_objects.user_profile import ProfileDraft
from fitcalc.domain.body_metrics.core.value_objects.validation_result import (
    ValidationResult,
)
from fitcalc.domain.body_metrics.validation.profile_validator import ProfileValidator

logger = structlog.get_logger(__name__)


def _is_positive_number(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


@dataclass(frozen=True)
class AssessProfileQuery:
    """Query to assess a profile form.

    Attributes:
        draft: Form state, possibly incomplete
        goal: Selected goal
        target_weight: Target weight in display units (lb for imperial)
        protein_per_kg: Protein setting in g/kg (or g/lb)
        protein_per_pound: Read the protein setting as grams per pound
        measurements_optional: Count circumference errors against validity
    """

    draft: ProfileDraft
    goal: Goal = Goal.MAINTAIN
    target_weight: Optional[float] = None
    protein_per_kg: float = DEFAULT_GRAMS_PER_KG
    protein_per_pound: bool = True
    measurements_optional: bool = True


@dataclass(frozen=True)
class Assessment:
    """Result of AssessProfileQuery.

    Attributes:
        validation: Advisory range-check report (always present)
        results: Metrics at the current weight, None if not computable
        target_results: Metrics at the target weight, if one applies
        goal_plan: Calorie and macro plan for the goal
        target_weight_bounds: Allowed target interval in display units
    """

    validation: ValidationResult
    results: Optional[CalculationResult] = None
    target_results: Optional[CalculationResult] = None
    goal_plan: Optional[GoalPlan] = None
    target_weight_bounds: Optional[TargetWeightBounds] = None

    @property
    def is_computed(self) -> bool:
        return self.results is not None


class AssessProfileQueryHandler:
    """Handler for AssessProfileQuery.

    Validation and computation are independent: an invalid but complete
    profile is still computed.
    """

    def __init__(
        self,
        orchestrator: Optional[MetricsOrchestrator] = None,
        validator: Optional[ProfileValidator] = None,
        goal_plan_service: Optional[GoalPlanService] = None,
    ):
        self._orchestrator = orchestrator or MetricsOrchestrator()
        self._validator = validator or ProfileValidator()
        self._goal_plan_service = goal_plan_service or GoalPlanService()

    def handle(self, query: AssessProfileQuery) -> Assessment:
        """
        Handle profile assessment query.

        Args:
            query: AssessProfileQuery with form state and goal

        Returns:
            Assessment: Validation report plus results when computable
        """
        draft = query.draft
        validation = self._validator.validate(draft, query.measurements_optional)

        if not draft.is_computable():
            logger.debug("Profile not computable", missing=draft.missing_required())
            return Assessment(validation=validation)

        if not validation.is_valid:
            logger.info("Computing profile with out-of-range data", errors=validation.errors)

        profile = draft.to_profile()
        results = self._orchestrator.calculate_all_results(
            profile, query.protein_per_kg, protein_per_pound=query.protein_per_pound
        )
        bounds = self._goal_plan_service.target_weight_bounds(
            profile.weight_kg, query.goal, profile.unit_system
        )

        target_weight_kg = None
        target_results = None
        if query.goal.allows_target_weight() and _is_positive_number(query.target_weight):
            target_weight_kg = convert_target_weight_to_kg(
                query.target_weight, profile.unit_system
            )
            if not bounds.contains(query.target_weight):
                logger.warning(
                    "Target weight outside allowed range",
                    target_weight=query.target_weight,
                    lower=bounds.lower,
                    upper=bounds.upper,
                )
            target_results = self._orchestrator.recalculate_with_target_weight(
                profile,
                target_weight_kg,
                query.protein_per_kg,
                protein_per_pound=query.protein_per_pound,
            )

        goal_plan = self._goal_plan_service.plan(
            results,
            query.goal,
            profile.weight_kg,
            target_weight_kg,
            query.protein_per_kg,
            query.protein_per_pound,
        )

        logger.debug(
            "Assessed profile",
            goal=query.goal.value,
            calorie_target=round(goal_plan.calorie_target),
            has_target=target_results is not None,
        )

        return Assessment(
            validation=validation,
            results=results,
            target_results=target_results,
            goal_plan=goal_plan,
            target_weight_bounds=bounds,
        )
