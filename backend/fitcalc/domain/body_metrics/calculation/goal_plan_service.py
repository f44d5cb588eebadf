"""GoalPlanService - calorie and macro plan for a selected goal."""

import math
from typing import Optional

from ..core.exceptions.domain_errors import DegenerateMeasurementError
from ..core.value_objects.calculation_result import CalculationResult
from ..core.value_objects.goal import Goal
from ..core.value_objects.goal_plan import GoalPlan, TargetWeightBounds
from ..core.value_objects.macro_split import (
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_FIBER,
    KCAL_PER_G_PROTEIN,
    MacroSplit,
)
from ..core.value_objects.unit_system import UnitSystem
from .protein_service import DEFAULT_GRAMS_PER_KG, ProteinService
from .rounding import round_half_up
from .units import kg_to_lbs

KJ_PER_KCAL = 4.184

# Extra deficit/surplus per 10 kg between current and target weight
LOSS_KCAL_PER_10_KG = 35.0
MAX_EXTRA_DEFICIT = 200.0
GAIN_KCAL_PER_10_KG = 75.0
MAX_EXTRA_SURPLUS = 300.0

MIN_PROTEIN_PCT = 10.0
MAX_PROTEIN_PCT = 40.0

TARGET_WEIGHT_SPAN = 100.0
MIN_LOSS_TARGET_SHARE = 0.7


class GoalPlanService:
    """Turn a current-weight CalculationResult into a goal plan.

    Calories always come from the current body's metabolism. A target
    weight only deepens the deficit (lose) or the surplus (gain) and
    becomes the reference weight for protein.
    """

    def __init__(self, protein_service: Optional[ProteinService] = None) -> None:
        self._protein = protein_service or ProteinService()

    # ═══════════════════════════════════════════════════════════
    # CALORIES
    # ═══════════════════════════════════════════════════════════

    def calorie_target(
        self,
        results: CalculationResult,
        goal: Goal,
        current_weight_kg: float,
        target_weight_kg: Optional[float] = None,
    ) -> float:
        """Daily calories for a goal.

        Lose: slow-loss calories, minus 35 kcal per 10 kg still to lose
        (at most 200), never below BMR. Gain: muscle-gain calories plus
        75 kcal per 10 kg to gain (at most 300). Maintain: TDEE.
        """
        targets = results.calorie_targets

        if goal == Goal.LOSE:
            calories = targets.slow_loss
            if target_weight_kg:
                weight_difference = current_weight_kg - target_weight_kg
                if weight_difference > 0:
                    extra = min(MAX_EXTRA_DEFICIT, weight_difference / 10 * LOSS_KCAL_PER_10_KG)
                    calories = max(calories - extra, results.bmr)
            return calories

        if goal == Goal.GAIN:
            calories = targets.muscle_gain
            if target_weight_kg:
                weight_difference = target_weight_kg - current_weight_kg
                if weight_difference > 0:
                    calories += min(
                        MAX_EXTRA_SURPLUS, weight_difference / 10 * GAIN_KCAL_PER_10_KG
                    )
            return calories

        return targets.maintenance

    # ═══════════════════════════════════════════════════════════
    # MACROS
    # ═══════════════════════════════════════════════════════════

    def macro_split(self, calorie_target: float, protein_g: float, goal: Goal) -> MacroSplit:
        """Distribute calories over protein, carbs, fat and fiber.

        The protein share follows from protein_g and is clamped to
        10-40%; the rest is split over carbs/fat/fiber in the
        proportions of the goal's base distribution.
        """
        protein_pct = protein_g * KCAL_PER_G_PROTEIN / calorie_target * 100
        protein_pct = min(MAX_PROTEIN_PCT, max(MIN_PROTEIN_PCT, protein_pct))
        remaining_pct = 100 - protein_pct

        base = goal.base_macro_distribution()
        non_protein_total = base.non_protein_total()
        carbs_pct = base.carbs / non_protein_total * remaining_pct
        fat_pct = base.fat / non_protein_total * remaining_pct
        fiber_pct = base.fiber / non_protein_total * remaining_pct

        return MacroSplit(
            protein_g=round_half_up(protein_g),
            carbs_g=round_half_up(calorie_target * carbs_pct / 100 / KCAL_PER_G_CARBS),
            fat_g=round_half_up(calorie_target * fat_pct / 100 / KCAL_PER_G_FAT),
            fiber_g=round_half_up(calorie_target * fiber_pct / 100 / KCAL_PER_G_FIBER),
            protein_pct=round_half_up(protein_pct),
            carbs_pct=round_half_up(carbs_pct),
            fat_pct=round_half_up(fat_pct),
            fiber_pct=round_half_up(fiber_pct),
        )

    def plan(
        self,
        results: CalculationResult,
        goal: Goal,
        current_weight_kg: float,
        target_weight_kg: Optional[float] = None,
        protein_setting: float = DEFAULT_GRAMS_PER_KG,
        protein_per_pound: bool = True,
    ) -> GoalPlan:
        """Build the full plan for a goal.

        The target weight is ignored for MAINTAIN.

        Raises:
            DegenerateMeasurementError: If the calorie target is NaN or
                infinite, so macros cannot be given in whole grams
        """
        applied_target = target_weight_kg if goal.allows_target_weight() else None
        reference_weight = applied_target or current_weight_kg

        calories = self.calorie_target(results, goal, current_weight_kg, applied_target)
        if not math.isfinite(calories):
            raise DegenerateMeasurementError(
                "calorie_target", calories, f"Cannot plan macros for calorie_target={calories}"
            )
        protein_g = self._protein.intake_for_target(
            reference_weight, protein_setting, protein_per_pound
        )

        return GoalPlan(
            goal=goal,
            calorie_target=calories,
            kilojoules=round_half_up(calories * KJ_PER_KCAL),
            target_weight_kg=applied_target,
            protein_reference_weight_kg=reference_weight,
            macros=self.macro_split(calories, protein_g, goal),
        )

    # ═══════════════════════════════════════════════════════════
    # TARGET WEIGHT
    # ═══════════════════════════════════════════════════════════

    @staticmethod
    def display_weight(weight_kg: float, unit_system: UnitSystem) -> float:
        """Current weight as shown: whole pounds or kg to one decimal."""
        if unit_system == UnitSystem.IMPERIAL:
            return float(round_half_up(kg_to_lbs(weight_kg)))
        return round_half_up(weight_kg * 10) / 10

    def target_weight_bounds(
        self, current_weight_kg: float, goal: Goal, unit_system: UnitSystem
    ) -> TargetWeightBounds:
        """Allowed target interval in display units.

        Lose: from max(current - 100, 70% of current) up to current.
        Gain: from current up to current + 100. Maintain: ±100.
        """
        current = self.display_weight(current_weight_kg, unit_system)

        if goal == Goal.LOSE:
            lower = max(current - TARGET_WEIGHT_SPAN, current * MIN_LOSS_TARGET_SHARE)
            upper = current
        elif goal == Goal.GAIN:
            lower, upper = current, current + TARGET_WEIGHT_SPAN
        else:
            lower, upper = current - TARGET_WEIGHT_SPAN, current + TARGET_WEIGHT_SPAN

        return TargetWeightBounds(lower=lower, upper=upper, unit=unit_system.weight_unit())

    @staticmethod
    def snap_target_weight(value: float) -> float:
        """Round a typed target to the nearest half unit."""
        return round_half_up(value * 2) / 2
