"""CalculationResult value object - complete set of derived metrics."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .bmi import BMIResult
from .calorie_targets import CalorieTargets, WeeklyFatLoss
from .goal_recommendations import GoalRecommendations
from .weight_range import WeightRange
from .whr import WHRResult


class CalculationResult(BaseModel):
    """
    Output of one engine run.

    Produced fresh on every computation and never mutated. A target-weight
    scenario is a second, independent result computed from a profile with
    the weight replaced.

    Attributes:
        bmr: Basal metabolic rate in kcal/day
        tdee: Total daily energy expenditure in kcal/day
        bmi: BMI value and category
        whr: Waist-to-hip ratio, None when waist or hips is unknown
        ideal_weight_range: Weights at BMI 20/22/24
        adonis_weight_range: Athletic weights (BMI 21/23/25 for men)
        body_comp_adjusted_weight: Frame and body-fat sensitive weights
        calorie_targets: Maintenance/loss/gain calories
        weekly_fat_loss: Reference fat loss in lb/week
        water_weight_fluctuation: Expected daily fluctuation in kg
        protein_intake: Protein g/day at the ideal target weight
        goal_recommendations: Goal display bundle
    """

    model_config = ConfigDict(frozen=True)

    bmr: float
    tdee: float
    bmi: BMIResult
    whr: Optional[WHRResult] = None
    ideal_weight_range: WeightRange
    adonis_weight_range: WeightRange
    body_comp_adjusted_weight: WeightRange
    calorie_targets: CalorieTargets
    weekly_fat_loss: WeeklyFatLoss
    water_weight_fluctuation: float = Field(..., description="kg")
    protein_intake: float = Field(..., description="g/day")
    goal_recommendations: GoalRecommendations

    def has_whr(self) -> bool:
        return self.whr is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display/report consumers.

        whr is left out entirely when it was not computed.
        """
        return self.model_dump(exclude_none=True)
