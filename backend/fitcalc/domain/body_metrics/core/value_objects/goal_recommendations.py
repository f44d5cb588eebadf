"""GoalRecommendations value object - goal-specific targets."""

from pydantic import BaseModel, ConfigDict, Field


class GoalRecommendations(BaseModel):
    """
    Goal-specific targets bundled for the goal display.

    Attributes:
        ideal_waist_size: Waist in cm at a 0.5 waist-to-height ratio
        best_target_weight: Single recommended weight in kg
        rapid_weight_loss_calories: Guarded calories at the safe deficit
        sustainable_weight_loss_calories: Guarded calories at the sustainable deficit
        max_weekly_fat_loss: kg/week at the safe deficit (7700 kcal per kg)
        sustainable_weekly_fat_loss: kg/week at the sustainable deficit
        protein_intake_for_target: Protein grams/day for best_target_weight
    """

    model_config = ConfigDict(frozen=True)

    ideal_waist_size: float
    best_target_weight: float
    rapid_weight_loss_calories: float
    sustainable_weight_loss_calories: float
    max_weekly_fat_loss: float = Field(..., description="kg/week")
    sustainable_weekly_fat_loss: float = Field(..., description="kg/week")
    protein_intake_for_target: float = Field(..., description="g/day")
