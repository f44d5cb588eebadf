"""Calorie target value objects - daily calories and weekly fat loss."""

from pydantic import BaseModel, ConfigDict, Field


class CalorieTargets(BaseModel):
    """Daily calorie targets in kcal/day.

    rapid_loss and slow_loss have already passed the safety chain
    (size/sex minimum first, BMR floor last).
    """

    model_config = ConfigDict(frozen=True)

    maintenance: float = Field(..., description="TDEE")
    rapid_loss: float = Field(..., description="Guarded TDEE - safe deficit")
    slow_loss: float = Field(..., description="Guarded TDEE - sustainable deficit")
    muscle_gain: float = Field(..., description="TDEE + surplus")


class WeeklyFatLoss(BaseModel):
    """Reference weekly fat loss in pounds (3500 kcal per lb of fat)."""

    model_config = ConfigDict(frozen=True)

    rapid: float
    slow: float
