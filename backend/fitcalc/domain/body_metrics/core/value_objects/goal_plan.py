"""Goal plan value objects - calorie and macro plan for a selected goal."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .goal import Goal
from .macro_split import MacroSplit
from .unit_system import WeightUnit


class TargetWeightBounds(BaseModel):
    """
    Allowed target-weight interval in display units.

    Example:
        >>> bounds = TargetWeightBounds(lower=56.0, upper=80.0, unit=WeightUnit.KG)
        >>> bounds.contains(70.0)
        True
    """

    model_config = ConfigDict(frozen=True)

    lower: float
    upper: float
    unit: WeightUnit

    def contains(self, value: float) -> bool:
        """Valid iff positive and inside the interval (inclusive)."""
        if value <= 0:
            return False
        return self.lower <= value <= self.upper


class GoalPlan(BaseModel):
    """
    Daily nutrition plan for one goal.

    Calories come from the current-weight metabolism; the target weight
    only shifts the deficit/surplus and the protein reference weight.
    """

    model_config = ConfigDict(frozen=True)

    goal: Goal
    calorie_target: float = Field(..., description="kcal/day")
    kilojoules: int = Field(..., description="kJ/day")
    target_weight_kg: Optional[float] = Field(None, description="Applied target weight")
    protein_reference_weight_kg: float
    macros: MacroSplit
