"""WeightRange value object - lower/target/upper body weight in kg."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WeightRange(BaseModel):
    """
    Body weight range derived from BMI bounds.

    Example:
        >>> r = WeightRange.from_bmi_bounds(1.8, lower=20, target=22, upper=24)
        >>> round(r.target, 2)
        71.28
    """

    model_config = ConfigDict(frozen=True)

    lower: float = Field(..., description="Lower bound in kg")
    upper: float = Field(..., description="Upper bound in kg")
    target: float = Field(..., description="Target weight in kg")

    @classmethod
    def from_bmi_bounds(
        cls, height_m: float, lower: float, target: float, upper: float
    ) -> WeightRange:
        """Convert BMI bounds into weights for a height in meters."""
        height_m_squared = height_m * height_m
        return cls(
            lower=lower * height_m_squared,
            upper=upper * height_m_squared,
            target=target * height_m_squared,
        )
