"""BMI value objects - Body Mass Index and its WHO category."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BMICategory(str, Enum):
    """WHO BMI categories, ordered from lowest to highest band."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE_I = "Obese I"
    OBESE_II = "Obese II"
    OBESE_III = "Obese III"

    @property
    def position(self) -> int:
        """Position of the category in the band table (0-5)."""
        return list(BMICategory).index(self)

    @property
    def band(self) -> tuple[float, float]:
        """Half-open [lower, upper) BMI band of the category."""
        return BMI_BANDS[self]

    def contains(self, bmi: float) -> bool:
        lower, upper = self.band
        return lower <= bmi < upper


BMI_BANDS = {
    BMICategory.UNDERWEIGHT: (0.0, 18.5),
    BMICategory.NORMAL: (18.5, 25.0),
    BMICategory.OVERWEIGHT: (25.0, 30.0),
    BMICategory.OBESE_I: (30.0, 35.0),
    BMICategory.OBESE_II: (35.0, 40.0),
    BMICategory.OBESE_III: (40.0, 100.0),
}


class BMIResult(BaseModel):
    """
    BMI value with its category label and index.

    Example:
        >>> BMIResult.from_category(24.69, BMICategory.NORMAL).category
        'Normal weight'
    """

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="BMI in kg/m^2")
    category: str = Field(..., description="Category label")
    category_index: int = Field(..., ge=0, le=5, description="Band index")

    @classmethod
    def from_category(cls, value: float, category: BMICategory) -> BMIResult:
        return cls(value=value, category=category.value, category_index=category.position)
