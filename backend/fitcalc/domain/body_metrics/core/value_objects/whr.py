"""WHR value objects - waist-to-hip ratio and fat-distribution type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WHRCategory(str, Enum):
    """Fat-distribution body types, ordered by increasing ratio."""

    PERIPHERAL = "Peripheral Body Type"
    BALANCED = "Balanced Character Type"
    CENTRAL = "Central Character Type"
    RISKY = "Risky Character Type"

    @property
    def band(self) -> "WHRBand":
        return WHR_BANDS[self]


@dataclass(frozen=True)
class WHRBand:
    """Inclusive upper bound of a WHR band plus its presentation hints.

    upper_bound is None for the open-ended last band.
    """

    upper_bound: float | None
    description: str
    image_index: int


WHR_BANDS = {
    WHRCategory.PERIPHERAL: WHRBand(
        upper_bound=0.85,
        description=(
            "Fat accumulates in your body especially on your hips and buttocks. "
            "It does not pose a major health risk. This body type is primarily "
            "determined by genetics."
        ),
        image_index=0,
    ),
    WHRCategory.BALANCED: WHRBand(
        upper_bound=0.90,
        description=(
            "Fat in your body accumulates evenly. From a health point of view "
            "(in relation to the distribution of fat on the body), this body type "
            "is considered ideal and there is no greater risk of health "
            "complications."
        ),
        image_index=1,
    ),
    WHRCategory.CENTRAL: WHRBand(
        upper_bound=0.94,
        description=(
            "Fat accumulates in your abdomen to a greater extent. Even if the waist "
            "circumference is smaller than the hip circumference, there is an "
            "increased risk of health conditions."
        ),
        image_index=2,
    ),
    WHRCategory.RISKY: WHRBand(
        upper_bound=None,
        description=(
            "You have excess fat reserves in the abdominal area. Apple-type obesity "
            "is a risk factor for cardiovascular disease, stroke, high blood "
            "pressure or type 2 diabetes."
        ),
        image_index=3,
    ),
}


class WHRResult(BaseModel):
    """
    Waist-to-hip ratio with its category and presentation hints.

    Only produced when both waist and hips are known.
    """

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Waist / hips ratio")
    category: str = Field(..., description="Body type label")
    description: str = Field(..., description="Body type explanation")
    image_index: int = Field(..., ge=0, le=3, description="Illustration index")

    @classmethod
    def from_category(cls, value: float, category: WHRCategory) -> WHRResult:
        band = category.band
        return cls(
            value=value,
            category=category.value,
            description=band.description,
            image_index=band.image_index,
        )
