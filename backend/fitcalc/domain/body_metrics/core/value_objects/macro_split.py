"""MacroSplit value object - daily macronutrient distribution."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9
KCAL_PER_G_FIBER = 2


class MacroSplit(BaseModel):
    """Macronutrient distribution in grams and percent of calories.

    Uses calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g, fiber 2 kcal/g.

    Attributes:
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
        fiber_g: Fiber in grams
        protein_pct: Protein share of calories (10-40)
        carbs_pct: Carbohydrate share of calories
        fat_pct: Fat share of calories
        fiber_pct: Fiber share of calories
    """

    model_config = ConfigDict(frozen=True)

    protein_g: int
    carbs_g: int
    fat_g: int
    fiber_g: int
    protein_pct: int = Field(..., ge=10, le=40)
    carbs_pct: int
    fat_pct: int
    fiber_pct: int

    @model_validator(mode="after")
    def _non_negative(self) -> "MacroSplit":
        for name in ("protein_g", "carbs_g", "fat_g", "fiber_g"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        return self

    def total_calories(self) -> float:
        """Calculate total calories from the gram amounts.

        Example:
            >>> split = MacroSplit(
            ...     protein_g=150, carbs_g=200, fat_g=70, fiber_g=30,
            ...     protein_pct=30, carbs_pct=35, fat_pct=30, fiber_pct=5,
            ... )
            >>> split.total_calories()
            2090
        """
        return (
            self.protein_g * KCAL_PER_G_PROTEIN
            + self.carbs_g * KCAL_PER_G_CARBS
            + self.fat_g * KCAL_PER_G_FAT
            + self.fiber_g * KCAL_PER_G_FIBER
        )

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F / {self.fiber_g}Fi"
