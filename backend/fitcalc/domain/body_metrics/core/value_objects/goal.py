"""Goal value object - user's body-weight objective."""

from dataclasses import dataclass
from enum import Enum


class Goal(str, Enum):
    """User's goal selecting the calorie target and macro distribution.

    - LOSE: Weight loss from the slow-loss calorie target
    - MAINTAIN: Weight maintenance at TDEE
    - GAIN: Muscle gain from the muscle-gain calorie target (TDEE + 300)
    """

    LOSE = "lose-weight"
    MAINTAIN = "stay-fit"
    GAIN = "gain-muscles"

    def allows_target_weight(self) -> bool:
        """Whether a target weight takes part in the goal plan.

        Example:
            >>> Goal.MAINTAIN.allows_target_weight()
            False
        """
        return self is not Goal.MAINTAIN

    def base_macro_distribution(self) -> "MacroDistribution":
        """Get base percentages of protein/carbs/fat/fiber.

        Returns:
            MacroDistribution: Percentages summing to 100

        Example:
            >>> Goal.LOSE.base_macro_distribution().protein
            30
        """
        return _MACRO_DISTRIBUTIONS[self]


@dataclass(frozen=True)
class MacroDistribution:
    """Base macro percentages for a goal, before protein rescaling."""

    protein: int
    carbs: int
    fat: int
    fiber: int

    def non_protein_total(self) -> int:
        return self.carbs + self.fat + self.fiber


_MACRO_DISTRIBUTIONS = {
    Goal.LOSE: MacroDistribution(protein=30, carbs=35, fat=30, fiber=5),  # satiety
    Goal.GAIN: MacroDistribution(protein=25, carbs=45, fat=25, fiber=5),  # energy
    Goal.MAINTAIN: MacroDistribution(protein=20, carbs=50, fat=25, fiber=5),
}
