"""ProteinService - daily protein recommendations."""

from .units import kg_to_lbs

DEFAULT_GRAMS_PER_KG = 0.8
DEFAULT_GRAMS_PER_LB = 0.8
MIN_PROTEIN_SETTING = 0.1
MAX_PROTEIN_SETTING = 5.0


class ProteinService:
    """Protein grams per day from a reference weight and a g/kg or g/lb setting."""

    @staticmethod
    def per_kg(target_weight_kg: float, grams_per_kg: float = DEFAULT_GRAMS_PER_KG) -> float:
        return target_weight_kg * grams_per_kg

    @staticmethod
    def per_lb(target_weight_lbs: float, grams_per_lb: float = DEFAULT_GRAMS_PER_LB) -> float:
        return target_weight_lbs * grams_per_lb

    def legacy_intake(
        self, ideal_target_weight_kg: float, protein_per_kg: float = DEFAULT_GRAMS_PER_KG
    ) -> float:
        """Single protein figure against the ideal-range target weight."""
        return self.per_kg(ideal_target_weight_kg, protein_per_kg)

    def intake_for_target(
        self,
        target_weight_kg: float,
        protein_setting: float = DEFAULT_GRAMS_PER_KG,
        per_pound: bool = True,
    ) -> float:
        """Protein for a target weight.

        With per_pound the weight is converted to pounds first and the
        setting is read as grams per pound.

        Example:
            >>> ProteinService().intake_for_target(70.0, 1.0, per_pound=False)
            70.0
        """
        if per_pound:
            return self.per_lb(kg_to_lbs(target_weight_kg), protein_setting)
        return self.per_kg(target_weight_kg, protein_setting)

    @staticmethod
    def is_valid_setting(protein_setting: float) -> bool:
        """Settings outside 0.1-5.0 g are rejected by the settings form."""
        return MIN_PROTEIN_SETTING <= protein_setting <= MAX_PROTEIN_SETTING
