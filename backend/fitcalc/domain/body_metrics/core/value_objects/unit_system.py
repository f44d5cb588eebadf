"""Unit value objects - display unit systems and the units they map to."""

from enum import Enum


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class HeightUnit(str, Enum):
    """Height units. FT_IN values are expressed as total inches."""

    CM = "cm"
    FT_IN = "ft-in"


class LengthUnit(str, Enum):
    CM = "cm"
    IN = "in"


class UnitSystem(str, Enum):
    """Presentation unit system.

    Only affects how values are shown and parsed. Stored profile values
    are always metric (kg, cm).
    """

    METRIC = "metric"
    IMPERIAL = "imperial"

    def weight_unit(self) -> WeightUnit:
        return WeightUnit.KG if self is UnitSystem.METRIC else WeightUnit.LBS

    def height_unit(self) -> HeightUnit:
        return HeightUnit.CM if self is UnitSystem.METRIC else HeightUnit.FT_IN

    def length_unit(self) -> LengthUnit:
        return LengthUnit.CM if self is UnitSystem.METRIC else LengthUnit.IN
