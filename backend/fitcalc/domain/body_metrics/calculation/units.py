"""
Unit conversion primitives.

Conversions never round; rounding happens only in the format helpers.
Identical source and target units short-circuit and return the input
unchanged.
"""

from __future__ import annotations

import math
import re
from typing import Union

from ..core.value_objects.unit_system import (
    HeightUnit,
    LengthUnit,
    UnitSystem,
    WeightUnit,
)
from .rounding import round_half_up

LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

_NON_NUMERIC = re.compile(r"[^\d.]")
_FEET_INCHES = re.compile(r"(\d+)(?:'|\s)\s*(\d+)\"?")


# ═══════════════════════════════════════════════════════════
# CONVERSIONS
# ═══════════════════════════════════════════════════════════


def kg_to_lbs(kg: float) -> float:
    return kg * LBS_PER_KG


def lbs_to_kg(lbs: float) -> float:
    return lbs / LBS_PER_KG


def cm_to_total_inches(cm: float) -> float:
    return cm / CM_PER_INCH


def total_inches_to_cm(inches: float) -> float:
    return inches * CM_PER_INCH


def convert_weight(weight: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    """Convert a weight between kg and lbs."""
    if from_unit == to_unit:
        return weight
    if from_unit == WeightUnit.KG:
        return kg_to_lbs(weight)
    return lbs_to_kg(weight)


def convert_height(height: float, from_unit: HeightUnit, to_unit: HeightUnit) -> float:
    """Convert a height between cm and total inches."""
    if from_unit == to_unit:
        return height
    if from_unit == HeightUnit.CM:
        return cm_to_total_inches(height)
    return total_inches_to_cm(height)


def convert_length(length: float, from_unit: LengthUnit, to_unit: LengthUnit) -> float:
    """Convert a circumference between cm and inches."""
    if from_unit == to_unit:
        return length
    if from_unit == LengthUnit.CM:
        return cm_to_total_inches(length)
    return total_inches_to_cm(length)


def split_feet_inches(height_cm: float) -> tuple[int, int]:
    """Split a height into whole feet and rounded remaining inches.

    Example:
        >>> split_feet_inches(180.0)
        (5, 11)
    """
    total_inches = cm_to_total_inches(height_cm)
    feet = math.floor(total_inches / INCHES_PER_FOOT)
    inches = round_half_up(total_inches % INCHES_PER_FOOT)
    return feet, inches


def convert_target_weight_to_kg(
    target_weight: Union[float, str], unit_system: UnitSystem
) -> float:
    """Convert a target weight typed in display units to kg.

    Imperial targets are pounds. Numeric strings are accepted.
    """
    value = float(target_weight)
    if unit_system == UnitSystem.IMPERIAL:
        return lbs_to_kg(value)
    return value


# ═══════════════════════════════════════════════════════════
# DISPLAY FORMATTING
# ═══════════════════════════════════════════════════════════


def format_height(height_cm: float, unit_system: UnitSystem) -> str:
    if unit_system == UnitSystem.METRIC:
        return f"{height_cm:.1f} cm"
    feet, inches = split_feet_inches(height_cm)
    return f"{feet}'{inches}\""


def format_weight(weight_kg: float, unit_system: UnitSystem) -> str:
    if unit_system == UnitSystem.METRIC:
        return f"{weight_kg:.1f} kg"
    return f"{kg_to_lbs(weight_kg):.1f} lbs"


def format_length(length_cm: float, unit_system: UnitSystem) -> str:
    if unit_system == UnitSystem.METRIC:
        return f"{length_cm:.1f} cm"
    return f"{cm_to_total_inches(length_cm):.1f} in"


# ═══════════════════════════════════════════════════════════
# INPUT PARSING
# ═══════════════════════════════════════════════════════════


def _parse_number(text: str) -> float:
    """Leading float in text after stripping non-numeric characters, 0 if none."""
    match = re.match(r"\d*\.?\d+|\d+", _NON_NUMERIC.sub("", text))
    if match is None:
        return 0.0
    return float(match.group(0))


def parse_height_input(text: str, unit_system: UnitSystem) -> float:
    """Parse a typed height into cm.

    Metric accepts "170.5 cm" or "170.5". Imperial accepts 5'10", "5 10"
    or a bare number of total inches. Unparsable input yields 0.
    """
    if unit_system == UnitSystem.METRIC:
        return _parse_number(text)

    match = _FEET_INCHES.search(text)
    if match:
        feet, inches = int(match.group(1)), int(match.group(2))
        return total_inches_to_cm(feet * INCHES_PER_FOOT + inches)
    return total_inches_to_cm(_parse_number(text))


def parse_weight_input(text: str, unit_system: UnitSystem) -> float:
    """Parse a typed weight into kg. Unparsable input yields 0."""
    value = _parse_number(text)
    if unit_system == UnitSystem.METRIC:
        return value
    return lbs_to_kg(value)


def parse_length_input(text: str, unit_system: UnitSystem) -> float:
    """Parse a typed circumference into cm. Unparsable input yields 0."""
    value = _parse_number(text)
    if unit_system == UnitSystem.METRIC:
        return value
    return total_inches_to_cm(value)
