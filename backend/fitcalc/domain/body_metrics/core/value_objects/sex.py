"""Sex value object - selects formula branches and category tables."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the sex-specific equations."""

    MALE = "male"
    FEMALE = "female"
