"""Configuration utilities for infrastructure layer."""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from fitcalc.domain.body_metrics.calculation.protein_service import (
    DEFAULT_GRAMS_PER_KG,
    MAX_PROTEIN_SETTING,
    MIN_PROTEIN_SETTING,
)
from fitcalc.domain.shared.errors import ConfigurationError, InvalidSettingError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")

_TRUE_VALUES = {"1", "true", "on", "yes", "y"}
_FALSE_VALUES = {"0", "false", "off", "no", "n"}


@dataclass(frozen=True)
class CalculatorSettings:
    """Process-wide calculator defaults.

    Attributes:
        protein_per_kg: Default protein setting (g/kg, or g/lb)
        protein_per_pound: Read the protein setting as grams per pound
        measurements_optional: Count circumference errors against validity
        log_level: structlog level name
        log_format: "console" or "json"
    """

    protein_per_kg: float = DEFAULT_GRAMS_PER_KG
    protein_per_pound: bool = True
    measurements_optional: bool = True
    log_level: str = "INFO"
    log_format: str = "console"


def _flag_enabled(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {value!r}")


def get_protein_per_kg() -> float:
    """
    Get the default protein setting.

    Returns:
        Grams per kg (or per lb) from FITCALC_PROTEIN_PER_KG, defaults to 0.8

    Raises:
        ConfigurationError: If the value is not a number
        InvalidSettingError: If the value is outside 0.1-5.0
    """
    raw = os.getenv("FITCALC_PROTEIN_PER_KG")
    if raw is None or not raw.strip():
        return DEFAULT_GRAMS_PER_KG

    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"FITCALC_PROTEIN_PER_KG must be a number, got {raw!r}") from e

    if math.isnan(value) or not MIN_PROTEIN_SETTING <= value <= MAX_PROTEIN_SETTING:
        raise InvalidSettingError(
            "FITCALC_PROTEIN_PER_KG",
            value,
            f"must be between {MIN_PROTEIN_SETTING} and {MAX_PROTEIN_SETTING}",
        )
    return value


def get_log_level() -> str:
    level = os.getenv("FITCALC_LOG_LEVEL", "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise InvalidSettingError("FITCALC_LOG_LEVEL", level, f"must be one of {LOG_LEVELS}")
    return level


def get_log_format() -> str:
    fmt = os.getenv("FITCALC_LOG_FORMAT", "console").strip().lower()
    if fmt not in LOG_FORMATS:
        raise InvalidSettingError("FITCALC_LOG_FORMAT", fmt, f"must be one of {LOG_FORMATS}")
    return fmt


def load_settings(env_file: Optional[Union[str, Path]] = None) -> CalculatorSettings:
    """
    Load calculator settings from the environment.

    Values already present in the environment win over the .env file.

    Example .env:
        FITCALC_PROTEIN_PER_KG=1.0
        FITCALC_PROTEIN_PER_POUND=false
        FITCALC_LOG_FORMAT=json

    Args:
        env_file: Optional path to a .env file

    Returns:
        CalculatorSettings: Frozen settings

    Raises:
        ConfigurationError: If a value cannot be parsed or is out of range
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file)

    return CalculatorSettings(
        protein_per_kg=get_protein_per_kg(),
        protein_per_pound=_flag_enabled("FITCALC_PROTEIN_PER_POUND", True),
        measurements_optional=_flag_enabled("FITCALC_MEASUREMENTS_OPTIONAL", True),
        log_level=get_log_level(),
        log_format=get_log_format(),
    )
