"""
Domain exceptions.

Typed exceptions for explicit error handling.
Every layer raises a subclass of DomainError so callers can catch
the whole family with a single except clause.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    """

    pass


# ═══════════════════════════════════════════════════════════
# CONFIGURATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ConfigurationError(DomainError):
    """
    Configuration could not be loaded.

    Raised when:
    - An environment variable cannot be parsed
    - A setting falls outside its allowed range

    Example:
        >>> raise ConfigurationError("FITCALC_LOG_FORMAT must be console or json")
    """

    pass


class InvalidSettingError(ConfigurationError):
    """
    Setting value outside its allowed range.

    Example:
        >>> raise InvalidSettingError("FITCALC_PROTEIN_PER_KG", 7.0, "must be between 0.1 and 5.0")
    """

    def __init__(self, name: str, value: object, reason: str):
        super().__init__(f"Invalid setting {name}={value!r}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason
