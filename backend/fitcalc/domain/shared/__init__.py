"""Shared domain primitives."""

from .errors import ConfigurationError, DomainError, InvalidSettingError

__all__ = [
    "DomainError",
    "ConfigurationError",
    "InvalidSettingError",
]
