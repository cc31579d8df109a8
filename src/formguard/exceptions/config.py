"""Configuration-related exceptions."""

from __future__ import annotations

from formguard.exceptions.base import FormguardError


class ConfigError(FormguardError, ValueError):
    """Raised when formguard configuration is invalid."""
