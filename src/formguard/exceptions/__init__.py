"""Shared exception hierarchy for formguard."""

from __future__ import annotations

from .base import FormguardError
from .catalog import CatalogError
from .config import ConfigError
from .validation import UnsupportedTargetError

__all__ = [
    "CatalogError",
    "ConfigError",
    "FormguardError",
    "UnsupportedTargetError",
]
