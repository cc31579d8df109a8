"""Configuration loading for formguard.

This package facade re-exports the public names so that callers can use
``from formguard.config import ...``.
"""

from __future__ import annotations

from formguard.config.loader import load_config
from formguard.config.model import FormguardConfig

__all__ = [
    "FormguardConfig",
    "load_config",
]
