"""Core data models for formguard."""

from .violation import Violation

__all__ = [
    "Violation",
]
