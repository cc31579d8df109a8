"""Root of the formguard exception hierarchy."""

from __future__ import annotations


class FormguardError(Exception):
    """Base class for all errors raised by formguard."""
