"""Message catalog exceptions."""

from __future__ import annotations

from formguard.exceptions.base import FormguardError


class CatalogError(FormguardError, ValueError):
    """Raised when a message catalog file cannot be read or is malformed."""
