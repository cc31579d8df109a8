"""Validator wiring errors.

Rule failures are never raised; they are recorded as violations. The only
exception in this module signals a programming error in how validators are
selected.
"""

from __future__ import annotations

from formguard.exceptions.base import FormguardError


class UnsupportedTargetError(FormguardError, TypeError):
    """Raised when a validator is invoked on an object kind it does not support."""

    def __init__(self, kind: type, validator: object | None = None) -> None:
        self.kind = kind
        self.validator = validator
        if validator is None:
            message = f"no validator supports objects of type {kind.__name__}"
        else:
            message = f"{type(validator).__name__} does not support objects of type {kind.__name__}"
        super().__init__(message)
