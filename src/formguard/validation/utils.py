"""Shorthands for common single-field rules."""

from __future__ import annotations

from formguard.errors import ErrorCollector
from formguard.types import MessageArguments


def reject_if_empty(
    errors: ErrorCollector,
    field: str,
    error_code: str,
    arguments: MessageArguments = (),
    default_message: str | None = None,
) -> bool:
    """Reject ``field`` when it is absent or an empty string.

    Returns True when a violation was recorded.
    """
    value = errors.get_field_value(field)
    if value is None or value == "":
        errors.reject_field(field, error_code, arguments, default_message)
        return True
    return False


def reject_if_empty_or_whitespace(
    errors: ErrorCollector,
    field: str,
    error_code: str,
    arguments: MessageArguments = (),
    default_message: str | None = None,
) -> bool:
    """Reject ``field`` when it is absent, empty, or only whitespace."""
    value = errors.get_field_value(field)
    if value is None or not str(value).strip():
        errors.reject_field(field, error_code, arguments, default_message)
        return True
    return False
