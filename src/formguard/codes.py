"""Message code resolution.

Turns an error code plus the identity of the rejected object (and field)
into an ordered list of catalog keys, most specific first. A catalog can then
define a message at whichever level it likes:

1. ``code.object.field``  exact object and field
2. ``code.field``         field name, reusable across objects
3. ``code.type``          declared field type, e.g. ``typeMismatch.int``
4. ``code``               generic fallback

Object-level (global) errors only get ``code.object`` and ``code``.
"""

from __future__ import annotations

from formguard.constants.codes import CODE_SEPARATOR


def _join(*parts: str) -> str:
    return CODE_SEPARATOR.join(parts)


def _type_name(field_type: str | type | None) -> str | None:
    if field_type is None:
        return None
    if isinstance(field_type, type):
        return field_type.__name__
    return field_type


class MessageCodesResolver:
    """Builds candidate message codes for object and field errors."""

    def __init__(self, prefix: str = "") -> None:
        self._prefix = prefix

    def resolve_object_codes(self, error_code: str, object_name: str) -> list[str]:
        """Return ``[code.object, code]`` for an object-level error."""
        return self._finalize([_join(error_code, object_name), error_code])

    def resolve_field_codes(
        self,
        error_code: str,
        object_name: str,
        field: str,
        field_type: str | type | None = None,
    ) -> list[str]:
        """Return the field codes, most specific first, without duplicates."""
        candidates = [
            _join(error_code, object_name, field),
            _join(error_code, field),
        ]
        type_name = _type_name(field_type)
        if type_name is not None:
            candidates.append(_join(error_code, type_name))
        candidates.append(error_code)
        return self._finalize(candidates)

    def _finalize(self, candidates: list[str]) -> list[str]:
        codes: list[str] = []
        for candidate in candidates:
            code = f"{self._prefix}{candidate}"
            if code not in codes:
                codes.append(code)
        return codes


DEFAULT_RESOLVER = MessageCodesResolver()


def resolve_object_codes(error_code: str, object_name: str) -> list[str]:
    """Resolve object-level codes with the default (unprefixed) resolver."""
    return DEFAULT_RESOLVER.resolve_object_codes(error_code, object_name)


def resolve_field_codes(
    error_code: str,
    object_name: str,
    field: str,
    field_type: str | type | None = None,
) -> list[str]:
    """Resolve field-level codes with the default (unprefixed) resolver."""
    return DEFAULT_RESOLVER.resolve_field_codes(error_code, object_name, field, field_type)
