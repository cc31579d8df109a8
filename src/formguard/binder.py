"""Binding of raw form values onto typed dataclass targets.

Form input arrives as strings. The binder converts each value to the
declared type of the matching dataclass field. A value that cannot be
converted is not an exception: it is recorded as a ``typeMismatch`` binding
failure that keeps the raw input, and the field is left unset so the
validator still runs over the rest of the object.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Any

from formguard.codes import MessageCodesResolver
from formguard.constants.codes import TYPE_MISMATCH
from formguard.errors import ErrorCollector, declared_type
from formguard.model import Violation
from formguard.types import FormData

logger = logging.getLogger(__name__)

_INTEGER_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class BindingResult:
    """The bound target and the collector holding any binding failures."""

    target: Any
    errors: ErrorCollector


def default_object_name(target_type: type) -> str:
    """``Item`` -> ``item``, ``OrderLine`` -> ``orderLine``."""
    name = target_type.__name__
    return name[:1].lower() + name[1:]


def _convert(raw: str | None, field_type: type | None) -> Any:
    if raw is None:
        return None
    if field_type is int:
        stripped = raw.strip()
        if not stripped:
            return None
        if not _INTEGER_PATTERN.fullmatch(stripped):
            raise ValueError(f"not an integer: {raw!r}")
        return int(stripped)
    return raw


def bind(
    form: FormData,
    target_type: type,
    object_name: str | None = None,
    *,
    resolver: MessageCodesResolver | None = None,
) -> BindingResult:
    """Create a ``target_type`` instance from ``form`` and collect binding failures.

    Keys of ``form`` that are not fields of ``target_type`` are ignored;
    fields missing from ``form`` keep their defaults.
    """
    if not dataclasses.is_dataclass(target_type):
        raise TypeError(f"cannot bind form data to non-dataclass type {target_type.__name__}")

    name = object_name or default_object_name(target_type)
    target = target_type()
    errors = ErrorCollector(target, name, resolver=resolver)

    for field in dataclasses.fields(target_type):
        if field.name not in form:
            continue
        raw = form[field.name]
        field_type = declared_type(target, field.name)
        type_name = field_type.__name__ if field_type is not None else "value"
        try:
            value = _convert(raw, field_type)
        except ValueError:
            logger.debug("Binding failure on %s.%s: %r", name, field.name, raw)
            codes = errors.resolver.resolve_field_codes(TYPE_MISMATCH, name, field.name, field_type)
            errors.add_violation(
                Violation(
                    object_name=name,
                    codes=tuple(codes),
                    arguments=(field.name,),
                    default_message=f"Failed to convert value {raw!r} to {type_name}",
                    field=field.name,
                    rejected_value=raw,
                    binding_failure=True,
                )
            )
            continue
        setattr(target, field.name, value)

    return BindingResult(target=target, errors=errors)
