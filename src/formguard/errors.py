"""Per-run accumulation of field and global violations."""

from __future__ import annotations

import logging
import types
import typing
from collections.abc import Mapping
from typing import Any

from formguard.codes import DEFAULT_RESOLVER, MessageCodesResolver
from formguard.model import Violation
from formguard.types import MessageArguments

logger = logging.getLogger(__name__)


def _read_field(target: Any, field: str) -> Any:
    if isinstance(target, Mapping):
        return target.get(field)
    return getattr(target, field, None)


def declared_type(target: Any, field: str) -> type | None:
    """Return the declared type of ``field`` on the target's class, if known.

    ``X | None`` and ``Optional[X]`` unwrap to ``X``. Mappings, generics, unions of
    several types and unannotated attributes have no known type.
    """
    if target is None or isinstance(target, Mapping):
        return None
    try:
        hints = typing.get_type_hints(type(target))
    except (NameError, TypeError):
        return None
    hint = hints.get(field)
    if hint is None:
        return None
    if typing.get_origin(hint) in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) != 1:
            return None
        hint = members[0]
    if typing.get_origin(hint) is not None:
        return None
    return hint if isinstance(hint, type) else None


class ErrorCollector:
    """Collects the violations found while validating one target object.

    A collector is bound to a single target and object name for its whole
    life. Violations are only ever appended, in the order rules report them;
    repeated rejections of the same field are all kept.
    """

    def __init__(
        self,
        target: Any,
        object_name: str,
        *,
        resolver: MessageCodesResolver | None = None,
    ) -> None:
        self._target = target
        self._object_name = object_name
        self._resolver = resolver or DEFAULT_RESOLVER
        self._violations: list[Violation] = []

    @property
    def target(self) -> Any:
        return self._target

    @property
    def object_name(self) -> str:
        return self._object_name

    @property
    def resolver(self) -> MessageCodesResolver:
        return self._resolver

    @property
    def violations(self) -> list[Violation]:
        """All violations in insertion order (a copy)."""
        return list(self._violations)

    @property
    def error_count(self) -> int:
        return len(self._violations)

    def reject_field(
        self,
        field: str,
        error_code: str,
        arguments: MessageArguments = (),
        default_message: str | None = None,
    ) -> Violation:
        """Record a violation of ``field``, preserving its current value."""
        codes = self._resolver.resolve_field_codes(
            error_code,
            self._object_name,
            field,
            declared_type(self._target, field),
        )
        violation = Violation(
            object_name=self._object_name,
            codes=tuple(codes),
            arguments=tuple(arguments),
            default_message=default_message,
            field=field,
            rejected_value=_read_field(self._target, field),
        )
        self._append(violation)
        return violation

    def reject_global(
        self,
        error_code: str,
        arguments: MessageArguments = (),
        default_message: str | None = None,
    ) -> Violation:
        """Record a violation of the object as a whole."""
        violation = Violation(
            object_name=self._object_name,
            codes=tuple(self._resolver.resolve_object_codes(error_code, self._object_name)),
            arguments=tuple(arguments),
            default_message=default_message,
        )
        self._append(violation)
        return violation

    def add_violation(self, violation: Violation) -> None:
        """Append a pre-built violation, e.g. a binding failure."""
        if violation.object_name != self._object_name:
            raise ValueError(
                f"violation for {violation.object_name!r} cannot be added to errors of {self._object_name!r}"
            )
        self._append(violation)

    def has_errors(self) -> bool:
        return bool(self._violations)

    def has_global_errors(self) -> bool:
        return any(v.field is None for v in self._violations)

    def has_field_errors(self, field: str | None = None) -> bool:
        return bool(self.get_field_errors(field))

    def get_global_errors(self) -> list[Violation]:
        return [v for v in self._violations if v.field is None]

    def get_global_error(self) -> Violation | None:
        return next((v for v in self._violations if v.field is None), None)

    def get_field_errors(self, field: str | None = None) -> list[Violation]:
        """Field violations in insertion order, optionally for one field only."""
        return [
            v
            for v in self._violations
            if v.field is not None and (field is None or v.field == field)
        ]

    def get_field_error(self, field: str) -> Violation | None:
        errors = self.get_field_errors(field)
        return errors[0] if errors else None

    def get_field_value(self, field: str) -> Any:
        """Value to show back for ``field``: the rejected value if any, else the current one."""
        error = self.get_field_error(field)
        if error is not None:
            return error.rejected_value
        return _read_field(self._target, field)

    def _append(self, violation: Violation) -> None:
        self._violations.append(violation)
        logger.debug("Rejected %s: %s", violation.field or self._object_name, violation.code)

    def __repr__(self) -> str:
        return f"ErrorCollector({self._object_name!r}, {len(self._violations)} violation(s))"
