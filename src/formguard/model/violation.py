"""Recorded rule failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from formguard.types import ErrorScope


@dataclass(frozen=True)
class Violation:
    """A single rule failure, either tied to one field or to the whole object.

    ``codes`` are the candidate catalog keys computed when the violation was
    recorded, most specific first. ``rejected_value`` keeps the value the
    field held at rejection time so the input can be shown back unchanged;
    ``None`` means the field was absent.
    """

    object_name: str
    codes: tuple[str, ...]
    arguments: tuple[Any, ...] = ()
    default_message: str | None = None
    field: str | None = None
    rejected_value: Any = None
    binding_failure: bool = False

    @property
    def scope(self) -> ErrorScope:
        return "field" if self.field is not None else "global"

    @property
    def code(self) -> str:
        """The least specific code: the reported error code, with the resolver prefix if one was set."""
        return self.codes[-1] if self.codes else ""
