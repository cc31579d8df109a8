"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal, TypeAlias

ErrorScope: TypeAlias = Literal["field", "global"]
MessageArguments: TypeAlias = Sequence[Any]
FormData: TypeAlias = Mapping[str, str | None]
MessageBundle: TypeAlias = dict[str, str]
