"""Item domain object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """A catalog item as submitted by a user.

    Every field is optional: ``None`` means the value was not supplied,
    which is distinct from ``0`` or an empty string.
    """

    id: int | None = None
    item_name: str | None = None
    price: int | None = None
    quantity: int | None = None
