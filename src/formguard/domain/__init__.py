"""Domain objects validated by the bundled rule sets."""

from .item import Item

__all__ = [
    "Item",
]
