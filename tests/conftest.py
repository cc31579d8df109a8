"""Shared pytest fixtures for formguard tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from formguard.domain import Item
from formguard.errors import ErrorCollector
from formguard.messages import MessageCatalog
from formguard.validation import ItemValidator


@pytest.fixture
def item_validator() -> ItemValidator:
    return ItemValidator()


@pytest.fixture
def validate_item(item_validator: ItemValidator) -> Callable[..., ErrorCollector]:
    """Run the item rule set over an Item and return its collector."""

    def _validate(**values: object) -> ErrorCollector:
        item = Item(**values)  # type: ignore[arg-type]
        errors = ErrorCollector(item, "item")
        item_validator.validate(item, errors)
        return errors

    return _validate


@pytest.fixture
def english_catalog() -> MessageCatalog:
    """A small base-plus-English catalog with messages at every code level."""
    return MessageCatalog(
        {
            "": {
                "required": "required value",
                "range": "range {0} ~ {1}",
            },
            "en": {
                "required.item.item_name": "Item name is required.",
                "range": "must be between {0} and {1}",
                "max": "must be at most {0}",
                "totalPriceMin": "total must be at least {0}, got {1}",
                "typeMismatch.int": "Please enter a number.",
            },
        }
    )
