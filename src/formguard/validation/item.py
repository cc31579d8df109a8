"""Rule set for :class:`~formguard.domain.Item`."""

from __future__ import annotations

from typing import Any

from formguard.constants.codes import MAX, RANGE, REQUIRED, TOTAL_PRICE_MIN
from formguard.constants.item import (
    PRICE_MAX,
    PRICE_MIN,
    QUANTITY_MAX,
    QUANTITY_MAX_DEFAULT_MESSAGE,
    TOTAL_PRICE_MIN_VALUE,
)
from formguard.domain import Item
from formguard.errors import ErrorCollector
from formguard.validation.base import Validator
from formguard.validation.utils import reject_if_empty_or_whitespace


class ItemValidator(Validator):
    """Field and cross-field rules for submitted items.

    Every rule runs on every call. A missing name does not stop the price
    check, and the total price rule looks at the raw price and quantity even
    when those were already rejected on their own.
    """

    def supports(self, kind: type) -> bool:
        return issubclass(kind, Item)

    def validate(self, target: Any, errors: ErrorCollector) -> None:
        self.check_supported(target, errors)
        item: Item = target

        reject_if_empty_or_whitespace(errors, "item_name", REQUIRED)

        if item.price is None or item.price < PRICE_MIN or item.price > PRICE_MAX:
            errors.reject_field("price", RANGE, (PRICE_MIN, PRICE_MAX))

        if item.quantity is None or item.quantity >= QUANTITY_MAX:
            errors.reject_field("quantity", MAX, (QUANTITY_MAX,), QUANTITY_MAX_DEFAULT_MESSAGE)

        # Cross-field rule, reported against the whole item.
        if item.price is not None and item.quantity is not None:
            result_price = item.price * item.quantity
            if result_price < TOTAL_PRICE_MIN_VALUE:
                errors.reject_global(TOTAL_PRICE_MIN, (TOTAL_PRICE_MIN_VALUE, result_price))
