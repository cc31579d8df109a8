"""Tests for binding raw form input onto items."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from formguard.binder import bind, default_object_name
from formguard.codes import MessageCodesResolver
from formguard.domain import Item
from formguard.validation import ItemValidator


@dataclass
class OrderLine:
    sku: str | None = None


def test_bind_converts_declared_types() -> None:
    result = bind({"item_name": "Book", "price": " 1500 ", "quantity": "10"}, Item)

    assert result.target == Item(item_name="Book", price=1500, quantity=10)
    assert result.errors.object_name == "item"
    assert not result.errors.has_errors()


def test_bind_keeps_empty_string_but_blank_number_is_absent() -> None:
    result = bind({"item_name": "", "price": "  "}, Item)

    assert result.target.item_name == ""
    assert result.target.price is None
    assert not result.errors.has_errors()


def test_bind_ignores_unknown_keys_and_keeps_defaults() -> None:
    result = bind({"colour": "red"}, Item)

    assert result.target == Item()


def test_type_mismatch_is_recorded_as_binding_failure() -> None:
    result = bind({"item_name": "Book", "price": "abc", "quantity": "10"}, Item)

    [violation] = result.errors.violations
    assert violation.field == "price"
    assert violation.binding_failure
    assert violation.rejected_value == "abc"
    assert violation.codes == (
        "typeMismatch.item.price",
        "typeMismatch.price",
        "typeMismatch.int",
        "typeMismatch",
    )
    assert result.target.price is None
    assert result.errors.get_field_value("price") == "abc"


@pytest.mark.parametrize(
    "raw",
    ["1_500", "１５００", "١٥٠٠", "1,000", "+-1"],
    ids=["underscore-separator", "fullwidth-digits", "arabic-indic-digits", "comma-separator", "double-sign"],
)
def test_only_ascii_decimal_integers_bind(raw: str) -> None:
    result = bind({"item_name": "Book", "price": raw}, Item)

    [violation] = result.errors.violations
    assert violation.code == "typeMismatch"
    assert violation.binding_failure
    assert violation.rejected_value == raw
    assert result.target.price is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("+1500", 1500), ("-7", -7), ("007", 7)],
    ids=["plus", "minus", "leading-zeros"],
)
def test_signed_ascii_integers_bind(raw: str, expected: int) -> None:
    result = bind({"price": raw}, Item)

    assert result.target.price == expected
    assert not result.errors.has_errors()


def test_validation_after_binding_failure_keeps_accumulating() -> None:
    result = bind({"item_name": "Book", "price": "1,000", "quantity": "10"}, Item)

    ItemValidator().validate(result.target, result.errors)

    assert [(v.field, v.code) for v in result.errors.violations] == [
        ("price", "typeMismatch"),
        ("price", "range"),
    ]
    # the range violation sees the unconverted field as absent
    assert result.errors.violations[1].rejected_value is None


def test_bind_uses_given_object_name_and_resolver() -> None:
    result = bind({"quantity": "many"}, Item, "product", resolver=MessageCodesResolver(prefix="x."))

    assert result.errors.violations[0].codes[0] == "x.typeMismatch.product.quantity"


def test_bind_rejects_non_dataclass_type() -> None:
    with pytest.raises(TypeError, match="dict"):
        bind({}, dict)


@pytest.mark.parametrize(
    ("target_type", "expected"),
    [(Item, "item"), (OrderLine, "orderLine")],
    ids=["single-word", "camel-case"],
)
def test_default_object_name(target_type: type, expected: str) -> None:
    assert default_object_name(target_type) == expected
