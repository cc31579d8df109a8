"""Business limits enforced by the item rule set."""

from __future__ import annotations

ITEM_OBJECT_NAME: str = "item"

PRICE_MIN: int = 1_000
PRICE_MAX: int = 1_000_000
QUANTITY_MAX: int = 9_999
TOTAL_PRICE_MIN_VALUE: int = 10_000

QUANTITY_MAX_DEFAULT_MESSAGE: str = "기본 오류메시지 생략가능"
