"""Error codes and message code layout."""

from __future__ import annotations

CODE_SEPARATOR: str = "."

REQUIRED: str = "required"
RANGE: str = "range"
MAX: str = "max"
TOTAL_PRICE_MIN: str = "totalPriceMin"
TYPE_MISMATCH: str = "typeMismatch"  # raw form value could not be converted
