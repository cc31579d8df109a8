"""Validators and the helpers used to write them."""

from .base import Validator, invoke_validator, select_validator
from .item import ItemValidator
from .utils import reject_if_empty, reject_if_empty_or_whitespace

__all__ = [
    "ItemValidator",
    "Validator",
    "invoke_validator",
    "reject_if_empty",
    "reject_if_empty_or_whitespace",
    "select_validator",
]
