"""Shared type aliases for formguard."""

from .common import ErrorScope, FormData, MessageArguments, MessageBundle

__all__ = [
    "ErrorScope",
    "FormData",
    "MessageArguments",
    "MessageBundle",
]
