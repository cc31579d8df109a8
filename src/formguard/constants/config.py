"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "formguard.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "messages_dir",
        "basename",
        "locale",
        "code_prefix",
        "use_code_as_default_message",
    }
)
