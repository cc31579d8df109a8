"""Config loading and normalization for formguard."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from formguard.config.model import FormguardConfig
from formguard.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from formguard.constants.messages import DEFAULT_BASENAME, DEFAULT_LOCALE
from formguard.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> FormguardConfig:
    """Load and validate config from ``formguard.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return FormguardConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    messages_dir_raw = raw.get("messages_dir")
    messages_dir: Path | None = None
    if messages_dir_raw is not None:
        messages_dir = (path.parent / _ensure_string(messages_dir_raw, "messages_dir")).resolve()

    use_code = raw.get("use_code_as_default_message", False)
    if not isinstance(use_code, bool):
        raise ConfigError("use_code_as_default_message must be a boolean")

    basename = _ensure_string(raw.get("basename", DEFAULT_BASENAME), "basename")
    if not basename.strip():
        raise ConfigError("basename must not be empty")

    return FormguardConfig(
        messages_dir=messages_dir,
        basename=basename,
        locale=_ensure_string(raw.get("locale", DEFAULT_LOCALE), "locale"),
        code_prefix=_ensure_string(raw.get("code_prefix", ""), "code_prefix"),
        use_code_as_default_message=use_code,
    )


def _ensure_string(value: Any, key_name: str) -> str:
    """Return ``value`` if it is a string, raising ConfigError otherwise."""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value
