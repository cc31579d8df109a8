"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "formguard"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: validate item input and render localized error messages"

GLOBAL_SCOPE_LABEL: str = "global"
