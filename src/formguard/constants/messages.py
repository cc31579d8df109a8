"""Message catalog and rendering defaults."""

from __future__ import annotations

from pathlib import Path

DEFAULT_BASENAME: str = "errors"
DEFAULT_LOCALE: str = "ko"
BASE_LOCALE: str = ""
CATALOG_SUFFIX: str = ".yaml"
LOCALE_SEPARATOR: str = "_"

BUNDLED_MESSAGES_DIR: Path = Path(__file__).resolve().parent.parent / "messages" / "bundles"

MISSING_MESSAGE_TEMPLATE: str = "??{code}??"
MISSING_MESSAGE_SUBJECT_TEMPLATE: str = "??{code}?? ({subject})"
