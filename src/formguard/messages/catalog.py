"""Locale-keyed message catalogs loaded from YAML bundles.

A catalog directory holds one base bundle (``errors.yaml``) and any number
of locale bundles (``errors_en.yaml``, ``errors_ko_KR.yaml``). Each bundle is
a flat mapping of message code to template, for example::

    required.item.item_name: Item name is required.
    range: must be between {0} and {1}

Lookups walk from the most specific locale to the base bundle.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from formguard.constants.messages import (
    BASE_LOCALE,
    BUNDLED_MESSAGES_DIR,
    CATALOG_SUFFIX,
    DEFAULT_BASENAME,
    LOCALE_SEPARATOR,
)
from formguard.exceptions import CatalogError
from formguard.types import MessageBundle

logger = logging.getLogger(__name__)


def normalize_locale(locale: str | None) -> str:
    """``en-US`` -> ``en_US``; ``None`` -> the base locale."""
    if not locale:
        return BASE_LOCALE
    return locale.strip().replace("-", LOCALE_SEPARATOR)


def locale_chain(locale: str | None) -> tuple[str, ...]:
    """Locales to try for ``locale``, most specific first, ending with the base."""
    normalized = normalize_locale(locale)
    chain: list[str] = []
    parts = [part for part in normalized.split(LOCALE_SEPARATOR) if part]
    while parts:
        chain.append(LOCALE_SEPARATOR.join(parts))
        parts.pop()
    chain.append(BASE_LOCALE)
    return tuple(chain)


class MessageCatalog:
    """In-memory message store keyed by locale, then by code."""

    def __init__(self, bundles: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._bundles: dict[str, MessageBundle] = {
            normalize_locale(locale): dict(messages) for locale, messages in (bundles or {}).items()
        }

    def lookup(self, code: str, locale: str | None = None) -> str | None:
        """Return the template for ``code`` in ``locale``, or None when no bundle has it."""
        for candidate in locale_chain(locale):
            bundle = self._bundles.get(candidate)
            if bundle is not None and code in bundle:
                return bundle[code]
        return None


def load_catalog(directory: Path, basename: str = DEFAULT_BASENAME) -> MessageCatalog:
    """Load every ``<basename>[_<locale>].yaml`` bundle found in ``directory``."""
    if not directory.is_dir():
        raise CatalogError(f"Message directory not found: {directory}")

    bundles: dict[str, MessageBundle] = {}
    for path in sorted(directory.glob(f"{basename}*{CATALOG_SUFFIX}")):
        locale = _locale_from_filename(path, basename)
        if locale is None:
            logger.debug("Skipping %s (not a %s bundle)", path, basename)
            continue
        bundles[locale] = _load_bundle(path)
        logger.debug("Loaded %d message(s) for locale %r from %s", len(bundles[locale]), locale, path)

    if not bundles:
        logger.warning("No %s message bundles found in %s", basename, directory)
    return MessageCatalog(bundles)


def load_default_catalog() -> MessageCatalog:
    """Load the catalogs shipped with formguard."""
    return load_catalog(BUNDLED_MESSAGES_DIR, DEFAULT_BASENAME)


def _locale_from_filename(path: Path, basename: str) -> str | None:
    stem = path.name[: -len(CATALOG_SUFFIX)]
    if stem == basename:
        return BASE_LOCALE
    prefix = f"{basename}{LOCALE_SEPARATOR}"
    if stem.startswith(prefix) and len(stem) > len(prefix):
        return stem[len(prefix) :]
    return None


def _load_bundle(path: Path) -> MessageBundle:
    """Load and check one bundle file with safe_load only."""
    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Cannot read message bundle {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in message bundle {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise CatalogError(f"Message bundle {path} must be a YAML mapping")

    bundle: MessageBundle = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            raise CatalogError(f"Message code {key!r} in {path} must be a string")
        if not isinstance(value, str):
            raise CatalogError(f"Message template for {key!r} in {path} must be a string")
        bundle[key] = value
    return bundle
