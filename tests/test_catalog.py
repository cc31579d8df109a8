"""Tests for message catalog loading and locale lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from formguard.exceptions import CatalogError
from formguard.messages import MessageCatalog, load_catalog, load_default_catalog
from formguard.messages.catalog import locale_chain


def _write_bundle(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("locale", "expected"),
    [
        ("ko_KR", ("ko_KR", "ko", "")),
        ("en-US", ("en_US", "en", "")),
        ("en", ("en", "")),
        (None, ("",)),
        ("", ("",)),
    ],
    ids=["country", "dash-separated", "language", "none", "empty"],
)
def test_locale_chain(locale: str | None, expected: tuple[str, ...]) -> None:
    assert locale_chain(locale) == expected


def test_lookup_falls_back_from_country_to_language_to_base() -> None:
    catalog = MessageCatalog(
        {
            "": {"required": "base required", "max": "base max"},
            "en": {"required": "en required"},
            "en_GB": {"max": "gb max"},
        }
    )

    assert catalog.lookup("required", "en_GB") == "en required"
    assert catalog.lookup("max", "en_GB") == "gb max"
    assert catalog.lookup("max", "en") == "base max"
    assert catalog.lookup("required", "fr") == "base required"


def test_lookup_miss_returns_none() -> None:
    catalog = MessageCatalog({"en": {"required": "x"}})

    assert catalog.lookup("range", "en") is None
    assert catalog.lookup("required", "ko") is None
    assert catalog.lookup("required", None) is None
    assert catalog.lookup("required", "en_US") == "x"


def test_load_catalog_reads_base_and_locale_bundles(tmp_path: Path) -> None:
    _write_bundle(tmp_path, "errors.yaml", "required: 필수 값 입니다.\n")
    _write_bundle(tmp_path, "errors_en.yaml", "required: required\nrange: between {0} and {1}\n")
    _write_bundle(tmp_path, "messages.yaml", "required: ignored\n")

    catalog = load_catalog(tmp_path)

    assert catalog.lookup("required", "ko") == "필수 값 입니다."
    assert catalog.lookup("required", "en") == "required"
    assert catalog.lookup("range", "en_US") == "between {0} and {1}"


def test_load_catalog_with_custom_basename(tmp_path: Path) -> None:
    _write_bundle(tmp_path, "messages_en.yaml", "required: from messages\n")
    _write_bundle(tmp_path, "messagesx.yaml", "required: not a bundle\n")

    catalog = load_catalog(tmp_path, "messages")

    assert catalog.lookup("required", "en") == "from messages"
    assert catalog.lookup("required", None) is None


def test_load_catalog_empty_file_is_empty_bundle(tmp_path: Path) -> None:
    _write_bundle(tmp_path, "errors.yaml", "")

    catalog = load_catalog(tmp_path)

    assert catalog.lookup("required", None) is None
    assert catalog.lookup("required", "en") is None


def test_load_catalog_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(tmp_path / "missing")


@pytest.mark.parametrize(
    ("content", "expected_match"),
    [
        ("required: [unclosed\n", "Invalid YAML"),
        ("- required\n", "must be a YAML mapping"),
        ("1: one\n", "must be a string"),
        ("range:\n  item: nested\n", "range"),
    ],
    ids=["bad-yaml", "list", "non-string-key", "nested-template"],
)
def test_load_catalog_rejects_malformed_bundles(tmp_path: Path, content: str, expected_match: str) -> None:
    _write_bundle(tmp_path, "errors.yaml", content)

    with pytest.raises(CatalogError, match=expected_match):
        load_catalog(tmp_path)


def test_default_catalog_has_korean_base_and_english() -> None:
    catalog = load_default_catalog()

    assert catalog.lookup("required.item.item_name", "ko") == "상품 이름은 필수입니다."
    assert catalog.lookup("required.item.item_name", "en") == "Item name is required."
    assert catalog.lookup("typeMismatch.int", "en") == "Please enter a number."
