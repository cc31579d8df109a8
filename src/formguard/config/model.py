"""Config data model for formguard."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from formguard.codes import MessageCodesResolver
from formguard.constants.messages import DEFAULT_BASENAME, DEFAULT_LOCALE
from formguard.messages import MessageCatalog, MessageRenderer, load_catalog, load_default_catalog


@dataclass(frozen=True)
class FormguardConfig:
    """Resolved formguard config."""

    messages_dir: Path | None = None
    basename: str = DEFAULT_BASENAME
    locale: str = DEFAULT_LOCALE
    code_prefix: str = ""
    use_code_as_default_message: bool = False

    def build_resolver(self) -> MessageCodesResolver:
        return MessageCodesResolver(prefix=self.code_prefix)

    def build_catalog(self) -> MessageCatalog:
        """Load the configured catalog, or the bundled one when no directory is set."""
        if self.messages_dir is None:
            return load_default_catalog()
        return load_catalog(self.messages_dir, self.basename)

    def build_renderer(self, locale: str | None = None) -> MessageRenderer:
        return MessageRenderer(
            self.build_catalog(),
            locale or self.locale,
            use_code_as_default_message=self.use_code_as_default_message,
        )
