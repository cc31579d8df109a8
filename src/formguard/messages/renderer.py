"""Rendering of violations into display messages."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from formguard.constants.messages import (
    DEFAULT_LOCALE,
    MISSING_MESSAGE_SUBJECT_TEMPLATE,
    MISSING_MESSAGE_TEMPLATE,
)
from formguard.errors import ErrorCollector
from formguard.messages.catalog import MessageCatalog
from formguard.model import Violation
from formguard.types import MessageArguments

logger = logging.getLogger(__name__)

_PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{(\d+)\}")


def format_template(template: str, arguments: MessageArguments) -> str:
    """Replace ``{0}``, ``{1}``, ... with the matching positional arguments.

    Placeholders without a matching argument are left as they are, and any
    other braces in the template are not touched.
    """

    def _substitute(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(arguments):
            return str(arguments[index])
        return match.group(0)

    return _PLACEHOLDER_PATTERN.sub(_substitute, template)


def render(
    codes: Sequence[str],
    arguments: MessageArguments,
    default_message: str | None,
    locale: str | None,
    catalog: MessageCatalog,
    *,
    subject: str | None = None,
    use_code_as_default_message: bool = False,
) -> str:
    """Render the message for the first code the catalog knows.

    Falls back to ``default_message`` as literal text, then to a diagnostic
    placeholder naming the first code (and ``subject`` when given).
    """
    for code in codes:
        template = catalog.lookup(code, locale)
        if template is not None:
            return format_template(template, arguments)

    if default_message is not None:
        return default_message

    first_code = codes[0] if codes else ""
    logger.warning("No message found for codes %s (locale %r)", list(codes), locale)
    if use_code_as_default_message and codes:
        return first_code
    if subject:
        return MISSING_MESSAGE_SUBJECT_TEMPLATE.format(code=first_code, subject=subject)
    return MISSING_MESSAGE_TEMPLATE.format(code=first_code)


class MessageRenderer:
    """Renders violations against one catalog and locale."""

    def __init__(
        self,
        catalog: MessageCatalog,
        locale: str | None = DEFAULT_LOCALE,
        *,
        use_code_as_default_message: bool = False,
    ) -> None:
        self._catalog = catalog
        self._locale = locale
        self._use_code_as_default_message = use_code_as_default_message

    @property
    def locale(self) -> str | None:
        return self._locale

    def render_violation(self, violation: Violation) -> str:
        subject = violation.object_name
        if violation.field is not None:
            subject = f"{subject}.{violation.field}"
        return render(
            violation.codes,
            violation.arguments,
            violation.default_message,
            self._locale,
            self._catalog,
            subject=subject,
            use_code_as_default_message=self._use_code_as_default_message,
        )

    def render_all(self, errors: ErrorCollector) -> list[str]:
        """Render every violation of ``errors`` in insertion order."""
        return [self.render_violation(violation) for violation in errors.violations]
