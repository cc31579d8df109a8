"""Validator interface and explicit selection helpers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from formguard.errors import ErrorCollector
from formguard.exceptions import UnsupportedTargetError

logger = logging.getLogger(__name__)


class Validator(ABC):
    """A rule set that applies to some kinds of objects.

    Callers pick a validator with :meth:`supports` and then hand it the
    target together with the collector owned by the current run.
    """

    @abstractmethod
    def supports(self, kind: type) -> bool:
        """Return True when this rule set applies to objects of ``kind``."""

    @abstractmethod
    def validate(self, target: Any, errors: ErrorCollector) -> None:
        """Run every rule against ``target``, recording failures in ``errors``."""

    def check_supported(self, target: Any, errors: ErrorCollector) -> None:
        """Fail fast on a target kind this validator does not handle, or a collector bound elsewhere."""
        if not self.supports(type(target)):
            raise UnsupportedTargetError(type(target), self)
        if errors.target is not target:
            raise ValueError(f"errors of {errors.object_name!r} are bound to a different object than the target")


def invoke_validator(validator: Validator, target: Any, errors: ErrorCollector) -> None:
    """Validate ``target`` after checking the validator supports it."""
    validator.check_supported(target, errors)
    validator.validate(target, errors)
    if errors.has_errors():
        logger.info("errors = %r", errors)


def select_validator(validators: Iterable[Validator], kind: type) -> Validator:
    """Return the first validator supporting ``kind``."""
    for validator in validators:
        if validator.supports(kind):
            return validator
    raise UnsupportedTargetError(kind)
