"""The violation accumulator at the heart of the validators package.

A :class:`Validator` collects every failed check instead of stopping at the
first one. Checks run eagerly and in call order; failures are appended as
:class:`Violation` records keyed by the validator's key. Once built, the
validator is projected into a :class:`ValidationOutcome` with
:meth:`Validator.to_result`.

Example:
    ```python
    validator = Validator("Order Id: O-1")
    validator.check_not_null(order.order_id, lambda: "Order ID must not be null")
    validator.check_greater(order.amount, 0, "Order Amount must be greater than zero")
    validator.add(line_validator)

    outcome = validator.to_result()
    if not outcome:
        print(outcome.error_message)
    ```

A validator has a single writer: it is built synchronously by one caller
and not shared between threads while checks are still being recorded.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from typing import TypeVar

from .checks import MessageSource, PredicateChecks, render_message
from .exceptions import ConstraintViolationError
from .outcome import ValidationOutcome
from .settings import ValidatorSettings, get_settings
from .violation import Violation

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _resolve_key(key: str | None) -> str:
    if key is None or not key.strip():
        return str(uuid.uuid4())
    return key


class Validator(PredicateChecks):
    """Mutable, append-only collector of violations for one keyed context.

    Args:
        key: Identity label attached to every violation recorded here.
            A missing or blank key is replaced by a random UUID.
        settings: Rendering settings; defaults to the process-wide settings
            in effect at construction time.
    """

    def __init__(self, key: str | None = None, settings: ValidatorSettings | None = None):
        self._key = _resolve_key(key)
        self._violations: list[Violation] = []
        self.settings = settings or get_settings()

    def __repr__(self) -> str:
        return f"Validator(key={self._key!r}, violations={len(self._violations)})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def violations(self) -> list[Violation]:
        """Copy of the recorded violations in insertion order."""
        return list(self._violations)

    @property
    def is_valid(self) -> bool:
        return not self._violations

    def check(self, predicate: bool, message: MessageSource) -> None:
        """Record a violation when ``predicate`` is false.

        The message is only rendered on failure, so a callable message is
        never invoked on the success path.

        Args:
            predicate: Outcome of the constraint being checked
            message: Failure text or a zero-argument callable producing it
        """
        if predicate:
            return

        violation = Violation(self._key, render_message(message))
        self._violations.append(violation)
        logger.debug(f"Violation recorded for '{self._key}': {violation.message}")

    def add(self, other: Validator) -> Validator:
        """Append all of ``other``'s violations after this validator's own.

        ``other`` is left untouched.

        Args:
            other: Validator whose violations are copied in

        Returns:
            Self for chaining

        Raises:
            TypeError: If ``other`` is not a Validator
        """
        if not isinstance(other, Validator):
            raise TypeError(f"Can only add a Validator, got {type(other).__name__}")

        copied = other.violations
        self._violations.extend(copied)
        if copied:
            logger.debug(f"Merged {len(copied)} violation(s) from '{other.key}' into '{self._key}'")
        return self

    def add_all(self, validators: Iterable[Validator] | None) -> Validator:
        """Fold ``validators`` into this one left to right via :meth:`add`.

        A None or empty iterable leaves this validator unchanged.

        Returns:
            Self for chaining
        """
        for validator in validators or ():
            self.add(validator)
        return self

    def map(self, transform: Callable[[list[Violation]], R]) -> R:
        """Apply ``transform`` to the list of violations and return its result."""
        return transform(self.violations)

    def render(self) -> str:
        """Join every violation as ``"<key> - <message>"`` with ``", "``."""
        return self.settings.violation_separator.join(
            violation.render(self.settings.key_separator) for violation in self._violations
        )

    def to_result(self, message: str | None = None) -> ValidationOutcome:
        """Project the collected violations into a success/failure outcome.

        Args:
            message: Optional text replacing the joined violation messages
                in the failure's error

        Returns:
            Success carrying True when no violations were recorded,
            otherwise a failure carrying a ConstraintViolationError
        """
        if not self._violations:
            return ValidationOutcome.success()

        error_message = message if message is not None else self.render()
        logger.debug(f"Validator '{self._key}' failed with {len(self._violations)} violation(s)")
        return ValidationOutcome.failure(ConstraintViolationError(error_message, self._violations))

    def raise_if_invalid(self, message: str | None = None) -> bool:
        """Return True when valid, otherwise raise the aggregate error.

        Raises:
            ConstraintViolationError: If any violation was recorded
        """
        return self.to_result(message).get_or_raise()

    @classmethod
    def valid(cls, key: str | None = None) -> Validator:
        """A fresh validator with no violations."""
        return cls(key)

    @classmethod
    def invalid(cls, message: MessageSource, key: str | None = None) -> Validator:
        """A fresh validator holding exactly one unconditional failure."""
        validator = cls(key)
        validator.fail(message)
        return validator
