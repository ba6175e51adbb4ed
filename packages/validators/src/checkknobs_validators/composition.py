"""Combinators over optional validators and lists of validators.
"""

from __future__ import annotations

from collections.abc import Iterable

from .checks import MessageSource
from .validator import Validator


def or_valid(validator: Validator | None) -> Validator:
    """Return ``validator``, or a fresh valid one when it is None."""
    if validator is None:
        return Validator.valid()
    return validator


def or_invalid(validator: Validator | None, message: MessageSource) -> Validator:
    """Return ``validator``, or a fresh one failing with ``message`` when it is None."""
    if validator is None:
        return Validator.invalid(message)
    return validator


def reduce_valid(validators: Iterable[Validator] | None) -> Validator:
    """Fold ``validators`` into a fresh validator.

    None or an empty iterable reduces to a valid validator. The inputs are
    not modified.
    """
    return Validator.valid().add_all(validators)


def reduce_invalid(validators: Iterable[Validator] | None, message: MessageSource) -> Validator:
    """Like :func:`reduce_valid`, but an empty input fails with ``message``.

    Used to require that a collection of sub-validations is non-empty:

        reduce_invalid([line_validator(l) for l in order.lines or []],
                       "Lines cannot be empty")
    """
    items = list(validators or ())
    if not items:
        return Validator.invalid(message)
    return reduce_valid(items)
