"""Entry points that build a validator from a configuration block.

A block is any callable taking the validator; it runs the checks
synchronously against that single instance:

    def order_checks(v: Validator) -> None:
        v.check_not_null(order.order_id, "Order ID must not be null")
        v.check_greater(order.amount, 0, "Order Amount must be greater than zero")

    build_or_raise(f"Order Id: {order.order_id}", order_checks)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .outcome import ValidationOutcome
from .settings import ValidatorSettings
from .validator import Validator

logger = logging.getLogger(__name__)

Block = Callable[[Validator], object]


def build(
    key: str | None = None,
    block: Block | None = None,
    settings: ValidatorSettings | None = None,
) -> Validator:
    """Create a validator and populate it by running ``block`` against it.

    Args:
        key: Validator key; a UUID is generated when missing or blank
        block: Callable receiving the validator; None builds an empty one
        settings: Optional rendering settings for the validator

    Returns:
        The populated validator

    Raises:
        TypeError: If ``block`` is given but not callable
    """
    validator = Validator(key, settings)
    if block is not None:
        if not callable(block):
            raise TypeError(f"Validation block must be callable, got {type(block).__name__}")
        block(validator)
    return validator


def build_result(
    key: str | None = None,
    block: Block | None = None,
    message: str | None = None,
    settings: ValidatorSettings | None = None,
) -> ValidationOutcome:
    """:func:`build` followed by :meth:`Validator.to_result`."""
    return build(key, block, settings).to_result(message)


def build_or_raise(
    key: str | None = None,
    block: Block | None = None,
    message: str | None = None,
    settings: ValidatorSettings | None = None,
) -> bool:
    """Build, project and raise on failure.

    Returns:
        True when no violation was recorded

    Raises:
        ConstraintViolationError: Carrying every violation of the build
    """
    outcome = build_result(key, block, message, settings)
    if outcome.error is not None:
        logger.warning(
            f"Validation failed with {len(outcome.error.violations)} violation(s): {outcome.error}"
        )
    return outcome.get_or_raise()
