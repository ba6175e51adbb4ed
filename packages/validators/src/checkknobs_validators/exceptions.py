"""Custom exceptions for the validators package.

Built on the common exception framework from checkknobs_common.
"""

from __future__ import annotations

from collections.abc import Iterable

from checkknobs_common import ValidationError
from checkknobs_common.serialization import serialize_list

from .violation import Violation


class ConstraintViolationError(ValidationError):
    """Raised (or carried by a failed outcome) when a validator holds violations.

    The error message is the joined rendering of every violation, or the
    override message supplied by the caller. The individual violations stay
    available on :attr:`violations` and, serialized, in ``context``.
    """

    def __init__(self, message: str, violations: Iterable[Violation] = ()):
        self.violations = tuple(violations)
        super().__init__(
            message,
            context={"violations": serialize_list(list(self.violations))},
        )

    @property
    def keys(self) -> list[str]:
        """Distinct violation keys in first-seen order."""
        return list(dict.fromkeys(v.key for v in self.violations))
