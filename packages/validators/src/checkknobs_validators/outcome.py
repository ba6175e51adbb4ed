"""Terminal success/failure outcome of a validator.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConstraintViolationError


@dataclass(frozen=True)
class ValidationOutcome:
    """Success carrying ``True`` or failure carrying a ConstraintViolationError.

    Truthiness follows :attr:`valid`, so ``if validator.to_result():``
    reads naturally.
    """

    valid: bool
    value: bool | None = None
    error: ConstraintViolationError | None = None

    def __bool__(self) -> bool:
        return self.valid

    @property
    def error_message(self) -> str | None:
        """Message of the carried error, or None on success."""
        return str(self.error) if self.error is not None else None

    def get_or_raise(self) -> bool:
        """Return the success value or raise the carried error.

        Raises:
            ConstraintViolationError: If this outcome is a failure
        """
        if self.error is not None:
            raise self.error
        return True

    @classmethod
    def success(cls) -> ValidationOutcome:
        return cls(valid=True, value=True)

    @classmethod
    def failure(cls, error: ConstraintViolationError) -> ValidationOutcome:
        return cls(valid=False, error=error)
