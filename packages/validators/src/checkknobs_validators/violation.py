"""Immutable record of a single failed constraint.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from checkknobs_common import SerializationError


class ViolationType(Enum):
    """Severity of a violation. Only ``ERROR`` exists today."""

    ERROR = "error"


@dataclass(frozen=True)
class Violation:
    """One recorded constraint failure.

    Attributes:
        key: Key of the validator in which the failure was recorded
        message: Fully rendered failure text
        violation_type: Severity tag (always ``ViolationType.ERROR``)
    """

    key: str
    message: str
    violation_type: ViolationType = ViolationType.ERROR

    def render(self, key_separator: str = " - ") -> str:
        """Render as ``"<key><separator><message>"``."""
        return f"{self.key}{key_separator}{self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "message": self.message,
            "violation_type": self.violation_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Violation:
        """Create a violation from its dictionary representation.

        Args:
            data: Dictionary with ``key``, ``message`` and optionally
                ``violation_type``

        Returns:
            Violation instance

        Raises:
            SerializationError: If a required field is missing or the
                violation type is unknown
        """
        missing = [name for name in ("key", "message") if name not in data]
        if missing:
            raise SerializationError(
                f"Violation data missing fields: {', '.join(missing)}",
                context={"missing": missing},
            )

        raw_type = data.get("violation_type", ViolationType.ERROR.value)
        try:
            violation_type = ViolationType(raw_type)
        except ValueError as e:
            raise SerializationError(
                f"Unknown violation type: {raw_type}",
                context={"violation_type": raw_type},
            ) from e

        return cls(
            key=str(data["key"]),
            message=str(data["message"]),
            violation_type=violation_type,
        )
