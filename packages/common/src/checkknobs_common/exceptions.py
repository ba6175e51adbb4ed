"""Common exception hierarchy for all checkknobs packages.

Every error raised by a checkknobs package derives from
:class:`CheckknobsError`, which carries an optional context dictionary with
structured details about the failure.

Example:
    ```python
    from checkknobs_common.exceptions import ConfigurationError, ValidationError

    # Simple exception
    raise ValidationError("Order - Order ID must not be null")

    # Context-rich exception
    raise ConfigurationError(
        "Unknown settings key",
        context={"key": "separator", "allowed": ["key_separator"]}
    )

    # Catch any checkknobs error
    try:
        operation()
    except CheckknobsError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class CheckknobsError(Exception):
    """Base exception for all checkknobs packages.

    Attributes:
        context: Dictionary containing contextual information about the error

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (keys, values, etc.)

    Example:
        ```python
        error = CheckknobsError(
            "Operation failed",
            context={"operation": "merge", "key": "order"}
        )
        str(error)
        # 'Operation failed'
        error.context
        # {'operation': 'merge', 'key': 'order'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = context or {}


class ValidationError(CheckknobsError):
    """Raised when validation fails.

    Use this exception when data fails one or more constraint checks.
    Packages extend it with richer payloads, e.g. the collected violations.

    Example:
        ```python
        raise ValidationError(
            "Email format invalid",
            context={"field": "email", "value": "not-an-email"}
        )
        ```
    """

    pass


class ConfigurationError(CheckknobsError):
    """Raised when configuration is invalid or missing.

    Common scenarios include:
    - Unknown configuration keys
    - Invalid configuration values
    - Configuration file not found or in an unsupported format

    Example:
        ```python
        raise ConfigurationError(
            "Settings file not found",
            context={"path": "/etc/checkknobs.yaml"}
        )
        ```
    """

    pass


class SerializationError(CheckknobsError):
    """Raised when serialization or deserialization fails.

    Example:
        ```python
        raise SerializationError(
            "Cannot deserialize violation",
            context={"missing": ["message"]}
        )
        ```
    """

    pass


__all__ = [
    "CheckknobsError",
    "ValidationError",
    "ConfigurationError",
    "SerializationError",
]
