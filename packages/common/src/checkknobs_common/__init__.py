"""Common utilities and base classes for checkknobs packages.

- **Exceptions**: Unified exception hierarchy with context support
- **Serialization**: ``to_dict`` helpers for error context

Example:
    ```python
    from checkknobs_common import CheckknobsError

    raise CheckknobsError("Something went wrong", context={"key": "order"})
    ```
"""

from checkknobs_common.exceptions import (
    CheckknobsError,
    ConfigurationError,
    SerializationError,
    ValidationError,
)
from checkknobs_common.serialization import serialize, serialize_list

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "CheckknobsError",
    "ValidationError",
    "ConfigurationError",
    "SerializationError",
    # Serialization
    "serialize",
    "serialize_list",
]
