"""Helpers for turning checkknobs objects into plain dictionaries.

Used wherever structured data goes into error context, e.g. the violations
carried by a failed validation.
"""

from typing import Any, Dict

from checkknobs_common.exceptions import SerializationError


def serialize(obj: Any) -> Dict[str, Any]:
    """Call ``obj.to_dict()`` and check that it produced a dict.

    Raises:
        SerializationError: If ``obj`` has no to_dict method, to_dict fails
            or returns something other than a dict
    """
    to_dict = getattr(obj, "to_dict", None)
    if to_dict is None:
        raise SerializationError(
            f"{type(obj).__name__} has no to_dict method",
            context={"type": type(obj).__name__},
        )

    try:
        data = to_dict()
    except Exception as e:
        raise SerializationError(
            f"Failed to serialize {type(obj).__name__}: {e}",
            context={"type": type(obj).__name__, "error": str(e)},
        ) from e

    if not isinstance(data, dict):
        raise SerializationError(
            f"{type(obj).__name__}.to_dict() returned {type(data).__name__}, not dict",
            context={"type": type(obj).__name__, "result_type": type(data).__name__},
        )
    return data


def serialize_list(items: list[Any]) -> list[Dict[str, Any]]:
    """Serialize each item in order."""
    return [serialize(item) for item in items]


__all__ = [
    "serialize",
    "serialize_list",
]
