"""Catalogue of named predicate checks built on the ``check`` primitive.

Every method here reduces to ``self.check(<boolean>, message)``. The message
may be a plain string or a zero-argument callable; callables are only
invoked when the predicate fails. A missing (``None``) value fails every
check except the presence, blank and empty checks, where absence is the
thing being tested.
"""

from __future__ import annotations

import enum
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection, Iterable, Sized
from datetime import date
from decimal import Decimal, InvalidOperation
from numbers import Number, Rational
from re import Pattern as RegexPattern
from typing import Any, TypeVar, Union
from urllib.parse import urlparse

from .settings import ValidatorSettings

T = TypeVar("T")

MessageSource = Union[str, Callable[[], str]]
RegexSource = Union[str, RegexPattern]

_ALPHA = re.compile(r"[A-Za-z]+")
_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")
_URL_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
# RFC 3986 unreserved and reserved characters, or a %XX escape
_URI_CHARACTERS = re.compile(r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+")


def render_message(message: MessageSource) -> str:
    """Evaluate a message source into its final text."""
    if callable(message):
        return str(message())
    return str(message)


def to_decimal(value: Any) -> Decimal | None:
    """Normalize a number to Decimal so mixed int/float inputs compare by value.

    Returns None for missing values, booleans, non-numbers and NaN.
    """
    if value is None or isinstance(value, bool) or not isinstance(value, Number):
        return None

    try:
        if isinstance(value, Decimal):
            normalized = value
        elif isinstance(value, int):
            normalized = Decimal(value)
        elif isinstance(value, Rational):
            normalized = Decimal(value.numerator) / Decimal(value.denominator)
        else:
            # str() keeps the shortest repr, so 0.1 becomes Decimal("0.1")
            normalized = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None

    if normalized.is_nan():
        return None
    return normalized


def allowed_values(values: Iterable[Any]) -> Collection[Any]:
    """Materialize an allowed-value set for membership tests.

    Raises:
        TypeError: If ``values`` is a string, which would turn membership
            into a substring test
    """
    if isinstance(values, (str, bytes)):
        raise TypeError(
            f"Allowed values must be a collection of values, not {type(values).__name__} {values!r}"
        )
    if isinstance(values, Collection):
        return values
    return list(values)


def enum_labels(allowed: Union[type[enum.Enum], Iterable[Any]]) -> list[str]:
    """Ordered labels for an enum class or an iterable of labels/members.

    Raises:
        TypeError: If ``allowed`` is a single string
    """
    if not (isinstance(allowed, type) and issubclass(allowed, enum.Enum)):
        allowed = allowed_values(allowed)
    return [
        member.name if isinstance(member, enum.Enum) else str(member)
        for member in allowed
    ]


def is_absolute_url(value: Any) -> bool:
    """True when ``value`` parses as a well-formed absolute URI."""
    if not isinstance(value, str) or not _URI_CHARACTERS.fullmatch(value):
        return False

    try:
        parsed = urlparse(value)
        # Accessing port validates it
        parsed.port
    except ValueError:
        return False

    if not parsed.scheme or not _URL_SCHEME.fullmatch(parsed.scheme):
        return False
    return bool(parsed.netloc or parsed.path)


def _compare(value: Any, other: Any, op: Callable[[Decimal, Decimal], bool]) -> bool:
    left = to_decimal(value)
    right = to_decimal(other)
    if left is None or right is None:
        return False
    return op(left, right)


class PredicateChecks(ABC):
    """Named predicate checks mixed into :class:`Validator`.

    Categories and their handling of missing values:

    - presence: ``check_not_null``, ``check_null``
    - blank/empty: None counts as blank/empty; whitespace-only is blank
    - length: inclusive bounds, None always fails
    - string shape: regex checks use a full-string match
    - numeric: operands normalized to Decimal, so ``1 == 1.0``
    - collection, identity/membership, enum, url, temporal
    - ``fail``: always records a violation
    """

    settings: ValidatorSettings

    @abstractmethod
    def check(self, predicate: bool, message: MessageSource) -> None:
        """Record a violation when ``predicate`` is false."""
        pass

    # Presence

    def check_not_null(self, value: Any, message: MessageSource) -> None:
        """Value must not be None."""
        self.check(value is not None, message)

    def check_null(self, value: Any, message: MessageSource) -> None:
        """Value must be None."""
        self.check(value is None, message)

    # Blank / empty

    def check_blank(self, value: str | None, message: MessageSource) -> None:
        """Value must be None, empty or whitespace-only."""
        self.check(value is None or not value.strip(), message)

    def check_not_blank(self, value: str | None, message: MessageSource) -> None:
        """Value must contain a non-whitespace character."""
        self.check(value is not None and bool(value.strip()), message)

    def check_empty(self, value: Sized | None, message: MessageSource) -> None:
        """Passes for None or a zero-length string/collection."""
        self.check(value is None or len(value) == 0, message)

    def check_not_empty(self, value: Sized | None, message: MessageSource) -> None:
        """Value must be present with at least one element or character."""
        self.check(value is not None and len(value) > 0, message)

    # Length

    def check_min_length(self, value: Sized | None, min_length: int, message: MessageSource) -> None:
        """Passes when ``len(value) >= min_length``."""
        self.check(isinstance(value, Sized) and len(value) >= min_length, message)

    def check_max_length(self, value: Sized | None, max_length: int, message: MessageSource) -> None:
        """Passes when ``len(value) <= max_length``; an empty value passes."""
        self.check(isinstance(value, Sized) and len(value) <= max_length, message)

    def check_exact_length(self, value: Sized | None, length: int, message: MessageSource) -> None:
        """Passes when ``len(value) == length``."""
        self.check(isinstance(value, Sized) and len(value) == length, message)

    # String shape

    def check_contains(self, value: str | None, fragment: str, message: MessageSource) -> None:
        """Value must contain ``fragment``."""
        self.check(isinstance(value, str) and fragment in value, message)

    def check_starts_with(self, value: str | None, prefix: str, message: MessageSource) -> None:
        """Value must start with ``prefix``."""
        self.check(isinstance(value, str) and value.startswith(prefix), message)

    def check_ends_with(self, value: str | None, suffix: str, message: MessageSource) -> None:
        """Value must end with ``suffix``."""
        self.check(isinstance(value, str) and value.endswith(suffix), message)

    def check_matches_regex(self, value: str | None, pattern: RegexSource, message: MessageSource) -> None:
        """Passes when the whole of ``value`` matches ``pattern``."""
        self.check(isinstance(value, str) and re.fullmatch(pattern, value) is not None, message)

    def check_matches_any_regex(
        self,
        value: str | None,
        patterns: Iterable[RegexSource],
        message: MessageSource,
    ) -> None:
        """Passes when the whole of ``value`` matches at least one pattern."""
        self.check(
            isinstance(value, str) and any(re.fullmatch(p, value) is not None for p in patterns),
            message,
        )

    def check_alpha(self, value: str | None, message: MessageSource) -> None:
        """Value must be one or more ASCII letters."""
        self.check(isinstance(value, str) and _ALPHA.fullmatch(value) is not None, message)

    def check_alphanumeric(self, value: str | None, message: MessageSource) -> None:
        """Value must be one or more ASCII letters or digits."""
        self.check(isinstance(value, str) and _ALPHANUMERIC.fullmatch(value) is not None, message)

    # Numeric comparison

    def check_greater(self, value: Any, threshold: Any, message: MessageSource) -> None:
        """Value must be strictly greater than ``threshold``."""
        self.check(_compare(value, threshold, lambda a, b: a > b), message)

    def check_greater_or_equal(self, value: Any, threshold: Any, message: MessageSource) -> None:
        """Value must be greater than or equal to ``threshold``."""
        self.check(_compare(value, threshold, lambda a, b: a >= b), message)

    def check_lesser(self, value: Any, threshold: Any, message: MessageSource) -> None:
        """Value must be strictly less than ``threshold``."""
        self.check(_compare(value, threshold, lambda a, b: a < b), message)

    def check_lesser_or_equal(self, value: Any, threshold: Any, message: MessageSource) -> None:
        """Value must be less than or equal to ``threshold``."""
        self.check(_compare(value, threshold, lambda a, b: a <= b), message)

    def check_equals(self, value: Any, other: Any, message: MessageSource) -> None:
        """Numeric equality by value; fails if either side is missing."""
        self.check(_compare(value, other, lambda a, b: a == b), message)

    def check_in_range(self, value: Any, minimum: Any, maximum: Any, message: MessageSource) -> None:
        """Inclusive range check."""
        self.check(
            _compare(value, minimum, lambda a, b: a >= b)
            and _compare(value, maximum, lambda a, b: a <= b),
            message,
        )

    def check_between(self, value: Any, minimum: Any, maximum: Any, message: MessageSource) -> None:
        """Alias of :meth:`check_in_range`."""
        self.check_in_range(value, minimum, maximum, message)

    def check_in_range_exclusive(self, value: Any, minimum: Any, maximum: Any, message: MessageSource) -> None:
        """Exclusive range check."""
        self.check(
            _compare(value, minimum, lambda a, b: a > b)
            and _compare(value, maximum, lambda a, b: a < b),
            message,
        )

    def check_positive(self, value: Any, message: MessageSource) -> None:
        """Value must be greater than zero."""
        self.check_greater(value, 0, message)

    def check_non_negative(self, value: Any, message: MessageSource) -> None:
        """Value must be zero or greater."""
        self.check_greater_or_equal(value, 0, message)

    def check_negative(self, value: Any, message: MessageSource) -> None:
        """Value must be less than zero."""
        self.check_lesser(value, 0, message)

    # Collections

    def check_collection_size(self, value: Sized | None, size: int, message: MessageSource) -> None:
        """Fails for a missing collection; None is not treated as size 0."""
        self.check(value is not None and len(value) == size, message)

    def check_all(
        self,
        values: Iterable[T] | None,
        predicate: Callable[[T], bool],
        message: MessageSource,
    ) -> None:
        """Every element must satisfy ``predicate``; None fails."""
        self.check(values is not None and all(predicate(item) for item in values), message)

    # Identity / membership

    def check_equals_and_not_null(self, first: Any, second: Any, message: MessageSource) -> None:
        """Both values must be present and equal."""
        self.check(first is not None and second is not None and first == second, message)

    def check_in(self, value: Any, values: Iterable[Any], message: MessageSource) -> None:
        """Value must be present and one of ``values``."""
        allowed = allowed_values(values)
        self.check(value is not None and value in allowed, message)

    def check_is_in(self, value: Any, values: Iterable[Any], message: MessageSource) -> None:
        """Alias of :meth:`check_in`."""
        self.check_in(value, values, message)

    def check_not_in(self, value: Any, values: Iterable[Any], message: MessageSource) -> None:
        """Value must not be one of ``values``."""
        self.check(value not in allowed_values(values), message)

    def check_enum_member(
        self,
        value: str | None,
        allowed: Union[type[enum.Enum], Iterable[Any]],
        message: MessageSource,
    ) -> None:
        """Value must exactly match one of the allowed labels.

        ``allowed`` is an ``enum.Enum`` subclass (member names are the labels)
        or an iterable of labels. On failure the message is suffixed with the
        labels in declaration order, e.g.
        ``"invalid color and valid values are RED, GREEN"``.
        """
        labels = enum_labels(allowed)
        settings = self.settings
        self.check(
            isinstance(value, str) and value in labels,
            lambda: (
                f"{render_message(message)}{settings.enum_values_prefix}"
                f"{settings.enum_values_separator.join(labels)}"
            ),
        )

    # Format

    def check_url(self, value: str | None, message: MessageSource) -> None:
        """Value must be a well-formed absolute URI."""
        self.check(is_absolute_url(value), message)

    # Temporal

    def check_before(self, value: date | None, cutoff: date, message: MessageSource) -> None:
        """Strictly earlier than ``cutoff``."""
        self.check(value is not None and value < cutoff, message)

    def check_after(self, value: date | None, cutoff: date, message: MessageSource) -> None:
        """Strictly later than ``cutoff``."""
        self.check(value is not None and value > cutoff, message)

    # Unconditional

    def fail(self, message: MessageSource) -> None:
        """Always record a violation."""
        self.check(False, message)
