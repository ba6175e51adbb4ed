"""Composable constraint-checking accumulator.

Collects every validation failure instead of stopping at the first one, then
converts the accumulated failures into a single pass/fail outcome:

- **Validator**: keyed, append-only collector exposing ``check`` and a
  catalogue of named predicate checks
- **Composition**: ``add``/``add_all`` plus ``or_valid``, ``or_invalid``,
  ``reduce_valid`` and ``reduce_invalid``
- **Outcome**: ``to_result`` yields a ``ValidationOutcome`` whose error
  message joins every violation as ``"<key> - <message>"``
- **Entry points**: ``build``, ``build_result`` and ``build_or_raise``

Example:
    ```python
    from checkknobs_validators import build_result

    def user_checks(v):
        v.check_not_blank(user.name, "Name must not be blank")
        v.check_in_range(user.age, 13, 120, lambda: f"Age {user.age} out of range")

    outcome = build_result("user", user_checks)
    ```
"""

from .builders import build, build_or_raise, build_result
from .checks import MessageSource, enum_labels, is_absolute_url, to_decimal
from .composition import or_invalid, or_valid, reduce_invalid, reduce_valid
from .exceptions import ConstraintViolationError
from .outcome import ValidationOutcome
from .settings import ValidatorSettings, configure, get_settings, reset_settings
from .validator import Validator
from .violation import Violation, ViolationType

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Core
    "Validator",
    "Violation",
    "ViolationType",
    "MessageSource",
    # Composition
    "or_valid",
    "or_invalid",
    "reduce_valid",
    "reduce_invalid",
    # Outcome
    "ValidationOutcome",
    "ConstraintViolationError",
    # Entry points
    "build",
    "build_result",
    "build_or_raise",
    # Settings
    "ValidatorSettings",
    "configure",
    "get_settings",
    "reset_settings",
    # Helpers
    "enum_labels",
    "is_absolute_url",
    "to_decimal",
]
