"""Rule-based checks for strings, numbers, and arrays.

Each check runs its constraints in a fixed order and reports only the first
violation, so messages are deterministic for a given value and rule set.
Checks never raise for a violated rule; callers that need to stop can use
``ValidationResult.raise_for_failure``.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from .config import ArrayRules, NumberRules, StringRules
from .constants import EMAIL_PATTERN, NAME_PATTERN
from .types import ErrorKind, TypeTag, ValidationResult

LOGGER = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)


def type_tag_of(value: Any) -> TypeTag:
    """Return the kind tag used to match container elements."""

    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Real):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if _is_sequence(value):
        return TypeTag.ARRAY
    return TypeTag.OTHER


def validate_string(value: Any, rules: Optional[StringRules] = None) -> ValidationResult:
    """Check ``value`` against string rules.

    Order: type, emptiness, minimum length, maximum length, then the
    single-character allow-list (only when ``max_chars`` is exactly 1).
    """

    rules = rules or StringRules()
    alias = rules.alias

    if not isinstance(value, str):
        return _fail(ErrorKind.TYPE_MISMATCH, f"{alias} is not a string")
    if not rules.can_empty and not value:
        return _fail(ErrorKind.EMPTY_VALUE, f"{alias} is empty")
    if rules.min_chars is not None and len(value) < rules.min_chars:
        return _fail(ErrorKind.BELOW_MINIMUM, f"{alias} has less than {rules.min_chars} characters")
    if rules.max_chars is not None and len(value) > rules.max_chars:
        return _fail(ErrorKind.ABOVE_MAXIMUM, f"{alias} has more than {rules.max_chars} characters")
    if rules.max_chars == 1 and value not in rules.allowed_chars:
        if rules.allowed_chars:
            message = f"Entered character is not {' or '.join(rules.allowed_chars)}"
        else:
            message = f"{alias} does not allow any character"
        return _fail(ErrorKind.NOT_ALLOWED, message)
    return ValidationResult.success()


def validate_number(value: Any, rules: Optional[NumberRules] = None) -> ValidationResult:
    """Check ``value`` against number rules.

    Order: type, allow-list, minimum, maximum. A minimum of ``0`` is a set
    limit; only ``None`` leaves a bound unchecked. NaN is reported as a
    type mismatch.
    """

    rules = rules or NumberRules()
    alias = rules.alias

    if not _is_number(value) or math.isnan(value):
        return _fail(ErrorKind.TYPE_MISMATCH, f"{alias} is not a number")
    if rules.allowed_nums and value not in rules.allowed_nums:
        return _fail(ErrorKind.NOT_ALLOWED, f"Entered {rules.allowed_nums_alias} is not allowed")
    if rules.min is not None and value < rules.min:
        return _fail(ErrorKind.BELOW_MINIMUM, f"{alias} is less than {rules.min}")
    if rules.max_value is not None and value > rules.max_value:
        return _fail(ErrorKind.ABOVE_MAXIMUM, f"{alias} is more than {rules.max_value}")
    return ValidationResult.success()


def validate_array(value: Any, rules: Optional[ArrayRules] = None) -> ValidationResult:
    """Check ``value`` against array rules.

    Order: type, emptiness, element kinds (first offending index wins),
    minimum length, maximum length.
    """

    rules = rules or ArrayRules()
    alias = rules.alias

    if not _is_sequence(value):
        return _fail(ErrorKind.TYPE_MISMATCH, f"{alias} is not an array")
    size = len(value)
    if not rules.can_empty and size == 0:
        return _fail(ErrorKind.EMPTY_VALUE, f"{alias} is empty")
    if rules.array_of:
        allowed = set(rules.array_of)
        for index, element in enumerate(value):
            if type_tag_of(element) not in allowed:
                expected = " or ".join(tag.value for tag in rules.array_of)
                return _fail(
                    ErrorKind.TYPE_MISMATCH,
                    f"Element in index {index} is not a {expected}",
                    index=index,
                )
    if rules.min_elements is not None and size < rules.min_elements:
        return _fail(ErrorKind.BELOW_MINIMUM, f"{alias} has less than {rules.min_elements} elements")
    if rules.max_elements is not None and size > rules.max_elements:
        return _fail(ErrorKind.ABOVE_MAXIMUM, f"{alias} has more than {rules.max_elements} elements")
    return ValidationResult.success()


def validate_name(value: Any) -> ValidationResult:
    """Check a name made of capitalised words, e.g. ``"Ana María"``."""

    result = validate_string(value, StringRules(alias="Name"))
    if not result:
        return result
    if NAME_PATTERN.fullmatch(value) is None:
        return _fail(ErrorKind.WRONG_FORMAT, "Entered name is not valid")
    return result


def validate_email(value: Any) -> ValidationResult:
    """Check an e-mail address made of lowercase letters and digits."""

    result = validate_string(value, StringRules(alias="Email"))
    if not result:
        return result
    if EMAIL_PATTERN.match(value) is None:
        return _fail(ErrorKind.WRONG_FORMAT, "Entered email is not valid")
    return result


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def _fail(kind: ErrorKind, message: str, *, index: Optional[int] = None) -> ValidationResult:
    LOGGER.debug("Validation failed (%s): %s", kind.value, message)
    return ValidationResult.failure(kind, message, index=index)


__all__ = [
    "type_tag_of",
    "validate_array",
    "validate_email",
    "validate_name",
    "validate_number",
    "validate_string",
]
