"""Utility helpers for random draws."""

from __future__ import annotations

import math
import numbers
import random
from typing import Callable

from .config import NumberRules
from .constants import MAX_DRAW_PRECISION
from .types import ErrorKind, Number, RuleViolation
from .validator import validate_number

# Bounds are scaled to the decimal grid and rounded to absorb float noise
# such as 1.1 * 10 == 11.000000000000002.
_GRID_ROUNDING = 9


def int_between(low: int, high: int, *, random_fn: Callable[[], float] = random.random) -> int:
    """Return a uniformly drawn integer in ``[low, high]``."""

    _check_bounds(low, high)
    for alias, bound in (("Minimum value", low), ("Maximum value", high)):
        if not isinstance(bound, numbers.Integral):
            raise RuleViolation(ErrorKind.TYPE_MISMATCH, f"{alias} is not an integer")
    return math.floor(random_fn() * (high - low + 1)) + low


def float_between(
    low: Number,
    high: Number,
    decimals: int = 1,
    *,
    random_fn: Callable[[], float] = random.random,
) -> float:
    """Return a value in ``[low, high)`` with at most ``decimals`` places."""

    _check_bounds(low, high)
    validate_number(
        decimals,
        NumberRules(alias="Number of decimals", min=0, max_value=MAX_DRAW_PRECISION),
    ).raise_for_failure()
    if not isinstance(decimals, numbers.Integral):
        raise RuleViolation(ErrorKind.TYPE_MISMATCH, "Number of decimals is not an integer")

    scale = 10**decimals
    first = math.ceil(round(low * scale, _GRID_ROUNDING))
    stop = math.ceil(round(high * scale, _GRID_ROUNDING))
    if first >= stop:
        raise RuleViolation(
            ErrorKind.INVALID_CONFIGURATION,
            f"No value with {decimals} decimals lies between {low} and {high}",
        )
    step = first + min(math.floor(random_fn() * (stop - first)), stop - first - 1)
    return round(step / scale, decimals)


def _check_bounds(low: Number, high: Number) -> None:
    validate_number(low, NumberRules(alias="Minimum value")).raise_for_failure()
    validate_number(high, NumberRules(alias="Maximum value")).raise_for_failure()
    if math.isinf(low) or math.isinf(high):
        raise RuleViolation(ErrorKind.INVALID_CONFIGURATION, "Minimum and maximum values must be finite")
    if low == high:
        raise RuleViolation(ErrorKind.INVALID_CONFIGURATION, "Minimum value is equal to maximum value")
    if low > high:
        raise RuleViolation(ErrorKind.INVALID_CONFIGURATION, "Minimum value is more than the maximum value")


__all__ = ["float_between", "int_between"]
