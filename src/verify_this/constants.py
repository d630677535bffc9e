"""Default aliases, format patterns, and selector bounds."""

from __future__ import annotations

import re

DEFAULT_STRING_ALIAS = "String"
DEFAULT_NUMBER_ALIAS = "Number"
DEFAULT_ARRAY_ALIAS = "Array"
DEFAULT_ALLOWED_NUMS_ALIAS = "number"

# Capitalised words separated by single spaces, Spanish accented vowels allowed.
NAME_PATTERN = re.compile(r"([A-ZÁÉÍÓÚ][a-záéíóú]+\s?)+")

# Only the prefix is checked, trailing text after the domain is accepted.
EMAIL_PATTERN = re.compile(r"[a-z0-9]{8,}@[a-z0-9]{3,}\.[a-z]{2,}")

# Weights are percentages; draws land in [0, MAX_TOTAL_WEIGHT).
MAX_TOTAL_WEIGHT = 100.0
DEFAULT_DRAW_PRECISION = 2
MAX_DRAW_PRECISION = 6


__all__ = [
    "DEFAULT_ALLOWED_NUMS_ALIAS",
    "DEFAULT_ARRAY_ALIAS",
    "DEFAULT_DRAW_PRECISION",
    "DEFAULT_NUMBER_ALIAS",
    "DEFAULT_STRING_ALIAS",
    "EMAIL_PATTERN",
    "MAX_DRAW_PRECISION",
    "MAX_TOTAL_WEIGHT",
    "NAME_PATTERN",
]
