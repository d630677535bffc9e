"""Public package interface for verify_this."""

from .config import ArrayRules, NumberRules, SelectorConfig, StringRules
from .rule_loader import load_rules
from .selector import WeightedSelector, select, select_with_draw
from .utils import float_between, int_between
from .validator import (
    type_tag_of,
    validate_array,
    validate_email,
    validate_name,
    validate_number,
    validate_string,
)
from .types import (
    NO_SELECTION,
    ErrorKind,
    RuleViolation,
    SelectionError,
    TypeTag,
    ValidationResult,
    WeightedEntry,
)

__all__ = [
    "ArrayRules",
    "ErrorKind",
    "NO_SELECTION",
    "NumberRules",
    "RuleViolation",
    "SelectionError",
    "SelectorConfig",
    "StringRules",
    "TypeTag",
    "ValidationResult",
    "WeightedEntry",
    "WeightedSelector",
    "float_between",
    "int_between",
    "load_rules",
    "select",
    "select_with_draw",
    "type_tag_of",
    "validate_array",
    "validate_email",
    "validate_name",
    "validate_number",
    "validate_string",
]
