"""Common data types used across the verify_this package."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

Number = Union[int, float]


class ErrorKind(str, Enum):
    """Identifies which constraint a value (or an entry list) violated."""

    TYPE_MISMATCH = "TypeMismatch"
    EMPTY_VALUE = "EmptyValue"
    BELOW_MINIMUM = "BelowMinimum"
    ABOVE_MAXIMUM = "AboveMaximum"
    NOT_ALLOWED = "NotAllowed"
    WRONG_FORMAT = "WrongFormat"
    MISSING_FIELD = "MissingField"
    INVALID_CONFIGURATION = "InvalidConfiguration"


class TypeTag(str, Enum):
    """Runtime kind of a container element."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"
    OTHER = "other"


class RuleViolation(ValueError):
    """Raised when a failed validation has to stop the caller."""

    def __init__(self, kind: ErrorKind, message: str, *, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.index = index

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value}: {self.message!r})"


class SelectionError(RuleViolation):
    """Weighted selection received an unusable entry list."""


class ValidationResult(BaseModel):
    """Outcome of a single validation call; truthy on success."""

    model_config = ConfigDict(frozen=True)

    ok: bool = True
    kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    index: Optional[int] = Field(
        default=None,
        description="0-based position of the offending element, for container checks.",
    )

    @model_validator(mode="after")
    def _failure_details(self) -> "ValidationResult":
        if self.ok and (self.kind is not None or self.message is not None):
            raise ValueError("a successful result carries no kind or message")
        if not self.ok and (self.kind is None or self.message is None):
            raise ValueError("a failed result requires both kind and message")
        return self

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, *, index: Optional[int] = None) -> "ValidationResult":
        return cls(ok=False, kind=kind, message=message, index=index)

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_failure(self, error_cls: type[RuleViolation] = RuleViolation) -> None:
        """Raise ``error_cls`` carrying this failure; no-op on success."""

        if self.ok:
            return
        raise error_cls(self.kind, self.message, index=self.index)


class WeightedEntry(BaseModel):
    """An item paired with its percentage weight."""

    item: Any
    weight: float = Field(..., ge=0.0, le=100.0)


class _NoSelection:
    """Sentinel for a draw that landed past the last cumulative bucket."""

    _instance: Optional["_NoSelection"] = None

    def __new__(cls) -> "_NoSelection":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_SELECTION"


NO_SELECTION = _NoSelection()


__all__ = [
    "ErrorKind",
    "NO_SELECTION",
    "Number",
    "RuleViolation",
    "SelectionError",
    "TypeTag",
    "ValidationResult",
    "WeightedEntry",
]
