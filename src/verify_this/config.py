"""Rule configuration models for the validator and the weighted selector."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    PositiveFloat,
    field_validator,
)

from .constants import (
    DEFAULT_ALLOWED_NUMS_ALIAS,
    DEFAULT_ARRAY_ALIAS,
    DEFAULT_DRAW_PRECISION,
    DEFAULT_NUMBER_ALIAS,
    DEFAULT_STRING_ALIAS,
    MAX_DRAW_PRECISION,
    MAX_TOTAL_WEIGHT,
)
from .types import Number, TypeTag


class StringRules(BaseModel):
    """Constraints checked by ``validate_string``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    can_empty: bool = False
    min_chars: Optional[NonNegativeInt] = None
    max_chars: Optional[NonNegativeInt] = None
    alias: str = DEFAULT_STRING_ALIAS
    allowed_chars: tuple[str, ...] = Field(
        default=(),
        description="Accepted values when max_chars is exactly 1.",
    )

    @field_validator("allowed_chars")
    @classmethod
    def _single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for char in value:
            if len(char) != 1:
                raise ValueError(f"allowed_chars entries must be single characters, got {char!r}")
        return value


class NumberRules(BaseModel):
    """Constraints checked by ``validate_number``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    min: Optional[Number] = None
    max_value: Optional[Number] = None
    alias: str = DEFAULT_NUMBER_ALIAS
    allowed_nums: tuple[Number, ...] = ()
    allowed_nums_alias: str = DEFAULT_ALLOWED_NUMS_ALIAS


class ArrayRules(BaseModel):
    """Constraints checked by ``validate_array``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    can_empty: bool = False
    min_elements: Optional[NonNegativeInt] = None
    max_elements: Optional[NonNegativeInt] = None
    alias: str = DEFAULT_ARRAY_ALIAS
    array_of: tuple[TypeTag, ...] = Field(
        default=(),
        description="Allowed element kinds; empty means any element is accepted.",
    )


class SelectorConfig(BaseModel):
    """Bounds and draw precision for weighted selection."""

    model_config = ConfigDict(frozen=True)

    total_weight: PositiveFloat = Field(
        default=MAX_TOTAL_WEIGHT,
        le=MAX_TOTAL_WEIGHT,
        description="Upper bound for the sum of weights and for the random draw.",
    )
    precision: int = Field(
        default=DEFAULT_DRAW_PRECISION,
        ge=0,
        le=MAX_DRAW_PRECISION,
        description="Decimal places kept on the random draw.",
    )


__all__ = [
    "ArrayRules",
    "NumberRules",
    "SelectorConfig",
    "StringRules",
]
