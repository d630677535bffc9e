"""Percentage-weighted selection over an ordered entry list."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence

from .config import ArrayRules, NumberRules, SelectorConfig
from .types import NO_SELECTION, ErrorKind, SelectionError
from .utils import float_between
from .validator import validate_array, validate_number

LOGGER = logging.getLogger(__name__)

_ENTRY_FIELDS = ("item", "weight")


class WeightedSelector:
    """Pick one item by walking cumulative weights against a random draw.

    Entries are ``WeightedEntry`` models, mappings with ``item``/``weight``
    keys, or any object exposing those attributes. List order matters: when a
    draw sits exactly on a bucket boundary the earlier entry wins. Weight sums
    below ``total_weight`` leave a gap that yields ``NO_SELECTION``.
    """

    def __init__(
        self,
        config: Optional[SelectorConfig] = None,
        *,
        random_fn: Callable[[], float] = random.random,
    ) -> None:
        self.config = config or SelectorConfig()
        self._random = random_fn

    def select(self, entries: Sequence[Any]) -> Any:
        """Draw once and return the selected item or ``NO_SELECTION``."""

        pairs = self._normalize(entries)
        draw = float_between(
            0,
            self.config.total_weight,
            self.config.precision,
            random_fn=self._random,
        )
        return self._walk(pairs, draw)

    def select_with_draw(self, entries: Sequence[Any], draw: float) -> Any:
        """Run the cumulative walk for a caller-supplied draw."""

        pairs = self._normalize(entries)
        result = validate_number(
            draw,
            NumberRules(alias="Draw", min=0, max_value=self.config.total_weight),
        )
        result.raise_for_failure(SelectionError)
        return self._walk(pairs, draw)

    def _normalize(self, entries: Sequence[Any]) -> list[tuple[Any, float]]:
        validate_array(entries, ArrayRules(alias="Weighted entries", can_empty=True)).raise_for_failure(
            SelectionError
        )

        for field in _ENTRY_FIELDS:
            for index, entry in enumerate(entries):
                if not _has_field(entry, field):
                    raise SelectionError(
                        ErrorKind.MISSING_FIELD,
                        f"Element in index {index} is missing '{field}' property",
                        index=index,
                    )

        total_weight = self.config.total_weight
        pairs: list[tuple[Any, float]] = []
        for index, entry in enumerate(entries):
            weight = _get_field(entry, "weight")
            result = validate_number(
                weight,
                NumberRules(alias=f"Weight in index {index}", min=0),
            )
            if not result:
                raise SelectionError(result.kind, result.message, index=index)
            pairs.append((_get_field(entry, "item"), weight))

        weight_sum = math.fsum(weight for _, weight in pairs)
        if weight_sum > total_weight:
            raise SelectionError(
                ErrorKind.INVALID_CONFIGURATION,
                f"The sum of the weights is more than {total_weight:g}",
            )
        return pairs

    def _walk(self, pairs: list[tuple[Any, float]], draw: float) -> Any:
        cumulative = 0.0
        for item, weight in pairs:
            cumulative += weight
            if cumulative >= draw:
                LOGGER.debug("Draw %s selected %r (cumulative %s)", draw, item, cumulative)
                return item
        LOGGER.debug("Draw %s fell past cumulative total %s; nothing selected", draw, cumulative)
        return NO_SELECTION


def select(entries: Sequence[Any], *, random_fn: Callable[[], float] = random.random) -> Any:
    """Module-level shortcut for ``WeightedSelector().select``."""

    return WeightedSelector(random_fn=random_fn).select(entries)


def select_with_draw(entries: Sequence[Any], draw: float) -> Any:
    """Module-level shortcut for ``WeightedSelector().select_with_draw``."""

    return WeightedSelector().select_with_draw(entries, draw)


def _has_field(entry: Any, name: str) -> bool:
    if isinstance(entry, Mapping):
        return name in entry
    return hasattr(entry, name)


def _get_field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry[name]
    return getattr(entry, name)


__all__ = ["WeightedSelector", "select", "select_with_draw"]
