"""Utilities for loading named rule presets from JSON or YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Union

import yaml
from pydantic import BaseModel, Field

from .config import ArrayRules, NumberRules, StringRules

LOGGER = logging.getLogger(__name__)

RuleConfig = Annotated[Union[StringRules, NumberRules, ArrayRules], Field(discriminator="kind")]


class RulePresets(BaseModel):
    """Named rule configurations keyed by preset name."""

    rules: dict[str, RuleConfig] = Field(default_factory=dict)


def load_rules(path: str | Path) -> dict[str, Union[StringRules, NumberRules, ArrayRules]]:
    """Load rule presets from a JSON or YAML file.

    The document holds a top-level ``rules`` mapping; every entry names its
    ``kind`` (``string``, ``number`` or ``array``) next to the rule fields.
    """

    data = _read_file(path)
    presets = RulePresets.model_validate(data)
    if not presets.rules:
        raise RuntimeError("rule file contains no rule presets")
    LOGGER.info("Loaded %d rule presets from %s", len(presets.rules), path)
    return dict(presets.rules)


def _read_file(path: str | Path) -> dict:
    payload = Path(path).read_text(encoding="utf-8")
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(payload) or {}
    return json.loads(payload)


__all__ = ["RuleConfig", "RulePresets", "load_rules"]
