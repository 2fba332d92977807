"""Evaluator settings and JSON settings files."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from formulamass.constants import DEFAULT_DECIMALS


@dataclass(frozen=True)
class EvaluatorSettings:
    """Input limits and display precision.

    Attributes:
        max_length: Longest formula accepted, or ``None`` for no limit.
        max_depth: Deepest parenthesis nesting accepted, or ``None``.
        decimals: Decimal places used when rendering weights.
    """

    max_length: int | None = None
    max_depth: int | None = None
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self) -> None:
        for name in ("max_length", "max_depth"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 1):
                raise ValueError(f"{name} must be a positive integer or null")
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int) or not 0 <= self.decimals <= 12:
            raise ValueError("decimals must be an integer between 0 and 12")


DEFAULT_SETTINGS = EvaluatorSettings()


def settings_from_mapping(data: Mapping[str, Any]) -> EvaluatorSettings:
    known = {field.name for field in fields(EvaluatorSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")
    return EvaluatorSettings(**dict(data))


def load_settings(path: str | Path) -> EvaluatorSettings:
    """Load settings from a JSON object file."""
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")
    return settings_from_mapping(data)
