"""Data structures for parsed formulas and evaluation results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from formulamass.elements import Element
from formulamass.formatting import format_hill, format_molar_mass


class ErrorKind(str, Enum):
    EMPTY = "EMPTY"
    SYNTAX = "SYNTAX"
    UNKNOWN_ELEMENT = "UNKNOWN_ELEMENT"
    LIMIT = "LIMIT"


@dataclass(frozen=True)
class ElementCount:
    element: Element
    count: int

    @property
    def symbol(self) -> str:
        return self.element.symbol


@dataclass(frozen=True)
class ParsedFormula:
    """Distinct element counts in order of first appearance."""

    formula: str
    entries: tuple[ElementCount, ...]

    @property
    def counts(self) -> dict[str, int]:
        return {entry.symbol: entry.count for entry in self.entries}

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class CompositionEntry:
    element: Element
    count: int
    weight_contribution: float  # g/mol
    percent_composition: float  # 0..100

    @property
    def symbol(self) -> str:
        return self.element.symbol

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.element.symbol,
            "name": self.element.name,
            "atomicNumber": self.element.atomic_number,
            "atomicWeight": self.element.atomic_weight,
            "count": self.count,
            "weightContribution": self.weight_contribution,
            "percentComposition": self.percent_composition,
        }


@dataclass(frozen=True)
class EvaluationSuccess:
    formula: str
    molecular_weight: float  # g/mol
    composition: tuple[CompositionEntry, ...]  # ascending atomic number
    distinct_element_count: int

    ok = True

    @property
    def counts(self) -> dict[str, int]:
        return {entry.symbol: entry.count for entry in self.composition}

    @property
    def formatted_molar_mass(self) -> str:
        return format_molar_mass(self.molecular_weight)

    @property
    def hill_formula(self) -> str:
        return format_hill(self.counts)

    def entry(self, symbol: str) -> CompositionEntry | None:
        for item in self.composition:
            if item.symbol == symbol:
                return item
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "molecularWeight": self.molecular_weight,
            "composition": [entry.to_dict() for entry in self.composition],
            "distinctElementCount": self.distinct_element_count,
        }


@dataclass(frozen=True)
class EvaluationFailure:
    formula: str
    kind: ErrorKind
    message: str
    position: int | None = None
    symbol: str | None = None

    ok = False

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message, "errorKind": self.kind.value}
        if self.position is not None:
            payload["position"] = self.position
        return payload


EvaluationResult = Union[EvaluationSuccess, EvaluationFailure]

