"""Molecular weight and percent composition.

:func:`evaluate` is the public entry point: it always returns either an
:class:`EvaluationSuccess` or an :class:`EvaluationFailure` and never lets a
parsing error escape to the caller. It touches no shared mutable state, so it
is safe to call from many threads at once.
"""

from __future__ import annotations

import logging

import numpy as np

from formulamass.config import DEFAULT_SETTINGS, EvaluatorSettings
from formulamass.models import (
    CompositionEntry,
    EvaluationFailure,
    EvaluationResult,
    EvaluationSuccess,
    ParsedFormula,
)
from formulamass.parser import (
    FormulaError,
    FormulaLimitError,
    UnknownElementError,
    parse_formula,
)

logger = logging.getLogger(__name__)


def compose(parsed: ParsedFormula) -> EvaluationSuccess:
    """Compute weights and percentages for an already parsed formula.

    Percentages are taken against the final total, and entries are sorted by
    ascending atomic number.

    Raises:
        FormulaLimitError: The total weight does not fit in a float.
    """
    atomic_weights = np.array(
        [entry.element.atomic_weight for entry in parsed.entries], dtype=float
    )
    try:
        counts = np.array([entry.count for entry in parsed.entries], dtype=float)
    except OverflowError:
        raise FormulaLimitError("molecular weight out of range") from None
    with np.errstate(over="ignore"):
        contributions = atomic_weights * counts
        molecular_weight = float(contributions.sum())
    if not np.isfinite(molecular_weight):
        raise FormulaLimitError("molecular weight out of range")
    percents = contributions / molecular_weight * 100.0

    composition = [
        CompositionEntry(
            element=entry.element,
            count=entry.count,
            weight_contribution=float(contribution),
            percent_composition=float(percent),
        )
        for entry, contribution, percent in zip(parsed.entries, contributions, percents)
    ]
    composition.sort(key=lambda item: item.element.atomic_number)

    return EvaluationSuccess(
        formula=parsed.formula,
        molecular_weight=molecular_weight,
        composition=tuple(composition),
        distinct_element_count=len(composition),
    )


def evaluate(formula: str, settings: EvaluatorSettings = DEFAULT_SETTINGS) -> EvaluationResult:
    """Parse *formula* and return its molecular weight and composition."""
    try:
        parsed = parse_formula(formula, settings)
        logger.debug("Formula %r parsed into %d elements", formula, len(parsed))
        return compose(parsed)
    except FormulaError as exc:
        logger.debug("Formula %r rejected: %s", formula, exc.message)
        return EvaluationFailure(
            formula=formula,
            kind=exc.kind,
            message=exc.message,
            position=exc.position,
            symbol=exc.symbol if isinstance(exc, UnknownElementError) else None,
        )

