"""formulamass core package."""

from formulamass.config import EvaluatorSettings, load_settings
from formulamass.elements import Element, all_elements, get_element, lookup, search_elements
from formulamass.evaluator import compose, evaluate
from formulamass.models import (
    CompositionEntry,
    ElementCount,
    ErrorKind,
    EvaluationFailure,
    EvaluationSuccess,
    ParsedFormula,
)
from formulamass.parser import (
    EmptyFormulaError,
    FormulaError,
    FormulaLimitError,
    FormulaSyntaxError,
    UnknownElementError,
    parse_counts,
    parse_formula,
)

__all__ = [
    "EvaluatorSettings",
    "load_settings",
    "Element",
    "all_elements",
    "get_element",
    "lookup",
    "search_elements",
    "compose",
    "evaluate",
    "CompositionEntry",
    "ElementCount",
    "ErrorKind",
    "EvaluationFailure",
    "EvaluationSuccess",
    "ParsedFormula",
    "EmptyFormulaError",
    "FormulaError",
    "FormulaLimitError",
    "FormulaSyntaxError",
    "UnknownElementError",
    "parse_counts",
    "parse_formula",
]
