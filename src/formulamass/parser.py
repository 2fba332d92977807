"""Chemical formula parsing.

Grammar (case-sensitive)::

    formula := term*
    term    := UPPER lower* digits? | '(' term* ')' digits?

A missing count means 1. Group multipliers apply to everything accumulated
inside the group, including nested groups, so multipliers compose
multiplicatively. Parsing is a single left-to-right pass; open groups are
kept on an explicit stack rather than the call stack, so nesting depth is
bounded only by the input (or by ``EvaluatorSettings.max_depth``).
"""

from __future__ import annotations

import string
from typing import Dict, List, Optional, Tuple

from formulamass.config import DEFAULT_SETTINGS, EvaluatorSettings
from formulamass.elements import lookup
from formulamass.models import ElementCount, ErrorKind, ParsedFormula

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_DIGITS = frozenset(string.digits)


class FormulaError(ValueError):
    """Base class for every formula parsing failure."""

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


class EmptyFormulaError(FormulaError):
    kind = ErrorKind.EMPTY

    def __init__(self) -> None:
        super().__init__("empty formula")


class FormulaSyntaxError(FormulaError):
    kind = ErrorKind.SYNTAX

    def __init__(self, message: str, position: int, character: str | None = None) -> None:
        super().__init__(message, position)
        self.character = character


class UnknownElementError(FormulaError):
    kind = ErrorKind.UNKNOWN_ELEMENT

    def __init__(self, symbol: str) -> None:
        super().__init__(f"unknown element: {symbol}")
        self.symbol = symbol


class FormulaLimitError(FormulaError):
    kind = ErrorKind.LIMIT


def _merge(target: Dict[str, int], symbol: str, count: int) -> None:
    target[symbol] = target.get(symbol, 0) + count


class _FormulaParser:
    def __init__(self, text: str, max_depth: Optional[int]) -> None:
        self.text = text
        self.pos = 0
        self.max_depth = max_depth

    def _invalid(self) -> FormulaSyntaxError:
        char = self.text[self.pos]
        return FormulaSyntaxError(
            f"invalid character {char!r} at position {self.pos}", self.pos, char
        )

    def _read_count(self) -> int:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _DIGITS:
            self.pos += 1
        if start == self.pos:
            return 1
        try:
            value = int(self.text[start : self.pos])
        except ValueError:
            raise FormulaLimitError(f"count too large at position {start}", start) from None
        if value == 0:
            raise FormulaSyntaxError(
                f"count must be positive at position {start}", start, self.text[start]
            )
        return value

    def _read_symbol(self) -> str:
        start = self.pos
        self.pos += 1
        while self.pos < len(self.text) and self.text[self.pos] in _LOWER:
            self.pos += 1
        return self.text[start : self.pos]

    def parse(self) -> Dict[str, int]:
        # Each frame is (accumulator, index of the opening parenthesis).
        stack: List[Tuple[Dict[str, int], int]] = [({}, -1)]
        text = self.text

        while self.pos < len(text):
            char = text[self.pos]
            if char == "(":
                if self.max_depth is not None and len(stack) > self.max_depth:
                    raise FormulaLimitError(
                        f"nesting deeper than {self.max_depth} at position {self.pos}",
                        self.pos,
                    )
                stack.append(({}, self.pos))
                self.pos += 1
            elif char == ")":
                if len(stack) == 1:
                    raise self._invalid()
                self.pos += 1
                group, _ = stack.pop()
                multiplier = self._read_count()
                scope = stack[-1][0]
                for symbol, count in group.items():
                    _merge(scope, symbol, count * multiplier)
            elif char in _UPPER:
                symbol = self._read_symbol()
                _merge(stack[-1][0], symbol, self._read_count())
            else:
                raise self._invalid()

        if len(stack) > 1:
            open_at = stack[-1][1]
            raise FormulaSyntaxError(f"unclosed '(' at position {open_at}", open_at, "(")

        counts = stack[0][0]
        if not counts:
            raise FormulaSyntaxError("formula contains no elements", 0)
        return counts


def parse_counts(
    formula: str, settings: EvaluatorSettings = DEFAULT_SETTINGS
) -> Dict[str, int]:
    """Parse a formula into symbol -> atom count, in first-appearance order.

    Symbols are not checked against the element table.

    Raises:
        EmptyFormulaError: The formula is empty or blank.
        FormulaSyntaxError: Malformed input; ``position`` is the 0-based index.
        FormulaLimitError: A configured length or depth limit was exceeded, or a
            count has too many digits to convert.
    """
    if formula is None or not formula.strip():
        raise EmptyFormulaError()
    if settings.max_length is not None and len(formula) > settings.max_length:
        raise FormulaLimitError(
            f"formula longer than {settings.max_length} characters", settings.max_length
        )
    return _FormulaParser(formula, settings.max_depth).parse()


def parse_formula(
    formula: str, settings: EvaluatorSettings = DEFAULT_SETTINGS
) -> ParsedFormula:
    """Parse a formula and resolve every symbol against the element table.

    Raises the same errors as :func:`parse_counts`, plus
    :class:`UnknownElementError` for the first symbol missing from the table.
    """
    counts = parse_counts(formula, settings)
    entries = []
    for symbol, count in counts.items():
        element = lookup(symbol)
        if element is None:
            raise UnknownElementError(symbol)
        entries.append(ElementCount(element=element, count=count))
    return ParsedFormula(formula=formula, entries=tuple(entries))
