"""Display helpers for formulas and composition tables."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Mapping

from formulamass.constants import DEFAULT_DECIMALS, PERCENT_DECIMALS

if TYPE_CHECKING:
    from formulamass.models import EvaluationSuccess

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")
_DIGITS_RE = re.compile(r"\d+")


def format_molar_mass(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    return f"{value:.{decimals}f} g/mol"


def format_subscripts(formula: str) -> str:
    """Render counts as Unicode subscripts, e.g. ``H2O`` -> ``H₂O``."""
    return _DIGITS_RE.sub(lambda match: match.group(0).translate(_SUBSCRIPTS), formula)


def format_hill(counts: Mapping[str, int]) -> str:
    """Format element counts according to Hill notation.

    Carbon first, then hydrogen, then everything else alphabetically. Without
    carbon all symbols are alphabetical.
    """
    present = {symbol: int(value) for symbol, value in counts.items() if int(value) != 0}
    if not present:
        return ""

    if "C" in present:
        def sort_key(symbol: str) -> tuple[int, str]:
            if symbol == "C":
                return (0, symbol)
            if symbol == "H":
                return (1, symbol)
            return (2, symbol)
    else:
        def sort_key(symbol: str) -> tuple[int, str]:
            return (0, symbol)

    parts: list[str] = []
    for symbol in sorted(present, key=sort_key):
        value = present[symbol]
        parts.append(symbol if value == 1 else f"{symbol}{value}")
    return "".join(parts)


def composition_rows(
    result: EvaluationSuccess, decimals: int = DEFAULT_DECIMALS
) -> list[list[str]]:
    """Table rows (header first, total last) for a successful evaluation."""
    rows = [["Element", "Name", "Count", "Atomic weight", "Contribution", "Percent"]]
    for entry in result.composition:
        rows.append(
            [
                entry.element.symbol,
                entry.element.name,
                str(entry.count),
                f"{entry.element.atomic_weight:.{decimals}f}",
                f"{entry.weight_contribution:.{decimals}f}",
                f"{entry.percent_composition:.{PERCENT_DECIMALS}f}%",
            ]
        )
    rows.append(
        [
            "Total",
            "",
            str(sum(entry.count for entry in result.composition)),
            "",
            f"{result.molecular_weight:.{decimals}f}",
            f"{100.0:.{PERCENT_DECIMALS}f}%",
        ]
    )
    return rows


def render_table(rows: list[list[str]]) -> str:
    widths = [max(len(row[column]) for row in rows) for column in range(len(rows[0]))]
    lines = []
    for index, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if index == 0:
            lines.append("  ".join("-" * width for width in widths))
    return "\n".join(lines)
