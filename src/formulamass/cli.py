"""Command-line entrypoints for formulamass."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Annotated, Any, List, NoReturn

import typer

from formulamass.config import DEFAULT_SETTINGS, EvaluatorSettings, load_settings
from formulamass.constants import COMMON_FORMULAS
from formulamass.elements import search_elements
from formulamass.evaluator import evaluate
from formulamass.formatting import (
    composition_rows,
    format_molar_mass,
    format_subscripts,
    render_table,
)
from formulamass.persistence import sqlite_store
from formulamass.quantities import (
    mass_for_solution,
    mass_from_moles,
    moles_from_mass,
    quick_calculations,
)

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Molecular weight and percent composition from chemical formulas."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _settings(config: Path | None, decimals: int | None = None) -> EvaluatorSettings:
    try:
        settings = load_settings(config) if config is not None else DEFAULT_SETTINGS
        if decimals is not None:
            settings = dataclasses.replace(settings, decimals=decimals)
    except (OSError, ValueError) as exc:
        _fail(f"Invalid configuration: {exc}")
    return settings


def _read_formulas(input_file: Path) -> List[str]:
    with open(input_file, "r") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("formulas")
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise ValueError("Input must be a JSON list of formulas or an object with a 'formulas' list")
    return data


@app.command()
def mw(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. Ca(OH)2.")],
    json_output: Annotated[bool, typer.Option("--json", help="Emit JSON.")] = False,
    decimals: Annotated[
        int | None, typer.Option(help="Decimal places for weights.")
    ] = None,
    config: Annotated[
        Path | None, typer.Option(help="JSON settings file.")
    ] = None,
    history: Annotated[
        Path | None, typer.Option(help="SQLite file to record the evaluation in.")
    ] = None,
) -> None:
    """Calculate the molecular weight and composition of a formula."""
    settings = _settings(config, decimals)
    result = evaluate(formula, settings)

    if history is not None:
        connection = sqlite_store.connect(history)
        sqlite_store.ensure_schema(connection)
        sqlite_store.save_evaluation(connection, result)
        connection.close()

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            raise typer.Exit(code=1)
        return

    if not result.ok:
        _fail(f"Error: {result.message}")

    typer.echo(f"{format_subscripts(formula)}  {format_molar_mass(result.molecular_weight, settings.decimals)}")
    typer.echo(f"Distinct elements: {result.distinct_element_count}")
    typer.echo("")
    typer.echo(render_table(composition_rows(result, settings.decimals)))


@app.command()
def batch(
    input_file: Annotated[
        Path, typer.Argument(help="JSON list of formulas (or {'formulas': [...]}).")
    ],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
    config: Annotated[
        Path | None, typer.Option(help="JSON settings file.")
    ] = None,
) -> None:
    """Evaluate every formula in a JSON file."""
    settings = _settings(config)
    try:
        formulas = _read_formulas(input_file)
    except (OSError, ValueError) as exc:
        _fail(f"Cannot read {input_file}: {exc}")

    results: List[dict[str, Any]] = []
    for formula in formulas:
        result = evaluate(formula, settings)
        results.append({"formula": formula, **result.to_dict()})

    failures = sum(1 for item in results if "error" in item)
    if failures:
        logger.info("%d of %d formulas failed", failures, len(results))

    json_output = json.dumps(results, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def elements(
    search: Annotated[str, typer.Option(help="Filter by symbol or name.")] = "",
) -> None:
    """List elements of the periodic table."""
    matches = search_elements(search)
    if not matches:
        _fail(f"No element matches '{search}'")
    for element in matches:
        typer.echo(
            f"{element.atomic_number:>3}  {element.symbol:<2}  {element.name:<14}"
            f"  {element.atomic_weight:.4f}"
        )


@app.command()
def common() -> None:
    """List common formulas with their molecular weights."""
    for formula, name in COMMON_FORMULAS:
        result = evaluate(formula)
        typer.echo(f"{formula:<14} {name:<20} {format_molar_mass(result.molecular_weight)}")


@app.command()
def convert(
    formula: Annotated[str, typer.Argument(help="Chemical formula.")],
    mass: Annotated[float | None, typer.Option(help="Mass in grams.")] = None,
    moles: Annotated[float | None, typer.Option(help="Amount in moles.")] = None,
    molarity: Annotated[float | None, typer.Option(help="Concentration in mol/L.")] = None,
    volume: Annotated[float | None, typer.Option(help="Solution volume in litres.")] = None,
) -> None:
    """Convert between mass and amount of substance for a formula."""
    result = evaluate(formula)
    if not result.ok:
        _fail(f"Error: {result.message}")
    weight = result.molecular_weight

    try:
        if mass is not None:
            typer.echo(f"{moles_from_mass(mass, weight):.6g} mol")
        elif moles is not None:
            typer.echo(f"{mass_from_moles(moles, weight):.6g} g")
        elif molarity is not None and volume is not None:
            typer.echo(f"{mass_for_solution(molarity, volume, weight):.6g} g")
        elif molarity is not None or volume is not None:
            _fail("--molarity and --volume must be given together")
        else:
            quick = quick_calculations(weight)
            typer.echo(f"1 mole:      {quick.grams_per_mole:.2f} g")
            typer.echo(f"10 mg:       {quick.moles_in_10_mg:.3e} mol")
            typer.echo(f"1 g:         {quick.moles_in_1_g:.4f} mol")
            typer.echo(f"1 mM (1 L):  {quick.grams_for_1_mm_per_litre:.4f} g")
    except ValueError as exc:
        _fail(f"Error: {exc}")


@app.command()
def history(
    history_file: Annotated[Path, typer.Argument(help="SQLite history file.")],
    limit: Annotated[int, typer.Option(help="Number of entries to show.")] = 20,
) -> None:
    """Show recorded evaluations, newest first."""
    if not history_file.exists():
        _fail(f"No history file at {history_file}")
    connection = sqlite_store.connect(history_file)
    sqlite_store.ensure_schema(connection)
    entries = sqlite_store.list_evaluations(connection, limit=limit)
    connection.close()

    for entry in entries:
        if entry["ok"]:
            outcome = format_molar_mass(entry["molecular_weight"])
        else:
            outcome = f"error: {entry['error']}"
        typer.echo(f"{entry['recorded_utc']}  {entry['formula']:<16} {outcome}")
