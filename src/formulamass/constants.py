"""Shared constants."""

from __future__ import annotations

MG_PER_G = 1000.0

DEFAULT_DECIMALS = 4
PERCENT_DECIMALS = 2

# Element picker shows this many entries when no search text is given.
DEFAULT_ELEMENT_LISTING = 50

COMMON_FORMULAS: tuple[tuple[str, str], ...] = (
    ("H2O", "Water"),
    ("CO2", "Carbon Dioxide"),
    ("NaCl", "Sodium Chloride"),
    ("C6H12O6", "Glucose"),
    ("CH4", "Methane"),
    ("C2H5OH", "Ethanol"),
    ("C8H10N4O2", "Caffeine"),
    ("H2SO4", "Sulfuric Acid"),
    ("HCl", "Hydrochloric Acid"),
    ("NaOH", "Sodium Hydroxide"),
    ("NH3", "Ammonia"),
    ("CaCO3", "Calcium Carbonate"),
    ("C12H22O11", "Sucrose"),
    ("C3H8", "Propane"),
    ("C55H72MgN4O5", "Chlorophyll a"),
)
