"""Periodic table data and symbol lookup.

The table is built once at import time and exposed through a read-only
mapping, so it can be shared freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from formulamass.constants import DEFAULT_ELEMENT_LISTING


@dataclass(frozen=True)
class Element:
    symbol: str
    name: str
    atomic_number: int
    atomic_weight: float  # g/mol
    group: int
    period: int


# (symbol, name, atomic number, standard atomic weight, group, period)
# Atomic weights: IUPAC 2021 abridged values; mass number of the most
# stable isotope for elements without a standard weight.
_ELEMENT_ROWS: tuple[tuple[str, str, int, float, int, int], ...] = (
    ("H", "Hydrogen", 1, 1.008, 1, 1),
    ("He", "Helium", 2, 4.0026, 18, 1),
    ("Li", "Lithium", 3, 6.94, 1, 2),
    ("Be", "Beryllium", 4, 9.0122, 2, 2),
    ("B", "Boron", 5, 10.81, 13, 2),
    ("C", "Carbon", 6, 12.011, 14, 2),
    ("N", "Nitrogen", 7, 14.007, 15, 2),
    ("O", "Oxygen", 8, 15.999, 16, 2),
    ("F", "Fluorine", 9, 18.998, 17, 2),
    ("Ne", "Neon", 10, 20.180, 18, 2),
    ("Na", "Sodium", 11, 22.990, 1, 3),
    ("Mg", "Magnesium", 12, 24.305, 2, 3),
    ("Al", "Aluminum", 13, 26.982, 13, 3),
    ("Si", "Silicon", 14, 28.085, 14, 3),
    ("P", "Phosphorus", 15, 30.974, 15, 3),
    ("S", "Sulfur", 16, 32.06, 16, 3),
    ("Cl", "Chlorine", 17, 35.45, 17, 3),
    ("Ar", "Argon", 18, 39.948, 18, 3),
    ("K", "Potassium", 19, 39.098, 1, 4),
    ("Ca", "Calcium", 20, 40.078, 2, 4),
    ("Sc", "Scandium", 21, 44.956, 3, 4),
    ("Ti", "Titanium", 22, 47.867, 4, 4),
    ("V", "Vanadium", 23, 50.942, 5, 4),
    ("Cr", "Chromium", 24, 51.996, 6, 4),
    ("Mn", "Manganese", 25, 54.938, 7, 4),
    ("Fe", "Iron", 26, 55.845, 8, 4),
    ("Co", "Cobalt", 27, 58.933, 9, 4),
    ("Ni", "Nickel", 28, 58.693, 10, 4),
    ("Cu", "Copper", 29, 63.546, 11, 4),
    ("Zn", "Zinc", 30, 65.38, 12, 4),
    ("Ga", "Gallium", 31, 69.723, 13, 4),
    ("Ge", "Germanium", 32, 72.630, 14, 4),
    ("As", "Arsenic", 33, 74.922, 15, 4),
    ("Se", "Selenium", 34, 78.971, 16, 4),
    ("Br", "Bromine", 35, 79.904, 17, 4),
    ("Kr", "Krypton", 36, 83.798, 18, 4),
    ("Rb", "Rubidium", 37, 85.468, 1, 5),
    ("Sr", "Strontium", 38, 87.62, 2, 5),
    ("Y", "Yttrium", 39, 88.906, 3, 5),
    ("Zr", "Zirconium", 40, 91.224, 4, 5),
    ("Nb", "Niobium", 41, 92.906, 5, 5),
    ("Mo", "Molybdenum", 42, 95.95, 6, 5),
    ("Tc", "Technetium", 43, 98, 7, 5),
    ("Ru", "Ruthenium", 44, 101.07, 8, 5),
    ("Rh", "Rhodium", 45, 102.91, 9, 5),
    ("Pd", "Palladium", 46, 106.42, 10, 5),
    ("Ag", "Silver", 47, 107.87, 11, 5),
    ("Cd", "Cadmium", 48, 112.41, 12, 5),
    ("In", "Indium", 49, 114.82, 13, 5),
    ("Sn", "Tin", 50, 118.71, 14, 5),
    ("Sb", "Antimony", 51, 121.76, 15, 5),
    ("Te", "Tellurium", 52, 127.60, 16, 5),
    ("I", "Iodine", 53, 126.90, 17, 5),
    ("Xe", "Xenon", 54, 131.29, 18, 5),
    ("Cs", "Cesium", 55, 132.91, 1, 6),
    ("Ba", "Barium", 56, 137.33, 2, 6),
    ("La", "Lanthanum", 57, 138.91, 3, 6),
    ("Ce", "Cerium", 58, 140.12, 3, 6),
    ("Pr", "Praseodymium", 59, 140.91, 3, 6),
    ("Nd", "Neodymium", 60, 144.24, 3, 6),
    ("Pm", "Promethium", 61, 145, 3, 6),
    ("Sm", "Samarium", 62, 150.36, 3, 6),
    ("Eu", "Europium", 63, 151.96, 3, 6),
    ("Gd", "Gadolinium", 64, 157.25, 3, 6),
    ("Tb", "Terbium", 65, 158.93, 3, 6),
    ("Dy", "Dysprosium", 66, 162.50, 3, 6),
    ("Ho", "Holmium", 67, 164.93, 3, 6),
    ("Er", "Erbium", 68, 167.26, 3, 6),
    ("Tm", "Thulium", 69, 168.93, 3, 6),
    ("Yb", "Ytterbium", 70, 173.05, 3, 6),
    ("Lu", "Lutetium", 71, 174.97, 3, 6),
    ("Hf", "Hafnium", 72, 178.49, 4, 6),
    ("Ta", "Tantalum", 73, 180.95, 5, 6),
    ("W", "Tungsten", 74, 183.84, 6, 6),
    ("Re", "Rhenium", 75, 186.21, 7, 6),
    ("Os", "Osmium", 76, 190.23, 8, 6),
    ("Ir", "Iridium", 77, 192.22, 9, 6),
    ("Pt", "Platinum", 78, 195.08, 10, 6),
    ("Au", "Gold", 79, 196.97, 11, 6),
    ("Hg", "Mercury", 80, 200.59, 12, 6),
    ("Tl", "Thallium", 81, 204.38, 13, 6),
    ("Pb", "Lead", 82, 207.2, 14, 6),
    ("Bi", "Bismuth", 83, 208.98, 15, 6),
    ("Po", "Polonium", 84, 209, 16, 6),
    ("At", "Astatine", 85, 210, 17, 6),
    ("Rn", "Radon", 86, 222, 18, 6),
    ("Fr", "Francium", 87, 223, 1, 7),
    ("Ra", "Radium", 88, 226, 2, 7),
    ("Ac", "Actinium", 89, 227, 3, 7),
    ("Th", "Thorium", 90, 232.04, 3, 7),
    ("Pa", "Protactinium", 91, 231.04, 3, 7),
    ("U", "Uranium", 92, 238.03, 3, 7),
    ("Np", "Neptunium", 93, 237, 3, 7),
    ("Pu", "Plutonium", 94, 244, 3, 7),
    ("Am", "Americium", 95, 243, 3, 7),
    ("Cm", "Curium", 96, 247, 3, 7),
    ("Bk", "Berkelium", 97, 247, 3, 7),
    ("Cf", "Californium", 98, 251, 3, 7),
    ("Es", "Einsteinium", 99, 252, 3, 7),
    ("Fm", "Fermium", 100, 257, 3, 7),
    ("Md", "Mendelevium", 101, 258, 3, 7),
    ("No", "Nobelium", 102, 259, 3, 7),
    ("Lr", "Lawrencium", 103, 262, 3, 7),
    ("Rf", "Rutherfordium", 104, 267, 4, 7),
    ("Db", "Dubnium", 105, 268, 5, 7),
    ("Sg", "Seaborgium", 106, 269, 6, 7),
    ("Bh", "Bohrium", 107, 270, 7, 7),
    ("Hs", "Hassium", 108, 269, 8, 7),
    ("Mt", "Meitnerium", 109, 278, 9, 7),
    ("Ds", "Darmstadtium", 110, 281, 10, 7),
    ("Rg", "Roentgenium", 111, 282, 11, 7),
    ("Cn", "Copernicium", 112, 285, 12, 7),
    ("Nh", "Nihonium", 113, 286, 13, 7),
    ("Fl", "Flerovium", 114, 289, 14, 7),
    ("Mc", "Moscovium", 115, 289, 15, 7),
    ("Lv", "Livermorium", 116, 293, 16, 7),
    ("Ts", "Tennessine", 117, 294, 17, 7),
    ("Og", "Oganesson", 118, 294, 18, 7),
)

ELEMENTS: Mapping[str, Element] = MappingProxyType(
    {
        row[0]: Element(
            symbol=row[0],
            name=row[1],
            atomic_number=row[2],
            atomic_weight=float(row[3]),
            group=row[4],
            period=row[5],
        )
        for row in _ELEMENT_ROWS
    }
)

_BY_NUMBER: tuple[Element, ...] = tuple(
    sorted(ELEMENTS.values(), key=lambda element: element.atomic_number)
)


def lookup(symbol: str) -> Element | None:
    """Return the element for a case-sensitive symbol, or ``None``."""
    return ELEMENTS.get(symbol)


def get_element(symbol: str) -> Element:
    element = ELEMENTS.get(symbol)
    if element is None:
        raise KeyError(f"Unknown element symbol '{symbol}'")
    return element


def all_elements() -> tuple[Element, ...]:
    """All elements ordered by atomic number."""
    return _BY_NUMBER


def search_elements(query: str) -> list[Element]:
    """Case-insensitive substring search over symbols and names.

    A blank query returns the first elements of the table, matching the
    default listing of the element picker.
    """
    text = (query or "").strip().lower()
    if not text:
        return list(_BY_NUMBER[:DEFAULT_ELEMENT_LISTING])
    return [
        element
        for element in _BY_NUMBER
        if text in element.symbol.lower() or text in element.name.lower()
    ]
