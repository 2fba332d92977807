"""Mass and amount-of-substance conversions based on a molecular weight."""

from __future__ import annotations

from dataclasses import dataclass

from formulamass.constants import MG_PER_G


def _check_weight(molecular_weight: float) -> None:
    if molecular_weight <= 0:
        raise ValueError("Molecular weight must be positive")


def _check_amount(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def moles_from_mass(mass_g: float, molecular_weight: float) -> float:
    """n = m / MW"""
    _check_weight(molecular_weight)
    _check_amount("Mass", mass_g)
    return mass_g / molecular_weight


def mass_from_moles(moles: float, molecular_weight: float) -> float:
    """m = n * MW"""
    _check_weight(molecular_weight)
    _check_amount("Amount", moles)
    return moles * molecular_weight


def mass_for_solution(molarity: float, volume_l: float, molecular_weight: float) -> float:
    """Grams of solute needed for *volume_l* litres at *molarity* mol/L."""
    _check_weight(molecular_weight)
    _check_amount("Molarity", molarity)
    _check_amount("Volume", volume_l)
    return molarity * volume_l * molecular_weight


@dataclass(frozen=True)
class QuickCalculations:
    grams_per_mole: float
    moles_in_10_mg: float
    moles_in_1_g: float
    grams_for_1_mm_per_litre: float


def quick_calculations(molecular_weight: float) -> QuickCalculations:
    return QuickCalculations(
        grams_per_mole=mass_from_moles(1.0, molecular_weight),
        moles_in_10_mg=moles_from_mass(10.0 / MG_PER_G, molecular_weight),
        moles_in_1_g=moles_from_mass(1.0, molecular_weight),
        grams_for_1_mm_per_litre=mass_for_solution(1.0 / 1000.0, 1.0, molecular_weight),
    )
