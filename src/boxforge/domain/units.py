"""Imperial/metric conversion factors and helpers.

Storage is imperial (in, lbf, lbs). Metric presentation is obtained by
multiplying at the boundary.
"""

from __future__ import annotations

from dataclasses import replace

from .value_objects import BoxDimensions, UnitSystem

IN_TO_MM: float = 25.4
LBF_TO_N: float = 4.44822
LBS_TO_KG: float = 0.453592

# Display precision used when toggling existing dimensions
DISPLAY_DECIMALS: int = 1

_LENGTH_UNITS = {UnitSystem.IMPERIAL: "in", UnitSystem.METRIC: "mm"}
_FORCE_UNITS = {UnitSystem.IMPERIAL: "LBF", UnitSystem.METRIC: "N"}
_MASS_UNITS = {UnitSystem.IMPERIAL: "LBS", UnitSystem.METRIC: "KG"}


def length_scale(units: UnitSystem) -> float:
    """Multiplier from inches to the active length unit."""
    return IN_TO_MM if units is UnitSystem.METRIC else 1.0


def convert_length(value: float, to_metric: bool = True) -> float:
    """Convert inches to millimetres, or back when to_metric is False."""
    return value * IN_TO_MM if to_metric else value / IN_TO_MM


def convert_force(value: float, to_metric: bool = True) -> float:
    """Convert lbf to newtons, or back."""
    return value * LBF_TO_N if to_metric else value / LBF_TO_N


def convert_mass(value: float, to_metric: bool = True) -> float:
    """Convert pounds to kilograms, or back."""
    return value * LBS_TO_KG if to_metric else value / LBS_TO_KG


def length_unit(units: UnitSystem) -> str:
    return _LENGTH_UNITS[units]


def force_unit(units: UnitSystem) -> str:
    return _FORCE_UNITS[units]


def mass_unit(units: UnitSystem) -> str:
    return _MASS_UNITS[units]


def to_inches(value: float, units: UnitSystem) -> float:
    """Express a length given in the active system in inches."""
    return value / length_scale(units)


def convert_dimensions(
    dimensions: BoxDimensions, source: UnitSystem, target: UnitSystem
) -> BoxDimensions:
    """Re-express dimensions in another unit system.

    Each side is scaled and rounded to one decimal place, matching what a
    user sees after toggling units. Repeated toggling accumulates rounding
    drift; this is expected.
    """
    if source is target:
        return dimensions
    to_metric = target is UnitSystem.METRIC

    def _convert(value: float) -> float:
        return round(convert_length(value, to_metric), DISPLAY_DECIMALS)

    return replace(
        dimensions,
        length=_convert(dimensions.length),
        width=_convert(dimensions.width),
        height=_convert(dimensions.height),
    )


__all__ = [
    "DISPLAY_DECIMALS",
    "IN_TO_MM",
    "LBF_TO_N",
    "LBS_TO_KG",
    "convert_dimensions",
    "convert_force",
    "convert_length",
    "convert_mass",
    "force_unit",
    "length_scale",
    "length_unit",
    "mass_unit",
    "to_inches",
]
