"""Corrugated board calibration table.

Values are stored in imperial base units only (inches, lbf/in); metric
thickness is always derived through the unit converter.
"""

from __future__ import annotations

from .value_objects import FluteType, MaterialProperties


class UnknownFluteError(ValueError):
    """Raised when a grade has no calibration entry."""

    def __init__(self, flute: object) -> None:
        self.flute = flute
        valid = ", ".join(f.name for f in FluteType)
        super().__init__(f"Unknown flute grade: {flute!r} (expected one of: {valid})")


class MaterialTableError(RuntimeError):
    """Raised at import when the table does not cover every grade."""


MATERIAL_DATA: dict[FluteType, MaterialProperties] = {
    FluteType.E: MaterialProperties(thickness=0.0625, edge_crush_test=29.0),  # 1/16"
    FluteType.B: MaterialProperties(thickness=0.125, edge_crush_test=32.0),  # 1/8"
    FluteType.C: MaterialProperties(thickness=0.1875, edge_crush_test=32.0),  # 3/16"
    FluteType.A: MaterialProperties(thickness=0.25, edge_crush_test=32.0),  # 1/4"
}

# Manufacturer's joint strip width in inches
GLUE_TAB_WIDTH: float = 1.25


def verify_material_table(
    table: dict[FluteType, MaterialProperties] | None = None,
) -> None:
    """Check that every FluteType has an entry.

    Raises:
        MaterialTableError: If any grade is missing.
    """
    table = MATERIAL_DATA if table is None else table
    missing = [flute.name for flute in FluteType if flute not in table]
    if missing:
        raise MaterialTableError(
            f"Material table missing entries for: {', '.join(missing)}"
        )


def parse_flute(value: FluteType | str) -> FluteType:
    """Resolve a grade from an enum, its value ("B-Flute") or its name ("b").

    Raises:
        UnknownFluteError: If the value names no grade.
    """
    if isinstance(value, FluteType):
        return value
    text = str(value).strip()
    for flute in FluteType:
        if text.upper() in (flute.name, flute.value.upper()):
            return flute
    raise UnknownFluteError(value)


def get_material(flute: FluteType | str) -> MaterialProperties:
    """Look up the board properties for a grade.

    Args:
        flute: Grade enum or any form accepted by parse_flute().

    Returns:
        MaterialProperties in imperial units.

    Raises:
        UnknownFluteError: If the grade is not in the table.
    """
    grade = parse_flute(flute)
    try:
        return MATERIAL_DATA[grade]
    except KeyError:
        raise UnknownFluteError(flute) from None


verify_material_table()


__all__ = [
    "GLUE_TAB_WIDTH",
    "MATERIAL_DATA",
    "MaterialTableError",
    "UnknownFluteError",
    "get_material",
    "parse_flute",
    "verify_material_table",
]
