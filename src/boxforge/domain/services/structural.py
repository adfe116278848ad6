"""Box compression strength and safe stacking load.

Uses the simplified McKee estimate for a regular slotted container:

    BCT = 5.87 * ECT * sqrt(perimeter * thickness)

with the perimeter and thickness in inches and ECT in lbf/in. The result
is an advisory rating only; no input combination is rejected.
"""

from __future__ import annotations

import logging
import math

from boxforge.domain.materials import get_material, parse_flute
from boxforge.domain.units import (
    convert_force,
    convert_mass,
    force_unit,
    mass_unit,
    to_inches,
)
from boxforge.domain.value_objects import (
    BoxDimensions,
    StructuralAnalysis,
    UnitSystem,
)

logger = logging.getLogger(__name__)

MCKEE_CONSTANT: float = 5.87
SAFETY_FACTOR: float = 3.0

STACKING_DISCLAIMER: str = (
    "Box compression values are empirical estimates for dry, undamaged board "
    "under static load. Humidity, stacking time, handholes and pallet "
    "overhang all reduce real-world strength."
)


def calculate_bct(edge_crush_test: float, perimeter: float, thickness: float) -> float:
    """McKee box compression estimate in lbf."""
    return MCKEE_CONSTANT * edge_crush_test * math.sqrt(perimeter * thickness)


class StructuralAnalysisService:
    """Computes the compression rating and safe stacking load.

    Example:
        service = StructuralAnalysisService()
        report = service.analyze(BoxDimensions(12, 10, 8, FluteType.B))
        report.bct_value  # ~440.5 lbf
    """

    def __init__(self, safety_factor: float = SAFETY_FACTOR) -> None:
        if safety_factor <= 0:
            raise ValueError("safety_factor must be positive")
        self.safety_factor = safety_factor

    def analyze(
        self,
        dimensions: BoxDimensions,
        units: UnitSystem = UnitSystem.IMPERIAL,
    ) -> StructuralAnalysis:
        """Build the structural report for a box.

        Args:
            dimensions: Interior dimensions in the active unit system.
            units: Active unit system; selects the output units.

        Returns:
            StructuralAnalysis with presentation-ready values.
        """
        grade = parse_flute(dimensions.flute)
        material = get_material(grade)
        length_in = to_inches(dimensions.length, units)
        width_in = to_inches(dimensions.width, units)
        perimeter = 2 * (length_in + width_in)

        bct_imperial = calculate_bct(
            material.edge_crush_test, perimeter, material.thickness
        )
        load_imperial = bct_imperial / self.safety_factor

        if units is UnitSystem.METRIC:
            bct_value = convert_force(bct_imperial)
            max_safe_mass = convert_mass(load_imperial)
        else:
            bct_value = bct_imperial
            max_safe_mass = load_imperial

        analysis = StructuralAnalysis(
            bct_value=bct_value,
            max_safe_load=bct_value / self.safety_factor,
            max_safe_mass=max_safe_mass,
            safety_factor=self.safety_factor,
            # No threshold policy exists yet; the flag is reported as-is.
            is_safe=True,
            force_unit=force_unit(units),
            mass_unit=mass_unit(units),
        )
        logger.debug(
            f"BCT for perimeter {perimeter:.2f} in, "
            f"{grade.name}-flute: {bct_imperial:.1f} lbf"
        )
        return analysis


def analyze(
    dimensions: BoxDimensions,
    units: UnitSystem = UnitSystem.IMPERIAL,
) -> StructuralAnalysis:
    """Structural report with the standard safety factor of 3."""
    return StructuralAnalysisService().analyze(dimensions, units)


__all__ = [
    "MCKEE_CONSTANT",
    "SAFETY_FACTOR",
    "STACKING_DISCLAIMER",
    "StructuralAnalysisService",
    "analyze",
    "calculate_bct",
]
