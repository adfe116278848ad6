"""Flat-pattern panel layout for a regular slotted container.

Dimensions arrive in the active unit system. Material constants are scaled
into that system first and then added to the dimensions, so metric fold
allowance is computed from a metric thickness.
"""

from __future__ import annotations

import logging

from boxforge.domain.materials import GLUE_TAB_WIDTH, get_material, parse_flute
from boxforge.domain.units import length_scale, length_unit
from boxforge.domain.value_objects import BoxDimensions, PanelLayout, UnitSystem

logger = logging.getLogger(__name__)

# One thickness of bulk is consumed at each of the four vertical folds
FOLD_ALLOWANCE_FACTOR: float = 4.0

# Flap clearance cut, as a multiple of board thickness
SLOT_WIDTH_FACTOR: float = 1.5


def calculate_fold_allowance(thickness: float) -> float:
    """Material added to each body panel so the wrap closes cleanly."""
    return FOLD_ALLOWANCE_FACTOR * thickness


def calculate_flap_height(width: float, thickness: float) -> float:
    """Flap reach to the box centreline plus half a board of bulk."""
    return width / 2 + thickness / 2


def calculate_slot_width(thickness: float) -> float:
    return thickness * SLOT_WIDTH_FACTOR


class PanelLayoutCalculator:
    """Derives the panel dimensions and net bounding box.

    Body panels alternate long, short, long, short around the wrap, with
    the glue tab on the left edge.

    Example:
        calculator = PanelLayoutCalculator()
        layout = calculator.compute_layout(
            BoxDimensions(12, 10, 8, FluteType.B), UnitSystem.IMPERIAL
        )
        layout.panel_width_long  # 12.5
    """

    def __init__(self, glue_tab_width: float = GLUE_TAB_WIDTH) -> None:
        """Initialize the calculator.

        Args:
            glue_tab_width: Glue tab width in inches.
        """
        self.glue_tab_width = glue_tab_width

    def compute_layout(
        self,
        dimensions: BoxDimensions,
        units: UnitSystem = UnitSystem.IMPERIAL,
    ) -> PanelLayout:
        """Compute the flat-pattern layout.

        Non-positive dimensions are not rejected here; callers validate
        input before reaching this point.

        Args:
            dimensions: Interior dimensions in the active unit system.
            units: Active unit system.

        Returns:
            A new PanelLayout.

        Raises:
            UnknownFluteError: If the grade has no table entry.
        """
        grade = parse_flute(dimensions.flute)
        material = get_material(grade)
        scale = length_scale(units)

        thickness = material.thickness * scale
        fold_allowance = calculate_fold_allowance(thickness)
        glue_tab = self.glue_tab_width * scale

        panel_width_long = dimensions.length + fold_allowance
        panel_width_short = dimensions.width + fold_allowance
        panel_height = dimensions.height
        flap_height = calculate_flap_height(dimensions.width, thickness)
        slot_width = calculate_slot_width(thickness)

        layout = PanelLayout(
            panel_width_long=panel_width_long,
            panel_width_short=panel_width_short,
            panel_height=panel_height,
            flap_height=flap_height,
            slot_width=slot_width,
            glue_tab_width=glue_tab,
            fold_allowance=fold_allowance,
            total_width=glue_tab + panel_width_long * 2 + panel_width_short * 2,
            total_height=panel_height + flap_height * 2,
            thickness=thickness,
            unit_suffix=length_unit(units),
        )
        logger.debug(
            f"Layout for {grade.name}-flute "
            f"{dimensions.length}x{dimensions.width}x{dimensions.height} "
            f"{layout.unit_suffix}: net {layout.total_width:.3f} x "
            f"{layout.total_height:.3f}"
        )
        return layout


def compute_layout(
    dimensions: BoxDimensions,
    units: UnitSystem = UnitSystem.IMPERIAL,
) -> PanelLayout:
    """Compute a PanelLayout with the standard glue tab width."""
    return PanelLayoutCalculator().compute_layout(dimensions, units)


__all__ = [
    "FOLD_ALLOWANCE_FACTOR",
    "PanelLayoutCalculator",
    "SLOT_WIDTH_FACTOR",
    "calculate_flap_height",
    "calculate_fold_allowance",
    "calculate_slot_width",
    "compute_layout",
]
