"""Value objects for the box domain.

All derived values are immutable and recomputed from a fresh input
snapshot every time; nothing here is mutated in place.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class FluteType(str, Enum):
    """Corrugation profile grades."""

    A = "A-Flute"
    B = "B-Flute"
    C = "C-Flute"
    E = "E-Flute"


class UnitSystem(str, Enum):
    """Presentation unit system.

    Imperial is the storage system for every constant; metric values are
    derived at the boundary.
    """

    IMPERIAL = "imperial"
    METRIC = "metric"

    @property
    def is_metric(self) -> bool:
        return self is UnitSystem.METRIC


@dataclass(frozen=True)
class BoxDimensions:
    """Nominal interior dimensions in the active unit system.

    Positivity is enforced by the input boundary, not here.
    """

    length: float
    width: float
    height: float
    flute: FluteType = FluteType.B


@dataclass(frozen=True)
class MaterialProperties:
    """Board properties for one flute grade, in imperial base units.

    Attributes:
        thickness: Wall thickness in inches.
        edge_crush_test: ECT rating in lbf per inch.
    """

    thickness: float
    edge_crush_test: float


@dataclass(frozen=True)
class PanelLayout:
    """Flat-pattern panel dimensions for one input snapshot.

    Attributes:
        panel_width_long: Width of the two length panels (A and C).
        panel_width_short: Width of the two width panels (B and D).
        panel_height: Body panel height.
        flap_height: Height of each top and bottom flap.
        slot_width: Clearance cut between adjacent flaps.
        glue_tab_width: Manufacturer's joint strip on the left edge.
        fold_allowance: Material added per panel for fold bulk.
        total_width: Overall net width.
        total_height: Overall net height.
        thickness: Board thickness in the active unit system.
        unit_suffix: "in" or "mm".
    """

    panel_width_long: float
    panel_width_short: float
    panel_height: float
    flap_height: float
    slot_width: float
    glue_tab_width: float
    fold_allowance: float
    total_width: float
    total_height: float
    thickness: float
    unit_suffix: str

    @property
    def body_width(self) -> float:
        """Width of the four body panels without the glue tab."""
        return 2 * self.panel_width_long + 2 * self.panel_width_short

    @property
    def sheet_area(self) -> float:
        """Bounding-box area of the blank."""
        return self.total_width * self.total_height

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PanelAngles:
    """Rotation of each folding panel group in radians, each in [0, pi/2]."""

    side_fold_a: float
    side_fold_b: float
    side_fold_c: float
    glue_tab: float
    top_bottom_flaps: float

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        """Angles in fold order."""
        return (
            self.side_fold_a,
            self.side_fold_b,
            self.side_fold_c,
            self.glue_tab,
            self.top_bottom_flaps,
        )

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class StructuralAnalysis:
    """Presentation-ready structural report.

    ``max_safe_load`` is always ``bct_value / safety_factor`` in force
    units. ``max_safe_mass`` is the same load expressed as a stacking mass
    (lbs or kg) for the summary display.
    """

    bct_value: float
    max_safe_load: float
    max_safe_mass: float
    safety_factor: float
    is_safe: bool
    force_unit: str
    mass_unit: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = [
    "BoxDimensions",
    "FluteType",
    "MaterialProperties",
    "PanelAngles",
    "PanelLayout",
    "StructuralAnalysis",
    "UnitSystem",
]
