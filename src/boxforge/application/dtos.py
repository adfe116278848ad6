"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from boxforge.domain import (
    BoxDimensions,
    FluteType,
    NetOutline,
    PanelLayout,
    StructuralAnalysis,
    UnitSystem,
    UnknownFluteError,
    parse_flute,
)

# Largest accepted interior side, per unit system
MAX_SIDE_INCHES: float = 120.0
MAX_SIDE_MM: float = 3048.0


@dataclass
class BoxInput:
    """Input DTO for box dimensions, grade and unit system."""

    length: float
    width: float
    height: float
    flute: str = "B"
    units: str = "imperial"

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.length <= 0:
            errors.append("Length must be positive")
        if self.width <= 0:
            errors.append("Width must be positive")
        if self.height <= 0:
            errors.append("Height must be positive")

        valid_units = [u.value for u in UnitSystem]
        if self.units not in valid_units:
            errors.append(f"Units must be one of: {', '.join(valid_units)}")
            return errors

        limit = MAX_SIDE_MM if self.units == UnitSystem.METRIC.value else MAX_SIDE_INCHES
        suffix = "mm" if self.units == UnitSystem.METRIC.value else "inches"
        for name in ("length", "width", "height"):
            if getattr(self, name) > limit:
                errors.append(f"{name.capitalize()} exceeds maximum ({limit:g} {suffix})")

        try:
            parse_flute(self.flute)
        except UnknownFluteError:
            valid_flutes = [f.name for f in FluteType]
            errors.append(f"Flute must be one of: {', '.join(valid_flutes)}")
        return errors

    @property
    def unit_system(self) -> UnitSystem:
        return UnitSystem(self.units)

    def to_dimensions(self) -> BoxDimensions:
        """Convert to BoxDimensions value object."""
        return BoxDimensions(
            length=self.length,
            width=self.width,
            height=self.height,
            flute=parse_flute(self.flute),
        )


@dataclass
class BoxDesignOutput:
    """Output DTO for a generated box design.

    The same layout instance feeds both the flat-pattern outline and any
    3D consumer so the two presentations stay consistent.
    """

    dimensions: BoxDimensions | None
    units: UnitSystem | None
    layout: PanelLayout | None
    analysis: StructuralAnalysis | None
    outline: NetOutline | None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0
