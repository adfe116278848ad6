"""Validation results and packaging advisories for box configurations.

Schema errors are caught while loading. The checks here add size-limit
errors that would make generation fail, and advisories that do not.
"""

from dataclasses import dataclass, field
from typing import Any

from boxforge.application.config.schema import BoxConfiguration
from boxforge.application.dtos import MAX_SIDE_INCHES, MAX_SIDE_MM
from boxforge.domain import UnitSystem

# Height beyond this multiple of the shorter footprint side tends to buckle
MAX_SLENDERNESS_RATIO: float = 3.0

# Metric boxes with every side below this look like inch values typed in mm
SUSPICIOUS_METRIC_SIDE_MM: float = 25.0


@dataclass
class ValidationError:
    """A blocking problem at a JSON path."""

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking advisory at a JSON path."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Collected errors and warnings for one configuration."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """0 if clean, 1 if there are errors, 2 if only warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def check_box_advisories(config: BoxConfiguration) -> list[ValidationWarning]:
    """Packaging advisories for the configured box."""
    box = config.box
    warnings: list[ValidationWarning] = []

    if box.length < box.width:
        warnings.append(
            ValidationWarning(
                path="box.length",
                message=(
                    f"Length {box.length:g} is shorter than width {box.width:g}; "
                    "flaps are sized from the width"
                ),
                suggestion="Swap length and width so length is the longer side",
            )
        )

    footprint = min(box.length, box.width)
    if box.height > footprint * MAX_SLENDERNESS_RATIO:
        warnings.append(
            ValidationWarning(
                path="box.height",
                message=(
                    f"Height {box.height:g} exceeds {MAX_SLENDERNESS_RATIO:g}x the "
                    f"shorter side ({footprint:g}); tall narrow boxes buckle "
                    "before reaching their rated compression"
                ),
                suggestion="Use a heavier flute or reduce the height",
            )
        )

    if config.units is UnitSystem.METRIC and max(
        box.length, box.width, box.height
    ) < SUSPICIOUS_METRIC_SIDE_MM:
        warnings.append(
            ValidationWarning(
                path="units",
                message="All dimensions are under 25 mm; were they entered in inches?",
                suggestion='Set "units" to "imperial" or convert the dimensions',
            )
        )

    return warnings


def check_side_limits(config: BoxConfiguration, result: ValidationResult) -> None:
    """Reject sides beyond the largest blank the layout accepts."""
    if config.units is UnitSystem.METRIC:
        limit, suffix = MAX_SIDE_MM, "mm"
    else:
        limit, suffix = MAX_SIDE_INCHES, "inches"
    for name in ("length", "width", "height"):
        value = getattr(config.box, name)
        if value > limit:
            result.add_error(
                f"box.{name}",
                f"{name.capitalize()} exceeds maximum ({limit:g} {suffix})",
                value,
            )


def validate_config(config: BoxConfiguration) -> ValidationResult:
    """Check side limits and collect advisories for a schema-valid configuration."""
    result = ValidationResult()
    check_side_limits(config, result)
    result.warnings.extend(check_box_advisories(config))
    return result
