"""Pydantic models for box configuration files.

Configuration files are JSON documents validated against these models.
Unknown fields are rejected so typos surface as errors instead of being
silently ignored.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from boxforge.domain import FluteType, UnitSystem, UnknownFluteError, parse_flute
from boxforge.domain.services.fold_kinematics import MANUAL_STEP, PLAYBACK_STEP

# Version 1.0: Initial schema with box, units, animation and output sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OutputFormat = Literal["all", "layout", "analysis", "net", "fold", "json"]


class BoxConfig(BaseModel):
    """Interior box dimensions and board grade.

    Attributes:
        length: Interior length in the configured units.
        width: Interior width in the configured units.
        height: Interior height in the configured units.
        flute: Grade name ("A", "B", "C", "E") or full value ("B-Flute").
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Interior length")
    width: float = Field(..., gt=0, description="Interior width")
    height: float = Field(..., gt=0, description="Interior height")
    flute: FluteType = Field(default=FluteType.B, description="Corrugation grade")

    @field_validator("flute", mode="before")
    @classmethod
    def parse_flute_name(cls, v: object) -> object:
        """Accept "B" and "b" as well as "B-Flute"."""
        if isinstance(v, str):
            try:
                return parse_flute(v)
            except UnknownFluteError as e:
                raise ValueError(str(e)) from None
        return v


class AnimationConfig(BaseModel):
    """Playback step sizes for the assembly animation."""

    model_config = ConfigDict(extra="forbid")

    playback_step: float = Field(default=PLAYBACK_STEP, gt=0, le=1)
    manual_step: float = Field(default=MANUAL_STEP, gt=0, le=1)


class OutputConfig(BaseModel):
    """Output format selection.

    Attributes:
        format: Which report to print.
        frames: Number of samples for fold tables.
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = "all"
    frames: int = Field(default=11, ge=2, le=1001)


class BoxConfiguration(BaseModel):
    """Root configuration model for box specifications.

    Example:
        >>> config = BoxConfiguration(
        ...     schema_version="1.0",
        ...     box=BoxConfig(length=12.0, width=10.0, height=8.0),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    box: BoxConfig
    units: UnitSystem = UnitSystem.IMPERIAL
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def check_major_version(cls, v: str) -> str:
        """Any minor revision of a supported major version is accepted."""
        major = v.split(".", 1)[0]
        if any(sv.split(".", 1)[0] == major for sv in SUPPORTED_VERSIONS):
            return v
        raise ValueError(
            f"Unsupported schema version {v!r}; "
            f"supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
