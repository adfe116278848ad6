"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from boxforge.web.schemas.common import DimensionsSchema, UnitsEnum


class DesignRequest(BaseModel):
    """Request for a box design."""

    dimensions: DimensionsSchema = Field(..., description="Box dimensions")
    units: UnitsEnum = Field(default=UnitsEnum.IMPERIAL, description="Unit system")
    include_net: bool = Field(default=True, description="Include die-line geometry")


class DesignFromConfigRequest(BaseModel):
    """Request for a design from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full box configuration JSON")


class FoldRequest(BaseModel):
    """Request for fold angles at one progress value or as sampled frames.

    Progress outside [0, 1] is accepted and clamped.
    """

    progress: float | None = Field(
        default=None, allow_inf_nan=False, description="Assembly progress"
    )
    frames: int | None = Field(default=None, ge=2, le=1001, description="Sample count")

    @model_validator(mode="after")
    def exactly_one(self) -> "FoldRequest":
        if (self.progress is None) == (self.frames is None):
            raise ValueError("Provide exactly one of 'progress' or 'frames'")
        return self


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Box configuration JSON")
