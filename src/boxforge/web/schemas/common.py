"""Shared Pydantic schemas for the REST API."""

from enum import Enum

from pydantic import BaseModel, Field


class FluteEnum(str, Enum):
    """Flute grade names accepted by the API."""

    A = "A"
    B = "B"
    C = "C"
    E = "E"


class UnitsEnum(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


class DimensionsSchema(BaseModel):
    """Interior box dimensions in the requested unit system."""

    length: float = Field(..., gt=0, description="Interior length")
    width: float = Field(..., gt=0, description="Interior width")
    height: float = Field(..., gt=0, description="Interior height")
    flute: FluteEnum = Field(default=FluteEnum.B, description="Corrugation grade")
