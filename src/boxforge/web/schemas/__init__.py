"""Pydantic schemas for the REST API."""

from boxforge.web.schemas.common import DimensionsSchema, FluteEnum, UnitsEnum
from boxforge.web.schemas.requests import (
    ConfigValidateRequest,
    DesignFromConfigRequest,
    DesignRequest,
    FoldRequest,
)
from boxforge.web.schemas.responses import (
    DesignResponseSchema,
    ErrorResponseSchema,
    FoldResponseSchema,
    MaterialSchema,
    PanelAnglesSchema,
    PanelLayoutSchema,
    StructuralAnalysisSchema,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    "ConfigValidateRequest",
    "DesignFromConfigRequest",
    "DesignRequest",
    "DesignResponseSchema",
    "DimensionsSchema",
    "ErrorResponseSchema",
    "FluteEnum",
    "FoldRequest",
    "FoldResponseSchema",
    "MaterialSchema",
    "PanelAnglesSchema",
    "PanelLayoutSchema",
    "StructuralAnalysisSchema",
    "UnitsEnum",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
