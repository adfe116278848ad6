"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PanelLayoutSchema(BaseModel):
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


class StructuralAnalysisSchema(BaseModel):
    bct_value: float
    max_safe_load: float
    max_safe_mass: float
    safety_factor: float
    is_safe: bool
    force_unit: str
    mass_unit: str


class DesignResponseSchema(BaseModel):
    """A complete box design."""

    layout: PanelLayoutSchema
    analysis: StructuralAnalysisSchema
    net: dict[str, Any] | None = Field(default=None, description="Die-line geometry")


class PanelAnglesSchema(BaseModel):
    """Fold angles in radians."""

    progress: float
    side_fold_a: float
    side_fold_b: float
    side_fold_c: float
    glue_tab: float
    top_bottom_flaps: float
    active: list[str] = Field(default_factory=list)


class FoldResponseSchema(BaseModel):
    frames: list[PanelAnglesSchema]


class MaterialSchema(BaseModel):
    flute: str
    name: str
    thickness_in: float
    edge_crush_test: float


class ValidationIssueSchema(BaseModel):
    path: str
    message: str
    suggestion: str | None = None


class ValidationResultSchema(BaseModel):
    is_valid: bool
    errors: list[ValidationIssueSchema] = Field(default_factory=list)
    warnings: list[ValidationIssueSchema] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    error: str
    error_type: str
    details: Any = None
