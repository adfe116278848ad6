"""Configuration validation endpoint."""

from fastapi import APIRouter

from boxforge.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from boxforge.web.schemas.requests import ConfigValidateRequest
from boxforge.web.schemas.responses import ValidationIssueSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate a configuration; schema errors are returned, not raised."""
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                ValidationIssueSchema(
                    path=detail.get("path", ""), message=detail.get("message", "")
                )
                for detail in e.details
            ],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            ValidationIssueSchema(path=err.path, message=err.message)
            for err in result.errors
        ],
        warnings=[
            ValidationIssueSchema(
                path=w.path, message=w.message, suggestion=w.suggestion
            )
            for w in result.warnings
        ],
    )
