"""Box design endpoints."""

from fastapi import APIRouter

from boxforge.application import BoxDesignOutput, BoxInput
from boxforge.application.config import config_to_box_input, load_config_from_dict
from boxforge.infrastructure import JsonExporter
from boxforge.web.dependencies import DesignCommandDep
from boxforge.web.exceptions import BoxDesignError
from boxforge.web.schemas.requests import DesignFromConfigRequest, DesignRequest
from boxforge.web.schemas.responses import (
    DesignResponseSchema,
    ErrorResponseSchema,
    PanelLayoutSchema,
    StructuralAnalysisSchema,
)

router = APIRouter(
    prefix="/design",
    tags=["design"],
    responses={422: {"model": ErrorResponseSchema}},
)


def _output_to_schema(output: BoxDesignOutput, include_net: bool) -> DesignResponseSchema:
    """Convert BoxDesignOutput to the response schema."""
    net = JsonExporter().to_dict(output).get("net") if include_net else None
    return DesignResponseSchema(
        layout=PanelLayoutSchema(**output.layout.to_dict()),
        analysis=StructuralAnalysisSchema(**output.analysis.to_dict()),
        net=net,
    )


@router.post("", response_model=DesignResponseSchema)
async def design_box(
    request: DesignRequest,
    command: DesignCommandDep,
) -> DesignResponseSchema:
    """Compute the flat layout, die-line and strength report for a box."""
    box_input = BoxInput(
        length=request.dimensions.length,
        width=request.dimensions.width,
        height=request.dimensions.height,
        flute=request.dimensions.flute.value,
        units=request.units.value,
    )
    output = command.execute(box_input)
    if not output.is_valid:
        raise BoxDesignError(output.errors)
    return _output_to_schema(output, request.include_net)


@router.post("/from-config", response_model=DesignResponseSchema)
async def design_from_config(
    request: DesignFromConfigRequest,
    command: DesignCommandDep,
) -> DesignResponseSchema:
    """Design a box from a full configuration document."""
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_box_input(config))
    if not output.is_valid:
        raise BoxDesignError(output.errors)
    return _output_to_schema(output, include_net=True)
