"""Fold choreography endpoints."""

from fastapi import APIRouter

from boxforge.domain import PanelAngles
from boxforge.domain.services import active_folds
from boxforge.domain.services.fold_kinematics import clamp_progress
from boxforge.web.dependencies import FoldCommandDep
from boxforge.web.schemas.requests import FoldRequest
from boxforge.web.schemas.responses import (
    ErrorResponseSchema,
    FoldResponseSchema,
    PanelAnglesSchema,
)

router = APIRouter(
    prefix="/fold",
    tags=["fold"],
    responses={422: {"model": ErrorResponseSchema}},
)


def _angles_to_schema(progress: float, angles: PanelAngles) -> PanelAnglesSchema:
    return PanelAnglesSchema(
        progress=progress,
        active=active_folds(progress),
        **angles.as_dict(),
    )


@router.post("", response_model=FoldResponseSchema)
async def fold_angles(request: FoldRequest, command: FoldCommandDep) -> FoldResponseSchema:
    """Panel angles at one progress value, or sampled from flat to closed."""
    if request.progress is not None:
        progress = clamp_progress(request.progress)
        return FoldResponseSchema(
            frames=[_angles_to_schema(progress, command.at(progress))]
        )
    return FoldResponseSchema(
        frames=[_angles_to_schema(p, a) for p, a in command.frames(request.frames)]
    )
