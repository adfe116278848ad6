"""Board grade lookup endpoint."""

from fastapi import APIRouter

from boxforge.domain import FluteType, get_material
from boxforge.web.schemas.responses import MaterialSchema

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=list[MaterialSchema])
async def list_materials() -> list[MaterialSchema]:
    """List every flute grade with its calibration values."""
    return [
        MaterialSchema(
            flute=flute.name,
            name=flute.value,
            thickness_in=get_material(flute).thickness,
            edge_crush_test=get_material(flute).edge_crush_test,
        )
        for flute in FluteType
    ]
