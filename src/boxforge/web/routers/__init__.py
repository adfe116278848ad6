"""API routers."""

from boxforge.web.routers.design import router as design_router
from boxforge.web.routers.fold import router as fold_router
from boxforge.web.routers.materials import router as materials_router
from boxforge.web.routers.validate import router as validate_router

__all__ = ["design_router", "fold_router", "materials_router", "validate_router"]
