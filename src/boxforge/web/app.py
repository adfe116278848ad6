"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from boxforge.web.exceptions import register_exception_handlers
from boxforge.web.routers import (
    design_router,
    fold_router,
    materials_router,
    validate_router,
)

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build the API with CORS open to any origin and all routers mounted."""
    app = FastAPI(
        title="Box Forge API",
        description="Corrugated box blanks, fold sequences and compression ratings",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (design_router, fold_router, materials_router, validate_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
