"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from boxforge.application.config import ConfigError
from boxforge.domain import UnknownFluteError


class BoxDesignError(Exception):
    """Raised when a box design cannot be generated."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Design failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Offending inputs are left out; NaN cannot be rendered as JSON
        return JSONResponse(
            status_code=422,
            content={
                "error": "Request validation failed",
                "error_type": "request_validation",
                "details": [
                    {
                        "path": ".".join(str(part) for part in err["loc"]),
                        "message": err["msg"],
                    }
                    for err in exc.errors()
                ],
            },
        )

    @app.exception_handler(BoxDesignError)
    async def design_error_handler(
        request: Request, exc: BoxDesignError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Box design failed",
                "error_type": "design",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(UnknownFluteError)
    async def unknown_flute_handler(
        request: Request, exc: UnknownFluteError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "unknown_flute",
                "details": None,
            },
        )
