"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shopfloor.application.config import ConfigError
from shopfloor.domain import SizingError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(SizingError)
    async def sizing_error_handler(request: Request, exc: SizingError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": "sizing",
                "details": {
                    "quantity": exc.quantity,
                    "value": exc.value,
                    "limit": exc.limit,
                },
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": "config",
                "details": exc.details,
            },
        )
