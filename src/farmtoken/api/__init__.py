from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import FarmTokenError, NotFoundError, TokenisationError, ValidationError
from ..core.registry import FarmRegistry
from ..core.tokenisation import TokenisationCoordinator
from .routes.farms import mount_farms_api
from .serializers.farms import error_to_dict

SERVICE_NAME = "tokenise-farm-backend"

_STATUS_BY_ERROR: dict[type[FarmTokenError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
    TokenisationError: 500,
}


def _status_for(err: FarmTokenError) -> int:
    for cls, status in _STATUS_BY_ERROR.items():
        if isinstance(err, cls):
            return status
    return 500


def create_api_app(
    registry: FarmRegistry,
    coordinator: TokenisationCoordinator,
    *,
    cors_origins: tuple[str, ...] | list[str] = ("*",),
) -> FastAPI:
    app = FastAPI(title="farmtoken", version="0.1.0")

    origins = list(cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FarmTokenError)
    def _farm_error(request: Request, exc: FarmTokenError) -> JSONResponse:  # noqa: ARG001
        return JSONResponse(status_code=_status_for(exc), content=error_to_dict(exc))

    @app.exception_handler(RequestValidationError)
    def _request_error(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: ARG001
        return JSONResponse(
            status_code=400,
            content=error_to_dict(ValidationError("Request body must be a JSON object")),
        )

    @app.exception_handler(StarletteHTTPException)
    def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: ARG001
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "not_found", "detail": "Not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": "http_error", "detail": str(exc.detail)})

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": SERVICE_NAME}

    mount_farms_api(app, registry, coordinator)

    app.state.registry = registry
    app.state.coordinator = coordinator
    return app


__all__ = ["SERVICE_NAME", "create_api_app"]
