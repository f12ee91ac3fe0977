"""Storefront FastAPI application.

Usage:
    storefront serve
    uvicorn storefront.infrastructure.api.app:create_app --factory
"""

from __future__ import annotations

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import DomainException, ValidationError
from storefront.infrastructure import bootstrap
from storefront.infrastructure.api.routes import router
from storefront.infrastructure.bootstrap import Repositories
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import add_context, clear_context, configure_logging

_STATUS_BY_KIND = {
    "InvalidArgument": 400,
    "Unauthenticated": 401,
    "NotFound": 404,
    "Conflict": 409,
    "Unavailable": 503,
}


def _error_response(kind: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_KIND.get(kind, 500),
        content={"error": kind, "message": message},
    )


def create_app(
    repositories: Repositories | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Storefront API",
        description="Cart, favorites and orders for the food storefront",
    )
    if settings is None:
        settings = bootstrap.settings()
        repositories = repositories or bootstrap.repositories()
    app.state.settings = settings
    app.state.repositories = repositories or bootstrap.build_repositories(settings)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind a request id onto every log event emitted for this request."""
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        clear_context()
        add_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_context()
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        return _error_response(exc.kind, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        return _error_response(ValidationError.kind, f"Invalid request payload: {fields}")

    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
