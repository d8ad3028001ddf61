"""
ibm_key_protect.example.app

FastAPI app factory for the Key Protect example service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create and dispose the shared `IbmKeyProtectApiV2` client.
- Translate SDK and upstream errors into HTTP responses.
"""

from __future__ import annotations

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ibm_key_protect.errors import ParameterValidationError
from ibm_key_protect.example.routers.health import router as health_router
from ibm_key_protect.example.routers.keys import router as keys_router
from ibm_key_protect.example.routers.kmip import router as kmip_router
from ibm_key_protect.observability.logging import configure_logging, get_logger
from ibm_key_protect.observability.middleware import RequestContextMiddleware
from ibm_key_protect.settings import Settings
from ibm_key_protect.v2.service import IbmKeyProtectApiV2

log = get_logger(__name__)


def create_app(*, settings: Settings, client: IbmKeyProtectApiV2 | None = None) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="Key Protect Example",
        version="0.1.0",
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(keys_router)
    app.include_router(kmip_router)

    @app.exception_handler(httpx.HTTPStatusError)
    async def _upstream_error(request: Request, exc: httpx.HTTPStatusError) -> JSONResponse:
        status = exc.response.status_code
        log.warning("upstream_error", status=status, url=str(exc.request.url))
        try:
            detail = exc.response.json()
        except ValueError:
            detail = exc.response.text
        return JSONResponse(status_code=status, content={"detail": detail})

    @app.exception_handler(ParameterValidationError)
    async def _invalid_params(request: Request, exc: ParameterValidationError) -> JSONResponse:
        log.warning("invalid_parameters", missing=list(exc.missing))
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.on_event("startup")
    async def _startup() -> None:
        log.info("startup", env=settings.env)
        # A client injected by the caller stays owned by the caller.
        app.state.owns_client = client is None
        app.state.kp_client = client or IbmKeyProtectApiV2.new_instance(settings)

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        kp_client = getattr(app.state, "kp_client", None)
        if kp_client is not None and app.state.owns_client:
            await kp_client.aclose()
        log.info("shutdown")

    return app
