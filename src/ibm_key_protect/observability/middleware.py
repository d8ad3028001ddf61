"""
ibm_key_protect.observability.middleware

HTTP middleware for request-scoped logging context in the example app.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata into structlog contextvars.
- Forward the request id to Key Protect as a correlation id.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Binds a request id for logs and exposes it as `request.state.request_id`,
    which the routers send upstream as Correlation-Id.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        # A caller-supplied id is reused so Key Protect logs can be matched.
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        try:
            response: Response = await call_next(request)
        finally:
            # Context is per task; clearing keeps ids from bleeding between requests.
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Only the example app installs this middleware; the SDK itself is framework-free.
