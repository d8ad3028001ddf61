"""
ibm_key_protect.core.auth

httpx authentication hooks.

Responsibilities:
- Attach a caller-supplied bearer token to each request.
- Provide a no-op auth for tests and unauthenticated endpoints.

Token acquisition (IAM API key exchange, refresh) is left to the caller.
"""

from __future__ import annotations

from collections.abc import Generator

import httpx


class BearerTokenAuth(httpx.Auth):
    def __init__(self, token: str) -> None:
        if not token:
            raise ValueError("token must be a non-empty string")
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request

    def __repr__(self) -> str:
        return "BearerTokenAuth(token=***)"


class NoAuth(httpx.Auth):
    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield request
