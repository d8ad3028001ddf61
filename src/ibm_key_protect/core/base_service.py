"""
ibm_key_protect.core.base_service

Shared HTTP boundary for generated service clients.

Responsibilities:
- Own the service URL, auth hook, default headers and the `httpx.AsyncClient`.
- Turn a `RequestDescriptor` into an HTTP exchange and a `DetailedResponse`.
- Toggle connect retries on the underlying httpx transport.
"""

from __future__ import annotations

import platform
from collections import Counter
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from ibm_key_protect.core.auth import NoAuth
from ibm_key_protect.core.request import HttpMethod, RequestDescriptor, ResponseType, encode_body
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.observability.logging import get_logger

log = get_logger(__name__)

SDK_NAME = "ibm-key-protect-python-sdk"
SDK_VERSION = "0.1.0"


def sdk_headers() -> dict[str, str]:
    return {
        "User-Agent": (
            f"{SDK_NAME}/{SDK_VERSION} "
            f"(lang=python; arch={platform.machine()}; os={platform.system()}; "
            f"python.version={platform.python_version()})"
        )
    }


class BaseService:
    def __init__(
        self,
        *,
        service_url: str,
        auth: httpx.Auth | None = None,
        timeout: float = 30.0,
        max_retries: int = 0,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.service_url = service_url.rstrip("/")
        self.auth = auth or NoAuth()
        self.timeout = timeout
        self.default_headers: dict[str, str] = {}
        self._max_retries = max_retries
        self._http = http
        # Clients passed in by the caller are closed by the caller.
        self._owns_http = http is None
        self._retired: list[httpx.AsyncClient] = []
        self._in_flight: Counter[httpx.AsyncClient] = Counter()

    # -- configuration -------------------------------------------------------

    def set_service_url(self, service_url: str) -> None:
        if not service_url:
            raise ValueError("service_url must be provided")
        self.service_url = service_url.rstrip("/")

    def set_default_headers(self, headers: Mapping[str, str]) -> None:
        self.default_headers = dict(headers)

    def set_http_client(self, http: httpx.AsyncClient) -> None:
        # Retry settings do not apply to caller-supplied clients.
        self._drop_owned_client()
        self._http = http
        self._owns_http = False

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def enable_retries(self, max_retries: int = 4) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._max_retries = max_retries
        self._drop_owned_client()

    def disable_retries(self) -> None:
        self._max_retries = 0
        self._drop_owned_client()

    def _drop_owned_client(self) -> None:
        # The next request lazily rebuilds the client with the new transport settings.
        # The old client is closed once its in-flight requests finish.
        if self._owns_http and self._http is not None:
            self._retired.append(self._http)
            self._http = None
            log.debug("http_client_reset", max_retries=self._max_retries)

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                transport=httpx.AsyncHTTPTransport(retries=self._max_retries),
                timeout=httpx.Timeout(self.timeout),
            )
            self._owns_http = True
        return self._http

    # -- request execution ---------------------------------------------------

    def prepare_headers(self, *sources: Mapping[str, str | None] | None) -> dict[str, str]:
        merged: dict[str, str] = {}
        for source in (sdk_headers(), self.default_headers, *sources):
            for name, value in (source or {}).items():
                if value is None:
                    continue
                # Header names are case-insensitive; the later source wins.
                for existing in [k for k in merged if k.lower() == name.lower()]:
                    del merged[existing]
                merged[name] = str(value)
        return merged

    def build_request(
        self,
        method: HttpMethod,
        url: str,
        *,
        path: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        accept: str | None = None,
        content_type: str | None = None,
        operation_headers: Mapping[str, str | None] | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        response_type: ResponseType = "json",
    ) -> RequestDescriptor:
        """
        Assemble a descriptor without performing I/O.

        Header precedence, lowest to highest: SDK headers, client default
        headers, Accept/Content-Type, operation headers, caller headers.
        """

        json_body, content = encode_body(body)
        merged = self.prepare_headers(
            {"Accept": accept, "Content-Type": content_type},
            operation_headers,
            headers,
        )
        return RequestDescriptor(
            method=method,
            url=url,
            path=dict(path or {}),
            query=dict(query or {}),
            headers=merged,
            json=json_body,
            content=content,
            response_type=response_type,
        )

    async def create_request(self, descriptor: RequestDescriptor) -> DetailedResponse:
        url = self.service_url + descriptor.render_url()
        log.debug("request", method=descriptor.method, url=url)

        http = self.http
        self._in_flight[http] += 1
        try:
            response = await http.request(
                descriptor.method,
                url,
                params=descriptor.query_params(),
                headers=dict(descriptor.headers),
                json=descriptor.json,
                content=descriptor.content,
                auth=self.auth,
            )
        finally:
            self._in_flight[http] -= 1
            await self._close_idle_retired()
        log.debug("response", method=descriptor.method, url=url, status=response.status_code)
        response.raise_for_status()
        return DetailedResponse.from_httpx(response, binary=descriptor.response_type == "binary")

    # -- lifecycle -----------------------------------------------------------

    async def _close_idle_retired(self) -> None:
        idle = [c for c in self._retired if not self._in_flight[c]]
        if not idle:
            return
        self._retired = [c for c in self._retired if self._in_flight[c]]
        for client in idle:
            self._in_flight.pop(client, None)
            await client.aclose()

    async def aclose(self) -> None:
        self._in_flight.clear()
        retired, self._retired = self._retired, []
        for client in retired:
            await client.aclose()
        if self._owns_http and self._http is not None:
            await self._http.aclose()
        self._http = None

    async def __aenter__(self) -> BaseService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


# --- Module Notes -----------------------------------------------------------
# Status errors are raised by `raise_for_status()` and propagate unchanged;
# there is no retry or recovery at this layer beyond httpx connect retries.
