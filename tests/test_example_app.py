"""
tests.test_example_app

In-process tests for the example FastAPI app.

Responsibilities:
- Ensure the app starts, serves health checks and proxies key/adapter lookups.
- Ensure upstream HTTP errors keep their status code.
"""

from __future__ import annotations

import httpx
import pytest

from ibm_key_protect.example.app import create_app
from ibm_key_protect.settings import Settings
from ibm_key_protect.v2.service import IbmKeyProtectApiV2

BI = "instance-1"


def _upstream(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/api/v2/keys":
        return httpx.Response(200, json={"resources": [{"id": "k1"}, {"id": "k2"}]})
    if path == "/api/v2/keys/k1":
        return httpx.Response(200, json={"resources": [{"id": "k1", "name": "root"}]})
    if path == "/api/v2/keys/k1/versions":
        return httpx.Response(200, json={"resources": [{"id": "v1"}]})
    if path == "/api/v2/kmip_adapters":
        return httpx.Response(200, json={"resources": [{"id": "a1"}]})
    if path == "/api/v2/kmip_adapters/a1":
        return httpx.Response(200, json={"resources": [{"id": "a1", "name": "adapter"}]})
    if path == "/api/v2/kmip_adapters/a1/certificates":
        return httpx.Response(200, json={"resources": [{"id": "c1"}]})
    return httpx.Response(404, json={"resources": [{"errorMsg": "Not Found"}]})


@pytest.mark.asyncio
async def test_example_endpoints() -> None:
    seen: list[httpx.Request] = []

    def upstream(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return _upstream(request)

    upstream_http = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    kp = IbmKeyProtectApiV2(service_url="https://kp.test", http=upstream_http)
    app = create_app(settings=Settings(env="test", bluemix_instance=BI), client=kp)

    # httpx ASGITransport does not manage lifespan; run startup/shutdown explicitly.
    await app.router.startup()
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"

            r = await client.get("/keys", headers={"x-request-id": "req-42"})
            assert r.status_code == 200
            assert r.json() == [{"id": "k1"}, {"id": "k2"}]
            assert r.headers["x-request-id"] == "req-42"
            assert seen[-1].headers["Bluemix-Instance"] == BI
            assert seen[-1].headers["Correlation-Id"] == "req-42"

            r = await client.get("/keys/k1")
            assert r.json()["resources"][0]["name"] == "root"

            r = await client.get("/keys/k1/versions")
            assert r.json()["resources"] == [{"id": "v1"}]

            r = await client.get("/adapters")
            assert r.json() == [{"id": "a1"}]

            r = await client.get("/adapters/a1")
            assert r.json() == [{"id": "a1", "name": "adapter"}]

            r = await client.get("/adapters/a1/certificates")
            assert r.json() == [{"id": "c1"}]
    finally:
        await app.router.shutdown()

    assert not upstream_http.is_closed
    await upstream_http.aclose()


@pytest.mark.asyncio
async def test_upstream_error_keeps_status() -> None:
    upstream_http = httpx.AsyncClient(transport=httpx.MockTransport(_upstream))
    kp = IbmKeyProtectApiV2(service_url="https://kp.test", http=upstream_http)
    app = create_app(settings=Settings(env="test", bluemix_instance=BI), client=kp)

    await app.router.startup()
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/keys/unknown")
            assert r.status_code == 404
            assert r.json()["detail"]["resources"][0]["errorMsg"] == "Not Found"
    finally:
        await app.router.shutdown()
    await upstream_http.aclose()


@pytest.mark.asyncio
async def test_missing_instance_is_a_bad_request() -> None:
    upstream_http = httpx.AsyncClient(transport=httpx.MockTransport(_upstream))
    kp = IbmKeyProtectApiV2(service_url="https://kp.test", http=upstream_http)
    app = create_app(settings=Settings(env="test", bluemix_instance=None), client=kp)

    await app.router.startup()
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/adapters")
            assert r.status_code == 400
            assert "bluemix_instance" in r.json()["detail"]
    finally:
        await app.router.shutdown()
    await upstream_http.aclose()
