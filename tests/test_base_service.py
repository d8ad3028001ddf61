"""
tests.test_base_service

Transport-level tests for `BaseService` using `httpx.MockTransport`.

Responsibilities:
- Verify URL rendering, query serialization, body encoding and auth on the wire.
- Verify response parsing (JSON, empty, binary) and error passthrough.
- Verify retry toggling, URL construction and settings-driven construction.
"""

from __future__ import annotations

import json

import httpx
import pytest

from ibm_key_protect.core.auth import BearerTokenAuth, NoAuth
from ibm_key_protect.settings import Settings
from ibm_key_protect.v2.service import IbmKeyProtectApiV2

BI = "instance-1"


@pytest.mark.asyncio
async def test_get_keys_on_the_wire(mock_client) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"metadata": {"collectionTotal": 1}, "resources": [{"id": "k1", "state": 1}]},
        )

    svc = mock_client(handler)
    response = await svc.get_keys(
        bluemix_instance=BI, limit=10, state=[1, 2], extractable=False, x_kms_key_ring="ring"
    )
    await svc.http.aclose()

    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/api/v2/keys"
    assert request.url.params["limit"] == "10"
    assert request.url.params["state"] == "1,2"
    assert request.url.params["extractable"] == "false"
    assert "offset" not in request.url.params
    assert request.headers["Bluemix-Instance"] == BI
    assert request.headers["X-Kms-Key-Ring"] == "ring"
    assert request.headers["Accept"] == "application/json"

    assert response.status_code == 200
    assert response.resources() == [{"id": "k1", "state": 1}]


@pytest.mark.asyncio
async def test_json_body_is_sent_with_operation_content_type(mock_client) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ciphertext": "abc"})

    svc = mock_client(handler)
    await svc.wrap_key(id="k1", bluemix_instance=BI, key_action_wrap_body={"plaintext": "cA=="})
    await svc.http.aclose()

    request = seen[0]
    assert request.url.path == "/api/v2/keys/k1/actions/wrap"
    assert request.headers["Content-Type"] == "application/vnd.ibm.kms.key_action_wrap+json"
    assert json.loads(request.content) == {"plaintext": "cA=="}


@pytest.mark.asyncio
async def test_raw_body_is_sent_unchanged(mock_client) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    svc = mock_client(handler)
    await svc.event_acknowledge(bluemix_instance=BI, body=b'{"eventId":"e1"}')
    await svc.http.aclose()

    assert seen[0].content == b'{"eventId":"e1"}'
    assert seen[0].headers["Content-Type"] == "application/vnd.ibm.kms.event_acknowledge+json"


@pytest.mark.asyncio
async def test_path_values_are_percent_encoded(mock_client) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    svc = mock_client(handler)
    await svc.get_key(id="my alias", bluemix_instance=BI)
    await svc.http.aclose()

    assert seen[0].url.raw_path == b"/api/v2/keys/my%20alias"


@pytest.mark.asyncio
async def test_empty_response_yields_none(mock_client) -> None:
    svc = mock_client(lambda request: httpx.Response(204))
    response = await svc.delete_key_alias(id="k1", alias="a", bluemix_instance=BI)
    await svc.http.aclose()

    assert response.status_code == 204
    assert response.result is None


@pytest.mark.asyncio
async def test_head_exposes_response_headers(mock_client) -> None:
    svc = mock_client(lambda request: httpx.Response(200, headers={"Key-Total": "7"}))
    response = await svc.get_key_collection_metadata(bluemix_instance=BI)
    await svc.http.aclose()

    assert response.headers["key-total"] == "7"
    assert response.result is None


@pytest.mark.asyncio
async def test_restore_key_returns_bytes(mock_client) -> None:
    payload = b'{"metadata":{},"resources":[{"id":"k1"}]}'

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            201, content=payload, headers={"Content-Type": "application/vnd.ibm.kms.key+json"}
        )

    svc = mock_client(handler)
    response = await svc.restore_key(id="k1", bluemix_instance=BI)
    await svc.http.aclose()

    assert response.status_code == 201
    assert response.result == payload


@pytest.mark.asyncio
async def test_http_errors_propagate_unchanged(mock_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"resources": [{"errorMsg": "Not Found"}]})

    svc = mock_client(handler)
    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        await svc.get_key(id="missing", bluemix_instance=BI)
    await svc.http.aclose()

    assert excinfo.value.response.status_code == 404
    assert excinfo.value.response.json()["resources"][0]["errorMsg"] == "Not Found"


@pytest.mark.asyncio
async def test_bearer_auth_sets_authorization_header() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with IbmKeyProtectApiV2(auth=BearerTokenAuth("tok-123"), http=http) as svc:
        await svc.get_import_token(bluemix_instance=BI)
    await http.aclose()

    assert seen[0].url.host == "us-south.kms.cloud.ibm.com"
    assert seen[0].headers["Authorization"] == "Bearer tok-123"


def test_bearer_auth_hides_token() -> None:
    assert "tok-123" not in repr(BearerTokenAuth("tok-123"))
    with pytest.raises(ValueError):
        BearerTokenAuth("")


@pytest.mark.asyncio
async def test_set_service_url_strips_trailing_slash() -> None:
    svc = IbmKeyProtectApiV2(service_url="https://eu-de.kms.cloud.ibm.com/")
    assert svc.service_url == "https://eu-de.kms.cloud.ibm.com"

    svc.set_service_url("https://private.us-south.kms.cloud.ibm.com/")
    assert svc.service_url == "https://private.us-south.kms.cloud.ibm.com"

    with pytest.raises(ValueError):
        svc.set_service_url("")
    await svc.aclose()


@pytest.mark.asyncio
async def test_enable_retries_rebuilds_owned_client() -> None:
    svc = IbmKeyProtectApiV2()
    first = svc.http

    svc.enable_retries(3)
    second = svc.http

    assert svc.max_retries == 3
    assert second is not first

    svc.disable_retries()
    assert svc.max_retries == 0
    assert svc.http is not second

    await svc.aclose()
    assert first.is_closed
    assert second.is_closed


@pytest.mark.asyncio
async def test_enable_retries_rejects_negative() -> None:
    svc = IbmKeyProtectApiV2()
    with pytest.raises(ValueError):
        svc.enable_retries(-1)
    await svc.aclose()


@pytest.mark.asyncio
async def test_caller_supplied_client_is_not_closed() -> None:
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    svc = IbmKeyProtectApiV2(http=http)
    svc.enable_retries(2)

    assert svc.http is http
    await svc.aclose()
    assert not http.is_closed
    await http.aclose()


def test_construct_service_url_defaults_to_us_south() -> None:
    assert IbmKeyProtectApiV2.construct_service_url() == "https://us-south.kms.cloud.ibm.com"
    assert IbmKeyProtectApiV2.construct_service_url(None) == IbmKeyProtectApiV2.DEFAULT_SERVICE_URL


def test_construct_service_url_fills_region() -> None:
    url = IbmKeyProtectApiV2.construct_service_url({"region": "eu-gb"})
    assert url == "https://eu-gb.kms.cloud.ibm.com"


def test_construct_service_url_rejects_unknown_variable() -> None:
    with pytest.raises(ValueError, match="'zone' has no default value"):
        IbmKeyProtectApiV2.construct_service_url({"zone": "1"})


@pytest.mark.asyncio
async def test_new_instance_from_settings() -> None:
    settings = Settings(env="test", region="jp-tok", bearer_token="tok", max_retries=2)
    svc = IbmKeyProtectApiV2.new_instance(settings)

    assert svc.service_url == "https://jp-tok.kms.cloud.ibm.com"
    assert isinstance(svc.auth, BearerTokenAuth)
    assert svc.max_retries == 2
    await svc.aclose()


@pytest.mark.asyncio
async def test_new_instance_prefers_explicit_service_url() -> None:
    settings = Settings(env="test", service_url="https://kp.example/")
    svc = IbmKeyProtectApiV2.new_instance(settings)

    assert svc.service_url == "https://kp.example"
    assert isinstance(svc.auth, NoAuth)
    await svc.aclose()


def test_settings_repr_hides_token() -> None:
    assert "secret-token" not in repr(Settings(bearer_token="secret-token"))


@pytest.mark.asyncio
async def test_caller_body_keeps_explicit_nulls(mock_client) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    svc = mock_client(handler)
    await svc.patch_key(
        id="k1", bluemix_instance=BI, key_patch_body={"description": None, "keyRingID": "r2"}
    )
    await svc.http.aclose()

    assert json.loads(seen[0].content) == {"description": None, "keyRingID": "r2"}


@pytest.mark.asyncio
async def test_sdk_built_body_omits_unset_arguments(mock_client) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    svc = mock_client(handler)
    await svc.post_import_token(bluemix_instance=BI, expiration=600)
    await svc.create_migration_intent(
        id="k1", bluemix_instance=BI, resources=[{"targetCRK": "crn-crk"}]
    )
    await svc.http.aclose()

    assert json.loads(seen[0].content) == {"expiration": 600}
    assert json.loads(seen[1].content) == {"resources": [{"targetCRK": "crn-crk"}]}


@pytest.mark.asyncio
async def test_retired_client_closes_after_in_flight_requests(monkeypatch) -> None:
    built: list[int] = []

    def transport(*, retries: int) -> httpx.AsyncBaseTransport:
        built.append(retries)
        return httpx.MockTransport(lambda request: httpx.Response(200, json={}))

    monkeypatch.setattr(httpx, "AsyncHTTPTransport", transport)
    svc = IbmKeyProtectApiV2()

    await svc.get_import_token(bluemix_instance=BI)
    first = svc.http
    svc.enable_retries(2)
    assert not first.is_closed

    await svc.get_import_token(bluemix_instance=BI)

    assert built == [0, 2]
    assert first.is_closed
    assert not svc.http.is_closed
    await svc.aclose()
    assert svc.max_retries == 2
