"""
tests.test_pagers

Tests for `GetGovernanceConfigPager` against a mocked transport.
"""

from __future__ import annotations

import httpx
import pytest

from ibm_key_protect.errors import PagerExhaustedError, ParameterValidationError
from ibm_key_protect.v2.pagers import GetGovernanceConfigPager, next_offset

PARAMS = {
    "config_request_id": "req-1",
    "account_id": "acct",
    "resource_kind": "instance",
    "service_instance_crn": "crn-1",
    "resource_group_id": "rg",
    "limit": 10,
}

PAGE_1 = {
    "next": {"href": "https://myhost.com/somePath?offset=1"},
    "total_count": 2,
    "limit": 1,
    "config_state": [{"resource_crn": "crn-a"}],
}
PAGE_2 = {
    "total_count": 2,
    "limit": 1,
    "config_state": [{"resource_crn": "crn-b"}],
}


def _paged_handler(seen: list[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        page = PAGE_2 if "offset" in request.url.params else PAGE_1
        return httpx.Response(200, json=page)

    return handler


def test_next_offset_parses_href() -> None:
    assert next_offset("https://myhost.com/somePath?offset=25&limit=5") == "25"
    assert next_offset("https://myhost.com/somePath?limit=5") is None
    assert next_offset(None) is None


@pytest.mark.asyncio
async def test_get_next_walks_pages(mock_client) -> None:
    seen: list[httpx.Request] = []
    svc = mock_client(_paged_handler(seen))
    pager = GetGovernanceConfigPager(svc, **PARAMS)

    assert pager.has_next()
    first = await pager.get_next()
    assert pager.has_next()
    second = await pager.get_next()
    assert not pager.has_next()
    await svc.http.aclose()

    assert first == [{"resource_crn": "crn-a"}]
    assert second == [{"resource_crn": "crn-b"}]
    assert "offset" not in seen[0].url.params
    assert seen[1].url.params["offset"] == "1"
    assert seen[1].url.params["limit"] == "10"
    assert seen[1].url.params["account_id"] == "acct"


@pytest.mark.asyncio
async def test_get_all_collects_every_item(mock_client) -> None:
    svc = mock_client(_paged_handler([]))
    items = await GetGovernanceConfigPager(svc, **PARAMS).get_all()
    await svc.http.aclose()

    assert [item["resource_crn"] for item in items] == ["crn-a", "crn-b"]


@pytest.mark.asyncio
async def test_async_iteration_yields_items(mock_client) -> None:
    svc = mock_client(_paged_handler([]))
    items = [item async for item in GetGovernanceConfigPager(svc, **PARAMS)]
    await svc.http.aclose()

    assert len(items) == 2


@pytest.mark.asyncio
async def test_get_next_after_last_page_raises(mock_client) -> None:
    svc = mock_client(lambda request: httpx.Response(200, json=PAGE_2))
    pager = GetGovernanceConfigPager(svc, **PARAMS)

    await pager.get_next()
    with pytest.raises(PagerExhaustedError, match="No more results available"):
        await pager.get_next()
    await svc.http.aclose()


def test_offset_param_is_rejected(service) -> None:
    with pytest.raises(ParameterValidationError):
        GetGovernanceConfigPager(service, **PARAMS, offset=5)


@pytest.mark.asyncio
async def test_missing_required_params_surface_on_first_page(service) -> None:
    pager = GetGovernanceConfigPager(service, account_id="acct")

    with pytest.raises(ParameterValidationError):
        await pager.get_next()


@pytest.mark.asyncio
async def test_opaque_offset_is_sent_back_unchanged(mock_client) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if "offset" in request.url.params:
            return httpx.Response(200, json=PAGE_2)
        page = {**PAGE_1, "next": {"href": "https://myhost.com/somePath?offset=abc"}}
        return httpx.Response(200, json=page)

    svc = mock_client(handler)
    items = await GetGovernanceConfigPager(svc, **PARAMS).get_all()
    await svc.http.aclose()

    assert len(items) == 2
    assert seen[1].url.params["offset"] == "abc"
