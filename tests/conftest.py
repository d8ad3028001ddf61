"""
tests.conftest

Shared fixtures.

Responsibilities:
- Provide a client whose `create_request` is replaced by an AsyncMock, so
  operation tests can inspect the built `RequestDescriptor` without I/O.
- Provide a helper for clients backed by `httpx.MockTransport`.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from ibm_key_protect.core.auth import NoAuth
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.v2.service import IbmKeyProtectApiV2

SERVICE_URL = "https://kp.test"


@pytest.fixture
def service() -> IbmKeyProtectApiV2:
    svc = IbmKeyProtectApiV2(service_url=SERVICE_URL, auth=NoAuth())
    svc.create_request = AsyncMock(return_value=DetailedResponse(status_code=200))  # type: ignore[method-assign]
    return svc


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], IbmKeyProtectApiV2]:
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> IbmKeyProtectApiV2:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return IbmKeyProtectApiV2(service_url=SERVICE_URL, auth=NoAuth(), http=http)

    return factory
