"""
ibm_key_protect.example.routers.keys

Key lookups backed by the shared client.

Responsibilities:
- List keys in the configured instance.
- Fetch a single key and its versions.
- Forward the request id as Correlation-Id.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from ibm_key_protect.example.deps import client_dep, settings_dep
from ibm_key_protect.observability.logging import get_logger
from ibm_key_protect.settings import Settings
from ibm_key_protect.v2.service import IbmKeyProtectApiV2

router = APIRouter(prefix="/keys", tags=["keys"])
log = get_logger(__name__)


@router.get("")
async def list_keys(
    request: Request,
    client: IbmKeyProtectApiV2 = Depends(client_dep),
    settings: Settings = Depends(settings_dep),
) -> list[dict[str, Any]]:
    response = await client.get_keys(
        bluemix_instance=settings.bluemix_instance,
        correlation_id=request.state.request_id,
    )
    resources = response.resources()
    log.info("keys_listed", count=len(resources))
    return resources


@router.get("/{id}")
async def get_key(
    request: Request,
    id: str,
    client: IbmKeyProtectApiV2 = Depends(client_dep),
    settings: Settings = Depends(settings_dep),
) -> Any:
    response = await client.get_key(
        id=id,
        bluemix_instance=settings.bluemix_instance,
        correlation_id=request.state.request_id,
    )
    log.info("key_fetched", key_id=id)
    return response.result


@router.get("/{id}/versions")
async def get_key_versions(
    request: Request,
    id: str,
    client: IbmKeyProtectApiV2 = Depends(client_dep),
    settings: Settings = Depends(settings_dep),
) -> Any:
    response = await client.get_key_versions(
        id=id,
        bluemix_instance=settings.bluemix_instance,
        correlation_id=request.state.request_id,
    )
    log.info("key_versions_fetched", key_id=id, count=len(response.resources()))
    return response.result
