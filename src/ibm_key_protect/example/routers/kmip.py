"""
ibm_key_protect.example.routers.kmip

Read-only KMIP adapter lookups.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from ibm_key_protect.example.deps import client_dep, settings_dep
from ibm_key_protect.observability.logging import get_logger
from ibm_key_protect.settings import Settings
from ibm_key_protect.v2.service import IbmKeyProtectApiV2

router = APIRouter(prefix="/adapters", tags=["kmip"])
log = get_logger(__name__)


@router.get("")
async def list_adapters(
    request: Request,
    client: IbmKeyProtectApiV2 = Depends(client_dep),
    settings: Settings = Depends(settings_dep),
) -> list[dict[str, Any]]:
    response = await client.get_kmip_adapters(
        bluemix_instance=settings.bluemix_instance,
        correlation_id=request.state.request_id,
    )
    resources = response.resources()
    log.info("adapters_listed", count=len(resources))
    return resources


@router.get("/{adapter_id}")
async def get_adapter(
    request: Request,
    adapter_id: str,
    client: IbmKeyProtectApiV2 = Depends(client_dep),
    settings: Settings = Depends(settings_dep),
) -> list[dict[str, Any]]:
    response = await client.get_kmip_adapter(
        id=adapter_id,
        bluemix_instance=settings.bluemix_instance,
        correlation_id=request.state.request_id,
    )
    resources = response.resources()
    log.info("adapter_fetched", adapter_id=adapter_id)
    return resources


@router.get("/{adapter_id}/certificates")
async def list_certificates(
    request: Request,
    adapter_id: str,
    client: IbmKeyProtectApiV2 = Depends(client_dep),
    settings: Settings = Depends(settings_dep),
) -> list[dict[str, Any]]:
    response = await client.get_kmip_client_certificates(
        adapter_id=adapter_id,
        bluemix_instance=settings.bluemix_instance,
        correlation_id=request.state.request_id,
    )
    resources = response.resources()
    log.info("certificates_listed", adapter_id=adapter_id, count=len(resources))
    return resources
