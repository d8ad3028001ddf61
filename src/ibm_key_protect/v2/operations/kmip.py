"""
ibm_key_protect.v2.operations.kmip

Read-only KMIP adapter endpoints used by the example app.
"""

from __future__ import annotations

from collections.abc import Mapping

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON, kms_headers


class KmipMixin(BaseService):
    async def get_kmip_adapters(
        self,
        *,
        bluemix_instance: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        total_count: bool | None = None,
        crk_id: str | None = None,
        correlation_id: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/kmip_adapters",
            query={"limit": limit, "offset": offset, "totalCount": total_count, "crk_id": crk_id},
            accept=JSON,
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def get_kmip_adapter(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Fetch an adapter by id or name."""
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/kmip_adapters/{id}",
            path={"id": id},
            accept=JSON,
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def get_kmip_client_certificates(
        self,
        *,
        adapter_id: str | None = None,
        bluemix_instance: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        total_count: bool | None = None,
        correlation_id: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(adapter_id=adapter_id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/kmip_adapters/{adapter_id}/certificates",
            path={"adapter_id": adapter_id},
            query={"limit": limit, "offset": offset, "totalCount": total_count},
            accept=JSON,
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
        )
        return await self.create_request(descriptor)
