"""
ibm_key_protect.v2.operations.key_rings

Key ring endpoints.
"""

from __future__ import annotations

from collections.abc import Mapping

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON, kms_headers


class KeyRingsMixin(BaseService):
    async def list_key_rings(
        self,
        *,
        bluemix_instance: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        total_count: bool | None = None,
        correlation_id: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/key_rings",
            query={"limit": limit, "offset": offset, "totalCount": total_count},
            accept=JSON,
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def create_key_ring(
        self,
        *,
        key_ring_id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Create a key ring. Ids are 2-100 characters of letters, digits and dashes."""
        validate_required(key_ring_id=key_ring_id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "POST",
            "/api/v2/key_rings/{key-ring-id}",
            path={"key-ring-id": key_ring_id},
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def delete_key_ring(
        self,
        *,
        key_ring_id: str | None = None,
        bluemix_instance: str | None = None,
        force: bool | None = None,
        correlation_id: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Delete a key ring.

        With `force=True` the service moves any remaining keys (all in the
        Destroyed state) to the default ring before deleting.
        """
        validate_required(key_ring_id=key_ring_id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "DELETE",
            "/api/v2/key_rings/{key-ring-id}",
            path={"key-ring-id": key_ring_id},
            query={"force": force},
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
        )
        return await self.create_request(descriptor)
