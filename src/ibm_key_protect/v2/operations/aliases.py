"""
ibm_key_protect.v2.operations.aliases

Key alias endpoints.
"""

from __future__ import annotations

from collections.abc import Mapping

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON, kms_headers


class AliasesMixin(BaseService):
    async def create_key_alias(
        self,
        *,
        id: str | None = None,
        alias: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Create an alias for a key. A key can hold up to five aliases."""
        validate_required(id=id, alias=alias, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "POST",
            "/api/v2/keys/{id}/aliases/{alias}",
            path={"id": id, "alias": alias},
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def delete_key_alias(
        self,
        *,
        id: str | None = None,
        alias: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, alias=alias, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "DELETE",
            "/api/v2/keys/{id}/aliases/{alias}",
            path={"id": id, "alias": alias},
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)
