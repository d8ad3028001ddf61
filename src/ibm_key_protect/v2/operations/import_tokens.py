"""
ibm_key_protect.v2.operations.import_tokens

Import token endpoints for securely importing key material.
"""

from __future__ import annotations

from collections.abc import Mapping

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.request import compact
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON, kms_headers


class ImportTokensMixin(BaseService):
    async def post_import_token(
        self,
        *,
        bluemix_instance: str | None = None,
        expiration: int | None = None,
        max_allowed_retrievals: int | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Create an import token.

        `expiration` is the token lifetime in seconds (server default 600);
        `max_allowed_retrievals` caps how often the token can be fetched
        (server default 1).
        """
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "POST",
            "/api/v2/import_token",
            accept=JSON,
            content_type=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
            body=compact(
                {"expiration": expiration, "maxAllowedRetrievals": max_allowed_retrievals}
            ),
        )
        return await self.create_request(descriptor)

    async def get_import_token(
        self,
        *,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/import_token",
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)
