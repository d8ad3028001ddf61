"""
ibm_key_protect.v2.operations.migration_intents

Migration intent endpoints (moving a root key to a Hyper Protect Crypto Services CRK).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.request import compact
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON, kms_headers
from ibm_key_protect.v2.models import CollectionMetadata, CreateMigrationIntentObject


class MigrationIntentsMixin(BaseService):
    async def create_migration_intent(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        metadata: CollectionMetadata | Mapping[str, Any] | None = None,
        resources: Sequence[CreateMigrationIntentObject | Mapping[str, Any]] | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "POST",
            "/api/v2/keys/{id}/migrationIntent",
            path={"id": id},
            accept=JSON,
            content_type=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
            body=compact({"metadata": metadata, "resources": resources}),
        )
        return await self.create_request(descriptor)

    async def get_migration_intent(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/keys/{id}/migrationIntent",
            path={"id": id},
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def delete_migration_intent(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "DELETE",
            "/api/v2/keys/{id}/migrationIntent",
            path={"id": id},
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)
