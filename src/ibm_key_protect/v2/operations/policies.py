"""
ibm_key_protect.v2.operations.policies

Key-level and instance-level policy endpoints.

Responsibilities:
- Read/replace policies on a single key (`/api/v2/keys/{id}/policies`).
- Read/replace instance policies (`/api/v2/instance/policies`).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON, kms_headers
from ibm_key_protect.v2.models import CollectionRequest


class PoliciesMixin(BaseService):
    async def put_policy(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        set_key_policies_one_of: CollectionRequest | Mapping[str, Any] | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        policy: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Replace a key policy.

        `policy` selects which policy the body carries (`dualAuthDelete` or
        `rotation`); the body is a `{metadata, resources}` collection.
        """
        validate_required(
            id=id,
            bluemix_instance=bluemix_instance,
            set_key_policies_one_of=set_key_policies_one_of,
        )
        descriptor = self.build_request(
            "PUT",
            "/api/v2/keys/{id}/policies",
            path={"id": id},
            query={"policy": policy},
            accept=JSON,
            content_type=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
            body=set_key_policies_one_of,
        )
        return await self.create_request(descriptor)

    async def get_policy(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        policy: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/keys/{id}/policies",
            path={"id": id},
            query={"policy": policy},
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def put_instance_policy(
        self,
        *,
        bluemix_instance: str | None = None,
        set_instance_policies_one_of: CollectionRequest | Mapping[str, Any] | None = None,
        correlation_id: str | None = None,
        policy: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(
            bluemix_instance=bluemix_instance,
            set_instance_policies_one_of=set_instance_policies_one_of,
        )
        descriptor = self.build_request(
            "PUT",
            "/api/v2/instance/policies",
            query={"policy": policy},
            content_type=JSON,
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
            body=set_instance_policies_one_of,
        )
        return await self.create_request(descriptor)

    async def get_instance_policy(
        self,
        *,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        policy: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/instance/policies",
            query={"policy": policy},
            accept=JSON,
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
        )
        return await self.create_request(descriptor)
