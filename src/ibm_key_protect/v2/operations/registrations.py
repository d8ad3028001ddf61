"""
ibm_key_protect.v2.operations.registrations

Registration endpoints linking root keys to the cloud resources they protect.

Responsibilities:
- Create/update/replace/delete a registration for one key and resource CRN.
- List registrations for a key or across all keys.
- Registration actions (deactivate).

`url_encoded_resource_crn` must already be URL-encoded; existing %XX escapes
are preserved when the path is rendered.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.request import compact
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON, kms_headers
from ibm_key_protect.v2.models import (
    CollectionMetadata,
    CollectionRequest,
    CreateRegistrationResourceBody,
    ModifiableRegistrationResourceBody,
    ReplaceRegistrationResourceBody,
)

_REGISTRATION_PATH = "/api/v2/keys/{id}/registrations/{urlEncodedResourceCRN}"


class RegistrationsMixin(BaseService):
    async def _write_registration(
        self,
        method: str,
        *,
        id: str | None,
        url_encoded_resource_crn: str | None,
        bluemix_instance: str | None,
        metadata: Any,
        resources: Any,
        correlation_id: str | None,
        x_kms_key_ring: str | None,
        if_match: str | None,
        headers: Mapping[str, str] | None,
    ) -> DetailedResponse:
        validate_required(
            id=id,
            url_encoded_resource_crn=url_encoded_resource_crn,
            bluemix_instance=bluemix_instance,
        )
        descriptor = self.build_request(
            method,  # type: ignore[arg-type]
            _REGISTRATION_PATH,
            path={"id": id, "urlEncodedResourceCRN": url_encoded_resource_crn},
            accept=JSON,
            content_type=JSON,
            operation_headers=kms_headers(
                bluemix_instance,
                correlation_id=correlation_id,
                x_kms_key_ring=x_kms_key_ring,
                if_match=if_match,
            ),
            headers=headers,
            body=compact({"metadata": metadata, "resources": resources}),
        )
        return await self.create_request(descriptor)

    async def create_registration(
        self,
        *,
        id: str | None = None,
        url_encoded_resource_crn: str | None = None,
        bluemix_instance: str | None = None,
        metadata: CollectionMetadata | Mapping[str, Any] | None = None,
        resources: Sequence[CreateRegistrationResourceBody | Mapping[str, Any]] | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        return await self._write_registration(
            "POST",
            id=id,
            url_encoded_resource_crn=url_encoded_resource_crn,
            bluemix_instance=bluemix_instance,
            metadata=metadata,
            resources=resources,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            if_match=None,
            headers=headers,
        )

    async def update_registration(
        self,
        *,
        id: str | None = None,
        url_encoded_resource_crn: str | None = None,
        bluemix_instance: str | None = None,
        metadata: CollectionMetadata | Mapping[str, Any] | None = None,
        resources: Sequence[ModifiableRegistrationResourceBody | Mapping[str, Any]] | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        if_match: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Patch a registration; pass the ETag from a previous read as `if_match`."""
        return await self._write_registration(
            "PATCH",
            id=id,
            url_encoded_resource_crn=url_encoded_resource_crn,
            bluemix_instance=bluemix_instance,
            metadata=metadata,
            resources=resources,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            if_match=if_match,
            headers=headers,
        )

    async def replace_registration(
        self,
        *,
        id: str | None = None,
        url_encoded_resource_crn: str | None = None,
        bluemix_instance: str | None = None,
        metadata: CollectionMetadata | Mapping[str, Any] | None = None,
        resources: Sequence[ReplaceRegistrationResourceBody | Mapping[str, Any]] | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        if_match: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        return await self._write_registration(
            "PUT",
            id=id,
            url_encoded_resource_crn=url_encoded_resource_crn,
            bluemix_instance=bluemix_instance,
            metadata=metadata,
            resources=resources,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            if_match=if_match,
            headers=headers,
        )

    async def delete_registration(
        self,
        *,
        id: str | None = None,
        url_encoded_resource_crn: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        prefer: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(
            id=id,
            url_encoded_resource_crn=url_encoded_resource_crn,
            bluemix_instance=bluemix_instance,
        )
        descriptor = self.build_request(
            "DELETE",
            _REGISTRATION_PATH,
            path={"id": id, "urlEncodedResourceCRN": url_encoded_resource_crn},
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance,
                correlation_id=correlation_id,
                x_kms_key_ring=x_kms_key_ring,
                prefer=prefer,
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def action_on_registration(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        action: str | None = None,
        registration_action_one_of: CollectionRequest | Mapping[str, Any] | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        prefer: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Run a registration action. `deactivate` is the only action today; its
        body lists the resource CRNs to deactivate.
        """
        validate_required(
            id=id,
            bluemix_instance=bluemix_instance,
            action=action,
            registration_action_one_of=registration_action_one_of,
        )
        descriptor = self.build_request(
            "POST",
            "/api/v2/keys/{id}/registrations",
            path={"id": id},
            query={"action": action},
            accept=JSON,
            content_type=JSON,
            operation_headers=kms_headers(
                bluemix_instance,
                correlation_id=correlation_id,
                x_kms_key_ring=x_kms_key_ring,
                prefer=prefer,
            ),
            headers=headers,
            body=registration_action_one_of,
        )
        return await self.create_request(descriptor)

    async def get_registrations(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        url_encoded_resource_crn_query: str | None = None,
        prevent_key_deletion: bool | None = None,
        total_count: bool | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/keys/{id}/registrations",
            path={"id": id},
            query=_registration_query(
                limit, offset, url_encoded_resource_crn_query, prevent_key_deletion, total_count
            ),
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def get_registrations_all_keys(
        self,
        *,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        url_encoded_resource_crn_query: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        prevent_key_deletion: bool | None = None,
        total_count: bool | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """List registrations across every key in the instance, optionally filtered by CRN."""
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/keys/registrations",
            query=_registration_query(
                limit, offset, url_encoded_resource_crn_query, prevent_key_deletion, total_count
            ),
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)


def _registration_query(
    limit: int | None,
    offset: int | None,
    url_encoded_resource_crn_query: str | None,
    prevent_key_deletion: bool | None,
    total_count: bool | None,
) -> dict[str, Any]:
    return {
        "limit": limit,
        "offset": offset,
        "urlEncodedResourceCRNQuery": url_encoded_resource_crn_query,
        "preventKeyDeletion": prevent_key_deletion,
        "totalCount": total_count,
    }
