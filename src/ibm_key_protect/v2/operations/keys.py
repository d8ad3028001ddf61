"""
ibm_key_protect.v2.operations.keys

Key resource endpoints under `/api/v2/keys`.

Responsibilities:
- Create, list, read, patch, delete, purge and restore keys.
- Key collection metadata (HEAD) and key versions.
- The deprecated combined `action_on_key` endpoint.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.observability.logging import get_logger
from ibm_key_protect.v2.common import (
    JSON,
    KEY_ACTION_JSON,
    KEY_ACTION_RESTORE_JSON,
    KEY_JSON,
    kms_headers,
)

log = get_logger(__name__)


class KeysMixin(BaseService):
    async def get_key_collection_metadata(
        self,
        *,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        state: Sequence[int] | None = None,
        extractable: bool | None = None,
        filter: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        HEAD request for the key collection.

        The service returns the number of matching keys in the `Key-Total`
        response header; there is no body.
        """
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "HEAD",
            "/api/v2/keys",
            query={"state": state, "extractable": extractable, "filter": filter},
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def create_key(
        self,
        *,
        bluemix_instance: str | None = None,
        body: Any = None,
        correlation_id: str | None = None,
        prefer: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(bluemix_instance=bluemix_instance, body=body)
        descriptor = self.build_request(
            "POST",
            "/api/v2/keys",
            accept=JSON,
            content_type=KEY_JSON,
            operation_headers=kms_headers(
                bluemix_instance,
                correlation_id=correlation_id,
                prefer=prefer,
                x_kms_key_ring=x_kms_key_ring,
            ),
            headers=headers,
            body=body,
        )
        return await self.create_request(descriptor)

    async def get_keys(
        self,
        *,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        state: Sequence[int] | None = None,
        extractable: bool | None = None,
        search: str | None = None,
        sort: str | None = None,
        filter: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        List keys in an instance.

        `state` is a list of key state integers (see `KeyState`) and is sent
        comma-separated. `sort` accepts a `KeySort` value, optionally prefixed
        with "-" for descending order.
        """
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/keys",
            query={
                "limit": limit,
                "offset": offset,
                "state": state,
                "extractable": extractable,
                "search": search,
                "sort": sort,
                "filter": filter,
            },
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def create_key_with_policies_overrides(
        self,
        *,
        bluemix_instance: str | None = None,
        body: Any = None,
        correlation_id: str | None = None,
        prefer: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Create a key whose rotation/dual-auth policies override the instance policies."""
        validate_required(bluemix_instance=bluemix_instance, body=body)
        descriptor = self.build_request(
            "POST",
            "/api/v2/keys_with_policy_overrides",
            accept=JSON,
            content_type=KEY_JSON,
            operation_headers=kms_headers(
                bluemix_instance,
                correlation_id=correlation_id,
                prefer=prefer,
                x_kms_key_ring=x_kms_key_ring,
            ),
            headers=headers,
            body=body,
        )
        return await self.create_request(descriptor)

    async def get_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Fetch a key by id or alias. Standard keys include their payload."""
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/keys/{id}",
            path={"id": id},
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def action_on_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        action: str | None = None,
        body: Any = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        prefer: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Invoke a key action through `POST /api/v2/keys/{id}?action=...`.

        Deprecated: use the dedicated action methods (`wrap_key`,
        `rotate_key`, `enable_key`, ...) instead.
        """
        log.warning("deprecated_operation", operation="action_on_key")
        validate_required(id=id, bluemix_instance=bluemix_instance, action=action, body=body)
        descriptor = self.build_request(
            "POST",
            "/api/v2/keys/{id}",
            path={"id": id},
            query={"action": action},
            accept=JSON,
            content_type=KEY_ACTION_JSON,
            operation_headers=kms_headers(
                bluemix_instance,
                correlation_id=correlation_id,
                x_kms_key_ring=x_kms_key_ring,
                prefer=prefer,
            ),
            headers=headers,
            body=body,
        )
        return await self.create_request(descriptor)

    async def patch_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        key_patch_body: Any = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Update mutable key attributes, e.g. move a key with `{"keyRingID": ...}`."""
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "PATCH",
            "/api/v2/keys/{id}",
            path={"id": id},
            accept=JSON,
            content_type=KEY_JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
            body=key_patch_body,
        )
        return await self.create_request(descriptor)

    async def delete_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        prefer: str | None = None,
        force: bool | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "DELETE",
            "/api/v2/keys/{id}",
            path={"id": id},
            query={"force": force},
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

    async def get_key_metadata(
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
            "/api/v2/keys/{id}/metadata",
            path={"id": id},
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def purge_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        prefer: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Permanently remove a key that was deleted at least four hours ago."""
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "DELETE",
            "/api/v2/keys/{id}/purge",
            path={"id": id},
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

    async def restore_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        key_restore_body: Any = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        prefer: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Restore a deleted key within 30 days of deletion.

        The response body is returned as raw bytes in `DetailedResponse.result`.
        """
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "POST",
            "/api/v2/keys/{id}/restore",
            path={"id": id},
            accept=KEY_JSON,
            content_type=KEY_ACTION_RESTORE_JSON,
            operation_headers=kms_headers(
                bluemix_instance,
                correlation_id=correlation_id,
                x_kms_key_ring=x_kms_key_ring,
                prefer=prefer,
            ),
            headers=headers,
            body=key_restore_body,
            response_type="binary",
        )
        return await self.create_request(descriptor)

    async def get_key_versions(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        total_count: bool | None = None,
        all_key_states: bool | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/keys/{id}/versions",
            path={"id": id},
            query={
                "limit": limit,
                "offset": offset,
                "totalCount": total_count,
                "allKeyStates": all_key_states,
            },
            accept=JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
        )
        return await self.create_request(descriptor)
