"""
ibm_key_protect.v2.operations.key_actions

Key action endpoints under `/api/v2/keys/{id}/actions/*` plus event acknowledgement.

Responsibilities:
- Envelope encryption actions on root keys (wrap, unwrap, rewrap, rotate).
- Lifecycle actions (enable, disable, dual-auth deletion scheduling, sync).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import (
    EVENT_ACKNOWLEDGE_JSON,
    JSON,
    KEY_ACTION_REWRAP_JSON,
    KEY_ACTION_ROTATE_JSON,
    KEY_ACTION_UNWRAP_JSON,
    KEY_ACTION_WRAP_JSON,
    kms_headers,
)


class KeyActionsMixin(BaseService):
    async def _key_action(
        self,
        action: str,
        *,
        id: str | None,
        bluemix_instance: str | None,
        correlation_id: str | None,
        x_kms_key_ring: str | None,
        headers: Mapping[str, str] | None,
        accept: str | None = None,
        content_type: str | None = None,
        prefer: str | None = None,
        body: Any = None,
    ) -> DetailedResponse:
        descriptor = self.build_request(
            "POST",
            f"/api/v2/keys/{{id}}/actions/{action}",
            path={"id": id},
            accept=accept,
            content_type=content_type,
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

    async def wrap_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        key_action_wrap_body: Any = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Wrap a data encryption key with a root key.

        With an empty body the service generates a new DEK, wraps it, and
        returns both. Pass `{"plaintext": <base64>, "aad": [...]}` to wrap
        caller-supplied material.
        """
        validate_required(id=id, bluemix_instance=bluemix_instance)
        return await self._key_action(
            "wrap",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
            accept=JSON,
            content_type=KEY_ACTION_WRAP_JSON,
            body=key_action_wrap_body,
        )

    async def unwrap_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        key_action_unwrap_body: Any = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Unwrap a ciphertext produced by `wrap_key`; the body must carry `ciphertext`."""
        validate_required(
            id=id,
            bluemix_instance=bluemix_instance,
            key_action_unwrap_body=key_action_unwrap_body,
        )
        return await self._key_action(
            "unwrap",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
            accept=JSON,
            content_type=KEY_ACTION_UNWRAP_JSON,
            body=key_action_unwrap_body,
        )

    async def rewrap_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        key_action_rewrap_body: Any = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(
            id=id,
            bluemix_instance=bluemix_instance,
            key_action_rewrap_body=key_action_rewrap_body,
        )
        return await self._key_action(
            "rewrap",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
            accept=JSON,
            content_type=KEY_ACTION_REWRAP_JSON,
            body=key_action_rewrap_body,
        )

    async def rotate_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        key_action_rotate_body: Any = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        prefer: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Rotate a root key. Imported root keys need a `payload` in the body."""
        validate_required(id=id, bluemix_instance=bluemix_instance)
        return await self._key_action(
            "rotate",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
            content_type=KEY_ACTION_ROTATE_JSON,
            prefer=prefer,
            body=key_action_rotate_body,
        )

    async def set_key_for_deletion(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """First authorization of a dual-authorization key deletion."""
        validate_required(id=id, bluemix_instance=bluemix_instance)
        return await self._key_action(
            "setKeyForDeletion",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
        )

    async def unset_key_for_deletion(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        return await self._key_action(
            "unsetKeyForDeletion",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
        )

    async def enable_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        return await self._key_action(
            "enable",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
        )

    async def disable_key(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(id=id, bluemix_instance=bluemix_instance)
        return await self._key_action(
            "disable",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
        )

    async def sync_associated_resources(
        self,
        *,
        id: str | None = None,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Ask the service to resend key lifecycle events to registered resources."""
        validate_required(id=id, bluemix_instance=bluemix_instance)
        return await self._key_action(
            "sync",
            id=id,
            bluemix_instance=bluemix_instance,
            correlation_id=correlation_id,
            x_kms_key_ring=x_kms_key_ring,
            headers=headers,
        )

    async def event_acknowledge(
        self,
        *,
        bluemix_instance: str | None = None,
        body: Any = None,
        correlation_id: str | None = None,
        x_kms_key_ring: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(bluemix_instance=bluemix_instance, body=body)
        descriptor = self.build_request(
            "POST",
            "/api/v2/event_ack",
            content_type=EVENT_ACKNOWLEDGE_JSON,
            operation_headers=kms_headers(
                bluemix_instance, correlation_id=correlation_id, x_kms_key_ring=x_kms_key_ring
            ),
            headers=headers,
            body=body,
        )
        return await self.create_request(descriptor)
