"""
ibm_key_protect.v2.operations.instance

Instance-level lookups: crypto endpoints and allowed IP ports.
"""

from __future__ import annotations

from collections.abc import Mapping

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON, kms_headers


class InstanceMixin(BaseService):
    async def crypto_v2_get_instance_endpoints(
        self,
        *,
        instance_id: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Look up the public and private endpoints of a service instance.

        This endpoint is addressed by instance id in the path, so no
        Bluemix-Instance header is sent.
        """
        validate_required(instance_id=instance_id)
        descriptor = self.build_request(
            "GET",
            "/crypto_v2/instances/{instanceId}",
            path={"instanceId": instance_id},
            accept=JSON,
            headers=headers,
        )
        return await self.create_request(descriptor)

    async def get_allowed_ip_port(
        self,
        *,
        bluemix_instance: str | None = None,
        correlation_id: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        """Return the private endpoint port for an instance with an allowed-IP policy."""
        validate_required(bluemix_instance=bluemix_instance)
        descriptor = self.build_request(
            "GET",
            "/api/v2/instance/allowed_ip_port",
            accept=JSON,
            operation_headers=kms_headers(bluemix_instance, correlation_id=correlation_id),
            headers=headers,
        )
        return await self.create_request(descriptor)
