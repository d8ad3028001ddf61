"""
ibm_key_protect.v2.operations.governance

Governance configuration listing (used by compliance tooling).

Responsibilities:
- Single-page `get_governance_config`.
- Multi-page iteration lives in `ibm_key_protect.v2.pagers`.
"""

from __future__ import annotations

from collections.abc import Mapping

from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.response import DetailedResponse
from ibm_key_protect.core.validation import validate_required
from ibm_key_protect.v2.common import JSON


class GovernanceMixin(BaseService):
    async def get_governance_config(
        self,
        *,
        config_request_id: str | None = None,
        account_id: str | None = None,
        resource_kind: str | None = None,
        service_instance_crn: str | None = None,
        resource_group_id: str | None = None,
        transaction_id: str | None = None,
        limit: int | None = None,
        offset: int | str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> DetailedResponse:
        validate_required(
            config_request_id=config_request_id,
            account_id=account_id,
            resource_kind=resource_kind,
            service_instance_crn=service_instance_crn,
            resource_group_id=resource_group_id,
        )
        descriptor = self.build_request(
            "GET",
            "/governance/v1/configs",
            query={
                "config_request_id": config_request_id,
                "account_id": account_id,
                "resource_kind": resource_kind,
                "service_instance_crn": service_instance_crn,
                "resource_group_id": resource_group_id,
                # The service reads the transaction id from the query string.
                "Transaction-Id": transaction_id,
                "limit": limit,
                "offset": offset,
            },
            accept=JSON,
            headers=headers,
        )
        return await self.create_request(descriptor)
