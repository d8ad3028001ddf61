"""
ibm_key_protect.v2.pagers

Offset-based pagination over list endpoints.

Responsibilities:
- Drive `get_governance_config` page by page using the server's `next.href`.
- Expose pages (`get_next`), the flattened result (`get_all`) and async iteration over items.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, urlsplit

from ibm_key_protect.errors import PagerExhaustedError, ParameterValidationError
from ibm_key_protect.observability.logging import get_logger

if TYPE_CHECKING:
    from ibm_key_protect.v2.service import IbmKeyProtectApiV2

log = get_logger(__name__)


def next_offset(href: str | None) -> str | None:
    """Return the `offset` query parameter of a `next.href` link, if any."""
    if not href:
        return None
    values = parse_qs(urlsplit(href).query).get("offset")
    if not values:
        return None
    # The offset is an opaque cursor; it is sent back exactly as received.
    return values[0]


class GetGovernanceConfigPager:
    def __init__(self, client: IbmKeyProtectApiV2, **params: Any) -> None:
        if params.get("offset") is not None:
            raise ParameterValidationError(
                "The params dictionary should not contain the 'offset' field"
            )
        params.pop("offset", None)
        self._client = client
        self._params = params
        self._has_next = True
        self._page_context: dict[str, str | None] = {"next": None}

    def has_next(self) -> bool:
        return self._has_next

    async def get_next(self) -> list[dict[str, Any]]:
        if not self._has_next:
            raise PagerExhaustedError()

        response = await self._client.get_governance_config(
            **self._params, offset=self._page_context["next"]
        )
        result = response.result or {}

        offset = next_offset((result.get("next") or {}).get("href"))
        self._page_context["next"] = offset
        if offset is None:
            self._has_next = False

        items = list(result.get("config_state") or [])
        log.debug("page_fetched", items=len(items), next_offset=offset)
        return items

    async def get_all(self) -> list[dict[str, Any]]:
        results: list[dict[str, Any]] = []
        while self.has_next():
            results.extend(await self.get_next())
        return results

    def __aiter__(self) -> AsyncIterator[dict[str, Any]]:
        return self._iter_items()

    async def _iter_items(self) -> AsyncIterator[dict[str, Any]]:
        while self.has_next():
            for item in await self.get_next():
                yield item
