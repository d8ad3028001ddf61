"""
ibm_key_protect.core.response

Response envelope returned by every operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class DetailedResponse:
    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    # Parsed JSON, raw bytes for binary operations, or None for empty bodies.
    result: Any = None

    @classmethod
    def from_httpx(cls, response: httpx.Response, *, binary: bool = False) -> DetailedResponse:
        if binary:
            return cls(response.status_code, response.headers, response.content)
        if not response.content:
            return cls(response.status_code, response.headers, None)
        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            return cls(response.status_code, response.headers, response.json())
        return cls(response.status_code, response.headers, response.text)

    def resources(self) -> list[dict[str, Any]]:
        # Key Protect collection envelopes carry their items under "resources".
        if not isinstance(self.result, dict):
            return []
        return list(self.result.get("resources") or [])

    def resources_as(self, model: type[M]) -> list[M]:
        return [model.model_validate(item) for item in self.resources()]
