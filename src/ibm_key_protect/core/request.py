"""
ibm_key_protect.core.request

Declarative request descriptor produced by every operation.

Responsibilities:
- Carry method, URL template, path/query maps, headers and body to the transport.
- Render the final relative URL and wire-format query parameters.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]
ResponseType = Literal["json", "binary"]


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    method: HttpMethod
    url: str
    path: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    # Exactly one of `json` / `content` is set for requests with a body.
    json: Any = None
    content: bytes | None = None
    response_type: ResponseType = "json"

    def render_url(self) -> str:
        rendered = self.url
        for name, value in self.path.items():
            # Existing %XX escapes are kept so pre-encoded CRNs are not double-encoded.
            rendered = rendered.replace("{" + name + "}", quote(str(value), safe="%"))
        return rendered

    def query_params(self) -> dict[str, str]:
        return {
            name: _query_value(value) for name, value in self.query.items() if value is not None
        }


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_query_value(v) for v in value)
    if hasattr(value, "value"):
        # Enum members
        return str(value.value)
    return str(value)


def encode_body(body: Any) -> tuple[Any, bytes | None]:
    """
    Split a caller-supplied body into (json, content).

    Bytes and strings are sent as-is; mappings, lists and pydantic models are
    sent as JSON. Models use wire (alias) field names and omit unset fields;
    mappings are sent as given, including explicit nulls.
    """

    if body is None:
        return None, None
    if isinstance(body, (bytes, bytearray, memoryview)):
        return None, bytes(body)
    if isinstance(body, str):
        return None, body.encode("utf-8")
    if hasattr(body, "read"):
        return None, body.read()
    return to_wire(body), None


def compact(values: Mapping[str, Any]) -> dict[str, Any]:
    """Drop top-level None entries from a body the SDK assembles from keyword arguments."""
    return {k: v for k, v in values.items() if v is not None}


def to_wire(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(value, Mapping):
        return {k: to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value
