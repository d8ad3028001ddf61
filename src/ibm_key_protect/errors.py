"""
ibm_key_protect.errors

Exception types raised by the SDK itself.

Responsibilities:
- Report local parameter validation failures before any request is sent.
- Signal pager exhaustion.

Remote failures are not wrapped: httpx raises `httpx.HTTPStatusError` and
`httpx.TransportError`, and they reach the caller unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable


class KeyProtectError(Exception):
    pass


class ParameterValidationError(KeyProtectError, ValueError):
    def __init__(self, message: str, *, missing: Iterable[str] = ()) -> None:
        self.missing = tuple(missing)
        super().__init__(message)

    @classmethod
    def for_missing(cls, names: Iterable[str]) -> ParameterValidationError:
        names = tuple(names)
        return cls(f"Missing required parameters: {', '.join(names)}", missing=names)


class PagerExhaustedError(KeyProtectError):
    def __init__(self) -> None:
        super().__init__("No more results available")


# --- Module Notes -----------------------------------------------------------
# ParameterValidationError subclasses ValueError so callers that already catch
# ValueError for bad input keep working.
