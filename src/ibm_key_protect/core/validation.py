"""
ibm_key_protect.core.validation

Required-parameter checks run by every operation before a request is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ibm_key_protect.errors import ParameterValidationError


def missing_params(required: Mapping[str, Any]) -> list[str]:
    # Empty strings count as missing; False and 0 do not.
    return [name for name, value in required.items() if value is None or value == ""]


def validate_required(**required: Any) -> None:
    missing = missing_params(required)
    if missing:
        raise ParameterValidationError.for_missing(missing)
