"""
ibm_key_protect.core

Service-agnostic client plumbing shared by every API version.

Responsibilities:
- Request descriptors and response envelopes.
- Parameter validation helpers.
- The httpx-backed base service that performs the actual exchange.
"""

from ibm_key_protect.core.auth import BearerTokenAuth, NoAuth
from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.core.request import RequestDescriptor
from ibm_key_protect.core.response import DetailedResponse

__all__ = [
    "BaseService",
    "BearerTokenAuth",
    "DetailedResponse",
    "NoAuth",
    "RequestDescriptor",
]
