"""
ibm_key_protect.v2

IBM Key Protect API, version 2.

Responsibilities:
- Export the client, its pager, enums and wire models.
"""

from ibm_key_protect.v2.enums import (
    InstancePolicyType,
    KeyAction,
    KeyPolicyType,
    KeySort,
    KeyState,
    Prefer,
    RegistrationAction,
    ResourceKind,
)
from ibm_key_protect.v2.pagers import GetGovernanceConfigPager
from ibm_key_protect.v2.service import IbmKeyProtectApiV2

__all__ = [
    "GetGovernanceConfigPager",
    "IbmKeyProtectApiV2",
    "InstancePolicyType",
    "KeyAction",
    "KeyPolicyType",
    "KeySort",
    "KeyState",
    "Prefer",
    "RegistrationAction",
    "ResourceKind",
]
