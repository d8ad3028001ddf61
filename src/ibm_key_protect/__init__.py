"""
ibm_key_protect

Top-level package for the IBM Key Protect Python SDK.

Responsibilities:
- Expose package version metadata.
- Re-export the versioned service client and the error types callers catch.
"""

from ibm_key_protect.errors import (
    KeyProtectError,
    PagerExhaustedError,
    ParameterValidationError,
)
from ibm_key_protect.v2 import GetGovernanceConfigPager, IbmKeyProtectApiV2

__all__ = [
    "GetGovernanceConfigPager",
    "IbmKeyProtectApiV2",
    "KeyProtectError",
    "PagerExhaustedError",
    "ParameterValidationError",
    "__version__",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# The example app lives in `ibm_key_protect.example` and is not imported here, so
# SDK users do not pay for FastAPI at import time.
