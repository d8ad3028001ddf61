"""
ibm_key_protect.v2.common

Media types and header helpers shared by the v2 operation modules.
"""

from __future__ import annotations

JSON = "application/json"
KEY_JSON = "application/vnd.ibm.kms.key+json"
KEY_ACTION_JSON = "application/vnd.ibm.kms.key_action+json"
KEY_ACTION_WRAP_JSON = "application/vnd.ibm.kms.key_action_wrap+json"
KEY_ACTION_UNWRAP_JSON = "application/vnd.ibm.kms.key_action_unwrap+json"
KEY_ACTION_REWRAP_JSON = "application/vnd.ibm.kms.key_action_rewrap+json"
KEY_ACTION_ROTATE_JSON = "application/vnd.ibm.kms.key_action_rotate+json"
KEY_ACTION_RESTORE_JSON = "application/vnd.ibm.kms.key_action_restore+json"
EVENT_ACKNOWLEDGE_JSON = "application/vnd.ibm.kms.event_acknowledge+json"


def kms_headers(
    bluemix_instance: str | None,
    *,
    correlation_id: str | None = None,
    x_kms_key_ring: str | None = None,
    prefer: str | None = None,
    if_match: str | None = None,
) -> dict[str, str | None]:
    # None values are dropped when headers are merged.
    return {
        "Bluemix-Instance": bluemix_instance,
        "Correlation-Id": correlation_id,
        "X-Kms-Key-Ring": x_kms_key_ring,
        "Prefer": prefer,
        "If-Match": if_match,
    }
