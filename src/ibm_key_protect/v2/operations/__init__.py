"""
ibm_key_protect.v2.operations

Per-resource operation mixins composed into `IbmKeyProtectApiV2`.

Responsibilities:
- One module per resource group, one coroutine per REST endpoint.
- Validate, build a `RequestDescriptor`, delegate to `create_request`.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Operations never talk to httpx directly; `BaseService.create_request` is the
# single place where a descriptor turns into network I/O.
