"""
ibm_key_protect.v2.enums

Enumerated wire values accepted by the v2 API.

All operations also accept plain strings/ints; the enums exist for discoverability.
"""

from __future__ import annotations

import enum


class KeyState(enum.IntEnum):
    # Lifecycle is enforced server-side; the SDK only names the values.
    pre_activation = 0
    active = 1
    suspended = 2
    deactivated = 3
    destroyed = 5


class KeyAction(enum.StrEnum):
    disable = "disable"
    enable = "enable"
    restore = "restore"
    rewrap = "rewrap"
    rotate = "rotate"
    set_key_for_deletion = "setKeyForDeletion"
    unset_key_for_deletion = "unsetKeyForDeletion"
    unwrap = "unwrap"
    wrap = "wrap"


class KeySort(enum.StrEnum):
    # Prefix a value with "-" for descending order.
    id = "id"
    state = "state"
    extractable = "extractable"
    imported = "imported"
    creation_date = "creationDate"
    last_update_date = "lastUpdateDate"
    last_rotate_date = "lastRotateDate"
    deletion_date = "deletionDate"
    expiration_date = "expirationDate"


class RegistrationAction(enum.StrEnum):
    deactivate = "deactivate"


class KeyPolicyType(enum.StrEnum):
    dual_auth_delete = "dualAuthDelete"
    rotation = "rotation"


class InstancePolicyType(enum.StrEnum):
    allowed_network = "allowedNetwork"
    allowed_ip = "allowedIP"
    dual_auth_delete = "dualAuthDelete"
    key_create_import_access = "keyCreateImportAccess"
    metrics = "metrics"
    rotation = "rotation"


class ResourceKind(enum.StrEnum):
    instance = "instance"


class Prefer(enum.StrEnum):
    representation = "return=representation"
    minimal = "return=minimal"
