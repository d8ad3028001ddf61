"""
ibm_key_protect.v2.models

Wire-level resource shapes for the v2 API.

Responsibilities:
- Request body models that operations serialize with camelCase aliases.
- Response models for typed access to `DetailedResponse.result`.

Models are passive: they check field types only. State transitions, uniqueness
and key lifecycle rules are enforced by the service.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Media types used in collection metadata.
KEY_COLLECTION_TYPE = "application/vnd.ibm.kms.key+json"
CRN_COLLECTION_TYPE = "application/vnd.ibm.kms.crn+json"
POLICY_COLLECTION_TYPE = "application/vnd.ibm.kms.policy+json"
REGISTRATION_INPUT_COLLECTION_TYPE = "application/vnd.ibm.kms.registration_input+json"
MIGRATION_INTENT_INPUT_COLLECTION_TYPE = "application/vnd.ibm.kms.migration_intent_input+json"


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


# --- request models ---------------------------------------------------------


class CollectionMetadata(WireModel):
    collection_type: str = Field(alias="collectionType")
    collection_total: int = Field(default=1, alias="collectionTotal", ge=0)


class CreateMigrationIntentObject(WireModel):
    target_crk: str = Field(alias="targetCRK")


class CreateRegistrationResourceBody(WireModel):
    prevent_key_deletion: bool | None = Field(default=None, alias="preventKeyDeletion")
    description: str | None = None
    registration_metadata: str | None = Field(default=None, alias="registrationMetadata")


class ModifiableRegistrationResourceBody(CreateRegistrationResourceBody):
    key_version_id: str | None = Field(default=None, alias="keyVersionId")


class ReplaceRegistrationResourceBody(ModifiableRegistrationResourceBody):
    pass


class CloudResourceName(WireModel):
    resource_crn: str = Field(alias="resourceCrn")


class DualAuthDeleteSetting(WireModel):
    enabled: bool


class KeyPolicyDualAuthDelete(WireModel):
    type: str = POLICY_COLLECTION_TYPE
    dual_auth_delete: DualAuthDeleteSetting = Field(alias="dualAuthDelete")


class RotationSetting(WireModel):
    enabled: bool | None = None
    interval_month: int | None = Field(default=None, ge=1, le=12)


class KeyPolicyRotation(WireModel):
    type: str = POLICY_COLLECTION_TYPE
    rotation: RotationSetting


class InstancePolicyData(WireModel):
    enabled: bool
    attributes: dict[str, Any] | None = None


class InstancePolicyItem(WireModel):
    # Instance policy bodies use snake_case on the wire.
    policy_type: str
    policy_data: InstancePolicyData


class CollectionRequest(WireModel):
    """
    Generic `{metadata, resources}` envelope.

    Covers the one-of bodies for key policies, instance policies and
    registration actions.
    """

    metadata: CollectionMetadata
    resources: list[Any] = Field(default_factory=list)


# --- response models --------------------------------------------------------


class Key(WireModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    state: int | None = None
    extractable: bool | None = None
    crn: str | None = None
    key_ring_id: str | None = Field(default=None, alias="keyRingID")
    aliases: list[str] | None = None
    imported: bool | None = None
    creation_date: datetime | None = Field(default=None, alias="creationDate")
    last_update_date: datetime | None = Field(default=None, alias="lastUpdateDate")
    expiration_date: datetime | None = Field(default=None, alias="expirationDate")
    deleted: bool | None = None
    payload: str | None = None


class KeyVersion(WireModel):
    id: str | None = None
    creation_date: datetime | None = Field(default=None, alias="creationDate")


class KeyRing(WireModel):
    id: str
    creation_date: datetime | None = Field(default=None, alias="creationDate")
    created_by: str | None = Field(default=None, alias="createdBy")


class ImportToken(WireModel):
    creation_date: datetime | None = Field(default=None, alias="creationDate")
    expiration_date: datetime | None = Field(default=None, alias="expirationDate")
    max_allowed_retrievals: int | None = Field(default=None, alias="maxAllowedRetrievals")
    remaining_retrievals: int | None = Field(default=None, alias="remainingRetrievals")
    payload: str | None = None
    nonce: str | None = None


class MigrationIntent(WireModel):
    id: str | None = None
    target_crk: str | None = Field(default=None, alias="targetCRK")
    creation_date: datetime | None = Field(default=None, alias="creationDate")
    created_by: str | None = Field(default=None, alias="createdBy")


class Registration(WireModel):
    key_id: str | None = Field(default=None, alias="keyId")
    resource_crn: str | None = Field(default=None, alias="resourceCrn")
    prevent_key_deletion: bool | None = Field(default=None, alias="preventKeyDeletion")
    description: str | None = None
    registration_metadata: str | None = Field(default=None, alias="registrationMetadata")
    key_version_id: str | None = Field(default=None, alias="keyVersionId")


class InstancePolicy(WireModel):
    policy_type: str | None = None
    policy_data: dict[str, Any] | None = None
    creation_date: datetime | None = Field(default=None, alias="creationDate")
    updated_by: str | None = Field(default=None, alias="updatedBy")


class GovernanceConfigState(WireModel):
    resource_crn: str | None = None
    resource_group_id: str | None = None
    additional_target_attributes: dict[str, Any] | None = None
    current_config: list[dict[str, Any]] = Field(default_factory=list)


class KmipAdapter(WireModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    profile: str | None = None
    profile_data: dict[str, Any] | None = None
    created_at: datetime | None = None
    created_by: str | None = None


class KmipClientCertificate(WireModel):
    id: str | None = None
    name: str | None = None
    certificate: str | None = None
    created_at: datetime | None = None
    created_by: str | None = None
