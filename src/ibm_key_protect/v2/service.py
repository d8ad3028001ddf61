"""
ibm_key_protect.v2.service

Version 2 client for the IBM Key Protect API.

Responsibilities:
- Compose the per-resource operation mixins into one client class.
- Own the service URL defaults and the parameterized regional URL template.
- Build a configured client from `Settings`.
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ibm_key_protect.core.auth import BearerTokenAuth, NoAuth
from ibm_key_protect.core.base_service import BaseService
from ibm_key_protect.observability.logging import get_logger
from ibm_key_protect.settings import Settings, get_settings
from ibm_key_protect.v2.operations.aliases import AliasesMixin
from ibm_key_protect.v2.operations.governance import GovernanceMixin
from ibm_key_protect.v2.operations.import_tokens import ImportTokensMixin
from ibm_key_protect.v2.operations.instance import InstanceMixin
from ibm_key_protect.v2.operations.key_actions import KeyActionsMixin
from ibm_key_protect.v2.operations.key_rings import KeyRingsMixin
from ibm_key_protect.v2.operations.keys import KeysMixin
from ibm_key_protect.v2.operations.kmip import KmipMixin
from ibm_key_protect.v2.operations.migration_intents import MigrationIntentsMixin
from ibm_key_protect.v2.operations.policies import PoliciesMixin
from ibm_key_protect.v2.operations.registrations import RegistrationsMixin

log = get_logger(__name__)


class IbmKeyProtectApiV2(
    AliasesMixin,
    InstanceMixin,
    GovernanceMixin,
    ImportTokensMixin,
    KeyActionsMixin,
    KeyRingsMixin,
    KeysMixin,
    MigrationIntentsMixin,
    PoliciesMixin,
    RegistrationsMixin,
    KmipMixin,
    BaseService,
):
    DEFAULT_SERVICE_URL = "https://us-south.kms.cloud.ibm.com"
    DEFAULT_SERVICE_NAME = "ibm_key_protect_api"
    PARAMETERIZED_SERVICE_URL = "https://{region}.kms.cloud.ibm.com"
    DEFAULT_URL_VARIABLES: Mapping[str, str] = {"region": "us-south"}

    def __init__(
        self,
        *,
        service_url: str | None = None,
        auth: httpx.Auth | None = None,
        timeout: float = 30.0,
        max_retries: int = 0,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(
            service_url=service_url or self.DEFAULT_SERVICE_URL,
            auth=auth,
            timeout=timeout,
            max_retries=max_retries,
            http=http,
        )

    @classmethod
    def construct_service_url(cls, variables: Mapping[str, str] | None = None) -> str:
        """
        Fill the regional URL template.

        Missing variables take their defaults; names the template does not know
        raise `ValueError`.
        """

        values = dict(cls.DEFAULT_URL_VARIABLES)
        for name, value in (variables or {}).items():
            if name not in cls.DEFAULT_URL_VARIABLES:
                raise ValueError(f"'{name}' has no default value")
            values[name] = value
        return cls.PARAMETERIZED_SERVICE_URL.format(**values)

    @classmethod
    def new_instance(cls, settings: Settings | None = None) -> IbmKeyProtectApiV2:
        settings = settings or get_settings()
        auth: httpx.Auth = (
            BearerTokenAuth(settings.bearer_token) if settings.bearer_token else NoAuth()
        )
        service_url = settings.service_url or cls.construct_service_url(
            {"region": settings.region}
        )
        log.info("client_created", service_url=service_url, max_retries=settings.max_retries)
        return cls(
            service_url=service_url,
            auth=auth,
            timeout=settings.timeout_seconds,
            max_retries=settings.max_retries,
        )


# --- Module Notes -----------------------------------------------------------
# Mixins only add coroutines; all state lives on BaseService, so the MRO order
# above carries no behavior.
