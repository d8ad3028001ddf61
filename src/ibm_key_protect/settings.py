"""
ibm_key_protect.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the client factory and the example app.
- Hide the bearer token from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KP_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "ibm_key_protect_api"
    log_level: str = "INFO"

    # Service endpoint; when unset the URL is built from `region`.
    service_url: str | None = None
    region: str = "us-south"

    # Auth
    bearer_token: str | None = Field(default=None, repr=False)

    # Key Protect instance id sent as the Bluemix-Instance header
    bluemix_instance: str | None = None

    # Transport
    timeout_seconds: float = 30.0
    max_retries: int = Field(default=0, ge=0)

    # Example app
    api_host: str = "0.0.0.0"
    api_port: int = 3000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of mutating the environment.
