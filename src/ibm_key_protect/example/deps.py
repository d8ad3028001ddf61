"""
ibm_key_protect.example.deps

FastAPI dependency wiring for the example app.

Responsibilities:
- Provide the settings and the shared client stored on app.state.
"""

from __future__ import annotations

from fastapi import Request

from ibm_key_protect.settings import Settings
from ibm_key_protect.v2.service import IbmKeyProtectApiV2


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def client_dep(request: Request) -> IbmKeyProtectApiV2:
    # Created on app startup in `ibm_key_protect.example.app.create_app`.
    return request.app.state.kp_client  # type: ignore[attr-defined]
