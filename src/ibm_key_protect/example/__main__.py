"""
ibm_key_protect.example.__main__

Entrypoint for running the example via `python -m ibm_key_protect.example`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from ibm_key_protect.example.app import create_app
from ibm_key_protect.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Configure with KP_BEARER_TOKEN, KP_BLUEMIX_INSTANCE and KP_REGION (or KP_SERVICE_URL).
