"""ASGI entry point: ``uvicorn api.main:app``."""

from __future__ import annotations

import logging

from api.app import create_app
from api.dependencies import get_config

logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = create_app()
