#!/usr/bin/env python3
"""
run_server.py — BrandSnap API entry point.

Usage:
    python run_server.py

Required env vars (in .env):
    GEMINI_API_KEY=...

Optional:
    PORT=3001
    ALLOWED_ORIGINS=https://staging.brandsnap.io   # added to the built-in CORS list
    (see brandsnap/config.py for the full list)
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def main() -> None:
    from brandsnap.config import build_orchestrator, load_settings
    from brandsnap.errors import ConfigurationError
    from server.app import create_app

    try:
        settings = load_settings()
        orchestrator = build_orchestrator(settings)
    except ConfigurationError as e:
        logger.error("%s — set it in the environment / .env", e)
        sys.exit(1)

    logger.info("Starting BrandSnap API on port %d", settings.port)
    logger.info("Allowed origins: %s", ", ".join(settings.allowed_origins))
    logger.info(
        "Image backend: %s (%s), prompt mode: %s",
        settings.image_backend, settings.image_model, settings.prompt_mode.value,
    )

    app = create_app(orchestrator=orchestrator, settings=settings)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
