"""
app.py — FastAPI surface for the BrandSnap pipeline.

  GET  /              service info
  GET  /health        liveness
  POST /api/generate  brand input → marketing assets (partial success allowed)

Error responses are always `{"success": false, "error": "<short message>"}`:
400 for missing input / platforms or an invalid body, 500 when nothing could be
generated or anything else goes wrong. Details stay in the server log.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from brandsnap import __version__
from brandsnap.config import DEFAULT_ORIGINS, Settings, build_orchestrator, load_settings
from brandsnap.errors import BrandSnapError
from brandsnap.models import GenerationRequest
from brandsnap.orchestrator import Orchestrator

logger = logging.getLogger(__name__)

SERVICE_NAME = "brandsnap-api"
FALLBACK_ERROR = "Generation failed. Please try again."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _get_orchestrator(app: FastAPI) -> Orchestrator:
    """Return the injected orchestrator, or build one from the environment."""
    orchestrator = app.state.orchestrator
    if orchestrator is None:
        settings = app.state.settings or load_settings()
        orchestrator = build_orchestrator(settings)
        app.state.orchestrator = orchestrator
    return orchestrator


def create_app(
    orchestrator: Optional[Orchestrator] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    app = FastAPI(title="BrandSnap API", version=__version__)
    app.state.orchestrator = orchestrator
    app.state.settings = settings

    origins = settings.allowed_origins if settings else list(DEFAULT_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request body: %s", exc.errors())
        return _error(400, "Invalid request body")

    @app.get("/")
    def root() -> dict:
        return {
            "status": "ok",
            "service": SERVICE_NAME,
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/health")
    def health() -> dict:
        return {"status": "healthy"}

    # Plain `def`: the pipeline is blocking, Starlette runs it in its thread pool.
    @app.post("/api/generate")
    def generate(body: GenerationRequest, request: Request) -> JSONResponse:
        if not body.has_input():
            return _error(400, "URL, description, or brandAnalysis required")
        if not body.platforms:
            return _error(400, "At least one platform required")

        start = time.time()
        try:
            result = _get_orchestrator(request.app).run(body)
        except BrandSnapError as e:
            logger.error("[Generate] %s: %s", type(e).__name__, e)
            return _error(500, e.user_message)
        except Exception:
            logger.exception("[Generate] Unhandled error")
            return _error(500, FALLBACK_ERROR)

        logger.info(
            "[Generate] Success! Generated %d assets in %.1fs",
            len(result.assets), time.time() - start,
        )
        return JSONResponse(content=result.to_wire())

    return app
