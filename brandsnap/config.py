"""
config.py — Environment-driven settings and component wiring.

Required env vars (in .env):
    GEMINI_API_KEY=...

Optional:
    GEMINI_TEXT_MODEL=gemini-2.0-flash
    IMAGE_BACKEND=imagen                  # imagen | gemini
    IMAGEN_MODEL=imagen-4.0-generate-001
    GEMINI_IMAGE_MODEL=gemini-2.5-flash-image
    PROMPT_MODE=abstract                  # abstract | text
    STAGGER_MS=500
    MAX_ATTEMPTS=3
    BACKOFF_BASE_MS=2000
    CROP_TO_PLATFORM=true
    ALLOWED_ORIGINS=https://a.example,https://b.example
    PORT=3001
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError
from .prompts import PromptMode

DEFAULT_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:3001",
    "https://brandsnap.io",
    "https://www.brandsnap.io",
)

IMAGE_BACKENDS = ("imagen", "gemini")


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    text_model: str = "gemini-2.0-flash"
    image_backend: str = "imagen"
    imagen_model: str = "imagen-4.0-generate-001"
    gemini_image_model: str = "gemini-2.5-flash-image"
    prompt_mode: PromptMode = PromptMode.ABSTRACT
    stagger_ms: int = 500
    max_attempts: int = 3
    backoff_base_ms: int = 2000
    crop_to_platform: bool = True
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ORIGINS))
    port: int = 3001

    @property
    def image_model(self) -> str:
        return self.imagen_model if self.image_backend == "imagen" else self.gemini_image_model


def _int(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = (env.get(name) or "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read settings from `env` (default: os.environ after loading .env).

    Raises ConfigurationError when GEMINI_API_KEY is missing or a value is invalid.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    api_key = (env.get("GEMINI_API_KEY") or "").strip()
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY not configured")

    backend = (env.get("IMAGE_BACKEND") or "imagen").strip().lower()
    if backend not in IMAGE_BACKENDS:
        raise ConfigurationError(f"IMAGE_BACKEND must be one of {IMAGE_BACKENDS}, got {backend!r}")

    mode_raw = (env.get("PROMPT_MODE") or PromptMode.ABSTRACT.value).strip().lower()
    try:
        mode = PromptMode(mode_raw)
    except ValueError:
        raise ConfigurationError(f"PROMPT_MODE must be 'abstract' or 'text', got {mode_raw!r}")

    extra_origins = [
        o.strip() for o in (env.get("ALLOWED_ORIGINS") or "").split(",") if o.strip()
    ]

    return Settings(
        gemini_api_key=api_key,
        text_model=(env.get("GEMINI_TEXT_MODEL") or "").strip() or Settings.text_model,
        image_backend=backend,
        imagen_model=(env.get("IMAGEN_MODEL") or "").strip() or Settings.imagen_model,
        gemini_image_model=(env.get("GEMINI_IMAGE_MODEL") or "").strip() or Settings.gemini_image_model,
        prompt_mode=mode,
        stagger_ms=_int(env, "STAGGER_MS", 500),
        max_attempts=_int(env, "MAX_ATTEMPTS", 3, minimum=1),
        backoff_base_ms=_int(env, "BACKOFF_BASE_MS", 2000),
        crop_to_platform=_bool(env, "CROP_TO_PLATFORM", True),
        allowed_origins=list(DEFAULT_ORIGINS) + extra_origins,
        port=_int(env, "PORT", 3001, minimum=1),
    )


def build_orchestrator(settings: Settings):
    """Wire analyzer → image client → generator → orchestrator from settings."""
    from .analyzer import BrandAnalyzer
    from .generator import AssetGenerator
    from .image_client import create_image_client
    from .orchestrator import Orchestrator
    from .retry import RetryPolicy

    analyzer = BrandAnalyzer(settings.gemini_api_key, model=settings.text_model)
    image_client = create_image_client(
        settings.image_backend, settings.gemini_api_key, settings.image_model,
    )
    generator = AssetGenerator(
        image_client,
        mode=settings.prompt_mode,
        retry_policy=RetryPolicy(
            max_attempts=settings.max_attempts,
            base_delay_ms=settings.backoff_base_ms,
        ),
        crop_to_platform=settings.crop_to_platform,
    )
    return Orchestrator(analyzer, generator, stagger_ms=settings.stagger_ms)
