"""
Tests for environment-driven settings and component wiring.

Usage:
    pytest tests/test_config.py -v
"""

import pytest

from brandsnap.config import DEFAULT_ORIGINS, build_orchestrator, load_settings
from brandsnap.errors import ConfigurationError
from brandsnap.image_client import GeminiImageClient, ImagenClient
from brandsnap.orchestrator import Orchestrator
from brandsnap.prompts import PromptMode


BASE_ENV = {"GEMINI_API_KEY": "test-key"}


def env(**overrides):
    return {**BASE_ENV, **overrides}


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings(BASE_ENV)
        assert settings.gemini_api_key == "test-key"
        assert settings.image_backend == "imagen"
        assert settings.image_model == "imagen-4.0-generate-001"
        assert settings.prompt_mode is PromptMode.ABSTRACT
        assert settings.stagger_ms == 500
        assert settings.max_attempts == 3
        assert settings.backoff_base_ms == 2000
        assert settings.crop_to_platform is True
        assert settings.allowed_origins == list(DEFAULT_ORIGINS)
        assert settings.port == 3001

    def test_missing_key(self):
        with pytest.raises(ConfigurationError):
            load_settings({})

    def test_blank_key(self):
        with pytest.raises(ConfigurationError):
            load_settings({"GEMINI_API_KEY": "   "})

    def test_overrides(self):
        settings = load_settings(env(
            IMAGE_BACKEND="Gemini",
            GEMINI_IMAGE_MODEL="gemini-3-image",
            PROMPT_MODE="text",
            STAGGER_MS="0",
            MAX_ATTEMPTS="5",
            CROP_TO_PLATFORM="off",
            ALLOWED_ORIGINS="https://a.example, https://b.example",
            PORT="8080",
        ))
        assert settings.image_backend == "gemini"
        assert settings.image_model == "gemini-3-image"
        assert settings.prompt_mode is PromptMode.TEXT
        assert settings.stagger_ms == 0
        assert settings.max_attempts == 5
        assert settings.crop_to_platform is False
        assert settings.allowed_origins[-2:] == ["https://a.example", "https://b.example"]
        assert settings.port == 8080

    @pytest.mark.parametrize("overrides", [
        {"IMAGE_BACKEND": "dall-e"},
        {"PROMPT_MODE": "poetry"},
        {"STAGGER_MS": "soon"},
        {"STAGGER_MS": "-1"},
        {"MAX_ATTEMPTS": "0"},
        {"CROP_TO_PLATFORM": "maybe"},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigurationError):
            load_settings(env(**overrides))


class TestBuildOrchestrator:

    def test_wires_imagen_backend(self):
        orchestrator = build_orchestrator(load_settings(env(STAGGER_MS="250", MAX_ATTEMPTS="2")))
        assert isinstance(orchestrator, Orchestrator)
        assert orchestrator.stagger_ms == 250
        assert isinstance(orchestrator.generator.image_client, ImagenClient)
        assert orchestrator.generator.retry_policy.max_attempts == 2

    def test_wires_gemini_backend(self):
        orchestrator = build_orchestrator(load_settings(env(IMAGE_BACKEND="gemini", PROMPT_MODE="text")))
        assert isinstance(orchestrator.generator.image_client, GeminiImageClient)
        assert orchestrator.generator.mode is PromptMode.TEXT
