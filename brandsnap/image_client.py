"""
image_client.py — Thin adapters over the google-genai image endpoints.

  ImagenClient        models.generate_images   (Imagen 4, text-only prompts)
  GeminiImageClient   models.generate_content  with IMAGE response modality

Both expose `generate(prompt, aspect_ratio) -> bytes` and return the first image
payload in the response. A response without any image raises NoImageDataError,
which the retry policy treats as transient. Transport / API errors propagate
untouched so the policy can inspect their status.
"""

from __future__ import annotations

import base64
from typing import Any, Optional, Protocol

from google import genai
from google.genai import types

from .errors import ConfigurationError, NoImageDataError

DEFAULT_IMAGEN_MODEL = "imagen-4.0-generate-001"
DEFAULT_GEMINI_IMAGE_MODEL = "gemini-2.5-flash-image"


class ImageModelClient(Protocol):
    model: str

    def generate(self, prompt: str, aspect_ratio: str) -> bytes: ...


def _as_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        return base64.b64decode(data)
    return bytes(data)


class ImagenClient:
    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_IMAGEN_MODEL,
        client: Optional[genai.Client] = None,
    ) -> None:
        self.model = model
        self.client = client or genai.Client(api_key=api_key)

    def generate(self, prompt: str, aspect_ratio: str) -> bytes:
        response = self.client.models.generate_images(
            model=self.model,
            prompt=prompt,
            config=types.GenerateImagesConfig(
                number_of_images=1,
                aspect_ratio=aspect_ratio,
            ),
        )
        for generated in response.generated_images or []:
            image = getattr(generated, "image", None)
            data = getattr(image, "image_bytes", None) if image is not None else None
            if data:
                return _as_bytes(data)
        raise NoImageDataError()


class GeminiImageClient:
    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_IMAGE_MODEL,
        client: Optional[genai.Client] = None,
    ) -> None:
        self.model = model
        self.client = client or genai.Client(api_key=api_key)

    def generate(self, prompt: str, aspect_ratio: str) -> bytes:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE"],
                image_config=types.ImageConfig(aspect_ratio=aspect_ratio),
            ),
        )
        for candidate in response.candidates or []:
            content = getattr(candidate, "content", None)
            for part in getattr(content, "parts", None) or []:
                inline = getattr(part, "inline_data", None)
                if inline is not None and inline.data:
                    return _as_bytes(inline.data)
        raise NoImageDataError()


def create_image_client(backend: str, api_key: str, model: Optional[str] = None) -> ImageModelClient:
    """Build the client for IMAGE_BACKEND ('imagen' or 'gemini')."""
    if backend == "imagen":
        return ImagenClient(api_key, model or DEFAULT_IMAGEN_MODEL)
    if backend == "gemini":
        return GeminiImageClient(api_key, model or DEFAULT_GEMINI_IMAGE_MODEL)
    raise ConfigurationError(f"Unknown image backend: {backend!r}")
