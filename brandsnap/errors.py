"""
errors.py — Exception taxonomy for the BrandSnap pipeline.

  ConfigurationError  missing credential / bad setting   → fatal for any call path
  AnalysisError       text model failed or unparseable   → fatal to the request
  GenerationError     image model failed after retries   → degrades one asset
  NoImageDataError    response carried no image part     → retryable GenerationError
  AggregateFailure    every requested asset failed       → request-level failure

Every error carries a short `user_message` that is safe to return to clients.
The full message (model names, status codes) stays in the operator logs.
"""

from __future__ import annotations


class BrandSnapError(Exception):
    """Base class for all pipeline errors."""

    user_message = "Generation failed. Please try again."

    def __init__(self, message: str = "", user_message: str = "") -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


class ConfigurationError(BrandSnapError):
    user_message = "Service is not configured. Please contact the administrator."


class AnalysisError(BrandSnapError):
    user_message = "Could not analyze the brand. Please try again."


class GenerationError(BrandSnapError):
    user_message = "Image generation failed. Please try again."


class NoImageDataError(GenerationError):
    """The model answered, but without any image payload."""

    def __init__(self, message: str = "No image data in response") -> None:
        super().__init__(message)


class AggregateFailure(BrandSnapError):
    user_message = "Failed to generate any images. Please try again."
