"""
Shared fakes for the BrandSnap test suite.

Nothing here talks to Gemini: the text client, image client, analyzer and generator
are replaced by small scripted stand-ins, and sleeping goes to a recorder.
"""

import io
from types import SimpleNamespace
from typing import List, Optional

import pytest
from PIL import Image

from brandsnap.errors import GenerationError
from brandsnap.models import BrandDescription, Platform
from brandsnap.platforms import PLATFORM_SPECS


# ============================================================================
# FACTORIES
# ============================================================================

def make_brand(
    brand_name: str = "Acme Rockets",
    summary: str = "Space logistics for small satellites",
    industry: Optional[str] = "Space Tech",
    brand_colors: Optional[List[str]] = None,
    **extra,
) -> BrandDescription:
    return BrandDescription(
        brand_name=brand_name,
        summary=summary,
        industry=industry,
        vibe="Bold, Technical, Trustworthy",
        brand_colors=brand_colors if brand_colors is not None else ["#112233", "#ffcc00"],
        **extra,
    )


def png_bytes(width: int = 64, height: int = 36, color=(17, 34, 51)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


# ============================================================================
# FAKES
# ============================================================================

class FakeAPIError(Exception):
    """Mimics google.genai.errors.APIError: numeric `code`, string `status`."""

    def __init__(self, code: int, status: str = "", message: str = "") -> None:
        super().__init__(f"{code} {status}. {message}")
        self.code = code
        self.status = status
        self.message = message


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


class FakeImageClient:
    """Replays scripted outcomes: bytes are returned, exceptions are raised."""

    model = "fake-image-model"

    def __init__(self, outcomes=None) -> None:
        self.outcomes = list(outcomes or [])
        self.calls: List[tuple] = []

    def generate(self, prompt: str, aspect_ratio: str) -> bytes:
        self.calls.append((prompt, aspect_ratio))
        outcome = self.outcomes.pop(0) if self.outcomes else png_bytes()
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class FakeTextClient:
    """Stands in for genai.Client: exposes `.models.generate_content`."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []
        self.models = SimpleNamespace(generate_content=self._generate_content)

    def _generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.reply)


class StubAnalyzer:
    def __init__(self, brand: Optional[BrandDescription] = None, error: Optional[Exception] = None):
        self.brand = brand or make_brand()
        self.error = error
        self.calls: List[tuple] = []

    def analyze(self, input, input_kind, style, color_override=None):
        self.calls.append((input, input_kind, style, color_override))
        if self.error is not None:
            raise self.error
        return self.brand


class StubGenerator:
    """Succeeds for every platform except those listed in `failing`."""

    platform_specs = PLATFORM_SPECS

    def __init__(self, failing=(), payload: bytes = b"\x89PNG\r\n\x1a\nfake") -> None:
        self.failing = {Platform(p) for p in failing}
        self.payload = payload
        self.calls: List[Platform] = []

    def _produce(self, platform: Platform) -> bytes:
        self.calls.append(platform)
        if platform in self.failing:
            raise GenerationError(f"{platform.value} always fails")
        return self.payload

    def generate_banner(self, brand, platform, style):
        return self._produce(Platform(platform))

    def generate_icon(self, brand, style):
        return self._produce(Platform.FAVICON)

    def generate_logo(self, brand, style):
        return self._produce(Platform.LOGO)


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def brand() -> BrandDescription:
    return make_brand()
