"""
Generator — turns a BrandDescription into raster assets via the image model.

  generate_banner(brand, platform, style)  → bytes   16:9 request, platform-sized output
  generate_icon(brand, style)              → bytes   1:1 favicon / app icon
  generate_logo(brand, style)              → bytes   1:1 monochrome logo mark

Each call builds its prompt (see prompts.py), runs the image client under the shared
RetryPolicy and, when crop_to_platform is on, cover-fits the result to the exact
platform pixel size. Failures surface as GenerationError chained to the last error
the model raised. No placeholder image is ever substituted.
"""

from __future__ import annotations

import time
from typing import Callable, Mapping, Optional

from rich.console import Console
from rich.markup import escape

from .errors import GenerationError
from .image_client import ImageModelClient
from .imaging import fit_to_size
from .models import BrandDescription, Platform, Style
from .platforms import PLATFORM_SPECS, PlatformSpec
from .prompts import PromptMode, build_banner_prompt, build_icon_prompt, build_logo_prompt
from .retry import RetryPolicy
from .styles import GENERATOR_STYLE_PROMPTS, StyleTable, style_guide

console = Console()


def timestamp_nonce() -> str:
    return str(int(time.time() * 1000))


class AssetGenerator:
    def __init__(
        self,
        image_client: ImageModelClient,
        mode: PromptMode = PromptMode.ABSTRACT,
        retry_policy: Optional[RetryPolicy] = None,
        style_prompts: StyleTable = GENERATOR_STYLE_PROMPTS,
        platform_specs: Mapping[Platform, PlatformSpec] = PLATFORM_SPECS,
        nonce_factory: Callable[[], str] = timestamp_nonce,
        crop_to_platform: bool = True,
    ) -> None:
        self.image_client = image_client
        self.mode = PromptMode(mode)
        self.retry_policy = retry_policy or RetryPolicy()
        self.style_prompts = style_prompts
        self.platform_specs = platform_specs
        self.nonce_factory = nonce_factory
        self.crop_to_platform = crop_to_platform

    # ── Public entry points ───────────────────────────────────────────────────

    def generate_banner(self, brand: BrandDescription, platform: Platform, style: Style) -> bytes:
        platform = Platform(platform)
        if not platform.is_banner:
            raise ValueError(f"{platform.value} is not a banner platform")
        prompt = build_banner_prompt(
            brand, platform, self._style_prompt(style), self.nonce_factory(), self.mode,
        )
        return self._render(prompt, platform, f"{platform.value} banner")

    def generate_icon(self, brand: BrandDescription, style: Style) -> bytes:
        prompt = build_icon_prompt(brand, self._style_prompt(style), self.nonce_factory(), self.mode)
        return self._render(prompt, Platform.FAVICON, "favicon")

    def generate_logo(self, brand: BrandDescription, style: Style) -> bytes:
        prompt = build_logo_prompt(brand, self._style_prompt(style), self.nonce_factory(), self.mode)
        return self._render(prompt, Platform.LOGO, "logo")

    # ── Internals ─────────────────────────────────────────────────────────────

    def _style_prompt(self, style: Style) -> str:
        return style_guide(self.style_prompts, style)

    def _render(self, prompt: str, platform: Platform, label: str) -> bytes:
        spec = self.platform_specs[platform]
        console.print(
            f"  [dim]→ {label} ({spec.aspect_ratio}) via {getattr(self.image_client, 'model', 'image model')}[/dim]"
        )

        try:
            data = self.retry_policy.call(
                lambda: self.image_client.generate(prompt, spec.aspect_ratio),
                label=label,
            )
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"{label} generation failed: {e}") from e

        if self.crop_to_platform:
            try:
                data = fit_to_size(data, spec.width, spec.height)
            except (OSError, ValueError) as e:
                raise GenerationError(f"{label}: model returned an unreadable image ({e})") from e

        console.print(f"  [green]✓ {escape(label)}[/green] ({len(data) // 1024} KB)")
        return data
