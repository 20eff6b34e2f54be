"""
Platform table — output pixel size and the image-model aspect ratio per Platform.

Imagen only accepts 1:1, 9:16, 16:9, 4:3 and 3:4, so every banner is requested at
16:9 and cover-cropped to its real size afterwards:

  twitter   1500×500   3:1    → 16:9
  linkedin  1584×396   4:1    → 16:9
  youtube   2560×1440  16:9   → 16:9 (exact)
  facebook  820×312    2.6:1  → 16:9
  og        1200×630   1.9:1  → 16:9
  favicon   512×512    1:1    → 1:1
  logo      1024×1024  1:1    → 1:1
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .models import Dimensions, Platform


@dataclass(frozen=True)
class PlatformSpec:
    width: int
    height: int
    aspect_ratio: str      # ratio sent to the image model

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(width=self.width, height=self.height)


PLATFORM_SPECS: Mapping[Platform, PlatformSpec] = MappingProxyType({
    Platform.TWITTER:  PlatformSpec(1500, 500, "16:9"),
    Platform.LINKEDIN: PlatformSpec(1584, 396, "16:9"),
    Platform.YOUTUBE:  PlatformSpec(2560, 1440, "16:9"),
    Platform.FACEBOOK: PlatformSpec(820, 312, "16:9"),
    Platform.OG:       PlatformSpec(1200, 630, "16:9"),
    Platform.FAVICON:  PlatformSpec(512, 512, "1:1"),
    Platform.LOGO:     PlatformSpec(1024, 1024, "1:1"),
})


def platform_spec(platform: Platform) -> PlatformSpec:
    return PLATFORM_SPECS[Platform(platform)]
