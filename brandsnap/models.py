"""
Data model shared by the analyzer, generator, orchestrator and HTTP layer.

Wire format is camelCase (brandName, brandColors, ...) to stay compatible with the
web client; Python code uses snake_case attributes. Models that describe produced
data (BrandDescription, GeneratedAsset) are frozen — built once, read many times.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


_WIRE = dict(alias_generator=to_camel, populate_by_name=True)


# ── Enumerations ──────────────────────────────────────────────────────────────

class Style(str, Enum):
    BLUEPRINT = "blueprint"
    BRUTALISM = "brutalism"
    ISOMETRIC = "isometric"
    FLUID = "fluid"
    COLLAGE = "collage"
    EXPLAINER = "explainer"
    MINIMAL = "minimal"
    GRADIENT = "gradient"
    GEOMETRIC = "geometric"
    RETRO = "retro"

    @classmethod
    def resolve(cls, value: object) -> "Style":
        """Map any user-supplied value onto a Style. Unknown values become MINIMAL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.MINIMAL


class Platform(str, Enum):
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    YOUTUBE = "youtube"
    FACEBOOK = "facebook"
    OG = "og"
    FAVICON = "favicon"
    LOGO = "logo"

    @property
    def is_banner(self) -> bool:
        return self not in (Platform.FAVICON, Platform.LOGO)


class InputKind(str, Enum):
    URL = "url"
    TEXT = "text"


# ── Brand metadata ────────────────────────────────────────────────────────────

class BrandDescription(BaseModel):
    """Structured brand record produced once per request by the analyzer."""

    model_config = ConfigDict(frozen=True, **_WIRE)

    brand_name: str = Field(default="", description="Short brand/company name")
    summary: str = Field(default="", description="One sentence on what the brand does")
    industry: Optional[str] = Field(default=None, description="Specific sector, e.g. 'B2B SaaS'")
    vibe: str = Field(default="", description="3–4 words of visual personality")
    brand_colors: List[str] = Field(
        default_factory=list,
        description="Ordered hex palette, first entry is the primary color",
    )
    slogan: Optional[str] = None
    cta: Optional[str] = None
    title: Optional[str] = None
    icon_concept: Optional[str] = None
    visual_metaphors: Optional[List[str]] = None
    visual_prompt: Optional[str] = Field(
        default=None,
        description="Pre-composed image prompt; replaces the generator's own style text",
    )
    twitter_bio: Optional[str] = None
    linkedin_headline: Optional[str] = None

    def color(self, index: int, default: str) -> str:
        if index < len(self.brand_colors) and self.brand_colors[index]:
            return self.brand_colors[index]
        return default

    @property
    def primary_color(self) -> str:
        return self.color(0, "#3b82f6")

    @property
    def secondary_color(self) -> str:
        return self.color(1, "#ffffff")


class BrandSummary(BaseModel):
    """The trimmed view of a BrandDescription returned to callers."""

    model_config = ConfigDict(**_WIRE)

    brand_name: str
    summary: str = ""
    industry: Optional[str] = None
    vibe: str = ""
    slogan: Optional[str] = None
    cta: Optional[str] = None
    brand_colors: List[str] = Field(default_factory=list)
    icon_concept: Optional[str] = None
    visual_prompt: Optional[str] = None

    @classmethod
    def from_brand(cls, brand: BrandDescription) -> "BrandSummary":
        return cls(
            brand_name=brand.brand_name,
            summary=brand.summary,
            industry=brand.industry,
            vibe=brand.vibe,
            slogan=brand.slogan,
            cta=brand.cta,
            brand_colors=list(brand.brand_colors),
            icon_concept=brand.icon_concept,
            visual_prompt=brand.visual_prompt,
        )


# ── Assets ────────────────────────────────────────────────────────────────────

class Dimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int
    height: int


class GeneratedAsset(BaseModel):
    model_config = ConfigDict(frozen=True, **_WIRE)

    platform: Platform
    dimensions: Dimensions
    base64: str = Field(description="data: URL carrying the base64 raster bytes")
    variant: Optional[int] = None

    @property
    def width(self) -> int:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height


# ── Request / result ──────────────────────────────────────────────────────────

class GenerationRequest(BaseModel):
    model_config = ConfigDict(**_WIRE)

    url: Optional[str] = None
    description: Optional[str] = None
    brand_analysis: Optional[BrandDescription] = None
    platforms: List[Platform] = Field(default_factory=list)
    style: str = Style.MINIMAL.value
    custom_colors: Optional[List[str]] = None
    include_favicon: bool = False
    variants: int = Field(default=1, ge=1, le=4)

    @field_validator("style", mode="before")
    @classmethod
    def _known_style(cls, value: object) -> str:
        return Style.resolve(value).value

    def has_input(self) -> bool:
        """True when there is a url, a description or a named brandAnalysis."""
        named = self.brand_analysis is not None and bool(self.brand_analysis.brand_name.strip())
        return bool(self.url or self.description or named)

    @property
    def resolved_style(self) -> Style:
        return Style.resolve(self.style)


class GenerationResult(BaseModel):
    model_config = ConfigDict(**_WIRE)

    success: bool
    assets: List[GeneratedAsset] = Field(default_factory=list)
    brand_analysis: Optional[BrandSummary] = None
    error: Optional[str] = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
