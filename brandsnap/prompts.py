"""
prompts.py — Image prompt builders for banners, icons and logos.

Two composition modes, fixed per deployment (PROMPT_MODE):

  abstract  purely symbolic artwork. No text, no letters, no faces — identity is
            carried by color, shape and metaphor only.
  text      the banner renders brand name / slogan / CTA as real typography,
            using exactly the strings provided. Icons and logos stay text-free
            apart from an optional single stylised initial.

Every builder is a pure function of (brand, style text, platform, nonce, mode).
The nonce ends up in a trailing uniqueness token so repeated requests for the same
brand do not come back as identical images.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .models import BrandDescription, Platform


class PromptMode(str, Enum):
    ABSTRACT = "abstract"
    TEXT = "text"


# ── Industry → icon metaphor hints ────────────────────────────────────────────

# Checked in order; first keyword contained in the industry string wins.
INDUSTRY_METAPHORS: Tuple[Tuple[str, str], ...] = (
    ("verification", "abstract checkmark or shield shape"),
    ("finance", "abstract geometric coin or chart shape"),
    ("health", "abstract heart or plus symbol"),
    ("tech", "abstract circuit or node pattern"),
    ("social", "abstract connected dots or speech bubble"),
)
DEFAULT_METAPHOR = "abstract geometric mark"

GENERIC_SYMBOLS = ("gears", "lightbulbs", "handshakes", "globes")


def industry_metaphor(industry: Optional[str]) -> str:
    key = (industry or "").lower()
    for keyword, metaphor in INDUSTRY_METAPHORS:
        if keyword in key:
            return metaphor
    return DEFAULT_METAPHOR


def icon_idea(brand: BrandDescription) -> str:
    """The brand's own icon concept, else a canned metaphor for its industry."""
    return (brand.icon_concept or "").strip() or industry_metaphor(brand.industry)


def uniqueness_token(nonce: str) -> str:
    return f"\n\nUnique generation ID: {nonce} — create a fresh, original composition."


def _palette(brand: BrandDescription, limit: int = 3) -> str:
    colors = [c for c in brand.brand_colors[:limit] if c]
    return ", ".join(colors) or "#3b82f6, #ffffff"


def _bullets(lines: Sequence[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


def _visual_direction(brand: BrandDescription, style_prompt: str) -> str:
    # A composed visualPrompt from the analyzer already encodes the style.
    if brand.visual_prompt and brand.visual_prompt.strip():
        return f"VISUAL DIRECTION: {brand.visual_prompt.strip()}\nSTYLE REFERENCE: {style_prompt}"
    return f"VISUAL STYLE: {style_prompt}"


# ── Banners ───────────────────────────────────────────────────────────────────

def build_banner_prompt(
    brand: BrandDescription,
    platform: Platform,
    style_prompt: str,
    nonce: str,
    mode: PromptMode = PromptMode.ABSTRACT,
) -> str:
    platform = Platform(platform)
    header = (
        f'Create a professional social media banner for "{brand.brand_name}".\n\n'
        f"BRAND: {brand.brand_name} - {brand.industry or 'modern business'}\n"
        f"DESCRIPTION: {brand.summary or brand.slogan or 'Professional brand'}\n"
        f"COLORS TO USE: {_palette(brand)}\n\n"
        f"{_visual_direction(brand, style_prompt)}\n\n"
    )

    requirements: List[str] = [
        "Wide landscape banner composition",
        "Professional, polished, premium quality",
        "Create visual interest across the full width",
        "Use the brand colors prominently throughout",
        f"Suitable for {platform.value} header/banner",
    ]

    if PromptMode(mode) is PromptMode.TEXT:
        text_lines = [f'Brand name: "{brand.brand_name}"']
        if brand.slogan:
            text_lines.append(f'Headline: "{brand.slogan}"')
        if brand.cta:
            text_lines.append(f'Call-to-action button: "{brand.cta}"')
        body = (
            "REQUIREMENTS:\n"
            + _bullets(requirements + [
                "Keep all typography inside the central safe area, away from the edges",
                "Clean, highly legible sans-serif typography with strong contrast",
            ])
            + "\n\nTEXT TO RENDER (use EXACTLY the text provided, spelled exactly as written):\n"
            + _bullets(text_lines)
            + "\n\nCRITICAL:\n"
            + _bullets([
                "Do NOT invent, add, or paraphrase any other words",
                "NO extra taglines, lorem ipsum, URLs, or watermarks",
                "NO human faces or recognizable people",
            ])
        )
    else:
        body = (
            "REQUIREMENTS:\n"
            + _bullets(requirements + [
                "Abstract or pattern-based design (no literal objects unless style calls for it)",
                f"Subtle visual metaphor: {icon_idea(brand)} (as a hint, not a literal icon)",
            ])
            + "\n\nCRITICAL:\n"
            + _bullets([
                "NO text, words, letters, numbers, or logos",
                "NO human faces or recognizable people",
                "Background/abstract design only",
            ])
        )

    return header + body + uniqueness_token(nonce)


# ── Icon / favicon ────────────────────────────────────────────────────────────

def build_icon_prompt(
    brand: BrandDescription,
    style_prompt: str,
    nonce: str,
    mode: PromptMode = PromptMode.ABSTRACT,
) -> str:
    header = (
        f'Create a premium app icon for "{brand.brand_name}".\n\n'
        f"BRAND: {brand.brand_name} - {brand.industry or 'technology'}\n"
        f"WHAT IT DOES: {brand.summary or 'Modern digital service'}\n"
        f"ICON CONCEPT: {icon_idea(brand)}\n\n"
        "COLORS:\n"
        f"- Primary: {brand.primary_color}\n"
        f"- Secondary: {brand.secondary_color}\n\n"
        f"STYLE: {style_prompt}\n\n"
    )

    requirements = _bullets([
        "Square 1:1 format, will display at 16px to 512px",
        "SINGLE focal symbol - one distinctive mark, not multiple objects",
        'Must pass "squint test" - recognizable when blurry/small',
        "Strong silhouette that works in monochrome",
        "Centered with ~15% padding on all sides",
        "Crisp, vector-like edges (not fuzzy or painterly)",
        "App Store / Google Play quality",
    ])

    if PromptMode(mode) is PromptMode.TEXT:
        initial = brand.brand_name.strip()[:1].upper() or "A"
        text_rule = (
            f'NO text or words - at most ONE stylized initial "{initial}" integrated into the mark'
        )
    else:
        text_rule = "NO text, words, letters, numbers"

    critical = _bullets([
        text_rule,
        "NO human faces",
        f"NO generic symbols ({', '.join(GENERIC_SYMBOLS)})",
        "UNIQUE to this brand - should be distinctive and memorable",
    ])

    return (
        header
        + "REQUIREMENTS:\n" + requirements
        + "\n\nCRITICAL:\n" + critical
        + uniqueness_token(nonce)
    )


# ── Logo ──────────────────────────────────────────────────────────────────────

def build_logo_prompt(
    brand: BrandDescription,
    style_prompt: str,
    nonce: str,
    mode: PromptMode = PromptMode.ABSTRACT,
) -> str:
    if PromptMode(mode) is PromptMode.TEXT:
        initial = brand.brand_name.strip()[:1].upper() or "A"
        text_rule = (
            f'No words - the mark may contain at most ONE stylized initial "{initial}", nothing else'
        )
    else:
        text_rule = "NO text, words, letters, or numbers anywhere"

    return (
        f'Design a distinctive logo mark for "{brand.brand_name}".\n\n'
        f"BRAND: {brand.brand_name} - {brand.industry or 'modern business'}\n"
        f"PERSONALITY: {brand.vibe or 'Modern, confident'}\n"
        f"CONCEPT: {icon_idea(brand)}\n"
        f"COLOR: {brand.primary_color} on a pure white #FFFFFF background (monochrome mark)\n\n"
        f"STYLE: {style_prompt}\n\n"
        "REQUIREMENTS:\n"
        + _bullets([
            "Square 1:1 canvas, mark centered with 20% padding on all sides",
            "One color only - no gradients, no drop shadows, no 3D",
            "Clean flat vector construction, precise geometry",
            "Scales from business card to billboard",
        ])
        + "\n\nCRITICAL:\n"
        + _bullets([
            text_rule,
            f"NO generic symbols ({', '.join(GENERIC_SYMBOLS)})",
            "NO mockups, NO photographs, NO frames",
        ])
        + uniqueness_token(nonce)
    )
