"""
Analyzer — one Gemini text call that turns a URL or free-text description into a
BrandDescription.

Flow:
  1. build_analysis_prompt()   brand-strategist instructions + style guide + color rule
  2. generate_content()        URL inputs get the Google Search tool attached
  3. extract_json_object()     fenced ```json block → first {...} span → AnalysisError
  4. parse_brand_description() per-field defaults, palette override enforced

Because search-grounded calls cannot request application/json output, the reply is
free text and the JSON is dug out of it.

Usage:
  analyzer = BrandAnalyzer(api_key)
  brand = analyzer.analyze("https://acme.dev", InputKind.URL, Style.MINIMAL)
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional, Sequence

from google import genai
from google.genai import types
from rich.console import Console
from rich.markup import escape

from .errors import AnalysisError, ConfigurationError
from .models import BrandDescription, InputKind, Style
from .styles import ANALYZER_STYLE_GUIDES, StyleTable, style_guide

console = Console()

DEFAULT_TEXT_MODEL = "gemini-2.0-flash"


# ── Field defaults ────────────────────────────────────────────────────────────

FIELD_DEFAULTS: Dict[str, Any] = {
    "brandName": "Your Brand",
    "summary": "",
    "industry": None,
    "vibe": "Modern, Clean, Professional",
    "brandColors": ["#3b82f6", "#1e293b", "#f8fafc"],
    "slogan": None,
    "cta": "Get Started",
    "title": None,
    "iconConcept": None,
    "visualMetaphors": None,
    "visualPrompt": None,
    "twitterBio": None,
    "linkedinHeadline": None,
}

_STRING_FIELDS = (
    "brandName", "summary", "industry", "vibe", "slogan", "cta", "title",
    "iconConcept", "visualPrompt", "twitterBio", "linkedinHeadline",
)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FENCE_RE = re.compile(r"```[a-zA-Z]*\s*(.*?)```", re.DOTALL)


# ── Prompt ────────────────────────────────────────────────────────────────────

ANALYSIS_PROMPT_TEMPLATE = """\
You are an expert brand strategist and art director. Your job is to turn a brand input
into a precise, structured brand profile that drives an image-generation pipeline.

## INPUT ({input_label})
{input}

## RESEARCH
{research}

## VISUAL STYLE
The assets will be produced in this style — the visualPrompt you write MUST follow it:
{style_guide}

## COLORS
{color_rule}

## OUTPUT
Return ONLY a JSON object with exactly these fields:
{{
  "brandName": "The brand/company name (short version if long)",
  "summary": "One sentence describing what this brand/company does",
  "industry": "Primary industry/sector (be specific: 'B2B SaaS', 'DTC Skincare', etc.)",
  "vibe": "3-4 words describing visual personality (e.g. 'Bold, Technical, Trustworthy')",
  "slogan": "A punchy marketing headline/tagline (5-8 words max)",
  "cta": "A short call to action (2-4 words, e.g. 'Try for free', 'Get Started')",
  "title": "The page/site title or main headline found",
  "brandColors": ["#hex1", "#hex2", "#hex3", "#hex4"],
  "iconConcept": "One word/concept that could represent this brand as an icon",
  "visualMetaphors": ["metaphor1", "metaphor2"],
  "visualPrompt": "2-4 sentences: a complete image-generation prompt for an abstract brand banner in the style above, using the brand colors. No text, no letters, no faces.",
  "twitterBio": "An optimized Twitter bio (160 characters max)",
  "linkedinHeadline": "A professional LinkedIn headline (under 100 characters)"
}}

brandColors: 3-4 hex strings, the first one is the primary brand color.
Only return the JSON object, no markdown or explanation.
"""

_RESEARCH_URL = (
    "This is a website URL. Use Google Search to look up the site and the company behind it. "
    "Extract the brand name, what it does, its audience and its existing visual identity "
    "(logo colors, site colors) from the search results. Prefer facts over guesses."
)
_RESEARCH_TEXT = (
    "This is a free-text brand description. Extract the brand name, offering, audience and "
    "personality directly from the text. Where something is not stated, infer the most "
    "plausible answer for this kind of business."
)


def build_analysis_prompt(
    input: str,
    input_kind: InputKind,
    style_guide_text: str,
    color_override: Optional[Sequence[str]] = None,
) -> str:
    kind = InputKind(input_kind)
    colors = [c for c in (color_override or []) if c]
    if colors:
        color_rule = (
            f"The user chose the palette. You MUST use exactly these colors: {', '.join(colors)}. "
            "Return them as brandColors in this order and do not add or change any."
        )
    else:
        color_rule = (
            "Infer a 3-4 color palette that fits the brand: use its existing colors when known, "
            "otherwise choose colors that suit its industry and vibe."
        )

    return ANALYSIS_PROMPT_TEMPLATE.format(
        input_label="website/brand URL" if kind is InputKind.URL else "brand description",
        input=input.strip(),
        research=_RESEARCH_URL if kind is InputKind.URL else _RESEARCH_TEXT,
        style_guide=style_guide_text,
        color_rule=color_rule,
    )


# ── Reply parsing ─────────────────────────────────────────────────────────────

def _json_candidates(text: str) -> List[str]:
    candidates = []
    fence = _FENCE_RE.search(text)
    if fence and fence.group(1).strip():
        candidates.append(fence.group(1).strip())
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start:end + 1])
    return candidates


def extract_json_object(raw: str) -> Dict[str, Any]:
    """
    Pull the JSON object out of a free-text model reply.

    Tries a fenced code block first, then the outermost {...} span. Raises
    AnalysisError when there is no JSON at all or none of it parses to an object.
    """
    text = (raw or "").strip()
    candidates = _json_candidates(text)
    if not candidates:
        raise AnalysisError("No JSON object found in model reply")

    last_error: Optional[Exception] = None
    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError as e:
            last_error = e
            continue
        if isinstance(data, dict):
            return data
        last_error = ValueError(f"expected a JSON object, got {type(data).__name__}")

    raise AnalysisError(f"Failed to parse brand analysis: {last_error}")


def _clean_str(value: Any) -> Optional[str]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _clean_colors(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [v for v in re.split(r"[,\s]+", value) if v]
    if not isinstance(value, list):
        return []
    colors = []
    for item in value:
        if isinstance(item, str) and _HEX_RE.match(item.strip()):
            hex_ = item.strip()
            colors.append(hex_ if hex_.startswith("#") else f"#{hex_}")
    return colors


def parse_brand_description(
    data: Dict[str, Any],
    color_override: Optional[Sequence[str]] = None,
) -> BrandDescription:
    """Map a loosely-typed JSON dict onto BrandDescription, defaulting bad fields."""
    fields: Dict[str, Any] = {}
    for name in _STRING_FIELDS:
        cleaned = _clean_str(data.get(name))
        fields[name] = cleaned if cleaned is not None else FIELD_DEFAULTS[name]

    override = [c.strip() for c in (color_override or []) if c and c.strip()]
    colors = override or _clean_colors(data.get("brandColors"))
    fields["brandColors"] = colors or list(FIELD_DEFAULTS["brandColors"])

    metaphors = data.get("visualMetaphors")
    if isinstance(metaphors, list):
        metaphors = [m.strip() for m in metaphors if isinstance(m, str) and m.strip()]
    else:
        metaphors = None
    fields["visualMetaphors"] = metaphors or FIELD_DEFAULTS["visualMetaphors"]

    return BrandDescription.model_validate(fields)


# ── Analyzer ──────────────────────────────────────────────────────────────────

class BrandAnalyzer:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_TEXT_MODEL,
        client: Optional[genai.Client] = None,
        style_guides: StyleTable = ANALYZER_STYLE_GUIDES,
    ) -> None:
        if client is None:
            if not api_key:
                raise ConfigurationError("GEMINI_API_KEY not configured")
            client = genai.Client(api_key=api_key)
        self.client = client
        self.model = model
        self.style_guides = style_guides

    def analyze(
        self,
        input: str,
        input_kind: InputKind,
        style: Style,
        color_override: Optional[Sequence[str]] = None,
    ) -> BrandDescription:
        kind = InputKind(input_kind)
        prompt = build_analysis_prompt(
            input, kind, style_guide(self.style_guides, style), color_override,
        )

        if kind is InputKind.URL:
            config = types.GenerateContentConfig(
                tools=[types.Tool(google_search=types.GoogleSearch())],
            )
        else:
            config = types.GenerateContentConfig(temperature=0.7)

        console.print(f"  [dim]Analyzing brand ({kind.value}) with {self.model}...[/dim]")
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
            raw = response.text or ""
        except Exception as e:
            console.print(f"  [red]✗ Brand analysis call failed: {escape(str(e))}[/red]")
            raise AnalysisError(f"Brand analysis call failed: {e}") from e

        brand = parse_brand_description(extract_json_object(raw), color_override)
        console.print(
            f"  [green]✓ Brand:[/green] {escape(brand.brand_name)} "
            f"[dim]({escape(brand.industry or 'unknown industry')})[/dim]"
        )
        return brand
