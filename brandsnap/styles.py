"""
Style guide tables — one entry per Style, in two registers:

  ANALYZER_STYLE_GUIDES    long-form art direction. The analyzer hands this to the
                           text model so the visualPrompt it composes follows the style.
  GENERATOR_STYLE_PROMPTS  compact rendering description embedded directly into image
                           prompts when the brand carries no visualPrompt.

Both tables are read-only and keyed by the Style enum. Components receive them at
construction time; lookups for an unknown style fall back to the minimal entry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import Style

StyleTable = Mapping[Style, str]


ANALYZER_STYLE_GUIDES: StyleTable = MappingProxyType({
    Style.BLUEPRINT: (
        "Technical blueprint / schematic. Deep navy or prussian-blue ground, fine white and cyan "
        "line work, dimension arrows, grid paper, exploded-view diagrams of an abstract object "
        "that stands for the product. Precise, engineered, CAD-like. Never photorealistic."
    ),
    Style.BRUTALISM: (
        "Neo-brutalist web aesthetic. Raw black and white base with ONE loud neon accent, thick "
        "black outlines, hard offset drop shadows, stacked rectangular blocks, visible grid, "
        "zine / punk-poster energy. Deliberately unpolished but intentional."
    ),
    Style.ISOMETRIC: (
        "Isometric 3D illustration. True 30° isometric projection, a small diorama of miniature "
        "objects that tell the brand story, soft ambient occlusion shadows, clean vector-like "
        "surfaces, limited palette taken from the brand colors, playful and tidy."
    ),
    Style.FLUID: (
        "Ethereal glass-morphism. Flowing translucent liquid or glass forms, iridescent and "
        "aurora-like gradients, light refraction and caustics, layered transparency, soft blur "
        "depth, dreamy premium atmosphere."
    ),
    Style.COLLAGE: (
        "Mixed-media digital collage. Torn paper edges, cut-out photographic fragments, "
        "halftone textures, tape and paper grain, overlapping layers, a vintage-meets-modern "
        "editorial feel that looks handmade."
    ),
    Style.EXPLAINER: (
        "Flat vector explainer illustration. Simple geometric characters or objects, consistent "
        "stroke weights, 3–4 harmonious brand colors, clear visual hierarchy, generous spacing, "
        "the look of a modern SaaS landing page hero."
    ),
    Style.MINIMAL: (
        "Ultra-minimal. Maximum negative space, one single focal element, one or two colors at "
        "most, geometric purity, quiet confidence in the spirit of Apple and Muji. Nothing "
        "decorative that does not earn its place."
    ),
    Style.GRADIENT: (
        "Aurora mesh gradient. Smooth flowing color fields blending 3–4 brand colors, subtle "
        "film grain, soft edges, gentle depth, the polished look of Stripe and Linear marketing "
        "pages."
    ),
    Style.GEOMETRIC: (
        "Geometric pattern design. Repeating interlocking shapes, tessellations, bold color "
        "blocking, mathematical precision and rhythm, Bauhaus and Swiss-modernist influence."
    ),
    Style.RETRO: (
        "Retro 70s–80s. Warm orange, brown, teal and cream palette adapted to the brand colors, "
        "halftone dots, sun rays and stripes, grain and slight print misregistration, nostalgic "
        "travel-poster warmth."
    ),
})


GENERATOR_STYLE_PROMPTS: StyleTable = MappingProxyType({
    Style.BLUEPRINT: (
        "Technical blueprint schematic style with dark navy blue background, white/cyan line "
        "drawings, circuit patterns, CAD aesthetic, precise geometric shapes. NO photorealism."
    ),
    Style.BRUTALISM: (
        "Neo-brutalist design with stark black and white base, bold neon accent, thick black "
        "borders, high contrast, geometric blocks, punk zine aesthetic."
    ),
    Style.ISOMETRIC: (
        "Isometric 3D illustration with true isometric perspective, miniature 3D objects, soft "
        "shadows, clean vector-like rendering, limited color palette, playful style."
    ),
    Style.FLUID: (
        "Ethereal glass-morphism with flowing liquid/glass shapes, iridescent gradients, light "
        "refractions, dreamy atmosphere, transparent layers, aurora-like colors."
    ),
    Style.COLLAGE: (
        "Mixed media digital collage with layered paper-cut textures, visible edges, photography "
        "fragments, vintage meets modern, tactile handmade feel."
    ),
    Style.EXPLAINER: (
        "Flat vector illustration with clean minimal shapes, consistent stroke weights, 3-4 "
        "harmonious colors, clear hierarchy, SaaS landing page style."
    ),
    Style.MINIMAL: (
        "Ultra-minimal design with maximum whitespace, single focal element, monochromatic or 2 "
        "colors only, geometric purity, Apple/Muji aesthetic."
    ),
    Style.GRADIENT: (
        "Aurora gradient design with smooth flowing gradients, 3-4 colors blending, mesh "
        "gradient effect, subtle grain texture, soft edges, Stripe aesthetic."
    ),
    Style.GEOMETRIC: (
        "Geometric pattern design with repeating interlocking shapes, tessellations, bold color "
        "blocking, mathematical precision, Bauhaus influence."
    ),
    Style.RETRO: (
        "Retro vintage 70s-80s style with orange/brown/teal/cream palette, halftone dots, sun "
        "rays, grain texture, nostalgic warmth, travel poster aesthetic."
    ),
})


def style_guide(table: StyleTable, style: object) -> str:
    """Look up a style in `table`, falling back to the minimal entry."""
    resolved = Style.resolve(style)
    return table.get(resolved) or table[Style.MINIMAL]
