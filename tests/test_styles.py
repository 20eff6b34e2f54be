"""
Tests for the style and platform tables.

Usage:
    pytest tests/test_styles.py -v
"""

import pytest

from brandsnap.models import Platform, Style
from brandsnap.platforms import PLATFORM_SPECS, platform_spec
from brandsnap.styles import ANALYZER_STYLE_GUIDES, GENERATOR_STYLE_PROMPTS, style_guide


class TestStyleTables:
    """Every style has real guidance in both tables."""

    @pytest.mark.parametrize("style", list(Style))
    def test_analyzer_guide_present(self, style):
        assert ANALYZER_STYLE_GUIDES[style].strip()

    @pytest.mark.parametrize("style", list(Style))
    def test_generator_prompt_present(self, style):
        assert GENERATOR_STYLE_PROMPTS[style].strip()

    @pytest.mark.parametrize("style", [s for s in Style if s is not Style.MINIMAL])
    def test_valid_style_does_not_fall_back(self, style):
        """A valid style must never silently resolve to the minimal entry."""
        assert style_guide(GENERATOR_STYLE_PROMPTS, style) != GENERATOR_STYLE_PROMPTS[Style.MINIMAL]
        assert style_guide(ANALYZER_STYLE_GUIDES, style) != ANALYZER_STYLE_GUIDES[Style.MINIMAL]

    @pytest.mark.parametrize("value", ["vaporwave", "", None, 42])
    def test_unknown_style_falls_back_to_minimal(self, value):
        assert style_guide(GENERATOR_STYLE_PROMPTS, value) == GENERATOR_STYLE_PROMPTS[Style.MINIMAL]
        assert style_guide(ANALYZER_STYLE_GUIDES, value) == ANALYZER_STYLE_GUIDES[Style.MINIMAL]

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            GENERATOR_STYLE_PROMPTS[Style.RETRO] = "changed"

    def test_partial_table_falls_back(self):
        """An injected table missing a style still answers with its minimal entry."""
        table = {Style.MINIMAL: "just white space"}
        assert style_guide(table, Style.RETRO) == "just white space"


class TestStyleResolve:

    def test_case_and_whitespace_insensitive(self):
        assert Style.resolve("  Retro ") is Style.RETRO

    def test_enum_passthrough(self):
        assert Style.resolve(Style.FLUID) is Style.FLUID

    def test_unknown_is_minimal(self):
        assert Style.resolve("neon-noir") is Style.MINIMAL


class TestPlatformTable:

    def test_every_platform_has_spec(self):
        assert set(PLATFORM_SPECS) == set(Platform)

    @pytest.mark.parametrize("platform,size", [
        (Platform.TWITTER, (1500, 500)),
        (Platform.LINKEDIN, (1584, 396)),
        (Platform.YOUTUBE, (2560, 1440)),
        (Platform.FACEBOOK, (820, 312)),
        (Platform.OG, (1200, 630)),
        (Platform.FAVICON, (512, 512)),
        (Platform.LOGO, (1024, 1024)),
    ])
    def test_pixel_sizes(self, platform, size):
        spec = platform_spec(platform)
        assert (spec.width, spec.height) == size

    def test_banners_request_widescreen_and_squares_request_square(self):
        for platform, spec in PLATFORM_SPECS.items():
            expected = "16:9" if platform.is_banner else "1:1"
            assert spec.aspect_ratio == expected

    def test_lookup_accepts_plain_string(self):
        assert platform_spec("og").width == 1200
