"""Tests for responsiveviews.ui.colors – palette and color blending."""

from __future__ import annotations

from responsiveviews.core.layout import LayoutVariant
from responsiveviews.ui.colors import (
    CLICKER_BACKGROUNDS,
    VARIANT_BACKGROUNDS,
    PanelColors,
    blend_hex,
    text_color_for,
)


# ===========================================================================
# Palette
# ===========================================================================

class TestPalette:
    def test_every_variant_has_a_background(self):
        assert set(VARIANT_BACKGROUNDS) == set(LayoutVariant)

    def test_backgrounds_are_hex(self):
        for color in VARIANT_BACKGROUNDS.values():
            assert color.startswith("#")
            assert len(color) == 7

    def test_landscape_clicker_backgrounds(self):
        assert CLICKER_BACKGROUNDS[LayoutVariant.TABLET_LANDSCAPE] == PanelColors.GREEN
        assert CLICKER_BACKGROUNDS[LayoutVariant.PHONE_LANDSCAPE] == PanelColors.RED

    def test_light_text_on_black(self):
        assert text_color_for(PanelColors.BLACK) == PanelColors.TEXT_ON_DARK

    def test_dark_text_elsewhere(self):
        assert text_color_for(PanelColors.CYAN) == PanelColors.TEXT


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert result == "#7F7F7F"

    def test_uppercase_output(self):
        assert blend_hex("#ff0000", "#ff0000", 0.5) == "#FF0000"

    def test_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_wrong_length_returns_a(self):
        assert blend_hex("#FFF", "#000000", 0.5) == "#FFF"

    def test_missing_hash_returns_a(self):
        assert blend_hex("#FF0000", "0000FF", 0.5) == "#FF0000"

    def test_invalid_hex_chars(self):
        assert blend_hex("#GGHHII", "#000000", 0.5) == "#GGHHII"

    def test_whitespace_padding(self):
        assert blend_hex("  #FF0000  ", "  #0000FF  ", 0.0) == "#FF0000"
