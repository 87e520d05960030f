"""
Unit tests for style, temperature, family and hue classification.
"""

import itertools

import pytest

from swatchbook.services.colors import classification
from swatchbook.services.colors.classification import (
    CATALOG_HUES, COLOR_FAMILIES, STYLE_TAGS, TEMPERATURES,
    classify_color_family, classify_color_style, classify_color_temperature,
    classify_hue_category, classify_keywords, generate_synonyms
)
from swatchbook.services.colors.conversion import HSL


def _grid_hexes(step=51):
    """Coarse RGB grid covering the cube corners and interior."""
    channels = range(0, 256, step)
    return [f"#{r:02X}{g:02X}{b:02X}" for r, g, b in itertools.product(channels, repeat=3)]


@pytest.fixture
def hsl_of(monkeypatch):
    """Run a classifier against an exact HSL triple instead of a hex."""
    def classify(classifier, h, s, l):
        monkeypatch.setattr(classification, "hex_to_hsl", lambda hex_color: HSL(h, s, l))
        return classifier("#000000")
    return classify


class TestStyleClassification:
    """Test the seven-way style cascade."""

    def test_light_neutrals(self):
        assert classify_color_style("#FFFFFF") == "light-neutrals"

    def test_dark_neutrals(self):
        assert classify_color_style("#000000") == "dark-neutrals"
        assert classify_color_style("#1F2A44") == "dark-neutrals"

    def test_pastel(self):
        # h0 s29 l80
        assert classify_color_style("#DBBDBD") == "pastel"

    def test_jewel_before_vibrant(self):
        """Pure red (s100 l50) satisfies both jewel and vibrant; jewel wins."""
        assert classify_color_style("#FF0000") == "jewel"
        assert classify_color_style("#0000FF") == "jewel"

    def test_vibrant(self):
        # h11 s100 l60
        assert classify_color_style("#FF5733") == "vibrant"

    def test_earthy(self):
        # h40 s30 l50
        assert classify_color_style("#A68C59") == "earthy"

    def test_muted(self):
        # h210 s30 l50, outside the earthy hue window
        assert classify_color_style("#5980A6") == "muted"

    def test_dark_low_saturation_band(self, hsl_of):
        assert hsl_of(classify_color_style, 0, 20, 33) == "dark-neutrals"
        assert hsl_of(classify_color_style, 0, 30, 33) == "muted"

    @pytest.mark.parametrize("h,s,l,expected", [
        (200, 60, 85, "light-neutrals"),
        (200, 60, 72, "jewel"),
        (200, 17, 36, "muted"),
        (200, 50, 78, "muted"),
        (200, 12, 60, "dark-neutrals"),
    ])
    def test_fallbacks(self, hsl_of, h, s, l, expected):
        assert hsl_of(classify_color_style, h, s, l) == expected

    def test_malformed_hex_is_dark_neutral(self):
        """Zero HSL falls into the dark-neutrals branch."""
        assert classify_color_style("garbage") == "dark-neutrals"

    def test_total_over_grid(self):
        for hex_color in _grid_hexes():
            assert classify_color_style(hex_color) in STYLE_TAGS

    def test_idempotent(self):
        for hex_color in _grid_hexes(step=85):
            assert classify_color_style(hex_color) == classify_color_style(hex_color)


class TestTemperature:
    """Test warm / cool / neutral classification."""

    def test_examples(self):
        assert classify_color_temperature("#FF0000") == "warm"
        assert classify_color_temperature("#0000FF") == "cool"
        assert classify_color_temperature("#808080") == "neutral"

    def test_pinks_are_warm(self):
        # h330
        assert classify_color_temperature("#FF69B4") == "warm"

    def test_near_black_and_white_are_neutral(self):
        assert classify_color_temperature("#0A0A0A") == "neutral"
        assert classify_color_temperature("#FAFAFA") == "neutral"

    @pytest.mark.parametrize("h,expected", [
        (105, "warm"),
        (106, "cool"),
        (314, "cool"),
        (315, "warm"),
        (344, "warm"),
        (345, "warm"),
    ])
    def test_hue_edges(self, hsl_of, h, expected):
        assert hsl_of(classify_color_temperature, h, 50, 50) == expected

    @pytest.mark.parametrize("s,l,expected", [
        (12, 50, "neutral"),
        (13, 50, "cool"),
        (50, 12, "neutral"),
        (50, 13, "cool"),
        (50, 92, "neutral"),
        (50, 91, "cool"),
    ])
    def test_neutral_edges(self, hsl_of, s, l, expected):
        assert hsl_of(classify_color_temperature, 200, s, l) == expected

    def test_cyan_is_cool(self):
        assert classify_color_temperature("#00FFFF") == "cool"

    def test_total_over_grid(self):
        for hex_color in _grid_hexes():
            assert classify_color_temperature(hex_color) in TEMPERATURES


class TestColorFamily:
    """Test the 16-way family classifier."""

    def test_achromatic_families(self):
        assert classify_color_family("#FFFFFF") == "white"
        assert classify_color_family("#000000") == "black"
        assert classify_color_family("#808080") == "gray"

    def test_pale_tint_above_gray_band(self):
        # h0 s10 l94: too saturated for white, too light for gray
        assert classify_color_family("#F1EEEE") == "red"

    @pytest.mark.parametrize("s,l,expected", [
        (10, 20, "black"),
        (10, 21, "gray"),
        (10, 93, "gray"),
        (10, 94, "blue"),
        (8, 94, "white"),
    ])
    def test_achromatic_edges(self, hsl_of, s, l, expected):
        assert hsl_of(classify_color_family, 210, s, l) == expected

    def test_brown_precedes_hue_bands(self):
        assert classify_color_family("#A68C59") == "brown"

    def test_hue_bands(self):
        assert classify_color_family("#FF8000") == "orange"
        assert classify_color_family("#FFFF00") == "yellow"
        assert classify_color_family("#00FF00") == "green"
        assert classify_color_family("#00FFFF") == "cyan"
        assert classify_color_family("#0000FF") == "indigo"
        assert classify_color_family("#FF00FF") == "magenta"

    def test_red_wraps_around_zero(self):
        assert classify_color_family("#FF0000") == "red"
        # h345
        assert classify_color_family("#FF0040") == "red"

    def test_total_over_grid(self):
        for hex_color in _grid_hexes():
            assert classify_color_family(hex_color) in COLOR_FAMILIES


class TestHueCategory:
    """Test the catalog hue derived for synthesized colors."""

    def test_examples(self):
        assert classify_hue_category("#FF0000") == "red"
        assert classify_hue_category("#FF8000") == "orange"
        assert classify_hue_category("#FFFF00") == "yellow"
        assert classify_hue_category("#00FF00") == "green"
        assert classify_hue_category("#00FFFF") == "blue"
        assert classify_hue_category("#8000FF") == "purple"
        assert classify_hue_category("#FF00FF") == "pink"
        assert classify_hue_category("#808080") == "neutral"

    def test_total_over_grid(self):
        for hex_color in _grid_hexes():
            assert classify_hue_category(hex_color) in CATALOG_HUES


class TestSynonyms:
    """Test keyword derivation."""

    def test_white(self):
        assert generate_synonyms("#FFFFFF", "light-neutrals") == ["light-neutrals", "white"]

    def test_black(self):
        assert generate_synonyms("#000000", "dark-neutrals") == ["dark-neutrals", "black"]

    def test_navy(self):
        # h222 l19
        assert generate_synonyms("#1F2A44", "dark-neutrals") == ["dark-neutrals", "navy"]

    def test_clay(self):
        assert generate_synonyms("#A68C59", "earthy") == ["earthy", "clay", "terracotta"]

    def test_style_without_synonyms(self):
        assert generate_synonyms("#FF0000", "jewel") == ["jewel"]

    def test_classify_keywords_starts_with_style(self):
        for hex_color in _grid_hexes(step=85):
            keywords = classify_keywords(hex_color)
            assert keywords
            assert keywords[0] == classify_color_style(hex_color)
