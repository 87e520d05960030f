"""
Unit tests for the in-memory color catalog.
"""

import pytest

from swatchbook.config import config
from swatchbook.services.catalog import ColorCatalog, generate_additional_colors, get_catalog, reset_catalog
from swatchbook.services.catalog.seed import SEED_COLORS, SeedColor
from swatchbook.services.colors.classification import (
    CATALOG_HUES, classify_color_family, classify_color_temperature
)
from swatchbook.services.colors.conversion import hex_to_hsl, is_valid_hex_color


@pytest.fixture(scope="module")
def catalog():
    """A catalog shared by read-only tests."""
    return ColorCatalog(size=200)


class TestCatalogBuild:
    """Test seed loading and filler generation."""

    def test_size(self, catalog):
        assert len(catalog) == 200

    def test_seed_larger_than_size(self):
        small = ColorCatalog(size=10)
        assert len(small) == len(SEED_COLORS)

    def test_records_are_well_formed(self, catalog):
        for color in catalog.get_all_colors():
            assert is_valid_hex_color(color.hex)
            assert color.hex == color.hex.upper()
            assert color.hex.startswith("#")
            assert color.hue in CATALOG_HUES
            assert color.keywords

    def test_names_unique(self, catalog):
        names = [color.name for color in catalog.get_all_colors()]
        assert len(names) == len(set(names))

    def test_duplicate_seed_names_renamed(self):
        seed = [
            SeedColor("Sky", "#87CEEB", "blue"),
            SeedColor("Sky", "#0066CC", "blue"),
        ]
        small = ColorCatalog(size=2, seed=seed)
        names = {color.name for color in small.get_all_colors()}
        assert names == {"Sky", "Navy"}

    def test_filler_is_deterministic(self):
        first = generate_additional_colors(50, set())
        second = generate_additional_colors(50, set())
        assert first == second
        assert len({record["name"] for record in first}) == 50

    def test_filler_avoids_taken_names(self):
        taken = {record["name"] for record in generate_additional_colors(20, set())}
        used = set(taken)
        again = generate_additional_colors(20, used)
        assert not taken & {record["name"] for record in again}

    def test_no_filler_for_non_positive_count(self):
        assert generate_additional_colors(0, set()) == []
        assert generate_additional_colors(-5, set()) == []


class TestCatalogQueries:
    """Test listing, filtering and search."""

    def test_by_hue(self, catalog):
        reds = catalog.get_colors_by_hue("red")
        assert reds
        assert all(color.hue == "red" for color in reds)
        assert len(catalog.get_colors_by_hue("all")) == len(catalog)

    def test_by_keyword(self, catalog):
        jewels = catalog.get_colors_by_keyword("jewel")
        assert jewels
        assert all("jewel" in color.keywords for color in jewels)
        assert len(catalog.get_colors_by_keyword("all")) == len(catalog)

    def test_unknown_hue_is_empty(self, catalog):
        assert catalog.get_colors_by_hue("chartreuse") == []

    def test_filter_by_temperature_and_family(self, catalog):
        warm = catalog.filter_colors(temperature="warm")
        assert warm
        assert all(classify_color_temperature(color.hex) == "warm" for color in warm)

        grays = catalog.filter_colors(family="gray")
        assert all(classify_color_family(color.hex) == "gray" for color in grays)

    def test_filter_sort_by_lightness(self, catalog):
        ordered = catalog.filter_colors(hue="blue", sort_by="lightness")
        lightness = [hex_to_hsl(color.hex).l for color in ordered]
        assert lightness == sorted(lightness, reverse=True)

    def test_default_filter_uses_rainbow_arrangement(self, catalog):
        arranged = catalog.filter_colors()
        assert len(arranged) == len(catalog)
        assert {color.id for color in arranged} == {color.id for color in catalog.get_all_colors()}
        assert arranged[0].hue == "red"

    def test_search_hex(self, catalog):
        mode, hits = catalog.search_colors("#ff0000")
        assert mode == "hex"
        assert hits[0].color.name == "Pure Red"
        assert hits[0].similarity == 100.0
        assert all(hit.similarity >= catalog.similarity_threshold for hit in hits)
        assert all(hit.score is None for hit in hits)

    def test_search_descriptive(self, catalog):
        mode, hits = catalog.search_colors("  dark red ")
        assert mode == "ranked"
        assert len(hits) == len(catalog)
        assert hits[0].score >= hits[-1].score
        assert all(hit.similarity is None for hit in hits)

    def test_search_substring_fallback(self, catalog):
        mode, hits = catalog.search_colors("Cobalt")
        assert mode == "substring"
        assert any(hit.color.name == "Cobalt" for hit in hits)
        assert all(hit.score is None and hit.similarity is None for hit in hits)

    def test_search_no_match(self, catalog):
        assert catalog.search_colors("xyzzy") == ("substring", [])

    def test_explain_search(self, catalog):
        explanation = catalog.explain_search("light vibrant blue", limit=5)
        assert explanation["mode"] == "ranked"
        assert explanation["parsed"]["hues"] == ["blue"]
        assert len(explanation["results"]) == 5
        assert "id" in explanation["results"][0]

        assert catalog.explain_search("#0000FF")["mode"] == "hex"
        assert catalog.explain_search("blue")["mode"] == "substring"

    def test_export_omits_ids(self, catalog):
        exported = catalog.export_colors()
        assert len(exported) == len(catalog)
        assert set(exported[0]) == {"name", "hex", "hue", "keywords"}

    def test_analyze_hex(self, catalog):
        used_before = catalog.used_names()
        analysis = catalog.analyze_hex("ff5733")
        assert analysis["hex"] == "#FF5733"
        assert analysis["rgb"] == [255, 87, 51]
        assert analysis["hsl"] == {"h": 11, "s": 100, "l": 60}
        assert analysis["style"] == "vibrant"
        assert analysis["temperature"] == "warm"
        assert analysis["keywords"] == ["vibrant"]
        assert analysis["suggested_name"] not in used_before
        assert catalog.used_names() == used_before

    def test_analyze_rejects_malformed(self, catalog):
        with pytest.raises(ValueError):
            catalog.analyze_hex("#12345")


class TestCatalogMutations:
    """Test create, bulk import and replace."""

    def test_create_derives_keywords(self):
        catalog = ColorCatalog(size=0)
        before = len(catalog)
        color = catalog.create_color("Test Red", "ff0000", "red")
        assert len(catalog) == before + 1
        assert color.hex == "#FF0000"
        assert color.keywords == ("jewel",)
        assert catalog.get_color(color.id) == color

    def test_create_keeps_given_keywords(self):
        catalog = ColorCatalog(size=0)
        color = catalog.create_color("Test Red", "#FF0000", "red", ["bold", "warm"])
        assert color.keywords == ("bold", "warm")

    def test_bulk_create(self):
        catalog = ColorCatalog(size=0)
        before = len(catalog)
        created = catalog.bulk_create([
            {"name": "A", "hex": "#111111", "hue": "black", "keywords": []},
            {"name": "B", "hex": "#EEEEEE", "hue": "white"},
        ])
        assert len(created) == 2
        assert len(catalog) == before + 2
        assert len({color.id for color in created}) == 2

    def test_replace_all(self):
        catalog = ColorCatalog(size=0)
        catalog.replace_all_colors([{"name": "Only", "hex": "#336699", "hue": "blue", "keywords": ["muted"]}])
        colors = catalog.get_all_colors()
        assert len(colors) == 1
        assert colors[0].name == "Only"

    def test_replace_with_nothing(self):
        catalog = ColorCatalog(size=0)
        catalog.replace_all_colors([])
        assert len(catalog) == 0
        assert catalog.search_colors("#FFFFFF") == ("hex", [])


@pytest.mark.usefixtures("fresh_catalog")
class TestGlobalCatalog:
    """Test the shared catalog accessor."""

    def test_reuses_instance(self):
        assert get_catalog() is get_catalog()

    def test_reset_rebuilds(self):
        first = get_catalog()
        reset_catalog()
        assert get_catalog() is not first

    def test_invalid_threshold_rejected(self, monkeypatch):
        monkeypatch.setattr(config, "SIMILARITY_THRESHOLD", 150.0)
        reset_catalog()
        with pytest.raises(ValueError):
            get_catalog()
