"""
Unit tests for deterministic color name generation.
"""

import itertools

from swatchbook.services.colors.naming import (
    generate_base_name, generate_proper_color_name, preview_color_name
)


def _sample_hexes():
    channels = range(0, 256, 51)
    return [f"#{r:02X}{g:02X}{b:02X}" for r, g, b in itertools.product(channels, repeat=3)]


class TestBaseNames:
    """Test candidate names before collision handling."""

    def test_achromatic_ladder(self):
        assert generate_base_name("#FFFFFF") == "Snow White"
        assert generate_base_name("#808080") == "Steel Gray"
        assert generate_base_name("#000000") == "Ebony"

    def test_saturated_suffix(self):
        """Highly saturated mid-lightness colors get a hue-indexed suffix."""
        assert generate_base_name("#FF0000") == "Bold Red Burst"
        assert generate_base_name("#0000FF") == "Bold Violet Glow"

    def test_special_name_lookup(self):
        """'Deep Blue' at h210 picks index (210 // 10) % 3 == 0."""
        assert generate_base_name("#0066CC") == "Navy"


class TestUniqueNames:
    """Test collision resolution."""

    def test_no_registry_returns_base(self):
        assert generate_proper_color_name("#0066CC") == "Navy"

    def test_variation_sequence(self):
        used = set()
        names = [generate_proper_color_name("#0066CC", used) for _ in range(7)]
        assert names == [
            "Navy",
            "Vivid Navy",
            "Navy Sky",
            "Navy Burst",
            "Navy Shadow",
            "Navy II",
            "Navy III",
        ]
        assert used == set(names)

    def test_numeric_fallback_after_roman_numerals(self):
        used = set()
        names = [generate_proper_color_name("#0066CC", used) for _ in range(15)]
        assert names[13] == "Navy X"
        assert names[14] == "Navy 11"

    def test_names_unique_across_catalog_build(self):
        used = set()
        names = [generate_proper_color_name(hex_color, used) for hex_color in _sample_hexes()]
        assert len(names) == len(set(names))

    def test_deterministic_for_same_history(self):
        first = [generate_proper_color_name(hex_color, set()) for hex_color in _sample_hexes()]
        second = [generate_proper_color_name(hex_color, set()) for hex_color in _sample_hexes()]
        assert first == second

        shared_a, shared_b = set(), set()
        run_a = [generate_proper_color_name(hex_color, shared_a) for hex_color in _sample_hexes()]
        run_b = [generate_proper_color_name(hex_color, shared_b) for hex_color in _sample_hexes()]
        assert run_a == run_b

    def test_preview_does_not_register(self):
        used = {"Navy"}
        assert preview_color_name("#0066CC", used) == "Vivid Navy"
        assert used == {"Navy"}
