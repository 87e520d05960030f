"""
Curated seed colors for the catalog.

Names and catalog hues are hand-picked; style keywords are derived by the
classifiers at build time.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class SeedColor:
    """A curated color before classification."""
    name: str
    hex: str
    hue: str


SEED_COLORS: List[SeedColor] = [
    # Reds
    SeedColor("Cherry Red", "#C1272D", "red"),
    SeedColor("Vermilion", "#D9381E", "red"),
    SeedColor("Oxblood", "#4A0D0D", "red"),
    SeedColor("Carmine", "#960018", "red"),
    SeedColor("Pure Red", "#FF0000", "red"),
    SeedColor("Brick", "#B23A48", "red"),
    SeedColor("Coral Red", "#FF5A5F", "red"),
    SeedColor("Crimson Red", "#DC143C", "red"),
    SeedColor("Watermelon", "#FC6C85", "red"),
    SeedColor("Dusty Red", "#A4585E", "red"),

    # Oranges
    SeedColor("Pumpkin Spice", "#FF7518", "orange"),
    SeedColor("Amber Glow", "#FFBF00", "orange"),
    SeedColor("Caramel", "#C96A2C", "orange"),
    SeedColor("Apricot", "#FBCEB1", "orange"),
    SeedColor("Tangerine Dream", "#F28500", "orange"),
    SeedColor("Terracotta Clay", "#E2725B", "orange"),
    SeedColor("Persimmon", "#EC5800", "orange"),
    SeedColor("Honey Orange", "#EB9605", "orange"),
    SeedColor("Sunset Orange", "#FF8C42", "orange"),
    SeedColor("Burnt Sienna", "#E97451", "orange"),

    # Yellows
    SeedColor("Lemon Zest", "#FFF44F", "yellow"),
    SeedColor("Mustard Seed", "#D2A106", "yellow"),
    SeedColor("Champagne", "#F7E7CE", "yellow"),
    SeedColor("Old Gold", "#D4AF37", "yellow"),
    SeedColor("Cream Soda", "#FFFDD0", "yellow"),
    SeedColor("Sunflower Field", "#FFC512", "yellow"),
    SeedColor("Bright Yellow", "#FFD700", "yellow"),
    SeedColor("Gosling", "#FFF176", "yellow"),
    SeedColor("Ochre", "#CC7722", "yellow"),
    SeedColor("Olive Yellow", "#B5A642", "yellow"),

    # Greens
    SeedColor("Olive Drab", "#556B2F", "green"),
    SeedColor("Moss", "#6B8E23", "green"),
    SeedColor("Emerald City", "#50C878", "green"),
    SeedColor("Mint Leaf", "#98FF98", "green"),
    SeedColor("Pine Needle", "#01796F", "green"),
    SeedColor("Peacock Green", "#006D5B", "green"),
    SeedColor("Lawn", "#7CFC00", "green"),
    SeedColor("Dark Green", "#013220", "green"),
    SeedColor("Pea Green", "#8DB600", "green"),
    SeedColor("Forest Green", "#228B22", "green"),
    SeedColor("Sage Leaf", "#9CAF88", "green"),
    SeedColor("Sea Glass", "#A7D8C9", "green"),

    # Blues
    SeedColor("Sky Blue", "#87CEEB", "blue"),
    SeedColor("Lake Blue", "#4AA3DF", "blue"),
    SeedColor("Peacock Blue", "#005F73", "blue"),
    SeedColor("Sapphire", "#0F52BA", "blue"),
    SeedColor("Navy", "#1F2A44", "blue"),
    SeedColor("Cobalt", "#0047AB", "blue"),
    SeedColor("Ice Blue", "#D6F0FF", "blue"),
    SeedColor("Slate Blue", "#5B7C99", "blue"),
    SeedColor("Azure", "#007FFF", "blue"),
    SeedColor("Baby Blue", "#89CFF0", "blue"),
    SeedColor("Pure Blue", "#0000FF", "blue"),
    SeedColor("Royal Blue", "#4169E1", "blue"),
    SeedColor("Turquoise", "#40E0D0", "blue"),
    SeedColor("Electric Cyan", "#00FFFF", "blue"),

    # Purples
    SeedColor("Lavender Field", "#B57EDC", "purple"),
    SeedColor("Electric Violet", "#7F00FF", "purple"),
    SeedColor("Grape", "#6F2DA8", "purple"),
    SeedColor("Eggplant", "#3D2B56", "purple"),
    SeedColor("Lilac", "#C8A2C8", "purple"),
    SeedColor("Indigo Night", "#4B0082", "purple"),
    SeedColor("Amethyst", "#9966CC", "purple"),
    SeedColor("Periwinkle", "#CCCCFF", "purple"),

    # Pinks
    SeedColor("Magenta", "#FF00FF", "pink"),
    SeedColor("Medium Violet Red", "#C71585", "pink"),
    SeedColor("Thistle", "#D8BFD8", "pink"),
    SeedColor("Hot Pink", "#FF69B4", "pink"),
    SeedColor("Blush", "#F4C2C2", "pink"),
    SeedColor("Hibiscus", "#B6316C", "pink"),
    SeedColor("Rose Quartz", "#F7CAC9", "pink"),
    SeedColor("Plum", "#6E2C5B", "pink"),
    SeedColor("Mauve", "#915F6D", "pink"),

    # Neutrals
    SeedColor("Camel", "#C19A6B", "neutral"),
    SeedColor("Chestnut", "#954535", "neutral"),
    SeedColor("Coffee", "#6F4E37", "neutral"),
    SeedColor("Chocolate", "#4E2A1E", "neutral"),
    SeedColor("Sand", "#C2B280", "neutral"),
    SeedColor("Khaki", "#BDB76B", "neutral"),
    SeedColor("Tan", "#D2B48C", "neutral"),
    SeedColor("Beige", "#F5F5DC", "neutral"),
    SeedColor("Light Gray", "#D9D9D9", "neutral"),
    SeedColor("Medium Gray", "#A6A6A6", "neutral"),
    SeedColor("Graphite", "#4B4F54", "neutral"),
    SeedColor("Silver", "#C0C0C0", "neutral"),
    SeedColor("Smoke", "#6E6E6E", "neutral"),
    SeedColor("Warm Gray", "#8B8680", "neutral"),
    SeedColor("Stone", "#E5E4E2", "neutral"),

    # Whites and blacks
    SeedColor("Ivory", "#FFFFF0", "white"),
    SeedColor("Pearl", "#F0EAD6", "white"),
    SeedColor("Snow", "#FFFAFA", "white"),
    SeedColor("Pure White", "#FFFFFF", "white"),
    SeedColor("Charcoal", "#222222", "black"),
    SeedColor("Jet", "#0A0A0A", "black"),
    SeedColor("Pure Black", "#000000", "black"),
]
