"""
Color Classification Rules

Maps a color's HSL onto the catalog's categorical vocabularies: style tag,
temperature, 16-way color family and the 10-way catalog hue. The cascades
overlap on purpose; rule order is the taxonomy, so the first matching guard
wins and every branch must stay in its current position.
"""

from typing import List

from .conversion import hex_to_hsl


STYLE_TAGS = ["pastel", "light-neutrals", "dark-neutrals", "muted", "jewel", "vibrant", "earthy"]

TEMPERATURES = ["warm", "cool", "neutral"]

COLOR_FAMILIES = [
    "red", "orange", "yellow", "lime", "green", "teal", "cyan", "blue",
    "indigo", "violet", "magenta", "pink", "brown", "gray", "white", "black"
]

# 30° bands starting at 15°; red wraps across 0°
FAMILY_HUE_BANDS = [
    (15, 45, "orange"),
    (45, 75, "yellow"),
    (75, 105, "lime"),
    (105, 135, "green"),
    (135, 165, "teal"),
    (165, 195, "cyan"),
    (195, 225, "blue"),
    (225, 255, "indigo"),
    (255, 285, "violet"),
    (285, 315, "magenta"),
    (315, 345, "pink"),
]

CATALOG_HUES = ["red", "orange", "yellow", "green", "blue", "purple", "pink", "neutral", "white", "black"]


def classify_color_style(hex_color: str) -> str:
    """
    Classify a color into one of the seven style tags.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        One of STYLE_TAGS
    """
    h, s, l = hex_to_hsl(hex_color)

    if s <= 10 and l >= 80:
        return "light-neutrals"

    # Dark navies (180-230°) and emeralds (130-160°) land here as well
    if l <= 30 or (l <= 35 and s <= 25):
        return "dark-neutrals"

    if l >= 75 and 15 <= s <= 45:
        return "pastel"

    if s >= 55 and 30 <= l <= 55:
        return "jewel"

    if s >= 70 and 45 <= l <= 70:
        return "vibrant"

    if 20 <= h <= 110 and 15 <= s <= 50 and 35 <= l <= 70:
        return "earthy"

    if 20 <= s <= 45 and 40 <= l <= 75:
        return "muted"

    # Fallback to the closest match
    if l >= 80:
        return "light-neutrals"
    if l <= 30:
        return "dark-neutrals"
    if s >= 55:
        return "jewel"
    if s >= 15:
        return "muted"
    return "dark-neutrals"


def classify_color_temperature(hex_color: str) -> str:
    """
    Classify a color's temperature.

    Grays, near-blacks and near-whites are neutral; the red-orange-yellow
    side of the wheel plus pinks (315-345°) is warm; 105-315° is cool.
    """
    h, s, l = hex_to_hsl(hex_color)

    if s <= 12 or l <= 12 or l >= 92:
        return "neutral"

    if h >= 345 or h <= 105 or 315 <= h < 345:
        return "warm"

    if 105 < h < 315:
        return "cool"

    return "neutral"


def classify_color_family(hex_color: str) -> str:
    """
    Classify a color into one of 16 families.

    Precedence: white, black, gray, brown, then 30° hue bands. Near-white
    colors too saturated for white (s 9-10, l 94+) fall through to the bands.
    """
    h, s, l = hex_to_hsl(hex_color)

    if s <= 8 and l >= 94:
        return "white"

    if s <= 10 and l <= 20:
        return "black"

    if s <= 10 and 20 < l < 94:
        return "gray"

    if 15 <= h <= 60 and 25 <= s <= 60 and 20 <= l <= 55:
        return "brown"

    for start, end, family in FAMILY_HUE_BANDS:
        if start <= h < end:
            return family

    # h >= 345 or h < 15
    return "red"


def classify_hue_category(hex_color: str) -> str:
    """
    Derive the catalog hue field for a synthesized color.

    Uses the same band edges as the name generator so a generated name and
    its hue category agree.
    """
    h, s, _ = hex_to_hsl(hex_color)

    if s <= 12:
        return "neutral"
    if h >= 345 or h < 15:
        return "red"
    if h < 45:
        return "orange"
    if h < 75:
        return "yellow"
    if h < 165:
        return "green"
    if h < 255:
        return "blue"
    if h < 285:
        return "purple"
    return "pink"


def generate_synonyms(hex_color: str, style: str) -> List[str]:
    """
    Build the keyword list for a color: its style tag plus derived synonyms.

    Args:
        hex_color: Color in format #RRGGBB
        style: Style tag from classify_color_style

    Returns:
        Keyword list, always starting with the style tag
    """
    synonyms = [style]
    h, s, l = hex_to_hsl(hex_color)

    if style == "light-neutrals":
        if l >= 95:
            synonyms.append("white")
        elif 40 <= h <= 60:
            synonyms.extend(["cream", "beige"])
        elif s <= 5:
            synonyms.append("light-gray")
    elif style == "dark-neutrals":
        if l <= 15:
            synonyms.append("black")
        elif 180 <= h <= 230:
            synonyms.append("navy")
        elif 130 <= h <= 160:
            synonyms.append("emerald")
        else:
            synonyms.append("charcoal")
    elif style == "earthy":
        if 60 <= h <= 110:
            synonyms.extend(["olive", "sage"])
        elif 20 <= h <= 40:
            synonyms.extend(["clay", "terracotta"])

    return synonyms


def classify_keywords(hex_color: str) -> List[str]:
    """Style tag plus synonyms for a color."""
    return generate_synonyms(hex_color, classify_color_style(hex_color))
