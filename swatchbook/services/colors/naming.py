"""
Color Name Generation

Deterministic, human-readable names synthesized from a hex value. Every
"random-looking" pick is a table lookup indexed by floor(h / k) mod 3, so the
same hex and the same prior set of used names always yield the same name.
"""

from typing import Dict, List, MutableSet, Optional, Tuple

from .conversion import hex_to_hsl


# Achromatic ladder: (minimum lightness, name), checked top to bottom
ACHROMATIC_LADDER: List[Tuple[int, str]] = [
    (95, "Snow White"),
    (90, "Pearl White"),
    (85, "Silver"),
    (75, "Light Gray"),
    (65, "Gray"),
    (50, "Steel Gray"),
    (35, "Charcoal"),
    (20, "Graphite"),
    (10, "Jet Black"),
    (0, "Ebony"),
]

# Hue bands: (start, end, name below split, split, name at/above split)
HUE_BAND_NAMES: List[Tuple[int, int, str, Optional[int], Optional[str]]] = [
    (0, 15, "Red", None, None),
    (15, 45, "Crimson", 30, "Orange"),
    (45, 75, "Gold", 60, "Yellow"),
    (75, 105, "Chartreuse", None, None),
    (105, 135, "Green", None, None),
    (135, 165, "Emerald", 150, "Jade"),
    (165, 195, "Teal", 180, "Cyan"),
    (195, 225, "Blue", None, None),
    (225, 255, "Azure", 240, "Violet"),
    (255, 285, "Purple", None, None),
    (285, 315, "Magenta", 300, "Fuchsia"),
    (315, 345, "Rose", None, None),
]

# Evocative replacements for generic "<prefix> <base>" names: (hue divisor, picks)
SPECIAL_NAMES: Dict[str, Tuple[int, Tuple[str, str, str]]] = {
    # Reds
    "Deep Red": (5, ("Burgundy", "Wine", "Maroon")),
    "Dark Red": (5, ("Garnet", "Ruby", "Claret")),
    "Bright Red": (5, ("Scarlet", "Cherry", "Crimson")),

    # Blues
    "Deep Blue": (10, ("Navy", "Sapphire", "Indigo")),
    "Dark Blue": (10, ("Midnight", "Cobalt", "Steel")),
    "Light Blue": (10, ("Sky", "Powder", "Ice")),
    "Pale Blue": (10, ("Frost", "Mist", "Cloud")),

    # Greens
    "Deep Green": (8, ("Forest", "Hunter", "Pine")),
    "Dark Green": (8, ("Emerald", "Jade", "Malachite")),
    "Light Green": (8, ("Mint", "Sage", "Seafoam")),
    "Pale Green": (8, ("Honeydew", "Lime", "Spring")),

    # Purples
    "Deep Purple": (12, ("Plum", "Eggplant", "Amethyst")),
    "Dark Purple": (12, ("Violet", "Orchid", "Lavender")),
    "Light Purple": (12, ("Lilac", "Periwinkle", "Mauve")),

    # Yellows
    "Deep Yellow": (6, ("Mustard", "Amber", "Honey")),
    "Bright Yellow": (6, ("Sunflower", "Lemon", "Canary")),
    "Light Yellow": (6, ("Cream", "Vanilla", "Butter")),

    # Oranges
    "Deep Orange": (7, ("Rust", "Copper", "Bronze")),
    "Bright Orange": (7, ("Tangerine", "Pumpkin", "Sunset")),
    "Light Orange": (7, ("Peach", "Coral", "Salmon")),

    # Pinks
    "Deep Rose": (9, ("Fuchsia", "Magenta", "Hot Pink")),
    "Light Rose": (9, ("Blush", "Cotton Candy", "Rose Quartz")),
    "Pale Rose": (9, ("Baby Pink", "Powder Pink", "Dusty Rose")),
}

SATURATED_SUFFIXES = ("Burst", "Flash", "Glow")

ROMAN_NUMERALS = ["", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X"]


def _achromatic_name(l: int) -> str:
    for min_lightness, name in ACHROMATIC_LADDER:
        if l >= min_lightness:
            return name
    return ACHROMATIC_LADDER[-1][1]


def _base_hue_name(h: int) -> str:
    for start, end, low_name, split, high_name in HUE_BAND_NAMES:
        if start <= h < end:
            if split is not None and h >= split:
                return high_name
            return low_name
    # 345° and up wraps back to crimson
    return "Crimson"


def _modifier_prefix(s: int, l: int) -> str:
    """Pick the lightness/saturation modifier (with trailing space, or empty)."""
    if l >= 85:
        if s <= 30:
            return "Pale "
        if s <= 50:
            return "Light "
        return "Bright "
    if l >= 70:
        if s <= 30:
            return "Soft "
        if s >= 70:
            return "Vibrant "
        return ""
    if l >= 50:
        if s <= 30:
            return "Muted "
        if s >= 70:
            return "Bold "
        return ""
    if l >= 30:
        if s <= 30:
            return "Dark "
        if s >= 60:
            return "Deep "
        return "Rich "
    return "Midnight "


def generate_base_name(hex_color: str) -> str:
    """
    Generate the candidate name for a color before uniqueness resolution.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        Base name such as "Snow White", "Burgundy" or "Bold Blue Flash"
    """
    h, s, l = hex_to_hsl(hex_color)

    if s <= 8:
        return _achromatic_name(l)

    base_color = _base_hue_name(h)
    prefix = _modifier_prefix(s, l)
    combined = f"{prefix}{base_color}".strip()

    special = SPECIAL_NAMES.get(combined)
    if special:
        divisor, picks = special
        return picks[(h // divisor) % 3]

    suffix = ""
    if s >= 80 and 40 <= l <= 70:
        suffix = f" {SATURATED_SUFFIXES[(h // 30) % 3]}"
    return f"{prefix}{base_color}{suffix}".strip()


def _name_variation(base_name: str, attempt: int, h: int, s: int, l: int) -> str:
    """
    Deterministic variation for the given collision attempt (2, 3, ...).

    Order: prefix by lightness/saturation, hue suffix, saturation suffix,
    lightness suffix, Roman numerals, then plain numbers.
    """
    if attempt == 2:
        if l >= 70:
            return f"Light {base_name}"
        if l <= 30:
            return f"Dark {base_name}"
        if s >= 70:
            return f"Vivid {base_name}"
        if s <= 30:
            return f"Soft {base_name}"
        return f"Rich {base_name}"

    if attempt == 3:
        if h < 60:
            return f"{base_name} Flame"
        if h < 120:
            return f"{base_name} Leaf"
        if h < 180:
            return f"{base_name} Sea"
        if h < 240:
            return f"{base_name} Sky"
        if h < 300:
            return f"{base_name} Dream"
        return f"{base_name} Rose"

    if attempt == 4:
        if s >= 60:
            return f"{base_name} Burst"
        if s >= 40:
            return f"{base_name} Glow"
        return f"{base_name} Mist"

    if attempt == 5:
        if l >= 70:
            return f"{base_name} Shine"
        if l >= 40:
            return f"{base_name} Shadow"
        return f"{base_name} Deep"

    roman_index = attempt - 5
    if roman_index < len(ROMAN_NUMERALS):
        return f"{base_name} {ROMAN_NUMERALS[roman_index]}"
    return f"{base_name} {attempt - 4}"


def generate_proper_color_name(hex_color: str, used_names: Optional[MutableSet[str]] = None) -> str:
    """
    Generate a unique, human-readable name for a color.

    The caller owns ``used_names`` and threads the same set through every call
    in a catalog build; the returned name is registered in it. Passing None
    uses a fresh set, so the base name comes back unchanged.

    Args:
        hex_color: Color in format #RRGGBB
        used_names: Names already taken (mutated)

    Returns:
        A name not previously present in used_names
    """
    if used_names is None:
        used_names = set()

    h, s, l = hex_to_hsl(hex_color)
    base_name = generate_base_name(hex_color)

    unique_name = base_name
    attempt = 1
    while unique_name in used_names:
        attempt += 1
        unique_name = _name_variation(base_name, attempt, h, s, l)

    used_names.add(unique_name)
    return unique_name


def preview_color_name(hex_color: str, used_names: MutableSet[str]) -> str:
    """Name a color against used_names without registering the result."""
    return generate_proper_color_name(hex_color, set(used_names))
