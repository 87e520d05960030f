"""
Catalog Display Arrangement

Ordering helpers for listing colors: explicit lightness / vividness sorts and
the default "rainbow" arrangement that leads with the most appealing colors of
each ROYGBIV hue, then a curated set of neutrals, then everything else.
"""

from typing import Any, List, Sequence

from .conversion import calculate_vividness, hex_to_hsl, hex_to_rgb
from .similarity import calculate_rgb_distance


ROYGBIV_ORDER = ["red", "orange", "yellow", "green", "blue", "purple", "pink"]
NEUTRAL_HUES = {"neutral", "white", "black"}

# Colors closer than this RGB distance are too similar to show side by side
RAINBOW_MIN_DISTANCE = 30.0

APPEALING_NAMES = [
    "coral", "turquoise", "emerald", "sapphire", "ruby", "crimson",
    "scarlet", "gold", "sunflower", "spring", "tropical", "cherry",
    "hibiscus", "magenta", "violet", "rose quartz", "peach", "mint",
    "lavender", "blush", "sky", "powder"
]

ELEGANT_NAMES = [
    "pearl", "silver", "cream", "ivory", "champagne", "platinum",
    "charcoal", "graphite", "sage", "stone", "sea glass"
]


def sort_colors(colors: Sequence[Any], sort_by: str = "none") -> List[Any]:
    """
    Sort colors for display.

    Args:
        colors: Records exposing ``hex``
        sort_by: "none" (keep order), "lightness" (lightest first) or
            "saturation" (most vivid first, by HSV vividness)
    """
    if sort_by == "lightness":
        return sorted(colors, key=lambda color: hex_to_hsl(color.hex).l, reverse=True)
    if sort_by == "saturation":
        return sorted(colors, key=lambda color: calculate_vividness(color.hex), reverse=True)
    return list(colors)


def rainbow_appeal_score(color: Any) -> float:
    """Display appeal of a chromatic color (higher shows earlier)."""
    h, s, l = hex_to_hsl(color.hex)
    keywords = color.keywords
    score = 0.0

    if "pastel" in keywords:
        if l >= 75 and s >= 25:
            score += 110
        elif l >= 70 and s >= 15:
            score += 85
        else:
            score += 60

    if "vibrant" in keywords:
        score += 85

    if "jewel" in keywords:
        score += 75

    score += calculate_vividness(color.hex) * 45

    if s >= 60:
        score += 35
    elif s >= 40:
        score += 20

    if 75 <= l <= 90:
        score += 40
    elif 45 <= l <= 75:
        score += 25

    if l <= 25 and "jewel" not in keywords:
        score -= 30
    if s <= 15:
        score -= 40

    lowered_name = color.name.lower()
    if any(
        name in lowered_name or any(name in keyword.lower() for keyword in keywords)
        for name in APPEALING_NAMES
    ):
        score += 25

    return score


def neutral_elegance_score(color: Any) -> float:
    """Display appeal of a neutral color."""
    _, _, l = hex_to_hsl(color.hex)
    keywords = color.keywords
    score = 0.0

    if "light-neutrals" in keywords:
        if l >= 85:
            score += 60
        elif l >= 70:
            score += 40

    if "muted" in keywords:
        score += 35

    # Variety across lights, darks and mediums
    if l >= 80:
        score += 20
    elif l <= 30:
        score += 15
    else:
        score += 10

    lowered_name = color.name.lower()
    if any(name in lowered_name for name in ELEGANT_NAMES):
        score += 30

    return score


def select_best_colors_for_rainbow(colors: Sequence[Any], max_colors: int) -> List[Any]:
    """
    Pick the most appealing colors, skipping near-duplicates.

    Candidates are visited by descending appeal; one is skipped when it is
    within RAINBOW_MIN_DISTANCE (RGB) of a color already picked.
    """
    if not colors:
        return []

    ranked = sorted(colors, key=rainbow_appeal_score, reverse=True)

    selected: List[Any] = []
    selected_rgb = []
    for color in ranked:
        if len(selected) >= max_colors:
            break
        rgb = hex_to_rgb(color.hex)
        if any(calculate_rgb_distance(rgb, other) < RAINBOW_MIN_DISTANCE for other in selected_rgb):
            continue
        selected.append(color)
        selected_rgb.append(rgb)

    return selected


def select_best_neutrals(colors: Sequence[Any], max_colors: int) -> List[Any]:
    """Pick the most elegant neutrals."""
    if not colors:
        return []
    ranked = sorted(colors, key=neutral_elegance_score, reverse=True)
    return ranked[:max_colors]


def arrange_rainbow(colors: Sequence[Any], per_hue: int = 6, max_neutrals: int = 12) -> List[Any]:
    """
    Default catalog ordering.

    Returns:
        Best colors per ROYGBIV hue, then curated neutrals, then the rest in
        their original order. Every input color appears exactly once.
    """
    rainbow: List[Any] = []
    for hue in ROYGBIV_ORDER:
        hue_colors = [color for color in colors if color.hue == hue]
        rainbow.extend(select_best_colors_for_rainbow(hue_colors, per_hue))

    picked_ids = {color.id for color in rainbow}
    neutral_candidates = [
        color for color in colors
        if color.hue in NEUTRAL_HUES and color.id not in picked_ids
    ]
    neutrals = select_best_neutrals(neutral_candidates, max_neutrals)
    picked_ids.update(color.id for color in neutrals)

    remaining = [color for color in colors if color.id not in picked_ids]
    return rainbow + neutrals + remaining
