"""
Natural-Language Color Query Interpretation

Parses free-text searches such as "light vibrant blue" or "dusty rose" into
hue / lightness / saturation intents and ranks catalog colors against them.
A query that carries no descriptor (a bare hue or an arbitrary word) is not
descriptive; callers fall back to plain substring search for those.
"""

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .conversion import HSL, hex_to_hsl


@dataclass(frozen=True)
class HueMapping:
    """Degree ranges and vocabulary for one queryable hue."""
    ranges: Tuple[Tuple[int, int], ...]
    aliases: Tuple[str, ...]


HUE_MAPPINGS: Dict[str, HueMapping] = {
    "red": HueMapping(
        ranges=((345, 360), (0, 15)),
        aliases=("crimson", "scarlet", "cherry", "rose", "pink", "magenta", "burgundy",
                 "wine", "maroon", "garnet", "ruby", "claret"),
    ),
    "orange": HueMapping(
        ranges=((15, 45),),
        aliases=("tangerine", "pumpkin", "rust", "copper", "bronze", "coral", "salmon", "peach"),
    ),
    "yellow": HueMapping(
        ranges=((45, 75),),
        aliases=("gold", "amber", "honey", "mustard", "lemon", "canary", "sunflower", "cream",
                 "vanilla", "butter"),
    ),
    "green": HueMapping(
        ranges=((75, 165),),
        aliases=("lime", "chartreuse", "emerald", "jade", "teal", "mint", "sage", "seafoam",
                 "forest", "hunter", "pine", "olive", "malachite", "honeydew", "spring"),
    ),
    "blue": HueMapping(
        ranges=((165, 255),),
        aliases=("cyan", "azure", "navy", "sapphire", "indigo", "cobalt", "steel", "sky",
                 "powder", "ice", "frost", "mist", "cloud", "midnight"),
    ),
    "purple": HueMapping(
        ranges=((255, 315),),
        aliases=("violet", "lavender", "plum", "eggplant", "amethyst", "orchid", "lilac",
                 "periwinkle", "mauve", "fuchsia"),
    ),
    "pink": HueMapping(
        ranges=((315, 345),),
        aliases=("rose", "blush", "cotton candy", "rose quartz", "baby pink", "powder pink",
                 "dusty rose", "hot pink"),
    ),
    # Scored by saturation, not by degree
    "neutral": HueMapping(
        ranges=((0, 360),),
        aliases=("gray", "grey", "silver", "charcoal", "graphite", "black", "white", "beige",
                 "cream", "ivory", "pearl", "snow", "ebony", "jet"),
    ),
}

LIGHTNESS_DESCRIPTORS: Dict[str, Tuple[str, ...]] = {
    "light": ("light", "pale", "bright", "soft", "pastel", "powder", "ice", "frost", "mist",
              "cloud", "snow", "pearl", "cream", "vanilla", "butter"),
    "dark": ("dark", "deep", "rich", "midnight", "shadow", "charcoal", "graphite", "jet",
             "ebony", "navy", "forest", "wine", "burgundy", "maroon"),
    "medium": ("medium", "regular", "normal", "standard"),
}

SATURATION_DESCRIPTORS: Dict[str, Tuple[str, ...]] = {
    "neon": ("neon", "electric", "fluorescent", "glow", "luminous", "radioactive", "laser",
             "cyberpunk", "day-glo", "highlighter"),
    "vibrant": ("vibrant", "bright", "bold", "vivid", "intense", "rich", "saturated",
                "brilliant", "burst", "flash", "energetic", "dynamic"),
    "muted": ("muted", "soft", "subtle", "pastel", "pale", "faded", "washed", "dusty", "sage",
              "powder", "stone"),
    "neutral": ("neutral", "gray", "grey", "beige", "cream", "ivory", "silver", "charcoal"),
}

HUE_WEIGHT = 0.5
LIGHTNESS_WEIGHT = 0.3
SATURATION_WEIGHT = 0.2

HUE_TOLERANCE_DEGREES = 60.0
SCORE_TIE_EPSILON = 0.01


@dataclass
class ParsedColorQuery:
    """Hue, lightness and saturation intents extracted from a search string."""
    hues: List[str] = field(default_factory=list)
    lightness_descriptors: List[str] = field(default_factory=list)
    saturation_descriptors: List[str] = field(default_factory=list)
    original_query: str = ""
    is_descriptive: bool = False


@dataclass
class ColorScore:
    """Relevance of one color to one parsed query; every score is in [0, 1]."""
    color: Any
    hue_score: float
    lightness_score: float
    saturation_score: float
    total_score: float


def _term_matches(token: str, term: str) -> bool:
    """
    Containment test between a query token and a vocabulary term.

    The token contains the term ("scarlets" -> "scarlet", "pinkish" -> "pink"), or
    the token is one word of a multi-word / hyphenated term ("cotton" ->
    "cotton candy", "day" -> "day-glo").
    """
    if term in token:
        return True
    if " " in term or "-" in term:
        return token in term.replace("-", " ").split()
    return False


def _any_term_matches(tokens: Sequence[str], terms: Iterable[str]) -> bool:
    return any(_term_matches(token, term) for term in terms for token in tokens)


def parse_color_query(query: str) -> ParsedColorQuery:
    """
    Parse a free-text color query.

    Args:
        query: User search text, e.g. "light vibrant blue"

    Returns:
        ParsedColorQuery with duplicate-free, table-ordered descriptor lists
    """
    tokens = query.lower().split()

    hues: List[str] = []
    for hue, mapping in HUE_MAPPINGS.items():
        if hue in tokens or _any_term_matches(tokens, mapping.aliases):
            hues.append(hue)

    lightness = [
        category for category, terms in LIGHTNESS_DESCRIPTORS.items()
        if _any_term_matches(tokens, terms)
    ]
    saturation = [
        category for category, terms in SATURATION_DESCRIPTORS.items()
        if _any_term_matches(tokens, terms)
    ]

    # A bare hue is not enough signal; any descriptor or two hues is
    is_descriptive = bool(lightness) or bool(saturation) or len(hues) > 1

    return ParsedColorQuery(
        hues=hues,
        lightness_descriptors=lightness,
        saturation_descriptors=saturation,
        original_query=query,
        is_descriptive=is_descriptive
    )


def _distance_to_range(hue: int, start: int, end: int) -> float:
    """Degrees from hue to the nearest edge of [start, end]; 0 inside."""
    if start <= end:
        if start <= hue <= end:
            return 0.0
        return float(min(abs(hue - start), abs(hue - end)))

    # Range crossing 0°/360°
    if hue >= start or hue <= end:
        return 0.0
    return float(min(
        abs(hue - start),
        abs(hue - (end + 360)),
        abs((hue + 360) - start),
        abs(hue - end)
    ))


def calculate_hue_score(hsl: HSL, query_hues: Sequence[str]) -> float:
    """How well a color's hue matches any of the queried hues."""
    if not query_hues:
        return 1.0

    best = 0.0
    for query_hue in query_hues:
        mapping = HUE_MAPPINGS.get(query_hue)
        if mapping is None:
            continue

        if query_hue == "neutral":
            score = 1.0 if hsl.s <= 15 else max(0.0, (15 - hsl.s) / 15)
        else:
            score = 0.0
            for start, end in mapping.ranges:
                distance = _distance_to_range(hsl.h, start, end)
                score = max(score, max(0.0, 1 - distance / HUE_TOLERANCE_DEGREES))

        best = max(best, score)

    return best


def calculate_lightness_score(hsl: HSL, descriptors: Sequence[str]) -> float:
    """How well a color's lightness matches any of the lightness descriptors."""
    if not descriptors:
        return 1.0

    lightness = hsl.l
    best = 0.0
    for descriptor in descriptors:
        score = 0.0
        if descriptor == "light":
            if lightness >= 70:
                score = 0.7 + (lightness - 70) / 30 * 0.3
            else:
                score = max(0.0, lightness / 70 * 0.7)
        elif descriptor == "dark":
            if lightness <= 40:
                score = 0.7 + (40 - lightness) / 40 * 0.3
            else:
                score = max(0.0, (100 - lightness) / 60 * 0.7)
        elif descriptor == "medium":
            if 30 <= lightness <= 70:
                score = max(0.0, 1 - abs(lightness - 50) / 20)
            else:
                score = 0.3
        best = max(best, score)

    return best


def _neon_score(saturation: int, lightness: int) -> float:
    """Neon needs a bright lightness band as well as high saturation."""
    if saturation >= 80 and 45 <= lightness <= 80:
        return 0.9 + (saturation - 80) / 20 * 0.1
    if saturation >= 70 and 35 <= lightness <= 85:
        return 0.6 + (saturation - 70) / 30 * 0.3
    if saturation >= 60 and 30 <= lightness <= 90:
        return 0.4 + (saturation - 60) / 40 * 0.2

    sat_factor = max(0.0, (saturation - 40) / 60)
    if 25 <= lightness <= 95:
        light_factor = 1.0
    else:
        light_factor = max(0.0, 1 - abs(lightness - 60) / 40)
    return max(0.0, sat_factor * light_factor * 0.3)


def calculate_saturation_score(hsl: HSL, descriptors: Sequence[str]) -> float:
    """How well a color's saturation matches any of the saturation descriptors."""
    if not descriptors:
        return 1.0

    saturation = hsl.s
    best = 0.0
    for descriptor in descriptors:
        score = 0.0
        if descriptor == "neon":
            score = _neon_score(saturation, hsl.l)
        elif descriptor == "vibrant":
            if saturation >= 60:
                score = 0.7 + (saturation - 60) / 40 * 0.3
            else:
                score = max(0.0, saturation / 60 * 0.7)
        elif descriptor == "muted":
            if saturation <= 50:
                score = 0.7 + (50 - saturation) / 50 * 0.3
            else:
                score = max(0.0, (100 - saturation) / 50 * 0.7)
        elif descriptor == "neutral":
            if saturation <= 15:
                score = 0.8 + (15 - saturation) / 15 * 0.2
            else:
                score = max(0.0, (30 - saturation) / 30 * 0.5)
        best = max(best, score)

    return best


def score_color(color: Any, parsed_query: ParsedColorQuery) -> ColorScore:
    """
    Score a single color against a parsed query.

    Args:
        color: Record exposing a ``hex`` attribute
        parsed_query: Output of parse_color_query

    Returns:
        ColorScore with total = 0.5 * hue + 0.3 * lightness + 0.2 * saturation
    """
    hsl = hex_to_hsl(color.hex)

    hue_score = calculate_hue_score(hsl, parsed_query.hues)
    lightness_score = calculate_lightness_score(hsl, parsed_query.lightness_descriptors)
    saturation_score = calculate_saturation_score(hsl, parsed_query.saturation_descriptors)

    total_score = (
        hue_score * HUE_WEIGHT
        + lightness_score * LIGHTNESS_WEIGHT
        + saturation_score * SATURATION_WEIGHT
    )

    return ColorScore(
        color=color,
        hue_score=hue_score,
        lightness_score=lightness_score,
        saturation_score=saturation_score,
        total_score=total_score
    )


def _compare_scores(a: ColorScore, b: ColorScore) -> float:
    """Descending by total; near-ties fall through to hue, then lightness."""
    if abs(a.total_score - b.total_score) < SCORE_TIE_EPSILON:
        if abs(a.hue_score - b.hue_score) < SCORE_TIE_EPSILON:
            return b.lightness_score - a.lightness_score
        return b.hue_score - a.hue_score
    return b.total_score - a.total_score


def categorize_colors(colors: Sequence[Any], query: str) -> List[ColorScore]:
    """
    Rank colors by relevance to a descriptive query.

    Returns:
        Scored colors, best first; an empty list when the query is not
        descriptive (the caller should fall back to substring search)
    """
    parsed_query = parse_color_query(query)
    if not parsed_query.is_descriptive:
        return []
    return rank_colors(colors, parsed_query)


def rank_colors(colors: Sequence[Any], parsed_query: ParsedColorQuery) -> List[ColorScore]:
    """Score every color and sort best first, whether or not the query is descriptive."""
    scored = [score_color(color, parsed_query) for color in colors]
    scored.sort(key=cmp_to_key(_compare_scores))
    return scored


def get_scored_colors(scored_colors: Sequence[ColorScore]) -> List[Any]:
    """Strip scores, keeping rank order."""
    return [scored.color for scored in scored_colors]


def explain_color_score(color: Any, parsed_query: ParsedColorQuery) -> Dict[str, Any]:
    """Scoring breakdown for one color, for debugging search relevance."""
    scored = score_color(color, parsed_query)
    hsl = hex_to_hsl(color.hex)
    return {
        "name": getattr(color, "name", None),
        "hex": color.hex,
        "hsl": {"h": hsl.h, "s": hsl.s, "l": hsl.l},
        "scores": {
            "hue": round(scored.hue_score, 2),
            "lightness": round(scored.lightness_score, 2),
            "saturation": round(scored.saturation_score, 2),
            "total": round(scored.total_score, 2),
        },
    }
