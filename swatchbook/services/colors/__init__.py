"""
Swatchbook Colors Module

Deterministic color analysis: hex/HSL conversion, style, temperature and
family classification, name generation, hex similarity search and
natural-language query scoring.
"""

from .conversion import (
    HSL, hex_to_hsl, hex_to_rgb, hsl_to_hex, is_valid_hex_color,
    normalize_hex_color, calculate_vividness
)
from .classification import (
    classify_color_style, classify_color_temperature, classify_color_family,
    classify_hue_category, generate_synonyms, classify_keywords
)
from .naming import generate_proper_color_name
from .similarity import calculate_similarity, are_colors_similar, find_similar_colors
from .query import (
    ParsedColorQuery, ColorScore, parse_color_query, score_color,
    categorize_colors, rank_colors, get_scored_colors, explain_color_score
)

__version__ = "1.0.0"

__all__ = [
    "HSL",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "is_valid_hex_color",
    "normalize_hex_color",
    "calculate_vividness",
    "classify_color_style",
    "classify_color_temperature",
    "classify_color_family",
    "classify_hue_category",
    "generate_synonyms",
    "classify_keywords",
    "generate_proper_color_name",
    "calculate_similarity",
    "are_colors_similar",
    "find_similar_colors",
    "ParsedColorQuery",
    "ColorScore",
    "parse_color_query",
    "score_color",
    "categorize_colors",
    "rank_colors",
    "get_scored_colors",
    "explain_color_score",
]
