"""
Hex Similarity Search

Euclidean distance in RGB space, normalized against the largest possible
distance (black to white) and inverted so 100 means identical.
"""

import math
from typing import List, Sequence, Tuple, TypeVar

import numpy as np

from .conversion import hex_to_rgb, is_valid_hex_color, normalize_hex_color


MAX_RGB_DISTANCE = math.sqrt(255 * 255 * 3)

DEFAULT_SIMILARITY_THRESHOLD = 90.0

T = TypeVar("T")


def calculate_rgb_distance(rgb1: Tuple[int, int, int], rgb2: Tuple[int, int, int]) -> float:
    """Euclidean distance between two RGB triples (lower is more similar)."""
    r_diff = rgb1[0] - rgb2[0]
    g_diff = rgb1[1] - rgb2[1]
    b_diff = rgb1[2] - rgb2[2]
    return math.sqrt(r_diff * r_diff + g_diff * g_diff + b_diff * b_diff)


def calculate_similarity(hex1: str, hex2: str) -> float:
    """
    Similarity percentage between two colors.

    Returns:
        Value in [0, 100]; 100 for identical colors, 0 if either hex is malformed
    """
    try:
        rgb1 = hex_to_rgb(hex1)
        rgb2 = hex_to_rgb(hex2)
    except ValueError:
        return 0.0

    distance = calculate_rgb_distance(rgb1, rgb2)
    similarity = ((MAX_RGB_DISTANCE - distance) / MAX_RGB_DISTANCE) * 100
    return max(0.0, min(100.0, similarity))


def are_colors_similar(hex1: str, hex2: str, threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> bool:
    """Check whether two colors are within the similarity threshold."""
    return calculate_similarity(hex1, hex2) >= threshold


def _similarity_vector(target_rgb: Tuple[int, int, int], hexes: Sequence[str]) -> np.ndarray:
    """
    Similarity of every hex against the target, computed in one pass.

    Malformed entries get similarity 0.
    """
    rgb = np.zeros((len(hexes), 3), dtype=np.float64)
    valid = np.zeros(len(hexes), dtype=bool)
    for index, hex_color in enumerate(hexes):
        try:
            rgb[index] = hex_to_rgb(hex_color)
            valid[index] = True
        except ValueError:
            continue

    distances = np.linalg.norm(rgb - np.asarray(target_rgb, dtype=np.float64), axis=1)
    similarity = ((MAX_RGB_DISTANCE - distances) / MAX_RGB_DISTANCE) * 100
    similarity = np.clip(similarity, 0.0, 100.0)
    similarity[~valid] = 0.0
    return similarity


def find_similar_colors(
    target_hex: str,
    colors: Sequence[T],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD
) -> List[Tuple[T, float]]:
    """
    Find colors similar to a target hex.

    Args:
        target_hex: Target color; '#' optional, surrounding whitespace ignored
        colors: Records exposing a ``hex`` attribute
        threshold: Minimum similarity percentage (0-100)

    Returns:
        (color, similarity) pairs with similarity >= threshold, most similar
        first. An invalid target yields an empty list.
    """
    if not is_valid_hex_color(target_hex) or not colors:
        return []

    target_rgb = hex_to_rgb(normalize_hex_color(target_hex))
    similarity = _similarity_vector(target_rgb, [color.hex for color in colors])

    matches = [
        (color, float(score))
        for color, score in zip(colors, similarity)
        if score >= threshold
    ]
    matches.sort(key=lambda item: item[1], reverse=True)
    return matches
