"""
Color space conversion helpers.

Hex parsing and normalization, hex -> integer HSL (degrees / percents) as used
by every classifier, HSL -> hex for catalog filler generation, and HSV-based
vividness for display ordering.
"""

import colorsys
import math
import re
from typing import NamedTuple, Tuple


HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")
VALID_HEX_PATTERN = re.compile(r"#?[0-9A-Fa-f]{6}")


class HSL(NamedTuple):
    """Integer HSL triple: h in [0, 360], s and l in [0, 100]."""
    h: int
    s: int
    l: int


ZERO_HSL = HSL(0, 0, 0)


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def is_valid_hex_color(text: str) -> bool:
    """
    Check whether a string is a 6-digit hex color.

    Accepts ``#RRGGBB`` or ``RRGGBB`` (case insensitive, surrounding
    whitespace ignored).
    """
    if not isinstance(text, str):
        return False
    return VALID_HEX_PATTERN.fullmatch(text.strip()) is not None


def normalize_hex_color(text: str) -> str:
    """Trim, ensure a leading '#', and uppercase."""
    trimmed = text.strip()
    with_hash = trimmed if trimmed.startswith("#") else f"#{trimmed}"
    return with_hash.upper()


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert hex color to an integer RGB tuple.

    Args:
        hex_color: Color as #RRGGBB or RRGGBB

    Returns:
        Tuple of (R, G, B), each in [0, 255]

    Raises:
        ValueError: If the input is not a 6-digit hex color
    """
    match = HEX_PATTERN.fullmatch(normalize_hex_color(hex_color)) if isinstance(hex_color, str) else None
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color}")
    return int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16)


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert hex color to integer HSL.

    Malformed input yields HSL(0, 0, 0) rather than raising, so callers must
    treat the zero triple as "unknown".

    Args:
        hex_color: Color in format #RRGGBB (leading '#' optional)

    Returns:
        HSL with h in degrees and s, l in percent, all rounded half-up
    """
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if not match:
        return ZERO_HSL

    r = int(match.group(1), 16) / 255
    g = int(match.group(2), 16) / 255
    b = int(match.group(3), 16) / 255

    c_max = max(r, g, b)
    c_min = min(r, g, b)
    l = (c_max + c_min) / 2

    if c_max == c_min:
        # Achromatic
        h = s = 0.0
    else:
        d = c_max - c_min
        s = d / (2 - c_max - c_min) if l > 0.5 else d / (c_max + c_min)
        if c_max == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif c_max == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSL(
        h=round_half_up(h * 360),
        s=round_half_up(s * 100),
        l=round_half_up(l * 100)
    )


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """
    Convert HSL to hex format.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]

    Returns:
        Hex color string in format #RRGGBB (uppercase)
    """
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, l / 100.0, s / 100.0)

    r_int = max(0, min(255, round_half_up(r * 255)))
    g_int = max(0, min(255, round_half_up(g * 255)))
    b_int = max(0, min(255, round_half_up(b * 255)))

    return f"#{r_int:02X}{g_int:02X}{b_int:02X}"


def calculate_vividness(hex_color: str) -> float:
    """
    Perceived colorfulness as HSV saturation x value.

    HSL saturation is misleadingly high for near-white colors; S*V penalizes
    both washed-out and very dark colors. Returns 0.0 for malformed input.
    """
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return 0.0

    c_max = max(r, g, b) / 255
    c_min = min(r, g, b) / 255
    saturation = 0.0 if c_max == 0 else (c_max - c_min) / c_max
    return saturation * c_max
