"""Color conversion and contrast utilities for colorgrid.

Colors are handled as 6-digit hex strings (``"RRGGBB"``) and decoded into
8-bit ``(r, g, b)`` integer triples. Text contrast is decided with the
integer BT.601 luma approximation::

    lum = (r * 299 + g * 587 + b * 114) // 1000

Cells whose luma is strictly greater than 128 get black text, all others
get white text. The weights sum to 1000, so pure white has luma 255.
"""

import string
from typing import Any

import colour
import numpy as np

__all__ = [
    "BLACK",
    "WHITE",
    "LUMINANCE_THRESHOLD",
    "hex_to_rgb",
    "rgb_to_hex",
    "luminance",
    "luminance_array",
    "text_color",
    "text_color_for_rgb",
    "text_color_name",
    "format_hsl",
]

RGB = tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)

LUMINANCE_THRESHOLD = 128

_LUMA_WEIGHTS = (299, 587, 114)


def hex_to_rgb(hex_str: str) -> RGB:
    """Decode a 6-digit hex color into an ``(r, g, b)`` triple.

    A leading ``#`` is accepted. Raises ValueError for anything that is not
    exactly six ASCII hexadecimal digits; signs, whitespace and non-ASCII
    digits are rejected.
    """
    digits = hex_str.removeprefix("#")
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: '{hex_str}' (expected RRGGBB)")

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    return (r, g, b)


def rgb_to_hex(rgb: RGB) -> str:
    """Encode an ``(r, g, b)`` triple as a lowercase 6-digit hex string."""
    r, g, b = rgb
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ValueError(f"RGB channels must be in [0, 255], got {rgb}")
    return f"{r:02x}{g:02x}{b:02x}"


def luminance(r: int, g: int, b: int) -> int:
    """Integer BT.601 luma of an 8-bit RGB color, on a 0-255 scale."""
    return (r * 299 + g * 587 + b * 114) // 1000


def luminance_array(rgbs: Any) -> list[int]:
    """Vectorized :func:`luminance` over a sequence of RGB triples."""
    values = np.asarray(rgbs, dtype=np.int64).reshape(-1, 3)
    luma = values @ np.array(_LUMA_WEIGHTS, dtype=np.int64) // 1000
    return [int(v) for v in luma]


def text_color_for_rgb(rgb: RGB) -> RGB:
    """Pick black or white text for a background given as an RGB triple."""
    if luminance(*rgb) > LUMINANCE_THRESHOLD:
        return BLACK
    return WHITE


def text_color(hex_str: str) -> RGB:
    """Pick black or white text for a background given as a hex color.

    Examples:
        >>> text_color("f25d94")
        (0, 0, 0)
        >>> text_color("000000")
        (255, 255, 255)
    """
    return text_color_for_rgb(hex_to_rgb(hex_str))


def text_color_name(rgb: RGB) -> str:
    if rgb == BLACK:
        return "black"
    if rgb == WHITE:
        return "white"
    raise ValueError(f"Not a text color: {rgb}")


def format_hsl(rgb: RGB) -> str:
    """Format an 8-bit RGB triple as ``hsl(H, S%, L%)``."""
    normalized = np.array(rgb, dtype=float) / 255.0
    h, s, lightness = colour.models.rgb.cylindrical.RGB_to_HSL(normalized)
    return (
        f"hsl({int(round(h * 360)) % 360}, "
        f"{int(round(s * 100))}%, {int(round(lightness * 100))}%)"
    )
