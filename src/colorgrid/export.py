"""JSON export of a color grid."""

import json
from collections.abc import Sequence
from typing import Any

from .color_utils import (
    format_hsl,
    hex_to_rgb,
    luminance_array,
    rgb_to_hex,
    text_color_for_rgb,
    text_color_name,
)
from .palette import COLUMNS, PALETTE

__all__ = ["grid_records", "grid_to_json"]


def grid_records(
    colors: Sequence[str] = PALETTE, columns: int = COLUMNS
) -> list[dict[str, Any]]:
    """Describe every cell of the grid as a dictionary, in row-major order.

    Each record holds the cell position, its color as ``#rrggbb``, the RGB
    channels, the integer luma, the chosen text color name and an HSL
    rendering of the color.
    """
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")

    rgbs = [hex_to_rgb(color) for color in colors]
    lumas = luminance_array(rgbs) if rgbs else []

    records: list[dict[str, Any]] = []
    for i, (rgb, luma) in enumerate(zip(rgbs, lumas)):
        row, col = divmod(i, columns)
        records.append(
            {
                "row": row,
                "col": col,
                "hex": f"#{rgb_to_hex(rgb)}",
                "rgb": list(rgb),
                "luminance": luma,
                "text_color": text_color_name(text_color_for_rgb(rgb)),
                "hsl": format_hsl(rgb),
            }
        )
    return records


def grid_to_json(
    colors: Sequence[str] = PALETTE, columns: int = COLUMNS, indent: int = 2
) -> str:
    return json.dumps(grid_records(colors, columns), indent=indent)
