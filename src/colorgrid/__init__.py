"""colorgrid - Render the Lipgloss color grid with contrasting labels

`color_at` and `palette_rows` are library API for looking up palette cells
by position; the renderer itself lays out rows with `palette_rows`.
"""

__version__ = "0.1.0"

from .color_utils import hex_to_rgb, luminance, rgb_to_hex, text_color
from .grid import format_cell, print_grid, render, render_grid
from .palette import COLUMNS, PALETTE, ROWS, color_at, palette_rows

__all__ = [
    "PALETTE",
    "ROWS",
    "COLUMNS",
    "color_at",
    "palette_rows",
    "hex_to_rgb",
    "rgb_to_hex",
    "luminance",
    "text_color",
    "format_cell",
    "render_grid",
    "render",
    "print_grid",
]
