"""Terminal rendering of a color grid with ANSI truecolor escapes."""

from collections.abc import Sequence

import click

from .color_utils import hex_to_rgb, text_color_for_rgb
from .palette import COLUMNS, PALETTE, SOURCE_ATTRIBUTION, palette_rows

__all__ = ["format_cell", "render_grid", "header", "render", "print_grid"]

RESET = "\x1b[0m"


def _sgr_background(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"\x1b[48;2;{r};{g};{b}m"


def _sgr_foreground(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"\x1b[38;2;{r};{g};{b}m"


def format_cell(color: str, row: int, col: int) -> str:
    """Format one cell: background, contrasting foreground, label, reset."""
    rgb = hex_to_rgb(color)
    fg = text_color_for_rgb(rgb)
    return f"{_sgr_background(rgb)}{_sgr_foreground(fg)} {row},{col} {RESET}"


def render_grid(colors: Sequence[str], columns: int = COLUMNS) -> str:
    """Render the grid body, breaking the line after every ``columns`` cells.

    Row and column labels are derived from ``columns`` alone. A trailing
    partial row is emitted without a line break.
    """
    parts: list[str] = []
    for row, cells in enumerate(palette_rows(colors, columns)):
        for col, color in enumerate(cells):
            parts.append(format_cell(color, row, col))
        if len(cells) == columns:
            parts.append("\n")
    return "".join(parts)


def header(columns: int, rows: int, attribution: str = SOURCE_ATTRIBUTION) -> str:
    return f"Color Grid ({columns}×{rows}) - {attribution}"


def render(
    colors: Sequence[str] = PALETTE,
    columns: int = COLUMNS,
    attribution: str = SOURCE_ATTRIBUTION,
) -> str:
    """Render the header, a blank line, the grid body and a trailing blank line."""
    body = render_grid(colors, columns)
    rows = -(-len(colors) // columns)
    return f"{header(columns, rows, attribution)}\n\n{body}\n"


def print_grid(
    colors: Sequence[str] = PALETTE,
    columns: int = COLUMNS,
    attribution: str = SOURCE_ATTRIBUTION,
) -> None:
    # Escapes are always written, even when stdout is not a terminal.
    click.echo(render(colors, columns, attribution), nl=False, color=True)
