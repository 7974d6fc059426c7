"""Image generation utilities for colorgrid."""

import math
from collections.abc import Sequence

import click
import matplotlib.patches as patches
import matplotlib.pyplot as plt

from .color_utils import hex_to_rgb, text_color_for_rgb


def _normalized(rgb: tuple[int, int, int]) -> tuple[float, float, float]:
    r, g, b = rgb
    return (r / 255.0, g / 255.0, b / 255.0)


def create_png_grid(
    colors: Sequence[str],
    columns: int,
    output_file: str,
    tile_size: int = 48,
    tile_margin: int = 4,
) -> None:
    """Create a PNG image with the colors arranged in a labelled grid."""
    n_colors = len(colors)
    if n_colors == 0:
        raise ValueError("No colors provided")
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")

    rows = math.ceil(n_colors / columns)

    w = (columns * (tile_size + tile_margin)) + tile_margin
    h = (rows * (tile_size + tile_margin)) + tile_margin

    fig, ax = plt.subplots(figsize=(w / 100, h / 100), dpi=100)  # type: ignore[misc]

    ax.set_xlim(0, w)
    ax.set_ylim(0, h)
    ax.axis("off")

    for i, color in enumerate(colors):
        row = i // columns
        col = i % columns
        rgb = hex_to_rgb(color)

        # Row 0 is drawn at the top
        x = tile_margin + col * (tile_size + tile_margin)
        y = h - (row + 1) * (tile_size + tile_margin)

        rect = patches.Rectangle(
            (x, y), tile_size, tile_size, linewidth=0, facecolor=_normalized(rgb)
        )
        ax.add_patch(rect)
        ax.text(
            x + tile_size / 2,
            y + tile_size / 2,
            f"{row},{col}",
            color=_normalized(text_color_for_rgb(rgb)),
            ha="center",
            va="center",
            fontsize=max(tile_size // 6, 4),
        )

    plt.tight_layout()
    plt.savefig(output_file, bbox_inches="tight", pad_inches=0, dpi=100)  # type: ignore[misc]
    plt.close()

    click.echo(f"PNG grid saved to: {output_file}")
