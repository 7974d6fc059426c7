"""Command-line interface for colorgrid."""

import sys

import click

from . import __version__
from .export import grid_to_json
from .grid import print_grid
from .image_generation import create_png_grid
from .palette import COLUMNS, PALETTE


@click.command()
@click.version_option(version=__version__, prog_name="colorgrid")
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["grid", "json", "png"], case_sensitive=False),
    default="grid",
    help="Output format (default: grid)",
)
@click.option(
    "-o", "--output", type=str, help="Output file path (required for PNG format)"
)
@click.option(
    "--tile-size",
    type=click.IntRange(16, 128),
    default=48,
    help="Size of square tiles in pixels for PNG format (default: 48)",
)
@click.option(
    "--tile-margin",
    type=click.IntRange(0, 20),
    default=4,
    help="Margin between tiles in pixels for PNG format (default: 4)",
)
def main(
    output_format: str,
    output: str,
    tile_size: int,
    tile_margin: int,
) -> None:
    """Print the 14x8 Lipgloss color grid with readable cell labels.

    Each cell is labelled "row,col" in black or white text, whichever
    contrasts better with the cell color.

    Examples:

        colorgrid

        colorgrid -F json

        colorgrid -F png -o grid.png --tile-size 64
    """
    try:
        output_format = output_format.lower()
        if output_format == "json":
            click.echo(grid_to_json(PALETTE, COLUMNS))
        elif output_format == "png":
            if not output:
                click.echo("Error: PNG output requires -o/--output filename", err=True)
                sys.exit(1)

            try:
                create_png_grid(PALETTE, COLUMNS, output, tile_size, tile_margin)
            except Exception as e:
                click.echo(f"Error creating PNG: {e}", err=True)
                sys.exit(1)
        else:  # grid format
            print_grid(PALETTE, COLUMNS)

    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
