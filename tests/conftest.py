"""Test configuration and fixtures for colorgrid tests."""

import re
from typing import List, Tuple

import pytest

from colorgrid.palette import PALETTE


@pytest.fixture
def palette() -> Tuple[str, ...]:
    """Provide the full Lipgloss color table."""
    return PALETTE


@pytest.fixture
def known_luminance_values() -> List[Tuple[Tuple[int, int, int], int]]:
    """Provide colors with known integer luma values."""
    return [
        ((0, 0, 0), 0),              # Black
        ((255, 255, 255), 255),      # White
        ((255, 0, 0), 76),           # Red
        ((0, 255, 0), 149),          # Green
        ((0, 0, 255), 29),           # Blue
        ((242, 93, 148), 143),       # f25d94
        ((128, 128, 128), 128),      # Threshold gray
    ]


@pytest.fixture
def invalid_hex_colors() -> List[str]:
    """Provide malformed hex color strings."""
    return [
        "",
        "   ",
        "fff",
        "f25d9",
        "f25d944",
        "gg0000",
        "#12345",
        "rgb(1,2,3)",
        "-1ffff",              # Leading sign
        "+1ffff",
        "1 ffff",              # Inner whitespace
        "\u0661\u06623456",    # Non-ASCII digits
        " f25d94",             # Surrounding whitespace
        "f25d94\n",
    ]


class GridTestHelpers:
    """Helper methods for inspecting rendered grids."""

    LABEL_RE = re.compile(r"\x1b\[38;2;\d+;\d+;\d+m (\d+,\d+) \x1b\[0m")
    CELL_RE = re.compile(
        r"\x1b\[48;2;(\d+);(\d+);(\d+)m"
        r"\x1b\[38;2;(\d+);(\d+);(\d+)m"
        r" (\d+),(\d+) "
        r"\x1b\[0m"
    )

    @classmethod
    def labels(cls, text: str) -> List[str]:
        """Extract the "row,col" labels in output order."""
        return cls.LABEL_RE.findall(text)

    @classmethod
    def cells(cls, text: str) -> List[Tuple[int, ...]]:
        """Extract (bg r, g, b, fg r, g, b, row, col) tuples in output order."""
        return [tuple(int(v) for v in m) for m in cls.CELL_RE.findall(text)]


@pytest.fixture
def grid_helpers() -> GridTestHelpers:
    """Provide helper methods for grid output testing."""
    return GridTestHelpers()
