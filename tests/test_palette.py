"""Tests for colorgrid.palette module."""

import re

import pytest

from colorgrid.palette import (
    COLUMNS,
    PALETTE,
    ROWS,
    SOURCE_ATTRIBUTION,
    color_at,
    palette_rows,
)


def test_palette_size():
    assert len(PALETTE) == ROWS * COLUMNS == 112


def test_palette_entries_are_hex():
    pattern = re.compile(r"^[0-9a-f]{6}$")
    assert all(pattern.match(color) for color in PALETTE)


def test_attribution():
    assert SOURCE_ATTRIBUTION == "Charmbracelet Lipgloss"


class TestPaletteRows:
    """Test the palette_rows function."""

    def test_default_shape(self):
        rows = palette_rows()
        assert len(rows) == ROWS
        assert all(len(row) == COLUMNS for row in rows)

    def test_row_major(self):
        rows = palette_rows()
        assert rows[0][0] == "f25d94"
        assert rows[0][13] == "eff585"
        assert rows[1][0] == "e559a1"
        assert rows[7][13] == "61eed0"

    def test_partial_last_row(self):
        assert palette_rows(["a", "b", "c"], 2) == [("a", "b"), ("c",)]

    def test_invalid_columns(self):
        with pytest.raises(ValueError):
            palette_rows(PALETTE, 0)


class TestColorAt:
    """Test the color_at function."""

    def test_corners(self):
        assert color_at(0, 0) == "f25d94"
        assert color_at(0, 13) == "eff585"
        assert color_at(7, 0) == "843fec"
        assert color_at(7, 13) == "61eed0"

    def test_linear_index(self):
        assert color_at(3, 5) == PALETTE[3 * 14 + 5]

    @pytest.mark.parametrize("row,col", [(-1, 0), (8, 0), (0, -1), (0, 14)])
    def test_out_of_range(self, row, col):
        with pytest.raises(IndexError):
            color_at(row, col)
