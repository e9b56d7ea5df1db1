"""Tests for play-screen drawing constants."""

import pytest

pytest.importorskip("pygame")

import gui  # noqa: E402
from pieces import SHAPES  # noqa: E402


def test_every_shape_has_a_color() -> None:
    assert set(SHAPES) <= set(gui.PIECE_COLORS)


def test_legality_borders_differ_from_piece_fills() -> None:
    """A legal or illegal border must stay visible on every piece."""
    clashing = {
        pid: color
        for pid, color in gui.PIECE_COLORS.items()
        if color in (gui.LEGAL_BORDER, gui.ILLEGAL_BORDER)
    }
    assert clashing == {}
    assert gui.LEGAL_BORDER != gui.ILLEGAL_BORDER


def test_to_grid_round_trips_cell_corner() -> None:
    rect = gui.cell_rect(3, 2)
    assert gui.to_grid(rect.topleft) == (3.0, 2.0)
