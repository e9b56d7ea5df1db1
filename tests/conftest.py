"""Shared fixtures for the puzzle tests."""

import pytest

from generator import PuzzleRecord
from board import Difficulty
from placements import Placement
from rng import XorShift32


@pytest.fixture
def rng() -> XorShift32:
    """A fixed-seed stream so every run draws the same numbers."""
    return XorShift32(0x1234)


@pytest.fixture
def two_piece_record() -> PuzzleRecord:
    """O2 in the corner with an I4 right below it: 8 cells on a 12x10 board."""
    solution = (Placement("O2", 0, 0, 0), Placement("I4", 0, 0, 2))
    target = frozenset(c for p in solution for c in p.cells)
    return PuzzleRecord(
        board_w=12,
        board_h=10,
        difficulty=Difficulty.EASY,
        pieces=("O2", "I4"),
        solution=solution,
        target=target,
    )
