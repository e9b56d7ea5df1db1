"""Tests for placement legality and completion."""

import logging

import pytest

from board import Difficulty, GenerationMode
from generator import PuzzleRecord, generate_batch
from placements import Placement
from validator import is_piece_legal, solution_arrangement, validate


@pytest.mark.parametrize("mode", list(GenerationMode))
def test_solution_is_complete(mode: GenerationMode) -> None:
    """Feeding back the generator's own placement solves the puzzle."""
    for record in generate_batch(Difficulty.HARD, count=5, mode=mode):
        result = validate(record, solution_arrangement(record))
        assert result.complete
        assert all(result.per_piece_legal.values())
        assert result.unknown_pieces == ()


def test_validate_is_idempotent(two_piece_record: PuzzleRecord) -> None:
    arrangement = {"a": Placement("O2", 0, 0, 0), "b": Placement("I4", 0, 3, 3)}
    assert validate(two_piece_record, arrangement) == validate(two_piece_record, arrangement)


def test_two_piece_scenario(two_piece_record: PuzzleRecord) -> None:
    """Exact cover completes; shifting one piece right breaks it."""
    arrangement = {"square": Placement("O2", 0, 0, 0), "line": Placement("I4", 0, 0, 2)}
    assert validate(two_piece_record, arrangement).complete

    arrangement["line"] = arrangement["line"].moved_to(1, 2)
    result = validate(two_piece_record, arrangement)
    assert not result.complete
    assert result.per_piece_legal == {"square": True, "line": False}


def test_partial_cover_is_not_complete(two_piece_record: PuzzleRecord) -> None:
    """Legal pieces that leave silhouette cells empty do not finish the puzzle."""
    result = validate(two_piece_record, {"square": Placement("O2", 0, 0, 0)})
    assert result.per_piece_legal == {"square": True}
    assert not result.complete


def test_overlap_marks_both_pieces(two_piece_record: PuzzleRecord) -> None:
    arrangement = {"square": Placement("O2", 0, 0, 1), "line": Placement("I4", 0, 0, 2)}
    result = validate(two_piece_record, arrangement)
    assert result.per_piece_legal == {"square": False, "line": False}
    assert not result.complete


@pytest.mark.parametrize("anchor", [(-1, 0), (0, -1), (11, 0), (0, 9)])
def test_out_of_bounds(two_piece_record: PuzzleRecord, anchor: tuple[int, int]) -> None:
    arrangement = {"square": Placement("O2", 0, *anchor), "line": Placement("I4", 0, 0, 2)}
    assert not is_piece_legal(two_piece_record, arrangement, "square")
    assert not validate(two_piece_record, arrangement).complete


def test_outside_silhouette(two_piece_record: PuzzleRecord) -> None:
    """In bounds but off the target shape is illegal."""
    arrangement = {"square": Placement("O2", 0, 5, 5)}
    assert not is_piece_legal(two_piece_record, arrangement, "square")


def test_rotation_matters(two_piece_record: PuzzleRecord) -> None:
    arrangement = {"square": Placement("O2", 0, 0, 0), "line": Placement("I4", 1, 0, 2)}
    result = validate(two_piece_record, arrangement)
    assert result.per_piece_legal["line"] is False
    assert not result.complete


def test_sequence_arrangement_keyed_by_index(two_piece_record: PuzzleRecord) -> None:
    result = validate(two_piece_record, list(two_piece_record.solution))
    assert result.per_piece_legal == {0: True, 1: True}
    assert result.complete


def test_unknown_piece_flagged(two_piece_record: PuzzleRecord, caplog: pytest.LogCaptureFixture) -> None:
    """A piece the puzzle does not list is illegal and reported."""
    arrangement = {
        "square": Placement("O2", 0, 0, 0),
        "line": Placement("I4", 0, 0, 2),
        "extra": Placement("T4", 0, 6, 6),
    }
    with caplog.at_level(logging.WARNING, logger="validator"):
        result = validate(two_piece_record, arrangement)
    assert result.unknown_pieces == ("extra",)
    assert result.per_piece_legal["extra"] is False
    assert not result.complete
    assert "extra=T4" in caplog.text


def test_id_outside_every_catalog(two_piece_record: PuzzleRecord) -> None:
    arrangement = {"square": Placement("O2", 0, 0, 0), "ghost": Placement("QQ", 0, 0, 0)}
    result = validate(two_piece_record, arrangement)
    assert result.unknown_pieces == ("ghost",)
    assert result.per_piece_legal["square"] is True


def test_empty_arrangement_is_not_complete(two_piece_record: PuzzleRecord) -> None:
    result = validate(two_piece_record, {})
    assert result.per_piece_legal == {}
    assert not result.complete


def test_result_dict(two_piece_record: PuzzleRecord) -> None:
    data = validate(two_piece_record, solution_arrangement(two_piece_record)).to_dict()
    assert data == {
        "perPieceLegal": {"O2": True, "I4": True},
        "complete": True,
        "unknownPieces": [],
    }
