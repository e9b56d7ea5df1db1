# validator.py
# Per-piece legality and completion check for a live arrangement

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Hashable, Mapping, Sequence, Union

from generator import PuzzleRecord
from pieces import SHAPES, Cell
from placements import Placement, in_bounds

log = logging.getLogger(__name__)

# instance id -> placement; a plain sequence is keyed by index
Arrangement = Union[Mapping[Hashable, Placement], Sequence[Placement]]


@dataclass(frozen=True)
class ValidationResult:
    per_piece_legal: dict[Hashable, bool]
    complete: bool
    unknown_pieces: tuple[Hashable, ...] = ()

    @property
    def all_legal(self) -> bool:
        return all(self.per_piece_legal.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "perPieceLegal": {str(k): v for k, v in self.per_piece_legal.items()},
            "complete": self.complete,
            "unknownPieces": [str(k) for k in self.unknown_pieces],
        }


def _as_mapping(arrangement: Arrangement) -> Mapping[Hashable, Placement]:
    if isinstance(arrangement, Mapping):
        return arrangement
    return dict(enumerate(arrangement))


def _cell_counts(arrangement: Mapping[Hashable, Placement]) -> Counter[Cell]:
    counts: Counter[Cell] = Counter()
    for placement in arrangement.values():
        # Ids outside every catalog have no cells to count.
        if placement.piece in SHAPES:
            counts.update(placement.cells)
    return counts


def _legal(
    record: PuzzleRecord,
    placement: Placement,
    counts: Counter[Cell],
) -> bool:
    cells = placement.cells
    if not in_bounds(cells, record.board_w, record.board_h):
        return False
    if not record.target.issuperset(cells):
        return False
    # Every cell of a piece is counted once for the piece itself; anything
    # more means another piece sits on it.
    return all(counts[c] == 1 for c in cells)


def is_piece_legal(
    record: PuzzleRecord,
    arrangement: Arrangement,
    instance_id: Hashable,
) -> bool:
    """In bounds, inside the silhouette and not overlapping any other piece."""
    arrangement = _as_mapping(arrangement)
    placement = arrangement[instance_id]
    if placement.piece not in record.pieces:
        return False
    return _legal(record, placement, _cell_counts(arrangement))


def validate(record: PuzzleRecord, arrangement: Arrangement) -> ValidationResult:
    """Legality snapshot of every piece plus the completion flag.

    Stateless: safe to call after every single move, including with an
    arrangement that is transiently illegal.
    """
    arrangement = _as_mapping(arrangement)
    counts = _cell_counts(arrangement)

    legal: dict[Hashable, bool] = {}
    unknown: list[Hashable] = []
    for instance_id, placement in arrangement.items():
        if placement.piece not in record.pieces:
            unknown.append(instance_id)
            legal[instance_id] = False
            continue
        legal[instance_id] = _legal(record, placement, counts)

    if unknown:
        log.warning(
            "arrangement uses pieces not in the puzzle: %s",
            ", ".join(f"{k}={arrangement[k].piece}" for k in unknown),
        )

    complete = bool(legal) and all(legal.values()) and counts.keys() == record.target
    return ValidationResult(legal, complete, tuple(unknown))


def solution_arrangement(record: PuzzleRecord) -> dict[Hashable, Placement]:
    """The generator's own placement, keyed by piece id."""
    return {p.piece: p for p in record.solution}
