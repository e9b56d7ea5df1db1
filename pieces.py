# pieces.py
# Piece catalogs + rotation / bounding box / adjacency

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

Cell = tuple[int, int]  # (x, y) = (column, row)

# Canonical piece shapes as ordered (x, y) cells. No mirror images: the
# player can only rotate.
SHAPE_CELLS: dict[str, tuple[Cell, ...]] = {
    "O2": ((0, 0), (1, 0), (0, 1), (1, 1)),
    "I3": ((0, 0), (1, 0), (2, 0)),
    "I4": ((0, 0), (1, 0), (2, 0), (3, 0)),
    "L3": ((0, 0), (0, 1), (1, 1)),
    "L4": ((0, 0), (0, 1), (0, 2), (1, 2)),
    "T4": ((0, 0), (1, 0), (2, 0), (1, 1)),
    "S4": ((1, 0), (2, 0), (0, 1), (1, 1)),
    "Z4": ((0, 0), (1, 0), (1, 1), (2, 1)),
    "F5": ((1, 0), (2, 0), (0, 1), (1, 1), (1, 2)),
    "I5": ((0, 0), (1, 0), (2, 0), (3, 0), (4, 0)),
    "L5": ((0, 0), (0, 1), (0, 2), (0, 3), (1, 3)),
    "N5": ((1, 0), (1, 1), (0, 2), (1, 2), (0, 3)),
    "P5": ((0, 0), (1, 0), (0, 1), (1, 1), (0, 2)),
    "T5": ((0, 0), (1, 0), (2, 0), (1, 1), (1, 2)),
    "U5": ((0, 0), (0, 1), (1, 1), (2, 1), (2, 0)),
    "V5": ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2)),
    "W5": ((0, 0), (0, 1), (1, 1), (1, 2), (2, 2)),
    "X5": ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
    "Y5": ((1, 0), (0, 1), (1, 1), (1, 2), (1, 3)),
    "Z5": ((0, 0), (1, 0), (1, 1), (1, 2), (2, 2)),
}


@dataclass(frozen=True)
class Shape:
    id: str
    cells: tuple[Cell, ...]

    @property
    def size(self) -> int:
        return len(self.cells)

    def rotated(self, n: int) -> tuple[Cell, ...]:
        return rotate(self.cells, n)


def normalize(cells: Iterable[Cell]) -> tuple[Cell, ...]:
    """Translate cells so the minimum x and minimum y are both zero (order kept)."""
    cells = tuple(cells)
    min_x = min(x for x, _ in cells)
    min_y = min(y for _, y in cells)
    return tuple((x - min_x, y - min_y) for x, y in cells)


def _rotate90(cells: Iterable[Cell]) -> tuple[Cell, ...]:
    # (x, y) -> (y, -x)
    return tuple((y, -x) for x, y in cells)


def rotate(cells: Iterable[Cell], n: int) -> tuple[Cell, ...]:
    """Rotate by n quarter turns, renormalizing after every turn.

    Only ``n % 4`` turns are applied, so ``rotate(c, 4) == rotate(c, 0)``.
    Symmetric shapes are not deduplicated: the 2x2 square gives the same
    cells for every n.
    """
    result = tuple(cells)
    for _ in range(n % 4):
        result = normalize(_rotate90(result))
    return result


def bounding_box(cells: Iterable[Cell]) -> tuple[int, int]:
    """(width, height) of normalized cells, i.e. (max_x + 1, max_y + 1)."""
    cells = tuple(cells)
    return max(x for x, _ in cells) + 1, max(y for _, y in cells) + 1


def neighbours(cell: Cell) -> tuple[Cell, ...]:
    x, y = cell
    return (x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)


def is_edge_adjacent(cells_a: Iterable[Cell], cells_b: Iterable[Cell]) -> bool:
    """True if some cell of A shares a side (not just a corner) with a cell of B."""
    other = cells_b if isinstance(cells_b, (set, frozenset)) else set(cells_b)
    return any(n in other for cell in cells_a for n in neighbours(cell))


def _catalog(*ids: str) -> tuple[Shape, ...]:
    return tuple(SHAPES[i] for i in ids)


SHAPES: dict[str, Shape] = {sid: Shape(sid, cells) for sid, cells in SHAPE_CELLS.items()}

# Flat catalog used by free placement.
CLASSIC = _catalog("O2", "I3", "I4", "L3", "L4", "T4", "S4", "Z4", "U5", "P5", "L5", "T5")

# Families used by connected placement.
TETROMINOES = _catalog("O2", "I4", "L4", "T4", "S4", "Z4")
PENTOMINOES = _catalog(
    "F5", "I5", "L5", "N5", "P5", "T5", "U5", "V5", "W5", "X5", "Y5", "Z5"
)


def get_shape(shape_id: str) -> Shape:
    """Look up a shape by id. Raises KeyError for unknown ids."""
    return SHAPES[shape_id]
