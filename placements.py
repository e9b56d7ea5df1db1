# placements.py
# Piece placements on the board: occupied cells and candidate anchors

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from pieces import Cell, get_shape


@dataclass(frozen=True)
class Placement:
    piece: str
    rotation: int
    x: int  # anchor = top-left of the rotated bounding box
    y: int

    def __post_init__(self) -> None:
        if self.rotation not in (0, 1, 2, 3):
            raise ValueError(f"rotation must be 0-3, got {self.rotation!r}")

    @property
    def anchor(self) -> Cell:
        return self.x, self.y

    @property
    def shape_cells(self) -> tuple[Cell, ...]:
        return get_shape(self.piece).rotated(self.rotation)

    @property
    def cells(self) -> tuple[Cell, ...]:
        """Board cells covered by this placement."""
        return tuple((self.x + cx, self.y + cy) for cx, cy in self.shape_cells)

    def moved_to(self, x: int, y: int) -> Placement:
        return replace(self, x=x, y=y)

    def rotated(self) -> Placement:
        # Quarter turn clockwise, same anchor.
        return replace(self, rotation=(self.rotation + 1) % 4)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pieceId": self.piece,
            "rotation": self.rotation,
            "anchor": {"x": self.x, "y": self.y},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Placement:
        anchor = data["anchor"]
        return cls(
            piece=data["pieceId"],
            rotation=int(data["rotation"]),
            x=int(anchor["x"]),
            y=int(anchor["y"]),
        )


def occupied(cells: tuple[Cell, ...], x: int, y: int) -> tuple[Cell, ...]:
    return tuple((x + cx, y + cy) for cx, cy in cells)


def in_bounds(cells: tuple[Cell, ...], board_w: int, board_h: int) -> bool:
    return all(0 <= cx < board_w and 0 <= cy < board_h for cx, cy in cells)


def anchor_range(size: int, board_size: int) -> range:
    """Every anchor coordinate that keeps ``size`` cells inside ``board_size``."""
    return range(board_size - size + 1)
