# ui_state.py
# Play-screen state: current puzzle, live arrangement, drag bookkeeping.
# No pygame in here; gui.py draws it and main.py feeds it input.

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from board import Difficulty, GenerationMode
from generator import PuzzleRecord
from placements import Placement
from validator import ValidationResult, validate

# Pieces wait in a tray left of the board (negative x), in 6x6 slots.
TRAY_SLOT = 6
TRAY_COLUMNS = 3
TRAY_WIDTH = TRAY_SLOT * TRAY_COLUMNS

STATUS_START = "Cover the silhouette exactly with all the pieces!"
STATUS_ILLEGAL = "Not yet. Every piece must sit inside the shape without overlapping."
STATUS_PARTIAL = "Almost! Fill every cell of the shape."
STATUS_SOLVED = "Solved! Well done!"


def tray_anchor(index: int) -> tuple[int, int]:
    col, row = index % TRAY_COLUMNS, index // TRAY_COLUMNS
    return -TRAY_WIDTH + col * TRAY_SLOT, row * TRAY_SLOT


@dataclass
class DragState:
    instance_id: int
    start_pos: tuple[float, float]  # grid coordinates, fractional
    start_anchor: tuple[int, int]


class PlayState:
    puzzle: PuzzleRecord  # set by load_puzzle

    def __init__(
        self,
        batches: dict[Difficulty, list[PuzzleRecord]],
        mode: GenerationMode = GenerationMode.FREE,
        difficulty: Difficulty = Difficulty.EASY,
        shuffler: Optional[random.Random] = None,
    ):
        self.batches = batches
        self.mode = mode
        self.difficulty = difficulty
        # Presentation order only; the batches themselves stay seeded.
        self.shuffler = shuffler or random.Random()
        self.order: dict[Difficulty, list[int]] = {
            d: list(range(len(records))) for d, records in batches.items()
        }
        for d in self.order:
            self.shuffler.shuffle(self.order[d])
        self.index = 0

        self.arrangement: dict[int, Placement] = {}
        self.touched: set[int] = set()
        self.drag: DragState | None = None
        self.result: ValidationResult | None = None
        self.load_puzzle()

    # --- navigation ---

    @property
    def puzzle_count(self) -> int:
        return len(self.batches[self.difficulty])

    def load_puzzle(self) -> None:
        records = self.batches[self.difficulty]
        nth = self.order[self.difficulty][self.index % len(records)]
        self.puzzle = records[nth]
        self.arrangement = {
            i: Placement(piece, 0, *tray_anchor(i)) for i, piece in enumerate(self.puzzle.pieces)
        }
        self.touched = set()
        self.drag = None
        self.result = None

    def next_puzzle(self) -> None:
        self.index = (self.index + 1) % self.puzzle_count
        self.load_puzzle()

    def prev_puzzle(self) -> None:
        self.index = (self.index - 1) % self.puzzle_count
        self.load_puzzle()

    def shuffle_order(self) -> None:
        self.shuffler.shuffle(self.order[self.difficulty])
        self.index = 0
        self.load_puzzle()

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = Difficulty(difficulty)
        self.index = 0
        self.load_puzzle()

    def reset(self) -> None:
        self.load_puzzle()

    # --- pieces ---

    def piece_at(self, pos: tuple[float, float]) -> int | None:
        """Topmost piece covering the grid position (last drawn wins)."""
        cell = (math.floor(pos[0]), math.floor(pos[1]))
        for instance_id in reversed(list(self.arrangement)):
            if cell in self.arrangement[instance_id].cells:
                return instance_id
        return None

    def _raise(self, instance_id: int) -> None:
        # Re-insert so the piece is drawn (and picked) on top.
        self.arrangement[instance_id] = self.arrangement.pop(instance_id)

    def begin_drag(self, pos: tuple[float, float]) -> bool:
        instance_id = self.piece_at(pos)
        if instance_id is None:
            return False
        self._raise(instance_id)
        self.drag = DragState(instance_id, pos, self.arrangement[instance_id].anchor)
        return True

    def drag_to(self, pos: tuple[float, float]) -> None:
        if self.drag is None:
            return
        dx = round(pos[0] - self.drag.start_pos[0])
        dy = round(pos[1] - self.drag.start_pos[1])
        ax, ay = self.drag.start_anchor
        placement = self.arrangement[self.drag.instance_id]
        self.arrangement[self.drag.instance_id] = placement.moved_to(ax + dx, ay + dy)

    def end_drag(self) -> None:
        if self.drag is None:
            return
        self.touched.add(self.drag.instance_id)
        self.drag = None
        self.revalidate()

    def rotate_piece(self, instance_id: int) -> None:
        self.arrangement[instance_id] = self.arrangement[instance_id].rotated()
        self.touched.add(instance_id)
        self.revalidate()

    def revalidate(self) -> ValidationResult:
        self.result = validate(self.puzzle, self.arrangement)
        return self.result

    def reveal_solution(self) -> None:
        self.arrangement = dict(enumerate(self.puzzle.solution))
        self.touched = set(self.arrangement)
        self.revalidate()

    # --- display helpers ---

    def is_legal(self, instance_id: int) -> bool | None:
        """None for pieces the player has not moved yet."""
        if self.result is None or instance_id not in self.touched:
            return None
        return self.result.per_piece_legal.get(instance_id)

    @property
    def solved(self) -> bool:
        return self.result is not None and self.result.complete

    def status_text(self) -> str:
        if self.result is None:
            return STATUS_START
        if self.result.complete:
            return STATUS_SOLVED
        if not self.result.all_legal:
            return STATUS_ILLEGAL
        return STATUS_PARTIAL

    def label(self) -> str:
        return f"{self.difficulty.value.title()}  {self.index + 1} / {self.puzzle_count}"
