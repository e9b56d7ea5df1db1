# generator.py
# Builds puzzles that are solvable by construction: the pieces are placed
# first and their union becomes the target silhouette.

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Union

from board import (
    PUZZLES_PER_TIER,
    Difficulty,
    GenerationMode,
    TierConfig,
    tier_config,
    tier_seed,
)
from pieces import Cell, Shape, bounding_box, is_edge_adjacent
from placements import Placement, anchor_range, occupied
from rng import XorShift32

log = logging.getLogger(__name__)

FREE_ATTEMPT_BUDGET = 800  # placement tries shared by all pieces of one puzzle
MAX_RETRIES = 200  # whole-puzzle attempts before giving up


@dataclass(frozen=True)
class PuzzleRecord:
    board_w: int
    board_h: int
    difficulty: Difficulty
    pieces: tuple[str, ...]
    solution: tuple[Placement, ...]
    target: frozenset[Cell] = field(repr=False)

    @property
    def target_mask(self) -> list[list[int]]:
        return [[x, y] for x, y in sorted(self.target, key=lambda c: (c[1], c[0]))]

    def to_dict(self, include_solution: bool = False) -> dict[str, Any]:
        data: dict[str, Any] = {
            "boardW": self.board_w,
            "boardH": self.board_h,
            "difficulty": self.difficulty.value,
            "pieces": list(self.pieces),
            "targetMask": self.target_mask,
        }
        if include_solution:
            data["solution"] = [p.to_dict() for p in self.solution]
        return data


@dataclass(frozen=True)
class Generated:
    record: PuzzleRecord


@dataclass(frozen=True)
class RetryableFailure:
    """One attempt could not place every piece. Retried silently."""

    difficulty: Difficulty
    reason: str


@dataclass(frozen=True)
class ExhaustedFailure:
    """Every allowed attempt failed; the caller should fall back."""

    difficulty: Difficulty
    attempts: int


AttemptResult = Union[Generated, RetryableFailure]
GenerationResult = Union[Generated, ExhaustedFailure]


class GenerationExhausted(Exception):
    """Raised by batch generation when a tier cannot be filled."""

    def __init__(self, failure: ExhaustedFailure) -> None:
        self.failure = failure
        super().__init__(
            f"could not generate a {failure.difficulty.value} puzzle "
            f"after {failure.attempts} attempts"
        )


def _free_axis(rng: random.Random, size: int, board_size: int) -> int | None:
    # Keep a 1-cell inset from the edges so there is room for every piece.
    span = board_size - size - 2
    if span >= 1:
        return 1 + rng.randrange(span)
    # Window too small for this piece: fall back to any in-bounds anchor.
    full = anchor_range(size, board_size)
    if not full:
        return None
    return full[rng.randrange(len(full))]


def place_free(
    shapes: list[Shape],
    board_w: int,
    board_h: int,
    rng: random.Random,
    budget: int = FREE_ATTEMPT_BUDGET,
) -> list[Placement] | None:
    """Drop shapes at random non-overlapping spots. None when the budget runs out."""
    placed: list[Placement] = []
    taken: set[Cell] = set()
    tries = 0
    while len(placed) < len(shapes) and tries < budget:
        tries += 1
        shape = shapes[len(placed)]
        rot = rng.randrange(4)
        cells = shape.rotated(rot)
        w, h = bounding_box(cells)

        x = _free_axis(rng, w, board_w)
        y = _free_axis(rng, h, board_h)
        if x is None or y is None:
            continue

        cover = occupied(cells, x, y)
        if taken.intersection(cover):
            continue

        taken.update(cover)
        placed.append(Placement(shape.id, rot, x, y))

    if len(placed) != len(shapes):
        return None
    return placed


def _centered(size: int, board_size: int) -> int:
    return min(max((board_size - size) // 2, 0), board_size - size)


def place_connected(
    shapes: list[Shape],
    board_w: int,
    board_h: int,
    rng: random.Random,
) -> list[Placement] | None:
    """Grow one connected silhouette; every new piece must touch the union so far."""
    first = shapes[0]
    rot = rng.randrange(4)
    w, h = bounding_box(first.rotated(rot))
    if w > board_w or h > board_h:
        return None
    x, y = _centered(w, board_w), _centered(h, board_h)

    placed = [Placement(first.id, rot, x, y)]
    taken: set[Cell] = set(placed[0].cells)

    for shape in shapes[1:]:
        found = _find_touching(shape, board_w, board_h, taken, rng)
        if found is None:
            return None
        placed.append(found)
        taken.update(found.cells)

    return placed


def _find_touching(
    shape: Shape,
    board_w: int,
    board_h: int,
    taken: set[Cell],
    rng: random.Random,
) -> Placement | None:
    rotations = [0, 1, 2, 3]
    rng.shuffle(rotations)
    for rot in rotations:
        cells = shape.rotated(rot)
        w, h = bounding_box(cells)
        xs = list(anchor_range(w, board_w))
        ys = list(anchor_range(h, board_h))
        rng.shuffle(xs)
        rng.shuffle(ys)
        for y in ys:
            for x in xs:
                cover = occupied(cells, x, y)
                if taken.intersection(cover):
                    continue
                if is_edge_adjacent(cover, taken):
                    return Placement(shape.id, rot, x, y)
    return None


def _build_record(
    difficulty: Difficulty, config: TierConfig, solution: list[Placement]
) -> PuzzleRecord:
    target: set[Cell] = set()
    for placement in solution:
        target.update(placement.cells)
    return PuzzleRecord(
        board_w=config.board_w,
        board_h=config.board_h,
        difficulty=difficulty,
        pieces=tuple(p.piece for p in solution),
        solution=tuple(solution),
        target=frozenset(target),
    )


def attempt(
    difficulty: Difficulty,
    rng: random.Random,
    mode: GenerationMode = GenerationMode.FREE,
) -> AttemptResult:
    """One generation attempt with a fresh piece draw."""
    difficulty = Difficulty(difficulty)
    mode = GenerationMode(mode)
    config = tier_config(difficulty, mode)

    lo, hi = config.piece_count
    count = lo if lo == hi else rng.randint(lo, hi)
    shapes = rng.sample(config.catalog, count)

    if mode is GenerationMode.CONNECTED:
        solution = place_connected(shapes, config.board_w, config.board_h, rng)
    else:
        solution = place_free(shapes, config.board_w, config.board_h, rng)

    if solution is None:
        return RetryableFailure(
            difficulty, f"could not place {[s.id for s in shapes]} ({mode.value})"
        )
    return Generated(_build_record(difficulty, config, solution))


def generate(
    difficulty: Difficulty,
    rng: random.Random,
    mode: GenerationMode = GenerationMode.FREE,
    max_retries: int = MAX_RETRIES,
) -> GenerationResult:
    """Generate one puzzle, retrying failed attempts up to ``max_retries`` times."""
    difficulty = Difficulty(difficulty)
    for n in range(1, max_retries + 1):
        result = attempt(difficulty, rng, mode)
        if isinstance(result, Generated):
            return result
        log.debug("attempt %d for %s failed: %s", n, difficulty.value, result.reason)
    log.warning("gave up on a %s puzzle after %d attempts", difficulty.value, max_retries)
    return ExhaustedFailure(difficulty, max_retries)


def generate_batch(
    difficulty: Difficulty,
    count: int = PUZZLES_PER_TIER,
    seed: int | None = None,
    mode: GenerationMode = GenerationMode.FREE,
    max_retries: int = MAX_RETRIES,
) -> list[PuzzleRecord]:
    """``count`` puzzles for one tier from a freshly seeded stream.

    The same seed always reproduces the same batch.
    """
    difficulty = Difficulty(difficulty)
    mode = GenerationMode(mode)
    rng = XorShift32(tier_seed(difficulty, seed))
    puzzles: list[PuzzleRecord] = []
    while len(puzzles) < count:
        result = generate(difficulty, rng, mode, max_retries)
        if isinstance(result, ExhaustedFailure):
            raise GenerationExhausted(result)
        puzzles.append(result.record)
    log.info("generated %d %s puzzles (%s)", len(puzzles), difficulty.value, mode.value)
    return puzzles


def generate_all(
    mode: GenerationMode = GenerationMode.FREE,
    count: int = PUZZLES_PER_TIER,
    seed: int | None = None,
) -> dict[Difficulty, list[PuzzleRecord]]:
    return {d: generate_batch(d, count, seed, mode) for d in Difficulty}
