# board.py
# Difficulty tiers: board sizes, piece counts, catalogs and seeds

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pieces import CLASSIC, PENTOMINOES, TETROMINOES, Shape


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GenerationMode(str, Enum):
    FREE = "free"  # pieces scattered anywhere, silhouette may be split
    CONNECTED = "connected"  # every piece touches the ones placed before it


@dataclass(frozen=True)
class TierConfig:
    board_w: int
    board_h: int
    piece_count: tuple[int, int]  # inclusive (min, max)
    catalog: tuple[Shape, ...]

    def __post_init__(self) -> None:
        lo, hi = self.piece_count
        if not 1 <= lo <= hi <= len(self.catalog):
            raise ValueError(
                f"piece_count {self.piece_count} does not fit a catalog of {len(self.catalog)}"
            )


PUZZLES_PER_TIER = 30

# Free placement presets (board W x H, fixed piece count).
FREE_PRESETS: dict[Difficulty, TierConfig] = {
    Difficulty.EASY: TierConfig(12, 10, (3, 3), CLASSIC),
    Difficulty.MEDIUM: TierConfig(14, 12, (4, 4), CLASSIC),
    Difficulty.HARD: TierConfig(16, 12, (5, 5), CLASSIC),
}

# Connected placement presets draw from the 4- and 5-cell families.
CONNECTED_PRESETS: dict[Difficulty, TierConfig] = {
    Difficulty.EASY: TierConfig(8, 8, (3, 3), TETROMINOES),
    Difficulty.MEDIUM: TierConfig(10, 9, (3, 4), TETROMINOES + PENTOMINOES),
    Difficulty.HARD: TierConfig(12, 10, (4, 5), PENTOMINOES),
}

# Base seed per tier, xor'ed with the tier salt before seeding the stream.
TIER_SEEDS: dict[Difficulty, int] = {
    Difficulty.EASY: 0xA1B2C3,
    Difficulty.MEDIUM: 0xB1C2D3,
    Difficulty.HARD: 0xC1D2E3,
}

TIER_SALTS: dict[Difficulty, int] = {
    Difficulty.EASY: 0xE1,
    Difficulty.MEDIUM: 0xD2,
    Difficulty.HARD: 0xC3,
}


def tier_config(difficulty: Difficulty, mode: GenerationMode = GenerationMode.FREE) -> TierConfig:
    presets = FREE_PRESETS if GenerationMode(mode) is GenerationMode.FREE else CONNECTED_PRESETS
    return presets[Difficulty(difficulty)]


def tier_seed(difficulty: Difficulty, seed: int | None = None) -> int:
    """Seed for a tier's stream. ``seed`` overrides the tier's base seed."""
    difficulty = Difficulty(difficulty)
    base = TIER_SEEDS[difficulty] if seed is None else seed
    return (base ^ TIER_SALTS[difficulty]) & 0xFFFFFFFF
