# export.py
# JSON dump of generated batches plus the shape catalogs

from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping, Sequence

from board import Difficulty, GenerationMode
from generator import PuzzleRecord
from pieces import CLASSIC, PENTOMINOES, TETROMINOES, Shape

log = logging.getLogger(__name__)

EXPORT_VERSION = 1


def _shape_to_dict(shape: Shape) -> dict[str, Any]:
    return {"id": shape.id, "cells": [[int(x), int(y)] for x, y in shape.cells]}


def _puzzle_to_dict(puzzle_id: str, record: PuzzleRecord) -> dict[str, Any]:
    data = record.to_dict()
    return {
        "id": puzzle_id,
        "difficulty": data["difficulty"],
        "boardW": data["boardW"],
        "boardH": data["boardH"],
        "targetMask": data["targetMask"],
        "pieces": data["pieces"],
    }


def build_export_dict(
    batches: Mapping[Difficulty, Sequence[PuzzleRecord]],
    mode: GenerationMode = GenerationMode.FREE,
) -> dict[str, Any]:
    """Collect every puzzle of every tier into one JSON-friendly dict."""
    puzzles: list[dict[str, Any]] = []
    for difficulty, records in batches.items():
        name = Difficulty(difficulty).value
        for i, record in enumerate(records, start=1):
            puzzles.append(_puzzle_to_dict(f"{name}-{i:02d}", record))

    return {
        "meta": {
            "version": EXPORT_VERSION,
            "timestamp_ms": int(time.time() * 1000),
            "mode": GenerationMode(mode).value,
        },
        "puzzles": puzzles,
        "catalogs": {
            "classic": [_shape_to_dict(s) for s in CLASSIC],
            "tetrominoes": [_shape_to_dict(s) for s in TETROMINOES],
            "pentominoes": [_shape_to_dict(s) for s in PENTOMINOES],
        },
    }


def write_export_json(
    path: str,
    batches: Mapping[Difficulty, Sequence[PuzzleRecord]],
    mode: GenerationMode = GenerationMode.FREE,
) -> None:
    data = build_export_dict(batches, mode)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    log.info("wrote %d puzzles to %s", len(data["puzzles"]), path)
