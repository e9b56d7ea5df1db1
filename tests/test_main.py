"""Tests for command line parsing."""

from board import PUZZLES_PER_TIER
from main import parse_args


def test_defaults() -> None:
    args = parse_args([])
    assert args.count == PUZZLES_PER_TIER
    assert args.mode == "free"
    assert args.seed is None
    assert args.export is None


def test_overrides() -> None:
    args = parse_args(["--mode", "connected", "--seed", "7", "--count", "4", "--export", "out.json"])
    assert (args.mode, args.seed, args.count, args.export) == ("connected", 7, 4, "out.json")
