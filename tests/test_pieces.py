"""Tests for shape catalogs and geometry helpers."""

import pytest

from pieces import (
    CLASSIC,
    PENTOMINOES,
    SHAPES,
    TETROMINOES,
    bounding_box,
    get_shape,
    is_edge_adjacent,
    normalize,
    rotate,
)


def test_catalog_sizes() -> None:
    """Catalogs hold the expected number of distinct shapes."""
    assert len(CLASSIC) == 12
    assert len(TETROMINOES) == 6
    assert len(PENTOMINOES) == 12
    assert all(s.size == 4 for s in TETROMINOES)
    assert all(s.size == 5 for s in PENTOMINOES)


@pytest.mark.parametrize("shape_id", sorted(SHAPES))
def test_shapes_are_canonical(shape_id: str) -> None:
    """Cells are unique and already normalized to the origin."""
    cells = SHAPES[shape_id].cells
    assert len(set(cells)) == len(cells)
    assert normalize(cells) == cells


@pytest.mark.parametrize("shape_id", sorted(SHAPES))
def test_four_turns_is_identity(shape_id: str) -> None:
    """rotate(shape, 4) equals rotate(shape, 0), including cell order."""
    cells = SHAPES[shape_id].cells
    assert rotate(cells, 4) == rotate(cells, 0) == cells


@pytest.mark.parametrize("shape_id", sorted(SHAPES))
def test_rotation_uses_n_mod_4(shape_id: str) -> None:
    cells = SHAPES[shape_id].cells
    for n in range(4):
        assert rotate(cells, n) == rotate(cells, n + 4)


def test_i3_turns_vertical() -> None:
    """A horizontal three-line becomes a vertical one after a quarter turn."""
    assert set(rotate(get_shape("I3").cells, 1)) == {(0, 0), (0, 1), (0, 2)}


def test_square_is_rotation_invariant() -> None:
    o2 = get_shape("O2")
    for n in range(4):
        assert set(o2.rotated(n)) == set(o2.cells)


def test_rotation_renormalizes() -> None:
    """Every rotation touches both axes at zero."""
    for shape in SHAPES.values():
        for n in range(4):
            cells = shape.rotated(n)
            assert min(x for x, _ in cells) == 0
            assert min(y for _, y in cells) == 0


def test_rotation_swaps_bounding_box() -> None:
    l5 = get_shape("L5")
    assert bounding_box(l5.cells) == (2, 4)
    assert bounding_box(l5.rotated(1)) == (4, 2)
    assert bounding_box(l5.rotated(2)) == (2, 4)


def test_edge_adjacency() -> None:
    """Sharing a side counts, touching only at a corner does not."""
    a = [(0, 0), (1, 0)]
    assert is_edge_adjacent(a, [(2, 0)])
    assert is_edge_adjacent(a, {(1, 1)})
    assert not is_edge_adjacent(a, [(2, 1)])
    assert not is_edge_adjacent(a, [(5, 5)])


def test_unknown_shape_raises() -> None:
    with pytest.raises(KeyError):
        get_shape("Q9")
