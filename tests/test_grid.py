import random
from collections import Counter

import pytest

from world.coord import Coord
from world.dir import Dir, sample_direction
from world.grid import CellType, Grid


def test_new_grid_is_empty():
    g = Grid(4)
    assert g.count(CellType.EMPTY) == 16
    assert g.get(Coord(3, 3)) == CellType.EMPTY


def test_set_and_get():
    g = Grid(5)
    g.set(Coord(1, 2), CellType.ORGANISM)
    g.set(Coord(4, 0), CellType.CONSUMABLE)
    assert g.get(Coord(1, 2)) == CellType.ORGANISM
    assert g.get(Coord(2, 1)) == CellType.EMPTY
    assert g.count(CellType.CONSUMABLE) == 1


@pytest.mark.parametrize("c", [Coord(-1, 0), Coord(0, -1), Coord(5, 0), Coord(0, 5)])
def test_out_of_bounds_is_an_error(c):
    g = Grid(5)
    assert not g.in_bounds(c)
    with pytest.raises(IndexError):
        g.get(c)
    with pytest.raises(IndexError):
        g.set(c, CellType.ORGANISM)


def test_is_empty_is_false_off_grid():
    g = Grid(3)
    assert g.is_empty(Coord(0, 0))
    assert not g.is_empty(Coord(3, 0))


def test_get_cell_coords_row_major():
    g = Grid(4)
    for c in [Coord(3, 1), Coord(0, 2), Coord(0, 1)]:
        g.set(c, CellType.CONSUMABLE)
    assert list(g.get_cell_coords(CellType.CONSUMABLE)) == [Coord(0, 1), Coord(0, 2), Coord(3, 1)]
    assert len(list(g.get_cell_coords(CellType.EMPTY))) == 13


def test_clone_is_independent():
    g = Grid(3)
    h = g.clone()
    h.set(Coord(1, 1), CellType.ORGANISM)
    assert g.get(Coord(1, 1)) == CellType.EMPTY


def test_bad_size():
    with pytest.raises(ValueError):
        Grid(0)


def test_dir_deltas_cover_neighbourhood():
    deltas = {d.delta for d in Dir}
    assert len(deltas) == 9
    assert Dir.NULL.delta == Coord(0, 0)
    assert Dir.N.delta == Coord(0, 1)
    for d in Dir.neighbours():
        assert d.delta.chebyshev(Coord(0, 0)) == 1


def test_neighbours_order_is_fixed():
    assert Dir.neighbours() == [Dir.N, Dir.S, Dir.E, Dir.W, Dir.NE, Dir.NW, Dir.SE, Dir.SW]


def test_sample_direction_is_seeded_and_covers_all():
    a = [sample_direction(random.Random(7)) for _ in range(3)]
    b = [sample_direction(random.Random(7)) for _ in range(3)]
    assert a == b

    rng = random.Random(0)
    counts = Counter(sample_direction(rng) for _ in range(2000))
    assert set(counts) == set(Dir)


def test_coord_arithmetic():
    assert Coord(2, 3) + Coord(-1, 1) == Coord(1, 4)
    assert Coord(2, 3) - Coord(2, 1) == Coord(0, 2)
