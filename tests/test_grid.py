import numpy as np
import pytest

from shelfplace.model import GRID_SIZE, Coordinate, Grid, GridEntry, Item


def test_new_grid_is_full_population_and_free():
    grid = Grid()
    assert len(grid) == GRID_SIZE ** 3
    assert grid.occupied_count() == 0
    assert all(not grid.get(c).occupied for c in grid.coordinates())
    assert list(grid.residents()) == []


def test_coordinates_are_row_major():
    grid = Grid(size=2)
    assert list(grid.coordinates()) == [
        Coordinate(0, 0, 0),
        Coordinate(0, 0, 1),
        Coordinate(0, 1, 0),
        Coordinate(0, 1, 1),
        Coordinate(1, 0, 0),
        Coordinate(1, 0, 1),
        Coordinate(1, 1, 0),
        Coordinate(1, 1, 1),
    ]


def test_set_and_get_anchor_and_secondary_cells():
    grid = Grid()
    item = Item(1, "a", 1)
    grid.set(Coordinate(0, 0, 0), GridEntry(occupied=True, item=item))
    grid.set(Coordinate(0, 0, 1), GridEntry(occupied=True))

    assert grid.get(Coordinate(0, 0, 0)) == GridEntry(True, item)
    assert grid.get(Coordinate(0, 0, 1)) == GridEntry(True, None)
    assert grid.get((0, 0, 1)).occupied
    assert grid.occupied_count() == 2
    assert list(grid.residents()) == [(Coordinate(0, 0, 0), item)]

    grid.set(Coordinate(0, 0, 0), GridEntry())
    assert grid.get(Coordinate(0, 0, 0)) == GridEntry()
    assert list(grid.residents()) == []


def test_free_cell_cannot_hold_item():
    with pytest.raises(ValueError):
        Grid().set(Coordinate(0, 0, 0), GridEntry(occupied=False, item=Item(1, "a", 1)))


def test_out_of_range_access_raises_key_error():
    grid = Grid()
    with pytest.raises(KeyError):
        grid.get(Coordinate(0, 0, GRID_SIZE))
    with pytest.raises(KeyError):
        grid.set(Coordinate(-1, 0, 0), GridEntry())
    assert Coordinate(0, 0, GRID_SIZE) not in grid
    assert Coordinate(9, 9, 9) in grid


def test_span_is_free_checks_every_cell_and_bounds():
    grid = Grid()
    grid.set(Coordinate(0, 0, 2), GridEntry(occupied=True))
    assert grid.span_is_free(Coordinate(0, 0, 0), 2)
    assert not grid.span_is_free(Coordinate(0, 0, 0), 3)
    assert grid.span_is_free(Coordinate(0, 0, 3), GRID_SIZE - 3)
    assert not grid.span_is_free(Coordinate(0, 0, 3), GRID_SIZE - 2)
    assert grid.span_is_free(Coordinate(0, 1, 0), GRID_SIZE)


def test_occupancy_view_is_read_only():
    grid = Grid()
    view = grid.occupancy()
    with pytest.raises(ValueError):
        view[0, 0, 0] = True


def test_membership_accepts_integral_types_but_not_bools():
    grid = Grid()
    assert (np.int64(1), np.int32(2), 3) in grid
    assert (True, 0, 0) not in grid
    assert (0.0, 0, 0) not in grid
    assert (0, 0) not in grid
    grid.set((np.int64(0), np.int64(0), np.int64(4)), GridEntry(occupied=True))
    assert grid.is_occupied(Coordinate(0, 0, 4))
    with pytest.raises(KeyError):
        grid.get((False, 0, 0))
