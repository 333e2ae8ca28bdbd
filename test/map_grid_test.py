import pytest

from pathfinding.direction import Direction
from pathfinding.errors import InvalidGridError, OutOfBoundsError, PathfindingError
from pathfinding.grid import MapGrid


def test_new_grid_has_no_walls():
    grid = MapGrid(3, 2)

    assert grid.dimensions() == (3, 2)
    for x in range(3):
        for y in range(2):
            for direction in Direction:
                assert not grid.has_wall((x, y), direction)


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
def test_invalid_dimensions_raise(width, height):
    with pytest.raises(InvalidGridError):
        MapGrid(width, height)


def test_add_wall_sets_both_sides_by_default():
    grid = MapGrid(3, 3)
    grid.add_wall((1, 1), Direction.UP)

    assert grid.has_wall((1, 1), Direction.UP)
    assert grid.has_wall((1, 2), Direction.DOWN)
    assert grid.is_symmetric()


def test_one_sided_wall_breaks_symmetry():
    grid = MapGrid(3, 3)
    grid.add_wall((1, 1), Direction.RIGHT, both_sides=False)

    assert grid.has_wall((1, 1), Direction.RIGHT)
    assert not grid.has_wall((2, 1), Direction.LEFT)
    assert not grid.is_symmetric()


def test_remove_wall():
    grid = MapGrid(2, 2)
    grid.add_wall((0, 0), Direction.RIGHT)
    grid.remove_wall((1, 0), Direction.LEFT)

    assert not grid.has_wall((0, 0), Direction.RIGHT)
    assert not grid.has_wall((1, 0), Direction.LEFT)


def test_enclose_walls_cell_and_neighbours():
    grid = MapGrid(3, 3)
    grid.enclose((1, 1))

    for direction in Direction:
        assert grid.has_wall((1, 1), direction)
    assert grid.has_wall((0, 1), Direction.RIGHT)
    assert grid.has_wall((2, 1), Direction.LEFT)
    assert grid.has_wall((1, 0), Direction.UP)
    assert grid.has_wall((1, 2), Direction.DOWN)


def test_add_border():
    grid = MapGrid(3, 2)
    grid.add_border()

    assert grid.has_wall((0, 0), Direction.LEFT)
    assert grid.has_wall((0, 0), Direction.DOWN)
    assert grid.has_wall((2, 1), Direction.RIGHT)
    assert grid.has_wall((2, 1), Direction.UP)
    assert not grid.has_wall((1, 0), Direction.UP)
    assert not grid.has_wall((1, 1), Direction.LEFT)
    assert grid.is_symmetric()


def test_out_of_bounds_queries_raise():
    grid = MapGrid(2, 2)

    with pytest.raises(OutOfBoundsError) as error:
        grid.has_wall((2, 0), Direction.UP)
    assert error.value.coordinate == (2, 0)
    assert error.value.dimensions == (2, 2)

    with pytest.raises(PathfindingError):
        grid.add_wall((0, -1), Direction.UP)


def test_direction_helpers():
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.from_offset(1, 0) is Direction.RIGHT
    assert Direction.from_offset(1, 1) is None
    assert [direction.index for direction in Direction] == [0, 1, 2, 3]
