import textwrap

import pytest

from pathfinding.direction import Direction
from pathfinding.errors import InvalidGridError
from util.grid_loader import load_grid, load_grid_file

MAZE = textwrap.dedent("""
    +-+-+
    |   |
    + +-+
    | | |
    +-+-+
""")


def test_load_grid_reads_walls():
    grid = load_grid(MAZE)

    assert grid.dimensions() == (2, 2)
    # Top row of the drawing is y=1
    assert grid.has_wall((0, 1), Direction.UP)
    assert not grid.has_wall((0, 1), Direction.RIGHT)
    assert not grid.has_wall((0, 1), Direction.DOWN)
    assert grid.has_wall((1, 1), Direction.DOWN)
    assert grid.has_wall((0, 0), Direction.RIGHT)
    assert grid.has_wall((1, 0), Direction.LEFT)
    assert grid.has_wall((1, 0), Direction.UP)
    assert grid.is_symmetric()


def test_load_grid_file(tmp_path):
    maze_file = tmp_path / "maze.txt"
    maze_file.write_text(MAZE, encoding="utf-8")

    grid = load_grid_file(maze_file)

    assert grid.dimensions() == (2, 2)
    assert grid.has_wall((0, 0), Direction.RIGHT)


@pytest.mark.parametrize("text", [
    "+-+\n| |\n",
    "+-+-\n|   \n+-+-\n",
    "+-+-+\n|   |\n+-+\n",
    "++\n",
])
def test_malformed_maze_raises(text):
    with pytest.raises(InvalidGridError):
        load_grid(text)
