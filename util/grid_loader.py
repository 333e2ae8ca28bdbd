# util/grid_loader.py

from pathfinding.direction import Direction
from pathfinding.errors import InvalidGridError
from pathfinding.grid import MapGrid


def load_grid(text: str) -> MapGrid:
    """
    Builds a MapGrid from an ASCII drawing of a maze.

    Cells sit on odd rows and columns; the characters between them are the walls:

        +-+-+
        |   |
        + +-+
        | | |
        +-+-+

    The top line of the drawing is the highest y, so UP points up on screen.
    A '|' or '-' on a boundary walls both cells that share it.

    :param text: The maze drawing
    :return: The parsed MapGrid
    """
    lines = text.strip("\n").splitlines()
    if len(lines) < 3 or len(lines) % 2 == 0:
        raise InvalidGridError(f"Maze needs an odd number of lines (at least 3), got {len(lines)}")

    line_width = len(lines[0])
    if line_width < 3 or line_width % 2 == 0:
        raise InvalidGridError(f"Maze lines need an odd length (at least 3), got {line_width}")
    for row, line in enumerate(lines):
        if len(line) != line_width:
            raise InvalidGridError(f"Line {row} has length {len(line)}, expected {line_width}")

    width = line_width // 2
    height = len(lines) // 2
    grid = MapGrid(width, height)

    for x in range(width):
        for y in range(height):
            row = 2 * (height - 1 - y) + 1
            col = 2 * x + 1

            if lines[row - 1][col] == '-':
                grid.add_wall((x, y), Direction.UP)
            if lines[row + 1][col] == '-':
                grid.add_wall((x, y), Direction.DOWN)
            if lines[row][col - 1] == '|':
                grid.add_wall((x, y), Direction.LEFT)
            if lines[row][col + 1] == '|':
                grid.add_wall((x, y), Direction.RIGHT)

    return grid


def load_grid_file(path) -> MapGrid:
    with open(path, encoding="utf-8") as handle:
        return load_grid(handle.read())
