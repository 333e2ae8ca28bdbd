import numpy as np

from .direction import Direction
from .errors import InvalidGridError, OutOfBoundsError


class MapGrid:
    """Maze map: a width x height block of cells with a wall flag per side.

    Walls are stored per cell, so a wall can exist on one side of a boundary
    only. Such a wall blocks leaving the cell through that side while still
    allowing entry from the neighbour (a one-way passage).
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise InvalidGridError(f"Grid must be at least 1x1, got {width}x{height}")

        self.width = width
        self.height = height
        self.walls = np.zeros((width, height, len(Direction)), dtype=bool)

    def dimensions(self):
        return (self.width, self.height)

    def in_bounds(self, coordinate) -> bool:
        x, y = coordinate
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, coordinate):
        if not self.in_bounds(coordinate):
            raise OutOfBoundsError(coordinate, self.dimensions())

    def has_wall(self, coordinate, direction: Direction) -> bool:
        self.check_bounds(coordinate)
        x, y = coordinate
        return bool(self.walls[x, y, direction.index])

    def add_wall(self, coordinate, direction: Direction, both_sides=True):
        self._set_wall(coordinate, direction, True, both_sides)

    def remove_wall(self, coordinate, direction: Direction, both_sides=True):
        self._set_wall(coordinate, direction, False, both_sides)

    def _set_wall(self, coordinate, direction, value, both_sides):
        self.check_bounds(coordinate)
        x, y = coordinate
        self.walls[x, y, direction.index] = value

        if both_sides:
            dx, dy = direction.offset
            neighbour = (x + dx, y + dy)
            if self.in_bounds(neighbour):
                self.walls[neighbour[0], neighbour[1], direction.opposite.index] = value

    def enclose(self, coordinate):
        """Wall off every side of a cell."""
        for direction in Direction:
            self.add_wall(coordinate, direction)

    def add_border(self):
        """Close the outer edge of the map."""
        self.walls[:, -1, Direction.UP.index] = True
        self.walls[:, 0, Direction.DOWN.index] = True
        self.walls[0, :, Direction.LEFT.index] = True
        self.walls[-1, :, Direction.RIGHT.index] = True

    def is_symmetric(self) -> bool:
        """True when every inner wall is matched by the neighbour's opposite wall."""
        up = self.walls[:, :-1, Direction.UP.index]
        down = self.walls[:, 1:, Direction.DOWN.index]
        right = self.walls[:-1, :, Direction.RIGHT.index]
        left = self.walls[1:, :, Direction.LEFT.index]
        return bool(np.array_equal(up, down) and np.array_equal(right, left))
