from enum import Enum


class Direction(Enum):
    # y grows upwards, matching the maze layout
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self):
        return self.value

    @property
    def index(self):
        """Position of this direction in a cell's wall flags."""
        return _ORDER.index(self)

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))

    @staticmethod
    def from_offset(xdiff, ydiff):
        for direction in Direction:
            if direction.offset == (xdiff, ydiff):
                return direction
        return None


# Expansion order used by the search
_ORDER = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]
