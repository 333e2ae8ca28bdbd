import logging

import numpy as np

from .config import DIAGONAL_COST, STRAIGHT_COST
from .errors import InvalidGridError, OutOfBoundsError
from .node import Node

logger = logging.getLogger(__name__)


def octile_distance(dx, dy):
    """Octile cost for axis offsets; works on ints and on numpy arrays alike."""
    dx = np.abs(dx)
    dy = np.abs(dy)
    low = np.minimum(dx, dy)
    high = np.maximum(dx, dy)
    return DIAGONAL_COST * low + STRAIGHT_COST * (high - low)


class NodeGrid:
    """Overlay of nodes on top of a map grid, built for one target cell.

    Every node's heuristic is computed once here against ``target`` and never
    changes afterwards, so a grid can be shared by any number of searches that
    head for the same target.
    """

    def __init__(self, target, dimensions):
        width, height = dimensions
        if width < 1 or height < 1:
            raise InvalidGridError(f"Grid must be at least 1x1, got {width}x{height}")

        self.width = width
        self.height = height
        if not self.in_bounds(target):
            raise OutOfBoundsError(target, dimensions)
        self.target = tuple(target)

        self.h_scores = self.create_heuristics()
        self.grid = [[Node(x, y, int(self.h_scores[x, y])) for y in range(height)] for x in range(width)]

        logger.debug(f"Built {width}x{height} node grid for target {self.target}")

    def create_heuristics(self):
        xs, ys = np.indices((self.width, self.height))
        return octile_distance(xs - self.target[0], ys - self.target[1])

    def dimensions(self):
        return (self.width, self.height)

    def in_bounds(self, coordinate) -> bool:
        x, y = coordinate
        return 0 <= x < self.width and 0 <= y < self.height

    def get_node(self, x: int, y: int) -> Node:
        if self.in_bounds((x, y)):
            return self.grid[x][y]
        return None
