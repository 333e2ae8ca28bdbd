import heapq
import itertools
import logging
import threading
from collections import OrderedDict

from .config import NODE_GRID_CACHE_SIZE
from .direction import Direction
from .errors import OutOfBoundsError
from .node import Node, SearchState
from .node_grid import NodeGrid, octile_distance

logger = logging.getLogger(__name__)


class AStar:
    def __init__(self, cache_size: int = NODE_GRID_CACHE_SIZE):
        # (target, dimensions) -> NodeGrid, oldest use first
        self.node_grids = OrderedDict()
        self.cache_size = max(1, cache_size)
        self._lock = threading.Lock()

    @staticmethod
    def calculate_distance(a, b):
        return int(octile_distance(a[0] - b[0], a[1] - b[1]))

    @staticmethod
    def get_neighbours(node: Node, node_grid: NodeGrid, grid):
        """Nodes reachable in one step, judged by the walls of ``node``'s own cell."""
        neighbours = []
        for direction in Direction:
            dx, dy = direction.offset
            neighbour = node_grid.get_node(node.x + dx, node.y + dy)
            if neighbour is None:
                continue
            if not grid.has_wall(node.position, direction):
                neighbours.append(neighbour)
        return neighbours

    @staticmethod
    def reverse_path(state: SearchState, start, end):
        """Walk back-pointers from ``end``; the start position is left out."""
        path = []
        current = state.records[end]
        while current.position != start:
            path.append(current.position)
            current = current.parent
        return path[::-1]

    def node_grid_for(self, target, grid) -> NodeGrid:
        dimensions = tuple(grid.dimensions())
        key = (tuple(target), dimensions)
        with self._lock:
            node_grid = self.node_grids.get(key)
            if node_grid is not None:
                logger.debug(f"Reusing node grid for target {key[0]}")
                self.node_grids.move_to_end(key)
                return node_grid

            node_grid = NodeGrid(target, dimensions)
            self.node_grids[key] = node_grid
            while len(self.node_grids) > self.cache_size:
                evicted, _ = self.node_grids.popitem(last=False)
                logger.debug(f"Dropped node grid for target {evicted[0]}")
        return node_grid

    def invalidate(self, target=None):
        """Drop cached node grids, either all of them or those built for ``target``."""
        with self._lock:
            if target is None:
                self.node_grids.clear()
                return
            for key in [key for key in self.node_grids if key[0] == tuple(target)]:
                del self.node_grids[key]

    def find_path(self, start, end, grid):
        """
        Find the cheapest path from ``start`` to ``end`` on a walled grid.

        Parameters:
        ----------
        start : tuple[int, int]
            Cell the agent stands on
        end : tuple[int, int]
            Cell to reach
        grid : MapGrid
            Anything offering ``dimensions()`` and ``has_wall(coordinate, direction)``

        Returns:
        -------
        list[tuple[int, int]] | None
            Coordinates from the first step up to and including ``end``; empty when
            ``start == end``. None when ``end`` cannot be reached.
        """
        start = tuple(start)
        end = tuple(end)
        node_grid = self.node_grid_for(end, grid)
        if not node_grid.in_bounds(start):
            raise OutOfBoundsError(start, node_grid.dimensions())

        state = SearchState()
        start_record = state.record(node_grid.get_node(*start))
        start_record.g_score = 0

        # Entries are (f, h, order of first insertion, position). A node keeps
        # its insertion order when its cost drops, so ties on f and h go to
        # whichever node entered the open set first.
        counter = itertools.count()
        insertion_order = {start: next(counter)}
        open_heap = [(start_record.f_score, start_record.h_score, insertion_order[start], start)]
        open_set = {start}
        closed_set = set()

        while open_heap:
            f_score, _, _, position = heapq.heappop(open_heap)
            current = state.records[position]
            # Skip entries superseded by a cheaper push or already expanded
            if position in closed_set or f_score != current.f_score:
                continue
            open_set.discard(position)
            closed_set.add(position)

            if position == end:
                path = AStar.reverse_path(state, start, end)
                logger.info(f"Found path from {start} to {end} with {len(path)} steps")
                return path

            for neighbour in AStar.get_neighbours(current.node, node_grid, grid):
                if neighbour.position in closed_set:
                    continue

                record = state.record(neighbour)
                tentative_g = current.g_score + AStar.calculate_distance(current.position, neighbour.position)

                if tentative_g < record.g_score or neighbour.position not in open_set:
                    record.g_score = tentative_g
                    record.parent = current

                    if neighbour.position not in open_set:
                        open_set.add(neighbour.position)
                        insertion_order[neighbour.position] = next(counter)
                    heapq.heappush(open_heap, (record.f_score, record.h_score,
                                               insertion_order[neighbour.position], neighbour.position))

        logger.warning(f"No path from {start} to {end}")
        return None

    def find_path_fragment(self, length: int, start, end, grid):
        """
        Finds the first `length` steps of the path from `start` to `end`.
        """
        full_path = self.find_path(start, end, grid)
        return full_path[:length] if full_path is not None else None


_default = AStar()


def find_path(start, end, grid):
    return _default.find_path(start, end, grid)
