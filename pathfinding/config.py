import numpy as np

# Movement costs (scaled by 10 so a diagonal is roughly 10 * sqrt(2))
STRAIGHT_COST = 10
DIAGONAL_COST = 14

# Accumulated cost of a node that no search has reached yet
UNVISITED_COST = int(np.iinfo(np.int64).max)

# Node grids kept per AStar instance; least recently used is dropped first
NODE_GRID_CACHE_SIZE = 8
