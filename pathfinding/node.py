from .config import UNVISITED_COST


class Node:
    """Overlay node for one map cell. Holds the heuristic towards a fixed target."""

    __slots__ = ("x", "y", "h_score")

    def __init__(self, x: int, y: int, h_score: int):
        self.x = x
        self.y = y
        self.h_score = h_score

    @property
    def position(self):
        return (self.x, self.y)

    def __eq__(self, other):
        return isinstance(other, Node) and (self.x, self.y) == (other.x, other.y)

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Node({self.x}, {self.y}, h={self.h_score})"


class NodeRecord:
    """Per-search state of a node: accumulated cost and back-pointer."""

    __slots__ = ("node", "g_score", "parent")

    def __init__(self, node: Node):
        self.node = node
        self.g_score = UNVISITED_COST  # Distance from start
        self.parent = None

    @property
    def position(self):
        return self.node.position

    @property
    def h_score(self):
        return self.node.h_score

    @property
    def f_score(self):
        return self.g_score + self.node.h_score

    def __repr__(self):
        return f"NodeRecord({self.node.x}, {self.node.y}, g={self.g_score}, h={self.node.h_score})"


class SearchState:
    """Records of every node touched by a single search, keyed by coordinate."""

    def __init__(self):
        self.records = {}

    def record(self, node: Node) -> NodeRecord:
        record = self.records.get(node.position)
        if record is None:
            record = NodeRecord(node)
            self.records[node.position] = record
        return record
