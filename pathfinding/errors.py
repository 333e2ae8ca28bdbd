class PathfindingError(ValueError):
    """Base class for precondition violations raised by the pathfinder."""


class OutOfBoundsError(PathfindingError):
    def __init__(self, coordinate, dimensions):
        self.coordinate = coordinate
        self.dimensions = dimensions
        super().__init__(f"Coordinate {coordinate} is outside a {dimensions[0]}x{dimensions[1]} grid")


class InvalidGridError(PathfindingError):
    pass
