"""Roll search: shortest route for a ball rolling through a grid maze."""

from .models import (
    CellState,
    OPEN,
    WALL,
    Position,
    Direction,
    RIGHT,
    DOWN,
    LEFT,
    UP,
    DIRECTIONS,
    Grid,
    Step,
    RollState,
    Route,
)
from .formatting import NO_PATH_MESSAGE, format_route, describe_start, describe_move
from .search import find_shortest_route, roll, validate_request

__all__ = [
    # Search
    "find_shortest_route",
    "roll",
    "validate_request",
    # Models
    "CellState",
    "OPEN",
    "WALL",
    "Position",
    "Direction",
    "RIGHT",
    "DOWN",
    "LEFT",
    "UP",
    "DIRECTIONS",
    "Grid",
    "Step",
    "RollState",
    "Route",
    # Formatting
    "NO_PATH_MESSAGE",
    "format_route",
    "describe_start",
    "describe_move",
]
