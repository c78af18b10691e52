"""Data models for the roll search."""

from typing import List, Literal, NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator


# Type aliases
CellState = Literal["OPEN", "WALL"]

OPEN: CellState = "OPEN"
WALL: CellState = "WALL"


class Position(NamedTuple):
    """A grid cell, 0-indexed."""
    row: int
    col: int


class Direction(NamedTuple):
    """A compass move as a unit (d_row, d_col) vector."""
    label: str
    d_row: int
    d_col: int


RIGHT = Direction("Right", 0, 1)
DOWN = Direction("Down", 1, 0)
LEFT = Direction("Left", 0, -1)
UP = Direction("Up", -1, 0)

# Expansion order; changing it changes which of several equal routes is reported
DIRECTIONS: Tuple[Direction, ...] = (RIGHT, DOWN, LEFT, UP)


class Grid(BaseModel):
    """
    Immutable rectangular maze grid.

    Cells are addressed as cells[row][col]. An empty grid is representable
    so that the search can reject it with a proper error.
    """

    model_config = ConfigDict(frozen=True)

    cells: Tuple[Tuple[CellState, ...], ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_rectangular(self) -> "Grid":
        widths = {len(row) for row in self.cells}
        if len(widths) > 1:
            raise ValueError(f"Grid rows must all have the same length, got widths {sorted(widths)}")
        return self

    @classmethod
    def from_strings(cls, rows: List[str], wall: str = "0") -> "Grid":
        """
        Build a grid from text rows.

        Every `wall` character becomes WALL; anything else is OPEN.
        """
        return cls(cells=tuple(
            tuple(WALL if ch == wall else OPEN for ch in row)
            for row in rows
        ))

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, pos: Position) -> bool:
        """True if `pos` is inside the grid and not a wall."""
        return self.in_bounds(pos) and self.cells[pos[0]][pos[1]] == OPEN


class Step(NamedTuple):
    """One entry of a route: where the ball came to rest and how it got there."""
    direction: Optional[Direction]  # None for the starting position
    position: Position


class RollState(NamedTuple):
    """Frontier entry: the ball at rest after a sequence of rolls."""
    position: Position
    distance: int
    steps: Tuple[Step, ...]


class Route(BaseModel):
    """Shortest route found by the search."""

    model_config = ConfigDict(frozen=True)

    steps: List[str] = Field(default_factory=list)
    directions: List[str] = Field(default_factory=list)
    landings: List[Position] = Field(default_factory=list)
    distance: int = Field(default=0, ge=0)

    @property
    def num_moves(self) -> int:
        """Number of rolls in the route (the start line is not a move)."""
        return len(self.directions)

    def render(self) -> str:
        """Render the numbered route text, ending with 'Done!'."""
        from .formatting import format_route

        return format_route(self.steps)
