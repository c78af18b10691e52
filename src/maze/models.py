"""Data models for maze loading."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..solver.models import Grid, Position


class MazeSymbols(BaseModel):
    """Characters used in maze text files."""
    open: str = Field(default=".", min_length=1, max_length=1)
    wall: str = Field(default="0", min_length=1, max_length=1)
    start: str = Field(default="S", min_length=1, max_length=1)
    target: str = Field(default="F", min_length=1, max_length=1)

    @model_validator(mode="after")
    def _check_distinct(self) -> "MazeSymbols":
        chars = [self.open, self.wall, self.start, self.target]
        if len(set(chars)) != len(chars):
            raise ValueError(f"Maze symbols must be distinct, got {chars}")
        return self


class ParseIssue(BaseModel):
    """A single problem found while parsing a maze."""
    code: str
    message: str
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


class Maze(BaseModel):
    """A loaded maze: the grid plus the ball and hole positions."""

    model_config = ConfigDict(frozen=True)

    grid: Grid
    start: Position
    target: Position

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols
