"""Maze loading for the rolling maze solver."""

from .models import Maze, MazeSymbols, ParseIssue
from .parsing import parse_maze, load_maze

__all__ = [
    "Maze",
    "MazeSymbols",
    "ParseIssue",
    "parse_maze",
    "load_maze",
]
