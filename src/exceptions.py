"""
Custom exceptions for the rolling maze solver.
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .maze.models import ParseIssue


class RollingMazeError(Exception):
    """Base exception for the application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidInputError(RollingMazeError):
    """Raised when a search request violates the grid or position preconditions."""
    pass


class MazeLoadError(RollingMazeError):
    """Raised when a maze file cannot be read or parsed."""
    def __init__(self, message: str, issues: Optional[List["ParseIssue"]] = None):
        self.issues = list(issues or [])
        super().__init__(message)
