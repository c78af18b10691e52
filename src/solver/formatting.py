"""Human-readable route text."""

from typing import List, Sequence

from .models import Direction, Position, Step


NO_PATH_MESSAGE = "No path found!"


def display_coords(pos: Position) -> str:
    """Format a position as 1-based (x, y), i.e. (col + 1, row + 1)."""
    return f"({pos.col + 1}, {pos.row + 1})"


def describe_start(pos: Position) -> str:
    return f"Start at {display_coords(pos)}"


def describe_move(direction: Direction, pos: Position) -> str:
    return f"Move {direction.label} to {display_coords(pos)}"


def describe_step(step: Step) -> str:
    if step.direction is None:
        return describe_start(step.position)
    return describe_move(step.direction, step.position)


def format_route(steps: Sequence[str]) -> str:
    """
    Number each step and append the closing 'Done!' line.

    Example:
        1.  Start at (1, 1)
        2.  Move Down to (1, 3)
        3. Done!
    """
    lines: List[str] = [f"{i}.  {text}" for i, text in enumerate(steps, start=1)]
    lines.append(f"{len(steps) + 1}. Done!")
    return "\n".join(lines)
