"""
Breadth-first roll search.

The ball does not move one cell at a time: each edge of the search is a
roll that continues until the next cell is a wall or off the grid, or until
the ball sits on the target. States are the cells where rolls come to rest.
"""

import logging
from collections import deque
from typing import Deque, Optional, Set, Tuple

from ..exceptions import InvalidInputError
from .formatting import describe_step
from .models import DIRECTIONS, Direction, Grid, Position, RollState, Route, Step

logger = logging.getLogger(__name__)


def validate_request(grid: Grid, start: Position, target: Position) -> None:
    """
    Check the search preconditions.

    Raises:
        InvalidInputError: If the grid is empty, or start/target is out of
            bounds or on a wall.
    """
    if grid.rows == 0 or grid.cols == 0:
        raise InvalidInputError(f"Grid must have at least one row and one column (got {grid.rows}x{grid.cols})")

    for name, pos in (("start", start), ("target", target)):
        if not grid.in_bounds(pos):
            raise InvalidInputError(
                f"{name.capitalize()} {tuple(pos)} is outside the {grid.rows}x{grid.cols} grid"
            )
        if not grid.is_open(pos):
            raise InvalidInputError(f"{name.capitalize()} {tuple(pos)} is a wall cell")


def roll(grid: Grid, origin: Position, direction: Direction, target: Position) -> Tuple[Position, int]:
    """
    Roll the ball from `origin` until it stops.

    The ball stops in front of a wall or the grid edge, or on `target`
    (it never rolls past the target).

    Returns:
        Tuple of (landing position, number of cells traveled)
    """
    row, col = origin
    traveled = 0
    while (row, col) != target:
        nxt = Position(row + direction.d_row, col + direction.d_col)
        if not grid.is_open(nxt):
            break
        row, col = nxt
        traveled += 1
    return Position(row, col), traveled


def build_route(state: RollState) -> Route:
    """Build the final Route from the state that reached the target."""
    moves = [step for step in state.steps if step.direction is not None]
    return Route(
        steps=[describe_step(step) for step in state.steps],
        directions=[step.direction.label for step in moves],
        landings=[step.position for step in moves],
        distance=state.distance,
    )


def find_shortest_route(grid: Grid, start: Position, target: Position) -> Optional[Route]:
    """
    Find the route that rolls the ball from `start` into `target`.

    Rolls are explored breadth-first, trying Right, Down, Left and Up from
    each resting cell. A cell is claimed by the first roll that lands on it;
    later rolls landing there are discarded, whatever their distance.

    Args:
        grid: The maze
        start: Ball position
        target: Hole position

    Returns:
        The Route, or None if no sequence of rolls reaches the target

    Raises:
        InvalidInputError: If the grid or positions are invalid
    """
    try:
        start, target = Position(*start), Position(*target)
    except TypeError as e:
        raise InvalidInputError(f"Start and target must be (row, col) pairs, got {start!r} and {target!r}") from e
    if not all(isinstance(v, int) for v in start + target):
        raise InvalidInputError(f"Coordinates must be integers, got {tuple(start)} and {tuple(target)}")
    validate_request(grid, start, target)

    frontier: Deque[RollState] = deque([
        RollState(position=start, distance=0, steps=(Step(None, start),))
    ])
    visited: Set[Position] = {start}
    expansions = 0

    while frontier:
        current = frontier.popleft()

        if current.position == target:
            logger.debug(
                f"Target {tuple(target)} reached after {expansions} expansions "
                f"(distance {current.distance}, {len(current.steps) - 1} rolls)"
            )
            return build_route(current)

        expansions += 1
        for direction in DIRECTIONS:
            landing, traveled = roll(grid, current.position, direction, target)
            # Claim the landing cell now so equal-distance duplicates never enter the queue
            if landing in visited:
                continue
            visited.add(landing)
            frontier.append(RollState(
                position=landing,
                distance=current.distance + traveled,
                steps=current.steps + (Step(direction, landing),),
            ))

    logger.debug(f"No route from {tuple(start)} to {tuple(target)} after {expansions} expansions")
    return None
