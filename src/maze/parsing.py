"""Maze text parsing and file loading."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..exceptions import MazeLoadError
from ..solver.models import OPEN, WALL, CellState, Grid, Position
from .models import Maze, MazeSymbols, ParseIssue

logger = logging.getLogger(__name__)


def parse_maze(
    text: str,
    symbols: Optional[MazeSymbols] = None
) -> Tuple[Optional[Maze], List[ParseIssue]]:
    """
    Parse maze text into a Maze with issue collection.

    Each non-blank line is one row. The start and target markers are open
    cells. Blank lines and trailing whitespace are ignored.

    Returns a tuple of (maze, issues); maze is None whenever issues is non-empty.
    """
    symbols = symbols or MazeSymbols()
    issues: List[ParseIssue] = []

    # Whitespace configured as a symbol is maze content, never padding
    padding = "".join(ch for ch in " \t\f\v\r\n" if ch not in symbols.model_dump().values())
    numbered = [
        (i, line.rstrip(padding))
        for i, line in enumerate(text.splitlines(), start=1)
        if line.rstrip(padding)
    ]

    if not numbered:
        issues.append(ParseIssue(
            code="EMPTY_MAZE",
            message="Maze description is empty"
        ))
        return None, issues

    width = len(numbered[0][1])
    starts: List[Tuple[int, Position]] = []
    targets: List[Tuple[int, Position]] = []
    cells: List[Tuple[CellState, ...]] = []

    for row, (line_no, line) in enumerate(numbered):
        if len(line) != width:
            issues.append(ParseIssue(
                code="RAGGED_ROW",
                message=f"Row has {len(line)} cells, expected {width}",
                line=line_no
            ))

        row_cells: List[CellState] = []
        for col, ch in enumerate(line):
            if ch == symbols.wall:
                row_cells.append(WALL)
                continue

            if ch == symbols.start:
                starts.append((line_no, Position(row, col)))
            elif ch == symbols.target:
                targets.append((line_no, Position(row, col)))
            elif ch != symbols.open:
                issues.append(ParseIssue(
                    code="INVALID_CHARACTER",
                    message=f"Unexpected character '{ch}'",
                    line=line_no,
                    column=col + 1
                ))
            row_cells.append(OPEN)
        cells.append(tuple(row_cells))

    for markers, name, char in ((starts, "START", symbols.start), (targets, "TARGET", symbols.target)):
        if not markers:
            issues.append(ParseIssue(
                code=f"MISSING_{name}",
                message=f"No {name.lower()} marker '{char}' found"
            ))
        for line_no, pos in markers[1:]:
            issues.append(ParseIssue(
                code=f"DUPLICATE_{name}",
                message=f"Extra {name.lower()} marker '{char}' (first one is on line {markers[0][0]})",
                line=line_no,
                column=pos.col + 1
            ))

    if issues:
        return None, issues

    maze = Maze(
        grid=Grid(cells=tuple(cells)),
        start=starts[0][1],
        target=targets[0][1],
    )
    return maze, issues


def load_maze(path: str | Path, symbols: Optional[MazeSymbols] = None) -> Maze:
    """
    Read and parse a maze file.

    Raises:
        MazeLoadError: If the file is missing, empty or malformed
    """
    path = Path(path)

    if not path.is_file():
        raise MazeLoadError(f"Maze file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeLoadError(f"Could not read maze file {path}: {e}") from e

    maze, issues = parse_maze(text, symbols)
    if maze is None:
        summary = "; ".join(
            f"line {issue.line}: {issue.message}" if issue.line else issue.message
            for issue in issues
        )
        raise MazeLoadError(f"Invalid maze file {path}: {summary}", issues)

    logger.info(f"Loaded {maze.rows}x{maze.cols} maze from {path}")
    return maze
