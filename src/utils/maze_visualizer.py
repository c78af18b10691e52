from typing import Dict, Optional

from ..maze.models import Maze, MazeSymbols
from ..solver.models import DIRECTIONS, WALL, Position, Route

ARROWS: Dict[str, str] = {
    "Right": ">",
    "Down": "v",
    "Left": "<",
    "Up": "^",
}


def trace_route(maze: Maze, route: Route) -> Dict[Position, str]:
    """Map every cell the ball rolls into to the arrow of its roll."""
    by_label = {d.label: d for d in DIRECTIONS}
    marks: Dict[Position, str] = {}
    row, col = maze.start

    for label, landing in zip(route.directions, route.landings):
        direction = by_label[label]
        while (row, col) != tuple(landing):
            row, col = row + direction.d_row, col + direction.d_col
            marks[Position(row, col)] = ARROWS[label]

    return marks


def render_maze(
    maze: Maze,
    route: Optional[Route] = None,
    symbols: Optional[MazeSymbols] = None
) -> str:
    """Render the maze to text, overlaying the route's rolls if given."""
    symbols = symbols or MazeSymbols()
    marks = trace_route(maze, route) if route else {}

    lines = []
    for r, cells in enumerate(maze.grid.cells):
        row = ''
        for c, cell in enumerate(cells):
            pos = Position(r, c)
            if pos == maze.start:
                row += symbols.start
            elif pos == maze.target:
                row += symbols.target
            elif pos in marks:
                row += marks[pos]
            else:
                row += symbols.wall if cell == WALL else symbols.open
        lines.append(row)

    return '\n'.join(lines)


if __name__ == '__main__':
    from ..maze.parsing import parse_maze
    from ..solver.search import find_shortest_route

    example = """
S...0
000.0
F...0
.0000
.....
"""

    maze, _ = parse_maze(example)
    route = find_shortest_route(maze.grid, maze.start, maze.target)

    print("Input maze:")
    print(render_maze(maze))
    print("\nRoute:")
    print(render_maze(maze, route))
