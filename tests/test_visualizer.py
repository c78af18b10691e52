"""Test maze rendering with route overlays."""

from src.maze import MazeSymbols, parse_maze
from src.solver import Position, find_shortest_route
from src.utils.maze_visualizer import render_maze, trace_route


CLASSIC_TEXT = """S...0
000.0
F...0
.0000
....."""


class TestRenderMaze:
    """Test text rendering."""

    def test_plain_maze_round_trips(self):
        """Without a route the maze renders as it was written."""
        maze, _ = parse_maze(CLASSIC_TEXT)
        assert render_maze(maze) == CLASSIC_TEXT

    def test_route_overlay(self):
        """Cells crossed by each roll carry that roll's arrow."""
        maze, _ = parse_maze(CLASSIC_TEXT)
        route = find_shortest_route(maze.grid, maze.start, maze.target)

        assert render_maze(maze, route) == (
            "S>>>0\n"
            "000v0\n"
            "F<<v0\n"
            ".0000\n"
            "....."
        )

    def test_custom_symbols(self):
        symbols = MazeSymbols(open=" ", wall="#", start="B", target="H")
        maze, _ = parse_maze("B.#\n..H".replace(".", " "), symbols)
        assert render_maze(maze, symbols=symbols) == "B #\n  H"

    def test_start_is_target(self):
        """A route with no moves leaves the grid unmarked."""
        maze, _ = parse_maze("SF\n..")
        maze = maze.model_copy(update={"target": Position(0, 0)})
        route = find_shortest_route(maze.grid, maze.start, maze.target)

        assert trace_route(maze, route) == {}
        assert render_maze(maze, route) == "S.\n.."


class TestTraceRoute:
    """Test route tracing."""

    def test_marks_every_crossed_cell(self):
        maze, _ = parse_maze(CLASSIC_TEXT)
        route = find_shortest_route(maze.grid, maze.start, maze.target)
        marks = trace_route(maze, route)

        assert marks[Position(0, 1)] == ">"
        assert marks[Position(2, 3)] == "v"
        assert marks[Position(2, 1)] == "<"
        assert Position(2, 0) in marks
        assert len(marks) == route.distance
