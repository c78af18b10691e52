"""
Main entry point for the rolling maze solver.

Usage:
    python -m src.main inputs/classic.txt
    python -m src.main inputs/classic.txt --show --verbose
    python -m src.main --config config.yaml --interactive
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .config import AppConfig, load_config
from .exceptions import InvalidInputError, MazeLoadError
from .maze import Maze, load_maze
from .solver import NO_PATH_MESSAGE, Route, find_shortest_route
from .utils.maze_visualizer import render_maze

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

MAIN_MENU = """Main Menu:
1. Load new input
0. Quit the application
Please enter your choice: """

LOAD_INPUT_MENU = """
Load Input Menu:
1. Enter file name
2. Go back to main menu
Please enter your choice: """

CALCULATION_MENU = """
Calculation Menu:
1. Print the path
2. Restart the application
Please enter your choice: """


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def format_elapsed(seconds: float) -> str:
    """Format a duration the way results are reported: ms, or whole seconds above one second."""
    millis = int(seconds * 1000)
    if millis > 1000:
        return f"Time elapsed: {int(seconds)} seconds"
    return f"Time elapsed: {millis} milliseconds"


def solve(maze: Maze) -> Tuple[Optional[Route], float]:
    """
    Run the roll search on a loaded maze.

    Returns:
        Tuple of (route or None, elapsed seconds)
    """
    started = time.perf_counter()
    route = find_shortest_route(maze.grid, maze.start, maze.target)
    return route, time.perf_counter() - started


def print_solution(maze: Maze, config: AppConfig, show: bool = False) -> Optional[Route]:
    """Solve the maze and print the route (or the no-path message) and timing."""
    route, elapsed = solve(maze)

    if route is None:
        print(NO_PATH_MESSAGE)
    else:
        print(route.render())
        if show:
            print()
            print(render_maze(maze, route, config.symbols))

    if config.show_timing:
        print(format_elapsed(elapsed))

    return route


def run_once(maze_path: str, config: AppConfig, show: bool = False) -> int:
    """Load one maze file, solve it, and print the result. Returns an exit code."""
    try:
        maze = load_maze(maze_path, config.symbols)
        print_solution(maze, config, show=show)
    except (MazeLoadError, InvalidInputError) as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


def prompt_file_name(config: AppConfig, input_fn: InputFn) -> Optional[Path]:
    """Ask for a maze file in the inputs folder until a valid one is given, or '2' to go back."""
    while True:
        print(f"Note: It should be a text file with the '{config.file_extension}' file extension")
        name = input_fn("Input file name:  ").strip()
        if name == "2":
            return None

        path = config.inputs_path / name
        if name.endswith(config.file_extension) and path.is_file():
            return path
        print("\nInvalid file name format or file not found in the path")


def calculation_menu(maze: Maze, config: AppConfig, input_fn: InputFn) -> None:
    """Offer to print the route for a loaded maze until the user restarts."""
    while True:
        choice = input_fn(CALCULATION_MENU).strip()

        if choice == "1":
            print("\nFinding the shortest distance")
            print_solution(maze, config)
        elif choice == "2":
            print()
            return
        else:
            print("Invalid choice")


def load_from_inputs(config: AppConfig, input_fn: InputFn) -> None:
    """Load a maze chosen by the user, then hand over to the calculation menu."""
    print(f"\nPlease place the text file in the '{config.inputs_dir}' folder and enter the file name")
    path = prompt_file_name(config, input_fn)
    if path is None:
        return

    try:
        maze = load_maze(path, config.symbols)
    except MazeLoadError as e:
        logger.error(f"Error reading input file: {e.message}")
        print(f"Could not load maze: {e.message}")
        return

    calculation_menu(maze, config, input_fn)


def load_new_input(config: AppConfig, input_fn: InputFn) -> None:
    while True:
        choice = input_fn(LOAD_INPUT_MENU).strip()

        if choice == "1":
            load_from_inputs(config, input_fn)
            return
        elif choice == "2":
            return
        else:
            print("Invalid choice")


def run_interactive(config: AppConfig, input_fn: Optional[InputFn] = None) -> int:
    """Run the menu loop until the user quits or input ends."""
    input_fn = input_fn or input
    print("Welcome to the rolling maze solver")

    try:
        while True:
            choice = input_fn(MAIN_MENU).strip()

            if choice == "0":
                break
            elif choice == "1":
                load_new_input(config, input_fn)
            else:
                print("Invalid choice\n")
    except EOFError:
        print()
    except KeyboardInterrupt:
        print("\nInterrupted by user")

    print("\nThank you for using the rolling maze solver. Goodbye!")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the shortest route for a ball rolling through a maze",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Maze file format (default symbols):
  .  open floor
  0  wall
  S  ball start
  F  hole

Example config.yaml:
  inputs_dir: inputs
  show_timing: true
  log_level: INFO
  symbols:
    wall: "#"
        """
    )
    parser.add_argument(
        "maze",
        nargs="?",
        help="Path to a maze text file (omit to use the interactive menu)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Run the interactive menu"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Draw the maze with the route overlaid"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else AppConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else config.log_level)

    if args.interactive or not args.maze:
        return run_interactive(config)

    return run_once(args.maze, config, show=args.show)


if __name__ == "__main__":
    sys.exit(main())
