"""Command line entry point: load a tile map, find a path and report it."""

from __future__ import annotations

import argparse
import sys

from .astar import AStar, TileMapError, euclidean

DEFAULT_FILE_NAME = "take_home_project.json"
COORDS_OUTPUT = "PathOutput.txt"
VISUAL_OUTPUT = "PathVisual.txt"
HEURISTIC_WEIGHT = 10


def _ask_file_name() -> str:
    print(f"Enter the JSON input filename (press Enter to use '{DEFAULT_FILE_NAME}'): ")
    try:
        answer = input()
    except EOFError:
        answer = ""
    return answer or DEFAULT_FILE_NAME


def _pause() -> None:
    try:
        input("Press any key to continue . . .")
    except EOFError:
        pass


def main(argv: list[str] | None = None) -> int:
    """Run the path finder; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="tilepath", description=__doc__)
    parser.add_argument("file", nargs="?", help="tile map JSON file")
    parser.add_argument("--no-pause", action="store_true", help="do not wait before exiting")
    args = parser.parse_args(argv)

    file_name = args.file if args.file is not None else _ask_file_name()

    astar = AStar()
    try:
        astar.load_file(file_name)
        path = astar.find_path(euclidean, HEURISTIC_WEIGHT)
    except TileMapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    astar.print_path_coords(path, COORDS_OUTPUT)
    astar.draw_path(path, VISUAL_OUTPUT)

    if not args.no_pause:
        _pause()
    return 0


if __name__ == "__main__":
    sys.exit(main())