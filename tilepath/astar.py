"""A* path finding over tile maps stored as JSON."""

from __future__ import annotations

import heapq
import itertools
import json
import math
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Sequence

from .point import Point

Heuristic = Callable[[Point, Point, int], int]

START_VALUE = 0
TARGET_VALUE = 8
WALL_VALUE = 3
WALKABLE_VALUE = -1

LEGEND = (
    "Visual depiction of Path traveled \n"
    "LEGEND: \n"
    "X = Wall \n"
    "S = Start Postion \n"
    "T = Target Position \n"
    "* = Battle Unit Traveled Path \n"
    ". = Walkable Grid Point \n"
    "? = Unknown Grid Point, check Tile Map file \n"
)


class TileMapError(Exception):
    """Raised when a tile map cannot be loaded or searched."""


@dataclass
class Node:
    """Search bookkeeping for one grid cell."""

    pos: Point = field(default_factory=Point)
    parent: Point = Point(-1, -1)
    f: int = 0
    g: int = 0
    h: int = 0


def manhattan(v1: Point, v2: Point, weight: int = 1) -> int:
    """Weighted Manhattan distance."""
    d = Point.delta(v1, v2)
    return int(weight * (d.x + d.y))


def euclidean(v1: Point, v2: Point, weight: int = 1) -> int:
    """Weighted Euclidean distance, truncated to an integer."""
    d = Point.delta(v1, v2)
    return int(weight * math.sqrt(d.x**2 + d.y**2))


def euclidean_no_sqr(v1: Point, v2: Point, weight: int = 1) -> int:
    """Weighted squared Euclidean distance."""
    d = Point.delta(v1, v2)
    return int(weight * (d.x**2 + d.y**2))


def dijkstra(v1: Point, v2: Point, weight: int = 1) -> int:
    """Heuristic used for the Dijkstra setting (squared Euclidean distance)."""
    d = Point.delta(v1, v2)
    return int(weight * (d.x**2 + d.y**2))


def _write_optional(file_name: str, text: str) -> None:
    if not file_name:
        return
    try:
        Path(file_name).write_text(text, encoding="utf-8")
    except OSError:
        pass


class AStar:
    """A* path finder on a 4-connected tile grid."""

    def __init__(self) -> None:
        self.weight = 1
        self.dimensions = Point(0, 0)
        self.start_pos = Point(0, 0)
        self.target_pos = Point(0, 0)
        self.grid: list[int] = []
        self.directions = (Point(-1, 0), Point(1, 0), Point(0, 1), Point(0, -1))
        self._came_from: list[Node] = []

    def load_file(self, file_name: str) -> None:
        """Load a tile map JSON file and locate its start and target cells."""
        try:
            with open(file_name, encoding="utf-8") as fh:
                print(f"Opened file: {file_name}")
                try:
                    document = json.load(fh)
                except json.JSONDecodeError as exc:
                    raise TileMapError(f"JSON parse error: {exc}") from exc
        except OSError as exc:
            raise TileMapError(f"Could not open file: {file_name}") from exc

        if not isinstance(document, dict):
            raise TileMapError(f"Unexpected JSON layout in {file_name}")

        tile_width = tile_height = -1
        for tileset in document.get("tilesets") or []:
            try:
                tile_width = int(tileset["tilewidth"])
                tile_height = int(tileset["tileheight"])
            except (KeyError, TypeError, ValueError) as exc:
                raise TileMapError(f"Invalid tileset entry in {file_name}") from exc
            print(f"Tile Size: {tile_width} x {tile_height}")
        if tile_width < 1 or tile_height < 1:
            raise TileMapError(f"Invalid Tile size: {tile_width} x {tile_height}")

        data: list[int] = []
        for layer in document.get("layers") or []:
            try:
                data = [int(value) for value in layer["data"]]
            except (KeyError, TypeError, ValueError) as exc:
                raise TileMapError(f"Layer without usable data in {file_name}") from exc

        self.set_tile_data(data, tile_width, tile_height)
        self.find_start_pos(data)
        self.find_target_pos(data)

    def set_tile_data(self, data: Iterable[int], x_dim: int, y_dim: int) -> None:
        """Replace the grid and its dimensions."""
        self.dimensions = Point(x_dim, y_dim)
        self.grid = list(data)

    def find_start_pos(self, data: Sequence[int]) -> Point:
        """Set the start position from the first cell holding 0."""
        self.start_pos = self._locate(data, START_VALUE, "starting position")
        return self.start_pos

    def find_target_pos(self, data: Sequence[int]) -> Point:
        """Set the target position from the first cell holding 8."""
        self.target_pos = self._locate(data, TARGET_VALUE, "target positon")
        return self.target_pos

    def _locate(self, data: Sequence[int], value: int, label: str) -> Point:
        try:
            index = list(data).index(value)
        except ValueError:
            raise TileMapError(f"Value {value} ({label}) not found in the tile.") from None
        print(f"Value {value} ({label}) found at position: {index}")
        return self._to_2d(index)

    def find_path(self, heuristic: Heuristic, weight: int = 1) -> list[Point]:
        """Search from the start to the target and return the path of cells."""
        if not self.grid:
            raise TileMapError("No tile data loaded")
        self.weight = weight
        size = len(self.grid)
        came_from = [Node() for _ in range(size)]
        closed = [False] * size
        came_from[self._to_1d(self.start_pos)].parent = self.start_pos

        order = itertools.count()
        open_heap: list[tuple[int, int, Point]] = [(0, next(order), self.start_pos)]
        while open_heap:
            _, _, current = heapq.heappop(open_heap)
            if current == self.target_pos:
                break
            current_index = self._to_1d(current)
            if closed[current_index]:
                continue
            closed[current_index] = True
            current_g = came_from[current_index].g

            for direction in self.directions:
                neighbor = current + direction
                if not self._inside(neighbor):
                    continue
                neighbor_index = self._to_1d(neighbor)
                if self.grid[neighbor_index] == WALL_VALUE or closed[neighbor_index]:
                    continue
                g = current_g + 1
                h = heuristic(neighbor, self.target_pos, weight)
                f = g + h
                known = came_from[neighbor_index]
                if known.f == 0 or f < known.f:
                    heapq.heappush(open_heap, (f, next(order), neighbor))
                    came_from[neighbor_index] = Node(neighbor, current, f, g, h)

        self._came_from = came_from
        return self._build_path()

    def _build_path(self) -> list[Point]:
        path: list[Point] = []
        current = self.target_pos
        while (node := self._came_from[self._to_1d(current)]).parent != current:
            if not self._inside(node.parent):
                raise TileMapError("No path from start to target")
            path.append(current)
            current = node.parent
        path.append(self.start_pos)
        path.reverse()
        return path

    def format_path_coords(self, path: Sequence[Point]) -> str:
        """Return the path as a coordinate listing."""
        lines = ["(X,Y) path coordinates \n", f"{len(path)} steps taken \n"]
        lines.extend(f"( {p.x} , {p.y} ) \n" for p in path)
        return "".join(lines)

    def print_path_coords(self, path: Sequence[Point], file_name: str = "") -> None:
        """Print the coordinate listing, also writing it to file_name if given."""
        text = self.format_path_coords(path)
        sys.stdout.write(text)
        _write_optional(file_name, text)

    def render_path(self, path: Sequence[Point]) -> str:
        """Return a legend and an ASCII drawing of the grid with the path."""
        on_path = set(path)
        rows = []
        for y in range(self.dimensions.y):
            cells = []
            for x in range(self.dimensions.x):
                point = Point(x, y)
                value = self.grid[self._to_1d(point)]
                if value == WALL_VALUE:
                    char = "X"
                elif point == self.start_pos:
                    char = "S"
                elif point == self.target_pos:
                    char = "T"
                elif point in on_path:
                    char = "*"
                elif value == WALKABLE_VALUE:
                    char = "."
                else:
                    char = "?"
                cells.append(f"{char} ")
            rows.append("".join(cells) + "\n")
        return LEGEND + "".join(rows)

    def draw_path(self, path: Sequence[Point], file_name: str = "") -> None:
        """Print the drawing, also writing it to file_name if given."""
        text = self.render_path(path)
        sys.stdout.write(text)
        _write_optional(file_name, text)

    def _inside(self, pos: Point) -> bool:
        return 0 <= pos.x < self.dimensions.x and 0 <= pos.y < self.dimensions.y

    def _to_1d(self, pos: Point) -> int:
        return pos.y * self.dimensions.x + pos.x

    def _to_2d(self, index: int) -> Point:
        if self.dimensions.x < 1:
            raise TileMapError("Grid dimensions are not set")
        return Point(index % self.dimensions.x, index // self.dimensions.x)