# tilepath

Finds a path across a tile map with the A* algorithm. It then lists the
coordinates of the path and draws the map with the path marked on it in
plain characters.

## Installation

```
pip install .
```

## Tile maps

A map is a JSON object that has at least these keys:

- `tilesets`: a list of tilesets. Each one must have `tilewidth` and
  `tileheight`, and these give the grid's width and height in cells. If
  there is more than one tileset, the last one is used. Both values must be
  at least 1.
- `layers`: a list of layers. Each layer must have a `data` array of
  integers, laid out row by row. If there is more than one layer, the last
  one is used.

The values in the grid mean:

| value | meaning         | drawn as |
|-------|-----------------|----------|
| `0`   | start position  | `S`      |
| `8`   | target position | `T`      |
| `3`   | wall (blocked)  | `X`      |
| `-1`  | walkable tile   | `.`      |
| other | unknown         | `?`      |

The first `0` in the grid is the start and the first `8` is the target.
Moves go one cell up, down, left or right. Walls cannot be entered. Any
other value can be walked on.

## Command line

```
tilepath [FILE] [--no-pause]
```

If you leave out `FILE`, the command asks for the name of the map file.
Press Enter to use `take_home_project.json`. The command looks for a path
with the Euclidean heuristic at weight 10 and then:

- prints the path coordinates and writes them to `PathOutput.txt` in the
  current directory;
- prints a legend and a drawing of the map with the path marked on it, and
  writes the same text to `PathVisual.txt`.

When it has finished, the command waits for Enter before it exits. Pass
`--no-pause` to skip this wait. If the map cannot be loaded, or if there is
no path, the command prints the error and exits with status 1.

The drawing uses this legend:

```
X = Wall
S = Start Postion
T = Target Position
* = Battle Unit Traveled Path
. = Walkable Grid Point
? = Unknown Grid Point, check Tile Map file
```

## Library use

```python
from tilepath.astar import AStar, euclidean, manhattan

finder = AStar()
finder.load_file("take_home_project.json")
path = finder.find_path(euclidean, 10)

print(finder.format_path_coords(path))
print(finder.render_path(path))
```

You can also build a map in code, without a file:

```python
finder = AStar()
grid = [0, -1, -1,
        3,  3, -1,
        8, -1, -1]
finder.set_tile_data(grid, 3, 3)
finder.find_start_pos(grid)
finder.find_target_pos(grid)
path = finder.find_path(manhattan, 1)
```

- `AStar.load_file(file_name)` reads a map. It also sets the start and the
  target, and prints progress messages as it goes.
- `AStar.set_tile_data(data, x_dim, y_dim)` replaces the grid and its size.
- `AStar.find_start_pos(data)` and `AStar.find_target_pos(data)` find the
  start and target cells, set them on the finder and return them as
  `Point`s.
- `AStar.find_path(heuristic, weight=1)` returns a list of
  `tilepath.point.Point` values that runs from the start to the target.
- `AStar.format_path_coords(path)` returns the coordinate listing as a
  string. `AStar.render_path(path)` returns the legend and the drawing as a
  string.
- `AStar.print_path_coords(path, file_name="")` and
  `AStar.draw_path(path, file_name="")` print that text. If a file name is
  given, they also write the text to that file. A file that cannot be
  written is skipped without an error.

Four heuristics are available: `manhattan`, `euclidean`,
`euclidean_no_sqr` and `dijkstra`. Each one takes two points and a weight
(1 by default) and returns an integer. `dijkstra` computes the same
weighted squared distance as `euclidean_no_sqr`.

`Point` is a frozen dataclass with integer `x` and `y`. It supports `+` and
`-`, and `Point.delta(v1, v2)` returns the absolute difference on each axis.

`TileMapError` is raised in these cases:

- the file cannot be opened;
- the file is not valid JSON;
- a tileset or a layer is malformed;
- the tile size is invalid;
- the start or the target is missing;
- no tile data is loaded;
- there is no path from the start to the target.