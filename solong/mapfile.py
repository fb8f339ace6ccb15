"""Reading and validating ``.ber`` map files.

A map is a rectangle of tiles: ``1`` wall, ``0`` floor, ``P`` the player,
``E`` the exit and ``C`` a collectible.  Grids are sequences of rows, each
row a sequence of one-character strings (plain strings work).
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

TILES = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE})
WALKABLE = frozenset({FLOOR, EXIT, PLAYER, COLLECTIBLE})

Grid = Sequence[Sequence[str]]
PathLike = Union[str, "os.PathLike[str]"]

WRONG_SHAPE = "Wrong map shape"
BAD_ELEMENTS = "Missing or double elements"
BAD_WALLS = "Something is wrong with your walls"
NO_PATH = "There is no valid path"


class MapError(ValueError):
    """The map file describes an unplayable map."""


class ArgumentError(ValueError):
    """The command line does not name a readable ``.ber`` file."""


def has_ber_extension(path: PathLike) -> bool:
    """Return whether the file name ends in ``.ber``."""
    return os.fspath(path).endswith(".ber")


def check_arg(argv: Sequence[str]) -> str:
    """Check the command-line arguments (program name excluded).

    Returns the map path; raises ArgumentError when there is not exactly
    one argument, when it lacks the ``.ber`` extension or cannot be opened.
    """
    args = list(argv)
    if len(args) != 1:
        raise ArgumentError("Invalid number of arguments !")
    path = args[0]
    if not has_ber_extension(path):
        raise ArgumentError("Your file need to be a .ber type !")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise ArgumentError("File not found !") from exc
    return path


def read_lines(path: PathLike) -> list[str]:
    """Return the file's lines, each keeping its trailing newline.

    A final line without a newline is kept as is; a file ending in a
    newline yields no extra empty line.
    """
    content = Path(path).read_bytes().decode("latin-1")
    *complete, rest = content.split("\n")
    lines = [line + "\n" for line in complete]
    if rest:
        lines.append(rest)
    return lines


def load_map(path: PathLike) -> list[str]:
    """Read a map file into a list of rows without their newlines."""
    return [line.split("\n", 1)[0] for line in read_lines(path)]


def count_columns(grid: Grid) -> int:
    """Return the width of the first row, or 0 for an empty grid."""
    return len(grid[0]) if grid else 0


def count_lines(grid: Grid) -> int:
    """Return the number of rows."""
    return len(grid)


def check_map_shape(grid: Grid, file_lines: Optional[int] = None) -> bool:
    """Check the map is a non-square rectangle of at least 4x3 tiles."""
    width = count_columns(grid)
    height = count_lines(grid) if file_lines is None else file_lines
    if width < 4 or height < 3:
        return False
    if width == height:
        return False
    return all(len(upper) == len(lower) for upper, lower in zip(grid, grid[1:]))


def _row_is_wall(row: Sequence[str]) -> bool:
    return all(tile == WALL for tile in row)


def check_walls(grid: Grid) -> bool:
    """Check the map is closed by walls on all four sides."""
    if not grid:
        return False
    if not _row_is_wall(grid[0]) or not _row_is_wall(grid[-1]):
        return False
    if len(grid) < 2:
        return True
    last_column = len(grid[1]) - 1
    for row in grid[1:-1]:
        if not row or row[0] != WALL:
            return False
        if last_column < 0 or len(row) <= last_column or row[last_column] != WALL:
            return False
    return True


def _tiles(grid: Grid):
    return (tile for row in grid for tile in row)


def check_known_tiles(grid: Grid) -> bool:
    """Check every tile is one of ``0 1 P C E``."""
    return all(tile in TILES for tile in _tiles(grid))


def check_single_player_and_exit(grid: Grid) -> bool:
    """Check there is exactly one player and exactly one exit."""
    tiles = list(_tiles(grid))
    return tiles.count(PLAYER) == 1 and tiles.count(EXIT) == 1


def count_collectibles(grid: Grid) -> int:
    """Return how many collectibles the map holds."""
    return sum(1 for tile in _tiles(grid) if tile == COLLECTIBLE)


def check_has_collectible(grid: Grid) -> bool:
    """Check there is at least one collectible."""
    return count_collectibles(grid) >= 1


def check_elements(grid: Grid) -> bool:
    """Check tiles are known, with one player, one exit and a collectible."""
    return (
        check_known_tiles(grid)
        and check_single_player_and_exit(grid)
        and check_has_collectible(grid)
    )


def find_player(grid: Grid) -> Optional[tuple[int, int]]:
    """Return ``(row, column)`` of the first player tile, or None."""
    for row_index, row in enumerate(grid):
        for column_index, tile in enumerate(row):
            if tile == PLAYER:
                return row_index, column_index
    return None


def flood_fill(grid: Grid, x: int, y: int) -> bool:
    """Return whether an exit is reachable from row ``x``, column ``y``.

    Movement goes through floor, player and collectible tiles; the grid
    itself is left untouched.
    """

    def walkable(row: int, column: int) -> bool:
        return (
            0 <= row < len(grid)
            and 0 <= column < len(grid[row])
            and grid[row][column] in WALKABLE
        )

    if not walkable(x, y):
        return False
    seen = {(x, y)}
    stack = [(x, y)]
    while stack:
        row, column = stack.pop()
        if grid[row][column] == EXIT:
            return True
        for step in ((row + 1, column), (row - 1, column),
                     (row, column + 1), (row, column - 1)):
            if step not in seen and walkable(*step):
                seen.add(step)
                stack.append(step)
    return False


def check_path(grid: Grid) -> bool:
    """Check the exit can be reached from the player's position."""
    start = find_player(grid)
    if start is None:
        return False
    return flood_fill(grid, *start)


def validate(grid: Grid, file_lines: Optional[int] = None) -> None:
    """Raise MapError describing the first problem found with the map."""
    if not check_map_shape(grid, file_lines):
        raise MapError(WRONG_SHAPE)
    if not check_elements(grid):
        raise MapError(BAD_ELEMENTS)
    if not check_walls(grid):
        raise MapError(BAD_WALLS)
    if not check_path(grid):
        raise MapError(NO_PATH)