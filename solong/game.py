"""Game state and movement rules for a loaded map."""

from __future__ import annotations

import enum
from typing import Optional

from solong.mapfile import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    Grid,
    MapError,
    count_collectibles,
    find_player,
)

TILE_SIZE = 64
WINDOW_TITLE = "so_long"

MOVE_MESSAGE = "Nombre de mouvements : {moves}"
FINISH_MESSAGE = "\033[32m\tTu as fini le jeu en : {moves} coups\n\033[0m"


class Key(enum.IntEnum):
    """Key symbols the game reacts to."""

    UP = 115
    DOWN = 119
    LEFT = 97
    RIGHT = 100
    ESC = 65307


_STEPS = {
    Key.UP: (1, 0),
    Key.DOWN: (-1, 0),
    Key.RIGHT: (0, 1),
    Key.LEFT: (0, -1),
}


class Outcome(enum.Enum):
    """What a key press did."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    STAYED = "stayed"
    WON = "won"
    QUIT = "quit"


class Game:
    """A running game: the map, the player and the move counter."""

    def __init__(self, grid: Grid) -> None:
        self._grid = [list(row) for row in grid]
        if find_player(self._grid) is None:
            raise MapError("The map has no player")
        self.moves = 0
        self.over = False

    def player_position(self) -> tuple[int, int]:
        """Return the player's ``(row, column)``."""
        position = find_player(self._grid)
        if position is None:
            raise MapError("The map has no player")
        return position

    def remaining_collectibles(self) -> int:
        """Return how many collectibles are still on the map."""
        return count_collectibles(self._grid)

    def rows(self) -> list[str]:
        """Return the current map as a list of strings."""
        return ["".join(row) for row in self._grid]

    def _tile(self, row: int, column: int) -> Optional[str]:
        if 0 <= row < len(self._grid) and 0 <= column < len(self._grid[row]):
            return self._grid[row][column]
        return None

    def _count_move(self) -> None:
        self.moves += 1
        print(MOVE_MESSAGE.format(moves=self.moves))

    def handle_key(self, key: int) -> Outcome:
        """Apply one key press and report what happened."""
        if self.over:
            return Outcome.IGNORED
        if key == Key.ESC:
            self.over = True
            return Outcome.QUIT
        try:
            step = _STEPS[Key(key)]
        except (ValueError, KeyError):
            return Outcome.IGNORED

        remaining = self.remaining_collectibles()
        row, column = self.player_position()
        target_row, target_column = row + step[0], column + step[1]
        target = self._tile(target_row, target_column)
        if target is None or target == WALL:
            return Outcome.BLOCKED

        if target != EXIT:
            self._grid[row][column] = FLOOR
            self._grid[target_row][target_column] = PLAYER
            self._count_move()
            return Outcome.MOVED
        if remaining == 0:
            self._count_move()
            print(FINISH_MESSAGE.format(moves=self.moves), end="")
            self.over = True
            return Outcome.WON
        self._count_move()
        return Outcome.STAYED


__all__ = [
    "COLLECTIBLE",
    "FINISH_MESSAGE",
    "Game",
    "Key",
    "MOVE_MESSAGE",
    "Outcome",
    "TILE_SIZE",
    "WINDOW_TITLE",
]