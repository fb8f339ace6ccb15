"""Drawing the game with pygame and running the main loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Optional, Union

import pygame

from solong.game import TILE_SIZE, WINDOW_TITLE, Game, Key
from solong.mapfile import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    ArgumentError,
    MapError,
    check_arg,
    count_columns,
    count_lines,
    load_map,
    read_lines,
    validate,
)
from solong.xpm import TRANSPARENT, XpmError, XpmImage, load_xpm

PathLike = Union[str, "os.PathLike[str]"]

SPRITE_FILES = {
    PLAYER: "perso.xpm",
    FLOOR: "floor.xpm",
    WALL: "wall.xpm",
    COLLECTIBLE: "collectible.xpm",
    EXIT: "exit.xpm",
}

DEFAULT_SPRITE_DIR = "sprites"
TEXT_COLOR = (0, 0, 0)
LABEL_POSITION = (10, 32)
COUNT_POSITION = (40, 32)
LABEL = "NB = "
_FONT_SIZE = 16
_FRAME_RATE = 60


def xpm_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded XPM image into a pygame surface with alpha."""
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                surface.set_at((x, y), (0, 0, 0, 0))
            else:
                surface.set_at(
                    (x, y),
                    ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255),
                )
    return surface


def load_sprites(sprite_dir: PathLike = DEFAULT_SPRITE_DIR) -> dict[str, pygame.Surface]:
    """Load the five tile sprites from ``sprite_dir``, keyed by tile."""
    directory = Path(sprite_dir)
    return {
        tile: xpm_to_surface(load_xpm(directory / name))
        for tile, name in SPRITE_FILES.items()
    }


def keysym_from_pygame(key: int) -> Optional[int]:
    """Return the key symbol for a pygame key code, or None if it has none."""
    if key == pygame.K_ESCAPE:
        return int(Key.ESC)
    if 32 <= key <= 126:
        return key
    return None


class Renderer:
    """Draws a game's map and move counter onto a surface."""

    def __init__(self, game: Game, sprites: Mapping[str, pygame.Surface]) -> None:
        missing = [tile for tile in SPRITE_FILES if tile not in sprites]
        if missing:
            raise ValueError(f"missing sprites for tiles: {''.join(missing)}")
        self.game = game
        self.sprites = dict(sprites)
        self._font: Optional[pygame.font.Font] = None

    def window_size(self) -> tuple[int, int]:
        """Return the window's ``(width, height)`` in pixels."""
        rows = self.game.rows()
        return TILE_SIZE * count_columns(rows), TILE_SIZE * count_lines(rows)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        return self._font

    def _put_string(self, surface: pygame.Surface, position: tuple[int, int],
                    text: str) -> None:
        font = self._get_font()
        rendered = font.render(text, True, TEXT_COLOR)
        x, baseline = position
        surface.blit(rendered, (x, baseline - font.get_ascent()))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every tile and the move count."""
        for row_index, row in enumerate(self.game.rows()):
            for column_index, tile in enumerate(row):
                sprite = self.sprites.get(tile)
                if sprite is not None:
                    surface.blit(
                        sprite, (TILE_SIZE * column_index, TILE_SIZE * row_index)
                    )
        self._put_string(surface, LABEL_POSITION, LABEL)
        self._put_string(surface, COUNT_POSITION, str(self.game.moves))


def _load_and_validate(path: PathLike) -> list[str]:
    grid = load_map(path)
    validate(grid, len(read_lines(path)))
    return grid


def run(path: PathLike, sprite_dir: PathLike = DEFAULT_SPRITE_DIR) -> int:
    """Validate the map at ``path`` and play it in a window until it ends."""
    grid = _load_and_validate(path)
    game = Game(grid)
    pygame.init()
    try:
        renderer = Renderer(game, load_sprites(sprite_dir))
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while not game.over:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYUP:
                    keysym = keysym_from_pygame(event.key)
                    if keysym is not None:
                        game.handle_key(keysym)
                        if game.over:
                            break
            if game.over:
                break
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on the map named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = check_arg(args)
    except ArgumentError as exc:
        print(exc)
        return 0
    try:
        return run(path)
    except MapError as exc:
        print(f"\033[31mError\n{exc}\n\033[0m", end="")
        return 0
    except XpmError as exc:
        print(f"\033[31mError\n{exc}\n\033[0m", end="")
        return 0


if __name__ == "__main__":
    sys.exit(main())