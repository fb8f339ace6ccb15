import pygame
import pytest

from solong.display import (
    SPRITE_FILES,
    Renderer,
    keysym_from_pygame,
    load_sprites,
    main,
    run,
    xpm_to_surface,
)
from solong.game import TILE_SIZE, Game, Key
from solong.mapfile import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    MapError,
    NO_PATH,
    WRONG_SHAPE,
)
from solong.xpm import XpmError, load_xpm_text

XPM_TEXT = """/* XPM */
static char *img[] = {
"2 2 3 1",
"r c #FF0000",
"g c #00FF00",
". c None",
"rg",
"g.",
};
"""

GRID = ["11111", "1PCE1", "11111"]

COLORS = {
    PLAYER: (200, 10, 10, 255),
    FLOOR: (10, 200, 10, 255),
    WALL: (10, 10, 200, 255),
    COLLECTIBLE: (200, 200, 10, 255),
    EXIT: (10, 200, 200, 255),
}


def solid_sprites():
    sprites = {}
    for tile, color in COLORS.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(color)
        sprites[tile] = surface
    return sprites


def tile_corner(row, column):
    return (column * TILE_SIZE + TILE_SIZE - 4, row * TILE_SIZE + TILE_SIZE - 4)


def test_xpm_to_surface_colors():
    surface = xpm_to_surface(load_xpm_text(XPM_TEXT))
    assert surface.get_size() == (2, 2)
    assert surface.get_at((0, 0)) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)) == (0, 255, 0, 255)
    assert surface.get_at((0, 1)) == (0, 255, 0, 255)


def test_xpm_to_surface_transparent_pixel():
    surface = xpm_to_surface(load_xpm_text(XPM_TEXT))
    assert surface.get_at((1, 1)).a == 0


def test_load_sprites(tmp_path):
    for name in SPRITE_FILES.values():
        (tmp_path / name).write_text(XPM_TEXT)
    sprites = load_sprites(tmp_path)
    assert set(sprites) == set(SPRITE_FILES)
    assert all(sprite.get_size() == (2, 2) for sprite in sprites.values())


def test_load_sprites_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_sprites(tmp_path)


@pytest.mark.parametrize(
    "pygame_key, expected",
    [
        (pygame.K_s, Key.UP),
        (pygame.K_w, Key.DOWN),
        (pygame.K_a, Key.LEFT),
        (pygame.K_d, Key.RIGHT),
        (pygame.K_ESCAPE, Key.ESC),
    ],
)
def test_keysym_from_pygame(pygame_key, expected):
    assert keysym_from_pygame(pygame_key) == expected


def test_keysym_from_pygame_unknown():
    assert keysym_from_pygame(pygame.K_F1) is None


def test_window_size():
    renderer = Renderer(Game(GRID), solid_sprites())
    assert renderer.window_size() == (5 * TILE_SIZE, 3 * TILE_SIZE)


def test_renderer_requires_all_sprites():
    sprites = solid_sprites()
    del sprites[EXIT]
    with pytest.raises(ValueError):
        Renderer(Game(GRID), sprites)


def test_draw_places_tiles():
    renderer = Renderer(Game(GRID), solid_sprites())
    surface = pygame.Surface(renderer.window_size())
    renderer.draw(surface)
    assert surface.get_at(tile_corner(1, 1)) == COLORS[PLAYER]
    assert surface.get_at(tile_corner(1, 2)) == COLORS[COLLECTIBLE]
    assert surface.get_at(tile_corner(1, 3)) == COLORS[EXIT]
    assert surface.get_at(tile_corner(2, 4)) == COLORS[WALL]


def test_draw_follows_player():
    game = Game(GRID)
    renderer = Renderer(game, solid_sprites())
    surface = pygame.Surface(renderer.window_size())
    game.handle_key(Key.RIGHT)
    renderer.draw(surface)
    assert surface.get_at(tile_corner(1, 2)) == COLORS[PLAYER]
    assert surface.get_at(tile_corner(1, 1)) == COLORS[FLOOR]


def test_main_wrong_argument_count(capsys):
    assert main(["a.ber", "b.ber"]) == 0
    assert "Invalid number of arguments !" in capsys.readouterr().out


def test_main_wrong_extension(capsys):
    assert main(["map.txt"]) == 0
    assert "Your file need to be a .ber type !" in capsys.readouterr().out


def test_main_missing_file(capsys, tmp_path):
    assert main([str(tmp_path / "absent.ber")]) == 0
    assert "File not found !" in capsys.readouterr().out


def test_main_bad_map(capsys, tmp_path):
    path = tmp_path / "square.ber"
    path.write_text("111\n1P1\n111\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Error" in out
    assert WRONG_SHAPE in out


def test_run_rejects_map_without_path(tmp_path):
    path = tmp_path / "blocked.ber"
    path.write_text("111111\n1PC1E1\n111111\n")
    with pytest.raises(MapError, match=NO_PATH):
        run(path, tmp_path)