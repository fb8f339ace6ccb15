# solong

A small top-down puzzle game. You walk a character around a walled map,
pick up every collectible, and then step onto the exit. The move count is
drawn in the window (`NB = <count>`) and `Nombre de mouvements : <count>` is
printed to the terminal after each move.

## Installing

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

```
solong maps/level.ber
```

The command takes exactly one argument: the path to a map file whose name
ends in `.ber`. With any other number of arguments, a name without `.ber`,
or a file that cannot be opened, it prints a message and exits. An invalid
map prints `Error` and the reason, and the game does not start.

Sprites are read from XPM files in a `sprites/` directory under the current
working directory: `perso.xpm`, `floor.xpm`, `wall.xpm`, `collectible.xpm`
and `exit.xpm`. Each tile is drawn 64 pixels square.

Controls (acted on when the key is released):

| Key   | Action                    |
|-------|---------------------------|
| `S`   | move down the screen      |
| `W`   | move up the screen        |
| `A`   | move left                 |
| `D`   | move right                |
| `Esc` | quit                      |

Closing the window also quits.

Walking onto a collectible picks it up. Walking into the exit while
collectibles remain counts as a move but leaves you where you were. Once
every collectible is gone, stepping onto the exit ends the game and prints
the total number of moves.

## Map format

A map is a plain text file, one row per line, made of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `E`  | exit         |
| `C`  | collectible  |

A map is rejected (`MapError`) when, checked in this order:

* it is not rectangular, is narrower than 4 columns or shorter than 3 lines,
  or has as many columns as lines (`Wrong map shape`);
* it contains any other character, does not have exactly one `P` and one
  `E`, or has no `C` (`Missing or double elements`);
* it is not closed by walls on every side
  (`Something is wrong with your walls`);
* the exit cannot be reached from the player's start
  (`There is no valid path`).

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

## Using the library

The modules can also be used on their own:

* `solong.mapfile` reads and checks maps: `check_arg`, `read_lines`,
  `load_map`, `validate`, `check_map_shape`, `check_elements`,
  `check_walls`, `check_path`, `flood_fill`, `find_player`,
  `count_collectibles` and more. Problems raise `MapError` or
  `ArgumentError`.
* `solong.game` holds the game state: `Game(grid)` with `handle_key`,
  `player_position`, `remaining_collectibles`, `rows` and the `moves`
  and `over` attributes. `handle_key(Key.RIGHT)` returns an `Outcome`
  (`IGNORED`, `BLOCKED`, `MOVED`, `STAYED`, `WON` or `QUIT`).
* `solong.xpm` reads XPM images into `XpmImage` objects (`load_xpm`,
  `load_xpm_text`, `parse_xpm_lines`); pixels are `0xRRGGBB` integers, with
  transparent pixels as `0xFF000000`. Unreadable data raises `XpmError`.
* `solong.colors` resolves X11 colour names (`lookup_color`,
  `parse_text_color`).
* `solong.display` draws the game with pygame (`Renderer`, `xpm_to_surface`,
  `load_sprites`, `run`, `main`).

```python
from solong.game import Game, Key

game = Game(["11111", "1PCE1", "11111"])
game.handle_key(Key.RIGHT)   # Outcome.MOVED, the collectible is picked up
game.handle_key(Key.RIGHT)   # Outcome.WON
```

## What it does not include

The package ships no sprite images and no maps; the `sprites/` directory and
the `.ber` files have to be supplied. The sprite directory cannot be chosen
from the command line, only through `run(path, sprite_dir)`.

## Running the tests

```
pip install .[test]
pytest
```