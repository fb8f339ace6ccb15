import pytest

from solong.game import Game, Key, Outcome
from solong.mapfile import MapError

CORRIDOR = ["111111", "1PC0E1", "111111"]


def test_key_codes_match_keysyms():
    game = Game(["11111", "1P0C1", "10E01", "11111"])
    assert game.handle_key(115) is Outcome.MOVED
    assert game.player_position() == (2, 1)
    assert game.handle_key(119) is Outcome.MOVED
    assert game.player_position() == (1, 1)
    assert game.handle_key(100) is Outcome.MOVED
    assert game.player_position() == (1, 2)
    assert game.handle_key(97) is Outcome.MOVED
    assert game.player_position() == (1, 1)
    assert game.handle_key(65307) is Outcome.QUIT
    assert game.over


def test_initial_state():
    game = Game(CORRIDOR)
    assert game.player_position() == (1, 1)
    assert game.remaining_collectibles() == 1
    assert game.moves == 0
    assert game.rows() == CORRIDOR


def test_input_grid_not_mutated():
    grid = list(CORRIDOR)
    game = Game(grid)
    game.handle_key(Key.RIGHT)
    assert grid == CORRIDOR
    assert game.rows() != CORRIDOR


def test_collect_and_win(capsys):
    game = Game(CORRIDOR)
    assert game.handle_key(Key.RIGHT) is Outcome.MOVED
    assert game.remaining_collectibles() == 0
    assert game.handle_key(Key.RIGHT) is Outcome.MOVED
    assert game.handle_key(Key.RIGHT) is Outcome.WON
    assert game.over
    out = capsys.readouterr().out
    assert "Nombre de mouvements : 1" in out
    assert "Tu as fini le jeu en : 3 coups" in out
    assert game.moves == 3


def test_wall_blocks_without_counting():
    game = Game(CORRIDOR)
    assert game.handle_key(Key.LEFT) is Outcome.BLOCKED
    assert game.handle_key(Key.DOWN) is Outcome.BLOCKED
    assert game.handle_key(Key.UP) is Outcome.BLOCKED
    assert game.moves == 0
    assert game.player_position() == (1, 1)


def test_exit_with_collectibles_left_counts_but_stays():
    game = Game(["11111", "1PEC1", "11111"])
    assert game.handle_key(Key.RIGHT) is Outcome.STAYED
    assert game.player_position() == (1, 1)
    assert game.moves == 1
    assert not game.over


def test_up_key_moves_down_a_row():
    game = Game(["11111", "1P0C1", "10E01", "11111"])
    assert game.handle_key(Key.UP) is Outcome.MOVED
    assert game.player_position() == (2, 1)
    assert game.handle_key(Key.DOWN) is Outcome.MOVED
    assert game.player_position() == (1, 1)


def test_escape_quits_and_ignores_later_keys():
    game = Game(CORRIDOR)
    assert game.handle_key(Key.ESC) is Outcome.QUIT
    assert game.over
    assert game.handle_key(Key.RIGHT) is Outcome.IGNORED
    assert game.moves == 0


def test_unknown_key_ignored():
    game = Game(CORRIDOR)
    assert game.handle_key(0) is Outcome.IGNORED
    assert game.moves == 0
    assert game.rows() == CORRIDOR


@pytest.mark.parametrize(
    "keys",
    [
        [Key.RIGHT, Key.LEFT, Key.RIGHT],
        [Key.UP, Key.RIGHT, Key.DOWN, Key.LEFT],
        [Key.RIGHT, Key.RIGHT, Key.LEFT, Key.LEFT],
    ],
)
def test_single_player_invariant(keys):
    game = Game(CORRIDOR)
    for key in keys:
        game.handle_key(key)
        assert "".join(game.rows()).count("P") == 1
        assert all(len(row) == len(CORRIDOR[0]) for row in game.rows())


def test_missing_player_rejected():
    with pytest.raises(MapError):
        Game(["11111", "10CE1", "11111"])