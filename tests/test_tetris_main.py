import itertools
import random

import pytest

from brickgame.tetris_backend import FALLING, Timer
from brickgame.tetris_fsm import KEY_RIGHT, GameState, TetrisGame
from brickgame.tetris_main import game_loop, main


class KeyScreen:
    def __init__(self, keys):
        self._keys = iter(keys)

    def getch(self):
        return next(self._keys)


class RecordingView:
    def __init__(self):
        self.frames = []

    def render(self, info):
        self.frames.append(info)


def frozen_game():
    return TetrisGame(rng=random.Random(1), timer=Timer(clock=lambda: 0.0))


def test_quit_key_ends_loop_before_rendering():
    game = frozen_game()
    view = RecordingView()
    game_loop(KeyScreen([ord("q")]), game, view)
    assert view.frames == []


def test_right_then_quit_moves_block():
    game = frozen_game()
    view = RecordingView()
    game_loop(KeyScreen([KEY_RIGHT, ord("q")]), game, view)
    assert game.block.x == 5
    assert len(view.frames) == 1
    assert view.frames[0] is game.info


def test_left_records_position_as_score():
    game = frozen_game()
    view = RecordingView()
    game_loop(KeyScreen([ord("a") - 1 + 0, ord("q")]), game, view)
    game_loop(KeyScreen([260, ord("q")]), game, view)
    assert game.info.score == 4
    assert game.block.x == 3


def test_pause_and_start_keys():
    game = frozen_game()
    view = RecordingView()
    game_loop(KeyScreen([ord("p"), ord("s"), ord("q")]), game, view)
    assert game.info.pause is True
    assert game.requested_state == GameState.SPAWN
    assert len(view.frames) == 2


def test_ticking_timer_advances_machine():
    counter = itertools.count(start=2, step=2)
    game = TetrisGame(rng=random.Random(3), timer=Timer(clock=lambda: next(counter)))
    view = RecordingView()
    game_loop(KeyScreen([-1, ord("q")]), game, view)
    assert game.state == GameState.SHIFTING
    assert game.block.y == 1
    assert any(cell == FALLING for row in game.info.field for cell in row)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2