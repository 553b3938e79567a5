"""State machine that drives the falling-blocks game."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Optional, Union

from .tetris_backend import (
    BOARD_M,
    BOARD_N,
    FIGURE_SIZE,
    Block,
    GameInfo,
    Timer,
    attach_figure,
    board_overflow,
    can_fall,
    choose_figure,
    connect,
    create_matrix,
    detach_figure,
    fall_figure,
    process_full_lines,
    shift_down,
    shift_left,
    shift_right,
    turn_figure,
)

KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261


class UserAction(IntEnum):
    START = 0
    PAUSE = 1
    TERMINATE = 2
    LEFT = 3
    RIGHT = 4
    UP = 5
    DOWN = 6
    ACTION = 7
    NO_ACTION = 8


class GameState(IntEnum):
    START = 0
    SPAWN = 1
    MOVING = 2
    SHIFTING = 3
    CONNECT = 4
    GAME_OVER = 5
    EXIT = 6
    PAUSE = 7


class GameExit(Exception):
    """Raised when the player asks to leave the game."""


_KEYMAP = {
    KEY_UP: UserAction.UP,
    KEY_DOWN: UserAction.DOWN,
    KEY_LEFT: UserAction.LEFT,
    KEY_RIGHT: UserAction.RIGHT,
    ord("q"): UserAction.TERMINATE,
    ord("s"): UserAction.START,
    ord(" "): UserAction.ACTION,
    ord("p"): UserAction.PAUSE,
}


def get_signal(key: Union[int, str, None]) -> Optional[UserAction]:
    """Translate a key code (or one-character string) into an action."""
    if isinstance(key, str):
        if len(key) != 1:
            return None
        key = ord(key)
    return _KEYMAP.get(key)


class TetrisGame:
    """Holds the board, the falling block and the current state."""

    def __init__(self, rng=None, timer=None):
        self.rng = rng if rng is not None else random.Random()
        self.timer = timer if timer is not None else Timer()
        self.info = GameInfo(
            field=create_matrix(BOARD_N, BOARD_M),
            next=create_matrix(FIGURE_SIZE, FIGURE_SIZE),
            speed=100,
        )
        self.block = Block()
        self.state = GameState.START
        self.requested_state = GameState.START

    def _poll(self) -> None:
        if self.timer.tick(self.info.level, self.info.pause):
            self.step()

    def user_input(self, action: Optional[UserAction], hold: bool = False) -> None:
        """Apply a player action; TERMINATE raises GameExit."""
        self._poll()
        if action == UserAction.START:
            self.requested_state = GameState.SPAWN
        elif action == UserAction.PAUSE:
            self.info.pause = not self.info.pause
        elif action == UserAction.TERMINATE:
            raise GameExit()
        elif action == UserAction.LEFT:
            self.info.score = self.block.x
            shift_left(self.block)
        elif action == UserAction.RIGHT:
            shift_right(self.block)

    def update_current_state(self) -> GameInfo:
        """Advance the game if a tick is due and return what to draw."""
        self._poll()
        return self.info

    def step(self) -> GameState:
        """Run one transition of the machine, redrawing the falling block."""
        detach_figure(self.info.field)
        if self.state == GameState.START:
            self.on_start()
            self.state = GameState.SPAWN
        elif self.state == GameState.SPAWN:
            self.on_spawn()
        elif self.state == GameState.SHIFTING:
            self.on_shifting()
        elif self.state == GameState.CONNECT:
            self.on_connect()
        attach_figure(self.info.field, self.block)
        return self.state

    def on_start(self) -> GameState:
        self.info.next = choose_figure(self.rng)
        return self.state

    def on_spawn(self) -> GameState:
        self.block.y = 0
        self.block.x = 4
        self.block.figure = [row[:] for row in self.info.next]
        self.info.next = choose_figure(self.rng)
        self.state = GameState.SHIFTING
        return self.state

    def on_shifting(self) -> GameState:
        self.block.y += 1
        if not can_fall(self.block, self.info.field):
            self.state = GameState.CONNECT
        return self.state

    def on_moving(self, action: Optional[UserAction]) -> GameState:
        field = self.info.field
        if action == UserAction.UP:
            turn_figure(self.block, field)
        elif action == UserAction.DOWN:
            shift_down(self.block, field)
        elif action == UserAction.RIGHT:
            shift_right(self.block)
        elif action == UserAction.LEFT:
            shift_left(self.block)
        elif action == UserAction.ACTION:
            fall_figure(self.block, field)
        elif action == UserAction.PAUSE:
            self.info.pause = True
            self.state = GameState.PAUSE
        elif action == UserAction.TERMINATE:
            self.state = GameState.EXIT
        if self.state != GameState.EXIT:
            if can_fall(self.block, field):
                self.state = GameState.SHIFTING
            else:
                self.state = GameState.CONNECT
        return self.state

    def on_connect(self) -> GameState:
        connect(self.block, self.info.field)
        process_full_lines(self.info.field)
        if board_overflow(self.info.field):
            self.state = GameState.GAME_OVER
        else:
            self.state = GameState.SPAWN
        return self.state

    def on_game_over(self, action: Optional[UserAction]) -> GameState:
        if action == UserAction.TERMINATE:
            self.state = GameState.EXIT
        elif action == UserAction.START:
            self.state = GameState.START
        return self.state

    def on_pause(self, action: Optional[UserAction]) -> GameState:
        if self.info.pause:
            if action == UserAction.START:
                self.state = GameState.MOVING
                self.info.pause = False
            elif action == UserAction.TERMINATE:
                self.state = GameState.EXIT
                self.info.pause = False
        return self.state