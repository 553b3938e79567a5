"""Terminal entry point of the falling-blocks game."""

from __future__ import annotations

import argparse

from .tetris_fsm import GameExit, TetrisGame, UserAction, get_signal
from .tetris_frontend import TetrisView


def game_loop(screen, game: TetrisGame, view: TetrisView) -> None:
    """Read keys, advance the game and redraw until the player quits."""
    while True:
        action = get_signal(screen.getch())
        try:
            game.user_input(action, True)
        except GameExit:
            return
        view.render(game.update_current_state())


def _run(screen) -> None:
    import curses

    curses.cbreak()
    curses.raw()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)
    screen.timeout(500)
    curses.noecho()
    screen.nodelay(True)
    view = TetrisView(screen)
    view.init_colors()
    game_loop(screen, TetrisGame(), view)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="tetris",
        description="Falling-blocks game for the terminal. "
        "Arrows move, s starts, p pauses, q quits.",
    )
    parser.parse_args(argv)

    import curses

    curses.wrapper(_run)
    return 0


__all__ = ["game_loop", "main", "UserAction"]