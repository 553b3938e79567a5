"""Terminal rendering of the falling-blocks game."""

from __future__ import annotations

from typing import Sequence

try:
    import curses
except ImportError:  # pragma: no cover - platforms without curses
    curses = None

from .tetris_backend import BOARD_M, BOARD_N, HUD_WIDTH, GameInfo

_A_REVERSE = curses.A_REVERSE if curses is not None else 1 << 18
_DRAW_ERRORS = (curses.error,) if curses is not None else ()

BLOCK = ord(" ") | _A_REVERSE

_FALLBACK_GLYPHS = {
    "ACS_ULCORNER": "+",
    "ACS_URCORNER": "+",
    "ACS_LLCORNER": "+",
    "ACS_LRCORNER": "+",
    "ACS_HLINE": "-",
    "ACS_VLINE": "|",
}


def _glyph(name: str):
    if curses is not None:
        value = getattr(curses, name, None)
        if value is not None:
            return value
    return _FALLBACK_GLYPHS[name]


class TetrisView:
    """Draws frames of the game onto a curses-like window."""

    def __init__(self, screen):
        self.screen = screen
        self.color_attr = 0

    def _put(self, y: int, x: int, ch) -> None:
        try:
            self.screen.addch(y, x, ch)
        except _DRAW_ERRORS:
            pass

    def _text(self, y: int, x: int, text: str) -> None:
        try:
            self.screen.addstr(y, x, text)
        except _DRAW_ERRORS:
            pass

    def init_colors(self) -> None:
        """Set up the colour pair used for blocks, when colours exist."""
        if curses is not None and curses.has_colors():
            curses.start_color()
            curses.init_pair(1, curses.COLOR_CYAN, curses.COLOR_BLACK)
            self.color_attr = curses.color_pair(1)

    def print_board(self) -> None:
        self.print_rectangle(0, BOARD_N + 1, 0, BOARD_M + 1)

    def print_rectangle(self, top_y: int, bottom_y: int, left_x: int, right_x: int) -> None:
        """Draw a frame; the right edge sits at twice right_x (cells are two wide)."""
        right = right_x * 2
        hline = _glyph("ACS_HLINE")
        vline = _glyph("ACS_VLINE")

        self._put(top_y, left_x, _glyph("ACS_ULCORNER"))
        for x in range(left_x + 1, right):
            self._put(top_y, x, hline)
        self._put(top_y, right, _glyph("ACS_URCORNER"))

        for y in range(top_y + 1, bottom_y):
            self._put(y, left_x, vline)
            self._put(y, right, vline)

        self._put(bottom_y, left_x, _glyph("ACS_LLCORNER"))
        for x in range(left_x + 1, right):
            self._put(bottom_y, x, hline)
        self._put(bottom_y, right, _glyph("ACS_LRCORNER"))

    def print_game_board(self, field: Sequence[Sequence[int]]) -> None:
        for i, row in enumerate(field):
            for j, cell in enumerate(row):
                if cell >= 1:
                    self._put(i + 1, j * 2, BLOCK)
                    self._put(i + 1, j * 2 + 1, BLOCK)

    def print_next_figure(self, figure: Sequence[Sequence[int]]) -> None:
        for i, row in enumerate(figure):
            for j, cell in enumerate(row):
                if cell >= 1:
                    self._put(i + 14, BOARD_M + 15 + j * 2, BLOCK)
                    self._put(i + 14, BOARD_M + 15 + j * 2 + 1, BLOCK)

    def print_hud(self, info: GameInfo) -> None:
        label_x = (BOARD_M + 3) * 2
        value_x = (BOARD_M + 5) * 2
        self._text(1, label_x, "Score:")
        self._text(3, value_x, str(info.score))
        self._text(5, label_x, "Level:")
        self._text(7, value_x, str(info.level))
        self._text(9, label_x, "Record:")
        self._text(11, value_x, str(info.high_score))
        self._text(13, label_x, "Next:")

    def render(self, info: GameInfo) -> None:
        """Redraw the whole frame for the given game information."""
        self.screen.clear()
        self.print_board()
        self.print_hud(info)
        self.screen.attron(self.color_attr)
        self.print_game_board(info.field)
        self.print_next_figure(info.next)
        self.screen.attroff(self.color_attr)
        self.screen.refresh()

    def print_start_banner(self) -> None:
        self.screen.clear()
        self.print_rectangle(0, BOARD_N + 1, 0, BOARD_M + HUD_WIDTH + 3)
        self._text(9, 6, "Press Enter")
        self._text(11, 2, "to start the game!")

    def print_game_over_banner(self) -> None:
        self.screen.clear()
        self.print_rectangle(0, BOARD_N + 1, 0, BOARD_M + HUD_WIDTH + 3)
        self._text(8, 6, "Game over!")
        self._text(10, 4, "Enter - return")
        self._text(12, 5, "to the start")
        self._text(14, 6, "Q - exit")

    def print_pause_banner(self) -> None:
        self.print_board()
        self._text(9, 6, "Pause")
        self._text(11, 3, "Press enter to return to the game")