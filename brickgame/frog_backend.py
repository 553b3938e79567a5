"""Board, level loading and collision rules of the frog-crossing game."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

YOU_WON = "tests/game_progress/you_won.txt"
YOU_LOSE = "tests/game_progress/you_lose.txt"
LEVEL_DIR = "tests/levels"
INTRO_MESSAGE = "Press ENTER to start!"
INTRO_MESSAGE_LEN = 21
LEVEL_CNT = 5
LEVELNAME_MAX = 25

MAX_WIN_COUNT = 10

ROWS_MAP = 21
COLS_MAP = 90

BOARDS_BEGIN = 2

MAP_PADDING = 3
BOARD_M = 30
BOARD_N = ROWS_MAP + MAP_PADDING * 2
HUD_WIDTH = 12

FROGSTART_X = BOARD_M // 2
FROGSTART_Y = BOARD_N
INITIAL_TIMEOUT = 150

BANNER_N = 10
BANNER_M = 100

NO_INPUT = -1
ESCAPE = 27
ENTER_KEY = 10

ROAD = "0"
CAR = "]"
REACHED = "0"


class LevelError(Exception):
    """A level file is missing or incomplete."""


@dataclass
class Position:
    x: int
    y: int


def empty_finish() -> List[str]:
    """Return a finish line with no slot reached yet."""
    return [" "] * BOARD_M


def _empty_ways() -> List[str]:
    return [ROAD * COLS_MAP for _ in range(ROWS_MAP)]


@dataclass
class Board:
    finish: List[str] = field(default_factory=empty_finish)
    ways: List[str] = field(default_factory=_empty_ways)


@dataclass
class GameStats:
    score: int = 0
    level: int = 1
    speed: int = 1
    lives: int = 9
    won: bool = False


def new_stats() -> GameStats:
    """Return the statistics a new game starts with."""
    return GameStats(level=1, score=0, speed=1, lives=9, won=False)


def initial_frog_position() -> Position:
    return Position(FROGSTART_X, FROGSTART_Y)


def level_timeout(stats: GameStats) -> int:
    """Input timeout in milliseconds for the current speed."""
    return INITIAL_TIMEOUT - stats.speed * 15


def load_level(board: Board, stats: GameStats, level_dir: Union[str, Path] = LEVEL_DIR) -> None:
    """Read level_<n>.txt for the current level into the board's roads."""
    path = Path(level_dir) / f"level_{stats.level}.txt"
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise LevelError(f"cannot open level file {path}") from exc
    if len(lines) < ROWS_MAP:
        raise LevelError(f"level file {path} has fewer than {ROWS_MAP} rows")
    board.ways = [
        line.split("\n", 1)[0][:COLS_MAP].ljust(COLS_MAP, ROAD)
        for line in lines[:ROWS_MAP]
    ]


def add_progress(board: Board) -> None:
    """Mark the next fifth of the finish line as reached."""
    position = 0
    while position < len(board.finish) and board.finish[position] == REACHED:
        position += 1
    for index in range(position, min(position + BOARD_M // 5, len(board.finish))):
        board.finish[index] = REACHED


def check_finish_state(frog: Position) -> bool:
    return frog.y == 1


def check_level_complete(board: Board) -> bool:
    return all(slot == REACHED for slot in board.finish[:BOARD_M])


def check_collide(frog: Position, board: Board) -> bool:
    """Whether the frog stands on a car."""
    if not MAP_PADDING < frog.y < ROWS_MAP + MAP_PADDING + 1:
        return False
    row = board.ways[frog.y - MAP_PADDING - 1]
    column = frog.x - 1
    return 0 <= column < len(row) and row[column] == CAR


def shift_map(board: Board) -> None:
    """Move the cars of every other road one column to the right, wrapping."""
    for i in range(1, ROWS_MAP, 2):
        row = board.ways[i][:COLS_MAP]
        board.ways[i] = row[-1:] + row[:-1]