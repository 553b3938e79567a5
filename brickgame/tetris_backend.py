"""Board, pieces and movement rules of the falling-blocks game."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field as dc_field
from typing import Callable, List, Optional

BOARD_N = 20  # board height
BOARD_M = 10  # board width
FIGURE_SIZE = 4
HUD_WIDTH = 8

EMPTY = 0
FIXED = 1
FALLING = 2

Matrix = List[List[int]]

FIGURES = (
    ((0, 0, 0, 0), (0, 1, 1, 0), (0, 1, 1, 0), (0, 0, 0, 0)),  # O
    ((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),  # I
    ((0, 0, 0, 0), (0, 0, 1, 1), (0, 1, 1, 0), (0, 0, 0, 0)),  # S
    ((0, 0, 0, 0), (0, 1, 1, 0), (0, 0, 1, 1), (0, 0, 0, 0)),  # Z
    ((0, 0, 0, 0), (0, 1, 1, 1), (0, 1, 0, 0), (0, 0, 0, 0)),  # L
    ((0, 0, 0, 0), (0, 1, 1, 1), (0, 0, 0, 1), (0, 0, 0, 0)),  # J
    ((0, 0, 0, 0), (0, 1, 1, 1), (0, 0, 1, 0), (0, 0, 0, 0)),  # T
)


def create_matrix(rows: int, cols: int) -> Matrix:
    """Return a rows x cols matrix of zeros with independent rows."""
    return [[EMPTY] * cols for _ in range(rows)]


@dataclass
class GameInfo:
    """Everything the interface needs to draw one frame."""

    field: Matrix = dc_field(default_factory=lambda: create_matrix(BOARD_N, BOARD_M))
    next: Matrix = dc_field(
        default_factory=lambda: create_matrix(FIGURE_SIZE, FIGURE_SIZE)
    )
    score: int = 0
    high_score: int = 0
    level: int = 0
    speed: int = 0
    pause: bool = False


@dataclass
class Block:
    """The falling piece: its top-left corner and its 4x4 shape."""

    x: int = 4
    y: int = 0
    figure: Matrix = dc_field(
        default_factory=lambda: create_matrix(FIGURE_SIZE, FIGURE_SIZE)
    )

    def cells(self):
        """Yield (row, col) board coordinates of every filled cell."""
        for i, row in enumerate(self.figure):
            for j, cell in enumerate(row):
                if cell == FIXED:
                    yield self.y + i, self.x + j


class Timer:
    """Decides when the game should advance by one tick."""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock if clock is not None else time.monotonic
        self._last = 0.0

    def tick(self, level: int, paused: bool) -> bool:
        """Return True (and restart the period) once a tick has elapsed."""
        now = self._clock()
        period = max(int(1000 / (1 + level * 0.5)), 50)
        elapsed_ms = (now - self._last) * 1000
        if period <= elapsed_ms and not paused:
            self._last = now
            return True
        return False


def choose_figure(rng=None) -> Matrix:
    """Return a fresh copy of a randomly chosen figure."""
    rng = rng if rng is not None else random
    shape = FIGURES[rng.randrange(len(FIGURES))]
    return [list(row) for row in shape]


def _filled_columns(figure: Matrix):
    for row in figure:
        for j, cell in enumerate(row):
            if cell == FIXED:
                yield j


def can_shift_right(x: int, figure: Matrix) -> bool:
    """Whether the figure at column x may move one column right."""
    return all(x + j < BOARD_M - 1 for j in _filled_columns(figure))


def can_shift_left(x: int, figure: Matrix) -> bool:
    """Whether the figure at column x may move one column left."""
    return all(x + j > 0 for j in _filled_columns(figure))


def can_fall(block: Block, field: Matrix) -> bool:
    """Whether the block may move one row down on the field."""
    height = len(field)
    for y, x in block.cells():
        below = y + 1
        if below >= height:
            return False
        if 0 <= below and 0 <= x < len(field[below]) and field[below][x] == FIXED:
            return False
    return True


def shift_right(block: Block) -> None:
    if can_shift_right(block.x, block.figure):
        block.x += 1


def shift_left(block: Block) -> None:
    if can_shift_left(block.x, block.figure):
        block.x -= 1


def shift_down(block: Block, field: Matrix) -> None:
    if can_fall(block, field):
        block.y += 1


def fall_figure(block: Block, field: Matrix) -> None:
    """Drop the block as far as it can go."""
    while can_fall(block, field):
        block.y += 1


def turn_figure(block: Block, field: Matrix) -> None:
    """Rotate the figure clockwise when the rotated shape fits."""
    size = len(block.figure)
    rotated = create_matrix(size, size)
    for i, row in enumerate(block.figure):
        for j, cell in enumerate(row):
            rotated[j][size - 1 - i] = cell
    if (
        can_shift_right(block.x, rotated)
        and can_shift_left(block.x, rotated)
        and can_fall(block, field)
    ):
        block.figure = rotated


def _inside(field: Matrix, y: int, x: int) -> bool:
    return 0 <= y < len(field) and 0 <= x < len(field[y])


def connect(block: Block, field: Matrix) -> None:
    """Fix the block's cells into the field."""
    for y, x in block.cells():
        if _inside(field, y, x):
            field[y][x] = FIXED


def board_overflow(field: Matrix) -> bool:
    """Whether any fixed cell sits in the top three rows."""
    return any(cell == FIXED for row in field[:3] for cell in row)


def check_full_line(field: Matrix, row: int) -> bool:
    return all(cell != EMPTY for cell in field[row])


def remove_line(field: Matrix, row: int) -> None:
    """Delete a row, moving everything above it one row down."""
    width = len(field[row])
    del field[row]
    field.insert(0, [EMPTY] * width)


def process_full_lines(field: Matrix) -> int:
    """Remove every full row; return how many were removed."""
    removed = 0
    for row in range(len(field)):
        if check_full_line(field, row):
            remove_line(field, row)
            removed += 1
    return removed


def attach_figure(field: Matrix, block: Block) -> None:
    """Mark the falling block's cells on the field."""
    for y, x in block.cells():
        if _inside(field, y, x) and field[y][x] != FIXED:
            field[y][x] = FALLING


def detach_figure(field: Matrix) -> None:
    """Clear every falling-block mark from the field."""
    for row in field:
        for j, cell in enumerate(row):
            if cell == FALLING:
                row[j] = EMPTY