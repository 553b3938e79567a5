import pytest

from brickgame import frog_backend as fb
from brickgame.frog_backend import (
    Board,
    GameStats,
    LevelError,
    Position,
    add_progress,
    check_collide,
    check_finish_state,
    check_level_complete,
    empty_finish,
    initial_frog_position,
    level_timeout,
    load_level,
    new_stats,
    shift_map,
)


def level_rows():
    rows = ["0" * fb.COLS_MAP for _ in range(fb.ROWS_MAP)]
    rows[0] = "]" + "0" * (fb.COLS_MAP - 1)
    rows[1] = "]]" + "0" * (fb.COLS_MAP - 2)
    return rows


def write_level(directory, level, rows):
    path = directory / f"level_{level}.txt"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


def test_new_stats_values():
    stats = new_stats()
    assert stats == GameStats(score=0, level=1, speed=1, lives=9, won=False)


def test_level_timeout_for_first_speed():
    assert level_timeout(new_stats()) == 135
    faster = GameStats(speed=2)
    assert level_timeout(faster) < level_timeout(new_stats())


def test_initial_position_is_bottom_middle():
    pos = initial_frog_position()
    assert pos == Position(fb.BOARD_M // 2, fb.BOARD_N)


def test_empty_finish_has_board_width_blanks():
    finish = empty_finish()
    assert len(finish) == fb.BOARD_M
    assert set(finish) == {" "}


def test_load_level_reads_rows(tmp_path):
    rows = level_rows()
    write_level(tmp_path, 2, rows)
    board = Board()
    load_level(board, GameStats(level=2), tmp_path)
    assert board.ways == rows


def test_load_level_missing_file(tmp_path):
    with pytest.raises(LevelError):
        load_level(Board(), new_stats(), tmp_path)


def test_load_level_short_file(tmp_path):
    write_level(tmp_path, 1, level_rows()[:5])
    with pytest.raises(LevelError):
        load_level(Board(), new_stats(), tmp_path)


def test_add_progress_until_complete():
    board = Board()
    add_progress(board)
    step = fb.BOARD_M // 5
    assert board.finish[:step] == ["0"] * step
    assert board.finish[step:] == [" "] * (fb.BOARD_M - step)
    for _ in range(3):
        add_progress(board)
    assert not check_level_complete(board)
    add_progress(board)
    assert check_level_complete(board)


def test_finish_state_only_on_top_row():
    assert check_finish_state(Position(5, 1))
    assert not check_finish_state(Position(5, 3))


def test_collide_with_car(tmp_path):
    write_level(tmp_path, 1, level_rows())
    board = Board()
    load_level(board, new_stats(), tmp_path)
    top = fb.MAP_PADDING + 1
    assert check_collide(Position(1, top), board)
    assert not check_collide(Position(2, top), board)
    assert not check_collide(Position(1, fb.MAP_PADDING), board)


def test_shift_map_moves_odd_rows_right():
    board = Board(ways=level_rows())
    shift_map(board)
    assert board.ways[0] == level_rows()[0]
    assert board.ways[1][:3] == "0]]"
    assert len(board.ways[1]) == fb.COLS_MAP


def test_shift_map_wraps_around():
    rows = level_rows()
    rows[3] = "0" * (fb.COLS_MAP - 1) + "]"
    board = Board(ways=list(rows))
    shift_map(board)
    assert board.ways[3][0] == "]"
    for _ in range(fb.COLS_MAP - 1):
        shift_map(board)
    assert board.ways == rows