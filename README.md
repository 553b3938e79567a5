# brickgame

A falling-blocks game for the terminal, drawn with `curses` and driven by a
finite state machine, plus the board and collision rules of a frog
road-crossing game.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

The game uses the standard-library `curses` module, so it runs on POSIX
systems (Linux, macOS).

## Falling blocks

```
brickgame-tetris
```

A 10 × 20 board. Pieces appear at the top, fall one row per tick and are
fixed in place when they land; full rows are cleared. Once a fixed block
reaches one of the top three rows the game is over and pieces stop falling.
Score, level and record fields and the next piece are shown beside the board.

Keys:

| Key | Action |
| --- | --- |
| ← / → | move the piece |
| `p` | pause / resume |
| `q` | quit |

The logic is split in two modules and can be used without a terminal:

- `brickgame.tetris_backend`: `GameInfo`, `Block`, `Timer` and the board
  operations (`can_fall`, `shift_left`, `shift_right`, `shift_down`,
  `fall_figure`, `turn_figure`, `connect`, `process_full_lines`,
  `board_overflow`, `attach_figure`, `detach_figure`, `choose_figure`).
- `brickgame.tetris_fsm`: `TetrisGame`, the state machine, with the
  `UserAction` and `GameState` enums and `get_signal`, which maps key codes to
  actions. `UserAction.TERMINATE` raises `GameExit`.

```python
import random
from brickgame.tetris_backend import Timer
from brickgame.tetris_fsm import TetrisGame, UserAction

game = TetrisGame(random.Random(1), Timer())
game.user_input(UserAction.RIGHT, False)
info = game.update_current_state()   # advances one step when a tick is due
```

`Timer` takes an optional clock function, so ticks can be driven by hand in
tests. `brickgame.tetris_frontend.TetrisView` draws a `GameInfo` onto any
curses-like window.

## Frog road-crossing rules

`brickgame.frog_backend` holds the model of a frog road-crossing game:
`Board`, `GameStats`, `Position`, level loading (`load_level`, which reads
`level_<n>.txt` from a directory, `tests/levels` by default, and raises
`LevelError` when the file is missing or short), lane shifting (`shift_map`),
collision and finish checks (`check_collide`, `check_finish_state`,
`check_level_complete`) and finish-line progress (`add_progress`).

## What the package does not do

The frog road-crossing game has no state machine, no screen and no command
here: only its rules in `brickgame.frog_backend`, to be driven by your own
code. The falling-blocks game keeps no record between runs and does not raise
the score or level as rows are cleared.