[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickgame"
version = "1.0.0"
description = "A terminal falling-blocks game, with the board rules of a frog road-crossing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "frogger", "curses", "terminal", "game", "state-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brickgame-tetris = "brickgame.tetris_main:main"

[tool.hatch.build.targets.wheel]
packages = ["brickgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
