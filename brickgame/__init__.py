"""Terminal falling-blocks game and the board rules of a frog road-crossing game."""

__version__ = "1.0.0"