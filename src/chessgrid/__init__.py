"""Chess rules engine: board state, legal moves, check and game state."""

__version__ = "0.1.0"
