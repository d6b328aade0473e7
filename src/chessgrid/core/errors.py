"""Exceptions and move rejection codes."""

from __future__ import annotations

from enum import IntEnum, auto


class ChessError(Exception):
    """Base class for errors raised by the rules engine."""


class OutOfBoundsError(ChessError, IndexError):
    """A coordinate outside ``0..7`` reached the board."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Coordinate ({x}, {y}) is off the board")
        self.x = x
        self.y = y


class AmbiguousKingError(ChessError, ValueError):
    """Zero or several kings of one colour were found on the board."""

    def __init__(self, color: object, count: int) -> None:
        super().__init__(f"Expected exactly one {color} king, found {count}")
        self.color = color
        self.count = count


class MoveError(IntEnum):
    """Why a move attempt was rejected.

    Returned inside a :class:`~chessgrid.core.move.MoveResult`, never raised.
    """

    NO_PIECE_AT_SOURCE = auto()
    ILLEGAL_MOVE = auto()
    WRONG_SIDE = auto()
    GAME_OVER = auto()
