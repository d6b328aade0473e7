"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameState(IntEnum):
    """Status of a game as computed after each move.

    Only ONGOING, CHECK, CHECKMATE and STALEMATE are ever produced by the
    evaluator; the remaining members are reserved for the draw and
    resignation hooks in :class:`chessgrid.core.rules.Rules`.
    """

    ONGOING = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW_BY_REPETITION = auto()
    DRAW_BY_INSUFFICIENT_MATERIAL = auto()
    DRAW_BY_FIFTY_MOVE_RULE = auto()
    DRAW_BY_AGREEMENT = auto()
    RESIGNATION = auto()

    @property
    def is_terminal(self) -> bool:
        return self not in (GameState.ONGOING, GameState.CHECK)
