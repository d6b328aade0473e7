"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessgrid.core import Board, Color, Coordinate, MoveExecutor, MoveGenerator

    board = Board(human_color=Color.WHITE)
    gen = MoveGenerator(board)
    print(list(gen.possible_moves(Coordinate(6, 4))))
    MoveExecutor().apply_move(board, Coordinate(6, 4), Coordinate(4, 4))
"""

from chessgrid.core.board import Board, LastMove
from chessgrid.core.enums import Color, GameState, PieceType
from chessgrid.core.errors import (
    AmbiguousKingError,
    ChessError,
    MoveError,
    OutOfBoundsError,
)
from chessgrid.core.executor import MoveExecutor
from chessgrid.core.geometry import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    ROW_ASCENDING,
    ROW_DESCENDING,
    SIZE,
    STRAIGHT_DIRECTIONS,
    Coordinate,
    Direction,
    absolute_delta,
    chebyshev_distance,
    is_diagonal,
    is_straight,
    signed_delta,
    unit_step,
)
from chessgrid.core.move import MoveOutcome, MoveResult
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.piece import Piece
from chessgrid.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "GameState",
    "PieceType",
    # Errors
    "AmbiguousKingError",
    "ChessError",
    "MoveError",
    "OutOfBoundsError",
    # Geometry
    "ALL_DIRECTIONS",
    "DIAGONAL_DIRECTIONS",
    "ROW_ASCENDING",
    "ROW_DESCENDING",
    "SIZE",
    "STRAIGHT_DIRECTIONS",
    "Coordinate",
    "Direction",
    "absolute_delta",
    "chebyshev_distance",
    "is_diagonal",
    "is_straight",
    "signed_delta",
    "unit_step",
    # Domain objects
    "Board",
    "LastMove",
    "MoveExecutor",
    "MoveGenerator",
    "MoveOutcome",
    "MoveResult",
    "Piece",
    "Rules",
]
