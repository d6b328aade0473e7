"""MoveExecutor - applies validated moves to a board.

Handles the compound effects of castling (king and rook move together),
en passant (the captured pawn is not on the destination square) and
promotion (a pawn reaching its last row becomes a queen), then advances
the turn and recomputes the game state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from chessgrid.core.board import Board, LastMove
from chessgrid.core.errors import MoveError
from chessgrid.core.geometry import Coordinate
from chessgrid.core.move import MoveOutcome, MoveResult
from chessgrid.core.move_generator import (
    MoveGenerator,
    castling_rook_squares,
    is_double_pawn_move,
)
from chessgrid.core.rules import Rules

_LOGGER = logging.getLogger(__name__)

MoveListener = Callable[[Board, MoveOutcome], None]


class MoveExecutor:
    """Validates and applies moves.

    Validation happens before any mutation: a rejected move leaves the
    board, the turn counter and the side to move untouched.  Listeners are
    called after every successful move.
    """

    __slots__ = ("listeners",)

    def __init__(self) -> None:
        self.listeners: list[MoveListener] = []

    def apply_move(
        self, board: Board, start: Coordinate, end: Coordinate
    ) -> MoveResult:
        if board.state.is_terminal:
            return MoveResult.failure(MoveError.GAME_OVER)

        piece = board[start]
        if piece is None:
            return MoveResult.failure(MoveError.NO_PIECE_AT_SOURCE)

        gen = MoveGenerator(board)
        if not end.is_on_board or not gen.is_move_legal(start, end):
            _LOGGER.debug("Rejected illegal move %s -> %s", start, end)
            return MoveResult.failure(MoveError.ILLEGAL_MOVE)
        # The state update after the move needs the opponent's king too;
        # resolve it while the board is still untouched.
        board.king_position(piece.color.opposite)

        if gen.is_castling_move(start, end):
            outcome = self._castle(board, start, end)
        else:
            outcome = self._relocate(board, gen, start, end)

        self._advance(board)
        outcome = replace(outcome, state=board.state)
        _LOGGER.debug(
            "Applied %s (turn %d, state %s)",
            outcome,
            board.turns_played,
            board.state.name,
        )

        for listener in self.listeners:
            listener(board, outcome)
        return MoveResult.success(outcome)

    # -- Internal helpers -------------------------------------------------

    @staticmethod
    def _castle(board: Board, start: Coordinate, end: Coordinate) -> MoveOutcome:
        king = board[start]
        rook_from, rook_to = castling_rook_squares(start, end)
        rook = board[rook_from]
        assert king is not None and rook is not None

        board[start] = None
        board[rook_from] = None
        board[end] = king
        board[rook_to] = rook
        king.mark_as_moved()
        rook.mark_as_moved()
        board.last_move = LastMove(start, end)
        return MoveOutcome(start, end, king.copy(), is_castling=True)

    @staticmethod
    def _relocate(
        board: Board, gen: MoveGenerator, start: Coordinate, end: Coordinate
    ) -> MoveOutcome:
        piece = board[start]
        assert piece is not None
        captured = board[end]

        en_passant = gen.is_en_passant_move(start, end)
        if en_passant:
            victim_sq = Coordinate(start.x, end.y)
            captured = board[victim_sq]
            board[victim_sq] = None

        double = is_double_pawn_move(piece, start, end)
        promotion = piece.is_pawn and end.x == piece.promotion_row
        if promotion:
            piece = piece.promoted()
            board[start] = piece

        board[end] = piece
        board[start] = None
        piece.mark_as_moved()
        board.last_move = LastMove(start, end, double)
        return MoveOutcome(
            start,
            end,
            piece.copy(),
            captured=captured,
            is_en_passant=en_passant,
            is_promotion=promotion,
            is_double_pawn_move=double,
        )

    @staticmethod
    def _advance(board: Board) -> None:
        """Count the turn, hand the move over and re-evaluate the state."""
        board.turns_played += 1
        board.side_to_move = board.side_to_move.opposite
        board.state = Rules.update_state(board)
        if board.state.is_terminal:
            _LOGGER.info(
                "Game over after %d turns: %s", board.turns_played, board.state.name
            )
