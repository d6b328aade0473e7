"""High-level chess rules: check, checkmate, stalemate and game state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgrid.core.enums import Color, GameState
from chessgrid.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.geometry import Coordinate


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    State precedence in :meth:`update_state`:
    checkmate > stalemate > check > draw hooks > ongoing.
    """

    @staticmethod
    def is_under_attack(board: Board, target: Coordinate, color: Color) -> bool:
        """Is *target* attacked by a piece opposing *color*?"""
        return MoveGenerator(board).is_under_attack(target, color)

    @staticmethod
    def is_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        """In check, and no pseudo-legal move of *color* escapes it."""
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        for _piece, position in board.pieces_of(color):
            for end in gen.pseudo_legal_moves(position):
                if not gen.leaves_king_in_check(position, end):
                    return False
        return True

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return not Rules.has_legal_move(board, color)

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        for _piece, position in board.pieces_of(color):
            for _end in gen.possible_moves(position):
                return True
        return False

    @staticmethod
    def legal_moves(
        board: Board, color: Color
    ) -> list[tuple[Coordinate, Coordinate]]:
        """Every fully legal ``(from, to)`` pair of *color*, in scan order."""
        gen = MoveGenerator(board)
        return [
            (position, end)
            for _piece, position in board.pieces_of(color)
            for end in gen.possible_moves(position)
        ]

    # -- Draw / resignation hooks ------------------------------------------
    # Not implemented yet: each always reports False.

    @staticmethod
    def is_draw_by_repetition(board: Board) -> bool:
        return False

    @staticmethod
    def is_draw_by_insufficient_material(board: Board) -> bool:
        return False

    @staticmethod
    def is_draw_by_fifty_move_rule(board: Board) -> bool:
        return False

    @staticmethod
    def is_draw_by_agreement(board: Board) -> bool:
        return False

    @staticmethod
    def is_resignation(board: Board) -> bool:
        return False

    # -- Aggregate ----------------------------------------------------------

    @staticmethod
    def update_state(board: Board) -> GameState:
        """Compute the game state of *board*.

        Checkmate is looked for on both sides; stalemate only for the side
        to move, since the side that just moved is not obliged to move.
        """
        colors = (board.side_to_move, board.side_to_move.opposite)

        if any(Rules.is_checkmate(board, color) for color in colors):
            return GameState.CHECKMATE
        if Rules.is_stalemate(board, board.side_to_move):
            return GameState.STALEMATE
        if any(Rules.is_check(board, color) for color in colors):
            return GameState.CHECK

        hooks = (
            (Rules.is_draw_by_repetition, GameState.DRAW_BY_REPETITION),
            (
                Rules.is_draw_by_insufficient_material,
                GameState.DRAW_BY_INSUFFICIENT_MATERIAL,
            ),
            (Rules.is_draw_by_fifty_move_rule, GameState.DRAW_BY_FIFTY_MOVE_RULE),
            (Rules.is_draw_by_agreement, GameState.DRAW_BY_AGREEMENT),
            (Rules.is_resignation, GameState.RESIGNATION),
        )
        for predicate, state in hooks:
            if predicate(board):
                return state

        return GameState.ONGOING

    @staticmethod
    def is_game_over(state: GameState) -> bool:
        return state.is_terminal
