"""Uniformly random move choice over the legal-move interface."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from chessgrid.core.enums import Color
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.game.player import AIPlayer

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.geometry import Coordinate
    from chessgrid.game.controller import GameController

_LOGGER = logging.getLogger(__name__)


class RandomMover:
    """Picks a random movable piece, then a random destination for it.

    Pieces are weighted equally regardless of how many moves they have.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def choose(
        self, board: Board, color: Color
    ) -> tuple[Coordinate, Coordinate] | None:
        gen = MoveGenerator(board)
        candidates: list[tuple[Coordinate, list[Coordinate]]] = []
        for _piece, position in board.pieces_of(color):
            moves = list(gen.possible_moves(position))
            if moves:
                candidates.append((position, moves))

        if not candidates:
            return None
        start, moves = self._rng.choice(candidates)
        return start, self._rng.choice(moves)

    def as_player(
        self, controller: GameController, color: Color, name: str = "Random"
    ) -> AIPlayer:
        """An :class:`AIPlayer` that answers move requests synchronously."""

        def _play(board: Board) -> None:
            choice = self.choose(board, color)
            if choice is None:
                _LOGGER.debug("%s has no legal move", name)
                return
            controller.attempt_move(*choice)

        return AIPlayer(color, name, on_request_move=_play)
