"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level GameController depends on
these ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessgrid.core.enums import Color

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.geometry import Coordinate
    from chessgrid.core.move import MoveResult


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Interactive selection states of the side to move."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """One side of the board, played by a person or by a program."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Called when this side is to move on *board*."""

    @abstractmethod
    def cancel(self) -> None:
        """Drop a move request that has not been answered yet."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        human_color: Color | None = None,
        opponent: IPlayer | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def select_square(self, x: int, y: int) -> bool:
        """Select a piece, or move the selected piece to ``(x, y)``."""

    @abstractmethod
    def attempt_move(self, start: Coordinate, end: Coordinate) -> MoveResult:
        """Validate and apply a move for the side to move."""
