"""Move outcome and result value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import GameState
from chessgrid.core.errors import MoveError
from chessgrid.core.geometry import Coordinate
from chessgrid.core.piece import Piece


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What a successfully applied move did to the board."""

    from_sq: Coordinate
    to_sq: Coordinate
    piece: Piece
    captured: Piece | None = None
    is_castling: bool = False
    is_en_passant: bool = False
    is_promotion: bool = False
    is_double_pawn_move: bool = False
    state: GameState = GameState.ONGOING

    def __str__(self) -> str:
        return f"{self.piece}{self.from_sq}->{self.to_sq}"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Either an outcome or the reason the move was rejected."""

    outcome: MoveOutcome | None = None
    error: MoveError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.outcome is not None

    @classmethod
    def success(cls, outcome: MoveOutcome) -> MoveResult:
        return cls(outcome=outcome)

    @classmethod
    def failure(cls, error: MoveError) -> MoveResult:
        return cls(error=error)
