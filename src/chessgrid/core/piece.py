"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.geometry import SIZE

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(slots=True)
class Piece:
    """A chess piece owned by exactly one board cell.

    ``direction`` is only meaningful for pawns: the x-axis step (+1 or -1)
    that moves the pawn toward the opponent.  ``has_moved`` is mutable, so
    pieces are always copied, never shared, when a board is copied.
    """

    color: Color
    piece_type: PieceType
    direction: int = 0
    has_moved: bool = False

    def __post_init__(self) -> None:
        if self.piece_type == PieceType.PAWN and self.direction not in (1, -1):
            raise ValueError(f"Pawn direction must be +1 or -1, got {self.direction}")

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def pawn(cls, color: Color, direction: int) -> Piece:
        return cls(color, PieceType.PAWN, direction)

    @classmethod
    def knight(cls, color: Color) -> Piece:
        return cls(color, PieceType.KNIGHT)

    @classmethod
    def bishop(cls, color: Color) -> Piece:
        return cls(color, PieceType.BISHOP)

    @classmethod
    def rook(cls, color: Color) -> Piece:
        return cls(color, PieceType.ROOK)

    @classmethod
    def queen(cls, color: Color) -> Piece:
        return cls(color, PieceType.QUEEN)

    @classmethod
    def king(cls, color: Color) -> Piece:
        return cls(color, PieceType.KING)

    # ── State ────────────────────────────────────────────────────────────

    def mark_as_moved(self) -> None:
        self.has_moved = True

    def copy(self) -> Piece:
        return replace(self)

    def promoted(self) -> Piece:
        """Queen of the same colour that replaces a pawn on its last row."""
        return Piece(self.color, PieceType.QUEEN, has_moved=self.has_moved)

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    @property
    def promotion_row(self) -> int | None:
        """Row farthest from the pawn's start; ``None`` for non-pawns."""
        if not self.is_pawn:
            return None
        return SIZE - 1 if self.direction > 0 else 0

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter code (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
