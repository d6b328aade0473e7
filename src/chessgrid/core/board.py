"""Board - piece placement on an 8x8 grid plus game metadata."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chessgrid.core.enums import Color, GameState, PieceType
from chessgrid.core.errors import AmbiguousKingError, OutOfBoundsError
from chessgrid.core.geometry import (
    ROW_ASCENDING,
    ROW_DESCENDING,
    SIZE,
    Coordinate,
    Direction,
    unit_step,
)
from chessgrid.core.piece import Piece

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class LastMove:
    """The most recently applied move."""

    from_sq: Coordinate
    to_sq: Coordinate
    is_double_pawn_move: bool = False


class Board:
    """Mutable 8x8 grid of optional pieces.

    Each cell exclusively owns its piece.  ``copy`` duplicates every piece
    so two boards never share a mutable ``has_moved`` flag.
    """

    __slots__ = (
        "_cells",
        "human_color",
        "side_to_move",
        "state",
        "turns_played",
        "last_move",
    )

    def __init__(self, human_color: Color = Color.WHITE, *, setup: bool = True) -> None:
        self._cells: list[list[Piece | None]] = [[None] * SIZE for _ in range(SIZE)]
        self.human_color = human_color
        self.side_to_move = Color.WHITE
        self.state = GameState.ONGOING
        self.turns_played = 1
        self.last_move: LastMove | None = None
        if setup:
            self._setup()

    @property
    def ai_color(self) -> Color:
        return self.human_color.opposite

    # -- Element access -----------------------------------------------------

    @staticmethod
    def _check_bounds(x: int, y: int) -> None:
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise OutOfBoundsError(x, y)

    def get(self, x: int, y: int) -> Piece | None:
        self._check_bounds(x, y)
        return self._cells[x][y]

    def set(self, x: int, y: int, piece: Piece | None) -> None:
        self._check_bounds(x, y)
        self._cells[x][y] = piece

    def __getitem__(self, coord: Coordinate | tuple[int, int]) -> Piece | None:
        x, y = coord
        return self.get(x, y)

    def __setitem__(
        self, coord: Coordinate | tuple[int, int], piece: Piece | None
    ) -> None:
        x, y = coord
        self.set(x, y, piece)

    def is_empty(self, coord: Coordinate) -> bool:
        return self.get(coord.x, coord.y) is None

    # -- Query helpers ------------------------------------------------------

    def pieces_of(self, color: Color) -> list[tuple[Piece, Coordinate]]:
        """Every piece of *color* in scan order (row-major, then column)."""
        found: list[tuple[Piece, Coordinate]] = []
        for x in range(SIZE):
            for y in range(SIZE):
                piece = self._cells[x][y]
                if piece is not None and piece.color == color:
                    found.append((piece, Coordinate(x, y)))
        return found

    def find_first(self, piece_type: PieceType, color: Color) -> Coordinate | None:
        """First square in scan order holding *color*'s *piece_type*."""
        for piece, coord in self.pieces_of(color):
            if piece.piece_type == piece_type:
                return coord
        return None

    def king_position(self, color: Color) -> Coordinate:
        """Return the single king square for *color*."""
        kings = [
            coord for piece, coord in self.pieces_of(color) if piece.is_king
        ]
        if len(kings) != 1:
            raise AmbiguousKingError(color, len(kings))
        return kings[0]

    def is_path_clear(self, start: Coordinate, end: Coordinate) -> bool:
        """Whether every square strictly between *start* and *end* is empty.

        Only meaningful for squares on a shared row, column or diagonal.
        """
        x_step, y_step = unit_step(start, end)
        x, y = start.x + x_step, start.y + y_step
        while (x, y) != (end.x, end.y):
            if self.get(x, y) is not None:
                return False
            x += x_step
            y += y_step
        return True

    def sliding_moves(
        self,
        directions: Iterable[Direction],
        position: Coordinate,
        piece: Piece,
    ) -> list[Coordinate]:
        """Rays from *position* up to the edge or the first occupied square.

        The blocking square is included only when it holds an enemy piece.
        """
        moves: list[Coordinate] = []
        for direction in directions:
            x = position.x + direction.dx
            y = position.y + direction.dy
            while 0 <= x < SIZE and 0 <= y < SIZE:
                target = self._cells[x][y]
                if target is None:
                    moves.append(Coordinate(x, y))
                else:
                    if target.color != piece.color:
                        moves.append(Coordinate(x, y))
                    break
                x += direction.dx
                y += direction.dy
        return moves

    def is_legal_destination(self, piece: Piece, x: int, y: int) -> bool:
        """Empty square or one holding an opposing piece."""
        target = self.get(x, y)
        return target is None or target.color != piece.color

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board(self.human_color, setup=False)
        b._cells = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._cells
        ]
        b.side_to_move = self.side_to_move
        b.state = self.state
        b.turns_played = self.turns_played
        b.last_move = self.last_move
        return b

    clone = copy

    def clear(self) -> None:
        self._cells = [[None] * SIZE for _ in range(SIZE)]
        self.last_move = None

    clear_all = clear

    # -- Setup --------------------------------------------------------------

    def _setup(self) -> None:
        """Standard layout; the human's pieces start on rows 6 and 7."""
        human, ai = self.human_color, self.human_color.opposite
        for y, piece_type in enumerate(_BACK_RANK):
            self._cells[SIZE - 1][y] = Piece(human, piece_type)
            self._cells[0][y] = Piece(ai, piece_type)
        for y in range(SIZE):
            self._cells[SIZE - 2][y] = Piece.pawn(human, ROW_DESCENDING)
            self._cells[1][y] = Piece.pawn(ai, ROW_ASCENDING)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for x in range(SIZE):
            row = [str(p) if p else "." for p in self._cells[x]]
            rows.append(f"{x} {' '.join(row)}")
        rows.append("  " + " ".join(str(y) for y in range(SIZE)))
        return "\n".join(rows)
