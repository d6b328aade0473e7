"""Per-piece movement rules, legal move generation and attack detection."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from chessgrid.core.board import Board, LastMove
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.geometry import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    SIZE,
    STRAIGHT_DIRECTIONS,
    Coordinate,
    absolute_delta,
    is_diagonal,
    is_straight,
)
from chessgrid.core.piece import Piece

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)

_AttackRule = Callable[[Piece, Coordinate, Coordinate], bool]
_MoveSource = Callable[[Piece, Coordinate], Iterator[Coordinate]]

# Column of the rook that castles toward each side of the king.
_CASTLING_ROOK_COLUMN = {1: SIZE - 1, -1: 0}


def is_double_pawn_move(
    piece: Piece | None, start: Coordinate, end: Coordinate
) -> bool:
    return (
        piece is not None
        and piece.is_pawn
        and start.y == end.y
        and abs(end.x - start.x) == 2
    )


def castling_rook_squares(
    king_from: Coordinate, king_to: Coordinate
) -> tuple[Coordinate, Coordinate]:
    """Rook origin and destination for a castling king move."""
    step = 1 if king_to.y > king_from.y else -1
    rook_from = Coordinate(king_from.x, _CASTLING_ROOK_COLUMN[step])
    rook_to = Coordinate(king_to.x, king_to.y - step)
    return rook_from, rook_to


class MoveGenerator:
    """Movement rules for the pieces on a :class:`Board`.

    Three levels of answers are provided:

    * :meth:`can_attack` - the raw pattern of a piece, with path
      clearance, ignoring turn order, destination ownership and check.
    * :meth:`pseudo_legal_moves` / :meth:`is_pseudo_legal` - the pattern
      plus occupancy rules and special moves (en passant, castling).
    * :meth:`possible_moves` / :meth:`is_move_legal` - pseudo-legal moves
      that do not leave the mover's own king in check.

    The generator never mutates its board; check-safety is decided on a
    copy built by :meth:`simulate_move`.
    """

    __slots__ = ("_board", "_attack", "_pseudo")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._attack: dict[PieceType, _AttackRule] = {
            PieceType.PAWN: self._pawn_attacks,
            PieceType.KNIGHT: self._knight_attacks,
            PieceType.BISHOP: self._bishop_attacks,
            PieceType.ROOK: self._rook_attacks,
            PieceType.QUEEN: self._queen_attacks,
            PieceType.KING: self._king_attacks,
        }
        self._pseudo: dict[PieceType, _MoveSource] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: self._gen_bishop,
            PieceType.ROOK: self._gen_rook,
            PieceType.QUEEN: self._gen_queen,
            PieceType.KING: self._gen_king,
        }

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def can_attack(self, start: Coordinate, end: Coordinate) -> bool:
        """Whether the piece on *start* covers *end* by pattern alone."""
        piece = self._board[start]
        if piece is None or start == end or not end.is_on_board:
            return False
        return self._attack[piece.piece_type](piece, start, end)

    def is_pseudo_legal(self, start: Coordinate, end: Coordinate) -> bool:
        piece = self._board[start]
        if piece is None or start == end or not end.is_on_board:
            return False
        if piece.is_pawn:
            return self._is_pawn_move(piece, start, end)
        if piece.is_king and self.is_castling_move(start, end):
            return self._can_castle(piece, start, end)
        if not self._board.is_legal_destination(piece, end.x, end.y):
            return False
        return self._attack[piece.piece_type](piece, start, end)

    def is_move_legal(self, start: Coordinate, end: Coordinate) -> bool:
        """Pseudo-legal and does not leave the mover's king in check."""
        if not self.is_pseudo_legal(start, end):
            return False
        return not self.leaves_king_in_check(start, end)

    def pseudo_legal_moves(self, position: Coordinate) -> Iterator[Coordinate]:
        """Pattern destinations from *position*, without the check filter."""
        piece = self._board[position]
        if piece is None:
            return iter(())
        return self._pseudo[piece.piece_type](piece, position)

    def possible_moves(self, position: Coordinate) -> Iterator[Coordinate]:
        """Fully legal destinations from *position*.

        Lazily evaluated and recomputed on each call.
        """
        for end in self.pseudo_legal_moves(position):
            if not self.leaves_king_in_check(position, end):
                yield end

    # -- Special move classification ---------------------------------------

    def is_en_passant_move(self, start: Coordinate, end: Coordinate) -> bool:
        """Diagonal pawn step onto the square a double-stepped pawn skipped."""
        piece = self._board[start]
        last = self._board.last_move
        if piece is None or not piece.is_pawn or last is None:
            return False
        if not last.is_double_pawn_move:
            return False
        victim = self._board[last.to_sq]
        if victim is None or not victim.is_pawn or victim.color == piece.color:
            return False
        if last.to_sq.x != start.x or abs(last.to_sq.y - start.y) != 1:
            return False
        if end != Coordinate(last.to_sq.x + piece.direction, last.to_sq.y):
            return False
        return self._board[end] is None

    def is_castling_move(self, start: Coordinate, end: Coordinate) -> bool:
        """King pattern of two columns along its row."""
        piece = self._board[start]
        if piece is None or not piece.is_king:
            return False
        return end.x == start.x and abs(end.y - start.y) == 2

    # -- Attack detection ---------------------------------------------------

    def is_under_attack(self, target: Coordinate, color: Color) -> bool:
        """Is *target* attacked by any piece opposing *color*?"""
        for _piece, position in self._board.pieces_of(color.opposite):
            if self.can_attack(position, target):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return self.is_under_attack(self._board.king_position(color), color)

    # -- Simulation ---------------------------------------------------------

    def simulate_move(self, start: Coordinate, end: Coordinate) -> Board:
        """Copy of the board with the move applied, compound effects included."""
        board = self._board
        piece = board[start]
        if piece is None:
            raise ValueError(f"No piece at {start}")

        clone = board.copy()
        moved = piece.copy()
        moved.mark_as_moved()

        if self.is_en_passant_move(start, end):
            clone[Coordinate(start.x, end.y)] = None
        elif self.is_castling_move(start, end):
            rook_from, rook_to = castling_rook_squares(start, end)
            rook = clone[rook_from]
            clone[rook_from] = None
            if rook is not None:
                rook.mark_as_moved()
            clone[rook_to] = rook

        clone[start] = None
        clone[end] = moved
        clone.last_move = LastMove(start, end, is_double_pawn_move(piece, start, end))
        return clone

    def leaves_king_in_check(self, start: Coordinate, end: Coordinate) -> bool:
        piece = self._board[start]
        if piece is None:
            return False
        hypothetical = MoveGenerator(self.simulate_move(start, end))
        return hypothetical.is_in_check(piece.color)

    # -- Attack patterns (private) -----------------------------------------

    def _pawn_attacks(self, piece: Piece, start: Coordinate, end: Coordinate) -> bool:
        return end.x == start.x + piece.direction and abs(end.y - start.y) == 1

    def _knight_attacks(self, piece: Piece, start: Coordinate, end: Coordinate) -> bool:
        dx, dy = absolute_delta(start, end)
        return (dx, dy) in ((1, 2), (2, 1))

    def _bishop_attacks(self, piece: Piece, start: Coordinate, end: Coordinate) -> bool:
        dx, dy = absolute_delta(start, end)
        return dx != 0 and is_diagonal(dx, dy) and self._board.is_path_clear(start, end)

    def _rook_attacks(self, piece: Piece, start: Coordinate, end: Coordinate) -> bool:
        dx, dy = absolute_delta(start, end)
        return is_straight(dx, dy) and self._board.is_path_clear(start, end)

    def _queen_attacks(self, piece: Piece, start: Coordinate, end: Coordinate) -> bool:
        return self._rook_attacks(piece, start, end) or self._bishop_attacks(
            piece, start, end
        )

    def _king_attacks(self, piece: Piece, start: Coordinate, end: Coordinate) -> bool:
        dx, dy = absolute_delta(start, end)
        return dx <= 1 and dy <= 1

    # -- Pawn / castling legality (private) ---------------------------------

    def _is_pawn_move(self, piece: Piece, start: Coordinate, end: Coordinate) -> bool:
        board = self._board
        step = piece.direction
        target = board[end]

        if end.y == start.y:
            if end.x == start.x + step:
                return target is None
            if end.x == start.x + 2 * step and not piece.has_moved:
                return target is None and board[start.offset(step, 0)] is None
            return False

        if self._pawn_attacks(piece, start, end):
            if target is not None:
                return target.color != piece.color
            return self.is_en_passant_move(start, end)
        return False

    def _can_castle(self, king: Piece, start: Coordinate, end: Coordinate) -> bool:
        """Unmoved king and rook, empty path, no attacked square on the way."""
        if king.has_moved:
            return False
        rook_from, _rook_to = castling_rook_squares(start, end)
        rook = self._board[rook_from]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != king.color
            or rook.has_moved
        ):
            return False
        if not self._board.is_path_clear(start, rook_from):
            return False

        step = 1 if end.y > start.y else -1
        traversed = (start, start.offset(0, step), end)
        return not any(self.is_under_attack(sq, king.color) for sq in traversed)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece, position: Coordinate) -> Iterator[Coordinate]:
        step = piece.direction
        forward = position.offset(step, 0)
        if not forward.is_on_board:
            return
        if self._board[forward] is None:
            yield forward
            double = position.offset(2 * step, 0)
            if (
                not piece.has_moved
                and double.is_on_board
                and self._board[double] is None
            ):
                yield double
        for dy in (-1, 1):
            capture = position.offset(step, dy)
            if capture.is_on_board and self._is_pawn_move(piece, position, capture):
                yield capture

    def _gen_knight(self, piece: Piece, position: Coordinate) -> Iterator[Coordinate]:
        for dx, dy in KNIGHT_OFFSETS:
            end = position.offset(dx, dy)
            if end.is_on_board and self._board.is_legal_destination(
                piece, end.x, end.y
            ):
                yield end

    def _gen_bishop(self, piece: Piece, position: Coordinate) -> Iterator[Coordinate]:
        yield from self._board.sliding_moves(DIAGONAL_DIRECTIONS, position, piece)

    def _gen_rook(self, piece: Piece, position: Coordinate) -> Iterator[Coordinate]:
        yield from self._board.sliding_moves(STRAIGHT_DIRECTIONS, position, piece)

    def _gen_queen(self, piece: Piece, position: Coordinate) -> Iterator[Coordinate]:
        yield from self._board.sliding_moves(ALL_DIRECTIONS, position, piece)

    def _gen_king(self, piece: Piece, position: Coordinate) -> Iterator[Coordinate]:
        for dx, dy in KING_OFFSETS:
            end = position.offset(dx, dy)
            if end.is_on_board and self._board.is_legal_destination(
                piece, end.x, end.y
            ):
                yield end
        if piece.has_moved:
            return
        for dy in (2, -2):
            end = position.offset(0, dy)
            if end.is_on_board and self._can_castle(piece, position, end):
                yield end
