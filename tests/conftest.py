"""Shared pytest fixtures used across the test suite.

Board fixtures use the human-plays-White orientation: White starts on rows
6 and 7 and its pawns step -1 along x; Black starts on rows 0 and 1.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from chessgrid.core.board import Board, LastMove
from chessgrid.core.enums import Color
from chessgrid.core.geometry import ROW_ASCENDING, ROW_DESCENDING, Coordinate
from chessgrid.core.piece import Piece

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for Qt tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def empty_board() -> Board:
    return Board(Color.WHITE, setup=False)


@pytest.fixture
def initial_board() -> Board:
    return Board(Color.WHITE)


@pytest.fixture
def en_passant_board() -> Board:
    """Black pawn has just double-stepped from (6, 3) to (4, 3), landing
    beside a white pawn on (4, 4) that advances toward row 7."""
    board = Board(Color.WHITE, setup=False)
    board[4, 4] = Piece.pawn(Color.WHITE, ROW_ASCENDING)
    board[4, 4].mark_as_moved()
    board[4, 3] = Piece.pawn(Color.BLACK, ROW_DESCENDING)
    board[4, 3].mark_as_moved()
    board[0, 7] = Piece.king(Color.WHITE)
    board[7, 0] = Piece.king(Color.BLACK)
    board.last_move = LastMove(Coordinate(6, 3), Coordinate(4, 3), True)
    return board


@pytest.fixture
def castling_board() -> Board:
    """White king and both rooks unmoved on row 7, nothing in between."""
    board = Board(Color.WHITE, setup=False)
    board[7, 4] = Piece.king(Color.WHITE)
    board[7, 0] = Piece.rook(Color.WHITE)
    board[7, 7] = Piece.rook(Color.WHITE)
    board[0, 0] = Piece.king(Color.BLACK)
    return board


@pytest.fixture
def promotion_board() -> Board:
    """White pawn one step from row 0."""
    board = Board(Color.WHITE, setup=False)
    board[1, 0] = Piece.pawn(Color.WHITE, ROW_DESCENDING)
    board[1, 0].mark_as_moved()
    board[7, 4] = Piece.king(Color.WHITE)
    board[0, 7] = Piece.king(Color.BLACK)
    return board


@pytest.fixture
def fools_mate_board() -> Board:
    """Position after 1.f3 e5 2.g4 Qh4#, White to move."""
    board = Board(Color.WHITE)
    for start, end in (
        ((6, 5), (5, 5)),
        ((1, 4), (3, 4)),
        ((6, 6), (4, 6)),
        ((0, 3), (4, 7)),
    ):
        piece = board[start]
        board[start] = None
        board[end] = piece
        piece.mark_as_moved()
    return board
