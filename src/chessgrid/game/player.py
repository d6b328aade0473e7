"""Human and AI seats at the board."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chessgrid.core.enums import Color
from chessgrid.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessgrid.core.board import Board

MoveRequest = Callable[["Board"], None]


class _SeatedPlayer(IPlayer):
    """Colour and display name shared by every player kind."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str) -> None:
        self._color = color
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._color}, {self._name!r})"


class HumanPlayer(_SeatedPlayer):
    """Moves arrive through :meth:`GameController.select_square`, so a
    move request needs no answer."""

    __slots__ = ()

    def __init__(self, color: Color, name: str = "") -> None:
        super().__init__(color, name or f"Player ({color})")

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        return None

    def cancel(self) -> None:
        return None


class AIPlayer(_SeatedPlayer):
    """Computer seat driven by callbacks.

    ``on_request_move(board)`` runs whenever the controller hands this side
    the move; it must answer with :meth:`GameController.attempt_move`, now
    or later on the controller's thread.  ``on_cancel()`` aborts a pending
    answer.  Either callback may be omitted.
    """

    __slots__ = ("_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Engine",
        on_request_move: MoveRequest | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(color, name)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: Board) -> None:
        if self._on_request_move:
            self._on_request_move(board)

    def cancel(self) -> None:
        if self._on_cancel:
            self._on_cancel()
