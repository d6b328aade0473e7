"""Qt bridge that re-emits controller events as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from chessgrid.core.board import Board
from chessgrid.core.enums import GameState
from chessgrid.core.geometry import Coordinate
from chessgrid.core.move import MoveOutcome
from chessgrid.game.controller import GameController


class QtGameBridge(QObject):
    """Thread-affine adapter between a :class:`GameController` and Qt views.

    Signals carry the same payloads as the controller callbacks; game
    states are sent as their integer value.
    """

    board_changed = pyqtSignal(object)
    move_applied = pyqtSignal(object)
    state_changed = pyqtSignal(int)
    selection_changed = pyqtSignal(object, object)
    game_over = pyqtSignal(int)

    def __init__(
        self, controller: GameController, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        events = controller.events
        events.on_board_changed.append(self._forward_board)
        events.on_move.append(self._forward_move)
        events.on_state_changed.append(self._forward_state)
        events.on_selection_changed.append(self._forward_selection)
        events.on_game_over.append(self._forward_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    def disconnect_controller(self) -> None:
        """Stop forwarding controller events."""
        events = self._controller.events
        for callbacks, handler in (
            (events.on_board_changed, self._forward_board),
            (events.on_move, self._forward_move),
            (events.on_state_changed, self._forward_state),
            (events.on_selection_changed, self._forward_selection),
            (events.on_game_over, self._forward_game_over),
        ):
            if handler in callbacks:
                callbacks.remove(handler)

    def _forward_board(self, board: Board) -> None:
        self.board_changed.emit(board)

    def _forward_move(self, outcome: MoveOutcome) -> None:
        self.move_applied.emit(outcome)

    def _forward_state(self, state: GameState) -> None:
        self.state_changed.emit(int(state))

    def _forward_selection(
        self, square: Coordinate | None, moves: list[Coordinate]
    ) -> None:
        self.selection_changed.emit(square, moves)

    def _forward_game_over(self, state: GameState) -> None:
        self.game_over.emit(int(state))
