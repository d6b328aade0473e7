"""GameController: the central orchestrator of a chess game.

Coordinates: Board, MoveExecutor, players and the interactive selection
state machine.  Emits events via simple callbacks so a view layer or tests
can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, GameState
from chessgrid.core.errors import MoveError
from chessgrid.core.executor import MoveExecutor
from chessgrid.core.geometry import Coordinate
from chessgrid.core.move import MoveOutcome, MoveResult
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.piece import Piece
from chessgrid.game.config import GameConfig
from chessgrid.game.interfaces import IGameController, IPlayer, SelectionPhase
from chessgrid.game.player import HumanPlayer

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

BoardCallback = Callable[[Board], None]
MoveCallback = Callable[[MoveOutcome], None]
StateCallback = Callable[[GameState], None]
SelectionCallback = Callable[[Coordinate | None, list[Coordinate]], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[BoardCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_game_over: list[StateCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a chess game: selection, move validation, turn
    hand-over and listener notification.

    Thread-safety: methods are designed to be called from a single thread.
    An AI computing elsewhere must hand its move back to that thread
    before calling :meth:`attempt_move`.
    """

    __slots__ = (
        "_config",
        "_board",
        "_executor",
        "_players",
        "_phase",
        "_selected",
        "_highlighted",
        "_prompting",
        "_reprompt",
        "_last_state",
        "events",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()
        self._executor = MoveExecutor()
        self._executor.listeners.append(self._on_move_applied)
        self._players: dict[Color, IPlayer] = {}
        self._phase = SelectionPhase.AWAITING_SELECTION
        self._selected: Coordinate | None = None
        self._highlighted: list[Coordinate] = []
        self._prompting = False
        self._reprompt = False
        self.events = GameEvents()
        self._board = Board(self._config.human_color)
        self._last_state = self._board.state

    # ── Properties / queries ─────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._board

    @property
    def phase(self) -> SelectionPhase:
        return self._phase

    @property
    def selected_square(self) -> Coordinate | None:
        return self._selected

    @property
    def highlighted_moves(self) -> list[Coordinate]:
        return list(self._highlighted)

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._board.side_to_move)

    @property
    def is_game_over(self) -> bool:
        return self._board.state.is_terminal

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    def piece_at(self, x: int, y: int) -> Piece | None:
        return self._board.get(x, y)

    def possible_moves(self, position: Coordinate) -> list[Coordinate]:
        return list(MoveGenerator(self._board).possible_moves(position))

    def current_state(self) -> GameState:
        return self._board.state

    def side_to_move(self) -> Color:
        return self._board.side_to_move

    def turns_played(self) -> int:
        return self._board.turns_played

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        human_color: Color | None = None,
        opponent: IPlayer | None = None,
    ) -> None:
        color = self._config.human_color if human_color is None else human_color
        if opponent is not None and opponent.color == color:
            raise ValueError(f"Opponent must play {color.opposite}, not {color}")

        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

        self._board = Board(color)
        self._last_state = self._board.state
        self._players = {
            color: HumanPlayer(color),
            color.opposite: opponent or HumanPlayer(color.opposite),
        }
        self._clear_selection()
        _LOGGER.debug("New game, human plays %s", color)

        self._emit_board_changed()
        self._emit_state(self._board.state)
        self._prompt_current_player()

    def select_square(self, x: int, y: int) -> bool:
        """Click-style interaction for the human side to move.

        With no selection, picks up a piece of the side to move (anything
        else is ignored).  With a selection, tries to move the selected
        piece to ``(x, y)``; the selection is then cleared unless the move
        was rejected and ``keep_selection_on_illegal_move`` is set.
        """
        square = Coordinate(x, y)
        if not square.is_on_board:
            return False
        if self.is_game_over:
            return False
        cp = self.current_player
        if cp is not None and not cp.is_human:
            return False

        if self._phase == SelectionPhase.AWAITING_SELECTION:
            piece = self._board[square]
            if piece is None or piece.color != self._board.side_to_move:
                return False
            self._selected = square
            self._highlighted = self.possible_moves(square)
            self._phase = SelectionPhase.PIECE_SELECTED
            self._emit_selection()
            return True

        assert self._selected is not None
        result = self.attempt_move(self._selected, square)
        if not result.ok and not self._config.keep_selection_on_illegal_move:
            self._clear_selection()
            self._emit_selection()
        return result.ok

    def attempt_move(self, start: Coordinate, end: Coordinate) -> MoveResult:
        if self.is_game_over:
            return MoveResult.failure(MoveError.GAME_OVER)

        piece = self._board[start]
        if piece is None:
            return MoveResult.failure(MoveError.NO_PIECE_AT_SOURCE)
        if piece.color != self._board.side_to_move:
            return MoveResult.failure(MoveError.WRONG_SIDE)

        result = self._executor.apply_move(self._board, start, end)
        if not result.ok:
            cp = self.current_player
            if cp is not None and not cp.is_human:
                _LOGGER.warning(
                    "%s attempted a rejected move %s -> %s: %s",
                    cp.name,
                    start,
                    end,
                    result.error.name if result.error else None,
                )
            return result

        self._prompt_current_player()
        return result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _on_move_applied(self, board: Board, outcome: MoveOutcome) -> None:
        if self._selected is not None:
            self._clear_selection()
            self._emit_selection()
        self._emit_board_changed()
        for cb in self.events.on_move:
            cb(outcome)
        if board.state != self._last_state:
            self._last_state = board.state
            self._emit_state(board.state)
        if board.state.is_terminal:
            for cb in self.events.on_game_over:
                cb(board.state)

    def _prompt_current_player(self) -> None:
        """Ask the side to move for a move until a human has to act.

        An AI that answers synchronously re-enters through
        :meth:`attempt_move`; the nested prompt is deferred to this loop so
        AI-vs-AI play does not recurse.
        """
        if self._prompting:
            self._reprompt = True
            return

        self._prompting = True
        try:
            while True:
                self._reprompt = False
                cp = self.current_player
                if cp is None or cp.is_human or self.is_game_over:
                    return
                cp.request_move(self._board)
                if not self._reprompt:
                    return
        finally:
            self._prompting = False

    def _clear_selection(self) -> None:
        self._selected = None
        self._highlighted = []
        self._phase = SelectionPhase.AWAITING_SELECTION

    def _emit_board_changed(self) -> None:
        for cb in self.events.on_board_changed:
            cb(self._board)

    def _emit_state(self, state: GameState) -> None:
        for cb in self.events.on_state_changed:
            cb(state)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selected, list(self._highlighted))
