"""Tests for GameController: selection, turn hand-over and events."""

import pytest

from chessgrid.core.enums import Color, GameState, PieceType
from chessgrid.core.errors import MoveError
from chessgrid.core.geometry import Coordinate
from chessgrid.core.move import MoveOutcome
from chessgrid.engine.random_mover import RandomMover
from chessgrid.game.config import GameConfig
from chessgrid.game.controller import GameController
from chessgrid.game.interfaces import SelectionPhase
from chessgrid.game.player import AIPlayer

C = Coordinate

FOOLS_MATE = (
    (C(6, 5), C(5, 5)),
    (C(1, 4), C(3, 4)),
    (C(6, 6), C(4, 6)),
    (C(0, 3), C(4, 7)),
)


def _make_hh_controller(config: GameConfig | None = None) -> GameController:
    """Helper: human vs human game."""
    ctrl = GameController(config)
    ctrl.new_game()
    return ctrl


class TestNewGame:
    def test_initial_queries(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.side_to_move() == Color.WHITE
        assert ctrl.current_state() == GameState.ONGOING
        assert ctrl.turns_played() == 1
        assert ctrl.phase == SelectionPhase.AWAITING_SELECTION
        assert ctrl.piece_at(7, 4).piece_type == PieceType.KING

    def test_players_assigned(self) -> None:
        ctrl = _make_hh_controller()
        white, black = ctrl.player(Color.WHITE), ctrl.player(Color.BLACK)
        assert white is not None and white.is_human
        assert black is not None and black.is_human
        assert ctrl.current_player is white

    def test_human_black_orientation(self) -> None:
        ctrl = _make_hh_controller(GameConfig(human_color=Color.BLACK))
        assert ctrl.piece_at(7, 4).color == Color.BLACK
        assert ctrl.piece_at(0, 4).color == Color.WHITE
        assert ctrl.side_to_move() == Color.WHITE

    def test_override_human_color(self) -> None:
        ctrl = GameController()
        ctrl.new_game(human_color=Color.BLACK)
        assert ctrl.board.human_color == Color.BLACK

    def test_opponent_must_take_other_colour(self) -> None:
        ctrl = GameController()
        with pytest.raises(ValueError, match="Opponent"):
            ctrl.new_game(opponent=AIPlayer(Color.WHITE))

    def test_new_game_cancels_pending_ai_request(self) -> None:
        cancelled: list[bool] = []
        ctrl = GameController()
        ai = AIPlayer(Color.WHITE, on_cancel=lambda: cancelled.append(True))
        ctrl.new_game(human_color=Color.BLACK, opponent=ai)
        assert ctrl.current_player is ai

        ctrl.new_game()

        assert cancelled == [True]
        assert ctrl.player(Color.BLACK).is_human

    def test_new_game_leaves_idle_ai_alone(self) -> None:
        cancelled: list[bool] = []
        ctrl = GameController()
        ai = AIPlayer(Color.BLACK, on_cancel=lambda: cancelled.append(True))
        ctrl.new_game(opponent=ai)
        assert ctrl.current_player is not ai

        ctrl.new_game()

        assert cancelled == []

    def test_new_game_resets(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.select_square(6, 4)
        ctrl.select_square(4, 4)
        ctrl.new_game()
        assert ctrl.turns_played() == 1
        assert ctrl.piece_at(6, 4) is not None

    def test_possible_moves(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.possible_moves(C(7, 1)) == [C(5, 2), C(5, 0)]


class TestSelection:
    def test_select_own_piece(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.select_square(6, 4)
        assert ctrl.phase == SelectionPhase.PIECE_SELECTED
        assert ctrl.selected_square == C(6, 4)
        assert ctrl.highlighted_moves == [C(5, 4), C(4, 4)]

    def test_select_opponent_piece_ignored(self) -> None:
        ctrl = _make_hh_controller()
        assert not ctrl.select_square(1, 4)
        assert ctrl.phase == SelectionPhase.AWAITING_SELECTION

    def test_select_empty_square_ignored(self) -> None:
        ctrl = _make_hh_controller()
        assert not ctrl.select_square(4, 4)
        assert ctrl.selected_square is None

    def test_select_off_board(self) -> None:
        ctrl = _make_hh_controller()
        assert not ctrl.select_square(8, 0)
        assert not ctrl.select_square(0, -1)

    def test_second_click_moves(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.select_square(6, 4)
        assert ctrl.select_square(4, 4)
        assert ctrl.piece_at(4, 4) is not None
        assert ctrl.side_to_move() == Color.BLACK
        assert ctrl.phase == SelectionPhase.AWAITING_SELECTION
        assert ctrl.highlighted_moves == []

    def test_illegal_destination_clears_selection(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.select_square(6, 4)
        assert not ctrl.select_square(3, 4)
        assert ctrl.phase == SelectionPhase.AWAITING_SELECTION
        assert ctrl.selected_square is None
        assert ctrl.side_to_move() == Color.WHITE

    def test_keep_selection_on_illegal_move(self) -> None:
        ctrl = _make_hh_controller(GameConfig(keep_selection_on_illegal_move=True))
        ctrl.select_square(6, 4)
        assert not ctrl.select_square(3, 4)
        assert ctrl.phase == SelectionPhase.PIECE_SELECTED
        assert ctrl.selected_square == C(6, 4)
        assert ctrl.select_square(4, 4)

    def test_selection_events(self) -> None:
        ctrl = _make_hh_controller()
        seen: list[tuple] = []
        ctrl.events.on_selection_changed.append(
            lambda square, moves: seen.append((square, moves))
        )
        ctrl.select_square(6, 4)
        ctrl.select_square(3, 4)
        assert seen == [(C(6, 4), [C(5, 4), C(4, 4)]), (None, [])]


class TestAttemptMove:
    def test_wrong_side(self) -> None:
        ctrl = _make_hh_controller()
        result = ctrl.attempt_move(C(1, 4), C(3, 4))
        assert result.error == MoveError.WRONG_SIDE
        assert ctrl.piece_at(1, 4) is not None

    def test_no_piece(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.attempt_move(C(4, 4), C(3, 4)).error == MoveError.NO_PIECE_AT_SOURCE

    def test_illegal(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.attempt_move(C(7, 0), C(5, 0)).error == MoveError.ILLEGAL_MOVE

    def test_events_on_move(self) -> None:
        ctrl = _make_hh_controller()
        boards: list[object] = []
        moves: list[MoveOutcome] = []
        ctrl.events.on_board_changed.append(boards.append)
        ctrl.events.on_move.append(moves.append)
        ctrl.attempt_move(C(6, 4), C(4, 4))
        assert boards == [ctrl.board]
        assert len(moves) == 1 and moves[0].to_sq == C(4, 4)

    def test_fools_mate(self) -> None:
        ctrl = GameController()
        states: list[GameState] = []
        finished: list[GameState] = []
        ctrl.events.on_state_changed.append(states.append)
        ctrl.events.on_game_over.append(finished.append)
        ctrl.new_game()
        for start, end in FOOLS_MATE:
            assert ctrl.attempt_move(start, end).ok

        assert ctrl.is_game_over
        assert ctrl.current_state() == GameState.CHECKMATE
        assert states == [GameState.ONGOING, GameState.CHECKMATE]
        assert finished == [GameState.CHECKMATE]
        assert not ctrl.select_square(6, 0)
        assert ctrl.attempt_move(C(6, 0), C(5, 0)).error == MoveError.GAME_OVER


class TestAIOpponent:
    def test_ai_moves_first_when_human_is_black(self) -> None:
        ctrl = GameController(GameConfig(human_color=Color.BLACK))
        ai = RandomMover(seed=3).as_player(ctrl, Color.WHITE)
        ctrl.new_game(opponent=ai)
        assert ctrl.side_to_move() == Color.BLACK
        assert ctrl.turns_played() == 2

    def test_ai_answers_human_move(self) -> None:
        ctrl = GameController()
        ctrl.new_game(opponent=RandomMover(seed=11).as_player(ctrl, Color.BLACK))
        ctrl.select_square(6, 4)
        assert ctrl.select_square(4, 4)
        assert ctrl.side_to_move() == Color.WHITE
        assert ctrl.turns_played() == 3

    def test_human_cannot_act_on_ai_turn(self) -> None:
        ctrl = GameController()
        ctrl.new_game(human_color=Color.BLACK, opponent=AIPlayer(Color.WHITE))
        assert not ctrl.select_square(1, 4)
        assert ctrl.attempt_move(C(1, 4), C(3, 4)).ok
        assert ctrl.select_square(6, 4)

    def test_rejected_ai_move_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        ctrl.new_game(human_color=Color.BLACK, opponent=AIPlayer(Color.WHITE, "Bot"))
        with caplog.at_level("WARNING", logger="chessgrid.game.controller"):
            result = ctrl.attempt_move(C(1, 4), C(4, 4))
        assert result.error == MoveError.ILLEGAL_MOVE
        assert "Bot" in caplog.text

    @pytest.mark.slow
    def test_random_self_play(self) -> None:
        ctrl = GameController()
        white = RandomMover(seed=1)
        ctrl.new_game(opponent=RandomMover(seed=2).as_player(ctrl, Color.BLACK))
        for _ in range(40):
            if ctrl.is_game_over:
                break
            choice = white.choose(ctrl.board, Color.WHITE)
            assert choice is not None
            assert ctrl.attempt_move(*choice).ok
        assert ctrl.turns_played() >= 2
