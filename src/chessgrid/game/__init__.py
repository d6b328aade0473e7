"""Game management layer: controller, players, selection state machine.

Quick start::

    from chessgrid.core import Color
    from chessgrid.game import GameController

    ctrl = GameController()
    ctrl.new_game(human_color=Color.WHITE)
    ctrl.select_square(6, 4)
    ctrl.select_square(4, 4)
"""

from chessgrid.game.config import GameConfig
from chessgrid.game.controller import GameController, GameEvents
from chessgrid.game.interfaces import IGameController, IPlayer, SelectionPhase
from chessgrid.game.player import AIPlayer, HumanPlayer

__all__ = [
    # Interfaces
    "IGameController",
    "IPlayer",
    "SelectionPhase",
    # Concrete
    "AIPlayer",
    "GameConfig",
    "GameController",
    "GameEvents",
    "HumanPlayer",
]
