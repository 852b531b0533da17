"""Game management layer — controller, state machine, events.

Quick start::

    from chessmate.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.events.on_game_over.append(lambda winner: print(winner, "wins"))
"""

from chessmate.game.controller import GameController, GameEvents
from chessmate.game.interfaces import GamePhase, IGameController, MoveRejection
from chessmate.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "MoveRejection",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
