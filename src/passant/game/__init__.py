"""Game management layer: session state and the event-emitting controller.

Quick start::

    from passant.game import GameController

    ctrl = GameController()
    ctrl.events.on_promotion_requested.append(print)
    ctrl.submit_move((4, 1), (4, 3))
"""

from passant.game.controller import GameController, GameEvents
from passant.game.session import GameSession, MoveRecord

__all__ = [
    "GameController",
    "GameEvents",
    "GameSession",
    "MoveRecord",
]
