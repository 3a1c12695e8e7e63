"""Game layer: a playable session on top of the core rules."""

from chessling.game.actions import (
    AcceptDraw,
    GameAction,
    GameOver,
    MakeMove,
    OfferDraw,
    Resign,
)
from chessling.game.moves import move_from_coordinates
from chessling.game.session import (
    Game,
    GameAlreadyOverError,
    GameEvents,
    MoveRecord,
)

__all__ = [
    "AcceptDraw",
    "Game",
    "GameAction",
    "GameAlreadyOverError",
    "GameEvents",
    "GameOver",
    "MakeMove",
    "MoveRecord",
    "OfferDraw",
    "Resign",
    "move_from_coordinates",
]
