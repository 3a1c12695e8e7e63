"""Notation package: FEN and SAN parsing and serialization."""

from chessling.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessling.notation.san import (
    AmbiguousMoveError,
    InvalidMoveError,
    NotationError,
    move_to_san,
    parse_san,
)

__all__ = [
    "STARTING_FEN",
    "AmbiguousMoveError",
    "InvalidMoveError",
    "NotationError",
    "move_to_san",
    "parse_san",
    "position_from_fen",
    "position_to_fen",
]
