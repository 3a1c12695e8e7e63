"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from chessling.core import Position

    pos = Position.initial()
    for move in pos.legal_moves():
        print(move)
"""

from chessling.core.board import Board
from chessling.core.builder import PositionBuilder
from chessling.core.coordinate import Coordinate, all_coordinates
from chessling.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessling.core.move import KINGSIDE_CASTLE, QUEENSIDE_CASTLE, Move
from chessling.core.piece import Piece
from chessling.core.position import Position
from chessling.core.result import (
    Continuing,
    GameResult,
    IllegalMove,
    Stalemate,
    Victory,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "PieceType",
    # Geometry
    "Coordinate",
    "all_coordinates",
    # Domain objects
    "Board",
    "KINGSIDE_CASTLE",
    "Move",
    "Piece",
    "Position",
    "PositionBuilder",
    "QUEENSIDE_CASTLE",
    # Outcomes
    "Continuing",
    "GameResult",
    "IllegalMove",
    "Stalemate",
    "Victory",
]
