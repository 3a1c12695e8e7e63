"""Turning square selections into moves."""

from __future__ import annotations

from chessling.core.coordinate import Coordinate
from chessling.core.enums import Color, PieceType
from chessling.core.move import KINGSIDE_CASTLE, QUEENSIDE_CASTLE, Move
from chessling.core.position import Position


def move_from_coordinates(position: Position, from_sq: Coordinate, to_sq: Coordinate) -> Move:
    """Build the move a user means by dragging a piece from *from_sq* to *to_sq*.

    A king stepping two files sideways from its start square castles; a pawn
    reaching the far rank promotes to a queen.  Legality is not checked.
    """
    piece = position.get_piece(from_sq)
    if piece is None:
        return Move(from_sq, to_sq)

    if (
        piece.piece_type == PieceType.KING
        and from_sq == Coordinate.king_start(piece.color)
        and to_sq.rank == from_sq.rank
    ):
        if to_sq.file - from_sq.file == 2:
            return KINGSIDE_CASTLE
        if from_sq.file - to_sq.file == 2:
            return QUEENSIDE_CASTLE

    last_rank = 7 if piece.color == Color.WHITE else 0
    if piece.piece_type == PieceType.PAWN and to_sq.rank == last_rank:
        return Move.promote(from_sq, to_sq, PieceType.QUEEN)

    return Move(from_sq, to_sq)
