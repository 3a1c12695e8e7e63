"""Fluent builder for arbitrary positions."""

from __future__ import annotations

from chessling.core.board import Board
from chessling.core.coordinate import Coordinate
from chessling.core.enums import CastlingRights, Color
from chessling.core.piece import Piece
from chessling.core.position import Position


class PositionBuilder:
    """Assemble a :class:`Position` piece by piece.

    Starts from an empty board, White to move, no castling rights and no
    en-passant target::

        pos = (
            PositionBuilder()
            .piece(Piece(Color.WHITE, PieceType.KING, E1))
            .piece(Piece(Color.BLACK, PieceType.KING, E8))
            .set_turn(Color.BLACK)
            .build()
        )
    """

    __slots__ = ("_board", "_turn", "_castling", "_en_passant")

    def __init__(self) -> None:
        self._board = Board.empty()
        self._turn = Color.WHITE
        self._castling = CastlingRights.NONE
        self._en_passant: Coordinate | None = None

    @classmethod
    def from_position(cls, position: Position) -> PositionBuilder:
        builder = cls()
        builder._board = position.board
        builder._turn = position.turn
        builder._castling = position.castling
        builder._en_passant = position.en_passant
        return builder

    def piece(self, piece: Piece) -> PositionBuilder:
        """Place *piece* on its own coordinate, replacing any occupant."""
        if piece.coordinate.is_off_board():
            raise ValueError(f"Cannot place {piece!r} off the board")
        self._board = self._board.updated((piece.coordinate, piece))
        return self

    def clear(self, coordinate: Coordinate) -> PositionBuilder:
        if coordinate.is_on_board():
            self._board = self._board.updated((coordinate, None))
        return self

    def set_turn(self, color: Color) -> PositionBuilder:
        self._turn = color
        return self

    def enable_kingside_castle(self, color: Color) -> PositionBuilder:
        self._castling |= CastlingRights.kingside(color)
        return self

    def enable_queenside_castle(self, color: Color) -> PositionBuilder:
        self._castling |= CastlingRights.queenside(color)
        return self

    def disable_castling(self, color: Color) -> PositionBuilder:
        self._castling &= ~CastlingRights.both(color)
        return self

    def set_en_passant(self, coordinate: Coordinate | None) -> PositionBuilder:
        self._en_passant = coordinate
        return self

    def build(self) -> Position:
        return Position(
            board=self._board,
            turn=self._turn,
            castling=self._castling,
            en_passant=self._en_passant,
        )
