"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chessling.core.coordinate import Coordinate
from chessling.core.enums import Color, PieceType
from chessling.core.piece import Piece

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board indexed a1=0 … h8=63.

    Every square holds at most one :class:`Piece`, whose own coordinate always
    matches the square it sits on.  Updates return a fresh board.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        self._squares: tuple[Piece | None, ...] = (
            tuple(squares) if squares is not None else (None,) * 64
        )
        if len(self._squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(self._squares)}")

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coordinate: Coordinate) -> Piece | None:
        if coordinate.is_off_board():
            return None
        return self._squares[coordinate.index]

    def is_empty(self, coordinate: Coordinate) -> bool:
        return self[coordinate] is None

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces in square order, optionally only those of *color*."""
        return [
            p
            for p in self._squares
            if p is not None and (color is None or p.color == color)
        ]

    def find_king(self, color: Color) -> Piece | None:
        """Linear scan for *color*'s king."""
        for piece in self._squares:
            if (
                piece is not None
                and piece.color == color
                and piece.piece_type == PieceType.KING
            ):
                return piece
        return None

    # -- Copying ------------------------------------------------------------

    def updated(self, *changes: tuple[Coordinate, Piece | None]) -> Board:
        """New board with each ``(coordinate, piece-or-None)`` written in order.

        Placed pieces are re-anchored to the coordinate they are written to.
        Raises :class:`ValueError` for an off-board coordinate.
        """
        squares = list(self._squares)
        for coordinate, piece in changes:
            if coordinate.is_off_board():
                raise ValueError(f"Cannot write to off-board square {coordinate!r}")
            if piece is not None and piece.coordinate != coordinate:
                piece = piece.move_to(coordinate)
            squares[coordinate.index] = piece
        return Board(squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting arrangement."""
        changes: list[tuple[Coordinate, Piece | None]] = []
        for f in range(8):
            for color, rank in ((Color.WHITE, 1), (Color.BLACK, 6)):
                sq = Coordinate(rank, f)
                changes.append((sq, Piece(color, PieceType.PAWN, sq)))

        for f, pt in enumerate(_BACK_RANK):
            for color, rank in ((Color.WHITE, 0), (Color.BLACK, 7)):
                sq = Coordinate(rank, f)
                changes.append((sq, Piece(color, pt, sq)))
        return cls.empty().updated(*changes)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Coordinate(rank, file)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
