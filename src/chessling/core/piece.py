"""Piece value object: movement geometry and evaluation weights."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chessling.core.coordinate import Coordinate
from chessling.core.enums import Color, PieceType
from chessling.core.move import KINGSIDE_CASTLE, QUEENSIDE_CASTLE, Move

if TYPE_CHECKING:
    from chessling.core.position import Position

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# -- Positional weights ------------------------------------------------------
#
# Tables are written from White's point of view with rank 8 on the first row,
# so a square is looked up as ``table[7 - rank][file]``.  Black uses the
# vertical mirror.

Weights = tuple[tuple[float, ...], ...]

_KING_WEIGHTS: Weights = (
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-2.0, -3.0, -3.0, -4.0, -4.0, -3.0, -3.0, -2.0),
    (-1.0, -2.0, -2.0, -2.0, -2.0, -2.0, -2.0, -1.0),
    (2.0, 2.0, 0.0, 0.0, 0.0, 0.0, 2.0, 2.0),
    (2.0, 3.0, 1.0, 0.0, 0.0, 1.0, 3.0, 2.0),
)

_QUEEN_WEIGHTS: Weights = (
    (-2.0, -1.0, -1.0, -0.5, -0.5, -1.0, -1.0, -2.0),
    (-1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -1.0),
    (-0.5, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -0.5),
    (0.0, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -0.5),
    (-1.0, 0.5, 0.5, 0.5, 0.5, 0.5, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, -1.0, -0.5, -0.5, -0.5, -1.0, -2.0),
)

_ROOK_WEIGHTS: Weights = (
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (0.0, 0.0, 0.0, 0.5, 0.5, 0.0, 0.0, 0.0),
)

_BISHOP_WEIGHTS: Weights = (
    (-2.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -2.0),
    (-1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 1.0, 1.0, 0.5, 0.0, -1.0),
    (-1.0, 0.5, 0.5, 1.0, 1.0, 0.5, 0.5, -1.0),
    (-1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 0.0, -1.0),
    (-1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, -1.0),
    (-1.0, 0.5, 0.0, 0.0, 0.0, 0.0, 0.5, -1.0),
    (-2.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -2.0),
)

_KNIGHT_WEIGHTS: Weights = (
    (-5.0, -4.0, -3.0, -3.0, -3.0, -3.0, -4.0, -5.0),
    (-4.0, -2.0, 0.0, 0.0, 0.0, 0.0, -2.0, -4.0),
    (-3.0, 0.0, 1.0, 1.5, 1.5, 1.0, 0.0, -3.0),
    (-3.0, 0.5, 1.5, 2.0, 2.0, 1.5, 0.5, -3.0),
    (-3.0, 0.0, 1.5, 2.0, 2.0, 1.5, 0.0, -3.0),
    (-3.0, 0.5, 1.0, 1.5, 1.5, 1.0, 0.5, -3.0),
    (-4.0, -2.0, 0.0, 0.5, 0.5, 0.0, -2.0, -4.0),
    (-5.0, -4.0, -3.0, -3.0, -3.0, -3.0, -4.0, -5.0),
)

_PAWN_WEIGHTS: Weights = (
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0),
    (1.0, 1.0, 2.0, 3.0, 3.0, 2.0, 1.0, 1.0),
    (0.5, 0.5, 1.0, 2.5, 2.5, 1.0, 0.5, 0.5),
    (0.0, 0.0, 0.0, 2.0, 2.0, 0.0, 0.0, 0.0),
    (0.5, -0.5, -1.0, 0.0, 0.0, -1.0, -0.5, 0.5),
    (0.5, 1.5, -1.0, -2.0, -2.0, 1.0, 1.5, 0.5),
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
)

_WHITE_WEIGHTS: dict[PieceType, Weights] = {
    PieceType.KING: _KING_WEIGHTS,
    PieceType.QUEEN: _QUEEN_WEIGHTS,
    PieceType.ROOK: _ROOK_WEIGHTS,
    PieceType.BISHOP: _BISHOP_WEIGHTS,
    PieceType.KNIGHT: _KNIGHT_WEIGHTS,
    PieceType.PAWN: _PAWN_WEIGHTS,
}

POSITION_WEIGHTS: dict[Color, dict[PieceType, Weights]] = {
    Color.WHITE: _WHITE_WEIGHTS,
    Color.BLACK: {pt: tuple(reversed(table)) for pt, table in _WHITE_WEIGHTS.items()},
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a colored piece standing on a coordinate."""

    color: Color
    piece_type: PieceType
    coordinate: Coordinate

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, coordinate: Coordinate) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, coordinate)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    # ── Values ───────────────────────────────────────────────────────────

    def material_value(self) -> int:
        return self.piece_type.material_value

    def weighted_value(self) -> float:
        """Ten times the material value plus the positional table bonus."""
        table = POSITION_WEIGHTS[self.color][self.piece_type]
        bonus = table[7 - self.coordinate.rank][self.coordinate.file]
        return bonus + self.material_value() * 10

    def move_to(self, coordinate: Coordinate) -> Piece:
        return replace(self, coordinate=coordinate)

    # ── Geometry ─────────────────────────────────────────────────────────

    def pseudo_legal_destination(self, to: Coordinate, position: Position) -> bool:
        """Whether this piece may move to *to*, ignoring its own king's safety.

        Pawn captures only look at enemy occupancy of the forward diagonals;
        the position's en-passant target is not consulted.
        """
        if to.is_off_board() or position.has_ally_piece(to, self.color):
            return False

        here = self.coordinate
        piece_type = self.piece_type

        if piece_type == PieceType.PAWN:
            up = here.pawn_up(self.color)
            if to == up:
                return position.has_no_piece(to)
            if to == up.pawn_up(self.color):
                return (
                    here.is_starting_pawn(self.color)
                    and position.has_no_piece(up)
                    and position.has_no_piece(to)
                )
            if to in (up.next_left(), up.next_right()):
                return position.has_enemy_piece(to, self.color)
            return False

        if piece_type == PieceType.KING:
            return here.is_adjacent_to(to)
        if piece_type == PieceType.KNIGHT:
            return here.is_knight_move(to)
        return self._slides_to(to, position)

    def is_legal_attack(self, to: Coordinate, position: Position) -> bool:
        """Whether this piece threatens *to* on *position*."""
        if to.is_off_board() or position.has_ally_piece(to, self.color):
            return False

        here = self.coordinate
        piece_type = self.piece_type

        if piece_type == PieceType.PAWN:
            up = here.pawn_up(self.color)
            return to in (up.next_left(), up.next_right())
        if piece_type == PieceType.KING:
            return here.is_adjacent_to(to)
        if piece_type == PieceType.KNIGHT:
            return here.is_knight_move(to)
        return self._slides_to(to, position)

    def _slides_to(self, to: Coordinate, position: Position) -> bool:
        here = self.coordinate
        piece_type = self.piece_type

        if piece_type in (PieceType.ROOK, PieceType.QUEEN) and here.is_orthogonal_to(to):
            path = here.orthogonals_to(to)
        elif piece_type in (PieceType.BISHOP, PieceType.QUEEN) and here.is_diagonal_to(to):
            path = here.diagonals_to(to)
        else:
            return False

        if path:
            path.pop()
        return all(position.has_no_piece(sq) for sq in path)

    # ── Move generation ──────────────────────────────────────────────────

    def candidate_destinations(self, position: Position) -> list[Coordinate]:
        """On-board squares this piece could plausibly reach (unfiltered)."""
        here = self.coordinate
        piece_type = self.piece_type

        if piece_type == PieceType.PAWN:
            up = here.pawn_up(self.color)
            targets = [up, up.pawn_up(self.color), up.next_left(), up.next_right()]
        elif piece_type == PieceType.KNIGHT:
            targets = [here.offset(dr, df) for dr, df in KNIGHT_OFFSETS]
        elif piece_type == PieceType.KING:
            targets = [here.offset(dr, df) for dr, df in KING_OFFSETS]
        else:
            targets = []
            for dr, df in _SLIDER_DIRS[piece_type]:
                sq = here.offset(dr, df)
                while sq.is_on_board():
                    targets.append(sq)
                    if position.has_piece(sq):
                        break
                    sq = sq.offset(dr, df)

        return [sq for sq in targets if sq.is_on_board()]

    def legal_moves(self, position: Position) -> list[Move]:
        """Strictly legal moves for this piece on *position*."""
        moves = [
            Move(self.coordinate, to) for to in self.candidate_destinations(position)
        ]
        if self.piece_type == PieceType.KING:
            moves.extend((KINGSIDE_CASTLE, QUEENSIDE_CASTLE))
        return [m for m in moves if position.is_legal_move(m, self.color)]
