"""Board coordinates and the geometric relations between them.

A :class:`Coordinate` is a plain ``(rank, file)`` pair, both conceptually in
``0..7`` (rank 0 is White's back rank, file 0 is the a-file).  Values outside
that range are legal and simply mean "off the board"; every helper here is
total and never raises on them.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessling.core.enums import Color

_FILE_NAMES = "abcdefgh"


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Immutable square identity."""

    rank: int
    file: int

    # ── Construction / display ───────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse a square name, e.g. ``'e4'`` or ``'D8'``."""
        text = name.strip().lower()
        if len(text) != 2 or text[0] not in _FILE_NAMES or text[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(int(text[1]) - 1, _FILE_NAMES.index(text[0]))

    @classmethod
    def from_index(cls, index: int) -> Coordinate:
        """Inverse of :attr:`index` (a1=0, b1=1, ..., h8=63)."""
        return cls(index >> 3, index & 7)

    @classmethod
    def king_start(cls, color: Color) -> Coordinate:
        return cls(0 if color == Color.WHITE else 7, 4)

    @classmethod
    def queen_start(cls, color: Color) -> Coordinate:
        return cls(0 if color == Color.WHITE else 7, 3)

    @property
    def index(self) -> int:
        """Little-endian rank-file index; only meaningful on the board."""
        return self.rank * 8 + self.file

    def __str__(self) -> str:
        file_char = _FILE_NAMES[self.file] if 0 <= self.file < 8 else "?"
        return f"{file_char}{self.rank + 1}"

    # ── Board membership ─────────────────────────────────────────────────

    def is_on_board(self) -> bool:
        return 0 <= self.rank < 8 and 0 <= self.file < 8

    def is_off_board(self) -> bool:
        return not self.is_on_board()

    # ── Relations ────────────────────────────────────────────────────────

    def is_diagonal_to(self, other: Coordinate) -> bool:
        return abs(self.file - other.file) == abs(self.rank - other.rank)

    def is_orthogonal_to(self, other: Coordinate) -> bool:
        return self.file == other.file or self.rank == other.rank

    def is_adjacent_to(self, other: Coordinate) -> bool:
        if self.is_orthogonal_to(other):
            return self._orthogonal_distance(other) == 1
        if self.is_diagonal_to(other):
            return self._diagonal_distance(other) == 1
        return False

    def is_knight_move(self, other: Coordinate) -> bool:
        d_rank = abs(self.rank - other.rank)
        d_file = abs(self.file - other.file)
        return (d_rank, d_file) in ((1, 2), (2, 1))

    def is_below(self, other: Coordinate) -> bool:
        return self.rank < other.rank

    def is_above(self, other: Coordinate) -> bool:
        return self.rank > other.rank

    def is_left_of(self, other: Coordinate) -> bool:
        return self.file < other.file

    def is_right_of(self, other: Coordinate) -> bool:
        return self.file > other.file

    def _diagonal_distance(self, other: Coordinate) -> int:
        return abs(self.file - other.file)

    def _orthogonal_distance(self, other: Coordinate) -> int:
        return abs(self.file - other.file) + abs(self.rank - other.rank)

    # ── Steppers ─────────────────────────────────────────────────────────

    def offset(self, d_rank: int, d_file: int) -> Coordinate:
        return Coordinate(self.rank + d_rank, self.file + d_file)

    def next_above(self) -> Coordinate:
        return Coordinate(self.rank + 1, self.file)

    def next_below(self) -> Coordinate:
        return Coordinate(self.rank - 1, self.file)

    def next_left(self) -> Coordinate:
        return Coordinate(self.rank, self.file - 1)

    def next_right(self) -> Coordinate:
        return Coordinate(self.rank, self.file + 1)

    def pawn_up(self, color: Color) -> Coordinate:
        """One step toward *color*'s promotion rank."""
        return self.next_above() if color == Color.WHITE else self.next_below()

    def pawn_back(self, color: Color) -> Coordinate:
        return self.pawn_up(color.opposite)

    # ── Home-square predicates ───────────────────────────────────────────

    def is_starting_pawn(self, color: Color) -> bool:
        return self.rank == (1 if color == Color.WHITE else 6)

    def is_kingside_rook(self) -> bool:
        return self.rank in (0, 7) and self.file == 7

    def is_queenside_rook(self) -> bool:
        return self.rank in (0, 7) and self.file == 0

    # ── Paths ────────────────────────────────────────────────────────────

    def diagonals_to(self, to: Coordinate) -> list[Coordinate]:
        """Squares stepping diagonally from ``self`` up to and including *to*.

        Empty when the two coordinates are not diagonally aligned.  Drop the
        last element to get only the squares a slider passes over.
        """
        if not self.is_diagonal_to(to):
            return []
        d_file = 1 if self.is_left_of(to) else -1
        d_rank = 1 if self.is_below(to) else -1
        return [
            self.offset(d_rank * step, d_file * step)
            for step in range(1, self._diagonal_distance(to) + 1)
        ]

    def orthogonals_to(self, to: Coordinate) -> list[Coordinate]:
        """Orthogonal counterpart of :meth:`diagonals_to`."""
        if not self.is_orthogonal_to(to):
            return []
        d_rank = d_file = 0
        if self.is_left_of(to):
            d_file = 1
        elif self.is_right_of(to):
            d_file = -1
        elif self.is_above(to):
            d_rank = -1
        elif self.is_below(to):
            d_rank = 1
        return [
            self.offset(d_rank * step, d_file * step)
            for step in range(1, self._orthogonal_distance(to) + 1)
        ]


def all_coordinates() -> list[Coordinate]:
    """Every on-board coordinate in index order (a1, b1, ..., h8)."""
    return [Coordinate.from_index(i) for i in range(64)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(7, f) for f in range(8))
