"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessling.core.coordinate import Coordinate
from chessling.core.enums import MoveFlag, PieceType

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``NORMAL`` and ``PROMOTION`` moves carry both coordinates; castles carry
    neither since the king and rook squares follow from the side to move.
    """

    from_sq: Coordinate | None = None
    to_sq: Coordinate | None = None
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    @classmethod
    def promote(cls, from_sq: Coordinate, to_sq: Coordinate, piece_type: PieceType) -> Move:
        return cls(from_sq, to_sq, MoveFlag.PROMOTION, piece_type)

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.flag == MoveFlag.CASTLE_KINGSIDE:
            return "O-O"
        if self.flag == MoveFlag.CASTLE_QUEENSIDE:
            return "O-O-O"
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base


KINGSIDE_CASTLE = Move(flag=MoveFlag.CASTLE_KINGSIDE)
QUEENSIDE_CASTLE = Move(flag=MoveFlag.CASTLE_QUEENSIDE)
