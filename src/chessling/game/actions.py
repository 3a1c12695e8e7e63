"""Player actions and terminal statuses of a game session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TypeAlias, Union

from chessling.core.enums import Color

# ── Actions ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MakeMove:
    """Play the move written in SAN."""

    san: str


@dataclass(frozen=True, slots=True)
class OfferDraw:
    """Play the move written in SAN and offer a draw with it."""

    san: str


@dataclass(frozen=True, slots=True)
class AcceptDraw:
    """Accept the opponent's pending draw offer."""


@dataclass(frozen=True, slots=True)
class Resign:
    """The side to move resigns."""


GameAction: TypeAlias = Union[MakeMove, OfferDraw, AcceptDraw, Resign]


# ── Outcome ──────────────────────────────────────────────────────────────────


class GameOver(IntEnum):
    """Why a game session ended."""

    WHITE_CHECKMATES = auto()
    WHITE_RESIGNS = auto()
    BLACK_CHECKMATES = auto()
    BLACK_RESIGNS = auto()
    STALEMATE = auto()
    DRAW_ACCEPTED = auto()

    @classmethod
    def checkmate_by(cls, color: Color) -> GameOver:
        return cls.WHITE_CHECKMATES if color == Color.WHITE else cls.BLACK_CHECKMATES

    @classmethod
    def resignation_by(cls, color: Color) -> GameOver:
        return cls.WHITE_RESIGNS if color == Color.WHITE else cls.BLACK_RESIGNS

    @property
    def winner(self) -> Color | None:
        """The winning color, or ``None`` for a draw."""
        if self in (GameOver.WHITE_CHECKMATES, GameOver.BLACK_RESIGNS):
            return Color.WHITE
        if self in (GameOver.BLACK_CHECKMATES, GameOver.WHITE_RESIGNS):
            return Color.BLACK
        return None

    def __str__(self) -> str:
        return self.name.replace("_", " ").capitalize()
