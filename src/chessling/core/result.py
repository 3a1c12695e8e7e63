"""Outcomes of playing a move against a position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, Union

from chessling.core.enums import Color

if TYPE_CHECKING:
    from chessling.core.move import Move
    from chessling.core.position import Position


@dataclass(frozen=True, slots=True)
class Continuing:
    """The move was played; the game goes on from ``position``."""

    position: Position


@dataclass(frozen=True, slots=True)
class IllegalMove:
    """The move was rejected; the original position is unchanged."""

    move: Move


@dataclass(frozen=True, slots=True)
class Stalemate:
    """The side to move has no legal move and is not in check."""


@dataclass(frozen=True, slots=True)
class Victory:
    """``winner`` delivered checkmate."""

    winner: Color


GameResult: TypeAlias = Union[Continuing, IllegalMove, Stalemate, Victory]
