"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from chessling.core.enums import Color
    from chessling.core.move import Move

StateT = TypeVar("StateT", bound="Evaluate")


class Evaluate(Protocol):
    """Anything the minimax search can walk.

    :class:`chessling.core.Position` satisfies it, but so can any other game
    state exposing the same four members.
    """

    @property
    def current_player(self) -> Color: ...

    def legal_moves(self) -> Sequence[Move]: ...

    def material_value_for(self, color: Color) -> float: ...

    def successor(self: StateT, move: Move) -> StateT: ...


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 4
    node_budget: int = 2_000_000


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move
    score: float
    depth: int
    nodes: int
