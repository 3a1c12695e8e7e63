"""Minimax search with alpha-beta pruning and a cumulative node budget."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessling.engine.search import Evaluate, SearchLimits, SearchResult

if TYPE_CHECKING:
    from chessling.core.enums import Color
    from chessling.core.move import Move

_LOGGER = logging.getLogger(__name__)

# Root alpha-beta window; a node with no legal move returns its sentinel.
_WINDOW = 10_000.0
_SENTINEL = 9_999.0


class MinimaxEngine:
    """Depth- and node-bounded minimax searcher.

    Works on any :class:`~chessling.engine.search.Evaluate` state.  All values
    are computed from a single *perspective* color (the player the root search
    picks a move for) no matter whose turn it is at a given node.

    The node counter is shared across the whole tree of one search: once it
    reaches the budget every remaining branch returns its static evaluation.
    Use one engine per thread.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Nodes visited by the most recent search."""
        return self._nodes

    # ── Public API ───────────────────────────────────────────────────────

    def search(self, state: Evaluate, limits: SearchLimits) -> SearchResult:
        move, score = self._search_root(
            state, limits.max_depth, limits.node_budget, children_maximize=False
        )
        return SearchResult(move, score, limits.max_depth, self._nodes)

    def best_move(self, state: Evaluate, depth: int, node_budget: int) -> Move:
        """Strongest move for the side to move.

        Each root move is scored by a search of *depth* further plies, so depth
        0 compares the static values of the children.  Ties go to the last
        equally scored move in enumeration order.
        Raises :class:`ValueError` when there is no legal move to choose from;
        check for game over before calling.
        """
        move, _ = self._search_root(state, depth, node_budget, children_maximize=False)
        return move

    def worst_move(self, state: Evaluate, depth: int, node_budget: int) -> Move:
        """A deliberately weak move: replies are assumed to help the mover."""
        move, _ = self._search_root(state, depth, node_budget, children_maximize=True)
        return move

    def minimax(
        self,
        state: Evaluate,
        depth: int,
        alpha: float,
        beta: float,
        is_maximizing: bool,
        perspective: Color,
        node_budget: int,
    ) -> float:
        """Alpha-beta value of *state* for *perspective*."""
        self._nodes += 1
        if depth <= 0 or self._nodes >= node_budget:
            return state.material_value_for(perspective)

        if is_maximizing:
            best_value = -_SENTINEL
            for move in state.legal_moves():
                value = self.minimax(
                    state.successor(move),
                    depth - 1,
                    alpha,
                    beta,
                    False,
                    perspective,
                    node_budget,
                )
                best_value = max(best_value, value)
                alpha = max(alpha, best_value)
                if beta <= alpha:
                    return best_value
        else:
            best_value = _SENTINEL
            for move in state.legal_moves():
                value = self.minimax(
                    state.successor(move),
                    depth - 1,
                    alpha,
                    beta,
                    True,
                    perspective,
                    node_budget,
                )
                best_value = min(best_value, value)
                beta = min(beta, best_value)
                if beta <= alpha:
                    return best_value

        return best_value

    # ── Internals ────────────────────────────────────────────────────────

    def _search_root(
        self,
        state: Evaluate,
        depth: int,
        node_budget: int,
        children_maximize: bool,
    ) -> tuple[Move, float]:
        if depth < 0:
            raise ValueError("Search depth must be >= 0")

        root_moves = list(state.legal_moves())
        if not root_moves:
            raise ValueError("No legal moves to search")

        self._nodes = 0
        perspective = state.current_player
        best_move = root_moves[0]
        best_value = -_SENTINEL

        for move in root_moves:
            value = self.minimax(
                state.successor(move),
                depth,
                -_WINDOW,
                _WINDOW,
                children_maximize,
                perspective,
                node_budget,
            )
            if value >= best_value:
                best_move = move
                best_value = value

        _LOGGER.debug(
            "Searched %d nodes at depth %d; chose %s (%.1f)",
            self._nodes,
            depth,
            best_move,
            best_value,
        )
        return best_move, best_value
