"""One chess game driven action by action.

Wraps an immutable :class:`~chessling.core.position.Position`, tracks draw
offers and the final status, and emits events via simple callbacks so a UI
or tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessling.core.enums import Color
from chessling.core.move import Move
from chessling.core.position import Position
from chessling.core.result import Continuing, IllegalMove, Stalemate, Victory
from chessling.engine.minimax import MinimaxEngine
from chessling.engine.search import SearchLimits
from chessling.game.actions import (
    AcceptDraw,
    GameAction,
    GameOver,
    MakeMove,
    OfferDraw,
    Resign,
)
from chessling.notation.san import InvalidMoveError, move_to_san, parse_san

_LOGGER = logging.getLogger(__name__)


class GameAlreadyOverError(RuntimeError):
    """An action was submitted after the game finished."""


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, Position], None]  # move, san, position after
GameOverCallback = Callable[[GameOver], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One played ply."""

    move: Move
    san: str
    color: Color
    position_before: Position


# ── Game ─────────────────────────────────────────────────────────────────────


class Game:
    """A chess game between two sides that submit :data:`GameAction` values.

    Methods are meant to be called from a single thread.
    """

    __slots__ = ("_position", "_draw_offered", "_status", "_history", "events")

    def __init__(self, position: Position | None = None) -> None:
        self._position = position if position is not None else Position.initial()
        self._draw_offered: Color | None = None
        self._status: GameOver | None = None
        self._history: list[MoveRecord] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def turn(self) -> Color:
        return self._position.turn

    @property
    def draw_offered(self) -> Color | None:
        """The color with a pending draw offer, if any."""
        return self._draw_offered

    @property
    def status(self) -> GameOver | None:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status is not None

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    # ── Actions ──────────────────────────────────────────────────────────

    def make_move(self, action: GameAction) -> GameOver | None:
        """Apply *action* for the side to move and return the new status.

        Raises:
            GameAlreadyOverError: the game has already finished.
            InvalidMoveError: the move is illegal or unreadable, or there is
                no opponent draw offer to accept.
            AmbiguousMoveError: the SAN matches more than one legal move.
        """
        if self._status is not None:
            _LOGGER.debug("Rejected %r: game is already over (%s)", action, self._status)
            raise GameAlreadyOverError(f"Game is already over: {self._status!s}")

        if isinstance(action, AcceptDraw):
            return self._accept_draw()
        if isinstance(action, Resign):
            return self._finish(GameOver.resignation_by(self.turn))
        if isinstance(action, (MakeMove, OfferDraw)):
            try:
                move = parse_san(self._position, action.san)
            except InvalidMoveError:
                _LOGGER.debug("Rejected SAN %r for %s", action.san, self.turn)
                raise
            return self._play(move, offer_draw=isinstance(action, OfferDraw))
        raise TypeError(f"Unknown game action: {action!r}")

    def play_engine_move(
        self,
        limits: SearchLimits | None = None,
        engine: MinimaxEngine | None = None,
    ) -> GameOver | None:
        """Let the engine choose and play the side to move's move."""
        if self._status is not None:
            raise GameAlreadyOverError(f"Game is already over: {self._status!s}")
        limits = limits or SearchLimits()
        engine = engine or MinimaxEngine()
        result = engine.search(self._position, limits)
        _LOGGER.debug(
            "Engine played %s after %d nodes (score %.1f)",
            result.best_move,
            result.nodes,
            result.score,
        )
        return self._play(result.best_move, offer_draw=False)

    # ── Internals ────────────────────────────────────────────────────────

    def _accept_draw(self) -> GameOver | None:
        if self._draw_offered is None or self._draw_offered == self.turn:
            _LOGGER.debug("Rejected draw acceptance by %s: no pending offer", self.turn)
            raise InvalidMoveError("There is no draw offer to accept")
        return self._finish(GameOver.DRAW_ACCEPTED)

    def _play(self, move: Move, offer_draw: bool) -> GameOver | None:
        before = self._position
        mover = before.turn
        result = before.play_move(move)

        if isinstance(result, IllegalMove):
            _LOGGER.debug("Rejected illegal move %s for %s", move, mover)
            raise InvalidMoveError(f"Illegal move: {move}")

        san = move_to_san(before, move)
        after = before.successor(move)
        self._position = after
        self._draw_offered = mover if offer_draw else None
        self._history.append(MoveRecord(move, san, mover, before))

        for cb in self.events.on_move:
            cb(move, san, after)

        if isinstance(result, Victory):
            return self._finish(GameOver.checkmate_by(result.winner))
        if isinstance(result, Stalemate):
            return self._finish(GameOver.STALEMATE)
        assert isinstance(result, Continuing)
        return None

    def _finish(self, status: GameOver) -> GameOver:
        self._status = status
        self._draw_offered = None
        _LOGGER.info("Game over after %d plies: %s", len(self._history), status)
        for cb in self.events.on_game_over:
            cb(status)
        return status
