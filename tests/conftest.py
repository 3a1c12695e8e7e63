"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessling.core.position import Position
from chessling.core.result import Continuing
from chessling.notation.san import parse_san

PlaySan = Callable[..., Position]


@pytest.fixture
def initial() -> Position:
    return Position.initial()


@pytest.fixture
def play_san() -> PlaySan:
    """Play a sequence of SAN moves from a position, asserting each one continues."""

    def _play(position: Position, *moves: str) -> Position:
        for san in moves:
            result = position.play_move(parse_san(position, san))
            assert isinstance(result, Continuing), f"{san} ended the game: {result}"
            position = result.position
        return position

    return _play
