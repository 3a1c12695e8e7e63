"""Tests for the Game session."""

import logging

import pytest

from chessling.core.coordinate import A7, A8, E1, E2, E4, E7, G1, Coordinate
from chessling.core.enums import Color, PieceType
from chessling.core.move import KINGSIDE_CASTLE, QUEENSIDE_CASTLE, Move
from chessling.engine.search import SearchLimits
from chessling.game import (
    AcceptDraw,
    Game,
    GameAlreadyOverError,
    GameOver,
    MakeMove,
    OfferDraw,
    Resign,
    move_from_coordinates,
)
from chessling.notation.fen import position_from_fen
from chessling.notation.san import AmbiguousMoveError, InvalidMoveError


def _play(game: Game, *moves: str) -> None:
    for san in moves:
        game.make_move(MakeMove(san))


class TestMoves:
    def test_game_moves(self) -> None:
        game = Game()
        _play(game, "d4", "d5", "c4", "dxc4", "e3", "Nf6", "Bxc4")
        assert game.status is None
        assert game.turn == Color.BLACK
        assert len(game.history) == 7

    def test_fools_mate(self) -> None:
        game = Game()
        _play(game, "f3", "e5", "g4")
        assert game.make_move(MakeMove("Qh4")) == GameOver.BLACK_CHECKMATES
        assert game.status == GameOver.BLACK_CHECKMATES
        assert game.status.winner == Color.BLACK
        assert game.is_game_over

    def test_history_records_san(self) -> None:
        game = Game()
        _play(game, "e4", "e5", "Nf3")
        assert [r.san for r in game.history] == ["e4", "e5", "Nf3"]
        assert [r.color for r in game.history] == [Color.WHITE, Color.BLACK, Color.WHITE]
        assert game.history[0].move == Move(E2, E4)

    def test_invalid_move_keeps_state(self) -> None:
        game = Game()
        with pytest.raises(InvalidMoveError):
            game.make_move(MakeMove("e5"))
        assert game.turn == Color.WHITE
        assert game.history == ()

    def test_ambiguous_move(self) -> None:
        game = Game(position_from_fen("4k3/8/8/8/8/8/8/N1N1K3 w - - 0 1"))
        with pytest.raises(AmbiguousMoveError):
            game.make_move(MakeMove("Nb3"))

    def test_stalemate(self) -> None:
        game = Game(position_from_fen("k7/8/6Q1/8/8/8/8/2K5 w - - 0 1"))
        assert game.make_move(MakeMove("Qb6")) == GameOver.STALEMATE
        assert game.status.winner is None


class TestDraws:
    def test_offer_and_accept(self) -> None:
        game = Game()
        game.make_move(OfferDraw("e4"))
        assert game.draw_offered == Color.WHITE
        assert game.make_move(AcceptDraw()) == GameOver.DRAW_ACCEPTED
        assert game.draw_offered is None

    def test_cannot_accept_lapsed_offer(self) -> None:
        game = Game()
        game.make_move(OfferDraw("e4"))
        game.make_move(MakeMove("e5"))
        with pytest.raises(InvalidMoveError):
            game.make_move(AcceptDraw())

    def test_accept_without_offer(self) -> None:
        game = Game()
        with pytest.raises(InvalidMoveError):
            game.make_move(AcceptDraw())
        assert game.status is None

    def test_next_move_withdraws_offer(self) -> None:
        game = Game()
        game.make_move(OfferDraw("e4"))
        game.make_move(MakeMove("e5"))
        assert game.draw_offered is None

    def test_counter_offer(self) -> None:
        game = Game()
        game.make_move(OfferDraw("e4"))
        game.make_move(OfferDraw("e5"))
        assert game.draw_offered == Color.BLACK
        assert game.make_move(AcceptDraw()) == GameOver.DRAW_ACCEPTED


class TestResign:
    def test_white_resigns(self) -> None:
        game = Game()
        assert game.make_move(Resign()) == GameOver.WHITE_RESIGNS
        assert game.status.winner == Color.BLACK

    def test_black_resigns(self) -> None:
        game = Game()
        _play(game, "e4")
        assert game.make_move(Resign()) == GameOver.BLACK_RESIGNS

    def test_game_already_over(self) -> None:
        game = Game()
        game.make_move(Resign())
        with pytest.raises(GameAlreadyOverError):
            game.make_move(MakeMove("e4"))
        with pytest.raises(GameAlreadyOverError):
            game.make_move(Resign())
        with pytest.raises(GameAlreadyOverError):
            game.play_engine_move()

    def test_unknown_action(self) -> None:
        with pytest.raises(TypeError):
            Game().make_move("e4")  # type: ignore[arg-type]


class TestEvents:
    def test_callbacks(self) -> None:
        game = Game()
        moves: list[str] = []
        endings: list[GameOver] = []
        game.events.on_move.append(lambda move, san, pos: moves.append(san))
        game.events.on_game_over.append(endings.append)

        _play(game, "f3", "e5", "g4", "Qh4#")
        assert moves == ["f3", "e5", "g4", "Qh4#"]
        assert endings == [GameOver.BLACK_CHECKMATES]

    def test_game_over_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        game = Game()
        with caplog.at_level(logging.INFO, logger="chessling.game.session"):
            game.make_move(Resign())
        assert "White resigns" in caplog.text


class TestEngineMove:
    def test_engine_plays_legal_move(self) -> None:
        game = Game()
        legal = game.position.legal_moves()
        game.play_engine_move(SearchLimits(max_depth=2, node_budget=5_000))
        assert game.turn == Color.BLACK
        assert game.history[0].move in legal

    def test_engine_delivers_mate(self) -> None:
        game = Game(position_from_fen("6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1"))
        assert game.play_engine_move(SearchLimits(max_depth=1)) == GameOver.WHITE_CHECKMATES
        assert game.history[-1].san == "Ra8#"


class TestMoveFromCoordinates:
    def test_plain_move(self) -> None:
        game = Game()
        assert move_from_coordinates(game.position, E2, E4) == Move(E2, E4)

    def test_castles(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert move_from_coordinates(pos, E1, G1) == KINGSIDE_CASTLE
        assert move_from_coordinates(pos, E1, Coordinate.parse("c1")) == QUEENSIDE_CASTLE
        assert move_from_coordinates(pos, E1, Coordinate.parse("f1")) == Move(
            E1, Coordinate.parse("f1")
        )

    def test_promotion(self) -> None:
        pos = position_from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        assert move_from_coordinates(pos, A7, A8) == Move.promote(A7, A8, PieceType.QUEEN)

    def test_black_promotion(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4p3/K7 b - - 0 1")
        e1 = Coordinate.parse("e1")
        assert move_from_coordinates(pos, E2, e1) == Move.promote(E2, e1, PieceType.QUEEN)

    def test_empty_origin(self) -> None:
        game = Game()
        assert move_from_coordinates(game.position, E4, E7) == Move(E4, E7)
