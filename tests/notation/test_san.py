"""Tests for SAN parsing and formatting."""

import pytest

from chessling.core.coordinate import A1, A3, A5, A7, A8, B1, B3, C1, C3, D2, D4, D5, D7, E2, E4
from chessling.core.enums import PieceType
from chessling.core.move import KINGSIDE_CASTLE, QUEENSIDE_CASTLE, Move
from chessling.core.position import Position
from chessling.notation.fen import position_from_fen
from chessling.notation.san import (
    AmbiguousMoveError,
    InvalidMoveError,
    NotationError,
    move_to_san,
    parse_san,
)

TWO_KNIGHTS = "4k3/8/8/8/8/8/8/N1N1K3 w - - 0 1"
TWO_ROOKS = "4k3/8/8/R7/8/8/8/R3K3 w - - 0 1"
PROMOTION = "4k3/P7/8/8/8/8/8/4K3 w - - 0 1"
CASTLING = "4k3/8/8/8/8/8/8/R3K2R w KQ - 0 1"


class TestParseSan:
    def test_pawn_and_piece_moves(self, initial: Position) -> None:
        assert parse_san(initial, "d4") == Move(D2, D4)
        assert parse_san(initial, "Nc3") == Move(B1, C3)

    def test_side_to_move_matters(self, initial: Position) -> None:
        with pytest.raises(InvalidMoveError):
            parse_san(initial, "d5")

        after = initial.successor(Move(E2, E4))
        assert parse_san(after, "d5") == Move(D7, D5)
        with pytest.raises(InvalidMoveError):
            parse_san(after, "c4")

    def test_capture(self, initial: Position, play_san) -> None:
        pos = play_san(initial, "e4", "d5")
        assert parse_san(pos, "exd5") == Move(E4, D5)

    def test_annotations_are_ignored(self, initial: Position, play_san) -> None:
        pos = play_san(initial, "f3", "e5", "g4")
        assert parse_san(pos, "Qh4#") == parse_san(pos, "Qh4")
        assert parse_san(initial, "e4!?") == Move(E2, E4)

    @pytest.mark.parametrize("text", ["", "Zf3", "e9", "Nxx3", "hello"])
    def test_unparseable(self, initial: Position, text: str) -> None:
        with pytest.raises(InvalidMoveError):
            parse_san(initial, text)

    def test_errors_are_value_errors(self, initial: Position) -> None:
        with pytest.raises(ValueError):
            parse_san(initial, "Ke2")
        assert issubclass(AmbiguousMoveError, NotationError)


class TestDisambiguation:
    def test_ambiguous_knights(self) -> None:
        pos = position_from_fen(TWO_KNIGHTS)
        with pytest.raises(AmbiguousMoveError):
            parse_san(pos, "Nb3")

    def test_file_disambiguation(self) -> None:
        pos = position_from_fen(TWO_KNIGHTS)
        assert parse_san(pos, "Nab3") == Move(A1, B3)
        assert parse_san(pos, "Ncb3") == Move(C1, B3)

    def test_rank_disambiguation(self) -> None:
        pos = position_from_fen(TWO_ROOKS)
        with pytest.raises(AmbiguousMoveError):
            parse_san(pos, "Ra3")
        assert parse_san(pos, "R1a3") == Move(A1, A3)
        assert parse_san(pos, "R5a3") == Move(A5, A3)


class TestSpecialMoves:
    def test_castling(self) -> None:
        pos = position_from_fen(CASTLING)
        assert parse_san(pos, "O-O") == KINGSIDE_CASTLE
        assert parse_san(pos, "0-0") == KINGSIDE_CASTLE
        assert parse_san(pos, "O-O-O") == QUEENSIDE_CASTLE
        assert parse_san(pos, "0-0-0") == QUEENSIDE_CASTLE

    def test_castling_blocked(self, initial: Position) -> None:
        with pytest.raises(InvalidMoveError):
            parse_san(initial, "O-O")

    def test_promotion(self) -> None:
        pos = position_from_fen(PROMOTION)
        assert parse_san(pos, "a8=N") == Move.promote(A7, A8, PieceType.KNIGHT)
        assert parse_san(pos, "a8Q") == Move.promote(A7, A8, PieceType.QUEEN)
        assert parse_san(pos, "a8") == Move(A7, A8)

    def test_promotion_needs_last_rank(self, initial: Position) -> None:
        with pytest.raises(InvalidMoveError):
            parse_san(initial, "e4=Q")


class TestMoveToSan:
    def test_simple(self, initial: Position) -> None:
        assert move_to_san(initial, Move(E2, E4)) == "e4"
        assert move_to_san(initial, Move(B1, C3)) == "Nc3"

    def test_capture(self, initial: Position, play_san) -> None:
        pos = play_san(initial, "e4", "d5")
        assert move_to_san(pos, Move(E4, D5)) == "exd5"

    def test_disambiguation(self) -> None:
        assert move_to_san(position_from_fen(TWO_KNIGHTS), Move(A1, B3)) == "Nab3"
        assert move_to_san(position_from_fen(TWO_ROOKS), Move(A1, A3)) == "R1a3"

    def test_castles(self) -> None:
        pos = position_from_fen(CASTLING)
        assert move_to_san(pos, KINGSIDE_CASTLE) == "O-O"
        assert move_to_san(pos, QUEENSIDE_CASTLE) == "O-O-O"

    def test_promotion_with_check(self) -> None:
        pos = position_from_fen(PROMOTION)
        assert move_to_san(pos, Move(A7, A8)) == "a8=Q+"
        assert move_to_san(pos, Move.promote(A7, A8, PieceType.KNIGHT)) == "a8=N"

    def test_checkmate(self, initial: Position, play_san) -> None:
        pos = play_san(initial, "f3", "e5", "g4")
        queen_move = parse_san(pos, "Qh4")
        assert move_to_san(pos, queen_move) == "Qh4#"

    def test_parse_accepts_formatted(self) -> None:
        pos = position_from_fen(TWO_ROOKS)
        for move in pos.legal_moves():
            assert parse_san(pos, move_to_san(pos, move)) == move
