"""Tests for Coordinate geometry."""

import pytest

from chessling.core.coordinate import (
    A1,
    A8,
    B2,
    C3,
    D1,
    D4,
    E1,
    E2,
    E4,
    E8,
    F3,
    H1,
    H8,
    Coordinate,
    all_coordinates,
)
from chessling.core.enums import Color


class TestParsing:
    def test_parse_and_str(self) -> None:
        assert Coordinate.parse("e4") == E4
        assert Coordinate.parse("H8") == H8
        assert str(A1) == "a1"
        assert str(E4) == "e4"

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e44", "4e"])
    def test_parse_rejects(self, name: str) -> None:
        with pytest.raises(ValueError):
            Coordinate.parse(name)

    def test_index_round_trip(self) -> None:
        for coord in all_coordinates():
            assert Coordinate.from_index(coord.index) == coord

    def test_all_coordinates_in_index_order(self) -> None:
        coords = all_coordinates()
        assert len(coords) == 64
        assert coords[0] == A1
        assert coords[7] == H1
        assert coords[-1] == H8

    def test_off_board_str_is_total(self) -> None:
        assert str(Coordinate(0, 9)) == "?1"


class TestBoardMembership:
    def test_on_board(self) -> None:
        assert A1.is_on_board()
        assert H8.is_on_board()

    @pytest.mark.parametrize("rank,file", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_off_board(self, rank: int, file: int) -> None:
        assert Coordinate(rank, file).is_off_board()


class TestRelations:
    def test_diagonal(self) -> None:
        assert A1.is_diagonal_to(H8)
        assert not A1.is_diagonal_to(B2.next_right())

    def test_orthogonal(self) -> None:
        assert A1.is_orthogonal_to(A8)
        assert A1.is_orthogonal_to(H1)
        assert not A1.is_orthogonal_to(B2)

    def test_adjacent(self) -> None:
        assert E4.is_adjacent_to(Coordinate.parse("d5"))
        assert E4.is_adjacent_to(Coordinate.parse("e5"))
        assert not E4.is_adjacent_to(E4)
        assert not E4.is_adjacent_to(E2)

    def test_knight_move(self) -> None:
        assert Coordinate.parse("g1").is_knight_move(F3)
        assert not Coordinate.parse("g1").is_knight_move(Coordinate.parse("g3"))

    def test_directional(self) -> None:
        assert E2.is_below(E4)
        assert E4.is_above(E2)
        assert D4.is_left_of(E4)
        assert E4.is_right_of(D4)


class TestSteppers:
    def test_pawn_up_depends_on_color(self) -> None:
        assert E2.pawn_up(Color.WHITE) == Coordinate.parse("e3")
        assert E2.pawn_up(Color.BLACK) == E1
        assert E2.pawn_back(Color.WHITE) == E1

    def test_neighbors(self) -> None:
        assert E4.next_above() == Coordinate.parse("e5")
        assert E4.next_below() == Coordinate.parse("e3")
        assert E4.next_left() == D4
        assert E4.next_right() == Coordinate.parse("f4")

    def test_steps_off_board_are_allowed(self) -> None:
        assert A1.next_left().is_off_board()
        assert H8.next_above().is_off_board()

    def test_home_squares(self) -> None:
        assert Coordinate.king_start(Color.WHITE) == E1
        assert Coordinate.king_start(Color.BLACK) == E8
        assert Coordinate.queen_start(Color.WHITE) == D1
        assert A8.is_queenside_rook()
        assert H1.is_kingside_rook()
        assert B2.is_starting_pawn(Color.WHITE)
        assert not B2.is_starting_pawn(Color.BLACK)


class TestPaths:
    def test_diagonals_include_destination(self) -> None:
        assert A1.diagonals_to(D4) == [B2, C3, D4]

    def test_diagonals_downward(self) -> None:
        assert D4.diagonals_to(A1) == [C3, B2, A1]

    def test_orthogonals(self) -> None:
        assert A1.orthogonals_to(D1) == [Coordinate(0, 1), Coordinate(0, 2), D1]
        assert E4.orthogonals_to(E2) == [Coordinate.parse("e3"), E2]

    def test_unaligned_path_is_empty(self) -> None:
        assert A1.diagonals_to(E2) == []
        assert A1.orthogonals_to(B2) == []
