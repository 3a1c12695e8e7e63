"""Complete immutable game state and the legality oracle."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessling.core.board import Board
from chessling.core.coordinate import Coordinate
from chessling.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessling.core.move import Move
from chessling.core.piece import Piece
from chessling.core.result import Continuing, GameResult, IllegalMove, Stalemate, Victory

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_ROOK_CORNERS: dict[Coordinate, CastlingRights] = {
    Coordinate(0, 0): CastlingRights.WHITE_QUEENSIDE,
    Coordinate(0, 7): CastlingRights.WHITE_KINGSIDE,
    Coordinate(7, 0): CastlingRights.BLACK_QUEENSIDE,
    Coordinate(7, 7): CastlingRights.BLACK_KINGSIDE,
}


def _home_rank(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant.

    Positions are values.  Every transition (:meth:`move_piece`,
    :meth:`apply_move`, :meth:`change_turn`, :meth:`play_move`) returns a new
    instance, so search can branch by simply holding on to the parent.

    Precondition: at most one king per color is on the board.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Coordinate | None = None

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, White to move."""
        return cls()

    # ── Square queries ───────────────────────────────────────────────────

    def get_piece(self, coordinate: Coordinate) -> Piece | None:
        return self.board[coordinate]

    def has_piece(self, coordinate: Coordinate) -> bool:
        return self.board[coordinate] is not None

    def has_no_piece(self, coordinate: Coordinate) -> bool:
        return self.board[coordinate] is None

    def has_ally_piece(self, coordinate: Coordinate, color: Color) -> bool:
        piece = self.board[coordinate]
        return piece is not None and piece.color == color

    def has_enemy_piece(self, coordinate: Coordinate, color: Color) -> bool:
        piece = self.board[coordinate]
        return piece is not None and piece.color != color

    def king_position(self, color: Color) -> Coordinate:
        """Where *color*'s king stands (its home square if it is missing)."""
        king = self.board.find_king(color)
        if king is None:
            return Coordinate.king_start(color)
        return king.coordinate

    # ── Attack detection ─────────────────────────────────────────────────

    def is_threatened(self, coordinate: Coordinate, color: Color) -> bool:
        """Is *coordinate* attacked by any piece not belonging to *color*?"""
        return any(
            piece.is_legal_attack(coordinate, self)
            for piece in self.board.pieces(color.opposite)
        )

    def is_in_check(self, color: Color) -> bool:
        return self.is_threatened(self.king_position(color), color)

    # ── Castling ─────────────────────────────────────────────────────────

    def _has_home_pieces(self, color: Color, rook_file: int) -> bool:
        rank = _home_rank(color)
        king = self.board[Coordinate.king_start(color)]
        rook = self.board[Coordinate(rank, rook_file)]
        return (
            king is not None
            and king.color == color
            and king.piece_type == PieceType.KING
            and rook is not None
            and rook.color == color
            and rook.piece_type == PieceType.ROOK
        )

    def can_kingside_castle(self, color: Color) -> bool:
        rank = _home_rank(color)
        return (
            bool(self.castling & CastlingRights.kingside(color))
            and self._has_home_pieces(color, 7)
            and self.has_no_piece(Coordinate(rank, 5))
            and self.has_no_piece(Coordinate(rank, 6))
            and not self.is_in_check(color)
            and not self.is_threatened(Coordinate.king_start(color).next_right(), color)
        )

    def can_queenside_castle(self, color: Color) -> bool:
        rank = _home_rank(color)
        return (
            bool(self.castling & CastlingRights.queenside(color))
            and self._has_home_pieces(color, 0)
            and self.has_no_piece(Coordinate(rank, 1))
            and self.has_no_piece(Coordinate(rank, 2))
            and self.has_no_piece(Coordinate(rank, 3))
            and not self.is_in_check(color)
            and not self.is_threatened(Coordinate.queen_start(color), color)
        )

    # ── Legality ─────────────────────────────────────────────────────────

    def is_legal_move(self, move: Move, color: Color) -> bool:
        """Whether *color* may play *move* here.

        The move is applied speculatively and rejected if it leaves *color*'s
        king attacked; pins are only caught by that last step.
        """
        if move.flag == MoveFlag.CASTLE_KINGSIDE:
            allowed = self.can_kingside_castle(color)
        elif move.flag == MoveFlag.CASTLE_QUEENSIDE:
            allowed = self.can_queenside_castle(color)
        else:
            if move.from_sq is None or move.to_sq is None:
                return False
            piece = self.get_piece(move.from_sq)
            allowed = (
                piece is not None
                and piece.color == color
                and piece.pseudo_legal_destination(move.to_sq, self)
            )
            if allowed and move.flag == MoveFlag.PROMOTION:
                assert piece is not None
                allowed = (
                    piece.piece_type == PieceType.PAWN
                    and move.to_sq.rank == _home_rank(color.opposite)
                    and move.promotion in _PROMOTION_TYPES
                )

        return allowed and not self._apply_for(move, color).is_in_check(color)

    def legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move, in square order."""
        moves: list[Move] = []
        for piece in self.board.pieces(self.turn):
            moves.extend(piece.legal_moves(self))
        return moves

    # ── Transitions ──────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> Position:
        """Move the pieces for the side to move; no legality check, no turn flip."""
        return self._apply_for(move, self.turn)

    def _apply_for(self, move: Move, color: Color) -> Position:
        if move.flag == MoveFlag.CASTLE_KINGSIDE:
            king_sq = self.king_position(color)
            rook_sq = Coordinate(_home_rank(color), 7)
            return self.move_piece(king_sq, rook_sq.next_left()).move_piece(
                rook_sq, king_sq.next_right()
            )
        if move.flag == MoveFlag.CASTLE_QUEENSIDE:
            king_sq = self.king_position(color)
            rook_sq = Coordinate(_home_rank(color), 0)
            return self.move_piece(king_sq, king_sq.next_left().next_left()).move_piece(
                rook_sq, king_sq.next_left()
            )

        if move.from_sq is None or move.to_sq is None:
            return self
        moved = self.move_piece(move.from_sq, move.to_sq)
        if moved is self:
            return self

        if move.flag == MoveFlag.PROMOTION and move.promotion is not None:
            pawn = self.get_piece(move.from_sq)
            if pawn is not None and pawn.piece_type == PieceType.PAWN:
                promoted = Piece(pawn.color, move.promotion, move.to_sq)
                moved = replace(moved, board=moved.board.updated((move.to_sq, promoted)))
        return moved

    def move_piece(self, from_sq: Coordinate, to_sq: Coordinate) -> Position:
        """Relocate a single piece.

        A pawn landing on either back rank becomes a queen.  Castling rights
        and the en-passant target are updated; an off-board square or an empty
        origin leaves the position unchanged.
        """
        if from_sq.is_off_board() or to_sq.is_off_board():
            return self
        piece = self.board[from_sq]
        if piece is None:
            return self

        placed = piece.move_to(to_sq)
        if piece.piece_type == PieceType.PAWN and to_sq.rank in (0, 7):
            placed = Piece(piece.color, PieceType.QUEEN, to_sq)

        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(piece.color)
        for sq in (from_sq, to_sq):
            if sq in _ROOK_CORNERS:
                castling &= ~_ROOK_CORNERS[sq]

        en_passant: Coordinate | None = None
        if piece.piece_type == PieceType.PAWN and abs(to_sq.rank - from_sq.rank) == 2:
            en_passant = from_sq.pawn_up(piece.color)

        return replace(
            self,
            board=self.board.updated((from_sq, None), (to_sq, placed)),
            castling=castling,
            en_passant=en_passant,
        )

    def change_turn(self) -> Position:
        return replace(self, turn=self.turn.opposite)

    def with_turn(self, color: Color) -> Position:
        return replace(self, turn=color)

    def play_move(self, move: Move) -> GameResult:
        """Play *move* for the side to move and report what happened."""
        if not self.is_legal_move(move, self.turn):
            return IllegalMove(move)

        following = self.successor(move)
        if not following.legal_moves():
            if following.is_in_check(following.turn):
                return Victory(self.turn)
            return Stalemate()
        return Continuing(following)

    # ── Game-state helpers ───────────────────────────────────────────────

    def is_checkmate(self) -> bool:
        return self.is_in_check(self.turn) and not self.legal_moves()

    def is_stalemate(self) -> bool:
        return not self.is_in_check(self.turn) and not self.legal_moves()

    def material_advantage(self, color: Color) -> int:
        """Raw material of *color* minus the opponent's."""
        return sum(
            p.material_value() if p.color == color else -p.material_value()
            for p in self.board.pieces()
        )

    # ── Evaluate protocol ────────────────────────────────────────────────

    @property
    def current_player(self) -> Color:
        return self.turn

    def material_value_for(self, color: Color) -> float:
        """Signed sum of weighted piece values from *color*'s point of view."""
        return sum(
            p.weighted_value() if p.color == color else -p.weighted_value()
            for p in self.board.pieces()
        )

    def successor(self, move: Move) -> Position:
        """Apply *move* and hand the turn to the opponent."""
        return self.apply_move(move).change_turn()

    def __str__(self) -> str:
        return f"{self.board!r}\n{self.turn!s} to move"
