"""SAN (Standard Algebraic Notation) conversion and parsing."""

from __future__ import annotations

import re

from chessling.core.enums import MoveFlag, PieceType
from chessling.core.move import KINGSIDE_CASTLE, QUEENSIDE_CASTLE, Move
from chessling.core.position import Position

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}

_SAN_RE = re.compile(
    r"^(?P<piece>[KQRBN])?"
    r"(?P<file>[a-h])?(?P<rank>[1-8])?"
    r"(?P<capture>x)?"
    r"(?P<to>[a-h][1-8])"
    r"(?:=?(?P<promotion>[QRBN]))?$"
)


class NotationError(ValueError):
    """A move string could not be turned into a single legal move."""


class InvalidMoveError(NotationError):
    """Unparseable text, or no legal move matches it."""


class AmbiguousMoveError(NotationError):
    """More than one legal move matches; the origin needs disambiguating."""


def parse_san(position: Position, san: str) -> Move:
    """Parse a SAN string into a legal :class:`Move` for the side to move."""
    clean = san.strip().rstrip("+#!?")

    if clean in ("O-O", "0-0", "O-O-O", "0-0-0"):
        move = KINGSIDE_CASTLE if clean in ("O-O", "0-0") else QUEENSIDE_CASTLE
        if not position.is_legal_move(move, position.turn):
            raise InvalidMoveError(f"Illegal move: {san}")
        return move

    match = _SAN_RE.match(clean)
    if match is None:
        raise InvalidMoveError(f"Unparseable move: {san!r}")

    piece_letter = match.group("piece")
    piece_type = _SAN_PIECE_REV[piece_letter] if piece_letter else PieceType.PAWN
    from_file = "abcdefgh".index(match.group("file")) if match.group("file") else None
    from_rank = int(match.group("rank")) - 1 if match.group("rank") else None
    to_text = match.group("to")
    promo_letter = match.group("promotion")

    candidates: list[Move] = []
    for m in position.legal_moves():
        if m.flag != MoveFlag.NORMAL or m.from_sq is None:
            continue
        if str(m.to_sq) != to_text:
            continue
        p = position.get_piece(m.from_sq)
        if p is None or p.piece_type != piece_type:
            continue
        if from_file is not None and m.from_sq.file != from_file:
            continue
        if from_rank is not None and m.from_sq.rank != from_rank:
            continue
        candidates.append(m)

    if not candidates:
        raise InvalidMoveError(f"Illegal move: {san}")
    if len(candidates) > 1:
        options = ", ".join(str(m) for m in candidates)
        raise AmbiguousMoveError(f"Ambiguous move: {san} -> {options}")

    move = candidates[0]
    if promo_letter is None:
        return move

    assert move.from_sq is not None and move.to_sq is not None
    if piece_type != PieceType.PAWN or move.to_sq.rank not in (0, 7):
        raise InvalidMoveError(f"Promotion not possible: {san}")
    return Move.promote(move.from_sq, move.to_sq, _SAN_PIECE_REV[promo_letter])


def move_to_san(position: Position, move: Move) -> str:
    """Convert a legal *move* to SAN given the *position* before the move."""
    if move.flag == MoveFlag.CASTLE_KINGSIDE:
        san = "O-O"
    elif move.flag == MoveFlag.CASTLE_QUEENSIDE:
        san = "O-O-O"
    else:
        assert move.from_sq is not None and move.to_sq is not None
        piece = position.get_piece(move.from_sq)
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        san = ""
        is_capture = position.has_piece(move.to_sq)

        if piece.piece_type == PieceType.PAWN:
            if is_capture:
                san += "abcdefgh"[move.from_sq.file]
        else:
            san += _SAN_PIECE[piece.piece_type]

            # Disambiguation
            rivals = [
                m.from_sq
                for m in position.legal_moves()
                if m.to_sq == move.to_sq
                and m.from_sq is not None
                and m.from_sq != move.from_sq
                and position.get_piece(m.from_sq) is not None
                and position.get_piece(m.from_sq).piece_type == piece.piece_type  # type: ignore[union-attr]
            ]
            if rivals:
                if all(sq.file != move.from_sq.file for sq in rivals):
                    san += "abcdefgh"[move.from_sq.file]
                elif all(sq.rank != move.from_sq.rank for sq in rivals):
                    san += str(move.from_sq.rank + 1)
                else:
                    san += str(move.from_sq)

        if is_capture:
            san += "x"
        san += str(move.to_sq)

        if move.flag == MoveFlag.PROMOTION and move.promotion is not None:
            san += "=" + _SAN_PIECE[move.promotion]
        elif piece.piece_type == PieceType.PAWN and move.to_sq.rank in (0, 7):
            san += "=Q"

    # Check / checkmate suffix
    after = position.successor(move)
    if after.is_in_check(after.turn):
        san += "#" if not after.legal_moves() else "+"

    return san
