"""FEN parsing and serialization."""

from __future__ import annotations

from chessling.core.board import Board
from chessling.core.builder import PositionBuilder
from chessling.core.coordinate import Coordinate
from chessling.core.enums import CastlingRights, Color
from chessling.core.piece import Piece
from chessling.core.position import Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDES = {"w": Color.WHITE, "b": Color.BLACK}

# Castling letters in the order FEN writes them: (letter, color, kingside).
_CASTLING_LETTERS: tuple[tuple[str, Color, bool], ...] = (
    ("K", Color.WHITE, True),
    ("Q", Color.WHITE, False),
    ("k", Color.BLACK, True),
    ("q", Color.BLACK, False),
)

# The en-passant target sits behind a pawn the opponent just pushed.
_EN_PASSANT_RANK = {Color.WHITE: 5, Color.BLACK: 2}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    The halfmove clock and fullmove number are validated when present but
    not kept; positions do not track them.
    """
    fields = fen.split()
    if not 4 <= len(fields) <= 6:
        raise ValueError(f"FEN needs 4 to 6 fields, got {len(fields)}: {fen!r}")

    rows = fields[0].split("/")
    if len(rows) != 8:
        raise ValueError(f"FEN placement needs 8 rows, got {len(rows)}: {fen!r}")

    builder = PositionBuilder()
    for rank, row in zip(range(7, -1, -1), rows):
        for piece in _parse_row(row, rank):
            builder.piece(piece)

    side = _SIDES.get(fields[1])
    if side is None:
        raise ValueError(f"FEN side to move must be 'w' or 'b': {fields[1]!r}")
    builder.set_turn(side)

    for color, kingside in _parse_castling(fields[2]):
        if kingside:
            builder.enable_kingside_castle(color)
        else:
            builder.enable_queenside_castle(color)

    if fields[3] != "-":
        target = Coordinate.parse(fields[3])
        if target.rank != _EN_PASSANT_RANK[side]:
            raise ValueError(f"FEN en-passant target on the wrong rank: {fields[3]!r}")
        builder.set_en_passant(target)

    for text, name, minimum in zip(fields[4:], ("halfmove clock", "fullmove number"), (0, 1)):
        _parse_counter(text, name, minimum)

    return builder.build()


def position_to_fen(
    pos: Position,
    halfmove_clock: int = 0,
    fullmove_number: int = 1,
) -> str:
    """Serialise a :class:`Position` to FEN.

    The clocks are not part of a position, so callers pass their own.
    """
    placement = "/".join(_format_row(pos.board, rank) for rank in range(7, -1, -1))
    side = "w" if pos.turn == Color.WHITE else "b"
    castling = "".join(
        letter
        for letter, color, kingside in _CASTLING_LETTERS
        if pos.castling & _castling_right(color, kingside)
    )
    target = "-" if pos.en_passant is None else str(pos.en_passant)
    return f"{placement} {side} {castling or '-'} {target} {halfmove_clock} {fullmove_number}"


# ── Helpers ──────────────────────────────────────────────────────────────────


def _parse_row(row: str, rank: int) -> list[Piece]:
    pieces: list[Piece] = []
    file = 0
    for ch in row:
        if file >= 8:
            raise ValueError(f"FEN row {row!r} runs past the h-file")
        if ch in "12345678":
            file += int(ch)
        else:
            pieces.append(Piece.from_char(ch, Coordinate(rank, file)))
            file += 1
    if file != 8:
        raise ValueError(f"FEN row {row!r} does not cover exactly 8 files")
    return pieces


def _format_row(board: Board, rank: int) -> str:
    out: list[str] = []
    gap = 0
    for file in range(8):
        piece = board[Coordinate(rank, file)]
        if piece is None:
            gap += 1
            continue
        if gap:
            out.append(str(gap))
            gap = 0
        out.append(str(piece))
    if gap:
        out.append(str(gap))
    return "".join(out)


def _castling_right(color: Color, kingside: bool) -> CastlingRights:
    return CastlingRights.kingside(color) if kingside else CastlingRights.queenside(color)


def _parse_castling(text: str) -> list[tuple[Color, bool]]:
    if text == "-":
        return []
    letters = {letter: (color, kingside) for letter, color, kingside in _CASTLING_LETTERS}
    if len(set(text)) != len(text) or not set(text) <= letters.keys():
        raise ValueError(f"FEN castling field must use K, Q, k, q once each: {text!r}")
    return [letters[ch] for ch in text]


def _parse_counter(text: str, name: str, minimum: int) -> int:
    if not text.isdigit() or int(text) < minimum:
        raise ValueError(f"FEN {name} must be an integer >= {minimum}: {text!r}")
    return int(text)
