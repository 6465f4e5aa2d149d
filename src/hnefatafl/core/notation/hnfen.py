"""HNFEN parsing and serialization.

HNFEN describes a board as 11 ranks separated by ``/``, top row first. Each
rank is read left to right: a run of digits skips that many empty cells and
``a`` (attacker), ``h`` (defender) or ``K`` (king) fills one cell. An optional
side token (``a`` or ``h``) after whitespace names the side to move.
"""

from __future__ import annotations

import re

from hnefatafl.core.board import Board, Rank
from hnefatafl.core.enums import Side
from hnefatafl.core.errors import (
    MalformedBoardError,
    MalformedMoveError,
    MalformedPositionError,
    MalformedRankError,
    UnrecognizedTokenError,
)
from hnefatafl.core.move import Move
from hnefatafl.core.piece import Piece
from hnefatafl.core.types import (
    BOARD_SIZE,
    SQUARE_PATTERN,
    Square,
    make_square,
    parse_square,
    square_name,
)

DEFAULT_START_HNFEN = (
    "3aaaaa3/5a5/11/a4h4a/a3hhh3a/aa1hhKhh1aa/a3hhh3a/a4h4a/11/5a5/3aaaaa3 a"
)

RANK_SEP = "/"

_SIDE_CHARS: dict[Side, str] = {Side.ATTACKER: "a", Side.DEFENDER: "h"}
_SIDE_CHARS_REV: dict[str, Side] = {v: k for k, v in _SIDE_CHARS.items()}

# A run of digits is a single token, so "10" skips ten cells.
_RANK_TOKEN_RE = re.compile(r"(?P<count>[0-9]+)|(?P<piece>[^0-9])")
_MOVE_RE = re.compile(SQUARE_PATTERN * 2)


# ── Side / piece ─────────────────────────────────────────────────────────────


def side_to_hnfen(side: Side) -> str:
    return _SIDE_CHARS[side]


def side_from_hnfen(text: str) -> Side:
    try:
        return _SIDE_CHARS_REV[text]
    except KeyError:
        raise UnrecognizedTokenError(f"Invalid side token: {text!r}") from None


def piece_to_hnfen(piece: Piece) -> str:
    return str(piece)


def piece_from_hnfen(text: str) -> Piece:
    return Piece.from_char(text)


# ── Rank ─────────────────────────────────────────────────────────────────────


def rank_to_hnfen(rank: Rank) -> str:
    """Serialise one rank, collapsing empty runs into their count."""
    empty = 0
    row = ""
    for piece in rank:
        if piece is None:
            empty += 1
        else:
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
    if empty:
        row += str(empty)
    return row


def _tokenize_rank(text: str) -> list[int | Piece]:
    tokens: list[int | Piece] = []
    for m in _RANK_TOKEN_RE.finditer(text):
        count = m.group("count")
        if count is not None:
            tokens.append(int(count))
            continue
        try:
            tokens.append(Piece.from_char(m.group("piece")))
        except UnrecognizedTokenError as exc:
            raise MalformedRankError(f"Invalid HNFEN rank {text!r}: {exc}") from exc
    return tokens


def rank_from_hnfen(text: str) -> Rank:
    """Parse one rank; it must describe exactly 11 cells."""
    cells: list[Piece | None] = [None] * BOARD_SIZE
    cursor = 0
    for token in _tokenize_rank(text):
        if isinstance(token, int):
            cursor += token
            continue
        if cursor >= BOARD_SIZE:
            raise MalformedRankError(f"Invalid HNFEN rank width: {text!r}")
        cells[cursor] = token
        cursor += 1
    if cursor != BOARD_SIZE:
        raise MalformedRankError(f"Invalid HNFEN rank width: {text!r}")
    return tuple(cells)


# ── Board ────────────────────────────────────────────────────────────────────


def board_from_hnfen(text: str) -> Board:
    """Parse an HNFEN string into a :class:`Board`."""
    parts = text.split()
    if not (1 <= len(parts) <= 2):
        raise MalformedBoardError(f"Invalid HNFEN (need 1-2 fields): {text!r}")

    # 1. Piece placement
    ranks = parts[0].split(RANK_SEP)
    if len(ranks) != BOARD_SIZE:
        raise MalformedBoardError(
            f"Invalid HNFEN board (must contain {BOARD_SIZE} ranks): {text!r}"
        )
    board = Board()
    for y, rank_text in enumerate(ranks):
        try:
            rank = rank_from_hnfen(rank_text)
        except MalformedRankError as exc:
            raise MalformedBoardError(f"Invalid HNFEN board {text!r}: {exc}") from exc
        for x, piece in enumerate(rank):
            if piece is not None:
                board[make_square(x, y)] = piece

    # 2. Side to move
    if len(parts) > 1:
        try:
            board.side_to_move = side_from_hnfen(parts[1])
        except UnrecognizedTokenError as exc:
            raise MalformedBoardError(
                f"Invalid HNFEN side-to-move field: {parts[1]!r}"
            ) from exc

    return board


def board_to_hnfen(board: Board) -> str:
    """Serialise a :class:`Board`, always including the side to move."""
    placement = RANK_SEP.join(rank_to_hnfen(rank) for rank in board.ranks())
    return f"{placement} {side_to_hnfen(board.side_to_move)}"


# ── Square / move ────────────────────────────────────────────────────────────


def square_to_hnfen(sq: Square) -> str:
    return square_name(sq)


def square_from_hnfen(text: str) -> Square:
    return parse_square(text)


def move_to_hnfen(move: Move) -> str:
    return str(move)


def move_from_hnfen(text: str) -> Move:
    """Parse ``<square><square>``, e.g. ``a11b1``."""
    m = _MOVE_RE.fullmatch(text)
    if m is None:
        raise MalformedMoveError(f"Invalid HNFEN move: {text!r}")
    col_from, row_from, col_to, row_to = m.groups()
    try:
        return Move(parse_square(col_from + row_from), parse_square(col_to + row_to))
    except MalformedPositionError as exc:
        raise MalformedMoveError(f"Invalid HNFEN move: {text!r}") from exc
