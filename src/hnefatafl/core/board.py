"""Board - piece placement on the 11x11 board plus the side to move."""

from __future__ import annotations

import logging
from typing import TypeAlias

from hnefatafl.core.enums import Side
from hnefatafl.core.move import Move
from hnefatafl.core.piece import Piece
from hnefatafl.core.types import (
    BOARD_SIZE,
    COLUMNS,
    ORTHOGONAL_DIRS,
    SQUARE_COUNT,
    Square,
    is_corner,
    is_special,
    make_square,
    offset_square,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

Rank: TypeAlias = tuple[Piece | None, ...]


class Board:
    """Mutable 121-square board with a cached king square.

    ``make_move`` performs one complete transition: relocation, capture
    resolution and the side-to-move flip.
    """

    __slots__ = ("_squares", "_king_square", "side_to_move")

    def __init__(self, side_to_move: Side = Side.ATTACKER) -> None:
        self._squares: list[Piece | None] = [None] * SQUARE_COUNT
        self._king_square: Square | None = None
        self.side_to_move = side_to_move

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        old_piece = self._squares[sq]
        if old_piece is not None and old_piece.is_king and self._king_square == sq:
            self._king_square = None

        self._squares[sq] = piece

        if piece is not None and piece.is_king:
            self._king_square = sq

    def piece_at(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def set_piece(self, sq: Square, piece: Piece | None) -> None:
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def rank(self, y: int) -> Rank:
        """Cells of row index *y* (0 is row 11), left to right."""
        start = y * BOARD_SIZE
        return tuple(self._squares[start : start + BOARD_SIZE])

    def ranks(self) -> list[Rank]:
        return [self.rank(y) for y in range(BOARD_SIZE)]

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Square]:
        """Squares occupied by *side*, row-major. The king counts as a defender."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.side == side
        ]

    def king_square(self) -> Square | None:
        return self._king_square

    def king_has_escaped(self) -> bool:
        """Whether the king stands on one of the four corners."""
        return self._king_square is not None and is_corner(self._king_square)

    def would_king_be_captured(self, sq: Square) -> bool:
        """Would a king on *sq* be captured?

        Every orthogonal neighbour has to be a corner, the castle or an
        attacker. An off-board neighbour saves the king.
        """
        for dx, dy in ORTHOGONAL_DIRS:
            neighbour = offset_square(sq, dx, dy)
            if neighbour is None:
                return False
            if is_special(neighbour):
                continue
            piece = self._squares[neighbour]
            if piece is None or piece.side != Side.ATTACKER:
                return False
        return True

    # -- Mutation / copying -------------------------------------------------

    def make_move(self, move: Move) -> list[Square]:
        """Apply *move* and resolve captures; return the captured squares.

        A move from an empty square changes nothing, not even the side to move.
        """
        piece = self._squares[move.from_sq]
        if piece is None:
            _LOGGER.warning(
                "No piece on %s, ignoring move %s", square_name(move.from_sq), move
            )
            return []

        self[move.from_sq] = None
        self[move.to_sq] = piece
        mover = piece.side

        captured: list[Square] = []
        for dx, dy in ORTHOGONAL_DIRS:
            target_sq = offset_square(move.to_sq, dx, dy)
            if target_sq is None:
                continue
            if self._resolve_capture(target_sq, dx, dy, mover):
                self[target_sq] = None
                captured.append(target_sq)

        if captured:
            _LOGGER.debug(
                "%s captured %s",
                move,
                ", ".join(square_name(sq) for sq in captured),
            )
        self.side_to_move = mover.opposite
        return captured

    def _resolve_capture(self, target_sq: Square, dx: int, dy: int, mover: Side) -> bool:
        target = self._squares[target_sq]
        if target is None or target.side == mover:
            return False

        if target.is_king:
            # Only attackers reach this branch: the king is on the defending side.
            return self.would_king_be_captured(target_sq)

        landing_sq = offset_square(target_sq, dx, dy)
        if landing_sq is None:
            return False
        if is_special(landing_sq):
            return True
        landing = self._squares[landing_sq]
        return landing is not None and landing.side == mover

    def copy(self) -> Board:
        b = Board(self.side_to_move)
        b._squares = self._squares.copy()
        b._king_square = self._king_square
        return b

    def clear(self) -> None:
        self._squares = [None] * SQUARE_COUNT
        self._king_square = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        from hnefatafl.core.notation.hnfen import DEFAULT_START_HNFEN, board_from_hnfen

        return board_from_hnfen(DEFAULT_START_HNFEN)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.side_to_move == other.side_to_move
        )

    def debug_render(self) -> str:
        """Grid dump: ``.`` empty cell, ``+`` empty corner or castle."""
        rows: list[str] = []
        for y in range(BOARD_SIZE):
            row = []
            for x in range(BOARD_SIZE):
                sq = make_square(x, y)
                p = self._squares[sq]
                if p is not None:
                    row.append(str(p))
                else:
                    row.append("+" if is_special(sq) else ".")
            rows.append(f"{BOARD_SIZE - y:>2} {' '.join(row)}")
        rows.append("   " + " ".join(COLUMNS))
        rows.append(f"{self.side_to_move!s} to move")
        return "\n".join(rows)

    def __repr__(self) -> str:
        return self.debug_render()
