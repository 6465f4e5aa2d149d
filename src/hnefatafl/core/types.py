"""Square type alias, coordinate helpers and the special cells.

Board layout (row-major, top row first):
    a11=0,  b11=1,  ..., k11=10
    a10=11, b10=12, ..., k10=21
    ...
    a1=110, b1=111, ..., k1=120

``x`` is the column index (a-k -> 0-10) and ``y`` is ``11 - row``.
"""

from __future__ import annotations

import re
from typing import Final, TypeAlias

from hnefatafl.core.errors import MalformedPositionError

Square: TypeAlias = int  # 0–120

BOARD_SIZE: Final = 11
SQUARE_COUNT: Final = BOARD_SIZE * BOARD_SIZE
COLUMNS: Final = "abcdefghijk"

# Column letter, then row 1-11 without leading zeros.
SQUARE_PATTERN: Final = r"([a-k])(1[01]|[1-9])"
_SQUARE_RE: Final = re.compile(SQUARE_PATTERN)


def make_square(x: int, y: int) -> Square:
    """Create square from column index *x* and row index *y* (0–10)."""
    return y * BOARD_SIZE + x


def square_x(sq: Square) -> int:
    """Column index 0–10 (a–k)."""
    return sq % BOARD_SIZE


def square_y(sq: Square) -> int:
    """Row index 0–10, counted from the top (row 11)."""
    return sq // BOARD_SIZE


def to_indices(sq: Square) -> tuple[int, int]:
    """Return the ``(x, y)`` grid indices of *sq*."""
    return square_x(sq), square_y(sq)


def in_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a11', 120 → 'k1'."""
    return COLUMNS[square_x(sq)] + str(BOARD_SIZE - square_y(sq))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'f6' → 60."""
    m = _SQUARE_RE.fullmatch(name)
    if m is None:
        raise MalformedPositionError(f"Invalid square name: {name!r}")
    return make_square(COLUMNS.index(m.group(1)), BOARD_SIZE - int(m.group(2)))


# ── Special cells ───────────────────────────────────────────────────────────

A11: Final = make_square(0, 0)
K11: Final = make_square(10, 0)
A1: Final = make_square(0, 10)
K1: Final = make_square(10, 10)
CASTLE: Final = make_square(5, 5)  # f6

CORNERS: Final = frozenset((A11, K11, A1, K1))
SPECIAL_SQUARES: Final = CORNERS | {CASTLE}


def is_corner(sq: Square) -> bool:
    return sq in CORNERS


def is_castle(sq: Square) -> bool:
    return sq == CASTLE


def is_special(sq: Square) -> bool:
    """Corners and the castle: hostile for captures, no landing for non-kings."""
    return sq in SPECIAL_SQUARES


# ── Directions ──────────────────────────────────────────────────────────────

# (dx, dy): up (towards row 11), down, left, right.
ORTHOGONAL_DIRS: Final[tuple[tuple[int, int], ...]] = ((0, -1), (0, 1), (-1, 0), (1, 0))


def offset_square(sq: Square, dx: int, dy: int) -> Square | None:
    """Square displaced by ``(dx, dy)`` from *sq*, or ``None`` when off-board."""
    x = square_x(sq) + dx
    y = square_y(sq) + dy
    if not in_board(x, y):
        return None
    return make_square(x, y)
