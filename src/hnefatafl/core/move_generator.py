"""Legal sliding-move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hnefatafl.core.move import Move
from hnefatafl.core.types import (
    CASTLE,
    CORNERS,
    ORTHOGONAL_DIRS,
    SQUARE_COUNT,
    Square,
    in_board,
    make_square,
    square_x,
    square_y,
)

if TYPE_CHECKING:
    from hnefatafl.core.board import Board


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(SQUARE_COUNT):
        x = square_x(sq)
        y = square_y(sq)
        square_rays: list[tuple[Square, ...]] = []
        for dx, dy in directions:
            ax = x + dx
            ay = y + dy
            ray: list[Square] = []
            while in_board(ax, ay):
                ray.append(make_square(ax, ay))
                ax += dx
                ay += dy
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_ROOK_RAYS = _build_rays(ORTHOGONAL_DIRS)


class MoveGenerator:
    """Generates legal moves for the side to move on a :class:`Board`.

    Every piece slides like a rook. Only the king may stop on a corner or the
    castle; other pieces are stopped by corners and pass over the empty castle.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_moves(self) -> list[Move]:
        """All legal moves for the side to move, pieces in row-major order."""
        moves: list[Move] = []
        for sq in self._board.pieces(self._board.side_to_move):
            self._gen_sliding(sq, moves)
        return moves

    def moves_from(self, sq: Square) -> list[Move]:
        """Legal destinations of the piece on *sq*, whichever side owns it."""
        moves: list[Move] = []
        if self._board[sq] is not None:
            self._gen_sliding(sq, moves)
        return moves

    def has_moves(self) -> bool:
        board = self._board
        for sq in board.pieces(board.side_to_move):
            if self.moves_from(sq):
                return True
        return False

    # -- Sliding generator (private) ---------------------------------------

    def _gen_sliding(self, sq: Square, moves: list[Move]) -> None:
        board = self._board
        piece = board[sq]
        assert piece is not None
        is_king = piece.is_king

        for ray in _ROOK_RAYS[sq]:
            for to_sq in ray:
                if not is_king:
                    if to_sq in CORNERS:
                        break
                    if to_sq == CASTLE and board.is_empty(CASTLE):
                        continue
                if not board.is_empty(to_sq):
                    break
                moves.append(Move(sq, to_sq))
