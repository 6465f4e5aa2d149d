"""High-level tafl rules: escape, king capture and game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hnefatafl.core.enums import GameResult
from hnefatafl.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from hnefatafl.core.board import Board
    from hnefatafl.core.move import Move


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - The defenders win once the king reaches a corner.
    # - The attackers win once the king has been captured (removed).
    # - No repetition or draw rules.

    @staticmethod
    def legal_moves(board: Board) -> list[Move]:
        return MoveGenerator(board).generate_moves()

    @staticmethod
    def is_legal(board: Board, move: Move) -> bool:
        piece = board[move.from_sq]
        if piece is None or piece.side != board.side_to_move:
            return False
        return move in MoveGenerator(board).moves_from(move.from_sq)

    @staticmethod
    def king_has_escaped(board: Board) -> bool:
        return board.king_has_escaped()

    @staticmethod
    def is_king_captured(board: Board) -> bool:
        """The king has been taken off the board."""
        return board.king_square() is None

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result."""
        if Rules.king_has_escaped(board):
            return GameResult.DEFENDER_WINS
        if Rules.is_king_captured(board):
            return GameResult.ATTACKER_WINS
        return GameResult.IN_PROGRESS
