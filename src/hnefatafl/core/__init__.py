"""Core domain layer — pure tafl logic with zero external dependencies.

Quick start::

    from hnefatafl.core import Board, MoveGenerator, board_from_hnfen, DEFAULT_START_HNFEN

    board = board_from_hnfen(DEFAULT_START_HNFEN)
    gen = MoveGenerator(board)
    for move in gen.generate_moves():
        print(move)
"""

from hnefatafl.core.board import Board, Rank
from hnefatafl.core.enums import GameResult, PieceKind, Side
from hnefatafl.core.errors import (
    HnfenError,
    MalformedBoardError,
    MalformedMoveError,
    MalformedPositionError,
    MalformedRankError,
    UnrecognizedTokenError,
)
from hnefatafl.core.move import Move
from hnefatafl.core.move_generator import MoveGenerator
from hnefatafl.core.notation import (
    DEFAULT_START_HNFEN,
    board_from_hnfen,
    board_to_hnfen,
    move_from_hnfen,
    move_to_hnfen,
)
from hnefatafl.core.piece import ATTACKER_PIECE, DEFENDER_PIECE, KING, Piece
from hnefatafl.core.rules import Rules
from hnefatafl.core.types import (
    CASTLE,
    CORNERS,
    Square,
    is_castle,
    is_corner,
    is_special,
    make_square,
    parse_square,
    square_name,
    to_indices,
)

__all__ = [
    # Enums
    "GameResult",
    "PieceKind",
    "Side",
    # Errors
    "HnfenError",
    "MalformedBoardError",
    "MalformedMoveError",
    "MalformedPositionError",
    "MalformedRankError",
    "UnrecognizedTokenError",
    # Types / helpers
    "CASTLE",
    "CORNERS",
    "Rank",
    "Square",
    "is_castle",
    "is_corner",
    "is_special",
    "make_square",
    "parse_square",
    "square_name",
    "to_indices",
    # Domain objects
    "ATTACKER_PIECE",
    "DEFENDER_PIECE",
    "KING",
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "DEFAULT_START_HNFEN",
    "board_from_hnfen",
    "board_to_hnfen",
    "move_from_hnfen",
    "move_to_hnfen",
]
