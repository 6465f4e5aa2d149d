"""Notation package: HNFEN parsing and serialization."""

from hnefatafl.core.notation.hnfen import (
    DEFAULT_START_HNFEN,
    board_from_hnfen,
    board_to_hnfen,
    move_from_hnfen,
    move_to_hnfen,
    piece_from_hnfen,
    piece_to_hnfen,
    rank_from_hnfen,
    rank_to_hnfen,
    side_from_hnfen,
    side_to_hnfen,
    square_from_hnfen,
    square_to_hnfen,
)

__all__ = [
    "DEFAULT_START_HNFEN",
    "board_from_hnfen",
    "board_to_hnfen",
    "move_from_hnfen",
    "move_to_hnfen",
    "piece_from_hnfen",
    "piece_to_hnfen",
    "rank_from_hnfen",
    "rank_to_hnfen",
    "side_from_hnfen",
    "side_to_hnfen",
    "square_from_hnfen",
    "square_to_hnfen",
]
