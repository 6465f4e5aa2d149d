"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from hnefatafl.core.board import Board
from hnefatafl.core.notation import DEFAULT_START_HNFEN, board_from_hnfen

EMPTY_HNFEN = "11/11/11/11/11/11/11/11/11/11/11"


@pytest.fixture
def start_board() -> Board:
    """A fresh board in the default starting layout."""
    return board_from_hnfen(DEFAULT_START_HNFEN)


@pytest.fixture
def empty_board() -> Board:
    return board_from_hnfen(EMPTY_HNFEN)
