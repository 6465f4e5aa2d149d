"""Tests for Rules: escape, king capture and game result."""

from hnefatafl.core.board import Board
from hnefatafl.core.enums import GameResult, Side
from hnefatafl.core.move import Move
from hnefatafl.core.notation import board_from_hnfen, move_from_hnfen
from hnefatafl.core.piece import ATTACKER_PIECE, KING
from hnefatafl.core.rules import Rules
from hnefatafl.core.types import CASTLE, parse_square


class TestGameResult:
    def test_start_in_progress(self, start_board: Board) -> None:
        assert Rules.game_result(start_board) == GameResult.IN_PROGRESS

    def test_escape_wins_for_defenders(self) -> None:
        board = board_from_hnfen("K10/11/11/11/11/11/11/11/11/11/11 a")
        assert Rules.king_has_escaped(board)
        assert Rules.game_result(board) == GameResult.DEFENDER_WINS

    def test_king_reaching_corner_by_move(self, empty_board: Board) -> None:
        empty_board[parse_square("k5")] = KING
        empty_board.side_to_move = Side.DEFENDER
        move = move_from_hnfen("k5k1")
        assert Rules.is_legal(empty_board, move)
        empty_board.make_move(move)
        assert Rules.game_result(empty_board) == GameResult.DEFENDER_WINS

    def test_captured_king_wins_for_attackers(self, empty_board: Board) -> None:
        for name in ("e4", "e2", "f3", "d1"):
            empty_board[parse_square(name)] = ATTACKER_PIECE
        empty_board[parse_square("e3")] = KING
        assert Rules.game_result(empty_board) == GameResult.IN_PROGRESS
        empty_board.make_move(move_from_hnfen("d1d3"))
        assert Rules.is_king_captured(empty_board)
        assert Rules.game_result(empty_board) == GameResult.ATTACKER_WINS


class TestLegality:
    def test_legal_moves_match_generator(self, start_board: Board) -> None:
        assert len(Rules.legal_moves(start_board)) == 116

    def test_legal_opening_move(self, start_board: Board) -> None:
        assert Rules.is_legal(start_board, move_from_hnfen("d11d9"))

    def test_wrong_side(self, start_board: Board) -> None:
        assert not Rules.is_legal(start_board, move_from_hnfen("f8f9"))

    def test_empty_origin(self, start_board: Board) -> None:
        assert not Rules.is_legal(start_board, move_from_hnfen("e9e8"))

    def test_jumping_is_illegal(self, start_board: Board) -> None:
        # a7 stands between a8 and a4.
        assert not Rules.is_legal(start_board, move_from_hnfen("a8a4"))

    def test_castle_landing_illegal_for_normal_piece(self, empty_board: Board) -> None:
        empty_board[parse_square("f2")] = ATTACKER_PIECE
        assert not Rules.is_legal(empty_board, Move(parse_square("f2"), CASTLE))
        assert Rules.is_legal(empty_board, move_from_hnfen("f2f7"))
