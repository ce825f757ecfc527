"""Tests for FEN seeding helpers."""

import pytest

from passant.core.enums import Color, PieceType
from passant.core.notation import STARTING_FEN, board_from_fen, board_to_fen


class TestBoardFromFen:
    def test_starting_position(self) -> None:
        board = board_from_fen(STARTING_FEN)
        assert board[(4, 0)].piece_type == PieceType.KING
        assert board[(3, 7)].piece_type == PieceType.QUEEN
        assert board[(3, 7)].color == Color.BLACK

    def test_full_fen_accepted(self) -> None:
        board = board_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert board[(4, 3)].is_pawn
        assert board.is_empty((4, 1))

    def test_advanced_pawns_have_moved(self) -> None:
        board = board_from_fen("4k3/8/8/3pP3/8/8/1P6/4K3")
        assert board[(1, 1)].first_move
        assert not board[(4, 4)].first_move
        assert not board[(3, 4)].first_move

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/7X",
        ],
    )
    def test_invalid_fen(self, fen: str) -> None:
        with pytest.raises(ValueError):
            board_from_fen(fen)


class TestBoardToFen:
    def test_starting_position(self) -> None:
        assert board_to_fen(board_from_fen(STARTING_FEN)) == STARTING_FEN

    def test_sparse_position(self) -> None:
        fen = "4k3/3p4/8/4P3/8/8/8/4K3"
        assert board_to_fen(board_from_fen(fen)) == fen
