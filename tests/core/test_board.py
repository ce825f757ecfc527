"""Tests for Board."""

import pytest

from passant.core.board import Board
from passant.core.enums import Color, PieceType
from passant.core.errors import BoardStateError, OutOfRangeError
from passant.core.piece import Piece
from passant.core.types import Coordinate, all_coordinates


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        king = board.cell_at((4, 0))
        assert king.piece_type == PieceType.KING
        assert king.color == Color.WHITE

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for column, pt in enumerate(expected):
            piece = board[(column, 7)]
            assert piece.piece_type == pt, f"Mismatch at column {column}"
            assert piece.color == Color.BLACK

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        assert all(board[(c, 1)].is_pawn for c in range(8))
        assert all(board[(c, 6)].is_pawn for c in range(8))
        assert len(list(board.pawns())) == 16

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for column in range(8):
            for row in range(2, 6):
                assert board.is_empty((column, row))

    def test_every_cell_knows_its_position(self) -> None:
        board = Board.initial()
        for coord in all_coordinates():
            assert board[coord].position == coord

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16
        assert len(list(board)) == 64


class TestBoardOperations:
    def test_set_and_get_updates_position(self) -> None:
        for coord in [(0, 0), (3, 5), (7, 7)]:
            board = Board()
            piece = Piece(Color.WHITE, PieceType.ROOK)
            board.set_cell(coord, piece)
            assert board.cell_at(coord) is piece
            assert piece.position == coord

    def test_out_of_range_access(self) -> None:
        board = Board()
        with pytest.raises(OutOfRangeError):
            board.cell_at((8, 0))
        with pytest.raises(OutOfRangeError):
            board[(0, -1)]

    def test_out_of_range_set_does_not_mutate(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.QUEEN, Coordinate(2, 2))
        with pytest.raises(OutOfRangeError):
            board.set_cell((9, 9), piece)
        assert piece.position == (2, 2)
        assert all(p.is_empty for p in board)

    def test_duplicate_placement_rejected(self) -> None:
        board = Board()
        piece = Piece(Color.BLACK, PieceType.BISHOP)
        board[(2, 7)] = piece
        with pytest.raises(BoardStateError):
            board[(5, 7)] = piece
        assert board[(5, 7)].is_empty
        assert piece.position == (2, 7)

    def test_vacate(self) -> None:
        board = Board.initial()
        old = board.vacate((0, 0))
        assert old.piece_type == PieceType.ROOK
        assert board.is_empty((0, 0))
        assert board[(0, 0)].position == (0, 0)

    def test_reset_double_move_flags(self) -> None:
        board = Board.initial()
        for pawn in board.pawns():
            pawn.just_double_moved = True
        board.reset_double_move_flags()
        assert not any(p.just_double_moved for p in board.pawns())

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.vacate((4, 0))
        assert board != copy
        assert board[(4, 0)].piece_type == PieceType.KING

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "K" in text
        assert "a b c d e f g h" in text
