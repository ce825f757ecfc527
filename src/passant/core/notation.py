"""FEN piece-placement parsing and serialization for seeding boards."""

from __future__ import annotations

from passant.core.board import Board
from passant.core.enums import Color
from passant.core.piece import Piece

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_PAWN_HOME_ROW = {Color.WHITE: 1, Color.BLACK: 6}


def board_from_fen(fen: str) -> Board:
    """Parse a FEN string (only the placement field is read) into a :class:`Board`.

    Pawns found off their home row are marked as having already moved.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")
    placement = parts[0]

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = 7 - rank_idx
        column = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                column += step
            else:
                if column >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch)
                if piece.is_pawn and row != _PAWN_HOME_ROW[piece.color]:
                    piece.first_move = False
                board[(column, row)] = piece
                column += 1
            if column > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if column != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise the piece placement of *board* to FEN."""
    rows: list[str] = []
    for row in range(7, -1, -1):
        empty = 0
        text = ""
        for column in range(8):
            piece = board[(column, row)]
            if piece.is_empty:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
