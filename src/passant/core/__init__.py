"""Core domain layer: pure chess state with zero external dependencies.

Quick start::

    from passant.core import Board, Ledgers, MoveExecutor

    board = Board.initial()
    ledgers = Ledgers.new()
    outcome = MoveExecutor(board, ledgers).apply_move((4, 1), (4, 3))
    assert outcome.double_move
"""

from passant.core.board import Board
from passant.core.enums import PROMOTION_CHOICES, Color, PieceType
from passant.core.errors import (
    BoardStateError,
    ChessError,
    InvalidSourceStateError,
    LedgerError,
    OutOfRangeError,
    PromotionError,
    UnresolvedPromotionError,
)
from passant.core.executor import MoveExecutor, MoveOutcome, apply_move
from passant.core.ledger import CapturedPiece, Ledgers, MaterialLedger
from passant.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from passant.core.piece import PIECE_VALUES, Piece
from passant.core.promotion import PromotionRequest, promote
from passant.core.types import (
    NO_EN_PASSANT,
    Coordinate,
    make_coordinate,
    pack,
    parse_square,
    square_name,
    unpack,
)

__all__ = [
    # Enums / constants
    "Color",
    "PieceType",
    "PIECE_VALUES",
    "PROMOTION_CHOICES",
    "NO_EN_PASSANT",
    # Types / helpers
    "Coordinate",
    "make_coordinate",
    "pack",
    "unpack",
    "parse_square",
    "square_name",
    # Errors
    "ChessError",
    "OutOfRangeError",
    "InvalidSourceStateError",
    "UnresolvedPromotionError",
    "PromotionError",
    "BoardStateError",
    "LedgerError",
    # Domain objects
    "Board",
    "CapturedPiece",
    "Ledgers",
    "MaterialLedger",
    "MoveExecutor",
    "MoveOutcome",
    "Piece",
    "PromotionRequest",
    "apply_move",
    "promote",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
