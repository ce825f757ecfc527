"""Promotion request and its resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from passant.core.enums import PROMOTION_CHOICES, Color, PieceType
from passant.core.errors import PromotionError
from passant.core.piece import Piece
from passant.core.types import Coordinate

if TYPE_CHECKING:
    from passant.core.board import Board

PROMOTION_ROWS = (0, 7)


@dataclass(frozen=True, slots=True)
class PromotionRequest:
    """A pawn reached the far row and needs a replacement kind."""

    color: Color
    coordinate: Coordinate


def needs_promotion(piece: Piece) -> bool:
    return piece.is_pawn and piece.position.row in PROMOTION_ROWS


def promote(board: Board, request: PromotionRequest, kind: PieceType) -> Piece:
    """Replace the pawn named by *request* with a new piece of *kind*."""
    if kind not in PROMOTION_CHOICES:
        raise PromotionError(f"Cannot promote to {kind.name}")
    pawn = board[request.coordinate]
    if not pawn.is_pawn or pawn.color != request.color:
        raise PromotionError(
            f"No {request.color} pawn awaiting promotion on {request.coordinate}"
        )
    promoted = Piece(request.color, kind, first_move=False)
    board.vacate(request.coordinate)
    board[request.coordinate] = promoted
    return promoted
