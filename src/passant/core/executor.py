"""Move executor: commits a source/target move to the board.

No legality checking happens here: the caller decides which move is played.
The executor resolves what that move does to the board, in a fixed order:

1. double-step detection (opens the en passant window),
2. en passant capture,
3. closing every other en passant window,
4. ordinary capture,
5. relocation,
6. promotion detection,
7. clearing the first-move flag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from passant.core.board import Board
from passant.core.enums import Color, PieceType
from passant.core.errors import BoardStateError, InvalidSourceStateError
from passant.core.ledger import Ledgers
from passant.core.piece import Piece
from passant.core.promotion import PromotionRequest, needs_promotion
from passant.core.types import Coordinate, check_coordinate, pack

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Everything a committed move did."""

    source: Coordinate
    target: Coordinate
    piece_type: PieceType
    color: Color
    captured: Piece | None = None
    capture_square: Coordinate | None = None
    double_move: bool = False
    en_passant: bool = False
    promotion: PromotionRequest | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


class MoveExecutor:
    """Applies moves to one session's board and ledgers."""

    __slots__ = ("board", "ledgers")

    def __init__(self, board: Board, ledgers: Ledgers) -> None:
        self.board = board
        self.ledgers = ledgers

    def apply_move(
        self, source: tuple[int, int], target: tuple[int, int]
    ) -> MoveOutcome:
        src = check_coordinate(source)
        dst = check_coordinate(target)
        piece = self.board[src]
        occupant = self.board[dst]

        if piece.is_empty:
            raise InvalidSourceStateError(f"No piece on {src}")
        if src == dst:
            raise InvalidSourceStateError(f"Source and target are both {src}")
        if not occupant.is_empty and occupant.color == piece.color:
            raise BoardStateError(
                f"{piece.color} cannot capture its own piece on {dst}"
            )

        captured: Piece | None = None
        capture_square: Coordinate | None = None

        double_move = self._detect_double_move(piece, src, dst)
        en_passant = False
        if not double_move:
            victim = self._en_passant_victim(piece, src, dst)
            if victim is not None:
                en_passant = True
                captured, capture_square = victim, victim.position
                self._capture(piece.color, victim)
                self.board.vacate(capture_square)
                victim.clear_en_passant()
            # Only a double step keeps the opponent's windows open.
            self.board.reset_double_move_flags()

        if not occupant.is_empty:
            captured, capture_square = occupant, dst
            self._capture(piece.color, occupant)

        self.board.vacate(src)
        self.board[dst] = piece

        promotion: PromotionRequest | None = None
        if needs_promotion(piece):
            promotion = PromotionRequest(piece.color, dst)
            _LOGGER.debug("Promotion pending for %s on %s", piece.color, dst)

        piece.first_move = False

        _LOGGER.debug("%s %s %s→%s", piece.color, piece.piece_type.name, src, dst)
        return MoveOutcome(
            source=src,
            target=dst,
            piece_type=piece.piece_type,
            color=piece.color,
            captured=captured,
            capture_square=capture_square,
            double_move=double_move,
            en_passant=en_passant,
            promotion=promotion,
        )

    # ── Special rules ────────────────────────────────────────────────────

    def _detect_double_move(
        self, piece: Piece, src: Coordinate, dst: Coordinate
    ) -> bool:
        if not piece.is_pawn:
            return False
        if src.column != dst.column or dst.row != src.row + 2 * piece.color.forward:
            return False
        # Windows opened by this side's earlier double steps are already spent.
        for pawn in self.board.pawns():
            if pawn.color == piece.color and pawn is not piece:
                pawn.clear_en_passant()
        piece.just_double_moved = True
        piece.en_passant_target = pack((src.column, src.row + piece.color.forward))
        return True

    def _en_passant_victim(
        self, piece: Piece, src: Coordinate, dst: Coordinate
    ) -> Piece | None:
        if not piece.is_pawn:
            return None
        if abs(dst.column - src.column) != 1:
            return None
        if dst.row != src.row + piece.color.forward:
            return None
        victim = self.board[(dst.column, src.row)]
        if (
            victim.is_pawn
            and victim.color != piece.color
            and victim.just_double_moved
            and victim.en_passant_target == pack(dst)
        ):
            return victim
        return None

    def _capture(self, captor: Color, piece: Piece) -> None:
        self.ledgers.record_capture(captor, piece)


def apply_move(
    board: Board,
    ledgers: Ledgers,
    source: tuple[int, int],
    target: tuple[int, int],
) -> MoveOutcome:
    """Convenience wrapper: apply one move with a throwaway executor."""
    return MoveExecutor(board, ledgers).apply_move(source, target)
