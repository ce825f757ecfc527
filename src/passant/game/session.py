"""Game session: one game's board, ledgers, pending promotion and history."""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass, field

from passant.config import EngineSettings
from passant.core.board import Board
from passant.core.enums import Color, PieceType
from passant.core.errors import PromotionError, UnresolvedPromotionError
from passant.core.executor import MoveExecutor, MoveOutcome
from passant.core.ledger import Ledgers, MaterialLedger
from passant.core.notation import board_from_fen, board_to_fen
from passant.core.piece import Piece
from passant.core.promotion import PromotionRequest, promote

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    ply: int
    outcome: MoveOutcome
    fen_after: str
    promoted_to: PieceType | None = None


@dataclass
class GameSession:
    """Owns the mutable state of a single game.

    This is a pure data/logic class with no threading and no UI.  Moves are
    serialised by the caller; nothing here is re-entrant.
    """

    settings: EngineSettings = field(default_factory=EngineSettings)
    fen: InitVar[str | None] = None
    board: Board = field(init=False)
    ledgers: Ledgers = field(init=False)
    history: list[MoveRecord] = field(default_factory=list, init=False)
    pending_promotions: list[PromotionRequest] = field(
        default_factory=list, init=False
    )
    start_fen: str = field(init=False)

    def __post_init__(self, fen: str | None) -> None:
        self.setup(fen)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Start (or restart) a game on a freshly seeded board."""
        self.start_fen = fen or self.settings.start_fen
        self.board = board_from_fen(self.start_fen)
        self.ledgers = Ledgers.new(self.settings.piece_values)
        self.history = []
        self.pending_promotions = []
        _LOGGER.debug("New session from %s", self.start_fen)

    # ── Moves ────────────────────────────────────────────────────────────

    def move(self, source: tuple[int, int], target: tuple[int, int]) -> MoveRecord:
        """Commit a move and append it to the history.

        Caller is responsible for legality.  While a promotion is pending,
        either every move is refused or only moves touching the promotion
        square are, depending on ``settings.block_on_pending_promotion``.
        """
        self._check_not_blocked(source, target)

        outcome = MoveExecutor(self.board, self.ledgers).apply_move(source, target)
        if outcome.promotion is not None:
            self.pending_promotions.append(outcome.promotion)

        record = MoveRecord(
            ply=len(self.history) + 1,
            outcome=outcome,
            fen_after=board_to_fen(self.board),
        )
        self.history.append(record)
        return record

    def resolve_promotion(
        self, kind: PieceType, coordinate: tuple[int, int] | None = None
    ) -> Piece:
        """Answer a pending promotion request with *kind*.

        Without *coordinate* the oldest pending request is answered.
        """
        request = self._find_pending(coordinate)
        piece = promote(self.board, request, kind)
        self.pending_promotions.remove(request)

        for record in reversed(self.history):
            if record.outcome.promotion == request:
                record.promoted_to = kind
                record.fen_after = board_to_fen(self.board)
                break

        _LOGGER.debug(
            "%s pawn on %s promoted to %s", request.color, request.coordinate, kind.name
        )
        return piece

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def pending_promotion(self) -> PromotionRequest | None:
        """Oldest unanswered promotion request, if any."""
        return self.pending_promotions[0] if self.pending_promotions else None

    def ledger(self, color: Color) -> MaterialLedger:
        return self.ledgers.for_color(color)

    @property
    def white_ledger(self) -> MaterialLedger:
        return self.ledgers.white

    @property
    def black_ledger(self) -> MaterialLedger:
        return self.ledgers.black

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def awaiting_promotion(self) -> bool:
        return self.pending_promotion is not None

    @property
    def fen(self) -> str:
        return board_to_fen(self.board)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_not_blocked(
        self, source: tuple[int, int], target: tuple[int, int]
    ) -> None:
        request = self.pending_promotion
        if request is None:
            return
        if self.settings.block_on_pending_promotion:
            raise UnresolvedPromotionError(
                f"Promotion on {request.coordinate} is unresolved"
            )
        for pending in self.pending_promotions:
            if pending.coordinate in (tuple(source), tuple(target)):
                raise UnresolvedPromotionError(
                    f"Promotion on {pending.coordinate} is unresolved"
                )

    def _find_pending(self, coordinate: tuple[int, int] | None) -> PromotionRequest:
        if not self.pending_promotions:
            raise PromotionError("No promotion is pending")
        if coordinate is None:
            return self.pending_promotions[0]
        for request in self.pending_promotions:
            if request.coordinate == tuple(coordinate):
                return request
        raise PromotionError(f"No promotion is pending on {coordinate}")
