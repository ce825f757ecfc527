"""Qt bridge exposing a game controller's events as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from passant.config import EngineSettings
from passant.core.enums import PieceType
from passant.core.piece import Piece
from passant.core.promotion import PromotionRequest
from passant.game.controller import GameController
from passant.game.session import GameSession, MoveRecord


class SessionBridge(QObject):
    """Main-thread adapter between a PyQt front end and :class:`GameController`."""

    move_applied = pyqtSignal(object)
    piece_captured = pyqtSignal(object, object)
    promotion_requested = pyqtSignal(object)
    promotion_resolved = pyqtSignal(object)
    board_reset = pyqtSignal()
    move_rejected = pyqtSignal(str)

    def __init__(
        self,
        controller: GameController | None = None,
        *,
        settings: EngineSettings | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller or GameController(settings)
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_capture.append(self._on_capture)
        events.on_promotion_requested.append(self._on_promotion_requested)
        events.on_promotion_resolved.append(self._on_promotion_resolved)
        events.on_reset.append(self.board_reset.emit)
        events.on_rejected.append(self.move_rejected.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(int, int, int, int)
    def request_move(
        self, src_column: int, src_row: int, dst_column: int, dst_row: int
    ) -> None:
        """Apply the move picked on the board view."""
        self._controller.submit_move((src_column, src_row), (dst_column, dst_row))

    @pyqtSlot(int)
    def choose_promotion(self, kind: int) -> None:
        """Apply the piece kind picked in the promotion dialog."""
        try:
            piece_type = PieceType(kind)
        except ValueError:
            self.move_rejected.emit(f"Unknown piece kind: {kind}")
            return
        self._controller.choose_promotion(piece_type)

    @pyqtSlot(object)
    def new_game(self, fen: object) -> None:
        if fen is not None and not isinstance(fen, str):
            self.move_rejected.emit("New game expects a FEN string")
            return
        try:
            self._controller.new_game(fen)
        except ValueError as exc:
            self.move_rejected.emit(str(exc))

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, record: MoveRecord) -> None:
        self.move_applied.emit(record)

    def _on_capture(self, piece: Piece, session: GameSession) -> None:
        self.piece_captured.emit(piece, session.ledgers)

    def _on_promotion_requested(self, request: PromotionRequest) -> None:
        self.promotion_requested.emit(request)

    def _on_promotion_resolved(self, piece: Piece) -> None:
        self.promotion_resolved.emit(piece)
