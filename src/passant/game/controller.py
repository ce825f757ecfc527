"""GameController: the orchestrator between a session and its presentation layer.

Coordinates: GameSession, EngineSettings.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from passant.config import EngineSettings
from passant.core.enums import PieceType
from passant.core.errors import ChessError
from passant.core.piece import Piece
from passant.core.promotion import PromotionRequest
from passant.game.session import GameSession, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
CaptureCallback = Callable[[Piece, "GameSession"], None]  # captured, session
PromotionCallback = Callable[[PromotionRequest], None]
PromotedCallback = Callable[[Piece], None]
ResetCallback = Callable[[], None]
RejectedCallback = Callable[[str], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_promotion_requested: list[PromotionCallback] = field(default_factory=list)
    on_promotion_resolved: list[PromotedCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Feeds presentation-layer input into a :class:`GameSession` and
    notifies listeners of what changed.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Moves are applied one at a time.
    """

    __slots__ = ("_settings", "_session", "events")

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._settings = settings or EngineSettings()
        self._session = GameSession(self._settings)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Discard the current session and seed a new one."""
        self._session = GameSession(self._settings, fen)
        for cb in self.events.on_reset:
            cb()

    def submit_move(self, source: tuple[int, int], target: tuple[int, int]) -> bool:
        """Apply a move. Returns False if the engine refused it."""
        try:
            record = self._session.move(source, target)
        except ChessError as exc:
            _LOGGER.warning("Move %s→%s rejected: %s", source, target, exc)
            self._emit_rejected(str(exc))
            return False

        outcome = record.outcome
        if outcome.captured is not None:
            for cb in self.events.on_capture:
                cb(outcome.captured, self._session)
        for cb in self.events.on_move:
            cb(record)

        if outcome.promotion is not None:
            if self._settings.auto_promote_to is not None:
                self.choose_promotion(
                    self._settings.auto_promote_to, outcome.promotion.coordinate
                )
            else:
                for cb in self.events.on_promotion_requested:
                    cb(outcome.promotion)
        return True

    def choose_promotion(
        self, kind: PieceType, coordinate: tuple[int, int] | None = None
    ) -> bool:
        """Answer a pending promotion. Returns False if it could not be applied."""
        try:
            piece = self._session.resolve_promotion(kind, coordinate)
        except ChessError as exc:
            _LOGGER.warning("Promotion to %s rejected: %s", kind.name, exc)
            self._emit_rejected(str(exc))
            return False
        for cb in self.events.on_promotion_resolved:
            cb(piece)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_rejected(self, reason: str) -> None:
        for cb in self.events.on_rejected:
            cb(reason)
