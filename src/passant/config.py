"""Engine settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from passant.core.enums import PROMOTION_CHOICES, PieceType
from passant.core.notation import STARTING_FEN
from passant.core.piece import PIECE_VALUES


@dataclass
class EngineSettings:
    """All user-configurable engine settings."""

    # Promotion
    block_on_pending_promotion: bool = True
    auto_promote_to: PieceType | None = None

    # Material
    piece_values: dict[PieceType, int] = field(
        default_factory=lambda: dict(PIECE_VALUES)
    )

    # Setup
    start_fen: str = STARTING_FEN

    def __post_init__(self) -> None:
        if self.auto_promote_to is not None and (
            self.auto_promote_to not in PROMOTION_CHOICES
        ):
            raise ValueError(f"Cannot auto-promote to {self.auto_promote_to!r}")
