"""Material ledger: captured enemy pieces per side plus the surplus view."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from passant.core.enums import Color, PieceType
from passant.core.errors import LedgerError
from passant.core.piece import PIECE_VALUES, Piece
from passant.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CapturedPiece:
    """A single ledger entry."""

    piece_type: PieceType
    color: Color
    square: Coordinate


class MaterialLedger:
    """Ordered record of the enemy pieces captured by *owner*.

    The difference view answers "which of my captures are not offset by the
    opponent capturing the same kind".  It is derived data, refreshed by
    :meth:`update_difference` whenever either ledger changes.
    """

    __slots__ = ("owner", "_values", "_captures", "_difference", "_advantage")

    def __init__(
        self, owner: Color, values: Mapping[PieceType, int] | None = None
    ) -> None:
        self.owner = owner
        self._values: Mapping[PieceType, int] = (
            PIECE_VALUES if values is None else values
        )
        self._captures: list[CapturedPiece] = []
        self._difference: tuple[CapturedPiece, ...] = ()
        self._advantage = 0

    # ── Mutation ─────────────────────────────────────────────────────────

    def add(self, piece: Piece) -> CapturedPiece:
        if piece.is_empty:
            raise LedgerError("Cannot record an empty cell as a capture")
        if piece.color == self.owner:
            raise LedgerError(
                f"{self.owner} ledger cannot hold a {piece.color} piece"
            )
        record = CapturedPiece(piece.piece_type, piece.color, piece.position)
        self._captures.append(record)
        _LOGGER.debug(
            "%s captured %s on %s", self.owner, piece.piece_type.name, piece.position
        )
        return record

    def update_difference(self, other: MaterialLedger) -> None:
        """Recompute the surplus view of this ledger and *other*."""
        mine = self._surplus(self._captures, other.counts())
        theirs = self._surplus(other._captures, self.counts())
        self._difference = mine
        other._difference = theirs
        self._advantage = self.score - other.score
        other._advantage = -self._advantage

    def clear(self) -> None:
        self._captures.clear()
        self._difference = ()
        self._advantage = 0

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def captures(self) -> tuple[CapturedPiece, ...]:
        return tuple(self._captures)

    @property
    def difference(self) -> tuple[CapturedPiece, ...]:
        """Captures not matched by an equal capture on the other side."""
        return self._difference

    @property
    def advantage(self) -> int:
        """Material lead over the other ledger as of the last refresh."""
        return self._advantage

    @property
    def score(self) -> int:
        return sum(self._values.get(c.piece_type, 0) for c in self._captures)

    def counts(self) -> Counter[PieceType]:
        return Counter(c.piece_type for c in self._captures)

    def count(self, piece_type: PieceType) -> int:
        return sum(1 for c in self._captures if c.piece_type == piece_type)

    def __len__(self) -> int:
        return len(self._captures)

    def __iter__(self) -> Iterator[CapturedPiece]:
        return iter(self._captures)

    def __repr__(self) -> str:
        kinds = ",".join(c.piece_type.name.lower() for c in self._captures)
        return f"MaterialLedger({self.owner}: [{kinds}])"

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _surplus(
        captures: list[CapturedPiece], offsets: Counter[PieceType]
    ) -> tuple[CapturedPiece, ...]:
        # The first N captures of a kind are cancelled by the opponent's N.
        remaining = Counter(offsets)
        surplus: list[CapturedPiece] = []
        for record in captures:
            if remaining[record.piece_type] > 0:
                remaining[record.piece_type] -= 1
            else:
                surplus.append(record)
        return tuple(surplus)


@dataclass(slots=True)
class Ledgers:
    """The two ledgers of one game session."""

    white: MaterialLedger
    black: MaterialLedger

    @classmethod
    def new(cls, values: Mapping[PieceType, int] | None = None) -> Ledgers:
        return cls(
            MaterialLedger(Color.WHITE, values), MaterialLedger(Color.BLACK, values)
        )

    def for_color(self, color: Color) -> MaterialLedger:
        return self.white if color == Color.WHITE else self.black

    def record_capture(self, captor: Color, piece: Piece) -> CapturedPiece:
        """Add *piece* to *captor*'s ledger and refresh both difference views."""
        ledger = self.for_color(captor)
        record = ledger.add(piece)
        ledger.update_difference(self.for_color(captor.opposite))
        return record
