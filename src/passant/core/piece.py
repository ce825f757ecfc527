"""Piece: a tagged value covering every piece kind plus the empty cell."""

from __future__ import annotations

from dataclasses import dataclass, field

from passant.core.enums import Color, PieceType
from passant.core.types import NO_EN_PASSANT, Coordinate

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.EMPTY: 0,
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


@dataclass(slots=True)
class Piece:
    """Mutable piece record held by exactly one board cell.

    ``piece_type`` is the variant tag.  The pawn-only fields stay at their
    defaults for every other kind.  An empty cell is a ``Piece`` tagged
    :attr:`PieceType.EMPTY`; its color is a neutral ``WHITE``.
    """

    color: Color
    piece_type: PieceType
    position: Coordinate = Coordinate(0, 0)
    first_move: bool = True
    just_double_moved: bool = False
    en_passant_target: int = field(default=NO_EN_PASSANT)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def empty(cls, position: Coordinate = Coordinate(0, 0)) -> Piece:
        return cls(Color.WHITE, PieceType.EMPTY, Coordinate(*position))

    @classmethod
    def from_char(cls, char: str, position: Coordinate = Coordinate(0, 0)) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        if char == ".":
            return cls.empty(position)
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, Coordinate(*position))

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return self.piece_type == PieceType.EMPTY

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def value(self) -> int:
        """Standard material value (king and empty count as zero)."""
        return PIECE_VALUES[self.piece_type]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        if self.is_empty:
            return "."
        return _UNICODE[(self.color, self.piece_type)]

    def same_as(self, other: Piece) -> bool:
        """Same kind, color and square; ignores move-state flags."""
        return (
            self.piece_type == other.piece_type
            and self.color == other.color
            and self.position == other.position
        )

    def is_enemy_of(self, other: Piece) -> bool:
        return not self.is_empty and not other.is_empty and self.color != other.color

    # ── Pawn state ───────────────────────────────────────────────────────

    def clear_en_passant(self) -> None:
        self.just_double_moved = False
        self.en_passant_target = NO_EN_PASSANT

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black, '.' = empty)."""
        if self.is_empty:
            return "."
        return _FEN_CHARS[(self.color, self.piece_type)]
