"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

import copy
from collections.abc import Iterator

from passant.core.enums import Color, PieceType
from passant.core.errors import BoardStateError
from passant.core.piece import Piece
from passant.core.types import BOARD_SIZE, Coordinate, check_coordinate

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-cell board; every cell always holds exactly one :class:`Piece`."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        # [column][row] -> occupant
        self._cells: list[list[Piece]] = [
            [Piece.empty(Coordinate(c, r)) for r in range(BOARD_SIZE)]
            for c in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def cell_at(self, coord: tuple[int, int]) -> Piece:
        column, row = check_coordinate(coord)
        return self._cells[column][row]

    def set_cell(self, coord: tuple[int, int], piece: Piece) -> None:
        """Install *piece* at *coord* and point its position there."""
        column, row = check_coordinate(coord)
        current = self._cells[column][row]
        if current is not piece:
            for other in self:
                if other is piece:
                    raise BoardStateError(
                        f"Piece already placed on {other.position}; move it instead"
                    )
        piece.position = Coordinate(column, row)
        self._cells[column][row] = piece

    __getitem__ = cell_at
    __setitem__ = set_cell

    def vacate(self, coord: tuple[int, int]) -> Piece:
        """Replace the occupant with a fresh empty cell and return the old one."""
        target = check_coordinate(coord)
        previous = self.cell_at(target)
        self._cells[target.column][target.row] = Piece.empty(target)
        return previous

    def is_empty(self, coord: tuple[int, int]) -> bool:
        return self.cell_at(coord).is_empty

    def reset_double_move_flags(self) -> None:
        """Close the en passant window for every pawn on the board."""
        for pawn in self.pawns():
            pawn.clear_en_passant()

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        for column in self._cells:
            yield from column

    def occupied(self) -> Iterator[Piece]:
        return (p for p in self if not p.is_empty)

    def pieces(self, color: Color) -> list[Piece]:
        return [p for p in self.occupied() if p.color == color]

    def pawns(self) -> Iterator[Piece]:
        return (p for p in self if p.is_pawn)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = copy.deepcopy(self._cells)
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White on rows 0-1."""
        b = cls()
        for c in range(BOARD_SIZE):
            b[(c, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(c, 6)] = Piece(Color.BLACK, PieceType.PAWN)
        for c, pt in enumerate(_BACK_RANK):
            b[(c, 0)] = Piece(Color.WHITE, pt)
            b[(c, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = [str(self._cells[c][row]) for c in range(BOARD_SIZE)]
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
