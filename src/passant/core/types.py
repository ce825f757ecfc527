"""Coordinate type and square helpers.

Board layout is column-major, ``(column, row)``:
    a1=(0, 0), b1=(1, 0), ..., h1=(7, 0)
    ...
    a8=(0, 7), ..., h8=(7, 7)

White starts on rows 0-1 and advances towards row 7.

The packed scalar form is ``column * 10 + row`` (a1=0, h8=77); it is
collision-free for the valid range and is what pawns store as their
en passant target.
"""

from __future__ import annotations

from typing import NamedTuple

from passant.core.errors import OutOfRangeError

BOARD_SIZE = 8
NO_EN_PASSANT = -1


class Coordinate(NamedTuple):
    """A board cell address."""

    column: int
    row: int

    def __str__(self) -> str:
        return square_name(self)


def is_valid_coordinate(column: int, row: int) -> bool:
    """Check whether the pair addresses a cell on the board."""
    return 0 <= column < BOARD_SIZE and 0 <= row < BOARD_SIZE


def make_coordinate(column: int, row: int) -> Coordinate:
    """Create a coordinate, rejecting anything off the board."""
    if not all(type(v) is int for v in (column, row)):
        raise OutOfRangeError(f"Coordinate must be integers: ({column!r}, {row!r})")
    if not is_valid_coordinate(column, row):
        raise OutOfRangeError(f"Coordinate out of range: ({column}, {row})")
    return Coordinate(column, row)


def check_coordinate(coord: tuple[int, int]) -> Coordinate:
    """Validate an arbitrary ``(column, row)`` pair and normalise it."""
    try:
        column, row = coord
    except (TypeError, ValueError):
        raise OutOfRangeError(f"Not a board coordinate: {coord!r}") from None
    return make_coordinate(column, row)


def pack(coord: tuple[int, int]) -> int:
    """Packed scalar form, e.g. (1, 2) → 12."""
    column, row = check_coordinate(coord)
    return column * 10 + row


def unpack(value: int) -> Coordinate:
    """Inverse of :func:`pack`, e.g. 12 → (1, 2)."""
    if value < 0:
        raise OutOfRangeError(f"Invalid packed coordinate: {value}")
    return make_coordinate(value // 10, value % 10)


def square_name(coord: tuple[int, int]) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (7, 7) → 'h8'."""
    column, row = coord
    return chr(ord("a") + column) + str(row + 1)


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → (4, 3)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(ord(name[0]) - ord("a"), int(name[1]) - 1)


def all_coordinates() -> list[Coordinate]:
    """Every cell, column by column."""
    return [Coordinate(c, r) for c in range(BOARD_SIZE) for r in range(BOARD_SIZE)]
