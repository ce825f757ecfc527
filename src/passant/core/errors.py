"""Exceptions raised by the chess engine."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every engine error."""


class OutOfRangeError(ChessError, IndexError):
    """Coordinate lies outside the 8x8 board."""


class InvalidSourceStateError(ChessError):
    """A move was requested from a cell that holds no piece."""


class UnresolvedPromotionError(ChessError):
    """A move was attempted while a promotion is still waiting for a choice."""


class PromotionError(ChessError):
    """A promotion could not be carried out."""


class BoardStateError(ChessError):
    """An operation would break the one-piece-per-cell invariant."""


class LedgerError(ChessError):
    """Invalid record offered to a material ledger."""
