"""Passant: a chess rules engine for board state, en passant and promotion."""

__version__ = "0.1.0"
