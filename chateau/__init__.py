"""Bitboard chess board, FEN loading, attack sets and check analysis."""

__version__ = "0.1.0"
__all__ = ["attacks", "board", "movegen", "utils"]