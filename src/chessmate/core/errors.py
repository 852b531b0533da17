"""Exceptions raised by the core for programming errors.

Game-level problems (illegal moves, malformed coordinates, moving out of
turn) are reported as values, never raised.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for chessmate errors."""


class KingNotFoundError(ChessError, ValueError):
    """The board has no king of the requested color."""


class EmptySquareError(ChessError, ValueError):
    """A move was applied from a square with no piece on it."""


class OffBoardError(ChessError, ValueError):
    """A move names a square outside the 8x8 grid."""
