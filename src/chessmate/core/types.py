"""Square type and coordinate helpers.

Board layout (row-major, top to bottom as printed):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h

So ``a8`` is ``(0, 0)``, ``h1`` is ``(7, 7)`` and ``e2`` is ``(6, 4)``.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


class Square(NamedTuple):
    """Board coordinate as ``(row, col)``."""

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return is_valid_position(self.row, self.col)

    def __str__(self) -> str:
        return square_name(self) if self.is_valid else "--"


INVALID_SQUARE = Square(-1, -1)


def is_valid_position(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def parse_position(text: str) -> Square:
    """Parse a coordinate like ``'e2'``; return :data:`INVALID_SQUARE` if malformed.

    The file letter is case-insensitive, so ``'E2'`` parses like ``'e2'``.
    This is the one exception to "anything else is malformed": every other
    string that is not file a-h plus rank 1-8 yields the sentinel.
    """
    if len(text) != 2:
        return INVALID_SQUARE
    file_char = text[0].lower()
    rank_char = text[1]
    if file_char not in _FILES or rank_char not in _RANKS:
        return INVALID_SQUARE
    return Square(BOARD_SIZE - int(rank_char), _FILES.index(file_char))


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(6, 4)`` → ``'e2'``."""
    if not is_valid_position(sq.row, sq.col):
        raise ValueError(f"Square off the board: {tuple(sq)!r}")
    return _FILES[sq.col] + str(BOARD_SIZE - sq.row)


def all_squares() -> list[Square]:
    """All 64 squares in row-major order (a8 first, h1 last)."""
    return [Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
