"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.core.position import Position

PositionFactory = Callable[..., Position]


@pytest.fixture
def start_position() -> Position:
    """Standard starting layout, White to move."""
    return Position()


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a position from eight rank strings (rank 8 first)."""

    def _make(rows: list[str], side_to_move: Color = Color.WHITE) -> Position:
        return Position(Board.from_rows(rows), side_to_move)

    return _make


@pytest.fixture
def back_rank_mate(make_position: PositionFactory) -> Position:
    """White king g1 behind its own pawns, black rook on d1, White to move."""
    return make_position(
        [
            "......k.",
            "........",
            "........",
            "........",
            "........",
            "........",
            ".....PPP",
            "...r..K.",
        ]
    )
