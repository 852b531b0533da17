"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessmate.core import Move, MoveGenerator, Position, parse_position

    pos = Position()
    gen = MoveGenerator(pos)
    if gen.is_legal_move(parse_position("e2"), parse_position("e4")):
        outcome = pos.make_move(Move(parse_position("e2"), parse_position("e4")))
"""

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameStatus, PieceType
from chessmate.core.errors import (
    ChessError,
    EmptySquareError,
    KingNotFoundError,
    OffBoardError,
)
from chessmate.core.move import Move
from chessmate.core.move_generator import MoveGenerator
from chessmate.core.piece import Piece
from chessmate.core.position import Position
from chessmate.core.rules import Outcome, Rules
from chessmate.core.types import (
    INVALID_SQUARE,
    Square,
    all_squares,
    is_valid_position,
    parse_position,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "INVALID_SQUARE",
    "Square",
    "all_squares",
    "is_valid_position",
    "parse_position",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Outcome",
    "Piece",
    "Position",
    "Rules",
    # Errors
    "ChessError",
    "EmptySquareError",
    "KingNotFoundError",
    "OffBoardError",
]
