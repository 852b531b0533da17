"""Position — game state (board + side to move) with move application."""

from __future__ import annotations

import logging

from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.core.errors import EmptySquareError, OffBoardError
from chessmate.core.move import Move
from chessmate.core.rules import Outcome, Rules
from chessmate.core.types import is_valid_position

_LOGGER = logging.getLogger(__name__)


class Position:
    """Board plus side to move.

    This is the only mutable state the core works on; it is handed to every
    :class:`~chessmate.core.move_generator.MoveGenerator` and
    :class:`~chessmate.core.rules.Rules` call.  No move history is kept.
    """

    __slots__ = ("board", "side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move

    def make_move(self, move: Move) -> Outcome:
        """Apply an already-validated *move*, flip the turn and classify.

        Legality is the caller's responsibility (see
        :meth:`MoveGenerator.is_legal_move`).  The returned outcome describes
        the new side to move: ongoing, in check, or checkmated.
        """
        if not (is_valid_position(*move.from_sq) and is_valid_position(*move.to_sq)):
            raise OffBoardError(f"Move leaves the board: {move}")
        piece = self.board[move.from_sq]
        if piece is None:
            raise EmptySquareError(f"No piece on {move.from_sq}")

        self.board[move.to_sq] = piece
        self.board[move.from_sq] = None
        self.side_to_move = self.side_to_move.opposite
        _LOGGER.debug("Applied %s (%s %s)", move, piece.color, piece.piece_type.name)

        outcome = Rules.evaluate(self)
        _LOGGER.debug(
            "Position status for %s: %s", self.side_to_move, outcome.status.name
        )
        return outcome

    def copy(self) -> Position:
        return Position(board=self.board.copy(), side_to_move=self.side_to_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self.side_to_move == other.side_to_move

    def __repr__(self) -> str:
        return f"{self.board!r}\nTurn: {self.side_to_move}"
