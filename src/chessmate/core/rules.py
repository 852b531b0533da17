"""High-level chess rules: check and checkmate classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessmate.core.enums import Color, GameStatus
from chessmate.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessmate.core.position import Position


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of evaluating a position for the side to move.

    ``winner`` is set only when ``status`` is :attr:`GameStatus.CHECKMATE`.
    """

    status: GameStatus
    winner: Color | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status == GameStatus.CHECKMATE


ONGOING = Outcome(GameStatus.ONGOING)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Stalemate is not evaluated: a side with no legal moves that is not in
    # check is reported as ONGOING.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_king_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.evaluate(position).is_terminal

    @staticmethod
    def evaluate(position: Position) -> Outcome:
        """Classify the position from the side to move's point of view."""
        gen = MoveGenerator(position)
        side = position.side_to_move
        if not gen.is_king_in_check(side):
            return ONGOING
        if gen.has_legal_moves(side):
            return Outcome(GameStatus.CHECK)
        return Outcome(GameStatus.CHECKMATE, winner=side.opposite)
