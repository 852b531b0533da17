"""Game state machine — tracks phase transitions and the last outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessmate.core.enums import Color
from chessmate.core.position import Position
from chessmate.core.rules import ONGOING, Outcome
from chessmate.game.interfaces import GamePhase

if TYPE_CHECKING:
    from chessmate.core.move import Move

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Manages game lifecycle: position, phase and outcome.

    This is a pure data/logic class — no I/O.  No move history is kept.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    outcome: Outcome = field(default=ONGOING, init=False)
    ply_count: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game."""
        self.position = position if position is not None else Position()
        self.phase = GamePhase.AWAITING_MOVE
        self.outcome = ONGOING
        self.ply_count = 0

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> Outcome:
        """Apply a validated move and return the resulting outcome.

        Caller is responsible for legality check.
        """
        self.outcome = self.position.make_move(move)
        self.ply_count += 1
        if self.outcome.is_terminal:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info(
                "Checkmate after %d plies, %s wins", self.ply_count, self.winner
            )
        return self.outcome

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        return self.outcome.winner
