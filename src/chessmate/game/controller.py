"""GameController — the central orchestrator of a chess game.

Coordinates: GameState, MoveGenerator.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessmate.core.enums import Color, GameStatus
from chessmate.core.move import Move
from chessmate.core.move_generator import MoveGenerator
from chessmate.core.position import Position
from chessmate.core.types import Square, is_valid_position
from chessmate.game.interfaces import IGameController, MoveRejection
from chessmate.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

CheckCallback = Callable[[Color], None]  # side in check
GameOverCallback = Callable[[Color], None]  # winner
RejectedCallback = Callable[[Move, MoveRejection], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a game: validates moves, applies them, notifies listeners.

    Methods are called synchronously from a single thread, once per turn.
    """

    __slots__ = ("_state", "_last_rejection", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._last_rejection: MoveRejection | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def last_rejection(self) -> MoveRejection | None:
        """Reason the most recent :meth:`submit_move` was refused, if it was."""
        return self._last_rejection

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, position: Position | None = None) -> None:
        self._state = GameState()
        self._state.setup(position)
        self._last_rejection = None

    def submit_move(self, move: Move) -> bool:
        rejection = self._validate(move)
        if rejection is not None:
            self._last_rejection = rejection
            _LOGGER.info("Rejected %s: %s", move, rejection.name)
            self._emit_rejected(move, rejection)
            return False
        self._last_rejection = None

        outcome = self._state.apply_move(move)

        if outcome.status == GameStatus.CHECKMATE:
            assert outcome.winner is not None
            self._emit_check(self._state.side_to_move)
            self._emit_game_over(outcome.winner)
        elif outcome.status == GameStatus.CHECK:
            self._emit_check(self._state.side_to_move)
        return True

    def legal_destinations(self, square: Square) -> list[Square]:
        """Legal destinations from *square*; empty unless it holds a piece of
        the side to move."""
        if self._state.is_game_over:
            return []
        if self._state.position.board.color_at(square) != self._state.side_to_move:
            return []
        return MoveGenerator(self._state.position).legal_destinations(square)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _validate(self, move: Move) -> MoveRejection | None:
        if self._state.is_game_over:
            return MoveRejection.GAME_OVER
        if not (is_valid_position(*move.from_sq) and is_valid_position(*move.to_sq)):
            return MoveRejection.INVALID_SQUARE

        color = self._state.position.board.color_at(move.from_sq)
        if color is None:
            return MoveRejection.EMPTY_SOURCE
        if color != self._state.side_to_move:
            return MoveRejection.WRONG_SIDE

        gen = MoveGenerator(self._state.position)
        if not gen.is_legal_move(move.from_sq, move.to_sq):
            return MoveRejection.ILLEGAL_MOVE
        return None

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_game_over(self, winner: Color) -> None:
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_rejected(self, move: Move, reason: MoveRejection) -> None:
        for cb in self.events.on_rejected:
            cb(move, reason)
