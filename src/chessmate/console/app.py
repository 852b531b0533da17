"""Interactive console loop: read a command, hand it to the controller,
print what happened."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessmate.config import AppSettings
from chessmate.core.enums import Color
from chessmate.core.move import Move
from chessmate.core.types import Square
from chessmate.console.input import Command, CommandKind, read_command
from chessmate.console.render import color_name, render_board
from chessmate.game.controller import GameController
from chessmate.game.interfaces import GamePhase, MoveRejection

_LOGGER = logging.getLogger(__name__)

PROMPT = "Enter move (e.g., 'e2 e4') or 'quit': "
HELP_TEXT = """\
Commands:
  e2 e4 / e2e4   move a piece
  moves e2       list legal destinations of the piece on e2
  board          print the board again
  quit           leave the game"""


class ConsoleGame:
    """Text front end around a :class:`GameController`.

    ``input_fn`` / ``output_fn`` default to :func:`input` / :func:`print` and
    can be swapped for scripted play.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._settings = settings or AppSettings()
        self._controller = controller or GameController()
        self._input = input_fn
        self._output = output_fn

        events = self._controller.events
        events.on_check.append(self._on_check)
        events.on_game_over.append(self._on_game_over)
        events.on_rejected.append(self._on_rejected)

    @property
    def controller(self) -> GameController:
        return self._controller

    def run(self) -> int:
        """Play until checkmate, ``quit`` or end of input.  Returns an exit code."""
        if self._controller.state.phase == GamePhase.NOT_STARTED:
            self._controller.new_game()

        show_board = True
        while not self._controller.state.is_game_over:
            if show_board:
                self._print_board()
            try:
                line = self._input(PROMPT)
            except EOFError:
                _LOGGER.debug("Input closed, leaving game loop")
                break

            show_board = self._dispatch(read_command(line))
            if show_board is None:
                self._output("Thanks for playing!")
                return 0
        return 0

    # ── Command handling ─────────────────────────────────────────────────

    def _dispatch(self, command: Command) -> bool | None:
        """Handle *command*; ``None`` means quit, otherwise whether to redraw."""
        kind = command.kind
        if kind == CommandKind.QUIT:
            return None
        if kind == CommandKind.EMPTY:
            return False
        if kind == CommandKind.HELP:
            self._output(HELP_TEXT)
            return False
        if kind == CommandKind.BOARD:
            return True
        if kind == CommandKind.MOVES:
            assert command.square is not None
            self._show_moves(command.square)
            return False
        if kind == CommandKind.MOVE:
            assert command.move is not None
            return self._controller.submit_move(command.move)

        self._output("Invalid position format! Use 'e2' to 'e4'.")
        return False

    def _show_moves(self, square: Square) -> None:
        targets = self._controller.legal_destinations(square)
        if not targets:
            self._output(f"No legal moves from {square}.")
            return
        self._output(f"{square}: " + " ".join(str(sq) for sq in targets))

    def _print_board(self) -> None:
        position = self._controller.state.position
        self._output("\n" + render_board(position, self._settings))

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_check(self, color: Color) -> None:
        self._output("Check!")

    def _on_game_over(self, winner: Color) -> None:
        self._print_board()
        self._output(f"Checkmate! {color_name(winner)} wins!")

    def _on_rejected(self, move: Move, reason: MoveRejection) -> None:
        if reason == MoveRejection.EMPTY_SOURCE:
            self._output(f"No piece at {move.from_sq}!")
        elif reason == MoveRejection.WRONG_SIDE:
            side = color_name(self._controller.state.side_to_move)
            self._output(f"It's {side}'s turn!")
        elif reason == MoveRejection.GAME_OVER:
            self._output("The game is over.")
        elif reason == MoveRejection.INVALID_SQUARE:
            self._output("Invalid position format! Use 'e2' to 'e4'.")
        else:
            self._output("Illegal move! Try again.")
