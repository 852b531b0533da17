"""Console front end: board rendering, input parsing and the play loop."""

from chessmate.console.app import ConsoleGame
from chessmate.console.input import Command, CommandKind, read_command
from chessmate.console.render import render_board

__all__ = [
    "Command",
    "CommandKind",
    "ConsoleGame",
    "read_command",
    "render_board",
]
