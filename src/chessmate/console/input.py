"""Parsing of console command lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from chessmate.core.move import Move
from chessmate.core.types import INVALID_SQUARE, Square, parse_position

QUIT_WORD = "quit"


class CommandKind(IntEnum):
    QUIT = auto()
    HELP = auto()
    BOARD = auto()
    MOVES = auto()
    MOVE = auto()
    INVALID = auto()
    EMPTY = auto()


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed line of user input.

    ``move`` is set for :attr:`CommandKind.MOVE`, ``square`` for
    :attr:`CommandKind.MOVES`.
    """

    kind: CommandKind
    move: Move | None = None
    square: Square | None = None


def read_command(line: str) -> Command:
    """Interpret one input line.

    Accepted forms: ``quit``, ``help``, ``board``, ``moves e2``, ``e2 e4``
    and ``e2e4``.  Anything that does not parse is :attr:`CommandKind.INVALID`.
    """
    tokens = line.split()
    if not tokens:
        return Command(CommandKind.EMPTY)

    word = tokens[0].lower()
    if word == QUIT_WORD:
        return Command(CommandKind.QUIT)
    if word in ("help", "?"):
        return Command(CommandKind.HELP)
    if word == "board":
        return Command(CommandKind.BOARD)
    if word == "moves":
        if len(tokens) != 2:
            return Command(CommandKind.INVALID)
        sq = parse_position(tokens[1])
        if sq == INVALID_SQUARE:
            return Command(CommandKind.INVALID)
        return Command(CommandKind.MOVES, square=sq)

    if len(tokens) == 1 and len(tokens[0]) == 4:
        tokens = [tokens[0][:2], tokens[0][2:]]
    if len(tokens) != 2:
        return Command(CommandKind.INVALID)

    from_sq = parse_position(tokens[0])
    to_sq = parse_position(tokens[1])
    if from_sq == INVALID_SQUARE or to_sq == INVALID_SQUARE:
        return Command(CommandKind.INVALID)
    return Command(CommandKind.MOVE, move=Move(from_sq, to_sq))
