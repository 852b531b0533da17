"""Plain-text board rendering."""

from __future__ import annotations

from chessmate.config import AppSettings
from chessmate.core.enums import Color
from chessmate.core.piece import Piece
from chessmate.core.position import Position
from chessmate.core.types import BOARD_SIZE

BANNER = "Chessboard by chessmate"
FILE_LABELS = "  a b c d e f g h"
EMPTY_CELL = "."


def color_name(color: Color) -> str:
    """'White' / 'Black'."""
    return color.name.capitalize()


def cell_text(piece: Piece | None, use_unicode: bool = False) -> str:
    if piece is None:
        return EMPTY_CELL
    return piece.symbol if use_unicode else str(piece)


def render_board(position: Position, settings: AppSettings | None = None) -> str:
    """Board as printed before each prompt.

    Reads the position only; rank 8 is printed first.
    """
    settings = settings or AppSettings()
    lines: list[str] = []
    if settings.show_banner:
        lines.append(BANNER)
    lines.append(f"Turn: {color_name(position.side_to_move)}")
    if settings.show_coordinates:
        lines.append(FILE_LABELS)

    for row_idx, row in enumerate(position.board.rows()):
        cells = " ".join(cell_text(p, settings.use_unicode) for p in row)
        if settings.show_coordinates:
            rank = BOARD_SIZE - row_idx
            lines.append(f"{rank} {cells} {rank}")
        else:
            lines.append(cells)

    if settings.show_coordinates:
        lines.append(FILE_LABELS)
    return "\n".join(lines)
