"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import BOARD_SIZE, Square, is_valid_position

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of cells, each ``None`` or a :class:`Piece`.

    Row 0 is rank 8 (Black's back rank in the starting layout), row 7 is
    rank 1.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def color_at(self, sq: Square) -> Color | None:
        """Color of the occupant of *sq*, or ``None`` if empty or off-board."""
        if not is_valid_position(*sq):
            return None
        piece = self[sq]
        return piece.color if piece is not None else None

    def are_different_colors(self, a: Square, b: Square) -> bool:
        """Both squares are occupied and their pieces belong to opposite sides."""
        color_a = self.color_at(a)
        color_b = self.color_at(b)
        if color_a is None or color_b is None:
            return False
        return color_a != color_b

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` pairs in row-major order."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._grid[row][col]
                if piece is not None:
                    yield Square(row, col), piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, row-major."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def count(self, color: Color, piece_type: PieceType | None = None) -> int:
        return sum(
            1
            for _, piece in self.occupied()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        )

    def rows(self) -> list[tuple[Piece | None, ...]]:
        """Read-only snapshot of the grid, top row first."""
        return [tuple(row) for row in self._grid]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        """Build a board from eight strings of piece letters and ``.``.

        ``rows[0]`` is rank 8.  Handy for setting up test positions::

            Board.from_rows([
                "....k...",
                "........",
                ...
            ])
        """
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Expected 8 rows of 8 characters")
        b = cls()
        for row, text in enumerate(rows):
            for col, char in enumerate(text):
                if char != ".":
                    b[Square(row, col)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
