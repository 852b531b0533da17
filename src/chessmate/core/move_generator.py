"""Pseudo-legal move generation, attack detection and the legality filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmate.core.enums import Color, PieceType
from chessmate.core.errors import KingNotFoundError
from chessmate.core.move import Move
from chessmate.core.types import Square, is_valid_position

if TYPE_CHECKING:
    from chessmate.core.position import Position


# (d_row, d_col) pairs.  Enumeration order fixes the order of generated moves.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# White advances toward row 0, Black toward row 7.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


class MoveGenerator:
    """Move generation and legality checks for a given :class:`Position`.

    :meth:`is_legal_move` tries the move on the live board and puts both
    squares back before returning, so the position is unchanged afterwards.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Pseudo-legal generation -------------------------------------------

    def pseudo_legal_destinations(self, sq: Square) -> list[Square]:
        """Squares the piece on *sq* can reach, ignoring king safety."""
        if not is_valid_position(*sq):
            return []
        sq = Square(*sq)
        piece = self._board[sq]
        if piece is None:
            return []

        destinations: list[Square] = []
        if piece.piece_type == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, destinations)
        elif piece.piece_type == PieceType.KNIGHT:
            self._gen_step(sq, piece.color, KNIGHT_OFFSETS, destinations)
        elif piece.piece_type == PieceType.KING:
            self._gen_step(sq, piece.color, KING_OFFSETS, destinations)
        else:
            self._gen_sliding(
                sq, piece.color, _SLIDER_DIRS[piece.piece_type], destinations
            )
        return destinations

    def pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves for *color* (may leave own king in check)."""
        return [
            Move(sq, to_sq)
            for sq in self._board.pieces(color)
            for to_sq in self.pseudo_legal_destinations(sq)
        ]

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, target: Square, by_color: Color) -> bool:
        """Is *target* a pseudo-legal destination of any piece of *by_color*?"""
        if not is_valid_position(*target):
            return False
        return any(
            target in self.pseudo_legal_destinations(sq)
            for sq in self._board.pieces(by_color)
        )

    def find_king(self, color: Color) -> Square:
        """Square of *color*'s king."""
        for sq, piece in self._board.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        raise KingNotFoundError(f"No {color.name} king on board")

    def is_king_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return self.is_square_attacked(self.find_king(color), color.opposite)

    # -- Legality -----------------------------------------------------------

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Pseudo-legal and does not leave the mover's own king in check."""
        if not (is_valid_position(*from_sq) and is_valid_position(*to_sq)):
            return False
        if to_sq not in self.pseudo_legal_destinations(from_sq):
            return False

        board = self._board
        moving = board[from_sq]
        assert moving is not None
        captured = board[to_sq]

        board[to_sq] = moving
        board[from_sq] = None
        try:
            return not self.is_king_in_check(moving.color)
        finally:
            board[from_sq] = moving
            board[to_sq] = captured

    def has_legal_moves(self, color: Color) -> bool:
        """Whether *color* has at least one legal move."""
        for sq in self._board.pieces(color):
            for to_sq in self.pseudo_legal_destinations(sq):
                if self.is_legal_move(sq, to_sq):
                    return True
        return False

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Legal destinations of the piece on *sq*."""
        return [
            to_sq
            for to_sq in self.pseudo_legal_destinations(sq)
            if self.is_legal_move(sq, to_sq)
        ]

    def legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*."""
        return [
            move
            for move in self.pseudo_legal_moves(color)
            if self.is_legal_move(move.from_sq, move.to_sq)
        ]

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, out: list[Square]) -> None:
        board = self._board
        row, col = sq
        direction = _PAWN_DIRECTION[color]
        step_row = row + direction

        one_step = Square(step_row, col)
        if is_valid_position(*one_step) and board.is_empty(one_step):
            out.append(one_step)
            if row == _PAWN_START_ROW[color]:
                two_step = Square(row + 2 * direction, col)
                if board.is_empty(two_step):
                    out.append(two_step)

        # Captures always land on the single-step row.
        for d_col in (-1, 1):
            cap_sq = Square(step_row, col + d_col)
            if is_valid_position(*cap_sq) and board.are_different_colors(sq, cap_sq):
                out.append(cap_sq)

    def _gen_step(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        out: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = Square(sq.row + d_row, sq.col + d_col)
            if not is_valid_position(*to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                out.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        out: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            row, col = sq.row + d_row, sq.col + d_col
            while is_valid_position(row, col):
                to_sq = Square(row, col)
                target = board[to_sq]
                if target is None:
                    out.append(to_sq)
                    row += d_row
                    col += d_col
                    continue
                if target.color != color:
                    out.append(to_sq)
                break
