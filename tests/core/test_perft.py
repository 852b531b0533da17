"""Perft counts from the starting position.

Reference values: https://www.chessprogramming.org/Perft_Results
(castling, en passant and promotion cannot occur within three plies).
"""

from chessmate.core.move_generator import MoveGenerator
from chessmate.core.position import Position


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth*, applying each legal move to a copy."""
    if depth == 0:
        return 1
    gen = MoveGenerator(position)
    nodes = 0
    for move in gen.legal_moves(position.side_to_move):
        child = position.copy()
        child.make_move(move)
        nodes += perft(child, depth - 1)
    return nodes


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(Position(), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(Position(), 2) == 400

    def test_depth_3(self) -> None:
        assert perft(Position(), 3) == 8_902

    def test_start_position_untouched(self) -> None:
        pos = Position()
        perft(pos, 2)
        assert pos == Position()
