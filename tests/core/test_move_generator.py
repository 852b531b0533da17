"""Tests for pseudo-legal move generation."""

from chessmate.core.enums import Color
from chessmate.core.move import Move
from chessmate.core.move_generator import MoveGenerator
from chessmate.core.position import Position
from chessmate.core.types import INVALID_SQUARE, parse_position

EMPTY = ["........"] * 8


def _names(squares) -> list[str]:
    return [str(sq) for sq in squares]


def _dests(pos: Position, name: str) -> list[str]:
    return _names(MoveGenerator(pos).pseudo_legal_destinations(parse_position(name)))


def _with(rows: list[str], name: str, char: str) -> list[str]:
    """Copy of *rows* with *char* placed on square *name*."""
    sq = parse_position(name)
    out = list(rows)
    row = out[sq.row]
    out[sq.row] = row[: sq.col] + char + row[sq.col + 1 :]
    return out


class TestPawn:
    def test_white_start_two_options(self, start_position: Position) -> None:
        assert _dests(start_position, "e2") == ["e3", "e4"]

    def test_black_start_moves_down_the_board(self, start_position: Position) -> None:
        assert _dests(start_position, "e7") == ["e6", "e5"]

    def test_two_step_needs_both_squares_empty(self, make_position) -> None:
        rows = _with(_with(EMPTY, "e2", "P"), "e3", "n")
        assert _dests(make_position(rows), "e2") == []
        rows = _with(_with(EMPTY, "e2", "P"), "e4", "n")
        assert _dests(make_position(rows), "e2") == ["e3"]

    def test_black_two_step_needs_both_squares_empty(self, make_position) -> None:
        rows = _with(_with(EMPTY, "e7", "p"), "e6", "N")
        assert _dests(make_position(rows, Color.BLACK), "e7") == []
        rows = _with(_with(EMPTY, "e7", "p"), "e5", "N")
        assert _dests(make_position(rows, Color.BLACK), "e7") == ["e6"]

    def test_black_capture_uses_single_step_row(self, make_position) -> None:
        rows = _with(_with(_with(EMPTY, "e7", "p"), "d5", "N"), "f6", "N")
        assert _dests(make_position(rows, Color.BLACK), "e7") == ["e6", "e5", "f6"]

    def test_two_step_only_from_start_rank(self, make_position) -> None:
        rows = _with(EMPTY, "e3", "P")
        assert _dests(make_position(rows), "e3") == ["e4"]

    def test_diagonal_capture_only_on_enemy(self, make_position) -> None:
        rows = _with(_with(_with(EMPTY, "e4", "P"), "d5", "p"), "f5", "N")
        assert _dests(make_position(rows), "e4") == ["e5", "d5"]

    def test_capture_uses_single_step_row_after_two_step(self, make_position) -> None:
        # Pieces two rows ahead on the diagonal must never be capturable,
        # even though the double advance was generated.
        rows = _with(EMPTY, "e2", "P")
        rows = _with(rows, "d4", "n")
        rows = _with(rows, "f3", "n")
        assert _dests(make_position(rows), "e2") == ["e3", "e4", "f3"]

    def test_capture_when_forward_blocked(self, make_position) -> None:
        rows = _with(_with(_with(EMPTY, "e7", "p"), "e6", "P"), "d6", "B")
        assert _dests(make_position(rows, Color.BLACK), "e7") == ["d6"]

    def test_pawn_on_last_row_has_no_moves(self, make_position) -> None:
        rows = _with(EMPTY, "a8", "P")
        assert _dests(make_position(rows), "a8") == []


class TestKnight:
    def test_initial_b1(self, start_position: Position) -> None:
        assert set(_dests(start_position, "b1")) == {"a3", "c3"}
        assert _dests(start_position, "b1") == ["c3", "a3"]

    def test_center_order(self, make_position) -> None:
        rows = _with(EMPTY, "d4", "N")
        assert _dests(make_position(rows), "d4") == [
            "e2", "c2", "e6", "c6", "f3", "b3", "f5", "b5"
        ]

    def test_blocked_by_own_pieces(self, make_position) -> None:
        rows = _with(_with(_with(EMPTY, "d4", "N"), "e6", "P"), "c6", "p")
        dests = _dests(make_position(rows), "d4")
        assert "e6" not in dests
        assert "c6" in dests
        assert len(dests) == 7

    def test_corner(self, make_position) -> None:
        rows = _with(EMPTY, "a1", "n")
        assert set(_dests(make_position(rows), "a1")) == {"b3", "c2"}


class TestKing:
    def test_boxed_in_at_start(self, start_position: Position) -> None:
        assert _dests(start_position, "e1") == []

    def test_open_board(self, make_position) -> None:
        rows = _with(EMPTY, "e4", "K")
        assert _dests(make_position(rows), "e4") == [
            "e3", "e5", "f4", "d4", "f3", "d3", "f5", "d5"
        ]

    def test_may_step_next_to_enemy_king(self, make_position) -> None:
        # Pseudo-legal only: king safety is the legality filter's job.
        rows = _with(_with(EMPTY, "e4", "K"), "e6", "k")
        assert "e5" in _dests(make_position(rows), "e4")


class TestSliders:
    def test_rook_stops_at_blockers(self, make_position) -> None:
        rows = _with(_with(_with(EMPTY, "a1", "R"), "a3", "P"), "c1", "p")
        assert _dests(make_position(rows), "a1") == ["a2", "b1", "c1"]

    def test_bishop_rays(self, make_position) -> None:
        rows = _with(_with(EMPTY, "c1", "B"), "e3", "p")
        assert _dests(make_position(rows), "c1") == ["d2", "e3", "b2", "a3"]

    def test_queen_combines_bishop_and_rook(self, make_position) -> None:
        rows = _with(EMPTY, "d4", "Q")
        dests = _dests(make_position(rows), "d4")
        assert len(dests) == 27
        assert len(set(dests)) == 27

    def test_initial_sliders_are_blocked(self, start_position: Position) -> None:
        for name in ("a1", "c1", "d1", "f8", "h8"):
            assert _dests(start_position, name) == []


class TestGeneratorEdges:
    def test_empty_square(self, start_position: Position) -> None:
        assert _dests(start_position, "e4") == []

    def test_invalid_square(self, start_position: Position) -> None:
        gen = MoveGenerator(start_position)
        assert gen.pseudo_legal_destinations(INVALID_SQUARE) == []

    def test_accepts_plain_tuples(self, start_position: Position) -> None:
        gen = MoveGenerator(start_position)
        assert _names(gen.pseudo_legal_destinations((7, 1))) == ["c3", "a3"]

    def test_deterministic_order(self, start_position: Position) -> None:
        gen = MoveGenerator(start_position)
        assert gen.pseudo_legal_moves(Color.WHITE) == gen.pseudo_legal_moves(Color.WHITE)

    def test_initial_move_count(self, start_position: Position) -> None:
        gen = MoveGenerator(start_position)
        assert len(gen.pseudo_legal_moves(Color.WHITE)) == 20
        assert len(gen.pseudo_legal_moves(Color.BLACK)) == 20
        assert Move(parse_position("g1"), parse_position("f3")) in gen.pseudo_legal_moves(
            Color.WHITE
        )
