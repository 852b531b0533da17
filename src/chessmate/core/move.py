"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmate.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: a piece travels from ``from_sq`` to ``to_sq``."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"
