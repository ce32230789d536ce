"""Move value object (coordinate representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessling.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable source → destination pair.

    Carries no side or promotion information: the mover is inferred from the
    piece on the source square and promotion is always to a queen.
    """

    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @classmethod
    def between(cls, from_sq: Square, to_sq: Square) -> Move:
        return cls(from_sq[0], from_sq[1], to_sq[0], to_sq[1])

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse a coordinate string such as ``"e2e4"``."""
        if len(text) != 4:
            raise ValueError(f"Invalid move string: {text!r}")
        return cls.between(parse_square(text[:2]), parse_square(text[2:]))

    @property
    def from_sq(self) -> Square:
        return (self.from_row, self.from_col)

    @property
    def to_sq(self) -> Square:
        return (self.to_row, self.to_col)

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
