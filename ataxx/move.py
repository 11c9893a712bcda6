from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Playable side length, and the side of the padded grid that surrounds it
# with two rows/columns of sentinel cells on every edge.
SIDE = 7
EXTENDED_SIDE = SIDE + 4

_FIRST_COL = 2
_LAST_COL = _FIRST_COL + SIDE - 1


def col_letter(col_index: int) -> str:
    """Column letter for a padded column index (2..8 -> 'a'..'g')."""
    assert _FIRST_COL <= col_index <= _LAST_COL, f"column index out of range: {col_index}"
    return chr(ord("a") + col_index - _FIRST_COL)


def row_digit(square: int) -> str:
    """Row digit for a padded linear square index."""
    return chr(ord("0") + square // EXTENDED_SIDE - 1)


def square_index(col: str, row: str) -> int:
    """Padded linear index of the square at COL, ROW (e.g. 'a', '1')."""
    return (ord(row) - ord("1") + 2) * EXTENDED_SIDE + (ord(col) - ord("a") + 2)


def _in_grid(col: str, row: str) -> bool:
    return len(col) == 1 and len(row) == 1 and "a" <= col <= "g" and "1" <= row <= "7"


@dataclass(frozen=True)
class Move:
    """A pass, or a clone/jump from (col0, row0) to (col1, row1).

    Text form is ``-`` for a pass and ``c0r0-c1r1`` otherwise.
    """

    col0: Optional[str] = None
    row0: Optional[str] = None
    col1: Optional[str] = None
    row1: Optional[str] = None

    @classmethod
    def pass_move(cls) -> "Move":
        return PASS

    @classmethod
    def move(cls, col0: str, row0: str, col1: str, row1: str) -> "Move":
        if not (_in_grid(col0, row0) and _in_grid(col1, row1)):
            raise ValueError(f"coordinates off the board: {col0}{row0}-{col1}{row1}")
        return cls(col0, row0, col1, row1)

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse ``-`` or ``a7-b6`` style notation."""
        text = text.strip().lower()
        if text == "-":
            return PASS
        parts = text.split("-")
        if len(parts) != 2 or len(parts[0]) != 2 or len(parts[1]) != 2:
            raise ValueError(f"malformed move: {text!r}")
        (c0, r0), (c1, r1) = parts
        return cls.move(c0, r0, c1, r1)

    @property
    def is_pass(self) -> bool:
        return self.col0 is None

    @property
    def distance(self) -> int:
        if self.is_pass:
            return 0
        return max(abs(ord(self.col1) - ord(self.col0)), abs(ord(self.row1) - ord(self.row0)))

    @property
    def is_extend(self) -> bool:
        return self.distance == 1

    @property
    def is_jump(self) -> bool:
        return self.distance == 2

    @property
    def from_index(self) -> int:
        return square_index(self.col0, self.row0)

    @property
    def to_index(self) -> int:
        return square_index(self.col1, self.row1)

    def __str__(self) -> str:
        if self.is_pass:
            return "-"
        return f"{self.col0}{self.row0}-{self.col1}{self.row1}"


PASS = Move()
