from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from .move import EXTENDED_SIDE, SIDE, Move, square_index

# Consecutive jumps (no intervening clone) after which the game ends.
JUMP_LIMIT = 25

_NEIGHBOR_OFFSETS = [
    dr * EXTENDED_SIDE + dc
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if (dr, dc) != (0, 0)
]
_REACH_OFFSETS = [
    dr * EXTENDED_SIDE + dc
    for dr in range(-2, 3)
    for dc in range(-2, 3)
    if (dr, dc) != (0, 0)
]


class IllegalMoveError(ValueError):
    pass


class PieceColor(Enum):
    EMPTY = "-"
    RED = "r"
    BLUE = "b"
    BLOCKED = "X"

    def opposite(self) -> "PieceColor":
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    @property
    def is_piece(self) -> bool:
        return self in (PieceColor.RED, PieceColor.BLUE)

    def display_name(self) -> str:
        return self.name.capitalize()


_PLAYABLE_SQUARES = [
    square_index(col, row)
    for row in "1234567"
    for col in "abcdefg"
]


class Board:
    """Ataxx position on a padded grid.

    Cells outside the 7x7 playing area hold ``PieceColor.BLOCKED`` so that
    neighbourhood scans never need bounds checks. Moves are applied in place;
    callers that explore alternatives work on ``copy()``.
    """

    def __init__(self) -> None:
        self._cells: List[PieceColor] = [PieceColor.BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        self._whose_move = PieceColor.RED
        self._num_jumps = 0
        self._counts = {PieceColor.RED: 0, PieceColor.BLUE: 0}
        self.clear()

    def clear(self) -> None:
        """Reset to the starting position with no blocks."""
        for sq in _PLAYABLE_SQUARES:
            self._cells[sq] = PieceColor.EMPTY
        self._counts = {PieceColor.RED: 0, PieceColor.BLUE: 0}
        self._whose_move = PieceColor.RED
        self._num_jumps = 0
        self._put(PieceColor.RED, square_index("a", "7"))
        self._put(PieceColor.RED, square_index("g", "1"))
        self._put(PieceColor.BLUE, square_index("a", "1"))
        self._put(PieceColor.BLUE, square_index("g", "7"))

    @classmethod
    def from_layout(
        cls,
        rows: Sequence[str],
        whose_move: PieceColor = PieceColor.RED,
        num_jumps: int = 0,
    ) -> "Board":
        """Build a position from seven text rows, rank 7 first.

        Cells are ``r`` (red), ``b`` (blue), ``-`` (empty) or ``X`` (blocked);
        whitespace inside a row is ignored.
        """
        rows = ["".join(r.split()) for r in rows]
        if len(rows) != SIDE or any(len(r) != SIDE for r in rows):
            raise ValueError(f"layout must be {SIDE} rows of {SIDE} cells")
        board = cls()
        board._counts = {PieceColor.RED: 0, PieceColor.BLUE: 0}
        for k, text in enumerate(rows):
            row = str(SIDE - k)
            for j, ch in enumerate(text):
                col = chr(ord("a") + j)
                try:
                    color = PieceColor(ch)
                except ValueError:
                    raise ValueError(f"unknown cell {ch!r} at {col}{row}") from None
                board._cells[square_index(col, row)] = PieceColor.EMPTY
                board._put(color, square_index(col, row))
        board._whose_move = whose_move
        board._num_jumps = num_jumps
        return board

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other._cells = list(self._cells)
        other._whose_move = self._whose_move
        other._num_jumps = self._num_jumps
        other._counts = dict(self._counts)
        return other

    # -- queries -----------------------------------------------------------

    def get(self, square: int) -> PieceColor:
        return self._cells[square]

    def get_at(self, col: str, row: str) -> PieceColor:
        return self._cells[square_index(col, row)]

    @property
    def whose_move(self) -> PieceColor:
        return self._whose_move

    @property
    def num_jumps(self) -> int:
        return self._num_jumps

    def num_pieces(self, color: PieceColor) -> int:
        return self._counts.get(color, 0)

    def red_pieces(self) -> int:
        return self._counts[PieceColor.RED]

    def blue_pieces(self) -> int:
        return self._counts[PieceColor.BLUE]

    def can_move(self, color: PieceColor) -> bool:
        """True if COLOR has at least one non-pass move."""
        cells = self._cells
        for sq in _PLAYABLE_SQUARES:
            if cells[sq] is not color:
                continue
            for off in _REACH_OFFSETS:
                if cells[sq + off] is PieceColor.EMPTY:
                    return True
        return False

    def legal_move(self, move: Move) -> bool:
        if move.is_pass:
            return not self.can_move(self._whose_move)
        if move.distance not in (1, 2):
            return False
        return (
            self._cells[move.from_index] is self._whose_move
            and self._cells[move.to_index] is PieceColor.EMPTY
        )

    def get_winner(self) -> Optional[PieceColor]:
        """Winning color, ``PieceColor.EMPTY`` for a tie, None while undecided."""
        if self._num_jumps < JUMP_LIMIT and (
            self.can_move(PieceColor.RED) or self.can_move(PieceColor.BLUE)
        ):
            return None
        red, blue = self.red_pieces(), self.blue_pieces()
        if red > blue:
            return PieceColor.RED
        if blue > red:
            return PieceColor.BLUE
        return PieceColor.EMPTY

    # -- mutation ----------------------------------------------------------

    def make_move(self, move: Move) -> None:
        """Apply MOVE for the side to move. MOVE must be legal."""
        if not self.legal_move(move):
            raise IllegalMoveError(f"illegal move: {move}")
        mover = self._whose_move
        if not move.is_pass:
            dest = move.to_index
            if move.is_jump:
                self._remove(move.from_index)
                self._num_jumps += 1
            else:
                self._num_jumps = 0
            self._put(mover, dest)
            enemy = mover.opposite()
            for off in _NEIGHBOR_OFFSETS:
                if self._cells[dest + off] is enemy:
                    self._remove(dest + off)
                    self._put(mover, dest + off)
        self._whose_move = mover.opposite()

    def set_block(self, col: str, row: str) -> None:
        """Block the square at COL, ROW and its mirror images."""
        mirror_col = chr(ord("a") + ord("g") - ord(col))
        mirror_row = chr(ord("1") + ord("7") - ord(row))
        for c, r in ((col, row), (mirror_col, row), (col, mirror_row), (mirror_col, mirror_row)):
            sq = square_index(c, r)
            if self._cells[sq] is not PieceColor.EMPTY:
                raise IllegalMoveError(f"cannot block occupied square {c}{r}")
        for c, r in ((col, row), (mirror_col, row), (col, mirror_row), (mirror_col, mirror_row)):
            self._cells[square_index(c, r)] = PieceColor.BLOCKED

    def _put(self, color: PieceColor, square: int) -> None:
        self._cells[square] = color
        if color.is_piece:
            self._counts[color] += 1

    def _remove(self, square: int) -> None:
        color = self._cells[square]
        if color.is_piece:
            self._counts[color] -= 1
        self._cells[square] = PieceColor.EMPTY

    def rows(self) -> List[str]:
        """Seven text rows, rank 7 first, in ``from_layout`` notation."""
        return [
            "".join(self.get_at(col, row).value for col in "abcdefg")
            for row in "7654321"
        ]

    def __str__(self) -> str:
        return "\n".join(" ".join(r) for r in self.rows())
