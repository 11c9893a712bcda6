from __future__ import annotations

from typing import List

from .board import Board, PieceColor
from .move import EXTENDED_SIDE, Move, col_letter, row_digit


def possible_moves(board: Board) -> List[Move]:
    """Candidate moves for the side to move, pass first.

    Every empty cell in the 5x5 neighbourhood of each of the mover's pieces
    yields a move, sources in increasing square order and destinations in
    row-major order. Candidates are not checked for legality beyond the
    destination being empty.
    """
    moves: List[Move] = [Move.pass_move()]
    mover = board.whose_move
    for sq in range(EXTENDED_SIDE * EXTENDED_SIDE):
        if board.get(sq) is not mover:
            continue
        c0, r0 = col_letter(sq % EXTENDED_SIDE), row_digit(sq)
        for i in range(sq - 2 * EXTENDED_SIDE, sq + 2 * EXTENDED_SIDE + 1, EXTENDED_SIDE):
            for j in range(i - 2, i + 3):
                if board.get(j) is PieceColor.EMPTY:
                    moves.append(Move.move(c0, r0, col_letter(j % EXTENDED_SIDE), row_digit(j)))
    return moves
