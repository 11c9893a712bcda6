from __future__ import annotations

from .board import Board, PieceColor


class Evaluator:
    """Static evaluation for Ataxx positions.

    Positive scores favor Red, negative scores favor Blue.
    """

    @classmethod
    def evaluate(cls, board: Board, winning_value: int) -> int:
        winner = board.get_winner()
        if winner is PieceColor.RED:
            return winning_value
        if winner is PieceColor.BLUE:
            return -winning_value
        if winner is PieceColor.EMPTY:
            return 0
        return board.red_pieces() - board.blue_pieces()
