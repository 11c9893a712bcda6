from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import logging

from .board import Board, IllegalMoveError, PieceColor
from .move import Move
from .movegen import possible_moves

logger = logging.getLogger(__name__)


class Game:
    """Owns the mutable game state for the web/API layer.

    Moves arrive and leave as text (``a7-b6``, ``-``); earlier positions are
    kept so moves can be taken back.
    """

    def __init__(self, blocks: Optional[Iterable[str]] = None) -> None:
        self.reset(blocks)

    def reset(self, blocks: Optional[Iterable[str]] = None) -> None:
        board = Board()
        for square in blocks or ():
            if not isinstance(square, str):
                raise IllegalMoveError(f"Bad block square: {square!r}")
            square = square.strip().lower()
            if len(square) != 2 or not ("a" <= square[0] <= "g" and "1" <= square[1] <= "7"):
                raise IllegalMoveError(f"Bad block square: {square!r}")
            board.set_block(square[0], square[1])
        self.board = board
        self._history: List[Board] = []
        self._moves: List[Move] = []
        logger.debug("New game, blocks=%s", list(blocks or ()))

    def get_turn_color(self) -> str:
        return self.board.whose_move.name.lower()

    def get_legal_moves(self) -> List[str]:
        return [str(m) for m in possible_moves(self.board) if self.board.legal_move(m)]

    def is_game_over(self) -> bool:
        return self.board.get_winner() is not None

    def get_result(self) -> Optional[str]:
        """'red', 'blue', 'tie', or None while the game is undecided."""
        winner = self.board.get_winner()
        if winner is None:
            return None
        if winner is PieceColor.EMPTY:
            return "tie"
        return winner.name.lower()

    def push(self, text: str) -> Move:
        if self.is_game_over():
            raise IllegalMoveError("Game is already over")
        if not isinstance(text, str):
            raise IllegalMoveError(f"Move must be a string, got {text!r}")
        try:
            move = Move.parse(text)
        except ValueError as exc:
            raise IllegalMoveError(str(exc)) from exc
        if not self.board.legal_move(move):
            raise IllegalMoveError(f"Illegal move: {text}")
        self._history.append(self.board.copy())
        self.board.make_move(move)
        self._moves.append(move)
        logger.debug("Applied %s, %s to move", move, self.get_turn_color())
        return move

    def undo(self) -> None:
        if not self._history:
            return
        self.board = self._history.pop()
        self._moves.pop()

    def snapshot(self) -> Dict[str, object]:
        return {
            "board": self.board.rows(),
            "turn": self.get_turn_color(),
            "legal_moves": self.get_legal_moves(),
            "red_pieces": self.board.red_pieces(),
            "blue_pieces": self.board.blue_pieces(),
            "game_over": self.is_game_over(),
            "result": self.get_result(),
            "last_move": str(self._moves[-1]) if self._moves else None,
        }
