from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import logging
import time

from .board import Board, PieceColor
from .config import CONFIG
from .evaluator import Evaluator
from .move import Move
from .movegen import possible_moves

logger = logging.getLogger(__name__)

# A position magnitude indicating a win (for Red if positive, Blue if negative).
WINNING_VALUE = 1_000_000
# A magnitude greater than any score the search can produce.
INFTY = 10**9


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: int
    nodes: int


class AIPlayer:
    """Depth-limited minimax with alpha-beta pruning, playing one color."""

    def __init__(self, color: PieceColor, depth: Optional[int] = None) -> None:
        assert color.is_piece, f"AI must play red or blue, not {color}"
        self.color = color
        self.depth = CONFIG.search.depth if depth is None else depth
        self._last_found_move: Optional[Move] = None

    def choose_move(self, board: Board) -> str:
        """Return the text of the move to play on BOARD, reporting it.

        Returns ``-`` (a pass) without searching when there is nothing to move.
        BOARD must be undecided with this player to move.
        """
        assert board.whose_move is self.color, f"{self.color.display_name()} asked to move out of turn"
        assert board.get_winner() is None, "move requested on a finished game"
        if not board.can_move(self.color):
            logger.info("%s passes.", self.color.display_name())
            return str(Move.pass_move())
        start = time.perf_counter()
        result = self.find_move(board)
        assert result.best_move is not None, f"no move found at depth {self.depth}"
        logger.debug("Search took %.3fs", time.perf_counter() - start)
        logger.info("%s moves %s.", self.color.display_name(), result.best_move)
        return str(result.best_move)

    def find_move(self, board: Board, depth: Optional[int] = None) -> SearchResult:
        """Search from BOARD for the side to move, assuming it has a move.

        BOARD itself is left untouched.
        """
        depth = self.depth if depth is None else depth
        assert depth >= 0, f"search depth must be non-negative, got {depth}"
        search_board = board.copy()
        self._last_found_move = None
        sense = 1 if search_board.whose_move is PieceColor.RED else -1
        score, nodes = self._min_max(search_board, depth, True, sense, -INFTY, INFTY)
        if depth > 0 and search_board.get_winner() is None:
            assert self._last_found_move is not None, "search recorded no move"
        logger.debug("depth %d score %d nodes %d best %s", depth, score, nodes, self._last_found_move)
        return SearchResult(best_move=self._last_found_move, score=score, nodes=nodes)

    def _min_max(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
    ) -> Tuple[int, int]:
        """Score BOARD searching DEPTH plies; return (score, nodes visited).

        SENSE is 1 at maximizing (Red) nodes and -1 at minimizing (Blue)
        nodes. The same ALPHA/BETA pair is threaded to children of either
        sense; it is never swapped or negated. Records the best move in
        _last_found_move iff SAVE_MOVE and the node is expanded.
        """
        # WINNING_VALUE + depth favors wins found sooner (depth is larger
        # the fewer moves have been made).
        if depth == 0 or board.get_winner() is not None:
            return Evaluator.evaluate(board, WINNING_VALUE + depth), 1

        nodes = 1
        best: Optional[Move] = None
        best_score = -INFTY if sense == 1 else INFTY
        for move in possible_moves(board):
            if not board.legal_move(move):
                continue
            child = board.copy()
            child.make_move(move)
            score, child_nodes = self._min_max(child, depth - 1, False, -sense, alpha, beta)
            nodes += child_nodes
            if sense == 1:
                if score > best_score:
                    best = move
                    best_score = score
                    alpha = max(alpha, score)
            elif score < best_score:
                best = move
                best_score = score
                beta = min(beta, score)
            if beta <= alpha:
                break

        if save_move:
            self._last_found_move = best
        return best_score, nodes
