"""Ataxx package providing the rules engine, evaluation, and AI search.

Modules:
- move: Move notation and padded-grid coordinate mapping
- board: Rules engine (legality, move application, winner detection)
- movegen: Candidate move generation for the search
- evaluator: Static evaluation of positions
- ai: Minimax with alpha-beta pruning
- game: Game orchestration for the web/API layer
- config: Search and web settings
"""

from .board import Board, IllegalMoveError, PieceColor
from .move import Move
from .game import Game
from .ai import AIPlayer, SearchResult
from .evaluator import Evaluator

__all__ = ["Board", "IllegalMoveError", "PieceColor", "Move", "Game", "AIPlayer", "SearchResult", "Evaluator"]
