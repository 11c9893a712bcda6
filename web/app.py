from __future__ import annotations

from flask import Flask, jsonify, request
import logging
import sys
from pathlib import Path

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ataxx import AIPlayer, Game, IllegalMoveError, PieceColor
from ataxx.config import CONFIG

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    app = Flask(__name__)

    game = Game()
    # Color the human plays; the AI takes the other one.
    state = {"human": PieceColor.RED}

    def _depth(data: dict) -> int:
        depth = data.get("depth", CONFIG.web.default_depth)
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise ValueError(f"Depth must be an integer, got {depth!r}")
        if not 1 <= depth <= CONFIG.web.max_depth:
            raise ValueError(f"Depth must be between 1 and {CONFIG.web.max_depth}")
        return depth

    def _ai_reply(depth: int):
        """Let the AI move if it is its turn and the game is still on."""
        if game.is_game_over() or game.board.whose_move is state["human"]:
            return None
        ai = AIPlayer(game.board.whose_move, depth=depth)
        ai_move = ai.choose_move(game.board)
        game.push(ai_move)
        return ai_move

    def _error(message: str):
        logger.warning("Rejected request: %s", message)
        return jsonify({"error": message}), 400

    @app.get("/api/state")
    def api_state():
        return jsonify(game.snapshot())

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        color = data.get("color") or "red"
        if not isinstance(color, str) or color.lower() not in ("red", "blue"):
            return _error(f"Unknown color: {color}")
        blocks = data.get("blocks") or []
        if not isinstance(blocks, list) or not all(isinstance(b, str) for b in blocks):
            return _error("Blocks must be a list of squares such as 'c3'")
        try:
            depth = _depth(data)
            game.reset(blocks)
        except (IllegalMoveError, ValueError) as exc:
            return _error(str(exc))
        state["human"] = PieceColor.RED if color.lower() == "red" else PieceColor.BLUE

        # If the human chose blue, the AI (red) moves first
        ai_move = _ai_reply(depth)
        snap = game.snapshot()
        snap["ai_move"] = ai_move
        return jsonify(snap)

    @app.post("/api/move")
    def api_move():
        data = request.get_json(silent=True) or {}
        text = data.get("move")
        if not text:
            return _error("Missing move")
        if not isinstance(text, str):
            return _error(f"Move must be a string, got {text!r}")
        try:
            depth = _depth(data)
            game.push(text)
        except (IllegalMoveError, ValueError) as exc:
            return _error(str(exc))

        ai_move = _ai_reply(depth)
        snap = game.snapshot()
        snap["ai_move"] = ai_move
        return jsonify(snap)

    @app.post("/api/undo")
    def api_undo():
        # Take back the AI reply as well as the human move
        game.undo()
        if game.board.whose_move is not state["human"]:
            game.undo()
        # Back at the start with the AI to move: it replays its opening move
        ai_move = _ai_reply(CONFIG.web.default_depth)
        snap = game.snapshot()
        snap["ai_move"] = ai_move
        return jsonify(snap)

    return app


app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=CONFIG.log_level)
    app.run(host=CONFIG.web.host, port=CONFIG.web.port, debug=CONFIG.web.debug)
