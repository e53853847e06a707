from __future__ import annotations

import logging
import os
import random
from typing import Any, Dict

from flask import Flask, jsonify, request, send_from_directory

from puzzle2048_core.codec import board_from_json, status_to_json, turn_to_json
from puzzle2048_core.config import check_size, configure_logging, default_size, env_flag
from puzzle2048_core.keys import parse_direction
from puzzle2048_core.spawn import new_game
from puzzle2048_core.turn import play_turn

logger = logging.getLogger(__name__)

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)
# Read once at import so a bad PUZZLE2048_SIZE fails startup, not requests
app.config["DEFAULT_SIZE"] = default_size()

# Request-parsing failures that map to a 400 "bad request" payload
BAD_INPUT = (ValueError, KeyError, TypeError)


def _bad_request(msg: str) -> Any:
    logger.warning("rejected request to %s: %s", request.path, msg)
    return jsonify({"ok": False, "error": msg}), 400


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _rng_from(body: Dict[str, Any]) -> random.Random:
    seed = body.get("seed", None)
    return random.Random(None if seed is None else int(seed))


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    try:
        size = check_size(int(body["size"])) if "size" in body else app.config["DEFAULT_SIZE"]
        rng = _rng_from(body)
    except BAD_INPUT as e:
        return _bad_request(f"bad size or seed: {e}")
    board = new_game(size, rng=rng)
    return jsonify({"ok": True, **status_to_json(board)})


@app.post("/api/valid")
def api_valid() -> Any:
    body = _body()
    try:
        board = board_from_json(body["board"])
        check_size(board.size)
    except BAD_INPUT as e:
        return _bad_request(f"bad board: {e}")
    status = status_to_json(board)
    return jsonify({"ok": True, "validMoves": status["validMoves"], "over": status["over"]})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    try:
        board = board_from_json(body["board"])
        check_size(board.size)
    except BAD_INPUT as e:
        return _bad_request(f"bad board: {e}")
    try:
        raw = body["direction"] if "direction" in body else body["key"]
        direction = parse_direction(raw)
        rng = _rng_from(body)
    except BAD_INPUT as e:
        return _bad_request(f"bad direction: {e}")
    res = play_turn(board, direction, rng)
    return jsonify({"ok": True, **turn_to_json(res)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging()
    debug = env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
