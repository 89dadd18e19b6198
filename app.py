from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    Board,
    board_from_layout,
    apply_action,
    replay,
    board_to_json,
    board_from_json,
    action_to_json,
    json_to_action,
)

LOG_LEVEL = os.getenv("QUEENS_LOG_LEVEL", "INFO").upper()

app = Flask(__name__)

# Errors raised while decoding a payload or applying an action; reported as 400s.
BAD_INPUT = (ValueError, KeyError, TypeError, IndexError, AttributeError)


def _bad_request(message: str) -> Tuple[Any, int]:
    app.logger.info("rejected request to %s: %s", request.path, message)
    return jsonify({"ok": False, "error": message}), 400


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _board_payload(b: Board) -> Dict[str, Any]:
    return {
        "ok": True,
        "board": board_to_json(b),
        "queens": [[int(r), int(c)] for (r, c) in b.queens()],
    }


def _board_from_body(body: Dict[str, Any]) -> Optional[Board]:
    """Accepts either an encoded board or a raw zone layout."""
    if "board" in body:
        return board_from_json(body["board"])
    if "layout" in body:
        return board_from_layout(body["layout"])
    return None


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/board")
def api_board() -> Any:
    body = _json_body()
    layout = body.get("layout")
    if not isinstance(layout, list):
        return _bad_request("layout required")
    try:
        board = board_from_layout(layout)
    except BAD_INPUT as e:
        return _bad_request(f"bad layout: {e}")
    return jsonify(_board_payload(board))


@app.post("/api/apply")
def api_apply() -> Any:
    body = _json_body()
    if not isinstance(body.get("board"), list) or not isinstance(body.get("action"), dict):
        return _bad_request("board and action required")
    try:
        board = board_from_json(body["board"])
        action = json_to_action(body["action"])
        next_board = apply_action(action, board)
    except BAD_INPUT as e:
        return _bad_request(f"bad action: {e}")
    return jsonify(_board_payload(next_board))


@app.post("/api/replay")
def api_replay() -> Any:
    body = _json_body()
    actions_in = body.get("actions", [])
    if not isinstance(actions_in, list):
        return _bad_request("actions must be a list")
    try:
        board = _board_from_body(body)
        if board is None:
            return _bad_request("board or layout required")
        actions = [json_to_action(a) for a in actions_in]
        final = replay(actions, board)
    except BAD_INPUT as e:
        return _bad_request(f"bad replay: {e}")
    payload = _board_payload(final)
    payload["actions"] = [action_to_json(a) for a in actions]
    return jsonify(payload)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
