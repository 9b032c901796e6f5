from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    Board,
    Game,
    Inventory,
    Color,
    Piece,
    PLAYERS,
    QuantikError,
    find_clash,
    starting_pieces,
)

app = Flask(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def board_to_json(b: Board) -> List[Optional[str]]:
    return b.to_symbols()


def board_from_json(cells: Any) -> Board:
    if not isinstance(cells, list):
        raise ValueError('board must be a list of 16 cells')
    return Board.from_symbols([str(x) if x else None for x in cells])


def state_to_json(g: Game) -> Dict[str, Any]:
    return {
        "board": board_to_json(g.board),
        "inventories": [[p.symbol for p in inv.pieces()] for inv in g.inventories],
    }


def check_state(g: Game) -> None:
    """Rejects states legal play cannot reach: extra copies of a piece, or a clash on the board."""
    placed = [p for p in g.board.cells if p is not None]
    for inv in g.inventories:
        start = starting_pieces(inv.color)
        for piece in dict.fromkeys(start):
            allowed = start.count(piece)
            if inv.count(piece) > allowed:
                raise ValueError(f'player {int(inv.color)} holds too many {piece.symbol}')
            if inv.count(piece) + placed.count(piece) > allowed:
                raise ValueError(f'more than {allowed} {piece.symbol} in play')
    region = find_clash(g.board)
    if region is not None:
        raise ValueError(f'clashing pieces in region {list(region)}')


def json_to_state(obj: Any) -> Game:
    """Rebuilds a Game from its JSON form and checks it could come from legal play."""
    if not isinstance(obj, dict):
        raise ValueError('state must be an object')
    board = board_from_json(obj["board"])
    invs_in = obj.get("inventories")
    if not isinstance(invs_in, list) or len(invs_in) != len(PLAYERS):
        raise ValueError('inventories must hold one list per player')
    inventories = []
    for player, held_in in zip(PLAYERS, invs_in):
        color = Color(player)
        if not isinstance(held_in, list):
            raise ValueError(f'player {player} inventory must be a list')
        held = [Piece.from_symbol(str(s)) for s in held_in]
        if any(p.color != color for p in held):
            raise ValueError(f'player {player} inventory holds the wrong color')
        inventories.append(Inventory(color=color, held=held))
    g = Game(board=board, inventories=(inventories[0], inventories[1]))
    check_state(g)
    return g


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValueError('request body must be an object')
    return body


def _bad_state(e: Exception) -> Any:
    app.logger.info("rejected state: %s", e)
    return jsonify({"ok": False, "error": f"bad state: {e}", "code": "bad-state"}), 400


def _rule_error(e: QuantikError) -> Any:
    app.logger.info("rejected move: %s", e)
    return jsonify({"ok": False, "error": str(e), "code": e.code}), 400


@app.post("/api/new")
def api_new() -> Any:
    return jsonify({"ok": True, "state": state_to_json(Game()), "turn": 0})


@app.post("/api/legal")
def api_legal() -> Any:
    try:
        body = _body()
        g = json_to_state(body.get("state"))
        piece = Piece.from_symbol(str(body.get("piece", "")))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    return jsonify({"ok": True, "piece": piece.symbol, "legalPositions": g.legal_positions(piece)})


@app.post("/api/move")
def api_move() -> Any:
    try:
        body = _body()
        g = json_to_state(body.get("state"))
        player = body["player"]
        if not _is_int(player) or player not in PLAYERS:
            raise ValueError(f'unknown player {player!r}')
        piece = Piece.from_symbol(str(body["piece"]))
        # Non-int positions are left to place() and come back as out-of-range.
        pos = body["position"]
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    try:
        g.play_move(player, piece, pos)
    except QuantikError as e:
        return _rule_error(e)
    winner = g.winner()
    next_player = int(Color(player).opponent())
    stuck = winner is None and g.is_stuck(next_player)
    return jsonify({
        "ok": True,
        "state": state_to_json(g),
        "winner": winner,
        "nextPlayer": next_player,
        "stuck": stuck,
    })


@app.post("/api/render")
def api_render() -> Any:
    try:
        g = json_to_state(_body().get("state"))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    return jsonify({"ok": True, "text": g.render()})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
