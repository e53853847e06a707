from __future__ import annotations

from typing import Any, Dict, List

from .board import Board
from .moves import game_over, valid_moves
from .turn import TurnResult


def board_to_json(b: Board) -> Dict[str, Any]:
    return {"size": int(b.size), "grid": b.rows(), "cells": b.cells()}


def board_from_json(obj: Dict[str, Any]) -> Board:
    """Reads either a nested `grid` or a flat `cells` list plus `size`."""
    if not isinstance(obj, dict):
        raise ValueError("board must be an object")
    if "grid" in obj:
        grid = obj["grid"]
        if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
            raise ValueError("grid must be a list of rows")
        return Board.from_rows(grid)
    if "cells" in obj:
        cells = obj["cells"]
        size = int(obj.get("size", 0))
        if not isinstance(cells, list) or size <= 0 or len(cells) != size * size:
            raise ValueError("cells must be a flat list of size*size values")
        rows: List[List[int]] = [cells[r * size:(r + 1) * size] for r in range(size)]
        return Board.from_rows(rows)
    raise ValueError("board requires grid or cells")


def directions_to_json(b: Board) -> List[str]:
    return [d.name.lower() for d in valid_moves(b)]


def turn_to_json(res: TurnResult) -> Dict[str, Any]:
    return {
        "board": board_to_json(res.board),
        "moved": bool(res.moved),
        "spawned": bool(res.spawned),
        "over": bool(res.over),
        "validMoves": directions_to_json(res.board),
    }


def status_to_json(b: Board) -> Dict[str, Any]:
    return {
        "board": board_to_json(b),
        "over": bool(game_over(b)),
        "validMoves": directions_to_json(b),
    }
