from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

from .board import DEFAULT_SIZE, Board

logger = logging.getLogger(__name__)

SPAWN_VALUES = (2, 4)
TWO_PROBABILITY = 0.9


def new_tile(board: Board, rng: random.Random) -> Tuple[Board, bool]:
    """
    Places a 2 (90%) or a 4 (10%) on a uniformly chosen empty cell.
    Returns (board, False) unchanged when the board is full.
    """
    empty = board.empty_cells()
    if not empty:
        return board, False
    r, c = rng.choice(empty)
    value = SPAWN_VALUES[0] if rng.random() < TWO_PROBABILITY else SPAWN_VALUES[1]
    rows = board.rows()
    rows[r][c] = value
    logger.debug('spawned %d at (%d, %d)', value, r, c)
    return Board(size=board.size, grid=tuple(tuple(row) for row in rows)), True


def new_game(size: int = DEFAULT_SIZE, seed: Optional[int] = None,
             rng: Optional[random.Random] = None) -> Board:
    """Creates an empty board seeded with two spawned tiles."""
    rng = rng if rng is not None else random.Random(seed)
    board = Board.empty(size)
    for _ in range(2):
        board, _placed = new_tile(board, rng)
    return board
