from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .board import Board, Direction
from .moves import game_over, shift, valid_move
from .spawn import new_tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one key press: the next board plus what happened on the way."""
    board: Board
    moved: bool
    spawned: bool
    over: bool


def play_turn(board: Board, direction: Direction, rng: random.Random) -> TurnResult:
    """Validity check, shift, spawn, terminal check. A no-op move returns the same board."""
    if not valid_move(board, direction):
        logger.debug('no-op move %s', Direction(direction).name)
        return TurnResult(board=board, moved=False, spawned=False, over=game_over(board))
    shifted = shift(board, direction).board
    next_board, spawned = new_tile(shifted, rng)
    return TurnResult(board=next_board, moved=True, spawned=spawned, over=game_over(next_board))
