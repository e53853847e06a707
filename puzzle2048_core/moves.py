from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .board import Board, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    line: List[int]
    changed: bool


@dataclass(frozen=True)
class ShiftResult:
    board: Board
    changed: bool


def extract_line(board: Board, index: int, vertical: bool, reverse: bool) -> List[int]:
    """Copies row `index` (or column `index` when vertical), reversed if requested."""
    if vertical:
        line = [board.grid[j][index] for j in range(board.size)]
    else:
        line = list(board.grid[index])
    if reverse:
        line.reverse()
    return line


def insert_line(board: Board, line: Sequence[int], index: int, vertical: bool, reverse: bool) -> Board:
    """Returns a new board with row/column `index` replaced by `line`."""
    new_line = list(line)
    if reverse:
        new_line.reverse()
    rows = board.rows()
    if vertical:
        for j in range(board.size):
            rows[j][index] = new_line[j]
    else:
        rows[index] = new_line
    return Board(size=board.size, grid=tuple(tuple(row) for row in rows))


def alter_one_line(line: Sequence[int]) -> LineResult:
    """
    Slides one line toward index 0 and merges adjacent equal tiles.
    Each tile merges at most once: [2, 2, 2, 2] -> [4, 4, 0, 0].
    """
    changed = False
    packed = [v for v in line if v != 0]
    result: List[int] = []
    i = 0
    while i < len(packed):
        if i + 1 < len(packed) and packed[i] == packed[i + 1]:
            result.append(packed[i] * 2)
            i += 2
            changed = True
        else:
            result.append(packed[i])
            i += 1
    result.extend([0] * (len(line) - len(result)))
    # Compaction without a merge still counts as a change.
    if not changed and list(line) != result:
        changed = True
    return LineResult(line=result, changed=changed)


def _orientation(direction: Direction) -> Tuple[bool, bool]:
    d = Direction(direction)
    return d.vertical, d.reverse


def shift(board: Board, direction: Direction) -> ShiftResult:
    """Shifts every line of the board in `direction`. The input board is left untouched."""
    vertical, reverse = _orientation(direction)
    new_board = board
    changed = False
    for i in range(board.size):
        line = extract_line(new_board, i, vertical, reverse)
        res = alter_one_line(line)
        if res.changed:
            new_board = insert_line(new_board, res.line, i, vertical, reverse)
            changed = True
    return ShiftResult(board=new_board, changed=changed)


def valid_move(board: Board, direction: Direction) -> bool:
    return shift(board, direction).changed


def valid_moves(board: Board) -> List[Direction]:
    """All directions that would change the board, in enum order."""
    return [d for d in Direction if valid_move(board, d)]


def game_over(board: Board) -> bool:
    """True when the board is full and no two orthogonal neighbours are equal."""
    if board.num_empty() > 0:
        return False
    g = board.grid
    for i in range(board.size):
        for j in range(board.size - 1):
            if g[i][j] == g[i][j + 1]:
                return False
            if g[j][i] == g[j + 1][i]:
                return False
    logger.debug('terminal board reached (max tile %d)', board.max_tile())
    return True
