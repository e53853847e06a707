from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

Coord = Tuple[int, int]
Row = Tuple[int, ...]

DEFAULT_SIZE = 4


class Direction(IntEnum):
    """The four move directions. Values match the original key handler (W, D, S, A)."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def vertical(self) -> bool:
        """UP/DOWN work on columns, LEFT/RIGHT on rows."""
        return self in (Direction.UP, Direction.DOWN)

    @property
    def reverse(self) -> bool:
        """RIGHT/DOWN are merged toward index 0 after reversing the line."""
        return self in (Direction.RIGHT, Direction.DOWN)


def _is_tile_value(v: int) -> bool:
    return v == 0 or (v >= 2 and v & (v - 1) == 0)


@dataclass(frozen=True)
class Board:
    """A square 2048 grid. 0 is an empty cell; any other value is a power of two."""
    size: int
    grid: Tuple[Row, ...]  # size rows of size cells

    @classmethod
    def empty(cls, size: int = DEFAULT_SIZE) -> 'Board':
        if size <= 0:
            raise ValueError(f'Board size must be positive, got {size}')
        return cls(size=size, grid=tuple((0,) * size for _ in range(size)))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """Builds a board from an explicit grid, validating shape and tile values."""
        size = len(rows)
        if size == 0:
            raise ValueError('Grid must have at least one row')
        grid: List[Row] = []
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f'Row {r} has {len(row)} cells, expected {size}')
            for v in row:
                # bool is an int subclass; strings and floats are never coerced
                if isinstance(v, bool) or not isinstance(v, int):
                    raise ValueError(f'Tile value {v!r} in row {r} is not an integer')
                if not _is_tile_value(v):
                    raise ValueError(f'Invalid tile value {v} in row {r}')
            grid.append(tuple(row))
        return cls(size=size, grid=tuple(grid))

    def at(self, r: int, c: int) -> int:
        return self.grid[r][c]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, row-major."""
        for r in range(self.size):
            for c in range(self.size):
                yield (r, c)

    def rows(self) -> List[List[int]]:
        return [list(row) for row in self.grid]

    def cells(self) -> List[int]:
        """Flattened row-major view of the cell values, for rendering."""
        return [v for row in self.grid for v in row]

    def empty_cells(self) -> List[Coord]:
        return [(r, c) for (r, c) in self.coords() if self.grid[r][c] == 0]

    def num_empty(self) -> int:
        return sum(1 for v in self.cells() if v == 0)

    def total(self) -> int:
        return sum(self.cells())

    def max_tile(self) -> int:
        return max(self.cells())

    def pretty(self) -> str:
        """Tab-separated rows with '-' for empty cells."""
        return '\n'.join(
            '\t'.join('-' if v == 0 else str(v) for v in row)
            for row in self.grid
        )
