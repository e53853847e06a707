from __future__ import annotations

# Facade module that re-exports the 2048 core functionality.
# Used by the Flask app, the tests and the tools.
# Single-responsibility modules live under puzzle2048_core/*.

from puzzle2048_core.board import DEFAULT_SIZE, Board, Coord, Direction  # noqa: F401
from puzzle2048_core.moves import (  # noqa: F401
    LineResult,
    ShiftResult,
    extract_line,
    insert_line,
    alter_one_line,
    shift,
    valid_move,
    valid_moves,
    game_over,
)
from puzzle2048_core.spawn import SPAWN_VALUES, TWO_PROBABILITY, new_tile, new_game  # noqa: F401
from puzzle2048_core.turn import TurnResult, play_turn  # noqa: F401
from puzzle2048_core.keys import KEY_BINDINGS, direction_for_key, parse_direction  # noqa: F401


def main() -> None:
    # CLI driver delegated to puzzle2048_core.cli
    from puzzle2048_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
