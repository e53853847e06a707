from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from .config import check_size, configure_logging
from .keys import direction_for_key
from .moves import valid_moves
from .spawn import new_game
from .turn import play_turn


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Play 2048 in the terminal')
    parser.add_argument('--size', type=int, default=4, help='Board size (NxN)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for tile spawns')
    parser.add_argument('--show-moves', action='store_true', help='List valid directions before each prompt')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    configure_logging(args.debug or None)
    try:
        size = check_size(args.size)
    except ValueError as e:
        parser.error(str(e))

    rng = random.Random(args.seed)
    board = new_game(size, rng=rng)
    print(board.pretty())

    while True:
        if args.show_moves:
            print('Valid moves:', ', '.join(d.name.lower() for d in valid_moves(board)))
        try:
            text = input('Move (w/a/s/d, q to quit): ').strip()
        except EOFError:
            text = 'q'
        if text == '' or text.lower() == 'q':
            print('Bye.')
            return
        direction = direction_for_key(text)
        if direction is None:
            print('Unknown key. Use w (up), a (left), s (down), d (right).')
            continue
        res = play_turn(board, direction, rng)
        if not res.moved:
            print('Move not possible.')
            continue
        board = res.board
        print(board.pretty())
        if res.over:
            print(f'Game over! Max tile: {board.max_tile()}')
            return


if __name__ == '__main__':
    main()
