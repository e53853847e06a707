import argparse
import random
import sys
import time

sys.path.append('.')
import game  # type: ignore  # noqa: E402


def play_one(rng: random.Random, size: int):
    """Plays random valid moves until the game ends; checks tile-sum conservation along the way."""
    board = game.new_game(size, rng=rng)
    turns = 0
    while not game.game_over(board):
        moves = game.valid_moves(board)
        if not moves:
            raise AssertionError(f'no valid moves on a non-terminal board:\n{board.pretty()}')
        direction = rng.choice(moves)
        before = board.total()
        shifted = game.shift(board, direction)
        if shifted.board.total() != before:
            raise AssertionError(f'shift {direction.name} changed the tile sum')
        res = game.play_turn(board, direction, rng)
        gained = res.board.total() - before
        if res.spawned and gained not in game.SPAWN_VALUES:
            raise AssertionError(f'spawn added {gained}')
        board = res.board
        turns += 1
    return board, turns


def main():
    parser = argparse.ArgumentParser(description='Random 2048 playouts with invariant checks')
    parser.add_argument('--games', type=int, default=20)
    parser.add_argument('--size', type=int, default=4)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    t0 = time.time()
    best = 0
    total_turns = 0
    for i in range(args.games):
        board, turns = play_one(rng, args.size)
        best = max(best, board.max_tile())
        total_turns += turns
        print(f"game={i} turns={turns} max_tile={board.max_tile()}")
    took = int((time.time() - t0) * 1000)
    print(f"Played {args.games} games in {took}ms, avg turns={total_turns / max(args.games, 1):.1f}, best tile={best}")


if __name__ == '__main__':
    main()
