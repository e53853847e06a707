"""
2048 puzzle core Python package.

Pure board logic shared by the Flask app, the terminal player and the tools.
Modules:
- board.py: Board, Direction, Coord
- moves.py: line extract/insert, merge, shift, validity, terminal check
- spawn.py: random tile spawn and new-game seeding
- turn.py: one full key-press turn
- keys.py, codec.py, config.py, cli.py: caller-side helpers
"""
