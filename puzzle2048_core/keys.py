from __future__ import annotations

from typing import Dict, Optional, Union

from .board import Direction

KEY_BINDINGS: Dict[str, Direction] = {
    'w': Direction.UP,
    'arrowup': Direction.UP,
    'up': Direction.UP,
    'd': Direction.RIGHT,
    'arrowright': Direction.RIGHT,
    'right': Direction.RIGHT,
    's': Direction.DOWN,
    'arrowdown': Direction.DOWN,
    'down': Direction.DOWN,
    'a': Direction.LEFT,
    'arrowleft': Direction.LEFT,
    'left': Direction.LEFT,
}


def direction_for_key(key: str) -> Optional[Direction]:
    """Maps a key name to a direction; unbound keys give None and are ignored by callers."""
    return KEY_BINDINGS.get(key.strip().lower())


def parse_direction(value: Union[Direction, int, str]) -> Direction:
    """Accepts a Direction, an int 0..3, a direction name or a bound key."""
    if isinstance(value, Direction):
        return value
    if isinstance(value, bool):
        raise ValueError(f'Unknown direction: {value!r}')
    if isinstance(value, int):
        try:
            return Direction(value)
        except ValueError:
            raise ValueError(f'Unknown direction: {value!r}') from None
    if isinstance(value, str):
        d = direction_for_key(value)
        if d is not None:
            return d
        name = value.strip().upper()
        if name in Direction.__members__:
            return Direction[name]
    raise ValueError(f'Unknown direction: {value!r}')
