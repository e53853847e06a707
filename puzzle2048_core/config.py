from __future__ import annotations

import logging
import os
from typing import Optional

from .board import DEFAULT_SIZE

MIN_SIZE = 2
MAX_SIZE = 8


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def default_size() -> int:
    """Board size for new games; PUZZLE2048_SIZE overrides the standard 4."""
    raw = os.getenv("PUZZLE2048_SIZE", str(DEFAULT_SIZE))
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(f"PUZZLE2048_SIZE must be an integer, got {raw!r}") from None
    return check_size(size)


def check_size(size: int) -> int:
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(f"size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}")
    return size


def configure_logging(debug: Optional[bool] = None) -> None:
    if debug is None:
        debug = env_flag("PUZZLE2048_DEBUG")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
