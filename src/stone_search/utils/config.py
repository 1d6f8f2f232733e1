"""
Configuration and defaults.
"""

from typing import Iterable, Tuple

import numpy as np


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_SIZE = 7
DEFAULT_DEPTH = 0  # 0 = search to the end of the game

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def validate_taken(size: int, taken: Iterable[int]) -> Tuple[int, ...]:
    """Return taken as a tuple after type, range and duplicate checks."""
    moves = tuple(taken)
    for t in moves:
        if isinstance(t, bool) or not isinstance(t, (int, np.integer)):
            raise TypeError(f"taken stones must be integers, got {t!r}")
    moves = tuple(int(t) for t in moves)
    out_of_range = [t for t in moves if t < 1 or t > size]
    if out_of_range:
        raise ValueError(
            f"Taken stone(s) {out_of_range} out of range. Stones are numbered 1-{size}."
        )
    if len(set(moves)) != len(moves):
        raise ValueError(f"Taken stones contain duplicates: {list(moves)}")
    return moves


class Config:
    """Search configuration with sensible defaults."""

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        depth: int = DEFAULT_DEPTH,
        taken: Iterable[int] = (),
        pruning: bool = True,
    ):
        if size < 1:
            raise ValueError(f"size must be a positive integer, got {size}")
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")

        self.size = size
        self.depth = depth
        self.taken = validate_taken(size, taken)
        self.pruning = pruning

    def __repr__(self) -> str:
        return (
            f"Config(size={self.size}, depth={self.depth}, "
            f"taken={list(self.taken)}, pruning={self.pruning})"
        )


# Default configuration
DEFAULT_CONFIG = Config()
