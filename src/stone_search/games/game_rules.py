"""
NumPy utilities for the stone board.

The board is a bool array of length size + 1 where index 0 is always False.
"""

from __future__ import annotations

import numpy as np


def taken_count(stones: np.ndarray) -> int:
    """Number of stones already taken (index 0 excluded)."""
    return int(len(stones) - 1 - np.count_nonzero(stones[1:]))


def available_indices(stones: np.ndarray) -> np.ndarray:
    """Indices of stones still available, ascending."""
    return np.flatnonzero(stones)


def count_available_multiples(stones: np.ndarray, base: int) -> int:
    """
    Count available stones among base, 2*base, 3*base, ... up to the board size.
    """
    if base < 1:
        raise ValueError(f"base must be positive, got {base}")
    # stones[base::base] covers exactly the multiples that fit on the board
    return int(np.count_nonzero(stones[base::base]))


def opening_moves(size: int) -> np.ndarray:
    """Odd indices strictly below size / 2 (real division)."""
    odds = np.arange(1, size + 1, 2)
    return odds[odds < size / 2]


def related_moves(stones: np.ndarray, last_move: int) -> np.ndarray:
    """Available indices that divide last_move or are multiples of it."""
    idx = available_indices(stones)
    mask = (idx % last_move == 0) | (last_move % idx == 0)
    return idx[mask]


def board_full(stones: np.ndarray) -> bool:
    """Return True if every stone has been taken."""
    return not np.any(stones)
