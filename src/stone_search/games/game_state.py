"""
GameState - board container for the stone-taking game.

Optimized for fast copying.
"""

from __future__ import annotations

import numpy as np

from stone_search.core.types import NO_MOVE


class GameState:
    """
    Lightweight game state container.

    Uses a bool board indexed 1..size:
        True  = stone still available
        False = stone taken
    Index 0 is unused and always False.
    """
    __slots__ = ('stones', 'last_move')

    def __init__(self, stones: np.ndarray, last_move: int = NO_MOVE):
        self.stones = stones
        self.last_move = last_move

    @classmethod
    def initial(cls, size: int) -> "GameState":
        """All stones available, nothing played yet."""
        stones = np.ones(size + 1, dtype=bool)
        stones[0] = False
        return cls(stones, NO_MOVE)

    @property
    def size(self) -> int:
        return len(self.stones) - 1

    def copy(self) -> "GameState":
        """Fast copy - the child owns its own board snapshot."""
        return GameState(self.stones.copy(), self.last_move)
