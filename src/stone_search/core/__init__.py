"""
Core module - fundamental types, constants, and prime helpers.

This module provides the building blocks used throughout the search system.
"""

from stone_search.core.types import (
    SearchStats,
    PLAYER_ONE,
    PLAYER_TWO,
    NO_MOVE,
    WIN_SCORE,
    LOSS_SCORE,
    NEUTRAL_SCORE,
    ONE_TAKEN_SCORE,
    PRIME_SCORE,
    COMPOSITE_SCORE,
    SCORE_MIN,
    SCORE_MAX,
)
from stone_search.core.primes import is_prime, largest_prime_factor

__all__ = [
    # Types
    "SearchStats",
    # Constants
    "PLAYER_ONE",
    "PLAYER_TWO",
    "NO_MOVE",
    "WIN_SCORE",
    "LOSS_SCORE",
    "NEUTRAL_SCORE",
    "ONE_TAKEN_SCORE",
    "PRIME_SCORE",
    "COMPOSITE_SCORE",
    "SCORE_MIN",
    "SCORE_MAX",
    # Functions
    "is_prime",
    "largest_prime_factor",
]
