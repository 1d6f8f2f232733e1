"""
Games module - searchable game implementations.
"""

from stone_search.games.game_state import GameState
from stone_search.games.game_base import GameBase
from stone_search.games.game_rules import (
    taken_count,
    available_indices,
    count_available_multiples,
    opening_moves,
    related_moves,
    board_full,
)
from stone_search.games.take_stones import TakeStones

__all__ = [
    "GameState",
    "GameBase",
    "TakeStones",
    "taken_count",
    "available_indices",
    "count_available_multiples",
    "opening_moves",
    "related_moves",
    "board_full",
]
