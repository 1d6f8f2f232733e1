"""
Factory functions for creating games and search engines.
"""

from typing import Iterable, Union

from stone_search.games.take_stones import TakeStones
from stone_search.search.alphabeta import AlphaBetaSearch
from stone_search.search.minimax import MinimaxSearch
from stone_search.utils.config import Config, validate_taken


def create_game(size: int, taken: Iterable[int] = ()) -> TakeStones:
    """
    Create a game, replaying already-taken stones in order.

    Args:
        size: Number of stones.
        taken: Stones taken so far, in the order they were taken.

    Returns:
        Game positioned after the taken stones.
    """
    moves = validate_taken(size, taken)
    return TakeStones.from_moves(size, moves)


def create_game_from_config(config: Config) -> TakeStones:
    return create_game(config.size, config.taken)


def create_search(pruning: bool = True) -> Union[AlphaBetaSearch, MinimaxSearch]:
    """Alpha-beta when pruning is enabled, plain minimax otherwise."""
    return AlphaBetaSearch() if pruning else MinimaxSearch()
