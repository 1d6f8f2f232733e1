"""
Stone Search - alpha-beta game-tree search for the take-stones divisor game.

Players alternately take numbered stones; after the opening, each stone must
divide or be a multiple of the last one taken. This package searches
positions of that game and reports search statistics.

Quick Start:
    from stone_search import TakeStones, run, format_result

    game = TakeStones(7)
    result = run(game, depth=0)
    print(format_result(result))

Modules:
    core    - Constants, SearchStats, prime helpers
    games   - GameBase interface and the TakeStones game
    search  - Alpha-beta search and the plain minimax reference
    utils   - Configuration and factories
"""

from stone_search.api import (
    run,
    format_result,
    AlphaBetaSearch,
    MinimaxSearch,
    SearchResult,
)

from stone_search.core import SearchStats
from stone_search.games import GameBase, GameState, TakeStones

__version__ = "1.0.0"

__all__ = [
    # Main API
    "run",
    "format_result",
    "AlphaBetaSearch",
    "MinimaxSearch",
    "SearchResult",
    # Types
    "SearchStats",
    "GameBase",
    "GameState",
    "TakeStones",
]
