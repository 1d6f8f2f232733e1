"""
Search module - game-tree search engines.

Provides alpha-beta search and an unpruned minimax reference, both
reporting node statistics through SearchResult.
"""

from stone_search.search.alphabeta import (
    AlphaBetaSearch,
    SearchContext,
    SearchResult,
    resolve_depth_limit,
    select_root_move,
)
from stone_search.search.minimax import MinimaxSearch

__all__ = [
    "AlphaBetaSearch",
    "MinimaxSearch",
    "SearchContext",
    "SearchResult",
    "resolve_depth_limit",
    "select_root_move",
]
