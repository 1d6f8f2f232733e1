"""
Public API for searching take-stones positions.

Usage:
    from stone_search import TakeStones, run, format_result

    game = TakeStones.from_moves(7, [1])
    result = run(game, depth=0)
    print(format_result(result))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stone_search.search import AlphaBetaSearch, MinimaxSearch, SearchResult
from stone_search.utils.factory import create_search

if TYPE_CHECKING:
    from stone_search.games.game_base import GameBase


def run(game: "GameBase", depth: int = 0, pruning: bool = True) -> SearchResult:
    """
    Search game and return the chosen move with statistics.

    Parameters
    ----------
    game : GameBase
        Root position. Not modified.
    depth : int
        Depth limit in plies; 0 searches to the end of the game.
    pruning : bool
        If False, run plain minimax instead of alpha-beta.
    """
    return create_search(pruning).run(game, depth)


def format_result(result: SearchResult) -> str:
    """Render the statistics block shown by the command line."""
    move = "none" if result.move is None else str(result.move)
    lines = [
        f"Move: {move}",
        f"Value: {result.value}",
        f"Number of Nodes Visited: {result.nodes_visited}",
        f"Number of Nodes Evaluated: {result.nodes_evaluated}",
        f"Max Depth Reached: {result.max_depth_reached}",
        f"Avg Effective Branching Factor: {result.effective_branching_factor:.1f}",
    ]
    return "\n".join(lines)


__all__ = [
    "run",
    "format_result",
    "AlphaBetaSearch",
    "MinimaxSearch",
    "SearchResult",
]
