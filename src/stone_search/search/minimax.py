"""
Plain depth-limited minimax without pruning.

Visits every node alpha-beta could visit. Useful as a reference: alpha-beta
must return the same root value and move, only with fewer nodes.
"""

from __future__ import annotations

import logging

from stone_search.core.types import PLAYER_ONE
from stone_search.games.game_base import GameBase
from stone_search.search.alphabeta import (
    SearchContext,
    SearchResult,
    resolve_depth_limit,
    select_root_move,
)

logger = logging.getLogger(__name__)


class MinimaxSearch:
    """Exhaustive minimax with the same statistics as AlphaBetaSearch."""

    def run(self, game: GameBase, depth: int) -> SearchResult:
        depth_limit = resolve_depth_limit(game, depth)
        maximizing = game.current_player() == PLAYER_ONE
        ctx = SearchContext(depth_limit=depth_limit)

        value = self.minimax(game, depth_limit, maximizing, ctx)
        move = select_root_move(game.legal_moves(), ctx.root_values, maximizing)

        logger.debug(
            "minimax done: %s move=%s value=%s visited=%d evaluated=%d",
            game.game_id(), move, value, ctx.nodes_visited, ctx.nodes_evaluated,
        )
        return SearchResult(
            move=move,
            value=value,
            stats=ctx.stats(),
            depth_limit=depth_limit,
            root_values=list(ctx.root_values),
        )

    def minimax(self, game: GameBase, depth: int, maximizing: bool, ctx: SearchContext) -> float:
        ctx.nodes_visited += 1
        ctx.max_depth_reached = max(ctx.max_depth_reached, ctx.depth_limit - depth)

        children = game.successors()
        if not children or depth == 0:
            ctx.nodes_evaluated += 1
            return game.evaluate()

        pick = max if maximizing else min
        v = None
        for child in children:
            score = self.minimax(child, depth - 1, not maximizing, ctx)
            v = score if v is None else pick(v, score)
            if ctx.depth_limit - depth == 0:
                ctx.root_values.append(v)
        return v
