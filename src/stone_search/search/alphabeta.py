"""
Depth-limited minimax search with alpha-beta pruning.

The search keeps explicit maximizing and minimizing branches. Scores are
always from player 1's point of view: player 1 maximizes, player 2 minimizes.

All per-search bookkeeping (node counters, the values recorded at the root)
lives in a SearchContext created fresh by every run() call, so one
AlphaBetaSearch instance can be reused or shared between callers.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from stone_search.core.types import PLAYER_ONE, SearchStats
from stone_search.games.game_base import GameBase

logger = logging.getLogger(__name__)


def resolve_depth_limit(game: GameBase, depth: int) -> int:
    """
    Turn a caller depth into the effective search limit.

    0 means "search to the end": no game lasts more than move_limit() plies,
    so move_limit() + 1 guarantees a full-depth search.
    """
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise TypeError(f"depth must be an integer, got {type(depth).__name__}")
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    if depth == 0:
        return game.move_limit() + 1
    return depth


@dataclass
class SearchContext:
    """
    Mutable bookkeeping for a single search.

    Attributes:
        depth_limit:        Effective depth limit of this search.
        nodes_visited:      Incremented on every recursive call.
        nodes_evaluated:    Incremented on every static evaluation.
        max_depth_reached:  Deepest ply (distance from the root) entered.
        root_values:        Running best value at the root after each
                            child, in child-generation order.
    """

    depth_limit: int
    nodes_visited: int = 0
    nodes_evaluated: int = 0
    max_depth_reached: int = 0
    root_values: List[float] = field(default_factory=list)

    def stats(self) -> SearchStats:
        return SearchStats(
            self.nodes_visited,
            self.nodes_evaluated,
            self.max_depth_reached,
        )


@dataclass
class SearchResult:
    """
    Outcome of a completed search.

    move is None when the root position has no legal move.
    """

    move: Optional[int]
    value: float
    stats: SearchStats
    depth_limit: int
    root_values: List[float] = field(default_factory=list)

    @property
    def nodes_visited(self) -> int:
        return self.stats.nodes_visited

    @property
    def nodes_evaluated(self) -> int:
        return self.stats.nodes_evaluated

    @property
    def max_depth_reached(self) -> int:
        return self.stats.max_depth_reached

    @property
    def effective_branching_factor(self) -> float:
        return self.stats.effective_branching_factor


def select_root_move(
    moves: List[int],
    root_values: List[float],
    maximizing: bool,
) -> Optional[int]:
    """
    Pick the move whose recorded value is extreme for the side to move.

    Strict comparison: the first occurrence wins on ties, which is the
    lowest-numbered move because moves are generated in ascending order.
    """
    best_move = None
    best = -math.inf if maximizing else math.inf
    for move, value in zip(moves, root_values):
        if (maximizing and value > best) or (not maximizing and value < best):
            best = value
            best_move = move
    return best_move


class AlphaBetaSearch:
    """Alpha-beta search engine over any GameBase."""

    def run(self, game: GameBase, depth: int) -> SearchResult:
        """
        Search from game and return the chosen move and statistics.

        Args:
            game:  Root position. Not modified.
            depth: Depth limit in plies; 0 searches to the end of the game.

        Returns:
            SearchResult for the root position.
        """
        depth_limit = resolve_depth_limit(game, depth)
        maximizing = game.current_player() == PLAYER_ONE
        ctx = SearchContext(depth_limit=depth_limit)

        logger.debug(
            "alpha-beta start: %s %r depth_limit=%d maximizing=%s",
            game.game_id(), game, depth_limit, maximizing,
        )

        value = self.alphabeta(game, depth_limit, -math.inf, math.inf, maximizing, ctx)
        move = select_root_move(game.legal_moves(), ctx.root_values, maximizing)

        result = SearchResult(
            move=move,
            value=value,
            stats=ctx.stats(),
            depth_limit=depth_limit,
            root_values=list(ctx.root_values),
        )
        logger.debug(
            "alpha-beta done: move=%s value=%s visited=%d evaluated=%d max_depth=%d",
            result.move, result.value, result.nodes_visited,
            result.nodes_evaluated, result.max_depth_reached,
        )
        return result

    def alphabeta(
        self,
        game: GameBase,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        ctx: SearchContext,
    ) -> float:
        """
        Score game to the given remaining depth.

        Args:
            game:       Position to score.
            depth:      Remaining plies before the cutoff.
            alpha:      Best value the maximizer can already guarantee.
            beta:       Best value the minimizer can already guarantee.
            maximizing: True when player 1 is to move at this node.
            ctx:        Bookkeeping for the current search.

        Returns:
            Minimax value of the position (player 1's point of view).
        """
        ctx.nodes_visited += 1

        if maximizing:
            return self._max_value(game, depth, alpha, beta, ctx)
        return self._min_value(game, depth, alpha, beta, ctx)

    def _max_value(
        self,
        game: GameBase,
        depth: int,
        alpha: float,
        beta: float,
        ctx: SearchContext,
    ) -> float:
        ctx.max_depth_reached = max(ctx.max_depth_reached, ctx.depth_limit - depth)

        children = game.successors()
        if not children or depth == 0:
            ctx.nodes_evaluated += 1
            return game.evaluate()

        v = -math.inf
        for child in children:
            v = max(v, self.alphabeta(child, depth - 1, alpha, beta, False, ctx))
            if v >= beta:
                return v  # prune remaining children
            alpha = max(alpha, v)
            if ctx.depth_limit - depth == 0:
                ctx.root_values.append(v)

        return v

    def _min_value(
        self,
        game: GameBase,
        depth: int,
        alpha: float,
        beta: float,
        ctx: SearchContext,
    ) -> float:
        ctx.max_depth_reached = max(ctx.max_depth_reached, ctx.depth_limit - depth)

        children = game.successors()
        if not children or depth == 0:
            ctx.nodes_evaluated += 1
            return game.evaluate()

        v = math.inf
        for child in children:
            v = min(v, self.alphabeta(child, depth - 1, alpha, beta, True, ctx))
            if v <= alpha:
                return v  # prune remaining children
            beta = min(beta, v)
            if ctx.depth_limit - depth == 0:
                ctx.root_values.append(v)

        return v
