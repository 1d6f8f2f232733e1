"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the search system:
- Player ids and the no-move sentinel
- Static evaluation scores
- SearchStats: node counters with derived statistics
"""

from __future__ import annotations

from typing import NamedTuple


# ─── Players ──────────────────────────────────────────────────────────────────

PLAYER_ONE = 1  # Maximizer: moves when an even number of stones is taken
PLAYER_TWO = 2  # Minimizer

# Sentinel for "no stone taken yet"
NO_MOVE = -1


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                    STATIC EVALUATION SCORES                                 ║
# ║                                                                             ║
# ║  All scores are from player 1's point of view and lie in [-1.0, 1.0].       ║
# ║  The heuristic scores are mirrored (negated) when player 2 is to move.      ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

WIN_SCORE = 1.0
LOSS_SCORE = -1.0
NEUTRAL_SCORE = 0.0

ONE_TAKEN_SCORE = 0.5      # Last move was stone 1
PRIME_SCORE = 0.7          # Last move was a prime
COMPOSITE_SCORE = 0.6      # Last move was composite

SCORE_MIN = LOSS_SCORE
SCORE_MAX = WIN_SCORE


class SearchStats(NamedTuple):
    """Node counters collected by one search, with derived statistics."""

    nodes_visited: int = 0
    nodes_evaluated: int = 0
    max_depth_reached: int = 0

    @property
    def nodes_expanded(self) -> int:
        """Interior nodes: visited but not statically evaluated."""
        return self.nodes_visited - self.nodes_evaluated

    @property
    def effective_branching_factor(self) -> float:
        """
        Average number of children per expanded node.

        Every visited node except the root is somebody's child, so this is
        (visited - 1) / expanded. Returns 0.0 when no node was expanded
        (the root itself was evaluated).
        """
        expanded = self.nodes_expanded
        if expanded == 0:
            return 0.0
        return (self.nodes_visited - 1) / expanded
