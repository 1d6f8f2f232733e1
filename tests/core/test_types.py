"""
Tests for stone_search.core.types

Tests constants and the SearchStats counters.
"""

import pytest

from stone_search.core.types import (
    SearchStats,
    PLAYER_ONE, PLAYER_TWO, NO_MOVE,
    WIN_SCORE, LOSS_SCORE, NEUTRAL_SCORE,
    ONE_TAKEN_SCORE, PRIME_SCORE, COMPOSITE_SCORE,
    SCORE_MIN, SCORE_MAX,
)


class TestConstants:
    """Tests for module constants."""

    def test_scores_within_bounds(self):
        """Every score lies in [SCORE_MIN, SCORE_MAX]."""
        for score in (WIN_SCORE, LOSS_SCORE, NEUTRAL_SCORE,
                      ONE_TAKEN_SCORE, PRIME_SCORE, COMPOSITE_SCORE):
            assert SCORE_MIN <= score <= SCORE_MAX
            assert SCORE_MIN <= -score <= SCORE_MAX

    def test_players_distinct(self):
        """Player 1 and player 2 have distinct ids."""
        assert PLAYER_ONE != PLAYER_TWO

    def test_no_move_is_not_a_stone(self):
        """Sentinel can never be a stone index."""
        assert NO_MOVE < 1


class TestSearchStats:
    """SearchStats tests."""

    def test_defaults_zero(self):
        """Default stats are all zero."""
        s = SearchStats()
        assert s == (0, 0, 0)

    def test_immutable(self):
        """SearchStats is immutable (NamedTuple)."""
        s = SearchStats(4, 2, 2)
        with pytest.raises(AttributeError):
            s.nodes_visited = 99

    def test_nodes_expanded(self):
        """Expanded nodes are visited minus evaluated."""
        assert SearchStats(10, 6, 3).nodes_expanded == 4

    def test_effective_branching_factor(self):
        """(visited - 1) / (visited - evaluated)."""
        assert SearchStats(4, 2, 2).effective_branching_factor == pytest.approx(1.5)
        assert SearchStats(3, 2, 1).effective_branching_factor == pytest.approx(2.0)

    def test_branching_factor_when_nothing_expanded(self):
        """Terminal root: no expansion, branching factor defined as 0.0."""
        assert SearchStats(1, 1, 0).effective_branching_factor == 0.0
