"""
Tests for stone_search.search.minimax

Plain minimax is the reference: pruning may only change node counts.
"""

import pytest

from stone_search.games.take_stones import TakeStones
from stone_search.search.alphabeta import AlphaBetaSearch
from stone_search.search.minimax import MinimaxSearch


class TestKnownPositions:
    """Hand-computed searches."""

    def test_three_stones_full_depth(self, minimax: MinimaxSearch, tiny_game):
        """Same tree as alpha-beta: nothing to prune."""
        result = minimax.run(tiny_game, 0)
        assert result.move == 1
        assert result.value == -1.0
        assert (result.nodes_visited, result.nodes_evaluated, result.max_depth_reached) == (4, 2, 2)

    def test_single_stone(self, minimax: MinimaxSearch):
        """Terminal root: evaluated once, no move."""
        result = minimax.run(TakeStones(1), 0)
        assert result.move is None
        assert result.nodes_visited == 1
        assert result.effective_branching_factor == 0.0

    def test_negative_depth_raises(self, minimax: MinimaxSearch, fresh_game):
        """Negative depth raises ValueError."""
        with pytest.raises(ValueError):
            minimax.run(fresh_game, -2)


class TestPruningCorrectness:
    """Alpha-beta against the unpruned reference."""

    @pytest.mark.parametrize("size", range(1, 11))
    def test_full_depth_values_match(self, alphabeta: AlphaBetaSearch, minimax: MinimaxSearch, size):
        """Same value and move from the initial position at full depth."""
        game = TakeStones(size)
        pruned = alphabeta.run(game, 0)
        full = minimax.run(game, 0)
        assert pruned.value == full.value
        assert pruned.move == full.move
        assert pruned.nodes_visited <= full.nodes_visited
        assert pruned.nodes_evaluated <= full.nodes_evaluated

    @pytest.mark.parametrize("depth", [1, 2, 3, 4, 0])
    def test_midgame_values_match(self, alphabeta: AlphaBetaSearch, minimax: MinimaxSearch,
                                  sample_positions, depth):
        """Same value and move from mid-game positions at several depths."""
        for game in sample_positions:
            pruned = alphabeta.run(game, depth)
            full = minimax.run(game, depth)
            assert pruned.value == pytest.approx(full.value)
            assert pruned.move == full.move
            assert pruned.nodes_visited <= full.nodes_visited

    def test_pruning_saves_nodes(self, alphabeta: AlphaBetaSearch, minimax: MinimaxSearch, midgame):
        """On a wide position alpha-beta visits strictly fewer nodes."""
        pruned = alphabeta.run(midgame, 0)
        full = minimax.run(midgame, 0)
        assert pruned.value == full.value
        assert pruned.nodes_visited < full.nodes_visited
