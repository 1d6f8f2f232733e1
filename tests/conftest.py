"""
Shared test fixtures for stone_search tests.

Design principles:
- Small boards so full-depth searches stay fast
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Iterator, List

import pytest

from stone_search.games.game_base import GameBase
from stone_search.games.take_stones import TakeStones
from stone_search.search.alphabeta import AlphaBetaSearch
from stone_search.search.minimax import MinimaxSearch


# =============================================================================
# Helpers
# =============================================================================

def walk(game: GameBase, depth: int) -> Iterator[GameBase]:
    """Yield game and every descendant down to depth plies."""
    yield game
    if depth == 0:
        return
    for child in game.successors():
        yield from walk(child, depth - 1)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def fresh_game() -> TakeStones:
    """Seven stones, nothing taken."""
    return TakeStones(7)


@pytest.fixture
def tiny_game() -> TakeStones:
    """Three stones: the only opening is 1, then 2 or 3 ends the game."""
    return TakeStones(3)


@pytest.fixture
def midgame() -> TakeStones:
    """Ten stones after 3 then 1; player 1 to move with a wide choice."""
    return TakeStones.from_moves(10, [3, 1])


@pytest.fixture
def sample_positions() -> List[TakeStones]:
    """Positions covering both sides to move and every evaluation branch."""
    return [
        TakeStones(7),
        TakeStones.from_moves(7, [3]),
        TakeStones.from_moves(7, [3, 1]),
        TakeStones.from_moves(10, [1, 4]),
        TakeStones.from_moves(10, [3, 1, 5]),
        TakeStones.from_moves(12, [1, 6]),
    ]


@pytest.fixture
def tree_positions() -> List[GameBase]:
    """Every position reachable within five plies of a nine-stone game."""
    return list(walk(TakeStones(9), 5))


# =============================================================================
# Search Fixtures
# =============================================================================

@pytest.fixture
def alphabeta() -> AlphaBetaSearch:
    return AlphaBetaSearch()


@pytest.fixture
def minimax() -> MinimaxSearch:
    return MinimaxSearch()
