"""
GameBase - abstract base class for two-player searchable games.
"""

from abc import ABC, abstractmethod
from typing import List

from stone_search.games.game_state import GameState


class GameBase(ABC):
    """
    Interface the search engines walk: a two-player, zero-sum position.

    A position handed to a search is treated as read-only. Children come
    from successors(), each on its own copied board, and every score is
    read from player 1's side (player 1 maximizes, player 2 minimizes).
    """

    @abstractmethod
    def game_id(self) -> str:
        """Short name of the game, used in search log lines."""
        pass

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Used for every successor the search generates.
        """
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return ID of player to act (1 maximizes, 2 minimizes)."""
        pass

    @abstractmethod
    def move_limit(self) -> int:
        """Upper bound on the number of plies a game can last."""
        pass

    @abstractmethod
    def legal_moves(self) -> List[int]:
        """Return all legal moves from the current state, in generation order."""
        pass

    @abstractmethod
    def successors(self) -> List["GameBase"]:
        """One child position per legal move, in legal_moves() order."""
        pass

    @abstractmethod
    def apply_move(self, move: int, *, validated: bool = False) -> None:
        """
        Take one stone in place; used while building a child or replaying.

        Args:
            move: Stone index to take.
            validated: The move is already known to be in legal_moves(),
                so the legality check is skipped.
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the side to move has no legal move."""
        pass

    @abstractmethod
    def evaluate(self) -> float:
        """Static score in [-1.0, 1.0] from player 1's point of view."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
