"""
Take-stones game implementation.

Stones are numbered 1..size. Players alternate taking one stone:
    - The opening move must be an odd number strictly below size / 2.
    - Every later move must be an available stone that divides, or is a
      multiple of, the stone taken last.
The player left without a legal move loses.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from stone_search.core.primes import is_prime, largest_prime_factor
from stone_search.core.types import (
    COMPOSITE_SCORE,
    LOSS_SCORE,
    NEUTRAL_SCORE,
    NO_MOVE,
    ONE_TAKEN_SCORE,
    PLAYER_ONE,
    PLAYER_TWO,
    PRIME_SCORE,
    WIN_SCORE,
)
from stone_search.games.game_base import GameBase
from stone_search.games.game_rules import (
    board_full,
    count_available_multiples,
    opening_moves,
    related_moves,
    taken_count,
)
from stone_search.games.game_state import GameState


class TakeStones(GameBase):
    """Take-stones divisor game over a numpy bool board."""

    __slots__ = ('state',)

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"size must be an integer, got {type(size).__name__}")
        if size < 1:
            raise ValueError(f"size must be a positive integer, got {size}")
        self.state = GameState.initial(size)

    @classmethod
    def from_moves(cls, size: int, moves: Iterable[int]) -> "TakeStones":
        """Replay moves in order from the initial position, validating each."""
        game = cls(size)
        for move in moves:
            if isinstance(move, bool) or not isinstance(move, (int, np.integer)):
                raise TypeError(f"moves must be integers, got {move!r}")
            game.apply_move(int(move))
        return game

    def game_id(self) -> str:
        return "take_stones"

    def deep_clone(self) -> "TakeStones":
        g = TakeStones.__new__(TakeStones)
        g.state = self.state.copy()
        return g

    def get_state(self) -> GameState:
        return self.state

    @property
    def size(self) -> int:
        return self.state.size

    @property
    def last_move(self) -> int:
        return self.state.last_move

    def is_available(self, stone: int) -> bool:
        return bool(self.state.stones[stone])

    def taken(self) -> int:
        return taken_count(self.state.stones)

    def current_player(self) -> int:
        return PLAYER_ONE if self.taken() % 2 == 0 else PLAYER_TWO

    def move_limit(self) -> int:
        return self.size

    def legal_moves(self) -> List[int]:
        """Legal stones in ascending order."""
        if self.state.last_move == NO_MOVE:
            moves = opening_moves(self.size)
        else:
            moves = related_moves(self.state.stones, self.state.last_move)
        return [int(m) for m in moves]

    def successors(self) -> List["TakeStones"]:
        children = []
        for move in self.legal_moves():
            child = self.deep_clone()
            child.apply_move(move, validated=True)
            children.append(child)
        return children

    def apply_move(self, move: int, *, validated: bool = False) -> None:
        if not validated and move not in self.legal_moves():
            raise ValueError(f"Illegal move {move} (last move: {self.state.last_move})")

        self.state.stones[move] = False
        self.state.last_move = move

    def is_over(self) -> bool:
        return not self.legal_moves()

    def evaluate(self) -> float:
        """
        Static board evaluation from player 1's point of view.

        Rules, in order:
          1. Stone 1 still available: 0.
          2. Game over: whoever took the last stone wins (+1 odd taken, -1 even).
          3. Otherwise score the last move for the side to move, then mirror
             the sign when player 2 is to move:
               last move 1          -> 0.5 if the remaining count is odd
               last move prime      -> 0.7 if its available multiples are odd
               last move composite  -> 0.6 if the available multiples of its
                                       largest prime factor are odd
             and the negated score otherwise.
        """
        stones = self.state.stones
        if stones[1]:
            return NEUTRAL_SCORE

        taken = self.taken()
        if board_full(stones) or self.is_over():
            return WIN_SCORE if taken % 2 == 1 else LOSS_SCORE

        last = self.state.last_move
        if last == 1:
            odd = (self.size - taken) % 2 == 1
            score = ONE_TAKEN_SCORE
        elif is_prime(last):
            odd = count_available_multiples(stones, last) % 2 == 1
            score = PRIME_SCORE
        else:
            factor = largest_prime_factor(last)
            odd = count_available_multiples(stones, factor) % 2 == 1
            score = COMPOSITE_SCORE

        if not odd:
            score = -score
        sign = 1.0 if self.current_player() == PLAYER_ONE else -1.0
        return sign * score

    def state_string(self) -> str:
        cells = " ".join(
            f"{i:>2}" if self.is_available(i) else " ." for i in range(1, self.size + 1)
        )
        last = "-" if self.state.last_move == NO_MOVE else str(self.state.last_move)
        return (
            f"[{cells} ]\n"
            f"taken: {self.taken()}/{self.size}  last move: {last}  "
            f"to move: player {self.current_player()}"
        )

    def __repr__(self) -> str:
        return f"TakeStones(size={self.size}, last_move={self.state.last_move}, taken={self.taken()})"
