"""
Bot - abstract base for automated players.

A bot holds a player identity, a move enumerator and, optionally, a seed.
When seeded, the PRNG state is threaded through `prng_state` and replaced
after every draw, so a bot can be pickled or rebuilt between decisions
without losing its place in the random stream.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence, Union

from autoplay.core import prng
from autoplay.core.types import Action, Decision, PlayerID
from autoplay.games.game_state import Ctx, GameState

MoveEnumerator = Callable[[Any, Ctx, PlayerID], Union[Sequence[Action], int]]


class Bot(ABC):
    """Abstract base class for bots."""

    def __init__(
        self,
        next_moves: MoveEnumerator,
        player_id: PlayerID,
        seed: Any = None,
        prng_state: Optional[prng.PRNGState] = None,
    ):
        self.next_moves = next_moves
        self._player_id = player_id
        self.seed = seed
        self.prng_state = prng_state

    @property
    def player_id(self) -> PlayerID:
        """The player this bot moves for."""
        return self._player_id

    @property
    def is_seeded(self) -> bool:
        return self.seed is not None

    def random(self, arg: Union[None, int, Sequence[Any]] = None) -> Any:
        """
        Draw from this bot's random source.

        Args:
            arg: None for a real in [0, 1), an integer count n for an
                 index in [0, n), or a sequence to pick an element from.

        Raises:
            ValueError: on an empty sequence or a non-positive count.
        """
        if arg is None:
            value, state = prng.draw(self.seed, self.prng_state)
        elif prng.is_count(arg):
            value, state = prng.draw_index(int(arg), self.seed, self.prng_state)
        else:
            value, state = prng.choose(arg, self.seed, self.prng_state)

        if self.is_seeded:
            self.prng_state = state
        return value

    @abstractmethod
    def play(self, state: GameState) -> Decision:
        """Choose an action for the given state."""
        pass

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.get_name()}(player_id={self.player_id!r}, seed={self.seed!r})"
