"""
GameState - immutable game state container.

The core only ever reads `ctx`; `G` is opaque game data owned by the game.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from autoplay.core.types import GameOver, PlayerID


@dataclass(frozen=True)
class Ctx:
    """
    Turn metadata maintained by the reducer.

    action_players lists everyone currently eligible to act; the first
    entry is the acting player for single-actor decisions. It is empty
    once the game is over.
    """
    num_players: int
    current_player: PlayerID
    action_players: Tuple[PlayerID, ...]
    turn: int = 0
    gameover: Optional[GameOver] = None

    @property
    def is_over(self) -> bool:
        return self.gameover is not None

    def evolve(self, **changes) -> "Ctx":
        return replace(self, **changes)


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Game data plus turn metadata.

    Compared by identity: G may be a numpy array.
    """
    G: Any
    ctx: Ctx

    @property
    def is_terminal(self) -> bool:
        """True once the game is over or nobody can act."""
        return self.ctx.gameover is not None or len(self.ctx.action_players) == 0

    def copy(self) -> "GameState":
        """Deep copy of G; ctx is immutable and shared."""
        return GameState(copy.deepcopy(self.G), self.ctx)
