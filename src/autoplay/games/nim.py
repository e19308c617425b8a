"""
Nim - single-pile subtraction game.

Players alternate taking 1..max_take objects from a pile; whoever takes
the last object wins. Small enough for exhaustive tests, and positions
with pile % (max_take + 1) != 0 have a known winning reply.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from autoplay.core.types import Action, GameOver, PlayerID, make_move
from autoplay.games.game_base import GameBase
from autoplay.games.game_state import Ctx

TAKE = "take"


class Nim(GameBase):
    """Last-object-wins Nim for any number of players."""

    def __init__(self, pile: int = 7, max_take: int = 3, players: int = 2):
        if pile < 1 or max_take < 1:
            raise ValueError("pile and max_take must be positive")
        self.pile = pile
        self.max_take = max_take
        self.players = players

    def game_id(self) -> str:
        return "nim"

    def num_players(self) -> int:
        return self.players

    def setup(self, num_players: int) -> Dict[str, int]:
        return {"pile": self.pile}

    def valid_moves(self, G: Dict[str, int], ctx: Ctx, player_id: PlayerID) -> List[Action]:
        if ctx.gameover is not None or player_id not in ctx.action_players:
            return []
        most = min(self.max_take, G["pile"])
        return [make_move(TAKE, (n,), player_id) for n in range(1, most + 1)]

    def apply_move(self, G: Dict[str, int], ctx: Ctx, action: Action) -> None:
        if action.move != TAKE:
            raise ValueError(f"Unknown move: {action.move}")
        (n,) = action.args
        if not 1 <= n <= min(self.max_take, G["pile"]):
            raise ValueError(f"Cannot take {n} from a pile of {G['pile']}")
        G["pile"] -= n

    def end_if(self, G: Dict[str, int], ctx: Ctx) -> Optional[GameOver]:
        if G["pile"] == 0:
            return GameOver(winner=ctx.current_player)
        return None

    def state_string(self, G: Dict[str, int]) -> str:
        return f"pile: {G['pile']:>2} " + "|" * G["pile"]
