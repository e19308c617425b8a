"""
Random bot - picks uniformly among the legal moves.

Used for:
- Baseline comparison
- Opponents in tests
"""

from __future__ import annotations

from autoplay.bots.base import Bot
from autoplay.core import prng
from autoplay.core.types import Decision
from autoplay.games.game_state import GameState


class RandomBot(Bot):
    """
    Uniform-random bot.

    The enumerator may return either a list of actions or a plain count;
    for a count the chosen index itself is the action.
    """

    def play(self, state: GameState) -> Decision:
        moves = self.next_moves(state.G, state.ctx, self.player_id)

        if not prng.is_count(moves) and len(moves) == 0:
            raise ValueError(f"No legal actions available for player {self.player_id!r}")

        return Decision(action=self.random(moves))
