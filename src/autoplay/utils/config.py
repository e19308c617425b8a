"""
Configuration and game/bot registries.
"""

from typing import Any, Optional, Sequence

from autoplay.bots import MCTSBot, RandomBot
from autoplay.core.types import DEFAULT_ITERATIONS
from autoplay.games import Nim, TicTacToe


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": TicTacToe,
    "nim": Nim,
}

BOT_TYPES = {
    "random": RandomBot,
    "mcts": MCTSBot,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

def _expand_bot_types(bot_types: Sequence[str], num_players: int) -> tuple:
    """One bot type per player; a single type is used for everyone."""
    if len(bot_types) == 1:
        return tuple(bot_types) * num_players
    if len(bot_types) != num_players:
        raise ValueError(
            f"Expected {num_players} bot types, got {len(bot_types)}: {list(bot_types)}"
        )
    return tuple(bot_types)


class Config:
    """Match configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        bot_types: Sequence[str] = ("mcts", "random"),
        iterations: int = DEFAULT_ITERATIONS,
        seed: Optional[Any] = None,
    ):
        self.game_name = game_name
        self.iterations = iterations
        self.seed = seed

        # Derive dependent values
        game_class = GAMES[game_name]
        self.num_players = game_class().num_players()

        unknown = [b for b in bot_types if b not in BOT_TYPES]
        if unknown:
            available = ", ".join(BOT_TYPES.keys())
            raise ValueError(f"Unknown bot type(s): {unknown}. Available: {available}")

        self.bot_types = _expand_bot_types(bot_types, self.num_players)


# Default configuration
DEFAULT_CONFIG = Config()
