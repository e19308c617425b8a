"""
Factory functions for creating games and bots.
"""

from typing import Any, Dict, Optional, Sequence

from autoplay.bots.base import Bot
from autoplay.core.types import DEFAULT_ITERATIONS, PlayerID
from autoplay.games.game_base import GameBase
from autoplay.utils.config import BOT_TYPES, GAMES


def create_game(game_name: str) -> GameBase:
    """
    Create a game instance.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")

    Returns:
        Game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    return GAMES[game_name]()


def player_seed(seed: Any, player_id: PlayerID) -> Optional[str]:
    """Distinct, reproducible seed per player derived from a match seed."""
    if seed is None:
        return None
    return f"{seed}-{player_id}"


def create_bot(
    kind: str,
    game: GameBase,
    player_id: PlayerID,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Any = None,
) -> Bot:
    """
    Create a single bot.

    Args:
        kind: Key from BOT_TYPES ("random" or "mcts")
        game: Game the bot will play
        player_id: Player the bot moves for
        iterations: MCTS iterations per move (ignored by other bots)
        seed: Bot seed (None = non-deterministic)
    """
    if kind not in BOT_TYPES:
        available = ", ".join(BOT_TYPES.keys())
        raise ValueError(f"Unknown bot type: {kind}. Available: {available}")

    if kind == "mcts":
        return BOT_TYPES[kind](game=game, player_id=player_id, seed=seed, iterations=iterations)
    return BOT_TYPES[kind](next_moves=game.valid_moves, player_id=player_id, seed=seed)


def create_bots(
    game: GameBase,
    kinds: Sequence[str],
    iterations: int = DEFAULT_ITERATIONS,
    seed: Any = None,
) -> Dict[PlayerID, Bot]:
    """
    Create one bot per player, in seating order.

    Returns:
        Dict mapping player ID to bot
    """
    players = game.player_order(game.num_players())
    if len(kinds) != len(players):
        raise ValueError(f"Expected {len(players)} bot types, got {len(kinds)}")

    return {
        pid: create_bot(kind, game, pid, iterations, player_seed(seed, pid))
        for pid, kind in zip(players, kinds)
    }
