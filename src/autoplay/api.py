"""
Public API for running bot matches.

Usage:
    from autoplay import MCTSBot, RandomBot, TicTacToe, play_match

    game = TicTacToe()
    bots = {
        1: MCTSBot(game=game, player_id=1, seed="demo", iterations=200),
        2: RandomBot(next_moves=game.valid_moves, player_id=2, seed="demo"),
    }
    result = play_match(game, bots)
    print(result.state.ctx.gameover)
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, TYPE_CHECKING

from autoplay.bots import Bot, MCTSBot, MCTSNode, RandomBot
from autoplay.debug.viz import render_tree
from autoplay.games import GameState, initial_state
from autoplay.simulation import SimulationResult, simulate, step

if TYPE_CHECKING:
    from autoplay.core.types import PlayerID
    from autoplay.games.game_base import GameBase

logger = logging.getLogger(__name__)


def _describe_result(state: GameState) -> str:
    gameover = state.ctx.gameover
    if gameover is None:
        return "No result (no player can act)"
    if gameover.draw:
        return "Draw"
    return f"Player {gameover.winner} wins"


def play_match(
    game: "GameBase",
    bots: Mapping["PlayerID", Bot],
    state: Optional[GameState] = None,
    verbose: bool = True,
    show_tree: bool = False,
) -> SimulationResult:
    """
    Play a full match ply by ply, printing the board as it goes.

    Parameters
    ----------
    game : GameBase
        The game to play.
    bots : Mapping[PlayerID, Bot]
        Player ID -> bot for that player.
    state : GameState, optional
        State to start from (default: the game's initial state).
    verbose : bool
        If True, print the board after every ply.
    show_tree : bool
        If True, print the search tree behind each MCTS decision.

    Returns
    -------
    SimulationResult
        Final state and the metadata of the last decision.
    """
    state = state or initial_state(game)
    result = SimulationResult(state, None)

    if verbose:
        print(f"Starting {game.game_id()} with {len(bots)} bots")
        print(game.state_string(state.G))

    try:
        while True:
            player = state.ctx.action_players[0] if state.ctx.action_players else None
            last = step(game, bots, state)
            if last.state is state:
                break
            result, state = last, last.state

            if verbose:
                print(f"\nPlayer {player} ({bots[player].get_name()}) played: {last.action}")
                if show_tree and isinstance(last.metadata, MCTSNode):
                    print(render_tree(last.metadata, max_depth=1))
                print(game.state_string(state.G))

        if verbose:
            print("\n" + "=" * 40)
            print("GAME OVER: " + _describe_result(state))
            print("=" * 40)

    except Exception:
        logger.exception("Fatal error while playing %s", game.game_id())
        raise

    return result


__all__ = [
    "play_match",
    "step",
    "simulate",
    "SimulationResult",
    "Bot",
    "RandomBot",
    "MCTSBot",
]
