"""
Simulation harness - drive a game with bots.

step() advances one ply; simulate() runs until the game is over or nobody
can act. Both ask the first acting player's bot for a move and apply it
through a reducer bound to the game and the state's player count.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, TYPE_CHECKING

from autoplay.core.hashing import hash_state
from autoplay.core.types import Action, Decision, PlayerID
from autoplay.games.game_state import GameState
from autoplay.games.reducer import Reducer, create_game_reducer

if TYPE_CHECKING:
    from autoplay.bots.base import Bot
    from autoplay.games.game_base import GameBase

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """
    State after the last ply, and the metadata of the decision that produced it.

    action is the last action applied (None if no ply ran).
    """
    state: GameState
    metadata: Any = None
    action: Optional[Action] = None


def _can_act(state: GameState) -> bool:
    return state.ctx.gameover is None and len(state.ctx.action_players) > 0


def _advance(
    reducer: Reducer, bots: Mapping[PlayerID, "Bot"], state: GameState
) -> Tuple[GameState, Decision]:
    player_id = state.ctx.action_players[0]
    try:
        bot = bots[player_id]
    except KeyError:
        raise KeyError(f"No bot registered for player {player_id!r}") from None

    decision = bot.play(state)
    new_state = reducer(state, decision.action)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Turn %d: player %r plays %s -> %s",
            state.ctx.turn, player_id, decision.action, hash_state(new_state.G),
        )
    return new_state, decision


def step(game: "GameBase", bots: Mapping[PlayerID, "Bot"], state: GameState) -> SimulationResult:
    """
    Advance one ply.

    Returns the input state unchanged (metadata None) when the game is
    over or no player can act.
    """
    if not _can_act(state):
        return SimulationResult(state, None)

    reducer = create_game_reducer(game, state.ctx.num_players)
    new_state, decision = _advance(reducer, bots, state)
    return SimulationResult(new_state, decision.metadata, decision.action)


def simulate(
    game: "GameBase",
    bots: Mapping[PlayerID, "Bot"],
    state: GameState,
    max_steps: Optional[int] = None,
) -> SimulationResult:
    """
    Play until the game is over or no player can act.

    Args:
        game: Game description
        bots: Player ID -> bot
        state: State to start from
        max_steps: Optional cap on plies (None = until the game ends)

    Returns:
        Final state and the metadata of the last decision (None if no ply ran)
    """
    reducer = create_game_reducer(game, state.ctx.num_players)

    decision = None
    plies = 0
    while _can_act(state):
        if max_steps is not None and plies >= max_steps:
            logger.info("Stopped %s after %d plies", game.game_id(), plies)
            break
        state, decision = _advance(reducer, bots, state)
        plies += 1

    logger.debug("%s finished after %d plies: %s", game.game_id(), plies, state.ctx.gameover)
    if decision is None:
        return SimulationResult(state, None)
    return SimulationResult(state, decision.metadata, decision.action)
