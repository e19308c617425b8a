"""
Game reducer - deterministic state transitions built from a GameBase.

create_game_reducer() binds a game (and optionally a fixed player count)
and returns a plain callable:

    reducer(state, action) -> new_state

Every call produces a distinct snapshot; the input state is never mutated.
"""

from __future__ import annotations

import copy
import logging
from typing import Callable, Optional, TYPE_CHECKING

from autoplay.core.types import Action
from autoplay.games.game_state import Ctx, GameState

if TYPE_CHECKING:
    from autoplay.games.game_base import GameBase

logger = logging.getLogger(__name__)

Reducer = Callable[[GameState, Action], GameState]


def initial_state(game: "GameBase", num_players: Optional[int] = None) -> GameState:
    """Build the starting state of a game."""
    n = game.num_players() if num_players is None else num_players
    if n < 1:
        raise ValueError(f"num_players must be positive, got {n}")

    first = game.player_order(n)[0]
    ctx = Ctx(num_players=n, current_player=first, action_players=(first,))
    return GameState(game.setup(n), ctx)


def create_game_reducer(game: "GameBase", num_players: Optional[int] = None) -> Reducer:
    """
    Bind a reducer to a game.

    Args:
        game: Game description.
        num_players: Fixed player count. When None, each state's own
                     ctx.num_players is used.

    Returns:
        reducer(state, action) -> new state
    """

    def reducer(state: GameState, action: Action) -> GameState:
        ctx = state.ctx
        if num_players is not None and ctx.num_players != num_players:
            ctx = ctx.evolve(num_players=num_players)

        if ctx.gameover is not None:
            raise ValueError(f"Game is over, cannot apply {action}")
        if action.player_id not in ctx.action_players:
            raise ValueError(
                f"Player {action.player_id!r} cannot act now "
                f"(action players: {list(ctx.action_players)})"
            )

        G = copy.deepcopy(state.G)
        acting = ctx.evolve(current_player=action.player_id)
        game.apply_move(G, acting, action)

        gameover = game.end_if(G, acting)
        if gameover is not None:
            logger.debug("%s over after turn %d: %s", game.game_id(), ctx.turn + 1, gameover)
            new_ctx = acting.evolve(turn=ctx.turn + 1, action_players=(), gameover=gameover)
            return GameState(G, new_ctx)

        players = tuple(game.next_players(G, acting))
        new_ctx = acting.evolve(
            turn=ctx.turn + 1,
            current_player=players[0] if players else acting.current_player,
            action_players=players,
        )
        return GameState(G, new_ctx)

    return reducer
