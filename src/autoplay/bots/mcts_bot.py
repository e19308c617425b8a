"""
MCTS bot - Monte Carlo Tree Search with UCT selection.

Each decision runs a fixed number of iterations of the four phases:
Selection, Expansion, Playout, Backpropagation. The tree is built fresh
for every play() call; only the bot's PRNG chain survives between calls,
so a seeded bot replays the same decisions from the same states.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, TYPE_CHECKING

from autoplay.bots.base import Bot, MoveEnumerator
from autoplay.bots.node import MCTSNode
from autoplay.core import prng
from autoplay.core.types import (
    Action,
    Decision,
    GameOver,
    PlayerID,
    DEFAULT_ITERATIONS,
    DRAW_CREDIT,
    WIN_CREDIT,
)
from autoplay.games.game_state import GameState
from autoplay.games.reducer import create_game_reducer

if TYPE_CHECKING:
    from autoplay.games.game_base import GameBase

logger = logging.getLogger(__name__)


class MCTSBot(Bot):
    """
    Monte Carlo Tree Search bot.

    The root enumerates only this bot's own moves; internal nodes pool the
    moves of every player in ctx.action_players, while playouts follow the
    first acting player only. That matches strictly alternating games.
    """

    def __init__(
        self,
        game: "GameBase",
        player_id: PlayerID,
        next_moves: Optional[MoveEnumerator] = None,
        seed: Any = None,
        iterations: int = DEFAULT_ITERATIONS,
        num_players: Optional[int] = None,
        prng_state: Optional[prng.PRNGState] = None,
    ):
        """
        Initialize MCTS bot.

        Args:
            game: Game the reducer is bound to
            player_id: Player this bot moves for
            next_moves: Move enumerator (defaults to game.valid_moves)
            seed: Seed for reproducible search (None = non-deterministic)
            iterations: Select/expand/playout/backpropagate rounds per move
            num_players: Fix the reducer's player count (None = from state)
            prng_state: Saved PRNG state to resume from
        """
        super().__init__(next_moves or game.valid_moves, player_id, seed, prng_state)
        self.game = game
        self.iterations = iterations or DEFAULT_ITERATIONS
        self.reducer = create_game_reducer(game, num_players)

    # -------------------------------------------------------------------------
    # Tree construction
    # -------------------------------------------------------------------------

    def create_node(
        self,
        state: GameState,
        parent_action: Optional[Action] = None,
        parent: Optional[MCTSNode] = None,
        player_id: Optional[PlayerID] = None,
    ) -> MCTSNode:
        """
        Create a node with its unexplored actions.

        With player_id, only that player's moves are enumerated (the root).
        Otherwise every acting player's moves are concatenated.
        """
        G, ctx = state.G, state.ctx
        actions: List[Action] = []

        if player_id is not None:
            actions.extend(self.next_moves(G, ctx, player_id))
        else:
            for pid in ctx.action_players:
                actions.extend(self.next_moves(G, ctx, pid))

        return MCTSNode(state=state, parent=parent, parent_action=parent_action, actions=actions)

    # -------------------------------------------------------------------------
    # The four phases
    # -------------------------------------------------------------------------

    def select(self, node: MCTSNode) -> MCTSNode:
        """Descend by UCT until a node with unexplored actions or no children."""
        while node.is_fully_expanded() and node.children:
            node = node.best_child()
        return node

    def expand(self, node: MCTSNode) -> MCTSNode:
        """Expand one random unexplored action. Returns the new child, or node."""
        if node.is_fully_expanded() or node.state.ctx.gameover is not None:
            return node

        idx = self.random(len(node.actions))
        action = node.actions.pop(idx)
        child_state = self.reducer(node.state, action)
        child = self.create_node(child_state, parent_action=action, parent=node)
        node.children.append(child)
        return child

    def playout(self, node: MCTSNode) -> GameOver:
        """Play uniformly random moves for the first acting player until the game ends."""
        state = node.state

        while state.ctx.gameover is None:
            ctx = state.ctx
            if not ctx.action_players:
                raise RuntimeError(
                    f"Playout reached turn {ctx.turn} with no acting players and no result"
                )
            moves = self.next_moves(state.G, ctx, ctx.action_players[0])
            state = self.reducer(state, self.random(moves))

        return state.ctx.gameover

    def backpropagate(self, node: Optional[MCTSNode], result: GameOver) -> None:
        """Credit the result to node and every ancestor up to the root."""
        while node is not None:
            node.visits += 1

            if result.draw:
                node.value += DRAW_CREDIT
            elif node.parent_action is not None and node.parent_action.player_id == result.winner:
                node.value += WIN_CREDIT

            node = node.parent

    # -------------------------------------------------------------------------
    # Decision
    # -------------------------------------------------------------------------

    def search(self, state: GameState) -> MCTSNode:
        """Run all iterations from a fresh root and return it."""
        root = self.create_node(state, player_id=self.player_id)
        if root.is_fully_expanded():
            raise ValueError(f"No legal actions available for player {self.player_id!r}")

        for _ in range(self.iterations):
            leaf = self.select(root)
            child = self.expand(leaf)
            result = self.playout(child)
            self.backpropagate(child, result)

        return root

    def play(self, state: GameState) -> Decision:
        """Search and return the most visited root child's action."""
        root = self.search(state)

        selected = root.most_visited_child()
        if selected is None:
            raise RuntimeError("MCTS search produced no children; is the state terminal?")

        logger.debug(
            "Player %r: %d iterations, %d children, chose %s (%d visits, %.2f value)",
            self.player_id, self.iterations, len(root.children),
            selected.parent_action, selected.visits, selected.value,
        )

        return Decision(action=selected.parent_action, metadata=root)
