"""
MCTS node - one game state in the search tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from autoplay.core.types import Action
from autoplay.core.uct import uct_score
from autoplay.games.game_state import GameState


@dataclass(eq=False)
class MCTSNode:
    """
    A node in the MCTS search tree.

    Attributes:
        state: Game state at this node
        parent: Parent node (None for the root)
        parent_action: Action that produced this node (None for the root)
        actions: Legal actions not yet expanded into children
        children: Expanded children, in exploration order
        visits: Number of simulations that passed through this node
        value: Credit accumulated from those simulations
    """
    state: GameState
    parent: Optional["MCTSNode"] = field(default=None, repr=False)
    parent_action: Optional[Action] = None
    actions: List[Action] = field(default_factory=list)
    children: List["MCTSNode"] = field(default_factory=list, repr=False)
    visits: int = 0
    value: float = 0.0

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def is_fully_expanded(self) -> bool:
        """Check if all legal actions have been tried."""
        return len(self.actions) == 0

    @property
    def mean_value(self) -> float:
        return self.value / self.visits if self.visits else 0.0

    def best_child(self) -> "MCTSNode":
        """
        Child with the strictly greatest UCT score.

        The first child is the baseline; a later child replaces it only
        with a strictly greater score, so ties keep the earliest child.
        """
        selected = None
        best = 0.0
        for child in self.children:
            score = uct_score(child.value, child.visits, self.visits)
            if selected is None or score > best:
                best = score
                selected = child
        return selected

    def most_visited_child(self) -> Optional["MCTSNode"]:
        """Robust child: most visits, earliest child on ties."""
        selected = None
        for child in self.children:
            if selected is None or child.visits > selected.visits:
                selected = child
        return selected

    def walk(self) -> Iterator["MCTSNode"]:
        """Pre-order traversal of this subtree."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def depth(self) -> int:
        d, node = 0, self
        while node.parent is not None:
            d += 1
            node = node.parent
        return d

    def __repr__(self) -> str:
        return (f"MCTSNode(action={self.parent_action}, visits={self.visits}, "
                f"value={self.value:.2f}, children={len(self.children)}, "
                f"unexplored={len(self.actions)})")
