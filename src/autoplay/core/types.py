"""
Core types, constants, and data structures.

This module contains the fundamental types shared by games, bots and the
simulation harness:
- Action: an immutable move tagged with the player who makes it
- GameOver: the terminal result of a game
- Decision: what a bot returns from play()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, NamedTuple, Optional, Tuple


PlayerID = Hashable


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                          SEARCH DEFAULTS                                    ║
# ║                                                                             ║
# ║  UCT score:  value / visits + sqrt(EXPLORATION * ln(N) / visits)            ║
# ║  Credit:     WIN_CREDIT for the mover who won, DRAW_CREDIT on a draw        ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

DEFAULT_ITERATIONS = 500

EXPLORATION = 2.0

WIN_CREDIT = 1.0
DRAW_CREDIT = 0.5

# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Action:
    """
    A single move produced by a move enumerator.

    `player_id` is the acting player; MCTS result attribution compares it
    against the winner of a playout.
    """
    player_id: PlayerID
    move: str
    args: Tuple[Any, ...] = ()

    def __str__(self) -> str:
        args = ",".join(map(str, self.args))
        return f"{self.move}({args})@{self.player_id}"


def make_move(move: str, args: Tuple[Any, ...] = (), player_id: PlayerID = None) -> Action:
    """Build an Action, normalising args into a tuple."""
    if not isinstance(args, tuple):
        args = tuple(args) if isinstance(args, list) else (args,)
    return Action(player_id=player_id, move=move, args=args)


class GameOver(NamedTuple):
    """Terminal result: either a winner or a draw."""

    winner: Optional[PlayerID] = None
    draw: bool = False


@dataclass
class Decision:
    """
    A move chosen by a bot.

    metadata carries bot-specific diagnostics (the MCTS root node),
    or None for bots that have none.
    """
    action: Action
    metadata: Any = None
