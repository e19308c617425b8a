"""
TicTacToe game description.

Uses int8 board as G:
    0 = empty
    1 = player 1 (X)
    2 = player 2 (O)
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from autoplay.core.types import Action, GameOver, PlayerID, make_move
from autoplay.games.game_base import GameBase
from autoplay.games.game_state import Ctx

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

# Pre-computed winning lines (indices into flattened 3x3 board)
_WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)

PLACE = "place"


class TicTacToe(GameBase):
    """Two-player TicTacToe on a numpy board."""

    def game_id(self) -> str:
        return "tic_tac_toe"

    def num_players(self) -> int:
        return 2

    def setup(self, num_players: int) -> np.ndarray:
        if num_players != 2:
            raise ValueError(f"TicTacToe needs 2 players, got {num_players}")
        return np.zeros((3, 3), dtype=np.int8)

    def valid_moves(self, G: np.ndarray, ctx: Ctx, player_id: PlayerID) -> List[Action]:
        """Empty cells as place(row, col) actions, row-major."""
        if ctx.gameover is not None or player_id not in ctx.action_players:
            return []
        return [make_move(PLACE, (int(r), int(c)), player_id) for r, c in np.argwhere(G == 0)]

    def apply_move(self, G: np.ndarray, ctx: Ctx, action: Action) -> None:
        if action.move != PLACE:
            raise ValueError(f"Unknown move: {action.move}")
        r, c = action.args

        if G[r, c] != 0:
            raise ValueError(f"Cell ({r},{c}) is occupied")

        G[r, c] = action.player_id

    def end_if(self, G: np.ndarray, ctx: Ctx) -> Optional[GameOver]:
        winner = self._compute_winner(G)
        if winner != 0:
            return GameOver(winner=winner)
        if not np.any(G == 0):
            return GameOver(draw=True)
        return None

    def _compute_winner(self, G: np.ndarray) -> int:
        """Return the winning marker, or 0."""
        flat = G.ravel()
        for line in _WIN_LINES:
            v = flat[line[0]]
            if v != 0 and flat[line[1]] == v and flat[line[2]] == v:
                return int(v)
        return 0

    def state_string(self, G: np.ndarray) -> str:
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(CELL_STRINGS[int(G[i, j])] for j in range(3)) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
