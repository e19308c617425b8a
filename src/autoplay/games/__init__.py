"""
Games module - game descriptions and the reducer that drives them.
"""

from autoplay.games.game_state import Ctx, GameState
from autoplay.games.game_base import GameBase
from autoplay.games.reducer import Reducer, create_game_reducer, initial_state
from autoplay.games.tic_tac_toe import TicTacToe
from autoplay.games.nim import Nim

__all__ = [
    "Ctx",
    "GameState",
    "GameBase",
    "Reducer",
    "create_game_reducer",
    "initial_state",
    "TicTacToe",
    "Nim",
]
