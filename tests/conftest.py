"""
Shared test fixtures for autoplay tests.

Design principles:
- Game-agnostic fixtures where possible
- Tiny games so searches finish instantly
- Minimal, focused fixtures
"""

from typing import Dict, List, Optional

import pytest

from autoplay.bots import Bot, MCTSBot, RandomBot
from autoplay.core.types import Action, GameOver, make_move
from autoplay.games import GameBase, GameState, Nim, TicTacToe, initial_state
from autoplay.games.game_state import Ctx


# =============================================================================
# Test Games
# =============================================================================

class CoinGame(GameBase):
    """
    Every ply the acting player calls "A" or "B".

    After `length` plies player 1 wins if an even number of "A" calls were
    made, otherwise player 2 wins.
    """

    def __init__(self, length: int = 4):
        self.length = length

    def game_id(self) -> str:
        return "coin"

    def num_players(self) -> int:
        return 2

    def setup(self, num_players: int) -> List[str]:
        return []

    def valid_moves(self, G: List[str], ctx: Ctx, player_id) -> List[Action]:
        if ctx.gameover is not None or player_id not in ctx.action_players:
            return []
        return [make_move("A", (), player_id), make_move("B", (), player_id)]

    def apply_move(self, G: List[str], ctx: Ctx, action: Action) -> None:
        G.append(action.move)

    def end_if(self, G: List[str], ctx: Ctx) -> Optional[GameOver]:
        if len(G) < self.length:
            return None
        return GameOver(winner=1 if G.count("A") % 2 == 0 else 2)

    def state_string(self, G: List[str]) -> str:
        return "".join(G)


class StalledGame(CoinGame):
    """Nobody can act after the first ply, yet the game never ends."""

    def game_id(self) -> str:
        return "stalled"

    def end_if(self, G: List[str], ctx: Ctx) -> Optional[GameOver]:
        return None

    def next_players(self, G, ctx: Ctx) -> list:
        return []


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def coin_game() -> CoinGame:
    return CoinGame(length=4)


@pytest.fixture
def stalled_game() -> StalledGame:
    return StalledGame()


@pytest.fixture
def nim() -> Nim:
    """Nim with 5 objects: taking 1 is the only winning first move."""
    return Nim(pile=5, max_take=3)


@pytest.fixture
def tic_tac_toe() -> TicTacToe:
    return TicTacToe()


@pytest.fixture
def coin_state(coin_game: CoinGame) -> GameState:
    return initial_state(coin_game)


@pytest.fixture
def nim_state(nim: Nim) -> GameState:
    return initial_state(nim)


# =============================================================================
# Bot Fixtures
# =============================================================================

@pytest.fixture
def random_bots(coin_game: CoinGame) -> Dict[int, Bot]:
    """Seeded random bots for both coin game players."""
    return {
        pid: RandomBot(next_moves=coin_game.valid_moves, player_id=pid, seed=f"coin-{pid}")
        for pid in (1, 2)
    }


@pytest.fixture
def make_mcts_bots():
    """Factory for seeded MCTS bots for every player of a game."""

    def _make(game: GameBase, iterations: int = 50, seed: str = "mcts") -> Dict[int, Bot]:
        return {
            pid: MCTSBot(game=game, player_id=pid, seed=f"{seed}-{pid}", iterations=iterations)
            for pid in game.player_order(game.num_players())
        }

    return _make
