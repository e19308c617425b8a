"""
autoplay - Automated players for turn-based games.

This package drives games described by a deterministic reducer with
pluggable bots: a uniform-random baseline and a Monte Carlo Tree Search
bot with UCT selection. Seeded bots are bit-for-bit reproducible.

Quick Start:
    from autoplay import MCTSBot, RandomBot, TicTacToe, initial_state, simulate

    game = TicTacToe()
    bots = {
        1: MCTSBot(game=game, player_id=1, seed=1, iterations=200),
        2: RandomBot(next_moves=game.valid_moves, player_id=2, seed=2),
    }
    result = simulate(game, bots, initial_state(game))

Modules:
    core       - Fundamental types, seeded random source, UCT scoring
    games      - Game descriptions, state and the reducer
    bots       - Bot base class, RandomBot, MCTSBot
    simulation - step() and simulate() harness
    debug      - Search tree visualization
"""

from autoplay.api import play_match
from autoplay.bots import Bot, MCTSBot, MCTSNode, RandomBot
from autoplay.core import Action, Decision, GameOver, make_move
from autoplay.games import (
    Ctx,
    GameBase,
    GameState,
    Nim,
    TicTacToe,
    create_game_reducer,
    initial_state,
)
from autoplay.simulation import SimulationResult, simulate, step

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_match",
    "simulate",
    "step",
    "SimulationResult",
    # Bots
    "Bot",
    "RandomBot",
    "MCTSBot",
    "MCTSNode",
    # Games
    "GameBase",
    "GameState",
    "Ctx",
    "TicTacToe",
    "Nim",
    "create_game_reducer",
    "initial_state",
    # Types
    "Action",
    "Decision",
    "GameOver",
    "make_move",
]
