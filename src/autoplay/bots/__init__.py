"""
Bots module - automated players.

Provides:
- Bot: Abstract base with seeded, resumable randomness
- RandomBot: Uniform-random baseline
- MCTSBot: Monte Carlo Tree Search with UCT selection
- MCTSNode: Search tree node (returned as MCTSBot decision metadata)
"""

from autoplay.bots.base import Bot, MoveEnumerator
from autoplay.bots.random_bot import RandomBot
from autoplay.bots.node import MCTSNode
from autoplay.bots.mcts_bot import MCTSBot

__all__ = [
    "Bot",
    "MoveEnumerator",
    "RandomBot",
    "MCTSNode",
    "MCTSBot",
]
