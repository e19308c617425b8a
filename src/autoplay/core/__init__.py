"""
Core module - fundamental types, hashing, randomness and UCT scoring.

This module provides the building blocks used throughout the bot framework.
"""

from autoplay.core.types import (
    Action,
    Decision,
    GameOver,
    PlayerID,
    make_move,
    DEFAULT_ITERATIONS,
    EXPLORATION,
    WIN_CREDIT,
    DRAW_CREDIT,
)
from autoplay.core.hashing import hash_state, seed_to_int
from autoplay.core.prng import draw, draw_index, choose
from autoplay.core.uct import uct_score

__all__ = [
    # Types
    "Action",
    "Decision",
    "GameOver",
    "PlayerID",
    # Constants
    "DEFAULT_ITERATIONS",
    "EXPLORATION",
    "WIN_CREDIT",
    "DRAW_CREDIT",
    # Functions
    "make_move",
    "hash_state",
    "seed_to_int",
    "draw",
    "draw_index",
    "choose",
    "uct_score",
]
