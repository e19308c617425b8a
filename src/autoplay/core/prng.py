"""
Seeded random source with explicit state threading.

A seeded caller never holds a live generator. Each draw rebuilds a PCG64
bit generator from the seed (first draw) or from the previously saved
state (every later draw), produces one double, and hands back the new
state snapshot. The snapshot is a plain dict, so whoever owns it can
serialise it between calls and resume the exact same stream.

Unseeded draws come from a process-wide, non-deterministic generator.
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any, Dict, Optional, Sequence, Tuple, TypeVar

import numpy as np

from autoplay.core.hashing import seed_to_int

T = TypeVar("T")

PRNGState = Dict[str, Any]

_unseeded = np.random.default_rng()


def _bit_generator(seed: Any, state: Optional[PRNGState]) -> np.random.PCG64:
    if state is not None:
        bit_gen = np.random.PCG64(0)
        bit_gen.state = state
        return bit_gen
    return np.random.PCG64(seed_to_int(seed))


def draw(seed: Any = None, state: Optional[PRNGState] = None) -> Tuple[float, Optional[PRNGState]]:
    """
    Draw one real in [0, 1).

    Args:
        seed: Seed value. None means non-deterministic.
        state: State returned by the previous draw for this seed, or None
               on first use.

    Returns:
        (number, new_state). new_state is None for unseeded draws.
    """
    if seed is None:
        return float(_unseeded.random()), None

    bit_gen = _bit_generator(seed, state)
    number = float(np.random.Generator(bit_gen).random())
    return number, bit_gen.state


def scale_index(number: float, n: int) -> int:
    """Map a draw in [0, 1) onto an index in [0, n)."""
    if n <= 0:
        raise ValueError(f"Cannot draw an index from an empty range (n={n})")
    return min(int(math.floor(number * n)), n - 1)


def draw_index(n: int, seed: Any = None, state: Optional[PRNGState] = None) -> Tuple[int, Optional[PRNGState]]:
    """Draw an integer in [0, n). Returns (index, new_state)."""
    if n <= 0:
        raise ValueError(f"Cannot draw an index from an empty range (n={n})")
    number, state = draw(seed, state)
    return scale_index(number, n), state


def choose(
    sequence: Sequence[T], seed: Any = None, state: Optional[PRNGState] = None
) -> Tuple[T, Optional[PRNGState]]:
    """Pick one element uniformly. Returns (element, new_state)."""
    if len(sequence) == 0:
        raise ValueError("Cannot choose from an empty sequence")
    index, state = draw_index(len(sequence), seed, state)
    return sequence[index], state


def is_count(arg: Any) -> bool:
    """True for integer counts (as opposed to sequences of moves)."""
    return isinstance(arg, Integral) and not isinstance(arg, bool)
