"""
Hashing utilities - seed normalisation and state fingerprints.
"""

import hashlib
from typing import Any

import numpy as np


def seed_to_int(seed: Any) -> int:
    """
    Reduce a seed to a non-negative integer accepted by numpy.

    Integers pass through unchanged (negative ones are hashed); anything
    else is hashed through its string form, so "test" always maps to
    the same integer across processes.
    """
    if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool) and seed >= 0:
        return int(seed)

    data = repr(seed).encode() if not isinstance(seed, str) else seed.encode()
    return int.from_bytes(hashlib.sha256(data).digest()[:16], "big")


def hash_state(G: Any) -> str:
    """
    Short fingerprint of opaque game data.

    Fast path for numpy arrays (direct tobytes), repr otherwise.
    """
    if isinstance(G, np.ndarray) and G.dtype != np.object_:
        data = G.tobytes()
    else:
        data = repr(G).encode()

    return hashlib.sha256(data).hexdigest()[:16]
