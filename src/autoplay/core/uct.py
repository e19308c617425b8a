"""
Upper Confidence Bound for Trees.
"""

from __future__ import annotations

import math

from autoplay.core.types import EXPLORATION


def uct_score(value: float, visits: int, parent_visits: int, exploration: float = EXPLORATION) -> float:
    """
    Exploitation plus exploration score of a child.

        value / visits + sqrt(exploration * ln(parent_visits) / visits)

    A child that has never been visited scores +inf, so it is always
    preferred over visited siblings.
    """
    if visits <= 0:
        return math.inf
    if parent_visits <= 1:
        # ln(1) == 0, and a parent cannot have fewer visits than its child
        return value / visits
    return value / visits + math.sqrt(exploration * math.log(parent_visits) / visits)
