"""
Terminal visualizer for MCTS search trees - game-agnostic.

Renders the root node returned as MCTSBot decision metadata:

    root           visits=500  value=12.5
    ├─ place(1,1)@1   visits=211  value=140.0  mean=0.66
    │  ├─ place(0,0)@2  visits=40  value=11.0  mean=0.28
    ...
"""

from __future__ import annotations

import re
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from autoplay.bots.node import MCTSNode

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG = {
    "green": "\033[38;5;28m",
    "red": "\033[38;5;124m",
    "yellow": "\033[38;5;142m",
    "orange": "\033[38;5;166m",
    "gray": "\033[38;5;245m",
}


def score_color(score: float) -> str:
    if score >= 0.65:
        return FG["green"]
    if score >= 0.45:
        return FG["yellow"]
    if score >= 0.35:
        return FG["orange"]
    return FG["red"]


# ═══════════════════════════════════════════════════════════════════════════════
# Text utilities
# ═══════════════════════════════════════════════════════════════════════════════

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad(text: str, width: int, align: str = "left") -> str:
    gap = max(0, width - visible_len(text))
    if align == "right":
        return " " * gap + text
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


# ═══════════════════════════════════════════════════════════════════════════════
# Tree rendering
# ═══════════════════════════════════════════════════════════════════════════════


def node_label(node: "MCTSNode", color: bool = False, width: int = 14) -> str:
    """One-line summary of a node's statistics, action name padded to width."""
    name = pad("root" if node.parent_action is None else str(node.parent_action), width)
    stats = f" visits={node.visits}  value={node.value:.1f}"
    if node.parent_action is None:
        return f"{BOLD}{name}{RESET}{stats}" if color else f"{name}{stats}"

    mean = f"mean={node.mean_value:.2f}"
    if color:
        mean = f"{score_color(node.mean_value)}{mean}{RESET}"
    return f"{name}{stats}  {mean}"


def _render_children(
    node: "MCTSNode",
    prefix: str,
    depth: int,
    max_depth: int,
    max_children: Optional[int],
    color: bool,
    lines: List[str],
) -> None:
    if depth >= max_depth:
        return

    children = sorted(node.children, key=lambda c: -c.visits)
    hidden = 0
    if max_children is not None and len(children) > max_children:
        hidden = len(children) - max_children
        children = children[:max_children]

    for i, child in enumerate(children):
        last = i == len(children) - 1 and hidden == 0
        lines.append(prefix + ("└─ " if last else "├─ ") + node_label(child, color))
        _render_children(
            child, prefix + ("   " if last else "│  "), depth + 1,
            max_depth, max_children, color, lines,
        )

    if hidden:
        hint = f"└─ … {hidden} more"
        lines.append(prefix + (f"{DIM}{hint}{RESET}" if color else hint))


def render_tree(
    root: "MCTSNode",
    max_depth: int = 2,
    max_children: Optional[int] = None,
    color: bool = False,
) -> str:
    """
    Render a search tree as indented text, most visited children first.

    Args:
        root: Node to start from (usually Decision.metadata)
        max_depth: Levels below root to show
        max_children: Show only the most visited N children per node
        color: Emit ANSI colors

    Returns:
        Multi-line string
    """
    lines: List[str] = [node_label(root, color)]
    _render_children(root, "", 0, max_depth, max_children, color, lines)

    if root.actions:
        lines.append(f"({len(root.actions)} unexplored at root)")
    return "\n".join(lines)
