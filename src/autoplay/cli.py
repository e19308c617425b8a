"""
Command-line interface for bot matches.
"""

import argparse
import logging

from autoplay.api import play_match
from autoplay.debug.viz import render_tree
from autoplay.games import initial_state
from autoplay.simulation import step
from autoplay.utils.config import BOT_TYPES, Config, DEFAULT_ITERATIONS, GAMES
from autoplay.utils.factory import create_bots, create_game


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play turn-based games between random and MCTS bots"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--bots", "-b",
        type=str,
        default="mcts,random",
        help=(
            "Comma-separated bot type per player in seating order, "
            f"from: {', '.join(BOT_TYPES)} (default: mcts,random)"
        ),
    )
    parser.add_argument(
        "--iterations", "-i",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"MCTS iterations per move (default: {DEFAULT_ITERATIONS})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=str,
        default=None,
        help="Match seed; makes every bot reproducible (default: unseeded)",
    )
    parser.add_argument(
        "--step",
        action="store_true",
        help="Play a single ply from the initial state and stop",
    )
    parser.add_argument(
        "--show-tree",
        action="store_true",
        help="Print the search tree behind each MCTS decision",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def parse_bot_types(bots_str: str) -> list[str]:
    """Parse the comma-separated --bots value."""
    kinds = [b.strip().lower() for b in bots_str.split(",") if b.strip()]
    if not kinds:
        raise ValueError(f"Invalid --bots value: '{bots_str}'. Expected e.g. 'mcts,random'.")
    return kinds


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        game_name=args.game,
        bot_types=parse_bot_types(args.bots),
        iterations=args.iterations,
        seed=args.seed,
    )

    game = create_game(config.game_name)
    bots = create_bots(game, config.bot_types, config.iterations, config.seed)

    if args.step:
        state = initial_state(game)
        result = step(game, bots, state)
        print(f"Played: {result.action}")
        if args.show_tree and result.metadata is not None:
            print(render_tree(result.metadata, max_depth=1))
        print(game.state_string(result.state.G))
        return

    play_match(game, bots, show_tree=args.show_tree)


if __name__ == "__main__":
    main()
