from __future__ import annotations

import argparse
import sys
from logging import getLogger

from crib_game.constants import SCORE_DELAY, WINNING_SCORE
from crib_game.errors import CribbageError
from crib_game.game import CribbageGame
from crib_game.log_config import configure_logging
from crib_game.players import ComputerPlayer, HumanPlayer

logger = getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cribbage", description="Play cribbage against the computer.")
    ap.add_argument("--seed", type=int, default=None, help="Random seed. Omit to use a random seed.")
    ap.add_argument("--delay", type=float, default=SCORE_DELAY, help="Seconds to pause after scoring events.")
    ap.add_argument("--winning-score", type=int, default=WINNING_SCORE)
    ap.add_argument("--no-color", action="store_true", help="Do not colour red suits.")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging()
    except OSError as exc:
        print(f"Could not set up logging: {exc}", file=sys.stderr)
        return 1
    color = not args.no_color
    players = [HumanPlayer("You", color=color), ComputerPlayer("Computer")]
    game = CribbageGame(players, seed=args.seed, winning_score=args.winning_score, delay=args.delay, color=color)
    try:
        game.play_game()
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned.")
        return 0
    except CribbageError as exc:
        logger.exception("Game aborted")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
