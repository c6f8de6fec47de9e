"""Benchmark two computer-controlled players against each other.

Usage:
  python scripts/benchmark_2_players.py --players computer,random --games 200 --seed 0
"""

from __future__ import annotations

import argparse
import sys
import numpy as np

sys.path.insert(0, ".")

from crib_game.game import CribbageGame
from crib_game.log_config import configure_logging
from crib_game.players import ComputerPlayer, RandomPlayer
import logging

logger = logging.getLogger(__name__)


def wilson_ci(wins: int, n: int, z: float = 1.96) -> tuple[float, float]:
    if n == 0:
        return (0.0, 0.0)
    phat = wins / n
    denom = 1 + z * z / n
    center = (phat + z * z / (2 * n)) / denom
    half = (z / denom) * np.sqrt((phat * (1 - phat) / n) + (z * z / (4 * n * n)))
    return float(center - half), float(center + half)


def player_factory(name: str, seed: int | None = None):
    if name == "computer":
        return ComputerPlayer(name="computer")
    elif name == "random":
        return RandomPlayer(name="random", seed=seed)
    else:
        raise ValueError(f"Unknown player type: {name}")


def play_game(p0, p1, seed: int) -> tuple[int, int]:
    game = CribbageGame([p0, p1], seed=seed, delay=0, output_fn=lambda _: None, color=False)
    return game.play_game()


def benchmark_2_players(args) -> dict:
    player_names = args.players.split(",")
    if len(player_names) != 2:
        raise ValueError("Must specify exactly two players via --players")
    rng = np.random.default_rng(args.seed)
    game_seeds = rng.integers(0, 2**31 - 1, size=args.games)

    p0 = player_factory(player_names[0], seed=args.seed)
    p1 = player_factory(player_names[1], seed=None if args.seed is None else args.seed + 1)

    wins = 0
    diffs = []
    for i in range(args.games):
        if (i % 100) == 0:
            logger.info(f"Playing game {i}/{args.games}")
        # Alternate seats so each player deals first equally often
        if i % 2 == 0:
            s0, s1 = play_game(p0, p1, int(game_seeds[i]))
            diff = s0 - s1
        else:
            s0, s1 = play_game(p1, p0, int(game_seeds[i]))
            diff = s1 - s0
        if diff > 0:
            wins += 1
        diffs.append(diff)

    winrate = wins / args.games if args.games else 0.0
    lo, hi = wilson_ci(wins, args.games)
    avg_diff = float(np.mean(diffs)) if diffs else 0.0
    print(f"{player_names[0]} vs {player_names[1]} wins={wins}/{args.games} winrate={winrate:.3f} "
          f"(95% CI {lo:.3f} - {hi:.3f}) avg point diff {avg_diff:.2f}")
    return {"wins": wins, "games": args.games, "winrate": winrate, "ci": (lo, hi), "avg_diff": avg_diff}


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--players", type=str, default="computer,random")
    ap.add_argument("--games", type=int, default=200)
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()
    configure_logging()
    benchmark_2_players(args)
