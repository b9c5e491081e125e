#!/usr/bin/env python3
"""
Run CFR training for Rock-Paper-Scissors and print the average strategies.

Usage:
  python scripts/train.py --mode fixed --iterations 1000000 --opponent 0.4 0.3 0.3
  python scripts/train.py --mode selfplay --player1 0.6 0.1 0.3 --player2 0.2 0.4 0.4 --seed 7
  python scripts/train.py --mode selfplay --symmetric --eval-rounds 50000
"""

import os
import sys
import time
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from rps_regret.cfr import FixedOpponentTrainer, SelfPlaySimulator
from rps_regret.evaluation import exploitability, evaluate_with_variance
from rps_regret.config import (
    T_MAX_DEFAULT,
    LOG_INTERVAL,
    FIXED_OPPONENT_DEFAULT,
    PLAYER1_START_DEFAULT,
    PLAYER2_START_DEFAULT,
    EVAL_BLOCK_SIZE,
    ACTION_NAMES,
)


def format_strategy(strategy):
    return ", ".join(f"{name}:{p:.4f}" for name, p in zip(ACTION_NAMES, strategy))


def main():
    ap = argparse.ArgumentParser(description="CFR training for Rock-Paper-Scissors (fixed opponent or self-play)")
    ap.add_argument("--mode", "-m", choices=["fixed", "selfplay"], default="fixed")
    ap.add_argument("--iterations", "-n", type=int, default=T_MAX_DEFAULT, help="Training iterations")
    ap.add_argument("--log-interval", type=int, default=LOG_INTERVAL, help="0 disables progress output")
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    ap.add_argument("--opponent", type=float, nargs=3, default=FIXED_OPPONENT_DEFAULT, metavar="P",
                    help="Fixed opponent distribution (fixed mode)")
    ap.add_argument("--player1", type=float, nargs=3, default=PLAYER1_START_DEFAULT, metavar="P",
                    help="Player 1 initial distribution (selfplay mode)")
    ap.add_argument("--player2", type=float, nargs=3, default=PLAYER2_START_DEFAULT, metavar="P",
                    help="Player 2 initial distribution (selfplay mode)")
    ap.add_argument("--symmetric", action="store_true",
                    help="Selfplay: update player 2 from player 1's action instead of the reference update")
    ap.add_argument("--eval-rounds", type=int, default=0, help="Head-to-head rounds after training (selfplay)")
    args = ap.parse_args()

    if args.iterations < 0:
        print(f"Error: --iterations must be non-negative, got {args.iterations}")
        sys.exit(1)

    start = time.time()
    try:
        if args.mode == "fixed":
            trainer = FixedOpponentTrainer(args.opponent, seed=args.seed)
            trainer.train(args.iterations, log_interval=args.log_interval)
            strategies = [trainer.get_average_strategy()]
        else:
            game = SelfPlaySimulator(args.player1, args.player2, seed=args.seed,
                                     symmetric_update=args.symmetric)
            game.play(args.iterations, log_interval=args.log_interval)
            strategies = list(game.get_average_strategies())
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Time: {time.time() - start:.1f}s")

    print("\n--- Average strategies ---")
    for i, strategy in enumerate(strategies):
        print(f"  Player {i + 1}: {format_strategy(strategy)} | exploitability {exploitability(strategy):.4f}")

    if args.mode == "selfplay" and args.eval_rounds > 0:
        print("\n--- Evaluation ---")
        evaluate_with_variance(strategies[0], strategies[1], num_rounds=args.eval_rounds,
                               block_size=EVAL_BLOCK_SIZE, seed=args.seed)


if __name__ == "__main__":
    main()
