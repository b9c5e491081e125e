#!/usr/bin/env python3
"""
Evaluate two mixed strategies against each other: exact expected payoff,
exploitability, and simulated play with block bootstrap SE.
Usage:
  python scripts/evaluate.py --strategy1 0.2 0.5 0.3 --strategy2 0.4 0.3 0.3 [--rounds 100000]
"""

import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from rps_regret.evaluation import (
    expected_payoff,
    best_response,
    exploitability,
    evaluate_with_variance,
)
from rps_regret.config import EVAL_ROUNDS_DEFAULT, EVAL_BLOCK_SIZE, ACTION_NAMES


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--strategy1", type=float, nargs=3, required=True, metavar="P")
    ap.add_argument("--strategy2", type=float, nargs=3, required=True, metavar="P")
    ap.add_argument("--rounds", type=int, default=EVAL_ROUNDS_DEFAULT)
    ap.add_argument("--block-size", type=int, default=EVAL_BLOCK_SIZE)
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args()

    try:
        value = expected_payoff(args.strategy1, args.strategy2)
        br1, br1_value = best_response(args.strategy2)
        br2, br2_value = best_response(args.strategy1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("=" * 60)
    print("Strategy Evaluation")
    print("=" * 60)
    print(f"Expected payoff to player 1: {value:.4f}")
    print(f"Player 1 exploitability: {exploitability(args.strategy1):.4f} "
          f"(best response {ACTION_NAMES[br2]}, {br2_value:.4f})")
    print(f"Player 2 exploitability: {exploitability(args.strategy2):.4f} "
          f"(best response {ACTION_NAMES[br1]}, {br1_value:.4f})")

    if args.rounds > 0:
        evaluate_with_variance(
            args.strategy1,
            args.strategy2,
            num_rounds=args.rounds,
            block_size=args.block_size,
            seed=args.seed,
        )


if __name__ == "__main__":
    main()
