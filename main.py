"""
Main entry point for Rock-Paper-Scissors CFR.

Usage:
    python main.py fixed        # Train one agent against the fixed opponent [0.4, 0.3, 0.3]
    python main.py selfplay     # Two agents co-evolve through self-play
"""

import sys
import time

from rps_regret.cfr import FixedOpponentTrainer, SelfPlaySimulator
from rps_regret.config import (
    T_MAX_DEFAULT,
    LOG_INTERVAL,
    FIXED_OPPONENT_DEFAULT,
    PLAYER1_START_DEFAULT,
    PLAYER2_START_DEFAULT,
)
from rps_regret.evaluation import exploitability


def run_fixed():
    """Train against a fixed opponent; the average strategy approaches the best response."""
    print("=" * 60)
    print("Rock-Paper-Scissors — CFR vs fixed opponent")
    print("=" * 60)

    trainer = FixedOpponentTrainer(FIXED_OPPONENT_DEFAULT)
    start = time.time()
    trainer.train(num_iterations=T_MAX_DEFAULT, log_interval=LOG_INTERVAL)
    print(f"Time: {time.time() - start:.1f}s")

    print(f"\nAverage strategy: {trainer.get_average_strategy().tolist()}")


def run_selfplay():
    """Two learning agents; both average strategies approach the uniform equilibrium."""
    print("=" * 60)
    print("Rock-Paper-Scissors — CFR self-play")
    print("=" * 60)

    game = SelfPlaySimulator(PLAYER1_START_DEFAULT, PLAYER2_START_DEFAULT)
    start = time.time()
    game.play(num_iterations=T_MAX_DEFAULT, log_interval=LOG_INTERVAL)
    print(f"Time: {time.time() - start:.1f}s")

    strategy1, strategy2 = game.get_average_strategies()
    print(f"\nPlayer1's Nash Equilibrium strategy is: {strategy1.tolist()} "
          f"(exploitability {exploitability(strategy1):.4f})")
    print(f"Player2's Nash Equilibrium strategy is: {strategy2.tolist()} "
          f"(exploitability {exploitability(strategy2):.4f})")


if __name__ == "__main__":
    mode = sys.argv[1] if len(sys.argv) > 1 else "fixed"

    modes = {
        "fixed": run_fixed,
        "selfplay": run_selfplay,
    }

    if mode in modes:
        modes[mode]()
    else:
        print(f"Unknown mode: {mode}")
        print(f"Available: {', '.join(modes.keys())}")
        sys.exit(1)
