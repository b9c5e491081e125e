"""
Head-to-head evaluation: play two fixed strategies against each other and
report payoff per round with block bootstrap standard error.
"""

import numpy as np
from tqdm import tqdm

from rps_regret.cfr.strategy import sample_action, validate_distribution
from rps_regret.config import EVAL_BLOCK_SIZE
from rps_regret.env.payoff import payoff


def play_round(strategy1, strategy2, rng):
    """Play one round; returns [payoff1, payoff2]."""
    action1 = sample_action(strategy1, rng)
    action2 = sample_action(strategy2, rng)
    p = payoff(action1, action2)
    return [p, -p]


def evaluate(strategy1, strategy2, num_rounds=10000, seed=None):
    """Run num_rounds rounds; return average payoff per round for each player."""
    s1 = validate_distribution(strategy1, "strategy1")
    s2 = validate_distribution(strategy2, "strategy2")
    rng = np.random.default_rng(seed)
    total_payoffs = np.zeros(2)
    for _ in range(num_rounds):
        total_payoffs += play_round(s1, s2, rng)
    return total_payoffs / max(num_rounds, 1)


def evaluate_with_variance(
    strategy1,
    strategy2,
    num_rounds=10000,
    block_size=EVAL_BLOCK_SIZE,
    seed=None,
    verbose=True,
):
    """
    Evaluate with block bootstrap standard error and 95% CI.
    Returns (mean, std_err) arrays, one entry per player.
    """
    if num_rounds <= 0:
        raise ValueError(f"num_rounds must be positive, got {num_rounds}")
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")
    s1 = validate_distribution(strategy1, "strategy1")
    s2 = validate_distribution(strategy2, "strategy2")
    rng = np.random.default_rng(seed)

    block_payoffs = []
    current_block = np.zeros(2)
    rounds_in_block = 0

    for _ in tqdm(range(num_rounds), desc="Evaluating...", disable=not verbose):
        current_block += play_round(s1, s2, rng)
        rounds_in_block += 1
        if rounds_in_block >= block_size:
            block_payoffs.append(current_block / rounds_in_block)
            current_block = np.zeros(2)
            rounds_in_block = 0

    if rounds_in_block > 0:
        block_payoffs.append(current_block / rounds_in_block)

    block_payoffs = np.array(block_payoffs)
    mean = block_payoffs.mean(axis=0)
    std_err = block_payoffs.std(axis=0) / np.sqrt(len(block_payoffs))

    if verbose:
        print(f"\nEvaluation over {num_rounds} rounds ({len(block_payoffs)} blocks):")
        print(f"{'Player':<10} {'Payoff/round':<14} {'± SE':<12} {'95% CI':<20}")
        print("-" * 57)
        for p in range(2):
            ci_low = mean[p] - 1.96 * std_err[p]
            ci_high = mean[p] + 1.96 * std_err[p]
            print(f"Player {p + 1:<3} {mean[p]:<14.4f} {std_err[p]:<12.4f} [{ci_low:.4f}, {ci_high:.4f}]")
    return mean, std_err
