"""
Exact strategy evaluation from the payoff matrix: expected payoff, best response,
exploitability.
"""

import numpy as np

from rps_regret.cfr.strategy import validate_distribution
from rps_regret.env.payoff import payoff_matrix


def expected_payoff(strategy1, strategy2):
    """Expected payoff per round to player 1: s1 @ M @ s2."""
    s1 = validate_distribution(strategy1, "strategy1")
    s2 = validate_distribution(strategy2, "strategy2")
    return float(s1 @ payoff_matrix() @ s2)


def best_response(opponent_strategy):
    """
    Pure best response to a fixed mixed strategy.
    Returns (action, value); ties go to the lowest action index.
    """
    values = payoff_matrix() @ validate_distribution(opponent_strategy, "opponent_strategy")
    action = int(np.argmax(values))
    return action, float(values[action])


def exploitability(strategy):
    """
    What a best-responding opponent earns per round against strategy.
    The game is symmetric, so this is the best-response value to strategy;
    0 only at the uniform equilibrium.
    """
    _, value = best_response(strategy)
    return value
