"""
Regret-matching agent: one player's regret and strategy accumulators at the
single Rock-Paper-Scissors decision point.
"""

import numpy as np

from rps_regret.cfr.strategy import (
    regret_matching,
    get_average_strategy,
    sample_action,
    validate_distribution,
)
from rps_regret.config import NUM_ACTIONS
from rps_regret.env.actions import check_action


class RegretMatchingAgent:
    def __init__(self, opponent_distribution=None, seed=None, rng=None):
        """
        Args:
            opponent_distribution: Stationary opponent strategy this agent responds to
                in fixed-opponent training (unused by the agent in self-play)
            seed: Seed for the agent's own random generator (ignored if rng is given)
            rng: numpy Generator to draw from instead of a freshly seeded one
        """
        self.opponent_distribution = None
        if opponent_distribution is not None:
            self.opponent_distribution = validate_distribution(
                opponent_distribution, "opponent_distribution"
            )
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self._regret_sum = np.zeros(NUM_ACTIONS)
        self._strategy_sum = np.zeros(NUM_ACTIONS)

    @property
    def regret_sum(self):
        return self._regret_sum.copy()

    @property
    def strategy_sum(self):
        return self._strategy_sum.copy()

    def get_strategy(self):
        """
        Regret matching on the current regrets. Also adds the result into the
        strategy sum, so call it exactly once per iteration.
        """
        strategy = regret_matching(self._regret_sum, NUM_ACTIONS)
        self._strategy_sum += strategy
        return strategy

    def get_action(self, strategy):
        """Sample an action index from strategy using this agent's generator."""
        return sample_action(strategy, self.rng)

    def accumulate_regret(self, utility, realized_action):
        """regret_sum[i] += utility[i] - utility[realized_action] for every action i."""
        utility = np.asarray(utility, dtype=float)
        if utility.shape != (NUM_ACTIONS,):
            raise ValueError(f"utility must have exactly {NUM_ACTIONS} entries, got shape {utility.shape}")
        realized_action = check_action(realized_action)
        self._regret_sum += utility - utility[realized_action]

    def get_average_strategy(self):
        """Time-averaged strategy over every get_strategy call; uniform before the first."""
        return get_average_strategy(self._strategy_sum, NUM_ACTIONS)

    def average_positive_regret(self, iterations):
        """Mean positive regret per iteration (convergence metric)."""
        if iterations <= 0:
            return 0.0
        return float(np.maximum(self._regret_sum, 0).mean()) / iterations
