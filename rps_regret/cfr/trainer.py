"""
Fixed-opponent CFR trainer: one regret-matching agent learns a response to a
stationary opponent distribution.
"""

import numpy as np

from rps_regret.cfr.agent import RegretMatchingAgent
from rps_regret.env.payoff import action_utility


def check_iterations(num_iterations):
    if isinstance(num_iterations, bool) or not isinstance(num_iterations, (int, np.integer)) or num_iterations < 0:
        raise ValueError(f"num_iterations must be a non-negative integer, got {num_iterations!r}")
    return int(num_iterations)


class FixedOpponentTrainer:
    def __init__(self, opponent_distribution, seed=None, rng=None):
        """
        Args:
            opponent_distribution: Opponent's fixed mixed strategy over (Rock, Paper, Scissors)
            seed: Seed for the agent's generator; both actions of a round are drawn from it
            rng: numpy Generator to use instead of seeding a new one
        """
        if opponent_distribution is None:
            raise ValueError("FixedOpponentTrainer needs an opponent_distribution")
        self.agent = RegretMatchingAgent(opponent_distribution, seed=seed, rng=rng)
        self.iteration = 0

    def train(self, num_iterations, log_interval=0):
        """
        Run num_iterations rounds against the fixed opponent. Training continues
        from the current state, so several calls add up to one longer run.
        """
        num_iterations = check_iterations(num_iterations)
        agent = self.agent
        opp_strategy = agent.opponent_distribution
        start = self.iteration
        end = start + num_iterations
        if log_interval:
            print(f"Starting CFR vs fixed opponent for {num_iterations} iterations (total {start} -> {end})...")

        for t in range(start + 1, end + 1):
            self.iteration = t
            strategy = agent.get_strategy()
            my_action = agent.get_action(strategy)
            other_action = agent.get_action(opp_strategy)

            utility = action_utility(other_action)
            agent.accumulate_regret(utility, my_action)

            if log_interval and t % log_interval == 0:
                avg_regret = agent.average_positive_regret(t)
                print(f"  Iter {t}/{end} | Avg positive regret: {avg_regret:.7f}")

        if log_interval:
            print(f"Training complete after {self.iteration} iterations.")

    def get_average_strategy(self):
        return self.agent.get_average_strategy()
