"""
Self-play: two regret-matching agents play repeated rounds and update their
regrets after every round.

By default one utility vector, built from player 2's realized action, drives
both regret updates. This reproduces the reference self-play results; player 2
then updates against its own action rather than player 1's. Pass
symmetric_update=True to build player 2's vector from player 1's action, which
is the proper zero-sum update but gives different trajectories.
"""

import numpy as np

from rps_regret.cfr.agent import RegretMatchingAgent
from rps_regret.cfr.trainer import check_iterations
from rps_regret.env.payoff import action_utility


class SelfPlaySimulator:
    def __init__(
        self,
        player1_strategy,
        player2_strategy,
        seed=None,
        symmetric_update=False,
    ):
        """
        Args:
            player1_strategy: Player 1's initial distribution (player 2's opponent_distribution)
            player2_strategy: Player 2's initial distribution (player 1's opponent_distribution)
            seed: Root seed; each agent gets its own independent child generator
            symmetric_update: Update player 2 from player 1's action (see module docstring)
        """
        rng1, rng2 = [np.random.default_rng(s) for s in np.random.SeedSequence(seed).spawn(2)]
        self.player1 = RegretMatchingAgent(player2_strategy, rng=rng1)
        self.player2 = RegretMatchingAgent(player1_strategy, rng=rng2)
        self.symmetric_update = symmetric_update
        self.iteration = 0

    def play(self, num_iterations, log_interval=0):
        """
        Play num_iterations rounds. Each round:
        1 - both players derive a regret-matched strategy and sample an action
        2 - compute action utilities
        3 - accumulate both players' regrets
        """
        num_iterations = check_iterations(num_iterations)
        p1, p2 = self.player1, self.player2
        start = self.iteration
        end = start + num_iterations
        if log_interval:
            mode = "symmetric" if self.symmetric_update else "reference"
            print(f"Starting self-play for {num_iterations} rounds (total {start} -> {end}) ({mode} update)...")

        for t in range(start + 1, end + 1):
            self.iteration = t
            strategy1 = p1.get_strategy()
            strategy2 = p2.get_strategy()

            action1 = p1.get_action(strategy1)
            action2 = p2.get_action(strategy2)

            # utilities from player 1's perspective
            utility = action_utility(action2)
            p1.accumulate_regret(utility, action1)
            if self.symmetric_update:
                p2.accumulate_regret(action_utility(action1), action2)
            else:
                p2.accumulate_regret(utility, action2)

            if log_interval and t % log_interval == 0:
                r1 = p1.average_positive_regret(t)
                r2 = p2.average_positive_regret(t)
                print(f"  Round {t}/{end} | Avg positive regret: P1 {r1:.7f}, P2 {r2:.7f}")

        if log_interval:
            print(f"Self-play complete after {self.iteration} rounds.")

    def get_average_strategies(self):
        """Return (player1, player2) average strategies."""
        return self.player1.get_average_strategy(), self.player2.get_average_strategy()
