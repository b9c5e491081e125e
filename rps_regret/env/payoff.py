"""
Zero-sum payoffs: win = +1, tie = 0, loss = -1.
"""

import numpy as np

from rps_regret.config import NUM_ACTIONS
from rps_regret.env.actions import check_action


def action_utility(opp_action):
    """
    Utility of each of our actions against the opponent's realized action.
    utility[opp] = 0, utility[opp + 1] = +1 (beats it), utility[opp - 1] = -1.
    """
    opp_action = check_action(opp_action)
    utility = np.zeros(NUM_ACTIONS)
    utility[(opp_action + 1) % NUM_ACTIONS] = 1.0
    utility[(opp_action - 1) % NUM_ACTIONS] = -1.0
    return utility


def payoff(action1, action2):
    """Payoff of one round for player 1 (player 2 receives the negation)."""
    return float(action_utility(action2)[check_action(action1)])


def payoff_matrix():
    """M[i, j] = payoff to player 1 playing i against player 2 playing j."""
    return np.array([action_utility(j) for j in range(NUM_ACTIONS)]).T
