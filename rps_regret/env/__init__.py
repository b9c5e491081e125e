"""
Game environment: Rock-Paper-Scissors actions and the cyclic payoff.
"""

from rps_regret.env.actions import Action, check_action
from rps_regret.env.payoff import action_utility, payoff, payoff_matrix

__all__ = [
    "Action",
    "check_action",
    "action_utility",
    "payoff",
    "payoff_matrix",
]
