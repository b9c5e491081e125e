"""
Counterfactual regret minimization for Rock-Paper-Scissors.
"""

from rps_regret.cfr import RegretMatchingAgent, FixedOpponentTrainer, SelfPlaySimulator

__all__ = [
    "RegretMatchingAgent",
    "FixedOpponentTrainer",
    "SelfPlaySimulator",
]
