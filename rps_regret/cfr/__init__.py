"""
CFR for Rock-Paper-Scissors: regret matching, fixed-opponent training, self-play.
"""

from rps_regret.cfr.agent import RegretMatchingAgent
from rps_regret.cfr.trainer import FixedOpponentTrainer
from rps_regret.cfr.self_play import SelfPlaySimulator
from rps_regret.cfr.strategy import (
    regret_matching,
    get_average_strategy,
    sample_action,
    validate_distribution,
)

__all__ = [
    "RegretMatchingAgent",
    "FixedOpponentTrainer",
    "SelfPlaySimulator",
    "regret_matching",
    "get_average_strategy",
    "sample_action",
    "validate_distribution",
]
