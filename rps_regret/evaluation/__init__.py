"""
Evaluation: exact expected payoff and exploitability, simulated head-to-head play.
"""

from rps_regret.evaluation.exploitability import (
    expected_payoff,
    best_response,
    exploitability,
)
from rps_regret.evaluation.head_to_head import (
    play_round,
    evaluate,
    evaluate_with_variance,
)

__all__ = [
    "expected_payoff",
    "best_response",
    "exploitability",
    "play_round",
    "evaluate",
    "evaluate_with_variance",
]
