"""
Regret matching, average strategy extraction and action sampling for CFR.
"""

import numpy as np

from rps_regret.config import NUM_ACTIONS, PROB_TOLERANCE


def regret_matching(regret_sum, num_actions=NUM_ACTIONS):
    """
    Convert cumulative regrets to strategy probabilities.
    positive_regret[a] = max(regret_sum[a], 0); then normalize.
    If sum(positive) == 0, return uniform.
    """
    positive = np.maximum(np.asarray(regret_sum, dtype=float)[:num_actions], 0)
    total = positive.sum()
    if total > 0:
        return positive / total
    return np.ones(num_actions) / num_actions


def get_average_strategy(strategy_sum, num_actions=NUM_ACTIONS):
    """
    Normalized cumulative strategy.
    If sum is 0, return uniform.
    """
    s = np.asarray(strategy_sum, dtype=float)[:num_actions]
    total = s.sum()
    if total > 0:
        return s / total
    return np.ones(num_actions) / num_actions


def sample_action(distribution, rng):
    """
    Inverse-CDF sample over the first NUM_ACTIONS - 1 entries; the last
    action takes the remaining mass (and any rounding slop).
    """
    r = rng.random()
    cumulative = 0.0
    for a in range(NUM_ACTIONS - 1):
        cumulative += distribution[a]
        if r < cumulative:
            return a
    return NUM_ACTIONS - 1


def validate_distribution(distribution, name="distribution"):
    """Return distribution as a float array, or raise ValueError if it is not a probability vector."""
    try:
        dist = np.asarray(distribution, dtype=float)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a sequence of {NUM_ACTIONS} numbers, got {distribution!r}")
    if dist.shape != (NUM_ACTIONS,):
        raise ValueError(f"{name} must have exactly {NUM_ACTIONS} entries, got shape {dist.shape}")
    if not np.all(np.isfinite(dist)):
        raise ValueError(f"{name} has non-finite entries: {dist.tolist()}")
    if np.any(dist < 0):
        raise ValueError(f"{name} has negative entries: {dist.tolist()}")
    if abs(dist.sum() - 1.0) > PROB_TOLERANCE:
        raise ValueError(f"{name} must sum to 1, got {dist.sum():.9f}")
    return dist
