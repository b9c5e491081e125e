"""
The three Rock-Paper-Scissors actions and the cyclic beats-relation.
"""

from enum import IntEnum

from rps_regret.config import NUM_ACTIONS


class Action(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    def beaten_by(self):
        """The action that beats this one (Paper for Rock)."""
        return Action((self + 1) % NUM_ACTIONS)

    def beats(self):
        """The action this one beats (Scissors for Rock)."""
        return Action((self - 1) % NUM_ACTIONS)

    @property
    def label(self):
        return self.name.capitalize()


def check_action(action):
    """Return action as an int index, raising ValueError if it is not 0, 1 or 2."""
    try:
        index = int(action)
    except (TypeError, ValueError):
        raise ValueError(f"Action must be an integer index, got {action!r}")
    if index != action or not 0 <= index < NUM_ACTIONS:
        raise ValueError(f"Action index must be in [0, {NUM_ACTIONS - 1}], got {action!r}")
    return index
