import pytest
import numpy as np
from rps_regret.env import Action, check_action, action_utility, payoff, payoff_matrix


class TestAction:
    """Test the action enum and beats-relation."""

    def test_indices(self):
        """Actions are aligned to indices 0, 1, 2."""
        assert [int(a) for a in Action] == [0, 1, 2]
        assert Action.PAPER.label == "Paper"

    def test_cycle(self):
        """Paper beats Rock, Scissors beats Paper, Rock beats Scissors."""
        assert Action.ROCK.beaten_by() == Action.PAPER
        assert Action.PAPER.beaten_by() == Action.SCISSORS
        assert Action.SCISSORS.beaten_by() == Action.ROCK
        assert Action.ROCK.beats() == Action.SCISSORS

    @pytest.mark.parametrize("bad", [-1, 3, 1.5, "1", None])
    def test_check_action_rejects(self, bad):
        """Anything other than 0, 1, 2 is rejected."""
        with pytest.raises(ValueError):
            check_action(bad)

    def test_check_action_accepts_enum_and_numpy(self):
        assert check_action(Action.SCISSORS) == 2
        assert check_action(np.int64(1)) == 1


class TestPayoff:
    """Test the cyclic utility vector and payoffs."""

    def test_utility_vs_rock(self):
        """Against Rock: tie with Rock, Paper wins, Scissors loses."""
        np.testing.assert_array_equal(action_utility(Action.ROCK), [0.0, 1.0, -1.0])

    def test_utility_vs_paper(self):
        np.testing.assert_array_equal(action_utility(Action.PAPER), [-1.0, 0.0, 1.0])

    def test_utility_vs_scissors(self):
        np.testing.assert_array_equal(action_utility(Action.SCISSORS), [1.0, -1.0, 0.0])

    def test_round_payoff(self):
        """Payoff is +1 for the winner, 0 for a tie."""
        assert payoff(Action.PAPER, Action.ROCK) == 1.0
        assert payoff(Action.ROCK, Action.PAPER) == -1.0
        assert payoff(Action.SCISSORS, Action.SCISSORS) == 0.0

    def test_matrix_zero_sum(self):
        """The payoff matrix is antisymmetric with a zero diagonal."""
        m = payoff_matrix()
        assert m.shape == (3, 3)
        np.testing.assert_array_equal(m, -m.T)
        assert m[Action.PAPER, Action.ROCK] == 1.0
