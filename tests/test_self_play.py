import pytest
import numpy as np
from rps_regret.cfr import SelfPlaySimulator
from rps_regret.config import PLAYER1_START_DEFAULT, PLAYER2_START_DEFAULT, T_MAX_DEFAULT
from rps_regret.env import Action

UNIFORM = [1 / 3, 1 / 3, 1 / 3]


def make_game(seed=0, symmetric_update=False):
    return SelfPlaySimulator(
        PLAYER1_START_DEFAULT,
        PLAYER2_START_DEFAULT,
        seed=seed,
        symmetric_update=symmetric_update,
    )


def force_actions(game, action1, action2):
    """Pin both players' sampled actions."""
    game.player1.get_action = lambda strategy: action1
    game.player2.get_action = lambda strategy: action2


class TestSelfPlayInit:
    """Test wiring of the two agents."""

    def test_cross_configured_opponents(self):
        """Each agent holds the other player's initial distribution."""
        game = make_game()
        np.testing.assert_allclose(game.player1.opponent_distribution, PLAYER2_START_DEFAULT)
        np.testing.assert_allclose(game.player2.opponent_distribution, PLAYER1_START_DEFAULT)

    def test_independent_generators(self):
        game = make_game(seed=5)
        assert game.player1.rng is not game.player2.rng

    def test_rejects_bad_distribution(self):
        with pytest.raises(ValueError):
            SelfPlaySimulator([0.6, 0.1, 0.3], [0.5, 0.5, 0.5])

    def test_zero_rounds(self):
        game = make_game()
        game.play(0)
        for strategy in game.get_average_strategies():
            np.testing.assert_array_equal(strategy, UNIFORM)


class TestRegretUpdate:
    """Test the per-round regret updates."""

    def test_reference_update(self):
        """Both players read the utility vector built from player 2's action."""
        game = make_game()
        force_actions(game, Action.ROCK, Action.SCISSORS)
        game.play(1)
        # utility vs Scissors = [1, -1, 0]
        np.testing.assert_array_equal(game.player1.regret_sum, [0.0, -2.0, -1.0])
        np.testing.assert_array_equal(game.player2.regret_sum, [1.0, -1.0, 0.0])

    def test_symmetric_update(self):
        """Player 2 reads the utility vector built from player 1's action."""
        game = make_game(symmetric_update=True)
        force_actions(game, Action.ROCK, Action.SCISSORS)
        game.play(1)
        np.testing.assert_array_equal(game.player1.regret_sum, [0.0, -2.0, -1.0])
        # utility vs Rock = [0, 1, -1], player 2 played Scissors
        np.testing.assert_array_equal(game.player2.regret_sum, [1.0, 2.0, 0.0])

    def test_player2_regrets_stay_balanced(self):
        """Player 2 always plays the zero entry of its vector, so each update sums to zero."""
        game = make_game(seed=8)
        game.play(2000)
        assert abs(game.player2.regret_sum.sum()) < 1e-9


class TestSelfPlayRun:
    """Test repeated self-play."""

    def test_averages_are_distributions(self):
        game = make_game(seed=1)
        game.play(3000)
        assert game.iteration == 3000
        for strategy in game.get_average_strategies():
            assert np.all(strategy >= 0)
            assert abs(strategy.sum() - 1.0) < 1e-9

    def test_reproducible(self):
        a, b = make_game(seed=12), make_game(seed=12)
        a.play(3000)
        b.play(3000)
        for sa, sb in zip(a.get_average_strategies(), b.get_average_strategies()):
            np.testing.assert_array_equal(sa, sb)

    def test_batches_match_single_run(self):
        split, whole = make_game(seed=4), make_game(seed=4)
        split.play(2500)
        split.play(2500)
        whole.play(5000)
        for sa, sb in zip(split.get_average_strategies(), whole.get_average_strategies()):
            np.testing.assert_allclose(sa, sb)

    def test_averages_idempotent(self):
        game = make_game(seed=6)
        game.play(1000)
        first = game.get_average_strategies()
        second = game.get_average_strategies()
        for sa, sb in zip(first, second):
            np.testing.assert_array_equal(sa, sb)

    def test_logging(self, capsys):
        make_game(seed=0).play(100, log_interval=50)
        out = capsys.readouterr().out
        assert "Round 50/100" in out
        assert "reference update" in out
        assert "Self-play complete" in out

    def test_symmetric_converges_to_uniform(self):
        """Proper zero-sum updates drive both averages to the uniform equilibrium."""
        game = make_game(seed=21, symmetric_update=True)
        game.play(200_000)
        for strategy in game.get_average_strategies():
            np.testing.assert_allclose(strategy, UNIFORM, atol=0.1)

    @pytest.mark.slow
    def test_reference_scenario(self):
        """Full-length reference self-play run."""
        game = make_game(seed=2024)
        game.play(T_MAX_DEFAULT)
        for strategy in game.get_average_strategies():
            np.testing.assert_allclose(strategy, UNIFORM, atol=0.05)
