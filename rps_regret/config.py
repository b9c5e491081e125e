"""
Central configuration: game constants, CFR training and evaluation defaults.
"""

# Game parameters
ROCK = 0
PAPER = 1
SCISSORS = 2
NUM_ACTIONS = 3
ACTION_NAMES = ["Rock", "Paper", "Scissors"]

# Probability vectors must sum to 1 within this tolerance
PROB_TOLERANCE = 1e-6

# CFR training
T_MAX_DEFAULT = 1_000_000
LOG_INTERVAL = 100_000

# Reference scenarios
FIXED_OPPONENT_DEFAULT = [0.4, 0.3, 0.3]
PLAYER1_START_DEFAULT = [0.6, 0.1, 0.3]
PLAYER2_START_DEFAULT = [0.2, 0.4, 0.4]

# Evaluation
EVAL_ROUNDS_DEFAULT = 100_000
EVAL_BLOCK_SIZE = 1_000
