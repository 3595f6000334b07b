import logging
import os

# Board
BOARD_SIZE = 3
PLAYER_X = 'X'  # Human side, always moves first
PLAYER_O = 'O'  # Computer side by default

# Terminal scores from the computer's point of view
WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0

# MCTS
EXPLORATION_WEIGHT = 1.414  # ~sqrt(2)

# Simulations per MCTS difficulty. Change these anytime to rebalance.
DIFFICULTY_ITERATIONS = {
    'EASY': 200,
    'MEDIUM': 10_000,
}

# Reports written by benchmark.py
OUTPUT_DIR = "reports"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL = os.environ.get("TICTACTOE_LOG_LEVEL", "WARNING")


def configure_logging(level=None):
    """Set up root logging for the command line scripts."""
    level = level or LOG_LEVEL
    if isinstance(level, str):
        name = level.upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
        level = getattr(logging, name)
    logging.basicConfig(level=level, format=LOG_FORMAT)
