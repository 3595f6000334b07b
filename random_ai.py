import random

from config import PLAYER_O
from game import NO_MOVE, free_cells


class RandomAI:
    """Picks any free cell with equal probability. Used as the weakest opponent."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.player = PLAYER_O

    def best_move(self, board):
        valid_moves = free_cells(board)
        if not valid_moves:
            return NO_MOVE
        return self.rng.choice(valid_moves)

    def set_player(self, player):
        """Set the player marker (X or O)."""
        self.player = player
