"""
Chooses and plays the computer's move for a given difficulty.

The difficulty letters shown in the console map onto a closed set of tiers:

    R  Random  - any free cell
    E  Easy    - MCTS with few simulations
    M  Medium  - MCTS with many simulations
    H  Hard    - minimax, never loses
"""

import logging
import random
from enum import Enum

from config import DIFFICULTY_ITERATIONS, PLAYER_O
from game import NO_MOVE, NoLegalMoveError
from mcts_ai import MCTSAI
from minimax_ai import MinimaxAI
from random_ai import RandomAI

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    RANDOM = "R"
    EASY = "E"
    MEDIUM = "M"
    HARD = "H"

    @classmethod
    def from_choice(cls, choice):
        """Map a menu letter (any case) to a Difficulty."""
        try:
            return cls(choice.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown difficulty {choice!r}, expected one of R, E, M, H") from None

    @property
    def label(self):
        return DIFFICULTY_LABELS[self]


DIFFICULTY_LABELS = {
    Difficulty.RANDOM: "Random",
    Difficulty.EASY: "Easy (MCTS - fewer sims)",
    Difficulty.MEDIUM: "Medium (MCTS - more sims)",
    Difficulty.HARD: "Hard (Minimax)",
}


class SelectorState(Enum):
    SELECT_DIFFICULTY = "select_difficulty"
    AWAIT_TURN = "await_turn"
    SEARCHING = "searching"


class MoveSelector:
    """One computer opponent for a session: owns its AIs and its difficulty."""

    def __init__(self, difficulty=None, player=PLAYER_O, rng=None, iterations=None):
        self.rng = rng if rng is not None else random.Random()
        self.iterations = dict(DIFFICULTY_ITERATIONS)
        if iterations:
            self.iterations.update(iterations)

        self.random_ai = RandomAI(rng=self.rng)
        self.minimax_ai = MinimaxAI()
        self.mcts_ai = MCTSAI(rng=self.rng)

        self.player = player
        self.set_player(player)

        self.difficulty = None
        self.state = SelectorState.SELECT_DIFFICULTY
        if difficulty is not None:
            self.select_difficulty(difficulty)

    def set_player(self, player):
        self.player = player
        for ai in (self.random_ai, self.minimax_ai, self.mcts_ai):
            ai.set_player(player)

    def select_difficulty(self, difficulty):
        if not isinstance(difficulty, Difficulty):
            difficulty = Difficulty.from_choice(difficulty)
        self.difficulty = difficulty
        self.state = SelectorState.AWAIT_TURN
        logger.debug("Difficulty set to %s", difficulty.label)

    def iterations_for(self, difficulty):
        """Number of MCTS simulations used for an MCTS difficulty."""
        return self.iterations[difficulty.name]

    def choose_move(self, board, difficulty=None):
        """Return the computer's move on `board`, or NO_MOVE. The board is left as it was."""
        difficulty = difficulty or self.difficulty
        if difficulty is None:
            raise RuntimeError("No difficulty selected")

        if difficulty is Difficulty.RANDOM:
            return self.random_ai.best_move(board)
        if difficulty is Difficulty.HARD:
            return self.minimax_ai.best_move(board)
        return self.mcts_ai.best_move(board, iterations=self.iterations_for(difficulty))

    def play_turn(self, game):
        """Choose a move on the live game and play it for the computer."""
        if self.state is SelectorState.SELECT_DIFFICULTY:
            raise RuntimeError("No difficulty selected")
        if game.current_player != self.player:
            raise RuntimeError(f"It is {game.current_player}'s turn, not {self.player}'s")

        self.state = SelectorState.SEARCHING
        try:
            move = self.choose_move(game.board)
        finally:
            self.state = SelectorState.AWAIT_TURN

        if move == NO_MOVE or not game.make_move(*move):
            logger.error("No valid move found for the computer (%s)", self.difficulty.label)
            raise NoLegalMoveError("No valid move found for the computer.")
        return move
