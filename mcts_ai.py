import logging
import math
import random

from config import (
    DIFFICULTY_ITERATIONS, EXPLORATION_WEIGHT, PLAYER_O,
    WIN_SCORE, LOSS_SCORE, DRAW_SCORE,
)
from game import NO_MOVE, GameOutcome, check_winner, copy_board, free_cells, opponent

logger = logging.getLogger(__name__)


class MCTSNode:
    """Node in the Monte Carlo search tree representing a game state."""

    def __init__(self, board, player, parent=None, move=None, rng=None):
        """Initialize a new tree node."""
        self.board = board  # Private copy of the game state at this node
        self.player = player  # Player to move from this state
        self.parent = parent
        self.move = move  # Move that led to this state, None at the root
        self.children = []
        self.wins = 0  # Simulations through this node won by the computer
        self.visits = 0
        self.outcome = check_winner(board)

        self.untried_moves = [] if self.outcome.is_over else free_cells(board)
        if rng is not None:
            rng.shuffle(self.untried_moves)

    def is_terminal(self):
        return self.outcome.is_over

    def is_fully_expanded(self):
        """Check if all possible moves have been expanded."""
        return len(self.untried_moves) == 0

    def ucb1(self, parent_visits, exploration_weight):
        if self.visits == 0:
            return float('inf')
        exploit = self.wins / self.visits
        explore = exploration_weight * math.sqrt(math.log(parent_visits) / self.visits)
        return exploit + explore

    def best_child(self, exploration_weight):
        """Select the child with the highest UCB1 value; first one wins ties."""
        best_value = -float('inf')
        best_child = None
        for child in self.children:
            value = child.ucb1(self.visits, exploration_weight)
            if value > best_value:
                best_value = value
                best_child = child
        return best_child

    def most_visited_child(self):
        best_child = None
        for child in self.children:
            if best_child is None or child.visits > best_child.visits:
                best_child = child
        return best_child


class MCTSAI:
    """Monte Carlo Tree Search with a fixed number of iterations per move."""

    def __init__(self, iterations=DIFFICULTY_ITERATIONS['MEDIUM'],
                 exploration_weight=EXPLORATION_WEIGHT, rng=None):
        self.iterations = iterations
        self.exploration_weight = exploration_weight
        self.rng = rng if rng is not None else random.Random()
        self.player = PLAYER_O  # Default player

    def set_player(self, player):
        """Set the player marker (X or O)."""
        self.player = player

    def best_move(self, board, iterations=None):
        """Return the move leading to the most visited root child, or NO_MOVE."""
        iterations = self.iterations if iterations is None else iterations
        root = self.search(board, iterations)

        best_child = root.most_visited_child()
        if best_child is None:
            logger.warning("MCTS found no move after %d iterations", iterations)
            return NO_MOVE

        logger.debug("MCTS ran %d simulations. Best move: %s (visits: %d, win rate: %.3f)",
                     root.visits, best_child.move, best_child.visits,
                     best_child.wins / best_child.visits)
        return best_child.move

    def search(self, board, iterations=None):
        """Build a fresh tree for `board` and return its root."""
        iterations = self.iterations if iterations is None else iterations
        root = MCTSNode(copy_board(board), self.player, rng=self.rng)

        for _ in range(iterations):
            # Selection phase - select a promising leaf node
            node = self.select_node(root)

            # Expansion phase - expand if not fully expanded
            if not node.is_fully_expanded() and not node.is_terminal():
                node = self.expand_node(node)

            # Simulation phase
            if node.is_terminal():
                result = self.score(node.outcome)
            else:
                result = self.simulate(node.board, node.player)

            self.backpropagate(node, result)

        return root

    def select_node(self, node):
        """Descend through fully expanded nodes using UCB1."""
        while node.is_fully_expanded() and node.children and not node.is_terminal():
            node = node.best_child(self.exploration_weight)
        return node

    def expand_node(self, node):
        """Add a child node with an unexplored move."""
        move = node.untried_moves.pop()
        new_board = copy_board(node.board)
        new_board[move[0]][move[1]] = node.player

        child_node = MCTSNode(new_board, opponent(node.player),
                              parent=node, move=move, rng=self.rng)
        node.children.append(child_node)
        return child_node

    def simulate(self, board, player):
        """Play random moves from `board` until the game ends and score the result."""
        board_copy = copy_board(board)
        current_player = player

        outcome = check_winner(board_copy)
        while not outcome.is_over:
            row, col = self.rng.choice(free_cells(board_copy))
            board_copy[row][col] = current_player
            current_player = opponent(current_player)
            outcome = check_winner(board_copy)

        return self.score(outcome)

    def score(self, outcome):
        if outcome is GameOutcome.DRAW:
            return DRAW_SCORE
        if outcome.winning_player == self.player:
            return WIN_SCORE
        return LOSS_SCORE

    def backpropagate(self, node, result):
        """Update statistics on the path back to the root."""
        while node is not None:
            node.visits += 1
            # Only computer wins count; losses and draws add nothing
            if result == WIN_SCORE:
                node.wins += 1
            node = node.parent
