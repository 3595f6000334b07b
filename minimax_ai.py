import logging

from config import PLAYER_O, WIN_SCORE, LOSS_SCORE, DRAW_SCORE
from game import EMPTY, NO_MOVE, GameOutcome, check_winner, free_cells, opponent

logger = logging.getLogger(__name__)


class MinimaxAI:
    """
    Full-depth minimax with alpha-beta pruning.

    Scores are +10 for a win, -10 for a loss and 0 for a draw regardless of
    how many moves it takes to get there, so among equally winning lines the
    first one found in row-major order is kept.
    """

    def __init__(self):
        self.player = PLAYER_O  # Default player
        self.opponent = opponent(self.player)
        self.nodes_evaluated = 0

    def evaluate(self, board):
        """Terminal score of the board, or None if the game is still going."""
        outcome = check_winner(board)
        if outcome is GameOutcome.ONGOING:
            return None
        if outcome is GameOutcome.DRAW:
            return DRAW_SCORE
        if outcome.winning_player == self.player:
            return WIN_SCORE
        return LOSS_SCORE

    def minimax(self, board, is_maximizing, alpha=-float('inf'), beta=float('inf')):
        self.nodes_evaluated += 1

        score = self.evaluate(board)
        if score is not None:
            return score

        if is_maximizing:
            best = -float('inf')
            for row, col in free_cells(board):
                board[row][col] = self.player
                score = self.minimax(board, False, alpha, beta)
                board[row][col] = EMPTY

                best = max(best, score)
                # Alpha-Beta pruning
                alpha = max(alpha, score)
                if beta <= alpha:
                    return best
            return best
        else:
            best = float('inf')
            for row, col in free_cells(board):
                board[row][col] = self.opponent
                score = self.minimax(board, True, alpha, beta)
                board[row][col] = EMPTY

                best = min(best, score)
                # Alpha-Beta pruning
                beta = min(beta, score)
                if beta <= alpha:
                    return best
            return best

    def best_move_with_score(self, board):
        """Return (move, score) for the side this AI plays, or (NO_MOVE, None)."""
        self.nodes_evaluated = 0
        valid_moves = free_cells(board)
        if not valid_moves:
            logger.warning("Minimax called on a board with no free cells")
            return NO_MOVE, None

        # Quick check for winning moves first
        for row, col in valid_moves:
            board[row][col] = self.player
            won = self.evaluate(board) == WIN_SCORE
            board[row][col] = EMPTY
            if won:
                logger.debug("Minimax takes immediate win at %s", (row, col))
                return (row, col), WIN_SCORE

        best_val = -float('inf')
        move = NO_MOVE
        for row, col in valid_moves:
            board[row][col] = self.player
            move_val = self.minimax(board, False)
            board[row][col] = EMPTY

            if move_val > best_val:
                best_val = move_val
                move = (row, col)

        logger.debug("Minimax evaluated %d positions. Best move: %s (score: %s)",
                     self.nodes_evaluated, move, best_val)
        return move, best_val

    def best_move(self, board):
        move, _ = self.best_move_with_score(board)
        return move

    def set_player(self, player):
        """Set the player marker (X or O)."""
        self.player = player
        self.opponent = opponent(player)
