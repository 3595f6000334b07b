from enum import Enum

from config import BOARD_SIZE, PLAYER_X, PLAYER_O

EMPTY = None
NO_MOVE = (-1, -1)  # Returned by the AIs when no cell is free


class NoLegalMoveError(Exception):
    """Raised when a move is requested on a board that has no free cell."""


class GameOutcome(Enum):
    ONGOING = "ongoing"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def is_over(self):
        return self is not GameOutcome.ONGOING

    @property
    def winning_player(self):
        """Mark of the winner, or None for a draw or an unfinished game."""
        if self is GameOutcome.X_WINS:
            return PLAYER_X
        if self is GameOutcome.O_WINS:
            return PLAYER_O
        return None

    @classmethod
    def for_player(cls, player):
        """Outcome in which `player` has three in a row."""
        return cls.X_WINS if player == PLAYER_X else cls.O_WINS


def new_board():
    """Return an empty 3x3 board."""
    return [[EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def copy_board(board):
    return [row[:] for row in board]


def opponent(player):
    return PLAYER_O if player == PLAYER_X else PLAYER_X


def check_winner(board):
    """Return the GameOutcome for a 2D board without modifying it."""
    # Check rows
    for row in range(BOARD_SIZE):
        if board[row][0] is not EMPTY and board[row][0] == board[row][1] == board[row][2]:
            return GameOutcome.for_player(board[row][0])

    # Check columns
    for col in range(BOARD_SIZE):
        if board[0][col] is not EMPTY and board[0][col] == board[1][col] == board[2][col]:
            return GameOutcome.for_player(board[0][col])

    # Check diagonals
    if board[1][1] is not EMPTY:
        if board[0][0] == board[1][1] == board[2][2]:
            return GameOutcome.for_player(board[1][1])
        if board[0][2] == board[1][1] == board[2][0]:
            return GameOutcome.for_player(board[1][1])

    if not free_cells(board):
        return GameOutcome.DRAW
    return GameOutcome.ONGOING


def free_cells(board):
    """Return the empty (row, col) cells in row-major order."""
    return [(row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if board[row][col] is EMPTY]


class TicTacToe:
    """A single running game: the board, whose turn it is and each side's moves."""

    def __init__(self):
        self.reset_game()

    def reset_game(self):
        self.board = new_board()
        self.current_player = PLAYER_X  # X goes first
        self.outcome = GameOutcome.ONGOING
        self._moves = {PLAYER_X: [], PLAYER_O: []}

    @property
    def winner(self):
        """Mark of the winning side, 'Draw', or None while the game is on."""
        if self.outcome is GameOutcome.DRAW:
            return "Draw"
        return self.outcome.winning_player

    def is_game_over(self):
        return self.outcome.is_over

    def get_available_moves(self):
        return free_cells(self.board)

    def make_move(self, row, col):
        """Place the current player's mark. Returns False if the move is illegal."""
        if self.is_game_over():
            return False
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return False
        if self.board[row][col] is not EMPTY:
            return False

        self.board[row][col] = self.current_player
        self._moves[self.current_player].append((row, col))
        self.outcome = check_winner(self.board)

        # Switch players if game isn't over
        if not self.outcome.is_over:
            self.current_player = opponent(self.current_player)
        return True

    def moves_for(self, player):
        """Moves played so far by `player`, oldest first."""
        return tuple(self._moves[player])
