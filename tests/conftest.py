import random

import pytest

from config import PLAYER_X, PLAYER_O
from game import EMPTY, check_winner, free_cells


def board_from_rows(*rows):
    """Build a board from strings such as "XX ", "OO ", "   "."""
    return [[EMPTY if cell == ' ' else cell for cell in row] for row in rows]


def side_to_move(board):
    x_count = sum(cell == PLAYER_X for row in board for cell in row)
    o_count = sum(cell == PLAYER_O for row in board for cell in row)
    return PLAYER_X if x_count == o_count else PLAYER_O


def reachable_boards():
    """Every position reachable from the empty board, X first, stopping at the first win."""
    seen = {}
    start = [[EMPTY] * 3 for _ in range(3)]

    def visit(board, player):
        key = tuple(cell for row in board for cell in row)
        if key in seen:
            return
        seen[key] = [row[:] for row in board]
        if check_winner(board).is_over:
            return
        for row, col in free_cells(board):
            board[row][col] = player
            visit(board, PLAYER_O if player == PLAYER_X else PLAYER_X)
            board[row][col] = EMPTY

    visit(start, PLAYER_X)
    return list(seen.values())


@pytest.fixture(scope="session")
def all_reachable_boards():
    return reachable_boards()


@pytest.fixture
def rng():
    return random.Random(1234)
