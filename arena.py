"""
Agent-vs-agent games for measuring how strong each opponent is.

An agent is anything with ``set_player(player)`` and ``best_move(board)``:
RandomAI, MinimaxAI and MCTSAI all qualify.
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from config import PLAYER_X, PLAYER_O
from game import NO_MOVE, GameOutcome, NoLegalMoveError, check_winner, copy_board, new_board

logger = logging.getLogger(__name__)

WIN, DRAW, LOSS = 1, 0, -1


def play_game(agent_x, agent_o, board=None):
    """Play one game to the end. Returns (outcome, moves in play order)."""
    board = new_board() if board is None else copy_board(board)
    agent_x.set_player(PLAYER_X)
    agent_o.set_player(PLAYER_O)

    x_count = sum(cell == PLAYER_X for row in board for cell in row)
    o_count = sum(cell == PLAYER_O for row in board for cell in row)
    current_player = PLAYER_X if x_count == o_count else PLAYER_O

    moves = []
    outcome = check_winner(board)
    while not outcome.is_over:
        agent = agent_x if current_player == PLAYER_X else agent_o
        move = agent.best_move(copy_board(board))
        if move == NO_MOVE:
            raise NoLegalMoveError(f"{type(agent).__name__} returned no move")

        board[move[0]][move[1]] = current_player
        moves.append(move)
        outcome = check_winner(board)
        current_player = PLAYER_O if current_player == PLAYER_X else PLAYER_X

    return outcome, moves


@dataclass
class MatchStats:
    """Results of a match, one entry per game from the agent's point of view."""
    name: str
    results: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=int))

    @property
    def games(self):
        return len(self.results)

    @property
    def wins(self):
        return int(np.sum(self.results == WIN))

    @property
    def draws(self):
        return int(np.sum(self.results == DRAW))

    @property
    def losses(self):
        return int(np.sum(self.results == LOSS))

    @property
    def win_rate(self):
        return self.wins / self.games if self.games else 0.0

    @property
    def draw_rate(self):
        return self.draws / self.games if self.games else 0.0

    @property
    def loss_rate(self):
        return self.losses / self.games if self.games else 0.0

    def summary(self):
        return (f"{self.name}: {self.games} games, Win Rate: {self.win_rate:.2f}, "
                f"Loss Rate: {self.loss_rate:.2f}, Draw Rate: {self.draw_rate:.2f}")


def play_match(agent, opponent_agent, games, alternate_sides=True, name=None):
    """Play `games` games; with alternation the agent is X in even games and O in odd ones."""
    results = np.zeros(games, dtype=int)

    for game_index in range(games):
        agent_is_x = not alternate_sides or game_index % 2 == 0
        if agent_is_x:
            outcome, _ = play_game(agent, opponent_agent)
            agent_player = PLAYER_X
        else:
            outcome, _ = play_game(opponent_agent, agent)
            agent_player = PLAYER_O

        if outcome is GameOutcome.DRAW:
            results[game_index] = DRAW
        elif outcome.winning_player == agent_player:
            results[game_index] = WIN
        else:
            results[game_index] = LOSS

    stats = MatchStats(name or f"{type(agent).__name__} vs {type(opponent_agent).__name__}", results)
    logger.info(stats.summary())
    return stats


def plot_match_stats(stats_list, path):
    """Save a grouped bar chart of win/draw/loss rates for each match."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    import pandas as pd
    import seaborn as sns

    sns.set_theme(style="darkgrid")
    sns.set_context("notebook", font_scale=1.1)

    rows = []
    for stats in stats_list:
        rows.append({'Match': stats.name, 'Result': 'Wins', 'Rate': stats.win_rate})
        rows.append({'Match': stats.name, 'Result': 'Draws', 'Rate': stats.draw_rate})
        rows.append({'Match': stats.name, 'Result': 'Losses', 'Rate': stats.loss_rate})
    df = pd.DataFrame(rows)

    plt.figure(figsize=(12, 7))
    ax = sns.barplot(x='Match', y='Rate', hue='Result', data=df,
                     palette={'Wins': 'green', 'Draws': 'blue', 'Losses': 'red'})
    ax.set_ylim(0, 1)

    plt.title('Computer Opponent Strength', fontsize=16, pad=20)
    plt.xlabel('')
    plt.ylabel('Rate', fontsize=14)
    plt.xticks(rotation=20, ha='right')
    plt.legend(title='Result', frameon=True, facecolor='white', edgecolor='gray')
    plt.tight_layout()

    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close()
    logger.info("Benchmark plot saved to %s", path)
    return path
