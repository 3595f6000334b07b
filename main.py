import argparse
import random

from config import BOARD_SIZE, LOG_LEVELS, PLAYER_X, PLAYER_O, configure_logging
from game import TicTacToe, NoLegalMoveError
from move_selector import Difficulty, MoveSelector
from utils import format_move

BANNER = r"""
 _   _      _             _
| | (_)    | |           | |
| |_ _  ___| |_ __ _  ___| |_ ___   ___
| __| |/ __| __/ _` |/ __| __/ _ \ / _ \
| |_| | (__| || (_| | (__| || (_) |  __/
 \__|_|\___|\__\__,_|\___|\__\___/ \___|

"============= Tic Tac Toe ============="
"""

TIE_ART = r"""          IT'S A TIE!
       |\_,,,---,,_
ZZZzz /,`.-'`'    -.  ;-;;,_
     |,4-  ) )-,_. ,\ (  `'-'
    '---''(_/--'  `-'\_)"""

PVP, PVC, QUIT = "1", "2", "3"


def print_board(board):
    print("\n    1   2   3")
    print("  +---+---+---+")
    for row in range(BOARD_SIZE):
        cells = " | ".join(cell or " " for cell in board[row])
        print(f"{row + 1} | {cells} |")
        print("  +---+---+---+")


def side_names(mode):
    if mode == PVP:
        return {PLAYER_X: "Player 1 (X)", PLAYER_O: "Player 2 (O)"}
    return {PLAYER_X: "Player (X)", PLAYER_O: "Computer (O)"}


def print_past_moves(game, mode):
    print("\nPast Moves:")
    for player, name in side_names(mode).items():
        moves = " ".join(format_move(move) for move in game.moves_for(player))
        print(f"{name}: {moves}")


def print_winner(game, mode):
    if game.winner == PLAYER_X:
        print("Player 1 (X) wins!" if mode == PVP else "Congratulations! You win!")
    elif game.winner == PLAYER_O:
        print("Player 2 (O) wins!" if mode == PVP else "Computer wins! Better luck next time!")
    elif game.winner == "Draw":
        print(TIE_ART)
    else:
        print("Game ended unexpectedly without a clear result.")


def read_human_move(game):
    """Prompt until the current player enters a legal move, then play it."""
    while True:
        parts = input("Enter Row and Column #(1-3): ").split()
        try:
            row, col = (int(part) for part in parts)
        except ValueError:
            print("Invalid input type. Please enter two numbers.")
            continue

        if not (1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE):
            print(f"Invalid range. Please enter numbers between 1 and {BOARD_SIZE}.")
            continue

        if not game.make_move(row - 1, col - 1):
            print(f"Tile ({row},{col}) is already taken. Try again.")
            continue
        return row - 1, col - 1


def choose_game_mode():
    while True:
        print("\nSelect game mode:")
        print("1. Player vs Player")
        print("2. Player vs Computer")
        print("3. Quit")
        choice = input("Enter your choice: ").strip()
        if choice in (PVP, PVC, QUIT):
            return choice
        print("Invalid choice. Please enter 1, 2, or 3.")


def choose_difficulty():
    while True:
        print("\nSelect Computer Difficulty:")
        print("R. Random")
        print("E. Easy   (MCTS - low simulations)")
        print("M. Medium (MCTS - more simulations)")
        print("H. Hard   (Minimax)")
        try:
            return Difficulty.from_choice(input("Enter your choice (R/E/M/H): "))
        except ValueError:
            print("Invalid choice. Please enter R, E, M, or H.")


def play_game(game, mode, selector=None):
    """Run one game to completion on `game`."""
    names = side_names(mode)
    while not game.is_game_over():
        print()
        print_board(game.board)
        print_past_moves(game, mode)
        print(f"Current Turn: {names[game.current_player]}")

        if mode == PVC and game.current_player == selector.player:
            if selector.difficulty is Difficulty.RANDOM or selector.difficulty is Difficulty.HARD:
                print("Computer is thinking...")
            else:
                sims = selector.iterations_for(selector.difficulty)
                print(f"Computer is thinking (MCTS search, {sims} sims)...")
            try:
                selector.play_turn(game)
            except NoLegalMoveError as e:
                print(f"Error: {e}")
                break
        else:
            read_human_move(game)

    print("\n===================================")
    print("GAME OVER!")
    print_board(game.board)
    print_past_moves(game, mode)
    print_winner(game, mode)
    print("===================================\n")


def run(seed=None, medium_iterations=None):
    rng = random.Random(seed)
    print(BANNER)

    while True:
        mode = choose_game_mode()
        if mode == QUIT:
            print("Exiting the game. Thanks for playing! :D")
            return

        print("Mode chosen:", "Player vs Player" if mode == PVP else "Player vs Computer (AI)")

        selector = None
        if mode == PVC:
            iterations = {'MEDIUM': medium_iterations} if medium_iterations else None
            selector = MoveSelector(choose_difficulty(), player=PLAYER_O, rng=rng,
                                    iterations=iterations)
            print(f"AI chosen: {selector.difficulty.label}.")

        game = TicTacToe()
        while True:
            game.reset_game()
            play_game(game, mode, selector)
            again = input("Do you want to play again in the current mode? (Y/N): ")
            if again.strip().upper() != "Y":
                break


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Tic-Tac-Toe against a friend or the computer.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's random choices")
    parser.add_argument("--medium-iterations", type=int, default=None,
                        help="MCTS simulations per move on Medium")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Logging level, e.g. DEBUG")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    try:
        run(seed=args.seed, medium_iterations=args.medium_iterations)
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted")


if __name__ == "__main__":
    main()
