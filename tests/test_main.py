import random

import pytest

import main
from config import PLAYER_X, PLAYER_O
from game import TicTacToe
from move_selector import Difficulty, MoveSelector


def feed(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_quit_from_menu(monkeypatch, capsys):
    feed(monkeypatch, ["3"])
    main.main(["--seed", "1"])
    assert "Thanks for playing" in capsys.readouterr().out


def test_player_vs_player_game(monkeypatch, capsys):
    feed(monkeypatch, [
        "5", "1",             # bad menu choice, then PvP
        "1 1", "a b", "2 1",  # X, bad input, O
        "1 1", "4 4", "1 2",  # taken, out of range, X
        "2 2", "1 3",         # O, X completes the top row
        "n", "3",
    ])
    main.main([])
    out = capsys.readouterr().out

    assert "Invalid choice. Please enter 1, 2, or 3." in out
    assert "Invalid input type" in out
    assert "Tile (1,1) is already taken" in out
    assert "Invalid range" in out
    assert "Player 1 (X) wins!" in out
    assert "Player 1 (X): (1,1) (1,2) (1,3)" in out
    assert "Player 2 (O): (2,1) (2,2)" in out


def test_difficulty_menu_reprompts(monkeypatch):
    feed(monkeypatch, ["z", "m"])
    assert main.choose_difficulty() is Difficulty.MEDIUM


@pytest.mark.parametrize("difficulty", [Difficulty.RANDOM, Difficulty.HARD])
def test_player_vs_computer_game(monkeypatch, capsys, difficulty):
    game = TicTacToe()
    selector = MoveSelector(difficulty, player=PLAYER_O, rng=random.Random(5))

    def first_free_cell(prompt=""):
        row, col = game.get_available_moves()[0]
        return f"{row + 1} {col + 1}"

    monkeypatch.setattr("builtins.input", first_free_cell)
    main.play_game(game, main.PVC, selector)

    assert game.is_game_over()
    assert len(game.moves_for(PLAYER_O)) >= 2
    out = capsys.readouterr().out
    assert "GAME OVER!" in out
    assert "Computer is thinking..." in out
    if difficulty is Difficulty.HARD:
        assert game.winner != PLAYER_X


def test_no_move_error_is_reported(monkeypatch, capsys):
    game = TicTacToe()
    game.board = [["X", "O", "X"], ["X", "O", "O"], ["O", "X", None]]
    game.current_player = PLAYER_O
    selector = MoveSelector(Difficulty.RANDOM, player=PLAYER_O, rng=random.Random(0))
    selector.choose_move = lambda board, difficulty=None: (-1, -1)

    main.play_game(game, main.PVC, selector)
    assert "Error: No valid move found for the computer." in capsys.readouterr().out


def test_print_board(capsys):
    main.print_board([["X", None, None], [None, "O", None], [None, None, None]])
    out = capsys.readouterr().out
    assert "1 | X |   |   |" in out
    assert "2 |   | O |   |" in out


@pytest.mark.parametrize("bad_input", ["--1 1", "² 1", "1 2 3", "1", ""])
def test_read_human_move_reprompts_on_bad_numbers(monkeypatch, capsys, bad_input):
    game = TicTacToe()
    feed(monkeypatch, [bad_input, "2 3"])

    assert main.read_human_move(game) == (1, 2)
    assert game.moves_for(PLAYER_X) == ((1, 2),)
    assert "Invalid input type" in capsys.readouterr().out


def test_unknown_log_level_is_rejected():
    with pytest.raises(SystemExit):
        main.main(["--log-level", "DEBG"])
