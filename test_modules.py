"""
Smoke tests for the TicTacToe modules.
Run this to verify all components work together before playing.
"""

import sys

import pytest


def test_engine_config():
    """Test engine configuration."""
    from engine import EngineConfig, Player

    assert EngineConfig.BOARD_SIZE == 3
    assert EngineConfig.CELL_COUNT == 9
    assert Player(EngineConfig.STARTING_PLAYER) is Player.X
    assert EngineConfig.TURN_DURATION_SECONDS > 0


def test_game_logic():
    """Test game logic components wired through the facade."""
    from engine import Game, GameStatus, Outcome, check_winner, is_valid_move

    game = Game()
    assert is_valid_move(game.board, 4, game.status)
    assert game.attempt_move(4)
    assert check_winner(game.board) is None

    for index in (0, 2, 6, 3, 5, 1, 7, 8):
        game.attempt_move(index)

    assert game.status in (GameStatus.WIN, GameStatus.DRAW)
    assert game.winner in (Outcome.X, Outcome.O, Outcome.DRAW)
    assert game.total_games() == 1


def test_console_game(capsys):
    """Test the console front end in main.py."""
    from main import ConsoleGame

    console = ConsoleGame()
    for command in ("0", "3", "1", "4", "2"):
        console.handle_command(command)

    out = capsys.readouterr().out
    assert "GAME OVER!" in out
    assert "Player X wins!" in out
    assert console.game.scores.wins_x == 1

    console.handle_command("4")
    assert "not allowed" in capsys.readouterr().out

    console.handle_command("n")
    assert console.game.move_count() == 0
    assert console.game.scores.wins_x == 1

    console.handle_command("s")
    assert console.game.total_games() == 0

    console.handle_command("hello")
    assert "Please enter a cell number" in capsys.readouterr().out

    console.handle_command("q")
    assert not console.is_running


def test_configure_logging():
    """Test that logging setup accepts both levels."""
    from loguru import logger
    from main import configure_logging

    logger.remove(configure_logging(verbose=True))
    logger.remove(configure_logging(verbose=False))


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
