"""
TicTacToe Engine
================
Game state and move resolution for a two-player TicTacToe game.
Tracks the board, turn order, win/draw detection and session scores.

X always opens. A finished game stays finished until reset_game().
"""

from .board import (
    Board,
    GameStatus,
    Outcome,
    Player,
    apply_move,
    create_empty_board,
    format_board,
    make_board,
    next_player,
)
from .config import EngineConfig
from .consistency import ConsistencyReport, check_consistency
from .errors import EngineError, InvalidBoardError, UnknownOutcomeError
from .game import Game
from .game_state import GameState, GameStateStore
from .move_orchestrator import MoveOrchestrator
from .move_validator import ValidationResult, is_valid_move, validate_move
from .scores import ScoreStore, ScoreTally
from .turn_timer import TurnTimer, calculate_percentage, format_time
from .win_checker import WINNING_LINES, GameResult, check_winner

__version__ = "1.0.0"
