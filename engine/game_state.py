"""
Game state management for the TicTacToe engine.
Tracks the board, current player, status, winner and game id.
"""

import time
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from loguru import logger

from .board import Board, GameStatus, Outcome, Player, create_empty_board
from .config import EngineConfig


def _new_game_id(previous: int = 0) -> int:
    """Get a game id that is strictly greater than `previous`."""
    return max(time.monotonic_ns(), previous + 1)


@dataclass(frozen=True)
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board (None means empty)
    - Current player
    - Game status (playing, win, draw)
    - Winner and the cells of the winning line
    - Game id, which only changes when a new game starts

    Instances are read-only snapshots. The store swaps in a new one on
    every update, so all fields always belong to the same game.
    """

    board: Board = field(default_factory=create_empty_board)
    current_player: Player = Player(EngineConfig.STARTING_PLAYER)
    status: GameStatus = GameStatus.PLAYING
    winner: Optional[Outcome] = None
    winning_cells: Tuple[int, ...] = ()
    game_id: int = field(default_factory=_new_game_id)


class GameStateStore:
    """
    Owns the state of the current game and exposes its mutators.

    No validation happens here, callers decide what is legal.
    """

    def __init__(self):
        self._state = GameState()

    @property
    def state(self) -> GameState:
        """The current state snapshot."""
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def winner(self) -> Optional[Outcome]:
        return self._state.winner

    @property
    def winning_cells(self) -> Tuple[int, ...]:
        return self._state.winning_cells

    @property
    def game_id(self) -> int:
        return self._state.game_id

    def update_board(self, board: Board):
        """Replace the whole board."""
        self._state = replace(self._state, board=tuple(board))

    def update_current_player(self, player: Player):
        """Set whose turn it is."""
        self._state = replace(self._state, current_player=player)

    def set_current_player(self, player):
        """Set whose turn it is. Kept for callers that drive turns by hand; no checks."""
        self.update_current_player(player)

    def update_status(self, status: GameStatus):
        """Set the game status."""
        logger.debug("Game {} status -> {}", self._state.game_id, getattr(status, "value", status))
        self._state = replace(self._state, status=status)

    def set_winner(self, winner: Optional[Outcome], cells: Tuple[int, ...] = ()):
        """
        Set the winner and the winning cells together.

        Args:
            winner: Outcome.X, Outcome.O or Outcome.DRAW.
            cells: Winning line indices, empty for a draw.
        """
        self._state = replace(self._state, winner=winner, winning_cells=tuple(cells))

    def reset(self):
        """
        Start a fresh game.

        Board, player, status, winner, winning cells and game id are
        replaced in one assignment.
        """
        logger.info("Resetting game state...")
        self._state = GameState(game_id=_new_game_id(self._state.game_id))
        logger.info("Game state reset completed (game {})", self._state.game_id)

    def is_playing(self) -> bool:
        """Check if the game is still in progress."""
        return self._state.status == GameStatus.PLAYING

    def is_ended(self) -> bool:
        """Check if the game has ended with a win or a draw."""
        return self._state.status in (GameStatus.WIN, GameStatus.DRAW)
