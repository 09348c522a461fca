"""
Move handling for the TicTacToe engine.
Ties the rules to the game state and score stores.
"""

from typing import List

from loguru import logger

from .board import GameStatus, apply_move, next_player
from .game_state import GameStateStore
from .move_validator import is_valid_move, validate_move
from .scores import ScoreStore
from .win_checker import check_winner


class MoveOrchestrator:
    """
    Runs moves against a game.

    Move flow:
    1. Validate the requested cell
    2. Place the current player's mark on a new board
    3. Check the new board for a win or draw
    4. End the game and count the result, or pass the turn

    Holds no state of its own; everything lives in the two stores.
    """

    def __init__(self, game_state: GameStateStore, scores: ScoreStore):
        """
        Initialize the orchestrator.

        Args:
            game_state: Store of the current game.
            scores: Store of the session scores.
        """
        self.game_state = game_state
        self.scores = scores

    def can_make_move(self, index) -> bool:
        """Check if the current player may place a mark at `index`."""
        return is_valid_move(self.game_state.board, index, self.game_state.status)

    def attempt_move(self, index) -> bool:
        """
        Make a move for the current player.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the mark was placed (even if it ended the game),
            False if the move was rejected and nothing changed.
        """
        validation = validate_move(self.game_state.board, index, self.game_state.status)
        if not validation.is_valid:
            logger.debug("Move {!r} rejected: {}", index, validation.error_message)
            return False

        player = self.game_state.current_player
        new_board = apply_move(self.game_state.board, index, player)
        self.game_state.update_board(new_board)
        logger.debug("{} placed at {}", getattr(player, "value", player), index)

        self._process_result(new_board)
        return True

    def _process_result(self, board):
        """End the game if the board is decided, otherwise switch turns."""
        result = check_winner(board)

        if result is None:
            # Game continues, switch to next player
            self.game_state.update_current_player(next_player(self.game_state.current_player))
            return

        if result.is_draw:
            self.game_state.update_status(GameStatus.DRAW)
            logger.info("Game {} ended in a draw", self.game_state.game_id)
        else:
            self.game_state.update_status(GameStatus.WIN)
            logger.info("Game {} won by {} on {}", self.game_state.game_id,
                        result.winner.value, list(result.cells))

        self.game_state.set_winner(result.winner, result.cells)
        self.scores.record_outcome(result.winner)

    def pass_turn(self) -> bool:
        """
        Hand the turn to the other player without placing a mark.

        Used when a player runs out of time.

        Returns:
            True if the turn passed, False if the game is not playing.
        """
        if not self.game_state.is_playing():
            return False

        player = next_player(self.game_state.current_player)
        self.game_state.update_current_player(player)
        logger.debug("Turn passed to {}", player.value)
        return True

    def available_moves(self) -> List[int]:
        """Indices of the empty cells, in ascending order."""
        return [i for i, cell in enumerate(self.game_state.board) if cell is None]

    def is_board_full(self) -> bool:
        return all(cell is not None for cell in self.game_state.board)

    def move_count(self) -> int:
        """Number of marks on the board."""
        return sum(1 for cell in self.game_state.board if cell is not None)

    def is_first_move(self) -> bool:
        return self.move_count() == 0
