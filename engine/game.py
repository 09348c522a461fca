"""
The TicTacToe game facade.

One object per session: it builds its own game state store, score
store and move orchestrator and exposes them the way a front end
needs them.
"""

from typing import List, Optional, Tuple

from .board import Board, GameStatus, Outcome, Player
from .consistency import ConsistencyReport, check_consistency
from .game_state import GameState, GameStateStore
from .move_orchestrator import MoveOrchestrator
from .scores import ScoreStore, ScoreTally


class Game:
    """
    A TicTacToe session.

    Game flow:
    1. attempt_move(index) for each click on a cell
    2. Read board / status / winner / winning_cells to draw the screen
    3. reset_game() for a new game, scores carry over
    4. reset_scores() to clear the score board
    """

    def __init__(self):
        self.game_state = GameStateStore()
        self.score_store = ScoreStore()
        self.moves = MoveOrchestrator(self.game_state, self.score_store)

    # ==================== GAME STATE ====================

    @property
    def state(self) -> GameState:
        return self.game_state.state

    @property
    def board(self) -> Board:
        return self.game_state.board

    @property
    def current_player(self) -> Player:
        return self.game_state.current_player

    @property
    def status(self) -> GameStatus:
        return self.game_state.status

    @property
    def winner(self) -> Optional[Outcome]:
        return self.game_state.winner

    @property
    def winning_cells(self) -> Tuple[int, ...]:
        return self.game_state.winning_cells

    @property
    def game_id(self) -> int:
        return self.game_state.game_id

    @property
    def scores(self) -> ScoreTally:
        return self.score_store.scores

    def is_playing(self) -> bool:
        return self.game_state.is_playing()

    def is_ended(self) -> bool:
        return self.game_state.is_ended()

    # ==================== ACTIONS ====================

    def attempt_move(self, index) -> bool:
        """Place the current player's mark at `index`. False if rejected."""
        return self.moves.attempt_move(index)

    def pass_turn(self) -> bool:
        return self.moves.pass_turn()

    def reset_game(self):
        """Start a new game. Scores are kept."""
        self.game_state.reset()

    def reset_scores(self):
        self.score_store.reset()

    def set_current_player(self, player: Player):
        """Set whose turn it is directly, without any checks."""
        self.game_state.set_current_player(player)

    # ==================== QUERIES ====================

    def can_make_move(self, index) -> bool:
        return self.moves.can_make_move(index)

    def available_moves(self) -> List[int]:
        return self.moves.available_moves()

    def move_count(self) -> int:
        return self.moves.move_count()

    def is_board_full(self) -> bool:
        return self.moves.is_board_full()

    def is_first_move(self) -> bool:
        return self.moves.is_first_move()

    def total_games(self) -> int:
        return self.score_store.total_games()

    def win_rate(self, player) -> float:
        return self.score_store.win_rate(player)

    def leader(self) -> Optional[Outcome]:
        return self.score_store.leader()

    def check_consistency(self) -> ConsistencyReport:
        return check_consistency(self.state, self.scores)
