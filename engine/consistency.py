"""
Consistency check for the TicTacToe engine.
Verifies that status, winner, winning cells and scores agree.
"""

from dataclasses import dataclass, field
from typing import List

from .board import GameStatus, Outcome
from .config import EngineConfig
from .game_state import GameState
from .scores import ScoreTally
from .win_checker import check_winner


@dataclass
class ConsistencyReport:
    """Result of a consistency check."""
    is_valid: bool
    issues: List[str] = field(default_factory=list)


def check_consistency(state: GameState, scores: ScoreTally) -> ConsistencyReport:
    """
    Check a game state and score tally for contradictions.

    Args:
        state: Game state snapshot.
        scores: Score tally snapshot.

    Returns:
        ConsistencyReport listing every problem found.
    """
    issues = []

    if len(state.board) != EngineConfig.CELL_COUNT:
        issues.append(f"Board has {len(state.board)} cells instead of {EngineConfig.CELL_COUNT}")

    # Winner must match the status
    winner = Outcome.coerce(state.winner)
    if state.status == GameStatus.WIN and (winner is None or winner.player is None):
        issues.append('Game status is "win" but no winning player is set')

    if state.status == GameStatus.DRAW and state.winner != Outcome.DRAW:
        issues.append('Game status is "draw" but winner is not set to "draw"')

    if state.status == GameStatus.PLAYING and state.winner is not None:
        issues.append("Game is playing but winner is already set")

    # Winning cells must be the line the board actually shows
    if state.status == GameStatus.WIN and len(state.board) == EngineConfig.CELL_COUNT:
        result = check_winner(state.board)
        if result is None or result.cells != tuple(state.winning_cells):
            issues.append(f"Winning cells {list(state.winning_cells)} do not match the board")

    if scores.wins_x < 0 or scores.wins_o < 0 or scores.draws < 0:
        issues.append("Individual scores cannot be negative")

    return ConsistencyReport(is_valid=not issues, issues=issues)
