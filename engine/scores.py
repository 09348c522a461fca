"""
Score keeping for the TicTacToe engine.
Counts X wins, O wins and draws across games of one session.
"""

from dataclasses import dataclass, replace
from typing import Dict, Optional

from loguru import logger

from .board import Outcome
from .errors import UnknownOutcomeError


# Which ScoreTally field counts each outcome
_COUNTER_FIELDS = {
    Outcome.X: "wins_x",
    Outcome.O: "wins_o",
    Outcome.DRAW: "draws",
}


@dataclass(frozen=True)
class ScoreTally:
    """Accumulated results. Every counter starts at 0."""
    wins_x: int = 0
    wins_o: int = 0
    draws: int = 0

    def count(self, outcome: Outcome) -> int:
        """Get the counter for one outcome."""
        return getattr(self, _COUNTER_FIELDS[outcome])

    @property
    def total(self) -> int:
        return self.wins_x + self.wins_o + self.draws

    def as_dict(self) -> Dict[str, int]:
        """Scores keyed by outcome tag ('X', 'O', 'draw')."""
        return {outcome.value: self.count(outcome) for outcome in Outcome}


def _to_outcome(value) -> Outcome:
    outcome = Outcome.coerce(value)
    if outcome is None:
        raise UnknownOutcomeError(value)
    return outcome


class ScoreStore:
    """
    Owns the score tally of a session.

    The tally outlives game resets and is only cleared by reset().
    """

    def __init__(self):
        self._scores = ScoreTally()

    @property
    def scores(self) -> ScoreTally:
        """The current tally snapshot."""
        return self._scores

    def record_outcome(self, outcome):
        """
        Count one finished game.

        Args:
            outcome: Outcome, Player, or one of the tags 'X', 'O', 'draw'.

        Raises:
            UnknownOutcomeError: For anything else. The tally is not changed.
        """
        outcome = _to_outcome(outcome)
        name = _COUNTER_FIELDS[outcome]
        self._scores = replace(self._scores, **{name: getattr(self._scores, name) + 1})
        logger.info("Recorded {} -> {}", outcome.value, self._scores.as_dict())

    def reset(self):
        """Put every counter back to 0."""
        self._scores = ScoreTally()
        logger.info("Scores reset")

    def total_games(self) -> int:
        """Total number of finished games."""
        return self._scores.total

    def win_rate(self, player) -> float:
        """
        Get the share of games that ended with `player`'s outcome.

        Args:
            player: 'X', 'O' (or 'draw' for the draw rate).

        Returns:
            Percentage 0-100, or 0.0 when no games were played.
        """
        outcome = _to_outcome(player)
        total = self.total_games()
        if total == 0:
            return 0.0
        return self._scores.count(outcome) / total * 100

    def leader(self) -> Optional[Outcome]:
        """The outcome with strictly more games than both others, if any."""
        for outcome in Outcome:
            count = self._scores.count(outcome)
            others = [self._scores.count(o) for o in Outcome if o != outcome]
            if all(count > other for other in others):
                return outcome
        return None
