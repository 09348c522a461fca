"""
Exceptions raised by the game engine.

Rejected moves are not errors: they are reported by return values.
These are for inputs that can never be valid.
"""


class EngineError(Exception):
    """Base class for all engine errors."""


class UnknownOutcomeError(EngineError, ValueError):
    """Raised when a game result is not X, O or draw."""

    def __init__(self, outcome):
        self.outcome = outcome
        super().__init__(f"Unknown outcome {outcome!r}. Must be 'X', 'O' or 'draw'.")


class InvalidBoardError(EngineError, ValueError):
    """Raised when a board does not have 9 valid cells."""
