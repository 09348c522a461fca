"""
Turn timer for the TicTacToe engine.

The timer does not run on its own: the caller ticks it once per second
(a Tkinter `after` loop, for example). When a turn runs out the timeout
callback fires and the countdown starts over.
"""

from typing import Callable, Optional

from loguru import logger

from .config import EngineConfig


def format_time(seconds: float) -> str:
    """Format whole seconds for display, e.g. '5s'."""
    return f"{int(seconds)}s"


def calculate_percentage(current: float, total: float) -> float:
    """Get current/total as a percentage clamped to 0-100 (0 if total is 0)."""
    if total == 0:
        return 0.0
    return max(0.0, min(100.0, current / total * 100))


class TurnTimer:
    """Per-turn countdown."""

    def __init__(
        self,
        duration: int = EngineConfig.TURN_DURATION_SECONDS,
        on_timeout: Optional[Callable[[], object]] = None
    ):
        """
        Initialize the timer. It starts active with the full duration.

        Args:
            duration: Seconds per turn.
            on_timeout: Called every time a turn runs out.
        """
        if duration <= 0:
            raise ValueError(f"Timer duration must be positive, got {duration}")

        self.duration = duration
        self.on_timeout = on_timeout
        self.time_left = duration
        self.is_active = True

    @property
    def percentage(self) -> float:
        """Time left as a percentage of the full turn."""
        return calculate_percentage(self.time_left, self.duration)

    def tick(self) -> bool:
        """
        Let one second pass.

        Returns:
            True if the turn ran out on this tick.
        """
        if not self.is_active or self.time_left <= 0:
            return False

        if self.time_left <= 1:
            logger.debug("Turn timed out after {}", format_time(self.duration))
            if self.on_timeout is not None:
                self.on_timeout()
            self.time_left = self.duration
            return True

        self.time_left -= 1
        return False

    def reset(self):
        """Restart the countdown from the full duration."""
        self.time_left = self.duration
        self.is_active = True

    def pause(self):
        """Stop counting until the next reset."""
        self.is_active = False
