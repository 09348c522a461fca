"""
Win checker for the TicTacToe engine.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Outcome


# All possible winning lines, as cell indices into the flat board
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class GameResult:
    """
    How a game ended.

    `winner` is Outcome.X or Outcome.O together with the three winning
    cells, or Outcome.DRAW with no cells.
    """
    winner: Outcome
    cells: Tuple[int, ...] = ()

    @property
    def is_draw(self) -> bool:
        return self.winner == Outcome.DRAW


def check_winner(board: Board) -> Optional[GameResult]:
    """
    Check the board for a finished game.

    Lines are scanned rows first, then columns, then diagonals, and the
    first complete line wins.

    Args:
        board: The board to check.

    Returns:
        GameResult for a win or a draw, or None if the game goes on.
    """
    for line in WINNING_LINES:
        mark = _check_line(board, line)
        if mark is not None:
            return GameResult(winner=Outcome.coerce(mark), cells=line)

    # No line, so a full board is a draw
    if all(cell is not None for cell in board):
        return GameResult(winner=Outcome.DRAW)

    return None


def _check_line(board: Board, line: Tuple[int, int, int]):
    """
    Check if a single line has a winner.

    Returns:
        The mark filling all 3 cells, or None.
    """
    a, b, c = line
    if board[a] is None:
        return None  # Empty cell, no winner on this line

    if board[a] == board[b] == board[c]:
        return board[a]

    return None


# Quick test
if __name__ == "__main__":
    print("Testing check_winner...")

    row_win = ("X", "X", "X", None, "O", None, "O", None, None)
    print(f"Row win: {check_winner(row_win)}")

    diagonal_win = ("O", "X", None, "X", "O", None, None, None, "O")
    print(f"Diagonal win: {check_winner(diagonal_win)}")

    draw = ("X", "O", "X", "X", "O", "O", "O", "X", "X")
    print(f"Draw: {check_winner(draw)}")

    ongoing = ("X", None, None, None, "O", None, None, None, None)
    print(f"Ongoing: {check_winner(ongoing)}")

    print("\ncheck_winner test done!")
