"""
Board model for the TicTacToe engine.
Marks, game phases, outcomes, and the pure board helpers.
"""

from enum import Enum
from typing import Iterable, Optional, Tuple

from .config import EngineConfig
from .errors import InvalidBoardError


class Player(str, Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameStatus(str, Enum):
    """Coarse phase of a single game."""
    PLAYING = "playing"
    WIN = "win"
    DRAW = "draw"


class Outcome(str, Enum):
    """Result of one finished game, as counted on the score board."""
    X = "X"
    O = "O"
    DRAW = "draw"

    @classmethod
    def coerce(cls, value) -> Optional["Outcome"]:
        """
        Turn a Player, Outcome or tag string into an Outcome.

        Returns:
            The matching Outcome, or None if the value is not one.
        """
        raw = value.value if isinstance(value, Enum) else value
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @property
    def player(self) -> Optional[Player]:
        """The winning player, or None for a draw."""
        return None if self == Outcome.DRAW else Player(self.value)


# A board is a tuple of 9 cells: None means empty, otherwise the Player
Board = Tuple[Optional[Player], ...]


def create_empty_board() -> Board:
    """Create a fresh board with every cell empty."""
    return (None,) * EngineConfig.CELL_COUNT


def make_board(cells: Iterable) -> Board:
    """
    Build a board from any sequence of 9 cells.

    Args:
        cells: Cells in row-major order. None is empty, "X"/"O" are marks.

    Returns:
        The board as an immutable tuple.

    Raises:
        InvalidBoardError: Wrong number of cells or an unknown cell value.
    """
    board = []
    for cell in cells:
        if cell is None:
            board.append(None)
            continue
        try:
            board.append(Player(cell))
        except ValueError:
            raise InvalidBoardError(f"Invalid cell value {cell!r}. Must be None, 'X' or 'O'.") from None

    if len(board) != EngineConfig.CELL_COUNT:
        raise InvalidBoardError(
            f"Board must have {EngineConfig.CELL_COUNT} cells, got {len(board)}"
        )

    return tuple(board)


def apply_move(board: Board, index: int, mark: Player) -> Board:
    """
    Place a mark and return the resulting board.

    The input board is never changed. No legality check is done here,
    call the move validator first.

    Args:
        board: Current board.
        index: Cell index (0-8).
        mark: The mark to place.

    Returns:
        A new board with cell `index` set to `mark`.
    """
    new_board = list(board)
    new_board[index] = mark
    return tuple(new_board)


def next_player(current) -> Player:
    """
    Get the player who moves after `current`.

    X hands over to O. Anything else, including values that are not
    a player at all, hands over to X.
    """
    return Player.X.opposite() if current == Player.X else Player.X


def format_board(board: Board) -> str:
    """Render the board as a text grid with cell numbers on empty squares."""
    size = EngineConfig.BOARD_SIZE
    lines = ["┌───" + "┬───" * (size - 1) + "┐"]

    for row in range(size):
        row_str = "│"
        for col in range(size):
            index = row * size + col
            cell = board[index]
            symbol = str(index) if cell is None else Player(cell).value
            row_str += f" {symbol} │"
        lines.append(row_str)

        if row < size - 1:
            lines.append("├───" + "┼───" * (size - 1) + "┤")

    lines.append("└───" + "┴───" * (size - 1) + "┘")
    return "\n".join(lines)
