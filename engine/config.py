"""
Engine configuration for the TicTacToe game.
All the settings for the board, turn order, timer and logging.
"""


class EngineConfig:
    """
    Configuration class for engine settings.
    Change these values based on your setup!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Cells are stored in one flat row-major sequence
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== TURN SETTINGS ====================
    # X always opens a fresh game
    STARTING_PLAYER = "X"

    # Seconds a player gets before the turn passes to the opponent
    TURN_DURATION_SECONDS = 5

    # ==================== DEBUG SETTINGS ====================
    LOG_LEVEL = "INFO"
    DEBUG_MODE = False
