"""
Tests for the pure game rules: board helpers, win checker,
move validator and turn order.
"""

import copy
import sys

import pytest
from hypothesis import assume, given, strategies as st

from engine import (
    WINNING_LINES,
    GameResult,
    GameStatus,
    InvalidBoardError,
    Outcome,
    Player,
    apply_move,
    check_winner,
    create_empty_board,
    format_board,
    is_valid_move,
    make_board,
    next_player,
    validate_move,
)


cells = st.sampled_from([None, Player.X, Player.O])
boards = st.lists(cells, min_size=9, max_size=9).map(tuple)


def complete_lines(board):
    return [line for line in WINNING_LINES
            if board[line[0]] is not None and board[line[0]] == board[line[1]] == board[line[2]]]


# ==================== BOARD ====================

def test_empty_board_has_nine_empty_cells():
    board = create_empty_board()
    assert board == (None,) * 9


def test_make_board_accepts_tags_and_players():
    board = make_board(["X", Player.O, None, None, None, None, None, None, None])
    assert board[0] is Player.X
    assert board[1] is Player.O
    assert isinstance(board, tuple)


@pytest.mark.parametrize("cells", [[None] * 8, [None] * 10, []])
def test_make_board_rejects_wrong_length(cells):
    with pytest.raises(InvalidBoardError):
        make_board(cells)


def test_make_board_rejects_unknown_marks():
    with pytest.raises(InvalidBoardError):
        make_board(["Z"] + [None] * 8)


def test_winning_lines_are_rows_then_columns_then_diagonals():
    assert len(WINNING_LINES) == 8
    assert WINNING_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert WINNING_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert WINNING_LINES[6:] == ((0, 4, 8), (2, 4, 6))


def test_format_board_shows_marks_and_free_cell_numbers():
    text = format_board(make_board(["X", None, None, None, "O", None, None, None, None]))
    assert " X │ 1 │ 2 " in text
    assert " 3 │ O │ 5 " in text
    assert len(text.splitlines()) == 7


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", [Player.X, Player.O])
def test_check_winner_finds_every_line(line, player):
    board = [None] * 9
    for index in line:
        board[index] = player

    result = check_winner(tuple(board))

    assert result == GameResult(winner=Outcome(player.value), cells=line)
    assert result.winner.player is player
    assert not result.is_draw


def test_check_winner_full_board_without_line_is_draw():
    board = make_board(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    result = check_winner(board)
    assert result == GameResult(winner=Outcome.DRAW, cells=())
    assert result.is_draw
    assert result.winner.player is None


def test_check_winner_open_board_without_line_is_none():
    board = make_board(["X", "O", None, None, "X", None, None, None, "O"])
    assert check_winner(board) is None
    assert check_winner(create_empty_board()) is None


def test_check_winner_on_plain_strings():
    board = ("O", "X", None, "X", "O", None, None, None, "O")
    assert check_winner(board) == GameResult(winner=Outcome.O, cells=(0, 4, 8))


def test_check_winner_prefers_first_line_in_scan_order():
    # Row 0 and column 0 are both complete, the row is scanned first
    board = make_board(["X", "X", "X", "X", "O", "O", "X", "O", "O"])
    assert check_winner(board).cells == (0, 1, 2)


@given(boards)
def test_check_winner_single_line_reports_that_line(board):
    lines = complete_lines(board)
    assume(len(lines) == 1)

    result = check_winner(board)

    assert result.cells == lines[0]
    assert result.winner == Outcome(board[lines[0][0]].value)


@given(boards)
def test_check_winner_without_lines(board):
    assume(not complete_lines(board))

    result = check_winner(board)

    if None in board:
        assert result is None
    else:
        assert result == GameResult(winner=Outcome.DRAW)


@given(boards)
def test_check_winner_uses_first_complete_line(board):
    lines = complete_lines(board)
    assume(lines)
    assert check_winner(board).cells == lines[0]


# ==================== MOVE VALIDATOR ====================

def test_valid_move_on_empty_cell():
    assert is_valid_move(create_empty_board(), 4, GameStatus.PLAYING)


def test_invalid_move_on_occupied_cell():
    board = apply_move(create_empty_board(), 4, Player.X)
    result = validate_move(board, 4, GameStatus.PLAYING)
    assert not result.is_valid
    assert "occupied" in result.error_message


@pytest.mark.parametrize("index", [-1, 9, 100, 1.5, "4", None, True])
def test_invalid_move_outside_board_does_not_raise(index):
    result = validate_move(create_empty_board(), index, GameStatus.PLAYING)
    assert not result.is_valid
    assert "Invalid cell" in result.error_message


@given(boards, st.integers(min_value=0, max_value=8))
def test_validator_playing_depends_only_on_cell(board, index):
    assert is_valid_move(board, index, GameStatus.PLAYING) == (board[index] is None)
    assert is_valid_move(board, index, "playing") == (board[index] is None)


@given(boards, st.integers(min_value=0, max_value=8), st.sampled_from([GameStatus.WIN, GameStatus.DRAW, "win", "draw"]))
def test_validator_rejects_everything_after_game_end(board, index, status):
    result = validate_move(board, index, status)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"


# ==================== MOVE EXECUTOR ====================

@given(boards, st.integers(min_value=0, max_value=8), st.sampled_from([Player.X, Player.O]))
def test_apply_move_leaves_input_untouched(board, index, player):
    original = copy.deepcopy(board)

    new_board = apply_move(board, index, player)

    assert board == original
    assert new_board[index] is player
    assert all(new_board[i] == board[i] for i in range(9) if i != index)


def test_apply_move_copies_list_input():
    board = [None] * 9
    new_board = apply_move(board, 0, Player.O)
    assert board == [None] * 9
    assert new_board[0] is Player.O


def test_apply_move_may_overwrite():
    board = apply_move(create_empty_board(), 0, Player.X)
    assert apply_move(board, 0, Player.O)[0] is Player.O


# ==================== TURN ORDER ====================

def test_next_player_alternates():
    assert next_player(Player.X) is Player.O
    assert next_player(Player.O) is Player.X
    assert next_player("X") == "O"
    assert next_player("O") == "X"


@pytest.mark.parametrize("current", [None, "", "x", "Z", 0, 1, Outcome.DRAW, object()])
def test_next_player_falls_back_to_x(current):
    assert next_player(current) is Player.X


def test_player_opposite():
    assert Player.X.opposite() is Player.O
    assert Player.O.opposite() is Player.X
    assert next_player(Player.X) is Player.X.opposite()


def test_outcome_player():
    assert Outcome.X.player is Player.X
    assert Outcome.O.player is Player.O
    assert Outcome.DRAW.player is None


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
