import pytest

from boardstyles.board_basics import (
    BOARD_SIZE,
    EMPTY,
    InvalidBoardError,
    check_board,
    deserialize_board,
    is_valid_board,
    new_board,
    random_board,
    serialize_board,
)


def test_new_board_is_fresh_list():
    a = new_board()
    b = new_board()
    assert a == [EMPTY] * BOARD_SIZE
    assert a is not b


def test_serialize_uses_dots_for_empty():
    board = ["X", "O", "X", " ", " ", " ", " ", " ", " "]
    assert serialize_board(board) == "XOX......"
    assert deserialize_board("XOX......") == board


@pytest.mark.parametrize("text", ["X  O     ", "x__o_____", "X--O-----"])
def test_deserialize_accepts_empty_aliases_and_lowercase(text):
    assert deserialize_board(text) == ["X", " ", " ", "O", " ", " ", " ", " ", " "]


@pytest.mark.parametrize("bad", ["", "XOX", "XOX.......", "XOX.....1", "abcdefghi"])
def test_deserialize_rejects_malformed(bad):
    with pytest.raises(InvalidBoardError):
        deserialize_board(bad)


def test_invalid_board_error_is_value_error():
    assert issubclass(InvalidBoardError, ValueError)


def test_is_valid_board():
    assert is_valid_board(new_board())
    assert not is_valid_board([" "] * 8)
    assert not is_valid_board(["Z"] + [" "] * 8)


def test_check_board_returns_board_or_raises():
    board = new_board()
    assert check_board(board) is board
    with pytest.raises(InvalidBoardError):
        check_board(["X"] * 10)


def test_random_board_counts_and_alternates():
    for turns in range(BOARD_SIZE + 1):
        board = random_board(turns, seed=turns)
        assert board.count("X") + board.count("O") == turns
        assert board.count("X") - board.count("O") in (0, 1)


def test_random_board_is_seeded():
    assert random_board(5, seed=123) == random_board(5, seed=123)


@pytest.mark.parametrize("turns", [-1, 10])
def test_random_board_rejects_out_of_range(turns):
    with pytest.raises(ValueError):
        random_board(turns)
