import math

import pytest

from boardstyles.board_basics import InvalidBoardError, new_board
from boardstyles.compare import STYLES, compare_styles, describe, timing_summary


@pytest.mark.parametrize("style", STYLES)
def test_describe_fields(style):
    board = ["X", "O", "X", " ", " ", " ", " ", " ", " "]
    res = describe(board, style)
    assert res['style'] == style
    assert res['board'] == "XOX......"
    assert res['turn_count'] == 3
    assert res['current_player'] == "O"
    assert res['rendered'].startswith(" X | O | X \n")


def test_describe_unknown_style():
    with pytest.raises(ValueError):
        describe(new_board(), "functional")


def test_compare_styles_agree_on_empty():
    res = compare_styles(new_board())
    assert res['agree'] is True
    assert res['procedural']['rendered'] == res['oop']['rendered']


def test_timing_summary():
    m, h = timing_summary([1.0, 1.0, 1.0])
    assert m == 1.0 and h == 0.0
    m, h = timing_summary([2.0])
    assert m == 2.0 and h == 0.0
    m, h = timing_summary([])
    assert math.isnan(m) and math.isnan(h)


@pytest.mark.parametrize("bad", [[" "] * 8, ["Z"] + [" "] * 8])
def test_describe_rejects_malformed_board(bad):
    with pytest.raises(InvalidBoardError):
        describe(bad, "procedural")
