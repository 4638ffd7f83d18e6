"""
Board basics: marks, the 9-cell board, serialization, optional validation.
Teaching notes:
- A board is a plain list of 9 one-character strings: "X", "O" or " " (empty).
- X always starts, so the side to move follows from how many marks are down.
- Neither style validates its input; validation lives here and is opt-in.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

X = "X"
O = "O"
EMPTY = " "
MARKS = (X, O)
CELLS = (X, O, EMPTY)

BOARD_SIZE = 9
ROW_WIDTH = 3
ROW_SEPARATOR = "-" * 11

# Characters accepted for an empty cell in the serialized form
EMPTY_ALIASES = ".-_ "


class InvalidBoardError(ValueError):
    """Raised when a board does not have 9 cells of X, O or empty."""


def new_board() -> List[str]:
    return [EMPTY] * BOARD_SIZE


def serialize_board(board: Sequence[str]) -> str:
    return ''.join('.' if cell == EMPTY else cell for cell in board)


def deserialize_board(text: str) -> List[str]:
    if len(text) != BOARD_SIZE:
        raise InvalidBoardError(f"Board must have {BOARD_SIZE} cells, got {len(text)}: {text!r}")
    board: List[str] = []
    for ch in text:
        if ch in EMPTY_ALIASES:
            board.append(EMPTY)
        elif ch.upper() in MARKS:
            board.append(ch.upper())
        else:
            raise InvalidBoardError(f"Unknown cell {ch!r} in {text!r}; use X, O or .")
    return board


def is_valid_board(board: Sequence[str]) -> bool:
    return len(board) == BOARD_SIZE and all(cell in CELLS for cell in board)


def check_board(board: Sequence[str]) -> Sequence[str]:
    """Return ``board`` unchanged, or raise InvalidBoardError if malformed."""
    if not is_valid_board(board):
        raise InvalidBoardError(f"Not a 9-cell X/O/empty board: {list(board)!r}")
    return board


def random_board(turns: int, seed: Optional[int] = None) -> List[str]:
    """Place ``turns`` alternating marks (X first) on random empty cells.

    Only the mark counts are meaningful; no attempt is made to stop at a win.
    """
    if not 0 <= turns <= BOARD_SIZE:
        raise ValueError(f"turns must be in [0, {BOARD_SIZE}], got {turns}")
    rng = np.random.default_rng(seed)
    board = new_board()
    cells = rng.permutation(BOARD_SIZE)[:turns]
    for i, idx in enumerate(cells):
        board[int(idx)] = MARKS[i % 2]
    return board
