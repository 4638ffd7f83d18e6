"""
Procedural style: free functions that receive the board on every call.
Teaching notes:
- There is no hidden state; whoever holds the list owns it.
- Every function repeats the ``board`` parameter. That repetition is what the
  object-oriented version removes.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, TextIO

from .board_basics import ROW_SEPARATOR, ROW_WIDTH, O, X


def turn_count(board: Sequence[str]) -> int:
    return sum(1 for cell in board if cell in (X, O))


def current_player(board: Sequence[str]) -> str:
    return X if turn_count(board) % 2 == 0 else O


def render_board(board: Sequence[str]) -> str:
    rows: List[str] = []
    for start in range(0, len(board), ROW_WIDTH):
        cells = board[start:start + ROW_WIDTH]
        rows.append("|".join(f" {cell} " for cell in cells))
    return f"\n{ROW_SEPARATOR}\n".join(rows)


def display_board(board: Sequence[str], file: Optional[TextIO] = None) -> None:
    print(render_board(board), file=file)
