"""
Object-oriented style: one class that owns the board.
Teaching notes:
- The board is handed over once, at construction, and copied so the instance
  is its only owner.
- Methods read ``self.board`` instead of taking a parameter, so call sites
  shrink to ``game.turn_count()``.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, TextIO

from .board_basics import ROW_SEPARATOR, ROW_WIDTH, O, X, deserialize_board, new_board, serialize_board


class TicTacToe:
    """A tic-tac-toe board with the three queries bundled as methods."""

    def __init__(self, board: Optional[Sequence[str]] = None):
        self.board: List[str] = list(board) if board is not None else new_board()

    @classmethod
    def from_string(cls, text: str) -> "TicTacToe":
        """Build from the serialized form, e.g. ``"XOX......"``."""
        return cls(deserialize_board(text))

    def turn_count(self) -> int:
        return sum(1 for cell in self.board if cell in (X, O))

    def current_player(self) -> str:
        return X if self.turn_count() % 2 == 0 else O

    def render(self) -> str:
        rows = [
            "|".join(f" {cell} " for cell in self.board[start:start + ROW_WIDTH])
            for start in range(0, len(self.board), ROW_WIDTH)
        ]
        return f"\n{ROW_SEPARATOR}\n".join(rows)

    def display_board(self, file: Optional[TextIO] = None) -> None:
        print(self.render(), file=file)

    def __repr__(self) -> str:
        return f"TicTacToe({serialize_board(self.board)!r})"
