"""boardstyles package.

One tiny tic-tac-toe board written twice: as procedural free functions and as
an object-oriented class, plus helpers to compare the two side by side.

Convenience imports are exposed for common workflows.
"""

from .board_basics import EMPTY, O, X, InvalidBoardError, deserialize_board, new_board, serialize_board
from .compare import compare_styles, describe
from .oop import TicTacToe
from .procedural import current_player, display_board, render_board, turn_count

__all__ = [
    "X",
    "O",
    "EMPTY",
    "InvalidBoardError",
    "new_board",
    "serialize_board",
    "deserialize_board",
    "turn_count",
    "current_player",
    "render_board",
    "display_board",
    "TicTacToe",
    "describe",
    "compare_styles",
]
