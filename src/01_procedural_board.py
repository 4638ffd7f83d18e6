"""
Teaching module 01: The procedural board.

What you learn here:
- How a board can be a plain list of 9 cells shared by several functions.
- How whose-turn-it-is falls out of counting marks.

Why it matters:
- Passing the board into every function keeps data and behaviour apart; easy
  to follow, but every call site has to carry the board around.

Run:
  python -m src.01_procedural_board --demo
"""
import argparse
from boardstyles.board_basics import new_board, serialize_board
from boardstyles.procedural import current_player, display_board, turn_count


def demo() -> None:
    examples = [
        new_board(),
        ["X", "O", "X", " ", " ", " ", " ", " ", " "],
        ["X", "O", "X", "O", "X", " ", " ", " ", "O"],
    ]
    for b in examples:
        print(f"Board {serialize_board(b)} turns={turn_count(b)} current={current_player(b)}")
        display_board(b)
        print()


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Module 01: Procedural board")
    ap.add_argument('--demo', action='store_true', help='Print demo examples')
    args = ap.parse_args()
    if args.demo:
        demo()
