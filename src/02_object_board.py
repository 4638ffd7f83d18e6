"""
Teaching module 02: The object-oriented board.

Why it matters:
- Bundling the board with the functions that read it removes the repeated
  ``board`` argument; the instance owns its own copy.

Run:
  python -m src.02_object_board --demo
"""
import argparse
from boardstyles.oop import TicTacToe


def demo() -> None:
    game = TicTacToe()
    print(repr(game), "turns:", game.turn_count(), "current:", game.current_player())
    game.display_board()
    print()
    game = TicTacToe.from_string("XOX......")
    print(repr(game), "turns:", game.turn_count(), "current:", game.current_player())
    game.display_board()


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Module 02: Object-oriented board")
    ap.add_argument('--demo', action='store_true')
    args = ap.parse_args()
    if args.demo:
        demo()
