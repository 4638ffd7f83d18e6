"""
Teaching module 03: Both styles on the same boards.

Why it matters:
- Same contract, same answers; only the organization of the code differs.

Run:
  python -m src.03_side_by_side --demo
"""
import argparse
from boardstyles.board_basics import random_board
from boardstyles.compare import STYLES, compare_styles


def demo(seed: int = 7) -> None:
    for turns in (0, 3, 6, 9):
        board = random_board(turns, seed=seed)
        res = compare_styles(board)
        print(f"Board {res['procedural']['board']} agree={res['agree']}")
        for s in STYLES:
            print(f"  {s}: turns={res[s]['turn_count']} current={res[s]['current_player']}")
        print(res['oop']['rendered'])
        print()


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Module 03: Side by side")
    ap.add_argument('--demo', action='store_true')
    ap.add_argument('--seed', type=int, default=7)
    args = ap.parse_args()
    if args.demo:
        demo(args.seed)
